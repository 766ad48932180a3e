"""Command-line interface for Git Replay."""
