"""Core git operations for Git Replay."""
