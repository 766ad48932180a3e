"""Git Replay - show a repository's history and replay it onto another."""

__version__ = "0.1.0"
