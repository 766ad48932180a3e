"""Data models for Git Replay."""

from .commit import Commit
from .options import ReplayOptions

__all__ = ["Commit", "ReplayOptions"]
