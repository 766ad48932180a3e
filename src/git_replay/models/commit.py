"""Commit model for history read from a source repository."""

from pydantic import BaseModel


class Commit(BaseModel):
    """Represents a single commit read from a git repository."""

    hash: str
    author: str
    author_email: str = ""
    date: str  # ISO-8601 author date as reported by git
    message: str
    diff: str

    model_config = {"frozen": True}

    @property
    def summary(self) -> str:
        """First line of the commit message."""
        return self.message.split("\n", 1)[0]
