"""Options controlling how history is replayed onto a target repository."""

from typing import Dict, Optional

from pydantic import BaseModel

from .commit import Commit


class ReplayOptions(BaseModel):
    """Identity overrides and ordering for a replay run.

    Each override only takes effect when both its name and its email are set.
    """

    new_author: Optional[str] = None
    new_email: Optional[str] = None
    new_committer: Optional[str] = None
    new_committer_email: Optional[str] = None
    chronological: bool = True

    @property
    def author_identity(self) -> Optional[str]:
        """Author override in ``Name <email>`` form, if complete."""
        if self.new_author and self.new_email:
            return f"{self.new_author} <{self.new_email}>"
        return None

    def committer_environment(self) -> Dict[str, str]:
        """Environment variables that override the committer identity."""
        if self.new_committer and self.new_committer_email:
            return {
                "GIT_COMMITTER_NAME": self.new_committer,
                "GIT_COMMITTER_EMAIL": self.new_committer_email,
            }
        return {}

    def author_label(self, commit: Commit) -> str:
        if self.author_identity:
            return f"new author: {self.new_author}"
        return f"original author: {commit.author}"

    def committer_label(self) -> str:
        if self.committer_environment():
            return f"new committer: {self.new_committer}"
        return "original committer"
