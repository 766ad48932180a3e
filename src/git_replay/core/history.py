"""Read commit history, with full diffs, from a git repository."""

from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

import git
from git import Repo
from rich.markup import escape

from git_replay.core.output import console, err_console, print_raw
from git_replay.models.commit import Commit

SEPARATOR = "-" * 40


def open_repository(path) -> Optional[Repo]:
    """Open the repository containing ``path``, or return None if there is none."""
    try:
        return Repo(path, search_parent_directories=True)
    except (git.InvalidGitRepositoryError, git.NoSuchPathError):
        return None


class HistoryReader:
    """Lists the commits of a repository and renders them as a report."""

    def __init__(self, repo_path, current_time: Optional[str] = None):
        self.repo_path = Path(repo_path)
        self.current_time = current_time or datetime.now(timezone.utc).isoformat()
        self._repo: Optional[Repo] = None

    @property
    def repo(self) -> Optional[Repo]:
        """Get the source repository, or None if the path is not one."""
        if self._repo is None:
            self._repo = open_repository(self.repo_path)
        return self._repo

    def list_commits(self) -> List[Commit]:
        """Return every commit, newest first, each with its full diff.

        Returns an empty list when the path is not a repository or when any
        part of the history cannot be read.
        """
        repo = self.repo
        if repo is None:
            console.print(f"Not a git repository: {escape(str(self.repo_path))}")
            return []

        try:
            commits = []
            for entry in repo.iter_commits():
                # One `git show` per commit; non-UTF-8 content gets replacement chars
                diff = repo.git.show(entry.hexsha, stdout_as_string=False).decode(
                    "utf-8", errors="replace"
                )
                commits.append(
                    Commit(
                        hash=entry.hexsha,
                        author=entry.author.name or "",
                        author_email=entry.author.email or "",
                        date=entry.authored_datetime.isoformat(),
                        message=entry.message.rstrip(),
                        diff=diff,
                    )
                )
            return commits
        except (git.GitError, ValueError) as e:
            err_console.print(f"[red]Error reading git history: {escape(str(e))}[/red]")
            return []

    def print_history(self) -> None:
        """Print every commit and its diff to standard output."""
        commits = self.list_commits()

        print_raw(f"Git History for {self.repo_path} as of {self.current_time}:\n")

        if not commits:
            print_raw("No commits found or not a git repository.")
            return

        for commit in commits:
            print_raw(SEPARATOR)
            print_raw(f"Commit: {commit.hash}")
            print_raw(f"Author: {commit.author}")
            print_raw(f"Date: {commit.date}")
            print_raw(f"Message: {commit.message}")
            print_raw("\nDiff:\n")
            print_raw(commit.diff)
            print_raw(f"{SEPARATOR}\n")
