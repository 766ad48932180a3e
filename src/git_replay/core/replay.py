"""Replay the history of one repository onto another with ``git am``."""

from email.utils import formataddr
from pathlib import Path
from typing import Optional

import git
from git import Repo
from rich.markup import escape

from git_replay.core.history import HistoryReader, open_repository
from git_replay.core.output import console, err_console
from git_replay.models.commit import Commit
from git_replay.models.options import ReplayOptions

FORMAT_PATCH_ARGS = ("--stdout", "-1", "--full-index", "--binary", "--date-order")

AM_ARGS = (
    "--committer-date-is-author-date",  # Keep the original commit date
    "--ignore-space-change",
    "--ignore-whitespace",
    "--3way",  # Fall back to a 3-way merge when context has drifted
)


class ReplayError(Exception):
    """Raised when a commit cannot be turned into an applicable patch."""


def rewrite_patch_author(patch: bytes, name: str, email: str) -> bytes:
    """Replace the ``From:`` header of a format-patch mail with a new identity.

    Folded continuation lines of the old header are dropped. Non-ASCII names
    are written as an RFC 2047 encoded word; git am strips double quotes
    from such a name when it parses the header, so `Zoë "Q" Doe` is
    recorded as `Zoë Q Doe`.
    """
    header, sep, body = patch.partition(b"\n\n")
    new_from = b"From: " + formataddr((name, email), charset="utf-8").encode("utf-8")

    lines = []
    in_from = False
    for line in header.split(b"\n"):
        if in_from and line[:1] in (b" ", b"\t"):
            continue
        in_from = line.startswith(b"From: ")
        lines.append(new_from if in_from else line)
    return b"\n".join(lines) + sep + body


class HistoryReplayer:
    """Applies every commit read by a HistoryReader to a target repository."""

    def __init__(self, reader: HistoryReader):
        self.reader = reader

    def apply_to(self, target_path, options: Optional[ReplayOptions] = None) -> None:
        """Replay the source history onto ``target_path``.

        Failures are reported per commit; a failed commit is aborted and
        the remaining commits are still attempted.
        """
        options = options or ReplayOptions()

        commits = self.reader.list_commits()
        if not commits:
            console.print("No commits to apply.")
            return

        target = open_repository(target_path)
        if target is None:
            console.print(f"Target is not a git repository: {escape(str(target_path))}")
            return

        console.print(f"Applying commits to {escape(str(target_path))}...\n")

        ordered = list(reversed(commits)) if options.chronological else commits
        for commit in ordered:
            self._apply_commit(target, commit, options)

    def _apply_commit(self, target: Repo, commit: Commit, options: ReplayOptions) -> None:
        patch_path = self.reader.repo_path.resolve() / f"temp_{commit.hash}.patch"
        try:
            patch_path.write_bytes(self._format_patch(commit, options))

            console.print(f"Applying commit: {escape(commit.summary)} ({commit.date})")
            with target.git.custom_environment(**options.committer_environment()):
                target.git.am(*AM_ARGS, str(patch_path))
        except (git.GitError, ReplayError, OSError) as e:
            err_console.print(
                f"[red]Failed to apply commit {commit.hash} from {commit.date}: "
                f"{escape(str(e))}[/red]"
            )
            self._abort(target)
            return
        finally:
            patch_path.unlink(missing_ok=True)

        console.print(
            f"[green]✓ Successfully applied with {escape(options.author_label(commit))}, "
            f"{escape(options.committer_label())} and original date: {commit.date}[/green]\n"
        )

    def _format_patch(self, commit: Commit, options: ReplayOptions) -> bytes:
        patch = self.reader.repo.git.format_patch(
            *FORMAT_PATCH_ARGS,
            commit.hash,
            stdout_as_string=False,
            strip_newline_in_stdout=False,
        )
        if not patch.strip():
            raise ReplayError(f"git format-patch produced no patch for {commit.hash}")

        if options.author_identity:
            patch = rewrite_patch_author(patch, options.new_author, options.new_email)
        return patch

    @staticmethod
    def _abort(target: Repo) -> None:
        """Abort an in-progress ``git am`` in the target, if any."""
        try:
            target.git.am("--abort")
        except git.GitCommandError as e:
            err_console.print(f"[dim]git am --abort: {escape(str(e).strip())}[/dim]")
