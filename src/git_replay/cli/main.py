"""Main CLI interface for Git Replay."""

from typing import Optional

import click
from rich.markup import escape

from git_replay.core.history import HistoryReader
from git_replay.core.output import err_console
from git_replay.core.replay import HistoryReplayer
from git_replay.models.options import ReplayOptions


@click.command(context_settings={"auto_envvar_prefix": "GIT_REPLAY"})
@click.version_option(package_name="git-replay")
@click.option(
    "-p", "--path", "repo_path", required=True, help="Path to the git repository"
)
@click.option("-t", "--time", "current_time", help="Custom timestamp (ISO format)")
@click.option(
    "-a", "--apply", "target_path", help="Apply commits to target repository"
)
@click.option("--author", help="New author name for applied commits")
@click.option("--email", help="New author email for applied commits")
@click.option("--committer", help="New committer name for applied commits")
@click.option("--committer-email", help="New committer email for applied commits")
@click.option(
    "--chronological/--retrieval-order",
    default=True,
    help=(
        "Replay oldest commit first (default, unlike the newest-first log "
        "order) or in log order with --retrieval-order"
    ),
)
def main(
    repo_path: str,
    current_time: Optional[str],
    target_path: Optional[str],
    author: Optional[str],
    email: Optional[str],
    committer: Optional[str],
    committer_email: Optional[str],
    chronological: bool,
):
    """Display git repository history with diffs, or replay it onto another repository."""
    reader = HistoryReader(repo_path, current_time)

    if target_path:
        # Each override only applies when both its name and email are given
        options = ReplayOptions(
            new_author=author,
            new_email=email,
            new_committer=committer,
            new_committer_email=committer_email,
            chronological=chronological,
        )

        try:
            HistoryReplayer(reader).apply_to(target_path, options)
        except Exception as e:
            err_console.print(f"[red]Failed to apply commits: {escape(str(e))}[/red]")
            raise click.Abort() from e
    else:
        try:
            reader.print_history()
        except Exception as e:
            err_console.print(
                f"[red]Failed to print git history: {escape(str(e))}[/red]"
            )
            raise click.Abort() from e


if __name__ == "__main__":
    main()
