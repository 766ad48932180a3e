"""Shared fixtures: real git repositories in temporary directories."""

import tempfile
from pathlib import Path

import pytest
from git import Repo


def _init_repo(repo_path: Path, name: str = "Test User", email: str = "test@example.com") -> Repo:
    """Initialize a git repository with a configured user."""
    repo = Repo.init(repo_path)
    with repo.config_writer() as config:
        config.set_value("user", "name", name)
        config.set_value("user", "email", email)
    return repo


def _commit_file(repo: Repo, name: str, content, message: str, date: str):
    """Write a file, stage it and commit it with a fixed author/commit date."""
    file_path = Path(repo.working_tree_dir) / name
    file_path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, bytes):
        file_path.write_bytes(content)
    else:
        file_path.write_text(content)
    repo.index.add([name])
    return repo.index.commit(message, author_date=date, commit_date=date)


@pytest.fixture
def make_repo():
    return _init_repo


@pytest.fixture
def commit_file():
    return _commit_file


@pytest.fixture
def temp_dir():
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def source_repo(temp_dir):
    """Create a source repository with three linear commits."""
    repo = _init_repo(
        temp_dir / "source", name="Original Author", email="original@example.com"
    )

    _commit_file(repo, "README.md", "# Project\n", "Initial commit", "2020-01-01T10:00:00+0000")
    _commit_file(
        repo,
        "src/app.py",
        "def main():\n    print('hello')\n",
        "Add app\n\nWith a longer body.",
        "2020-01-02T11:30:00+0000",
    )
    _commit_file(
        repo,
        "README.md",
        "# Project\n\nNow documented.\n",
        "Document project",
        "2020-01-03T12:45:00+0000",
    )

    yield repo


@pytest.fixture
def target_repo(temp_dir):
    """Create an empty target repository with a configured user."""
    yield _init_repo(temp_dir / "target", name="Target User", email="target@example.com")


@pytest.fixture
def not_a_repo(temp_dir):
    """A plain directory with no git repository."""
    plain = temp_dir / "plain"
    plain.mkdir()
    (plain / "notes.txt").write_text("not tracked\n")
    yield plain
