# tests/integration/conftest.py
import subprocess
import pytest


def pytest_collection_modifyitems(items):
    """Add 'integration' marker to all tests in this directory."""
    for item in items:
        if "/integration/" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


def git(repo, *args):
    subprocess.run(["git", *args], cwd=repo, check=True, capture_output=True, text=True)


@pytest.fixture
def git_repo(tmp_path):
    """Repository with one commit, an unstaged edit, a staged file and an untracked file."""
    repo = tmp_path / "repo"
    repo.mkdir()
    git(repo, "init", "-q")
    git(repo, "config", "user.email", "dev@example.com")
    git(repo, "config", "user.name", "Dev")
    git(repo, "config", "commit.gpgsign", "false")

    (repo / "tracked.txt").write_text("one\ntwo\nthree\n")
    git(repo, "add", "tracked.txt")
    git(repo, "commit", "-q", "-m", "initial")

    (repo / "tracked.txt").write_text("one\nTWO\nthree\nfour\n")
    (repo / "staged.txt").write_text("staged\n")
    git(repo, "add", "staged.txt")
    (repo / "untracked.txt").write_text("a\nb\nc\n")
    return repo
