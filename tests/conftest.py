import logging
from pathlib import Path

import pytest
from click.testing import CliRunner

from helpers import commit_file, git


@pytest.fixture(autouse=True)
def isolated_git_config(tmp_path_factory, monkeypatch) -> Path:
    """Point git at a throwaway global config with a known identity and default branch."""
    config = tmp_path_factory.mktemp("gitconfig") / "config"
    config.write_text(
        "[user]\n"
        "\tname = Test User\n"
        "\temail = test@example.com\n"
        "[init]\n"
        "\tdefaultBranch = main\n"
    )
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(config))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    return config


@pytest.fixture
def temp_project(tmp_path: Path) -> Path:
    """Create a project root holding a `main` worktree with one commit."""
    root = tmp_path / "proj"
    main = root / "main"
    main.mkdir(parents=True)
    git("init", "--initial-branch", "main", cwd=main)
    git("config", "user.name", "Test User", cwd=main)
    git("config", "user.email", "test@example.com", cwd=main)

    (main / "README.md").write_text("# Test Repo")
    git("add", ".", cwd=main)
    git("commit", "-m", "Initial commit", cwd=main)

    return root


@pytest.fixture
def temp_project_with_worktrees(temp_project: Path) -> Path:
    """Project with linked worktrees `foo` and `bar` on branches of the same name."""
    main = temp_project / "main"
    for name in ["foo", "bar"]:
        git("worktree", "add", "-b", name, str(temp_project / name), cwd=main)
    return temp_project


@pytest.fixture
def source_repo(tmp_path: Path) -> Path:
    """A plain repository to clone from."""
    repo = tmp_path / "src_repo"
    repo.mkdir()
    git("init", "--initial-branch", "main", cwd=repo)
    commit_file(repo, "README.md", "# Source")
    return repo


@pytest.fixture
def runner():
    """Create a Click test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by the CLI so they don't outlive captured streams."""
    yield
    logger = logging.getLogger("git_wt")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
