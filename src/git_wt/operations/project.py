"""Set up new worktree projects."""

import shutil
import tempfile
from pathlib import Path

from git_wt.errors import GitCommandError, PathExistsError, ProjectSetupError
from git_wt.logging_config import get_logger
from git_wt.operations.config import WtConfigManager
from git_wt.operations.executor import GitExecutor

logger = get_logger(__name__)


def init_project(
    name: str,
    parent: Path | None = None,
    executor: GitExecutor | None = None,
) -> Path:
    """Create PARENT/NAME/<default branch> as a fresh repository.

    An empty initial commit is made so that the default branch exists and
    worktrees can be added right away. Returns the main worktree path.
    """
    executor = executor or GitExecutor()
    branch = WtConfigManager(executor).default_branch_name()
    parent = _absolute(parent)

    main = parent / name / branch
    if main.exists():
        raise PathExistsError(main)
    created = main if main.parent.exists() else main.parent
    main.mkdir(parents=True)

    try:
        executor.init_repo(main, branch)
        executor.create_initial_commit(main)
    except GitCommandError:
        logger.debug("removing %s after failed initialization", created)
        shutil.rmtree(created)
        raise
    logger.info("initialized project %s with main worktree %s", main.parent, branch)
    return main


def clone_project(
    repo: str,
    parent: Path | None = None,
    name: str | None = None,
    executor: GitExecutor | None = None,
) -> Path:
    """Clone REPO into PARENT/<name>/<checked-out branch>.

    The clone goes to a temporary directory under PARENT first, to learn the
    repository's directory name and default branch, and is then moved into
    place. Returns the main worktree path.
    """
    executor = executor or GitExecutor()
    if parent is not None and not _absolute(parent).exists():
        raise ProjectSetupError(f"Path does not exist: {parent}")
    parent = _absolute(parent)

    with tempfile.TemporaryDirectory(dir=parent, prefix=".wt-clone-") as tmp:
        tmp_path = Path(tmp)
        executor.clone(repo, tmp_path)

        created = [child for child in tmp_path.iterdir() if child.is_dir()]
        if len(created) != 1:
            raise ProjectSetupError(
                f"Expected clone to create one directory, found {len(created)}"
            )
        clone_dir = created[0]

        clone_executor = GitExecutor(cwd=clone_dir)
        branch = clone_executor.current_branch()
        if not branch or not clone_executor.branch_exists(branch):
            raise ProjectSetupError(f"Repository has no branches: {repo}")

        project = parent / (name or clone_dir.name)
        main = project / branch
        if main.exists():
            raise PathExistsError(main)
        main.parent.mkdir(parents=True, exist_ok=True)
        shutil.move(str(clone_dir), str(main))

    logger.info("cloned %s into %s", repo, main)
    return main


def _absolute(path: Path | None) -> Path:
    cwd = Path.cwd()
    if path is None:
        return cwd
    return path if path.is_absolute() else cwd / path
