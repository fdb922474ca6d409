"""Custom exceptions for git-wt."""

from pathlib import Path


class WtError(Exception):
    """Base exception for all wt errors."""

    exit_code: int = 1


class NotAProjectError(WtError):
    """Raised when a directory is not part of a worktree project."""

    exit_code: int = 2

    def __init__(self, path: Path, reason: str = "no main worktree found"):
        self.path = path
        super().__init__(f"Not a worktree project: {path} ({reason})")


class GitCommandError(WtError):
    """Raised when a git invocation fails.

    The message is git's own stderr, passed through unchanged.
    """

    exit_code: int = 3

    def __init__(self, args: list[str], stderr: str):
        self.args_list = args
        self.stderr = stderr
        super().__init__(stderr or f"git {' '.join(args)} failed")


class CreationError(WtError):
    """Raised when a new worktree cannot be created."""

    pass


class InvalidWorktreeNameError(CreationError):
    """Raised when a worktree name is not a single directory name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"Invalid worktree name '{name}': must be a single directory name"
        )


class WorktreeAlreadyExistsError(CreationError):
    """Raised when the target worktree directory already exists."""

    def __init__(self, name: str, path: Path):
        self.name = name
        self.path = path
        super().__init__(f"Worktree '{name}' already exists at {path}")


class BranchAlreadyExistsError(CreationError):
    """Raised when a branch that should be created already exists."""

    def __init__(self, branch: str):
        self.branch = branch
        super().__init__(
            f"Branch '{branch}' already exists (use -b to check it out)"
        )


class BranchNotFoundError(CreationError):
    """Raised when an existing branch was requested but does not exist."""

    def __init__(self, branch: str):
        self.branch = branch
        super().__init__(f"Branch '{branch}' does not exist")


class BranchAlreadyCheckedOutError(CreationError):
    """Raised when a branch is already checked out in some worktree."""

    def __init__(self, branch: str, path: Path):
        self.branch = branch
        self.path = path
        super().__init__(f"Branch '{branch}' is already checked out at {path}")


class SymlinkSourceNotFoundError(CreationError):
    """Raised when a path to symlink does not exist in the main worktree."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Cannot symlink '{path}': no such file in main worktree")


class ProjectSetupError(WtError):
    """Raised when a project cannot be initialized or cloned."""

    pass


class PathExistsError(ProjectSetupError):
    """Raised when a project directory would overwrite an existing path."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Path already exists: {path}")
