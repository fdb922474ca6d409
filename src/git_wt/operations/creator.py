"""Create new worktrees in a project."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from git_wt.errors import (
    BranchAlreadyCheckedOutError,
    BranchAlreadyExistsError,
    BranchNotFoundError,
    InvalidWorktreeNameError,
    SymlinkSourceNotFoundError,
    WorktreeAlreadyExistsError,
)
from git_wt.logging_config import get_logger
from git_wt.operations.executor import GitExecutor
from git_wt.operations.layout import Worktree

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class DeriveBranch:
    """Create a new branch named after the worktree."""


@dataclass(frozen=True, slots=True)
class ExistingBranch:
    """Check out a branch that already exists."""

    branch: str


@dataclass(frozen=True, slots=True)
class NewBranch:
    """Create a new branch with its own name."""

    branch: str


BranchMode = DeriveBranch | ExistingBranch | NewBranch


def resolve_branch(name: str, mode: BranchMode) -> tuple[str, bool]:
    """Determine the branch name and whether it needs creating."""
    if isinstance(mode, ExistingBranch):
        logger.debug("will check out existing branch %s", mode.branch)
        return mode.branch, False
    if isinstance(mode, NewBranch):
        logger.debug("will make new branch %s with user-specified name", mode.branch)
        return mode.branch, True
    logger.debug("will make new branch %s with directory name", name)
    return name, True


class WorktreeCreator:
    """Validate and create a worktree bound to a new or existing branch.

    All checks run before the single `git worktree add`, so a failed
    validation leaves nothing behind.
    """

    def __init__(self, executor: GitExecutor, main_path: Path):
        self.executor = executor
        self.main_path = main_path

    def create(
        self,
        root: Path,
        name: str,
        mode: BranchMode | None = None,
        start_point: str | None = None,
        symlinks: Iterable[Path] = (),
    ) -> Worktree:
        """Create worktree `name` under root."""
        # worktrees are immediate children of the root
        if not name or Path(name).name != name or name in (".", ".."):
            raise InvalidWorktreeNameError(name)

        mode = mode or DeriveBranch()
        path = root / name

        if path.exists():
            raise WorktreeAlreadyExistsError(name, path)

        branch, needs_creating = resolve_branch(name, mode)

        exists = self.executor.branch_exists(branch)
        if needs_creating and exists:
            raise BranchAlreadyExistsError(branch)
        if not needs_creating and not exists:
            raise BranchNotFoundError(branch)

        checked_out_at = self.executor.branch_checked_out_at(branch)
        if checked_out_at is not None:
            raise BranchAlreadyCheckedOutError(branch, checked_out_at)

        sources = self._symlink_sources(symlinks)

        self.executor.create_worktree(
            path, branch, create_branch=needs_creating, start_point=start_point
        )
        logger.info("created worktree %s on branch %s", path, branch)

        for source in sources:
            self._link(source, path)

        head = self.executor.run(["rev-parse", "HEAD"], cwd=path).stdout.strip()
        return Worktree(name=name, path=path, branch=branch, head=head)

    def _symlink_sources(self, symlinks: Iterable[Path]) -> list[Path]:
        """Return symlink sources relative to the main worktree, deduplicated."""
        sources: list[Path] = []
        for item in symlinks:
            relative = self._relative_to_main(item)
            if relative is None or not (self.main_path / relative).exists():
                raise SymlinkSourceNotFoundError(item)
            if relative not in sources:
                sources.append(relative)
        return sources

    def _relative_to_main(self, item: Path) -> Path | None:
        if not item.is_absolute():
            return item
        for base in (self.main_path, self.main_path.resolve()):
            try:
                return item.relative_to(base)
            except ValueError:
                continue
        return None

    def _link(self, relative: Path, worktree_path: Path) -> None:
        link = worktree_path / relative
        if link.exists() or link.is_symlink():
            logger.warning("not symlinking %s: already exists in worktree", link)
            return
        target = (self.main_path / relative).absolute()
        link.parent.mkdir(parents=True, exist_ok=True)
        os.symlink(target, link)
        logger.debug("symlinked %s -> %s", link, target)
