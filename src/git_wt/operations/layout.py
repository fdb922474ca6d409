"""Locate worktree projects and the worktrees laid out under them."""

from dataclasses import dataclass
from pathlib import Path

from git_wt.errors import GitCommandError, NotAProjectError
from git_wt.logging_config import get_logger
from git_wt.operations.executor import GitExecutor

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Worktree:
    """A worktree directory directly under the project root."""

    name: str
    path: Path
    branch: str | None
    head: str | None = None
    is_main: bool = False


class LayoutResolver:
    """Map the directories under a project root to git worktrees.

    A project root holds one main worktree (the directory with the
    repository's `.git` directory) and any number of linked worktrees as
    siblings. Nothing is cached; every call reads the current git state.
    """

    def discover_root(self, start: Path) -> Path:
        """Find the project root from a directory inside or at the top of a project."""
        # a project may itself sit inside some unrelated repository
        if self._holds_main(start):
            return start

        common_dir = GitExecutor(cwd=start).common_dir()
        if common_dir is not None:
            if common_dir.name != ".git":
                raise NotAProjectError(start, "bare repositories are not supported")
            root = common_dir.parent.parent
            logger.debug("found project root %s from %s", root, start)
            return root

        if self._main_candidates(start):
            return start

        raise NotAProjectError(start)

    def _holds_main(self, path: Path) -> bool:
        candidates = self._main_candidates(path)
        if len(candidates) != 1:
            return False
        try:
            entries = GitExecutor(cwd=candidates[0]).list_worktrees()
        except GitCommandError:
            return False
        return bool(entries) and entries[0].path.resolve() == candidates[0].resolve()

    def _main_candidates(self, root: Path) -> list[Path]:
        if not root.is_dir():
            return []
        return [
            child
            for child in sorted(root.iterdir())
            if child.is_dir() and (child / ".git").is_dir()
        ]

    def find_main(self, root: Path) -> Path:
        """Return the main worktree directory of the project."""
        candidates = self._main_candidates(root)
        if not candidates:
            raise NotAProjectError(root)
        if len(candidates) > 1:
            names = ", ".join(c.name for c in candidates)
            raise NotAProjectError(root, f"multiple repositories found: {names}")

        main = candidates[0]
        entries = GitExecutor(cwd=main).list_worktrees()
        if not entries or entries[0].path.resolve() != main.resolve():
            raise NotAProjectError(root, f"{main.name} is not a main worktree")
        return main

    def resolve(self, root: Path) -> list[Worktree]:
        """List the project's worktrees, main first and the rest by name."""
        main = self.find_main(root)
        entries = GitExecutor(cwd=main).list_worktrees()
        by_path = {entry.path.resolve(): entry for entry in entries}

        worktrees = []
        for child in sorted(root.iterdir()):
            if not child.is_dir():
                continue
            entry = by_path.get(child.resolve())
            if entry is None:
                logger.debug("skipping %s: not a worktree of this project", child)
                continue
            worktrees.append(
                Worktree(
                    name=child.name,
                    path=child,
                    branch=entry.branch,
                    head=entry.head,
                    is_main=child.resolve() == main.resolve(),
                )
            )

        worktrees.sort(key=lambda wt: (not wt.is_main, wt.name))
        return worktrees

    def current(self, root: Path, start: Path) -> Worktree | None:
        """Return the worktree that contains start, if any."""
        start = start.resolve()
        for worktree in self.resolve(root):
            path = worktree.path.resolve()
            if start == path or path in start.parents:
                return worktree
        return None
