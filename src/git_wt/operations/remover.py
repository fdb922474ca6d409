"""Remove worktrees, and optionally their branches, from a project."""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from git_wt.errors import WtError
from git_wt.logging_config import get_logger
from git_wt.operations.executor import GitExecutor
from git_wt.operations.layout import LayoutResolver, Worktree
from git_wt.prompts import Prompter

logger = get_logger(__name__)

NOT_FOUND = "not found"
MAIN_NOT_REMOVABLE = "the main worktree cannot be removed"


@dataclass(frozen=True, slots=True)
class Removed:
    """A worktree that was removed."""

    name: str
    branch_deleted: str | None = None


@dataclass(frozen=True, slots=True)
class Failed:
    """A worktree that could not be removed, with git's reason."""

    name: str
    reason: str


RemovalOutcome = Removed | Failed


class WorktreeRemover:
    """Remove worktrees one by one, collecting an outcome per target.

    The main worktree is never a candidate. A failure on one target does not
    stop the others.
    """

    def __init__(
        self,
        executor: GitExecutor,
        resolver: LayoutResolver,
        prompter: Prompter,
    ):
        self.executor = executor
        self.resolver = resolver
        self.prompter = prompter

    def remove(
        self,
        root: Path,
        targets: Iterable[str] = (),
        leave_branches: bool = False,
        force: bool = False,
    ) -> list[RemovalOutcome]:
        """Remove the named worktrees, or prompt for them when none are named."""
        worktrees = self.resolver.resolve(root)
        main_names = {wt.name for wt in worktrees if wt.is_main}
        candidates = {wt.name: wt for wt in worktrees if not wt.is_main}

        names = list(dict.fromkeys(targets))
        if names:
            selected = [candidates[n] for n in names if n in candidates]
        else:
            if not candidates:
                logger.info("no worktrees to remove")
                return []
            chosen = self.prompter.select_multiple(
                "Select worktrees to remove", list(candidates)
            )
            names = [n for n in chosen if n in candidates]
            selected = [candidates[n] for n in names]

        if selected and not force:
            listing = ", ".join(wt.name for wt in selected)
            action = "worktrees" if leave_branches else "worktrees and branches"
            if not self.prompter.confirm(f"Remove {action}: {listing}?"):
                logger.info("removal declined")
                return []

        by_name = {wt.name: wt for wt in selected}
        outcomes: list[RemovalOutcome] = []
        for name in names:
            worktree = by_name.get(name)
            if worktree is None:
                reason = MAIN_NOT_REMOVABLE if name in main_names else NOT_FOUND
                outcomes.append(Failed(name, reason))
                continue
            outcomes.append(self._remove_one(worktree, leave_branches, force))
        return outcomes

    def _remove_one(
        self, worktree: Worktree, leave_branches: bool, force: bool
    ) -> RemovalOutcome:
        try:
            self.executor.remove_worktree(worktree.path, force=force)
        except WtError as e:
            logger.debug("failed to remove worktree %s: %s", worktree.name, e)
            return Failed(worktree.name, str(e))

        if leave_branches or worktree.branch is None:
            return Removed(worktree.name)

        try:
            self.executor.delete_branch(worktree.branch, force=force)
        except WtError as e:
            return Failed(
                worktree.name,
                f"worktree removed but branch '{worktree.branch}' was not deleted: {e}",
            )
        return Removed(worktree.name, branch_deleted=worktree.branch)
