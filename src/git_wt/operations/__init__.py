from git_wt.operations.config import WtConfig, WtConfigManager

from .executor import GitExecutor, WorktreeEntry, parse_worktree_porcelain
from .layout import LayoutResolver, Worktree
from .creator import (
    BranchMode,
    DeriveBranch,
    ExistingBranch,
    NewBranch,
    WorktreeCreator,
)
from .remover import Failed, RemovalOutcome, Removed, WorktreeRemover
from .project import clone_project, init_project
