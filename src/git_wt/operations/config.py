"""Configuration management for git-wt."""

from dataclasses import dataclass
from pathlib import Path

from git_wt.operations.executor import GitExecutor

DEFAULT_BRANCH = "main"


@dataclass(frozen=True, slots=True)
class WtConfig:
    """Immutable wt settings read from git config."""

    default_branch: str = DEFAULT_BRANCH
    symlinks: tuple[Path, ...] = ()


class WtConfigManager:
    """Read wt settings from git config."""

    CONFIG_PREFIX = "wt."

    def __init__(self, executor: GitExecutor):
        self.executor = executor

    def _get_config_key(self, name: str) -> str:
        return f"{self.CONFIG_PREFIX}{name}"

    def default_branch_name(self) -> str:
        """Return the global `init.defaultBranch`, falling back to main."""
        value = self.executor.get_config("init.defaultBranch", global_only=True)
        return value or DEFAULT_BRANCH

    def get_config(self) -> WtConfig:
        """Get the effective configuration for the executor's repository."""
        symlinks = self.executor.get_config_all(self._get_config_key("symlink"))
        return WtConfig(
            default_branch=self.default_branch_name(),
            symlinks=tuple(Path(p) for p in symlinks),
        )
