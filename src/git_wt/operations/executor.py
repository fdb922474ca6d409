"""Git command execution for git-wt."""

import subprocess
from dataclasses import dataclass
from pathlib import Path

from git_wt.errors import GitCommandError
from git_wt.logging_config import get_logger

logger = get_logger(__name__)

BRANCH_REF_PREFIX = "refs/heads/"


@dataclass(frozen=True, slots=True)
class WorktreeEntry:
    """One record of `git worktree list --porcelain`."""

    path: Path
    head: str | None = None
    branch: str | None = None
    bare: bool = False
    detached: bool = False
    locked: bool = False
    prunable: bool = False


def parse_worktree_porcelain(output: str) -> list[WorktreeEntry]:
    """Parse `git worktree list --porcelain` output into entries.

    Records are separated by blank lines; the first record is always the
    main worktree.
    """
    entries: list[WorktreeEntry] = []
    record: dict = {}

    def flush() -> None:
        if "path" in record:
            entries.append(WorktreeEntry(**record))
        record.clear()

    for line in output.splitlines():
        if not line.strip():
            flush()
            continue
        key, _, value = line.partition(" ")
        if key == "worktree":
            flush()
            record["path"] = Path(value)
        elif key == "HEAD":
            record["head"] = value
        elif key == "branch":
            record["branch"] = value.removeprefix(BRANCH_REF_PREFIX)
        elif key in ("bare", "detached", "locked", "prunable"):
            record[key] = True
    flush()
    return entries


class GitExecutor:
    """Execute git commands with proper error handling."""

    def __init__(self, cwd: Path | None = None):
        self.cwd = cwd

    def run(
        self,
        args: list[str],
        check: bool = True,
        capture: bool = True,
        cwd: Path | None = None,
    ) -> subprocess.CompletedProcess[str]:
        """Run a git command, raising GitCommandError on failure if check is set."""
        cmd = ["git"] + args
        logger.debug("running %s (cwd=%s)", " ".join(cmd), cwd or self.cwd)
        result = subprocess.run(
            cmd,
            cwd=cwd or self.cwd,
            capture_output=capture,
            text=True,
        )
        if check and result.returncode != 0:
            err = (result.stderr or result.stdout or "").strip()
            raise GitCommandError(args, err)
        return result

    def branch_exists(self, branch: str) -> bool:
        """Check if a local branch exists."""
        result = self.run(
            ["rev-parse", "--verify", "--quiet", f"{BRANCH_REF_PREFIX}{branch}"],
            check=False,
        )
        return result.returncode == 0

    def list_worktrees(self) -> list[WorktreeEntry]:
        """List every worktree registered with the repository."""
        result = self.run(["worktree", "list", "--porcelain"])
        return parse_worktree_porcelain(result.stdout)

    def branch_checked_out_at(self, branch: str) -> Path | None:
        """Return the path of the worktree that has the branch checked out."""
        for entry in self.list_worktrees():
            if entry.branch == branch:
                return entry.path
        return None

    def create_worktree(
        self,
        path: Path,
        branch: str,
        create_branch: bool = False,
        start_point: str | None = None,
    ) -> None:
        """Add a worktree at path, optionally creating the branch first."""
        if create_branch:
            args = ["worktree", "add", "-b", branch, str(path)]
            if start_point:
                args.append(start_point)
        else:
            args = ["worktree", "add", str(path), branch]
        self.run(args)

    def remove_worktree(self, path: Path, force: bool = False) -> None:
        """Remove a linked worktree and its registration."""
        args = ["worktree", "remove"]
        if force:
            args.append("--force")
        args.append(str(path))
        self.run(args)

    def delete_branch(self, branch: str, force: bool = False) -> None:
        """Delete a branch."""
        args = ["branch", "-D" if force else "-d", branch]
        self.run(args)

    def current_branch(self, cwd: Path | None = None) -> str | None:
        """Get the branch checked out in a worktree, None if HEAD is detached."""
        result = self.run(["branch", "--show-current"], cwd=cwd)
        return result.stdout.strip() or None

    def common_dir(self, cwd: Path | None = None) -> Path | None:
        """Return the repository's common git directory, None outside a repository."""
        result = self.run(
            ["rev-parse", "--path-format=absolute", "--git-common-dir"],
            check=False,
            cwd=cwd,
        )
        if result.returncode != 0 or not result.stdout.strip():
            return None
        return Path(result.stdout.strip())

    def init_repo(self, path: Path, branch: str) -> None:
        """Initialize a repository at path with the given initial branch."""
        self.run(["init", "--initial-branch", branch, str(path)])

    def create_initial_commit(self, path: Path) -> None:
        """Create an empty commit so the initial branch exists."""
        self.run(["commit", "--allow-empty", "-m", "Initial commit"], cwd=path)

    def clone(self, repo: str, under: Path) -> None:
        """Clone a repository into a new directory under the given path."""
        self.run(["clone", repo], cwd=under)

    def get_config(self, key: str, global_only: bool = False) -> str | None:
        """Get a git config value, None if unset."""
        args = ["config"]
        if global_only:
            args.append("--global")
        args += ["--get", key]
        result = self.run(args, check=False)
        if result.returncode != 0:
            return None
        return result.stdout.strip()

    def get_config_all(self, key: str) -> list[str]:
        """Get every value of a multi-valued git config key."""
        result = self.run(["config", "--get-all", key], check=False)
        if result.returncode != 0:
            return []
        return [line for line in result.stdout.splitlines() if line]
