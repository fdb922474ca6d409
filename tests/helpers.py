"""Helpers for building test repositories."""

import subprocess
from pathlib import Path
from typing import Sequence


def git(*args: str, cwd: Path) -> str:
    """Run a git command in a test repository and return its stdout."""
    result = subprocess.run(
        ["git", *args], cwd=cwd, check=True, capture_output=True, text=True
    )
    return result.stdout.strip()


def commit_file(worktree: Path, name: str, content: str = "content") -> None:
    """Write a file and commit it on the worktree's current branch."""
    (worktree / name).write_text(content)
    git("add", name, cwd=worktree)
    git("commit", "-m", f"Add {name}", cwd=worktree)


class ScriptedPrompter:
    """Prompter double that answers from a script and records what it was asked."""

    def __init__(self, selection: Sequence[str] = (), confirm: bool = True):
        self.selection = list(selection)
        self.answer = confirm
        self.offered: list[list[str]] = []
        self.confirmations: list[str] = []

    def select_multiple(self, message: str, options: Sequence[str]) -> list[str]:
        self.offered.append(list(options))
        return [s for s in self.selection if s in options]

    def confirm(self, message: str) -> bool:
        self.confirmations.append(message)
        return self.answer
