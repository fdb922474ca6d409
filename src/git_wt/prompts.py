"""Interactive terminal prompts."""

from typing import Protocol, Sequence

import click
from InquirerPy import inquirer


class Prompter(Protocol):
    """Selection and confirmation prompts used by interactive commands."""

    def select_multiple(self, message: str, options: Sequence[str]) -> list[str]: ...

    def confirm(self, message: str) -> bool: ...


class TerminalPrompter:
    """Prompt on the terminal: InquirerPy checkbox and click confirmation."""

    def select_multiple(self, message: str, options: Sequence[str]) -> list[str]:
        """Show a checkbox menu. Returns the chosen options in display order."""
        try:
            selected = inquirer.checkbox(  # type: ignore[attr-defined]
                message=message,
                choices=list(options),
                instruction="(space to toggle, enter to confirm)",
            ).execute()
        except KeyboardInterrupt:
            return []
        chosen = set(selected or [])
        return [option for option in options if option in chosen]

    def confirm(self, message: str) -> bool:
        return click.confirm(message, default=False)
