"""Shared utilities for commands."""

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

import click

from ..errors import WtError
from ..operations import GitExecutor, LayoutResolver
from ..prompts import Prompter, TerminalPrompter


@contextmanager
def handle_errors() -> Iterator[None]:
    """Turn wt errors into click errors that keep the error's exit code."""
    try:
        yield
    except WtError as e:
        exc = click.ClickException(str(e))
        exc.exit_code = e.exit_code
        raise exc from e


def load_project(start: Path | None = None) -> tuple[LayoutResolver, Path, GitExecutor]:
    """Find the project around start and an executor for its main worktree."""
    resolver = LayoutResolver()
    root = resolver.discover_root(start or Path.cwd())
    main = resolver.find_main(root)
    return resolver, root, GitExecutor(cwd=main)


def get_prompter(ctx: click.Context) -> Prompter:
    """Return the prompter stored on the context, or a terminal one."""
    obj = ctx.ensure_object(dict)
    if "prompter" not in obj:
        obj["prompter"] = TerminalPrompter()
    return obj["prompter"]


def echo_path(ctx: click.Context, path: Path) -> None:
    """Print a path unless output is silenced."""
    if not ctx.ensure_object(dict).get("quiet"):
        click.echo(str(path))
