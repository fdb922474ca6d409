"""CLI entry point for git-wt."""

import click

from .logging_config import setup_logging


@click.group()
@click.version_option(package_name="git-wt")
@click.option("-q", "--quiet", is_flag=True, help="Silences all output")
@click.option("-v", "--verbose", is_flag=True, help="Show progress messages")
@click.option("--debug", is_flag=True, help="Show debug messages, including git calls")
@click.pass_context
def cli(ctx: click.Context, quiet: bool, verbose: bool, debug: bool) -> None:
    """wt: Utility for managing git worktrees.

    Keeps every worktree of a repository as a sibling directory under one
    project directory: PROJECT/main, PROJECT/foo, PROJECT/bar.
    """
    ctx.ensure_object(dict)
    ctx.obj["quiet"] = quiet
    setup_logging(verbose=verbose, debug=debug)


# Import and register commands
from .commands.init import init
from .commands.clone import clone
from .commands.new import new
from .commands.remove import remove
from .commands.list import list_worktrees

cli.add_command(init)
cli.add_command(clone)
cli.add_command(new)
cli.add_command(remove)
cli.add_command(remove, name="rm")
cli.add_command(list_worktrees)
cli.add_command(list_worktrees, name="ls")


if __name__ == "__main__":
    cli()
