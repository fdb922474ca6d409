from pathlib import Path

import click

from ..operations import (
    DeriveBranch,
    ExistingBranch,
    NewBranch,
    WorktreeCreator,
    WtConfigManager,
)
from ._shared import echo_path, handle_errors, load_project


@click.command()
@click.argument("name", metavar="DIR_NAME")
@click.option(
    "-b",
    "--branch",
    "existing_branch",
    metavar="EXISTING_BRANCH",
    help="Check out an existing branch (can't be checked out anywhere else)",
)
@click.option(
    "-n",
    "--new-branch",
    metavar="NEW_BRANCH",
    help="Create a new branch with a name different from the directory name",
)
@click.option(
    "-s",
    "--symlink",
    "symlinks",
    multiple=True,
    type=click.Path(path_type=Path),
    help="File in the main worktree to symlink into the new worktree (repeatable)",
)
@click.pass_context
def new(
    ctx: click.Context,
    name: str,
    existing_branch: str | None,
    new_branch: str | None,
    symlinks: tuple[Path, ...],
) -> None:
    """Create a new worktree.

    DIR_NAME: Directory name of the worktree, created next to the main worktree.
    Unless -b or -n is given, a new branch with the same name is created.
    """
    if existing_branch and new_branch:
        raise click.UsageError("-b/--branch and -n/--new-branch are mutually exclusive")

    if existing_branch:
        mode = ExistingBranch(existing_branch)
    elif new_branch:
        mode = NewBranch(new_branch)
    else:
        mode = DeriveBranch()

    with handle_errors():
        resolver, root, executor = load_project()
        config = WtConfigManager(executor).get_config()
        current = resolver.current(root, Path.cwd())

        creator = WorktreeCreator(executor, executor.cwd)
        worktree = creator.create(
            root,
            name,
            mode,
            start_point=current.head if current else None,
            symlinks=config.symlinks + symlinks,
        )
    echo_path(ctx, worktree.path)
