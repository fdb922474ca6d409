from pathlib import Path

import click

from ..operations import init_project
from ._shared import echo_path, handle_errors


@click.command()
@click.argument("name", metavar="PROJ_NAME")
@click.option(
    "-p",
    "--path",
    type=click.Path(file_okay=False, path_type=Path),
    help="The directory to create the project under [default: current directory]",
)
@click.pass_context
def init(ctx: click.Context, name: str, path: Path | None) -> None:
    """Create a new worktree project.

    Creates PROJ_NAME/<default branch>/ holding a fresh repository with an
    empty initial commit. Further worktrees are created next to it.
    """
    with handle_errors():
        main = init_project(name, path)
    echo_path(ctx, main)
