from pathlib import Path

import click

from ..operations import clone_project
from ._shared import echo_path, handle_errors


@click.command("clone")
@click.argument("repo", metavar="REPO")
@click.option(
    "-p",
    "--path",
    type=click.Path(file_okay=False, path_type=Path),
    help="The path under which to create the project [default: current directory]",
)
@click.option(
    "-n", "--name", help="The name of the project [default: repository name]"
)
@click.pass_context
def clone(ctx: click.Context, repo: str, path: Path | None, name: str | None) -> None:
    """Create a worktree project by cloning a repository.

    REPO: The URL or path of the repository to clone
    """
    with handle_errors():
        main = clone_project(repo, path, name)
    echo_path(ctx, main)
