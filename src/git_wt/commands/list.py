import click

from ._shared import handle_errors, load_project


@click.command("list")
def list_worktrees() -> None:
    """List the worktrees of the project, main first."""
    with handle_errors():
        resolver, root, _ = load_project()
        worktrees = resolver.resolve(root)

    width = max(len(wt.name) for wt in worktrees)
    for wt in worktrees:
        click.echo(f"{wt.name:<{width}}  {wt.branch or '(detached)'}")
