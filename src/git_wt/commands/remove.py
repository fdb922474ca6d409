import click

from ..operations import Removed, WorktreeRemover
from ._shared import get_prompter, handle_errors, load_project


@click.command()
@click.argument("names", nargs=-1, metavar="[WT_NAME]...")
@click.option(
    "-l",
    "--leave-branches",
    is_flag=True,
    help="Keep the branch(es) checked out in the worktree(s)",
)
@click.option(
    "-f",
    "--force",
    is_flag=True,
    help="Remove without confirmation, even with uncommitted changes",
)
@click.pass_context
def remove(
    ctx: click.Context, names: tuple[str, ...], leave_branches: bool, force: bool
) -> None:
    """Remove one or more worktrees and their branches.

    WT_NAME: Worktrees to remove (default: choose interactively)
    """
    quiet = ctx.ensure_object(dict).get("quiet")

    with handle_errors():
        resolver, root, executor = load_project()
        remover = WorktreeRemover(executor, resolver, get_prompter(ctx))
        outcomes = remover.remove(
            root, names, leave_branches=leave_branches, force=force
        )

    failed = 0
    for outcome in outcomes:
        if isinstance(outcome, Removed):
            if quiet:
                continue
            msg = f"removed worktree '{outcome.name}'"
            if outcome.branch_deleted:
                msg += f" and branch '{outcome.branch_deleted}'"
            click.echo(msg, err=True)
        else:
            failed += 1
            click.echo(
                f"couldn't remove worktree '{outcome.name}': {outcome.reason}",
                err=True,
            )

    if failed:
        ctx.exit(1)
