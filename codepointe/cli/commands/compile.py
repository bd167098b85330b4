"""Compile command implementation"""

import asyncio
import sys

import click

from ..utils.output import console, format_deploy_result
from ..utils.progress import RichNotifier
from ..utils.projects import resolve_project_roots
from ...constants import EMOJI_ERROR
from ...api.exceptions import ConfigError
from ...services.compile_service import CompileService


@click.command(name='compile')
@click.argument('paths', nargs=-1, type=click.Path(exists=True, file_okay=False))
@click.pass_context
def compile_project(ctx, paths):
    """Compile whole projects

    Zips every resource bundle, converts the source tree to the deploy
    format and deploys all of it. Each PATH is mapped to its project root
    (the nearest directory holding .sfdx); defaults to the current directory.

    Examples:

        # Compile the project containing the current directory
        codepointe compile

        # Compile several projects in turn
        codepointe compile ~/work/app ~/work/lib
    """
    roots = resolve_project_roots(paths)

    if not roots:
        console.print(f"[red]{EMOJI_ERROR} No project found.[/red] "
                      f"Run inside a directory tree holding a .sfdx directory.")
        sys.exit(1)

    service = CompileService(
        runner=ctx.obj.runner,
        notifier=RichNotifier(console)
    )

    try:
        results = asyncio.run(service.compile_roots(roots))
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    for result in results:
        format_deploy_result(result)

    if any(result.is_failed for result in results):
        sys.exit(1)
