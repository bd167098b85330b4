"""Watch command implementation"""

import asyncio
from pathlib import Path

import click

from ..utils.output import console, format_diagnostics
from ..utils.progress import RichNotifier
from ..utils.projects import resolve_project_roots
from ...constants import EMOJI_ROCKET, EMOJI_WARNING
from ...core.diagnostics import DiagnosticCollection
from ...models.result import DeployResult
from ...services.watch_service import WatchService


@click.command()
@click.argument('paths', nargs=-1, type=click.Path(exists=True, file_okay=False))
@click.pass_context
def watch(ctx, paths):
    """Deploy files as they are saved

    Watches PATHS (default: the current directory) and deploys every
    saved metadata file. Saves arriving in quick succession are batched
    into one deploy. Objects and permission sets trigger a full project
    compile. Problems reported by the CLI are shown as a table.

    Press Ctrl+C to stop.
    """
    watch_paths = [Path(p) for p in paths] or [Path.cwd()]

    roots = resolve_project_roots(paths)
    if roots:
        for root in roots:
            console.print(f"{EMOJI_ROCKET} Watching [bold]{root}[/bold]")
    else:
        console.print(f"[yellow]{EMOJI_WARNING} No .sfdx project above "
                      f"{', '.join(str(p) for p in watch_paths)}; "
                      f"only nested projects will be deployed[/yellow]")

    diagnostics = DiagnosticCollection()

    def on_result(result: DeployResult) -> None:
        if result.is_failed:
            format_diagnostics(diagnostics, result.root_path)

    service = WatchService(
        watch_paths,
        runner=ctx.obj.runner,
        diagnostics=diagnostics,
        notifier=RichNotifier(console),
        on_result=on_result
    )

    try:
        asyncio.run(service.watch())
    except KeyboardInterrupt:
        console.print("\n[yellow]Stopped watching[/yellow]")
