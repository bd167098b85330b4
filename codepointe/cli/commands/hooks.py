"""Hook script commands"""

import sys

import click

from ..decorators import require_project
from ..utils.output import console
from ...api.exceptions import HookError
from ...constants import EMOJI_SUCCESS, EMOJI_WARNING
from ...plugins.hooks import HookLoader, HookPoint
from ...plugins.templates import create_hook_template


@click.group()
def hooks():
    """Manage the lifecycle hook script"""
    pass


@hooks.command()
@click.option('--force', is_flag=True, help='Overwrite an existing hook script')
@click.pass_context
@require_project
def init(ctx, force):
    """Create a hook script template in the project root"""
    script = ctx.obj.path_resolver.get_hooks_file()

    if create_hook_template(script, force=force) is None:
        console.print(f"{EMOJI_WARNING} {script} already exists. Use --force to overwrite.")
        sys.exit(1)

    console.print(f"{EMOJI_SUCCESS} Created {script}")


@hooks.command(name='list')
@click.pass_context
@require_project
def list_hooks(ctx):
    """List hook points and whether the script defines them"""
    script = ctx.obj.path_resolver.get_hooks_file()

    try:
        defined = HookLoader(script).load()
    except HookError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    if not script.exists():
        console.print(f"[dim]No hook script at {script}[/dim]")

    for point in HookPoint:
        mark = "[green]✓[/green]" if point.value in defined else "[dim]-[/dim]"
        console.print(f"  {mark} {point.value}")
