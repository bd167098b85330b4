"""Configuration commands"""

import sys

import click
import yaml
from rich.syntax import Syntax

from ..decorators import require_project
from ..utils.output import console
from ...constants import EMOJI_SUCCESS, EMOJI_WARNING


@click.group()
def config():
    """Show or create the project configuration"""
    pass


@config.command()
@click.pass_context
@require_project
def show(ctx):
    """Show the effective configuration"""
    data = ctx.obj.config_service.config.to_dict()
    console.print(Syntax(yaml.dump(data, default_flow_style=False, sort_keys=False), "yaml"))


@config.command()
@click.option('--force', is_flag=True, help='Overwrite an existing configuration file')
@click.pass_context
@require_project
def init(ctx, force):
    """Write the effective configuration to .codepointe.yaml"""
    service = ctx.obj.config_service

    if service.config_path.exists() and not force:
        console.print(f"{EMOJI_WARNING} {service.config_path} already exists. Use --force to overwrite.")
        sys.exit(1)

    path = service.save_config()
    console.print(f"{EMOJI_SUCCESS} Configuration saved to {path}")
