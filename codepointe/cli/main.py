# codepointe/cli/main.py
"""Main CLI entry point for codepointe"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

import click
from rich.logging import RichHandler

from ..__version__ import __version__
from ..constants import APP_NAME, LOG_FORMAT, OUTPUT_LOGGER_NAME, ENV_LOG_LEVEL
from ..core.path_resolver import PathResolver
from ..services.config_service import ConfigService
from ..utils.process_utils import ProcessRunner
from .utils.output import console

# Import all commands
from .commands import (
    watch,
    compile,
    doctor,
    hooks,
    config,
)


def setup_logging(verbose: bool = False, debug: bool = False,
                  log_file: Optional[str] = None) -> None:
    """Setup logging configuration

    Process output always reaches the console at INFO level; the other
    loggers follow the verbosity flags.

    Args:
        verbose: Enable verbose output (INFO level)
        debug: Enable debug output (DEBUG level)
        log_file: Also append process output to this file
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.getLevelName(os.environ.get(ENV_LOG_LEVEL, 'WARNING').upper())
        if not isinstance(level, int):
            level = logging.WARNING

    # Configure rich handler
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            RichHandler(
                console=console,
                show_time=debug,
                show_path=debug,
                rich_tracebacks=True,
                tracebacks_suppress=[click]
            )
        ],
        force=True
    )

    output = logging.getLogger(OUTPUT_LOGGER_NAME)
    output.setLevel(logging.DEBUG if debug else logging.INFO)

    if log_file:
        handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        handler.setFormatter(logging.Formatter("%(asctime)s %(message)s"))
        output.addHandler(handler)

    # Adjust third-party loggers
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("watchfiles").setLevel(logging.WARNING)


class Context:
    """CLI context object

    Commands that need a project fill in project_root, config_service and
    path_resolver through the require_project decorator.
    """

    def __init__(self, runner: Optional[ProcessRunner] = None):
        """Initialize CLI context

        Args:
            runner: Process runner shared by commands (default one if omitted)
        """
        self.runner = runner
        self.verbose: bool = False
        self.debug: bool = False
        self.project_root_option: Optional[str] = None
        self.project_root: Optional[Path] = None
        self.config_service: Optional[ConfigService] = None
        self.path_resolver: Optional[PathResolver] = None


@click.group(name=APP_NAME)
@click.version_option(__version__, prog_name=APP_NAME)
@click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
@click.option('-d', '--debug', is_flag=True, help='Enable debug output')
@click.option('-q', '--quiet', is_flag=True, help='Suppress all output except errors')
@click.option('--log-file', type=click.Path(dir_okay=False), help='Append process output to a file')
@click.option('--project-root', type=click.Path(exists=True, file_okay=False),
              help='Project directory (default: current directory)')
@click.pass_context
def cli(ctx, verbose, debug, quiet, log_file, project_root):
    """CodePointe - Deploy metadata as you save it

    Watches a Salesforce source tree, batches saved files into deploys
    through the sfdx CLI and reports deploy problems against the source
    lines they refer to.
    """
    # Setup logging
    if quiet:
        logging.disable(logging.WARNING)
    else:
        setup_logging(verbose=verbose, debug=debug, log_file=log_file)

    ctx.ensure_object(Context)
    ctx.obj.verbose = verbose
    ctx.obj.debug = debug
    ctx.obj.project_root_option = project_root


# Register commands
cli.add_command(watch.watch)
cli.add_command(compile.compile_project)
cli.add_command(doctor.doctor)
cli.add_command(hooks.hooks)
cli.add_command(config.config)


def main():
    """Main entry point for the CLI application

    This function handles:
    - Keyboard interrupts
    - Unexpected exceptions with proper error display
    """
    try:
        cli(prog_name=APP_NAME)

    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)

    except Exception as e:
        console.print(f"[red]Unexpected error: {e}[/red]")
        if '--debug' in sys.argv or '-d' in sys.argv:
            console.print_exception()
        sys.exit(1)


if __name__ == "__main__":
    main()
