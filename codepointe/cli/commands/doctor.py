"""Environment diagnostic command"""

import shutil
import sys

import click
from rich import box
from rich.table import Table

from ..decorators import require_project
from ..utils.output import console
from ...api.exceptions import HookError
from ...plugins.hooks import HookLoader


class DoctorCheck:
    """Base class for environment checks"""

    def __init__(self, name: str, description: str):
        self.name = name
        self.description = description
        self.passed = False
        self.message = ""

    def run(self, ctx) -> 'DoctorCheck':
        """Run the check"""
        raise NotImplementedError


class ExecutableCheck(DoctorCheck):
    """Check that an external command is on PATH"""

    def __init__(self, name: str, command: str):
        super().__init__(name, f"Verify '{command}' is installed")
        self.command = command

    def run(self, ctx):
        location = shutil.which(self.command)

        if location:
            self.passed = True
            self.message = location
        else:
            self.passed = False
            self.message = f"'{self.command}' not found on PATH"

        return self


class ProjectStructureCheck(DoctorCheck):
    """Check the source directory layout"""

    def __init__(self):
        super().__init__("Project Structure", "Verify source directories exist")

    def run(self, ctx):
        paths = ctx.obj.path_resolver
        source_dir = paths.get_source_dir()

        if not source_dir.is_dir():
            self.passed = False
            self.message = f"Missing source directory: {paths.config.source_dir}"
            return self

        bundles = paths.list_bundles()
        self.passed = True
        self.message = f"{len(bundles)} resource bundle(s) in {paths.config.resource_bundles_dir}"
        return self


class HooksCheck(DoctorCheck):
    """Check that the hook script loads"""

    def __init__(self):
        super().__init__("Hooks", "Verify the hook script can be loaded")

    def run(self, ctx):
        script = ctx.obj.path_resolver.get_hooks_file()

        if not script.exists():
            self.passed = True
            self.message = f"No {script.name} (hooks disabled)"
            return self

        try:
            hooks = HookLoader(script).load()
        except HookError as e:
            self.passed = False
            self.message = str(e)
            return self

        self.passed = True
        self.message = ", ".join(hooks) if hooks else "No hook functions defined"
        return self


@click.command()
@click.pass_context
@require_project
def doctor(ctx):
    """Check the environment

    Verifies that the deploy CLI and zip are installed, that the project
    layout is in place and that the hook script loads.
    """
    config = ctx.obj.path_resolver.config
    console.print(f"[bold]CodePointe Diagnostics[/bold] for {ctx.obj.project_root}\n")

    checks = [
        ExecutableCheck("Deploy CLI", config.cli),
        ExecutableCheck("Zip", config.zip_command),
        ProjectStructureCheck(),
        HooksCheck(),
    ]

    for check in checks:
        check.run(ctx)

    table = Table(title="Diagnostic Results", box=box.ROUNDED)
    table.add_column("Check", style="cyan")
    table.add_column("Status", justify="center")
    table.add_column("Details")

    for check in checks:
        status = "[green]✓ PASS[/green]" if check.passed else "[red]✗ FAIL[/red]"
        table.add_row(check.name, status, check.message)

    console.print(table)

    failed = [check for check in checks if not check.passed]
    if failed:
        console.print(f"\n[red]{len(failed)} check(s) failed[/red]")
        sys.exit(1)

    console.print("\n[green]All checks passed[/green]")
