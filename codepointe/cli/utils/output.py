# codepointe/cli/utils/output.py
"""Output formatting utilities"""

from pathlib import Path
from typing import Optional, Union

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ...constants import EMOJI_SUCCESS, EMOJI_ERROR
from ...core.diagnostics import DiagnosticCollection
from ...models.result import DeployResult

console = Console()


def format_deploy_result(result: DeployResult, out: Console = None) -> None:
    """Format and display the result of a deploy or compile"""
    out = out or console
    title = f"{result.operation.value.capitalize()} Result"

    if result.is_success:
        lines = [f"[green]{EMOJI_SUCCESS}[/green] {result.message}", ""]
        lines.append(f"[bold]Project:[/bold] {result.root_path}")

        if result.files:
            lines.append(f"[bold]Files:[/bold] {len(result.files)}")
        if result.bundles:
            lines.append(f"[bold]Bundles:[/bold] {', '.join(result.bundles)}")
        if result.duration is not None:
            lines.append(f"[bold]Duration:[/bold] {result.duration:.2f}s")

        out.print(Panel("\n".join(lines), title=title, border_style="green"))
    else:
        lines = [f"[red]{EMOJI_ERROR} {result.message}[/red]"]
        if result.error:
            lines.append(f"[dim]{result.error}[/dim]")
        if result.diagnostic_count:
            lines.append(f"[bold]Problems:[/bold] {result.diagnostic_count}")

        out.print(Panel("\n".join(lines), title=title, border_style="red"))


def format_diagnostics(collection: DiagnosticCollection,
                       root_path: Optional[Union[str, Path]] = None,
                       out: Console = None) -> None:
    """Display published diagnostics, optionally only those below root_path"""
    out = out or console
    root = Path(root_path) if root_path else None

    table = Table(title="Problems", box=box.ROUNDED)
    table.add_column("File", style="cyan")
    table.add_column("Line", justify="right")
    table.add_column("Col", justify="right")
    table.add_column("Message")

    rows = 0
    for file_path, diagnostics in collection.items():
        path = Path(file_path)
        if root and root not in path.parents:
            continue

        display = path.relative_to(root).as_posix() if root else file_path
        for diagnostic in diagnostics:
            # Positions are stored 0-based; editors show them 1-based
            table.add_row(display, str(diagnostic.line + 1), str(diagnostic.column + 1), diagnostic.message)
            rows += 1

    if rows:
        out.print(table)
