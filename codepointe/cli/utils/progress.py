# codepointe/cli/utils/progress.py
"""Progress display utilities"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from rich.console import Console
from rich.progress import (
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeElapsedColumn,
)

from ...constants import EMOJI_ERROR
from ...core.notifier import Notifier


class RichNotifier(Notifier):
    """Notifier rendering messages and spinners on a rich console

    Overlapping operations share one live Progress display, one task row
    per operation; the display stops when the last operation finishes.
    """

    def __init__(self, console: Console = None):
        super().__init__()
        self.console = console or Console()
        self._progress: Optional[Progress] = None
        self._active = 0

    def show_error(self, message: str) -> None:
        self.console.print(f"[red]{EMOJI_ERROR} {message}[/red]")

    def _create_progress(self) -> Progress:
        return Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            TimeElapsedColumn(),
            console=self.console,
            transient=True,
        )

    @asynccontextmanager
    async def progress(self, title: str) -> AsyncIterator[None]:
        if self._progress is None:
            self._progress = self._create_progress()
            self._progress.start()

        progress = self._progress
        task_id = progress.add_task(title, total=None)
        self._active += 1

        try:
            yield
        finally:
            progress.remove_task(task_id)
            self._active -= 1
            if self._active == 0:
                progress.stop()
                self._progress = None
