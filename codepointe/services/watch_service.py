"""Filesystem watcher routing saved files to per-project schedulers"""

import asyncio
import logging
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional

from watchfiles import Change, awatch

from .config_service import ConfigService
from ..constants import PROJECT_MARKER, WATCH_IGNORE_DIRS
from ..core.classifier import Classification
from ..core.diagnostics import DiagnosticCollection
from ..core.notifier import Notifier
from ..core.path_resolver import find_project_root
from ..core.project import ProjectContext
from ..core.scheduler import DebounceScheduler
from ..models.result import DeployResult
from ..utils.process_utils import ProcessRunner

# Grouping window of the underlying watcher, in milliseconds
WATCH_DEBOUNCE_MS = 50

logger = logging.getLogger(__name__)


class WatchService:
    """Watch directories and feed saved files into debounce schedulers

    Each project root gets its own scheduler, so projects never share a batch.
    """

    def __init__(self,
                 watch_paths: Iterable[Path],
                 runner: Optional[ProcessRunner] = None,
                 diagnostics: Optional[DiagnosticCollection] = None,
                 notifier: Optional[Notifier] = None,
                 on_result: Optional[Callable[[DeployResult], None]] = None):
        self.watch_paths: List[Path] = [Path(p).resolve() for p in watch_paths]
        self.runner = runner or ProcessRunner()
        self.diagnostics = diagnostics if diagnostics is not None else DiagnosticCollection()
        self.notifier = notifier or Notifier()
        self.on_result = on_result
        self._schedulers: Dict[Path, DebounceScheduler] = {}

    @property
    def schedulers(self) -> Dict[Path, DebounceScheduler]:
        return dict(self._schedulers)

    def scheduler_for(self, root: Path) -> DebounceScheduler:
        """Get or create the scheduler of a project root"""
        scheduler = self._schedulers.get(root)
        if scheduler is None:
            context = ProjectContext.create(
                root,
                config=ConfigService(root).load_config(),
                runner=self.runner,
                diagnostics=self.diagnostics,
                notifier=self.notifier
            )
            scheduler = DebounceScheduler(context, on_result=self.on_result)
            self._schedulers[root] = scheduler
            logger.info(f"Watching project {root}")
        return scheduler

    def should_ignore(self, path: Path, scheduler: DebounceScheduler) -> bool:
        """Skip tool directories and archives the pipeline itself writes"""
        paths = scheduler.context.paths
        relative = paths.relative(path)
        if relative is None:
            return True

        parts = Path(relative).parts
        if any(part in WATCH_IGNORE_DIRS for part in parts):
            return True

        convert_parts = Path(paths.config.convert_dir).parts
        if parts[:len(convert_parts)] == convert_parts:
            return True

        # Archives zipped from a bundle directory are build output
        archive = Path(path)
        if archive.parent == paths.get_static_resources_dir() and paths.get_bundle_dir(archive.name).is_dir():
            return True

        return False

    def handle_change(self, change: Change, path: Path) -> Optional[Classification]:
        """
        Route one filesystem event

        Returns:
            The classification, or None if the event was not routed
        """
        if change == Change.deleted:
            return None

        path = Path(path)
        if path.is_dir():
            return None

        root = find_project_root(path.parent, PROJECT_MARKER)
        if root is None:
            return None

        scheduler = self.scheduler_for(root)
        if self.should_ignore(path, scheduler):
            return None

        return scheduler.notify(path)

    async def watch(self, stop_event: Optional[asyncio.Event] = None) -> None:
        """Watch until stop_event is set or the task is cancelled"""
        try:
            async for changes in awatch(*self.watch_paths,
                                        stop_event=stop_event,
                                        debounce=WATCH_DEBOUNCE_MS):
                for change, path in changes:
                    try:
                        self.handle_change(change, Path(path))
                    except Exception as e:
                        logger.error(f"Failed to handle change to {path}: {e}")
        finally:
            await self.shutdown()

    async def shutdown(self) -> None:
        """Flush pending batches and wait for every pipeline to finish"""
        for scheduler in self._schedulers.values():
            scheduler.flush_now()
        for scheduler in self._schedulers.values():
            await scheduler.drain()
