"""Trailing-edge debounce of file changes into deploy batches"""

import asyncio
import logging
from enum import Enum
from pathlib import Path
from typing import Callable, Optional, Set, Union

from .classifier import Classification, FileKind, IGNORED, classify
from .deploy_batch import DeployBatch
from .project import ProjectContext
from ..constants import OUTPUT_LOGGER_NAME, OUTPUT_SEPARATOR
from ..models.result import DeployResult


class SchedulerState(Enum):
    IDLE = "idle"
    ACCUMULATING = "accumulating"


class DebounceScheduler:
    """Coalesces file changes of one project root into deploy batches

    Every relevant change restarts the flush timer, so a batch is flushed
    only after a quiet period of ``debounce_delay`` seconds. Flushing hands
    the batch to its own task and returns to idle at once; pipelines of
    consecutive batches may overlap.
    """

    def __init__(self,
                 context: ProjectContext,
                 batch_factory: Callable[[ProjectContext], DeployBatch] = DeployBatch,
                 loop: Optional[asyncio.AbstractEventLoop] = None,
                 on_result: Optional[Callable[[DeployResult], None]] = None):
        """
        Initialize scheduler

        Args:
            context: Collaborators of the project this scheduler serves
            batch_factory: Creates a fresh batch for each accumulation window
            loop: Event loop for the flush timer (defaults to the running loop)
            on_result: Called with the result of every finished pipeline
        """
        self.context = context
        self.batch_factory = batch_factory
        self.delay = context.config.debounce_delay
        self._loop = loop
        self.on_result = on_result
        self._batch: Optional[DeployBatch] = None
        self._full_compile = False
        self._timer: Optional[asyncio.TimerHandle] = None
        self._tasks: Set[asyncio.Task] = set()
        self.logger = logging.getLogger(__name__)
        self.output = logging.getLogger(OUTPUT_LOGGER_NAME)

    @property
    def root_path(self) -> Path:
        return self.context.root_path

    @property
    def state(self) -> SchedulerState:
        return SchedulerState.ACCUMULATING if self._batch is not None else SchedulerState.IDLE

    @property
    def pending_batch(self) -> Optional[DeployBatch]:
        """Batch currently accumulating, if any"""
        return self._batch

    @property
    def full_compile(self) -> bool:
        """Whether the current cycle escalated to a full project compile"""
        return self._full_compile

    @property
    def in_flight(self) -> int:
        """Number of pipelines still running"""
        return len(self._tasks)

    def notify(self, file_path: Union[str, Path]) -> Classification:
        """
        Stage a saved file into the current batch

        Args:
            file_path: Absolute path of the saved file

        Returns:
            How the file was classified
        """
        relative_path = self.context.paths.relative(file_path)
        if relative_path is None:
            self.logger.warning(f"Path outside project root, ignoring: {file_path}")
            return IGNORED

        classification = classify(relative_path)
        if not classification.is_relevant:
            return classification

        if self._batch is None:
            self._batch = self.batch_factory(self.context)

        if classification.requires_full_compile:
            self._full_compile = True

        if classification.kind == FileKind.DEPLOYABLE:
            self._batch.add_file(relative_path)
        else:
            bundle = classification.bundle_name
            self._batch.add_bundle(bundle)
            self._batch.add_file(self.context.paths.get_bundle_archive_relative(bundle))

        self._arm_timer()
        return classification

    def _arm_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()

        loop = self._loop or asyncio.get_running_loop()
        self._timer = loop.call_later(self.delay, self.flush_now)

    def flush_now(self) -> Optional[asyncio.Task]:
        """
        Flush the pending batch immediately

        Returns:
            Task running the batch pipeline, or None if nothing was pending
        """
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

        batch, full_compile = self._batch, self._full_compile
        self._batch = None
        self._full_compile = False

        if batch is None:
            return None

        self.output.info(OUTPUT_SEPARATOR)

        if full_compile:
            self.output.info("compiling project")
            coro = batch.compile_project()
        else:
            self.output.info("deploying files")
            coro = batch.run()

        loop = self._loop or asyncio.get_running_loop()
        task = loop.create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._finished)
        return task

    def _finished(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)

        if task.cancelled():
            return

        error = task.exception()
        if error is not None:
            self.logger.error(f"Pipeline crashed: {error}")
        elif self.on_result is not None:
            self.on_result(task.result())

    async def drain(self) -> None:
        """Wait until every in-flight pipeline has finished"""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    def close(self) -> None:
        """Cancel a pending flush without running it"""
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        self._batch = None
        self._full_compile = False
