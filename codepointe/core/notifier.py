"""User-visible notifications raised by the pipeline"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator


class Notifier:
    """Notification surface; the base implementation only logs

    Front ends override this to show popups and progress indicators.
    """

    def __init__(self):
        self.logger = logging.getLogger("Notifier")

    def show_error(self, message: str) -> None:
        self.logger.error(message)

    @asynccontextmanager
    async def progress(self, title: str) -> AsyncIterator[None]:
        """Track a long-running, non-cancellable operation"""
        self.logger.debug(f"Started: {title}")
        try:
            yield
        finally:
            self.logger.debug(f"Finished: {title}")
