"""Service layer for codepointe"""

from .config_service import ConfigService
from .compile_service import CompileService
from .watch_service import WatchService

__all__ = [
    'ConfigService',
    'CompileService',
    'WatchService',
]
