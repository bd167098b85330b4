"""Public API for codepointe"""

from .exceptions import (
    CodePointeError,
    ConfigError,
    ProcessError,
    HookError,
    PathError,
    ProjectNotFoundError,
)

__all__ = [
    "CodePointeError",
    "ConfigError",
    "ProcessError",
    "HookError",
    "PathError",
    "ProjectNotFoundError",
]
