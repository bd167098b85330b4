"""Utility modules for codepointe"""

from .process_utils import ProcessRunner, COMMAND_NOT_FOUND

__all__ = [
    'ProcessRunner',
    'COMMAND_NOT_FOUND',
]
