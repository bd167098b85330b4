# codepointe/plugins/__init__.py
"""Lifecycle hook support for codepointe"""

from .hooks import HookPoint, HookLoader
from .templates import create_hook_template

__all__ = [
    'HookPoint',
    'HookLoader',
    'create_hook_template',
]
