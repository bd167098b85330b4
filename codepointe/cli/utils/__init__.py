"""CLI utility functions"""

from .output import console, format_deploy_result, format_diagnostics
from .progress import RichNotifier
from .projects import resolve_project_roots

__all__ = [
    # Output utilities
    'console',
    'format_deploy_result',
    'format_diagnostics',

    # Progress utilities
    'RichNotifier',

    # Project lookup
    'resolve_project_roots',
]
