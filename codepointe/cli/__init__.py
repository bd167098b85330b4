"""Command line interface for codepointe"""

from .main import cli, main

__all__ = ["cli", "main"]
