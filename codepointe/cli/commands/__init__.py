"""CLI commands"""

from . import watch
from . import compile
from . import doctor
from . import hooks
from . import config

__all__ = [
    "watch",
    "compile",
    "doctor",
    "hooks",
    "config",
]
