"""CodePointe - deploy Salesforce metadata as it is saved.

Saved files are classified, batched over a short quiet period and shipped
through the sfdx CLI; deploy failures are mapped back to source positions.
"""

from .__version__ import __version__, __version_info__, __author__, __license__

# Core API
from .core.classifier import FileKind, Classification, classify
from .core.deploy_batch import DeployBatch
from .core.diagnostics import DiagnosticCollection, DiagnosticsTranslator
from .core.notifier import Notifier
from .core.project import ProjectContext
from .core.scheduler import DebounceScheduler, SchedulerState
from .plugins.hooks import HookPoint, HookLoader
from .utils.process_utils import ProcessRunner

# Data models
from .models import CodePointeConfig, Diagnostic, DeployResult, ProcessResult, OperationStatus

# Exceptions
from .api.exceptions import (
    CodePointeError,
    ConfigError,
    ProcessError,
    HookError,
    PathError,
    ProjectNotFoundError,
)

__all__ = [
    # Version information
    "__version__",
    "__version_info__",
    "__author__",
    "__license__",

    # Main classes
    "DeployBatch",
    "DebounceScheduler",
    "SchedulerState",
    "DiagnosticCollection",
    "DiagnosticsTranslator",
    "Notifier",
    "ProjectContext",
    "HookPoint",
    "HookLoader",
    "ProcessRunner",

    # Classification
    "FileKind",
    "Classification",
    "classify",

    # Data models
    "CodePointeConfig",
    "Diagnostic",
    "DeployResult",
    "ProcessResult",
    "OperationStatus",

    # Exceptions
    "CodePointeError",
    "ConfigError",
    "ProcessError",
    "HookError",
    "PathError",
    "ProjectNotFoundError",
]
