"""Core modules for codepointe"""

from .classifier import FileKind, Classification, classify
from .path_resolver import PathResolver, find_project_root, is_project_root
from .diagnostics import DiagnosticCollection, DiagnosticsTranslator, parse_problems
from .notifier import Notifier
from .project import ProjectContext
from .deploy_batch import DeployBatch
from .scheduler import DebounceScheduler, SchedulerState

__all__ = [
    'FileKind',
    'Classification',
    'classify',
    'PathResolver',
    'find_project_root',
    'is_project_root',
    'DiagnosticCollection',
    'DiagnosticsTranslator',
    'parse_problems',
    'Notifier',
    'ProjectContext',
    'DeployBatch',
    'DebounceScheduler',
    'SchedulerState',
]
