"""Data models for codepointe"""

from .config import CodePointeConfig
from .diagnostic import Diagnostic, Problem
from .result import DeployResult, ProcessResult, OperationStatus, ErrorDetail

__all__ = [
    # Config models
    "CodePointeConfig",

    # Diagnostic models
    "Diagnostic",
    "Problem",

    # Result models
    "DeployResult",
    "ProcessResult",
    "OperationStatus",
    "ErrorDetail",
]
