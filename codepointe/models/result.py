"""Operation result models"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Optional, Any

from ..constants import OperationType


def _now() -> datetime:
    return datetime.now(timezone.utc)


class OperationStatus(Enum):
    """Operation status"""
    SUCCESS = "success"
    FAILED = "failed"
    IN_PROGRESS = "in_progress"


@dataclass
class ErrorDetail:
    """Detailed error information"""

    code: str
    message: str
    context: Dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=_now)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context,
            "timestamp": self.timestamp.isoformat()
        }


@dataclass
class ProcessResult:
    """Exit code and combined output of an external process"""

    exit_code: int
    output: str = ""

    @property
    def success(self) -> bool:
        return self.exit_code == 0


@dataclass
class DeployResult:
    """Result of one deploy or compile pipeline"""

    operation: OperationType
    root_path: str
    status: OperationStatus = OperationStatus.IN_PROGRESS
    message: str = ""
    files: List[str] = field(default_factory=list)
    bundles: List[str] = field(default_factory=list)
    errors: List[ErrorDetail] = field(default_factory=list)
    diagnostic_count: int = 0
    start_time: datetime = field(default_factory=_now)
    end_time: Optional[datetime] = None

    @property
    def is_success(self) -> bool:
        """Check if operation was successful"""
        return self.status == OperationStatus.SUCCESS

    @property
    def is_failed(self) -> bool:
        """Check if operation failed"""
        return self.status == OperationStatus.FAILED

    @property
    def duration(self) -> Optional[float]:
        """Get operation duration in seconds"""
        if self.end_time:
            return (self.end_time - self.start_time).total_seconds()
        return None

    @property
    def error(self) -> Optional[str]:
        """First error message, if any"""
        return self.errors[0].message if self.errors else None

    def add_error(self, code: str, message: str, **context) -> None:
        """Add an error"""
        self.errors.append(ErrorDetail(code=code, message=message, context=context))

    def complete(self, status: OperationStatus, message: str = "") -> 'DeployResult':
        """Mark operation as complete"""
        self.end_time = _now()
        self.status = status
        if message:
            self.message = message
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "operation": self.operation.value,
            "root_path": self.root_path,
            "status": self.status.value,
            "message": self.message,
            "files": self.files,
            "bundles": self.bundles,
            "errors": [e.to_dict() for e in self.errors],
            "diagnostic_count": self.diagnostic_count,
            "duration": self.duration
        }
