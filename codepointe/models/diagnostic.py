"""Diagnostic models"""

import re
from dataclasses import dataclass
from typing import Dict, Any

# Trailing " (line:column)" the CLI appends to problem messages
COORDINATE_SUFFIX_PATTERN = re.compile(r" \([0-9]+:[0-9]+\)$")


def _to_index(value: Any) -> int:
    """Convert a 1-based wire coordinate to a 0-based index"""
    try:
        return max(int(value) - 1, 0)
    except (TypeError, ValueError):
        return 0


@dataclass(frozen=True)
class Diagnostic:
    """A problem at a 0-based position in a source file"""
    file_path: str
    line: int
    column: int
    message: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'file_path': self.file_path,
            'line': self.line,
            'column': self.column,
            'message': self.message,
        }


@dataclass(frozen=True)
class Problem:
    """A single problem record as reported by the deploy CLI"""
    file_path: str
    line_number: Any
    column_number: Any
    error: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Problem':
        """Create from a CLI result record"""
        return cls(
            file_path=data['filePath'],
            line_number=data.get('lineNumber'),
            column_number=data.get('columnNumber'),
            error=str(data.get('error') or '')
        )

    @property
    def message(self) -> str:
        """Error text without the trailing coordinate suffix"""
        return COORDINATE_SUFFIX_PATTERN.sub('', self.error)

    def to_diagnostic(self, file_path: str) -> Diagnostic:
        """Convert to a diagnostic anchored at file_path"""
        return Diagnostic(
            file_path=file_path,
            line=_to_index(self.line_number),
            column=_to_index(self.column_number),
            message=self.message
        )
