"""Translation of deploy failures into source diagnostics"""

import json
import logging
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple, Union

from ..constants import OUTPUT_LOGGER_NAME
from ..models.diagnostic import Diagnostic, Problem


class DiagnosticCollection:
    """Published diagnostics keyed by absolute file path

    Setting a file's diagnostics replaces whatever was published for it before.
    """

    def __init__(self, name: str = "codepointe"):
        self.name = name
        self._entries: Dict[str, List[Diagnostic]] = {}

    def set(self, file_path: Union[str, Path], diagnostics: List[Diagnostic]) -> None:
        key = str(file_path)
        if diagnostics:
            self._entries[key] = list(diagnostics)
        else:
            self._entries.pop(key, None)

    def get(self, file_path: Union[str, Path]) -> List[Diagnostic]:
        return list(self._entries.get(str(file_path), []))

    def clear(self, root_path: Optional[Union[str, Path]] = None) -> None:
        """Remove all diagnostics, or only those for files below root_path"""
        if root_path is None:
            self._entries.clear()
        else:
            root = Path(root_path)
            for key in list(self._entries):
                if Path(key) == root or root in Path(key).parents:
                    del self._entries[key]

    def items(self) -> Iterator[Tuple[str, List[Diagnostic]]]:
        for key, diagnostics in self._entries.items():
            yield key, list(diagnostics)

    def count(self) -> int:
        """Total number of diagnostics across all files"""
        return sum(len(d) for d in self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, file_path) -> bool:
        return str(file_path) in self._entries


def parse_problems(payload: str) -> List[Problem]:
    """
    Parse the problem list out of a deploy failure payload

    Args:
        payload: Combined CLI output, expected to hold a JSON document

    Returns:
        Problems in report order

    Raises:
        ValueError: The payload is not a structured problem list
    """
    try:
        data = json.loads(payload)
    except json.JSONDecodeError:
        # Tolerate noise printed around the JSON document
        start, end = payload.find('{'), payload.rfind('}')
        if start < 0 or end <= start:
            raise ValueError("No JSON document in payload")
        data = json.loads(payload[start:end + 1])

    if not isinstance(data, dict) or not isinstance(data.get('result'), list):
        raise ValueError("Payload has no result list")

    return [
        Problem.from_dict(record)
        for record in data['result']
        if isinstance(record, dict) and isinstance(record.get('filePath'), str) and record['filePath']
    ]


def group_by_file(problems: List[Problem],
                  root_path: Union[str, Path]) -> Dict[str, List[Diagnostic]]:
    """Group problems into diagnostics keyed by absolute file path"""
    root = Path(root_path)
    grouped: Dict[str, List[Diagnostic]] = {}

    for problem in problems:
        file_path = str(root / problem.file_path)
        grouped.setdefault(file_path, []).append(problem.to_diagnostic(file_path))

    return grouped


class DiagnosticsTranslator:
    """Publishes the problems of a failed deploy for one project root"""

    def __init__(self, collection: DiagnosticCollection, root_path: Union[str, Path]):
        self.collection = collection
        self.root_path = Path(root_path)
        self.output = logging.getLogger(OUTPUT_LOGGER_NAME)

    def clear(self) -> None:
        """Clear previously published diagnostics for this project"""
        self.collection.clear(self.root_path)

    def publish(self, payload: str) -> int:
        """
        Publish diagnostics parsed from a failure payload

        Parsing is best-effort: an unstructured payload is logged verbatim
        and nothing is published.

        Returns:
            Number of diagnostics published
        """
        try:
            problems = parse_problems(payload)
        except ValueError as e:
            self.output.error(str(e))
            self.output.error(payload)
            return 0

        grouped = group_by_file(problems, self.root_path)
        for file_path, diagnostics in grouped.items():
            self.collection.set(file_path, diagnostics)

        return sum(len(d) for d in grouped.values())
