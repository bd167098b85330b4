"""File classification by path suffix"""

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import PurePath
from typing import Optional, Union

from ..constants import DEPLOYABLE_SUFFIXES, FULL_COMPILE_SUFFIXES

BUNDLE_PATTERN = re.compile(r"\w*\.resource")


class FileKind(Enum):
    """What a changed file means for the next deploy"""
    DEPLOYABLE = "deployable"
    BUNDLE_MEMBER = "bundle_member"
    IGNORED = "ignored"


@dataclass(frozen=True)
class Classification:
    """Outcome of classifying a project-relative path"""
    kind: FileKind
    bundle_name: Optional[str] = None
    requires_full_compile: bool = False

    @property
    def is_relevant(self) -> bool:
        return self.kind != FileKind.IGNORED


IGNORED = Classification(FileKind.IGNORED)


def classify(relative_path: Union[str, PurePath]) -> Classification:
    """
    Classify a path relative to the project root

    Args:
        relative_path: Path of the changed file below the project root

    Returns:
        Classification with the file kind and, for bundle members,
        the bundle directory name
    """
    path = str(relative_path).replace('\\', '/')

    if path.endswith(FULL_COMPILE_SUFFIXES):
        return Classification(FileKind.DEPLOYABLE, requires_full_compile=True)

    if path.endswith(DEPLOYABLE_SUFFIXES):
        return Classification(FileKind.DEPLOYABLE)

    match = BUNDLE_PATTERN.search(path)
    if match:
        return Classification(FileKind.BUNDLE_MEMBER, bundle_name=match.group(0))

    return IGNORED
