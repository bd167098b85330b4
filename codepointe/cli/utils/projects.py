"""Project root lookup for CLI arguments"""

from pathlib import Path
from typing import Iterable, List

from ...core.path_resolver import find_project_root


def resolve_project_roots(paths: Iterable[str]) -> List[Path]:
    """Map each path to its project root, dropping duplicates and misses

    Args:
        paths: Paths given on the command line (current directory if empty)

    Returns:
        Project roots in argument order
    """
    roots: List[Path] = []

    for path in (list(paths) or ['.']):
        root = find_project_root(path)
        if root is not None and root not in roots:
            roots.append(root)

    return roots
