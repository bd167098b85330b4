"""Path resolution module for codepointe"""

from pathlib import Path
from typing import List, Optional, Union

from ..constants import PROJECT_MARKER, HIDDEN_PREFIX
from ..models.config import CodePointeConfig


def find_project_root(start_path: Union[str, Path],
                      marker: str = PROJECT_MARKER) -> Optional[Path]:
    """Find the nearest ancestor holding the project marker directory

    Args:
        start_path: File or directory to start from
        marker: Name of the marker directory

    Returns:
        Project root path or None if not found
    """
    current = Path(start_path).resolve()

    while True:
        if (current / marker).is_dir():
            return current
        if current == current.parent:
            return None
        current = current.parent


def is_project_root(path: Union[str, Path], marker: str = PROJECT_MARKER) -> bool:
    """Check whether path directly holds the project marker directory"""
    return (Path(path) / marker).is_dir()


class PathResolver:
    """Resolves paths within a project"""

    def __init__(self, project_root: Union[str, Path], config: Optional[CodePointeConfig] = None):
        """Initialize path resolver

        Args:
            project_root: Root directory of the project
            config: Project configuration (defaults apply when omitted)
        """
        self.project_root = Path(project_root).resolve()
        self.config = config or CodePointeConfig()

    def relative(self, path: Union[str, Path]) -> Optional[str]:
        """Get the project-relative form of path, or None if outside the project"""
        try:
            return Path(path).resolve().relative_to(self.project_root).as_posix()
        except ValueError:
            return None

    def get_source_dir(self) -> Path:
        return self.project_root / self.config.source_dir

    def get_static_resources_dir(self) -> Path:
        return self.project_root / self.config.static_resources_dir

    def get_resource_bundles_dir(self) -> Path:
        return self.project_root / self.config.resource_bundles_dir

    def get_bundle_dir(self, bundle: str) -> Path:
        """Get source directory of a resource bundle"""
        return self.get_resource_bundles_dir() / bundle

    def get_bundle_archive(self, bundle: str) -> Path:
        """Get path of the archive built from a resource bundle"""
        return self.get_static_resources_dir() / bundle

    def get_bundle_archive_relative(self, bundle: str) -> str:
        """Get project-relative path of a bundle archive"""
        return f"{self.config.static_resources_dir.rstrip('/')}/{bundle}"

    def get_convert_dir(self) -> Path:
        """Get the temporary directory receiving converted sources"""
        return self.project_root / self.config.convert_dir

    def get_hooks_file(self) -> Path:
        return self.project_root / self.config.hooks_file

    def list_bundles(self) -> List[str]:
        """List bundle directories, skipping hidden entries

        Returns:
            Sorted bundle names; empty if the bundles directory is missing
        """
        bundles_dir = self.get_resource_bundles_dir()
        if not bundles_dir.is_dir():
            return []

        return sorted(
            entry.name for entry in bundles_dir.iterdir()
            if entry.is_dir() and not entry.name.startswith(HIDDEN_PREFIX)
        )
