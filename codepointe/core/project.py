"""Per-project collaborators shared by every batch of one project root"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from .diagnostics import DiagnosticCollection, DiagnosticsTranslator
from .notifier import Notifier
from .path_resolver import PathResolver
from ..models.config import CodePointeConfig
from ..plugins.hooks import HookLoader
from ..utils.process_utils import ProcessRunner


@dataclass
class ProjectContext:
    """Everything a deploy batch needs to know about its project"""
    paths: PathResolver
    runner: ProcessRunner
    hooks: HookLoader
    diagnostics: DiagnosticCollection
    notifier: Notifier = field(default_factory=Notifier)

    @property
    def root_path(self) -> Path:
        return self.paths.project_root

    @property
    def config(self) -> CodePointeConfig:
        return self.paths.config

    @property
    def translator(self) -> DiagnosticsTranslator:
        return DiagnosticsTranslator(self.diagnostics, self.root_path)

    @classmethod
    def create(cls,
               root_path: Union[str, Path],
               config: Optional[CodePointeConfig] = None,
               runner: Optional[ProcessRunner] = None,
               diagnostics: Optional[DiagnosticCollection] = None,
               notifier: Optional[Notifier] = None) -> 'ProjectContext':
        """Create a context, filling in default collaborators"""
        paths = PathResolver(root_path, config)
        return cls(
            paths=paths,
            runner=runner or ProcessRunner(),
            hooks=HookLoader(paths.get_hooks_file()),
            diagnostics=diagnostics if diagnostics is not None else DiagnosticCollection(),
            notifier=notifier or Notifier()
        )
