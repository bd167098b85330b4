"""Full project compile across project roots"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from .config_service import ConfigService
from ..constants import OUTPUT_LOGGER_NAME, OUTPUT_SEPARATOR, PROJECT_MARKER
from ..core.deploy_batch import DeployBatch
from ..core.diagnostics import DiagnosticCollection
from ..core.notifier import Notifier
from ..core.path_resolver import is_project_root
from ..core.project import ProjectContext
from ..models.result import DeployResult
from ..utils.process_utils import ProcessRunner


class CompileService:
    """Runs the full compile pipeline for every project root given"""

    def __init__(self,
                 runner: Optional[ProcessRunner] = None,
                 diagnostics: Optional[DiagnosticCollection] = None,
                 notifier: Optional[Notifier] = None):
        self.runner = runner or ProcessRunner()
        self.diagnostics = diagnostics if diagnostics is not None else DiagnosticCollection()
        self.notifier = notifier or Notifier()
        self.logger = logging.getLogger("CompileService")
        self.output = logging.getLogger(OUTPUT_LOGGER_NAME)

    def create_context(self, root: Path) -> ProjectContext:
        config = ConfigService(root).load_config()
        return ProjectContext.create(
            root,
            config=config,
            runner=self.runner,
            diagnostics=self.diagnostics,
            notifier=self.notifier
        )

    async def compile_roots(self, roots: Iterable[Path]) -> List[DeployResult]:
        """
        Compile every root holding the project marker, one after another

        Args:
            roots: Candidate project root directories

        Returns:
            One result per compiled project
        """
        results = []

        for root in roots:
            root = Path(root).resolve()
            if not is_project_root(root, PROJECT_MARKER):
                self.logger.info(f"Skipping {root}: no {PROJECT_MARKER} directory")
                continue

            self.output.info(OUTPUT_SEPARATOR)
            self.output.info("compiling project")

            batch = DeployBatch(self.create_context(root))
            results.append(await batch.compile_project())

        return results
