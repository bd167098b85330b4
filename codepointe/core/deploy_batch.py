"""Deploy batch: one cycle's staged files and the pipelines that ship them"""

import logging
import shutil
from pathlib import Path
from typing import List, Set

from .project import ProjectContext
from ..api.exceptions import ProcessError
from ..constants import (
    ErrorCode,
    OperationType,
    OUTPUT_LOGGER_NAME,
    ZIP_ARGS,
    DEPLOY_COMMAND,
    CONVERT_COMMAND,
    MSG_DEPLOY_COMPLETE,
    MSG_DEPLOY_FAILED,
    MSG_COMPILE_COMPLETE,
    MSG_COMPILE_FAILED,
    MSG_DEPLOYING,
    MSG_DEPLOYING_PROJECT,
)
from ..models.result import DeployResult, OperationStatus
from ..plugins.hooks import HookPoint


class DeployBatch:
    """Accumulates bundles and files for a single deploy

    A batch is single-use: once run() or compile_project() starts, the
    scheduler drops it and stages later changes into a fresh batch.
    """

    def __init__(self, context: ProjectContext):
        """
        Initialize deploy batch

        Args:
            context: Collaborators of the owning project
        """
        self.context = context
        self.bundles: Set[str] = set()
        self.files: Set[str] = set()
        self.logger = logging.getLogger(__name__)
        self.output = logging.getLogger(OUTPUT_LOGGER_NAME)

    @property
    def root_path(self) -> Path:
        return self.context.root_path

    def add_bundle(self, bundle: str) -> None:
        self.bundles.add(bundle)

    def add_file(self, file_path: str) -> None:
        self.files.add(file_path)

    def file_list(self) -> List[str]:
        return sorted(self.files)

    def bundle_list(self) -> List[str]:
        return sorted(self.bundles)

    def __repr__(self) -> str:
        return (f"DeployBatch(root_path={str(self.root_path)!r}, "
                f"bundles={self.bundle_list()!r}, files={self.file_list()!r})")

    async def zip_bundles(self) -> None:
        """Archive every staged bundle into the static resources directory"""
        paths = self.context.paths
        config = self.context.config

        await self.context.hooks.run(HookPoint.BEFORE_ZIP_BUNDLE, self)

        if self.bundles:
            paths.get_static_resources_dir().mkdir(parents=True, exist_ok=True)

        for bundle in self.bundle_list():
            self.logger.debug(f"Zipping bundle {bundle}")
            await self.context.runner.run(
                config.zip_command,
                [*ZIP_ARGS, str(paths.get_bundle_archive(bundle)), '.'],
                cwd=paths.get_bundle_dir(bundle),
                echo=False
            )

        await self.context.hooks.run(HookPoint.AFTER_ZIP_BUNDLE, self)

    async def run(self) -> DeployResult:
        """
        Zip staged bundles and deploy staged files

        Failures never propagate: they are logged, shown to the user and,
        where the CLI reported structured problems, published as diagnostics.

        Returns:
            Result of the deploy
        """
        result = DeployResult(
            operation=OperationType.DEPLOY,
            root_path=str(self.root_path),
            files=self.file_list(),
            bundles=self.bundle_list()
        )
        translator = self.context.translator

        try:
            translator.clear()

            await self.zip_bundles()

            await self.context.hooks.run(HookPoint.BEFORE_DEPLOY_FILES, self)

            result.files = self.file_list()
            joined = ','.join(result.files)

            if result.files:
                async with self.context.notifier.progress(MSG_DEPLOYING.format(files=joined)):
                    await self.context.runner.run(
                        self.context.config.cli,
                        [DEPLOY_COMMAND, '--json', '-p', joined],
                        cwd=self.root_path
                    )
            else:
                self.output.info("no files to deploy")

            await self.context.hooks.run(HookPoint.AFTER_DEPLOY_FILES, self)

            self.output.info(MSG_DEPLOY_COMPLETE)
            return result.complete(OperationStatus.SUCCESS, MSG_DEPLOY_COMPLETE)

        except Exception as e:
            message = MSG_DEPLOY_FAILED.format(files=','.join(self.file_list()))

            self.output.error(message)
            self.context.notifier.show_error(message)

            if isinstance(e, ProcessError):
                try:
                    result.diagnostic_count = translator.publish(e.output)
                except Exception as publish_error:
                    self.output.error(f"failed to publish diagnostics: {publish_error}")
            else:
                self.output.error(str(e))

            result.add_error(getattr(e, 'error_code', None) or ErrorCode.DEPLOY_FAILED, str(e))
            return result.complete(OperationStatus.FAILED, message)

    async def compile_project(self) -> DeployResult:
        """
        Zip every bundle, convert the source tree and deploy all of it

        Returns:
            Result of the compile
        """
        paths = self.context.paths
        config = self.context.config
        result = DeployResult(operation=OperationType.COMPILE, root_path=str(self.root_path))

        try:
            self.context.translator.clear()

            for bundle in paths.list_bundles():
                self.add_bundle(bundle)
            result.bundles = self.bundle_list()

            await self.zip_bundles()

            self._remove_convert_dir()

            await self.context.hooks.run(HookPoint.BEFORE_PROJECT_COMPILE, self)

            await self.context.runner.run(
                config.cli,
                [CONVERT_COMMAND, '--rootdir', config.source_dir, '--outputdir', config.convert_dir],
                cwd=self.root_path
            )

            async with self.context.notifier.progress(MSG_DEPLOYING_PROJECT):
                await self.context.runner.run(
                    config.cli,
                    [DEPLOY_COMMAND, '-p', config.convert_dir],
                    cwd=self.root_path
                )

            self._remove_convert_dir()

            await self.context.hooks.run(HookPoint.AFTER_PROJECT_COMPILE, self)

            self.output.info(MSG_COMPILE_COMPLETE)
            return result.complete(OperationStatus.SUCCESS, MSG_COMPILE_COMPLETE)

        except Exception as e:
            self.output.error(MSG_COMPILE_FAILED)
            self.output.error(str(e))
            self.context.notifier.show_error(MSG_COMPILE_FAILED)

            result.add_error(getattr(e, 'error_code', None) or ErrorCode.COMPILE_FAILED, str(e))
            return result.complete(OperationStatus.FAILED, MSG_COMPILE_FAILED)

    def _remove_convert_dir(self) -> None:
        convert_dir = self.context.paths.get_convert_dir()
        if convert_dir.exists():
            self.logger.debug(f"Removing {convert_dir}")
            shutil.rmtree(convert_dir)
