"""Lifecycle hooks loaded from a user script in the project root"""

import importlib.util
import inspect
import logging
import re
from enum import Enum
from pathlib import Path
from types import ModuleType
from typing import Any, Callable, Dict, Optional, Tuple, Union

from ..api.exceptions import HookError
from ..constants import OUTPUT_LOGGER_NAME


class HookPoint(Enum):
    """Available hook points in the deploy pipeline"""
    BEFORE_ZIP_BUNDLE = "beforeZipBundle"
    AFTER_ZIP_BUNDLE = "afterZipBundle"
    BEFORE_DEPLOY_FILES = "beforeDeployFiles"
    AFTER_DEPLOY_FILES = "afterDeployFiles"
    BEFORE_PROJECT_COMPILE = "beforeProjectCompile"
    AFTER_PROJECT_COMPILE = "afterProjectCompile"

    @property
    def alias(self) -> str:
        """snake_case spelling, e.g. before_deploy_files"""
        return re.sub(r'(?<!^)(?=[A-Z])', '_', self.value).lower()


class HookLoader:
    """Load the hook script, reusing the compiled module while the file is unchanged"""

    def __init__(self, script_path: Union[str, Path]):
        """
        Initialize hook loader

        Args:
            script_path: Path of the user hook script
        """
        self.script_path = Path(script_path)
        self.logger = logging.getLogger("HookLoader")
        self.output = logging.getLogger(OUTPUT_LOGGER_NAME)
        self._signature: Optional[Tuple[int, int]] = None
        self._hooks: Dict[str, Callable] = {}

    def invalidate(self) -> None:
        """Drop the cached module so the next call reloads it"""
        self._signature = None
        self._hooks = {}

    def load(self) -> Dict[str, Callable]:
        """
        Load hook callables from the script

        Returns:
            Mapping from hook name to callable; empty if the script is missing

        Raises:
            HookError: The script exists but could not be executed
        """
        try:
            stat = self.script_path.stat()
        except FileNotFoundError:
            self.invalidate()
            return {}

        signature = (stat.st_mtime_ns, stat.st_size)
        if signature == self._signature:
            return self._hooks

        self.logger.debug(f"Loading hook script {self.script_path}")

        try:
            module = self._exec_module()
        except Exception as e:
            self.invalidate()
            self.output.error(f"failed to load {self.script_path.name}: {e}")
            raise HookError(self.script_path.name, str(e)) from e

        hooks = {}
        for point in HookPoint:
            func = getattr(module, point.value, None) or getattr(module, point.alias, None)
            if callable(func):
                hooks[point.value] = func

        self._signature = signature
        self._hooks = hooks
        return hooks

    def _exec_module(self) -> ModuleType:
        spec = importlib.util.spec_from_file_location(
            f"codepointe_hooks_{abs(hash(str(self.script_path)))}",
            self.script_path
        )
        if spec is None or spec.loader is None:
            raise ImportError(f"Cannot load {self.script_path}")

        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        return module

    def get(self, hook_point: HookPoint) -> Optional[Callable]:
        """Get the callable registered for a hook point, if any"""
        return self.load().get(hook_point.value)

    async def run(self, hook_point: HookPoint, payload: Any) -> bool:
        """
        Invoke a hook if the script defines it

        Args:
            hook_point: Hook to run
            payload: Object handed to the hook (the current batch)

        Returns:
            True if a hook ran, False if none was defined

        Raises:
            HookError: The script failed to load or the hook raised
        """
        handler = self.get(hook_point)
        if handler is None:
            return False

        self.logger.debug(f"Running hook {hook_point.value}")

        try:
            result = handler(payload)
            if inspect.isawaitable(result):
                await result
        except Exception as e:
            self.output.error(f"{hook_point.value} failed: {e}")
            raise HookError(hook_point.value, str(e)) from e

        return True
