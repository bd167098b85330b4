"""
Shared fixtures: a fake process runner and a temporary project tree.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import pytest

from codepointe.api.exceptions import ProcessError
from codepointe.core.diagnostics import DiagnosticCollection
from codepointe.core.project import ProjectContext
from codepointe.models.config import CodePointeConfig


@dataclass
class Call:
    command: str
    args: List[str]
    cwd: Optional[Path]
    echo: bool

    @property
    def subcommand(self) -> str:
        return self.args[0] if self.args else ""


class FakeRunner:
    """Records invocations instead of starting processes"""

    def __init__(self):
        self.calls: List[Call] = []
        self._failures = {}
        self.on_call = None

    def fail(self, name: str, output: str = "", exit_code: int = 1) -> None:
        """Make calls whose command or first argument equals name fail"""
        self._failures[name] = (exit_code, output)

    async def run(self, command, args=(), cwd=None, echo=True):
        call = Call(command, list(args), Path(cwd) if cwd else None, echo)
        self.calls.append(call)

        if self.on_call is not None:
            await self.on_call(call)

        for name, (exit_code, output) in self._failures.items():
            if name in (call.command, call.subcommand):
                raise ProcessError([command, *args], exit_code, output)

        return ""

    def names(self) -> List[str]:
        """Command for zip calls, CLI subcommand otherwise"""
        return [c.command if c.command == "zip" else c.subcommand for c in self.calls]

    def deploy_calls(self) -> List[Call]:
        return [c for c in self.calls if c.subcommand == "force:source:deploy"]


@pytest.fixture
def runner():
    return FakeRunner()


@pytest.fixture
def project(tmp_path):
    """A project root with one class, one bundle and one hidden bundle entry"""
    root = tmp_path / "project"
    (root / ".sfdx").mkdir(parents=True)
    (root / "src" / "classes").mkdir(parents=True)
    (root / "src" / "staticresources").mkdir(parents=True)
    (root / "src" / "classes" / "Foo.cls").write_text("public class Foo {}")

    bundle = root / "resource-bundles" / "MyBundle.resource"
    bundle.mkdir(parents=True)
    (bundle / "app.js").write_text("console.log('hi');")
    (root / "resource-bundles" / ".DS_Store").mkdir()

    return root.resolve()


@pytest.fixture
def diagnostics():
    return DiagnosticCollection()


@pytest.fixture
def config():
    return CodePointeConfig(debounce_delay=0.05)


@pytest.fixture
def context(project, runner, diagnostics, config):
    return ProjectContext.create(project, config=config, runner=runner, diagnostics=diagnostics)


@pytest.fixture
def write_hooks(project):
    """Write a hook script into the project root"""
    def write(source: str) -> Path:
        path = project / ".codepointe.py"
        path.write_text(source)
        return path
    return write
