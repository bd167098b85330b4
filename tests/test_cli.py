import pytest
import yaml
from click.testing import CliRunner

from codepointe.cli.main import Context, cli
from codepointe.plugins.hooks import HookPoint


@pytest.fixture
def invoke(runner, monkeypatch):
    monkeypatch.delenv("CODEPOINTE_CLI", raising=False)
    monkeypatch.delenv("CODEPOINTE_DEBOUNCE", raising=False)

    def run(*args):
        return CliRunner().invoke(cli, list(args), obj=Context(runner=runner))
    return run


def test_version(invoke):
    result = invoke("--version")

    assert result.exit_code == 0
    assert "1.0.0" in result.output


def test_compile_success(invoke, runner, project):
    result = invoke("compile", str(project))

    assert result.exit_code == 0, result.output
    assert runner.names() == ["zip", "force:mdapi:convert", "force:source:deploy"]
    assert "project compile complete" in result.output


def test_compile_failure_exits_non_zero(invoke, runner, project):
    runner.fail("force:mdapi:convert", output="ERROR: bad metadata")

    result = invoke("compile", str(project))

    assert result.exit_code == 1
    assert "force:source:deploy" not in runner.names()


def test_compile_outside_project(invoke, runner, tmp_path):
    result = invoke("compile", str(tmp_path))

    assert result.exit_code == 1
    assert "No project found" in result.output
    assert runner.calls == []


def test_compile_from_nested_directory(invoke, runner, project):
    result = invoke("compile", str(project / "src" / "classes"))

    assert result.exit_code == 0, result.output
    assert runner.calls[-1].cwd == project


def test_hooks_init_and_list(invoke, project):
    result = invoke("--project-root", str(project), "hooks", "init")

    assert result.exit_code == 0, result.output
    assert (project / ".codepointe.py").exists()

    result = invoke("--project-root", str(project), "hooks", "list")

    assert result.exit_code == 0
    for point in HookPoint:
        assert point.value in result.output


def test_hooks_init_refuses_to_overwrite(invoke, project):
    (project / ".codepointe.py").write_text("# mine\n")

    result = invoke("--project-root", str(project), "hooks", "init")

    assert result.exit_code == 1
    assert (project / ".codepointe.py").read_text() == "# mine\n"


def test_hooks_list_reports_broken_script(invoke, project):
    (project / ".codepointe.py").write_text("def beforeZipBundle(:\n")

    result = invoke("--project-root", str(project), "hooks", "list")

    assert result.exit_code == 1


def test_config_init_then_show(invoke, project):
    result = invoke("--project-root", str(project), "config", "init")

    assert result.exit_code == 0, result.output
    saved = yaml.safe_load((project / ".codepointe.yaml").read_text())
    assert saved["cli"] == "sfdx"

    result = invoke("--project-root", str(project), "config", "show")

    assert result.exit_code == 0
    assert "debounce_delay" in result.output


def test_invalid_config_is_reported(invoke, project):
    (project / ".codepointe.yaml").write_text("debounce_delay: -5\n")

    result = invoke("--project-root", str(project), "config", "show")

    assert result.exit_code == 1
    assert "Failed to load configuration" in result.output


def test_command_requiring_project_outside_one(invoke, tmp_path):
    result = invoke("--project-root", str(tmp_path), "config", "show")

    assert result.exit_code == 1
    assert "No project root found" in result.output


def test_doctor_reports_missing_cli(invoke, project):
    (project / ".codepointe.yaml").write_text("cli: codepointe-no-such-cli\n")

    result = invoke("--project-root", str(project), "doctor")

    assert result.exit_code == 1
    assert "check(s) failed" in result.output


def test_doctor_passes(invoke, project, monkeypatch):
    monkeypatch.setattr("codepointe.cli.commands.doctor.shutil.which",
                        lambda command: f"/usr/bin/{command}")

    result = invoke("--project-root", str(project), "doctor")

    assert result.exit_code == 0, result.output
    assert "All checks passed" in result.output
