import asyncio

import pytest
from watchfiles import Change

from codepointe.core.classifier import FileKind
from codepointe.core.scheduler import SchedulerState
from codepointe.services.watch_service import WatchService


@pytest.fixture
def service(project, runner, diagnostics):
    (project / ".codepointe.yaml").write_text("debounce_delay: 0.05\n")
    return WatchService([project], runner=runner, diagnostics=diagnostics)


@pytest.mark.asyncio
async def test_saved_file_is_routed_to_project_scheduler(service, project):
    classification = service.handle_change(Change.modified, project / "src/classes/Foo.cls")

    assert classification.kind == FileKind.DEPLOYABLE
    scheduler = service.schedulers[project]
    assert scheduler.pending_batch.files == {"src/classes/Foo.cls"}
    await service.shutdown()


@pytest.mark.asyncio
async def test_scheduler_uses_project_config(service, project):
    service.handle_change(Change.added, project / "src/classes/Foo.cls")

    assert service.schedulers[project].delay == 0.05
    await service.shutdown()


@pytest.mark.asyncio
async def test_deleted_files_are_skipped(service, project):
    assert service.handle_change(Change.deleted, project / "src/classes/Foo.cls") is None
    assert service.schedulers == {}


@pytest.mark.asyncio
async def test_directories_are_skipped(service, project):
    assert service.handle_change(Change.added, project / "src/classes") is None


@pytest.mark.asyncio
async def test_files_outside_any_project_are_skipped(service, tmp_path):
    stray = tmp_path / "Stray.cls"
    stray.write_text("")

    assert service.handle_change(Change.modified, stray) is None


@pytest.mark.asyncio
async def test_tool_directories_are_skipped(service, project):
    git_file = project / ".git" / "HEAD.cls"
    git_file.parent.mkdir()
    git_file.write_text("")

    assert service.handle_change(Change.modified, git_file) is None


@pytest.mark.asyncio
async def test_generated_bundle_archive_is_skipped(service, project):
    archive = project / "src/staticresources/MyBundle.resource"
    archive.write_bytes(b"PK")

    assert service.handle_change(Change.modified, archive) is None


@pytest.mark.asyncio
async def test_convert_output_is_skipped(service, project):
    converted = project / ".codepointe-convert" / "classes" / "Foo.cls"
    converted.parent.mkdir(parents=True)
    converted.write_text("")

    assert service.handle_change(Change.added, converted) is None


@pytest.mark.asyncio
async def test_projects_get_separate_schedulers(service, project, tmp_path):
    other = tmp_path / "other"
    (other / ".sfdx").mkdir(parents=True)
    (other / "src" / "classes").mkdir(parents=True)
    (other / "src" / "classes" / "Bar.cls").write_text("")

    service.handle_change(Change.modified, project / "src/classes/Foo.cls")
    service.handle_change(Change.modified, other / "src/classes/Bar.cls")

    assert set(service.schedulers) == {project, other.resolve()}
    await service.shutdown()


@pytest.mark.asyncio
async def test_shutdown_flushes_pending_batch(service, project, runner):
    service.handle_change(Change.modified, project / "src/classes/Foo.cls")
    await asyncio.sleep(0.15)
    service.handle_change(Change.modified, project / "src/classes/Bar.cls")

    await service.shutdown()

    assert [c.args[-1] for c in runner.deploy_calls()] == [
        "src/classes/Foo.cls",
        "src/classes/Bar.cls",
    ]
    assert service.schedulers[project].state == SchedulerState.IDLE
    assert service.schedulers[project].in_flight == 0
