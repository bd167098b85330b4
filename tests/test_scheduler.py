import asyncio

import pytest

from codepointe.core.classifier import FileKind
from codepointe.core.scheduler import DebounceScheduler, SchedulerState

QUIET = 0.15


@pytest.mark.asyncio
async def test_changes_within_window_share_one_deploy(context, runner, project):
    scheduler = DebounceScheduler(context)

    scheduler.notify(project / "src/classes/Foo.cls")
    await asyncio.sleep(0.01)
    scheduler.notify(project / "src/classes/Bar.cls")
    await asyncio.sleep(QUIET)
    await scheduler.drain()

    calls = runner.deploy_calls()
    assert len(calls) == 1
    assert calls[0].args[-1] == "src/classes/Bar.cls,src/classes/Foo.cls"
    assert scheduler.state == SchedulerState.IDLE


@pytest.mark.asyncio
async def test_change_after_window_starts_new_batch(context, runner, project):
    scheduler = DebounceScheduler(context)

    scheduler.notify(project / "src/classes/Foo.cls")
    await asyncio.sleep(QUIET)
    scheduler.notify(project / "src/classes/Bar.cls")
    await asyncio.sleep(QUIET)
    await scheduler.drain()

    assert [c.args[-1] for c in runner.deploy_calls()] == [
        "src/classes/Foo.cls",
        "src/classes/Bar.cls",
    ]


@pytest.mark.asyncio
async def test_each_relevant_change_restarts_the_timer(context, runner, project):
    scheduler = DebounceScheduler(context)
    scheduler.delay = 0.3

    for _ in range(4):
        scheduler.notify(project / "src/classes/Foo.cls")
        await asyncio.sleep(0.1)

    assert runner.calls == []
    await asyncio.sleep(0.4)
    await scheduler.drain()
    assert len(runner.deploy_calls()) == 1


@pytest.mark.asyncio
async def test_ignored_change_does_not_create_batch(context, runner, project):
    scheduler = DebounceScheduler(context)

    classification = scheduler.notify(project / "notes.txt")
    await asyncio.sleep(QUIET)

    assert classification.kind == FileKind.IGNORED
    assert scheduler.state == SchedulerState.IDLE
    assert runner.calls == []


@pytest.mark.asyncio
async def test_path_outside_project_is_ignored(context, runner, tmp_path):
    scheduler = DebounceScheduler(context)

    classification = scheduler.notify(tmp_path / "elsewhere" / "Foo.cls")

    assert classification.kind == FileKind.IGNORED
    assert scheduler.pending_batch is None


@pytest.mark.asyncio
async def test_bundle_member_stages_bundle_and_archive(context, project):
    scheduler = DebounceScheduler(context)

    scheduler.notify(project / "resource-bundles/MyBundle.resource/app.js")

    batch = scheduler.pending_batch
    assert batch.bundles == {"MyBundle.resource"}
    assert batch.files == {"src/staticresources/MyBundle.resource"}
    scheduler.close()


@pytest.mark.asyncio
async def test_full_compile_is_sticky_until_flush(context, runner, project):
    scheduler = DebounceScheduler(context)

    scheduler.notify(project / "src/objects/Account.object")
    scheduler.notify(project / "src/classes/Foo.cls")
    assert scheduler.full_compile is True

    await asyncio.sleep(QUIET)
    await scheduler.drain()

    assert "force:mdapi:convert" in runner.names()
    assert scheduler.full_compile is False

    runner.calls.clear()
    scheduler.notify(project / "src/classes/Foo.cls")
    await asyncio.sleep(QUIET)
    await scheduler.drain()

    assert runner.names() == ["force:source:deploy"]


@pytest.mark.asyncio
async def test_new_batch_accumulates_while_pipeline_runs(context, runner, project):
    release = asyncio.Event()

    async def hold_deploy(call):
        if call.subcommand == "force:source:deploy" and not release.is_set():
            await release.wait()

    runner.on_call = hold_deploy
    scheduler = DebounceScheduler(context)

    scheduler.notify(project / "src/classes/Foo.cls")
    await asyncio.sleep(QUIET)
    assert scheduler.in_flight == 1
    assert scheduler.state == SchedulerState.IDLE

    scheduler.notify(project / "src/classes/Bar.cls")
    assert scheduler.state == SchedulerState.ACCUMULATING
    assert scheduler.pending_batch.files == {"src/classes/Bar.cls"}

    release.set()
    await asyncio.sleep(QUIET)
    await scheduler.drain()

    assert [c.args[-1] for c in runner.deploy_calls()] == [
        "src/classes/Foo.cls",
        "src/classes/Bar.cls",
    ]


@pytest.mark.asyncio
async def test_on_result_receives_pipeline_results(context, runner, project):
    results = []
    runner.fail("force:source:deploy", output="boom")
    scheduler = DebounceScheduler(context, on_result=results.append)

    scheduler.notify(project / "src/classes/Foo.cls")
    task = scheduler.flush_now()
    await task
    await scheduler.drain()

    assert len(results) == 1
    assert results[0].is_failed
    assert results[0].files == ["src/classes/Foo.cls"]


@pytest.mark.asyncio
async def test_flush_now_without_pending_batch(context):
    scheduler = DebounceScheduler(context)

    assert scheduler.flush_now() is None


@pytest.mark.asyncio
async def test_close_discards_pending_batch(context, runner, project):
    scheduler = DebounceScheduler(context)

    scheduler.notify(project / "src/classes/Foo.cls")
    scheduler.close()
    await asyncio.sleep(QUIET)

    assert scheduler.state == SchedulerState.IDLE
    assert runner.calls == []
