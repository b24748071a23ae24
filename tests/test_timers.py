import asyncio

import pytest

from healthsync.config import settings
from healthsync.core.timers import PeriodicTask


def test_ticks_until_stopped():
    calls = []

    async def scenario():
        task = PeriodicTask("tick", 0.01, lambda: calls.append(1))
        assert task.start() is True
        assert task.start() is False
        await asyncio.sleep(0.06)
        assert task.stop() is True
        assert task.stop() is False
        seen = len(calls)
        await asyncio.sleep(0.03)
        return seen, task.is_running

    seen, running = asyncio.run(scenario())
    assert seen >= 2
    assert len(calls) == seen
    assert running is False


def test_fire_immediately():
    calls = []

    async def scenario():
        task = PeriodicTask("now", 10, lambda: calls.append(1), fire_immediately=True)
        task.start()
        count = len(calls)
        task.stop()
        return count

    assert asyncio.run(scenario()) == 1


def test_callback_can_stop_its_own_task():
    calls = []

    async def scenario():
        def callback():
            calls.append(1)
            if len(calls) == 3:
                task.stop()

        task = PeriodicTask("self-stop", 0.01, callback)
        task.start()
        await asyncio.sleep(0.1)
        return task.is_running

    assert asyncio.run(scenario()) is False
    assert len(calls) == 3


def test_callback_errors_are_logged_and_timer_survives():
    calls = []

    def callback():
        calls.append(1)
        raise RuntimeError("boom")

    async def scenario():
        task = PeriodicTask("flaky", 0.01, callback)
        task.start()
        await asyncio.sleep(0.05)
        task.stop()

    asyncio.run(scenario())
    assert len(calls) >= 2
    assert "[timer:flaky] callback failed: boom" in settings.log_path.read_text()


def test_restart_after_stop():
    async def scenario():
        task = PeriodicTask("restart", 0.01, lambda: None)
        task.start()
        task.stop()
        restarted = task.start()
        running = task.is_running
        task.stop()
        return restarted, running

    assert asyncio.run(scenario()) == (True, True)


def test_rejects_non_positive_interval():
    with pytest.raises(ValueError):
        PeriodicTask("bad", 0, lambda: None)


def test_start_outside_event_loop_does_not_fire():
    calls = []
    task = PeriodicTask("no-loop", 1, lambda: calls.append(1), fire_immediately=True)
    with pytest.raises(RuntimeError):
        task.start()
    assert calls == []
    assert task.is_running is False


def test_callback_error_with_unwritable_log(tmp_path):
    (tmp_path / "logs").write_text("x")
    calls = []

    def callback():
        calls.append(1)
        raise RuntimeError("boom")

    async def scenario():
        task = PeriodicTask("flaky", 0.01, callback)
        task.start()
        await asyncio.sleep(0.05)
        running = task.is_running
        task.stop()
        return running

    assert asyncio.run(scenario()) is True
    assert len(calls) >= 2
