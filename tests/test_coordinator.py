import asyncio
import pytest
from unittest.mock import MagicMock, patch

from tododesk.bridge import HostBridge
from tododesk.channel import ThreadChannel
from tododesk.coordinator import Coordinator, AsyncCoordinator
from tododesk.exceptions import StorageError, NotFoundError
from tododesk.loop import EventLoopThread
from tododesk.models import TodoItem
from tododesk.store import RemoteTodoStore
from tododesk.view import View, render_item


def markup(*todos):
    return "".join(render_item(t) for t in todos)


@pytest.fixture
def view(surface):
    return View(surface)


def test_construction_renders_current_list(local_store, view, surface):
    local_store.add("already here")
    Coordinator(local_store, view)
    surface.render_list.assert_called_once_with(markup(TodoItem(id=1, text="already here")))


def test_gesture_scenario(local_store, view, surface):
    Coordinator(local_store, view)

    assert view.submit("buy milk") is True
    surface.render_list.assert_called_with(markup(TodoItem(id=1, text="buy milk")))

    assert view.click("item", 1) is True
    surface.render_list.assert_called_with(markup(TodoItem(id=1, text="buy milk", completed=True)))

    assert view.click("close", 1) is True
    surface.render_list.assert_called_with("")


def test_empty_submit_never_reaches_store(view, surface):
    store = MagicMock()
    store.list.return_value = []
    Coordinator(store, view)

    view.submit("   ")
    store.add.assert_not_called()
    assert surface.render_list.call_count == 1


def test_handler_order_is_mutate_list_render(view, surface):
    calls = []
    store = MagicMock()
    store.add.side_effect = lambda text: calls.append("add")
    store.list.side_effect = lambda: calls.append("list") or []
    surface.render_list.side_effect = lambda html: calls.append("render")

    Coordinator(store, view)
    calls.clear()
    view.submit("x")
    assert calls == ["add", "list", "render"]


def test_store_failure_keeps_previous_render(view, surface):
    store = MagicMock()
    store.list.return_value = [TodoItem(id=1, text="kept")]
    store.add.side_effect = StorageError("disk full")

    Coordinator(store, view)
    assert view.submit("lost") is False

    surface.render_list.assert_called_once()
    surface.show_error.assert_called_once_with("disk full")
    surface.clear_input.assert_not_called()


def test_successful_add_clears_input(local_store, view, surface):
    Coordinator(local_store, view)
    assert view.submit("buy milk") is True
    surface.clear_input.assert_called_once()


def test_failed_toggle_leaves_input_alone(local_store, view, surface):
    Coordinator(local_store, view)
    view.click("item", 5)
    surface.clear_input.assert_not_called()


def test_toggle_of_missing_id_is_reported(local_store, view, surface):
    Coordinator(local_store, view)
    assert view.click("item", 5) is False
    surface.show_error.assert_called_once()
    assert "5" in surface.show_error.call_args[0][0]


def test_initial_list_failure_renders_empty_and_reports(view, surface):
    store = MagicMock()
    store.list.side_effect = StorageError("unreadable")
    Coordinator(store, view)
    surface.render_list.assert_called_once_with("")
    surface.show_error.assert_called_once_with("unreadable")


@pytest.fixture
def runner():
    r = EventLoopThread()
    yield r
    r.stop()


@pytest.fixture
def remote_store(sqlite_store):
    return RemoteTodoStore(ThreadChannel(HostBridge(sqlite_store)))


def test_async_gesture_scenario(remote_store, view, surface, runner):
    coordinator = AsyncCoordinator(remote_store, view, runner)
    runner.run(coordinator.start(), timeout=5)
    surface.render_list.assert_called_once_with("")

    assert view.submit("buy milk").result(timeout=5) is True
    surface.render_list.assert_called_with(markup(TodoItem(id=1, text="buy milk")))

    assert view.click("item", 1).result(timeout=5) is True
    surface.render_list.assert_called_with(markup(TodoItem(id=1, text="buy milk", completed=True)))

    assert view.click("close", 1).result(timeout=5) is True
    surface.render_list.assert_called_with("")


def test_async_missing_id_keeps_render(remote_store, view, surface, runner):
    coordinator = AsyncCoordinator(remote_store, view, runner)
    runner.run(coordinator.start(), timeout=5)
    view.submit("only").result(timeout=5)
    renders = surface.render_list.call_count

    assert view.click("item", 99).result(timeout=5) is False
    assert surface.render_list.call_count == renders
    surface.show_error.assert_called_once()


def test_async_list_waits_for_mutation(view, surface, runner):
    calls = []

    class SlowStore:
        async def list(self):
            calls.append("list")
            return []

        async def add(self, text):
            await asyncio.sleep(0.05)
            calls.append("add")
            return TodoItem(id=1, text=text)

    coordinator = AsyncCoordinator(SlowStore(), view, runner)
    runner.run(coordinator.start(), timeout=5)
    calls.clear()
    view.submit("x").result(timeout=5)
    assert calls == ["add", "list"]


def test_async_initial_failure(view, surface, runner):
    store = MagicMock()

    async def broken():
        raise NotFoundError("gone")

    store.list.side_effect = broken
    coordinator = AsyncCoordinator(store, view, runner)
    runner.run(coordinator.start(), timeout=5)
    surface.render_list.assert_called_once_with("")
    surface.show_error.assert_called_once_with("gone")


def test_async_add_clears_input_only_after_success(view, surface, runner):
    class FlakyStore:
        def __init__(self):
            self.fail = True

        async def list(self):
            return []

        async def add(self, text):
            if self.fail:
                raise StorageError("disk full")
            return TodoItem(id=1, text=text)

    store = FlakyStore()
    coordinator = AsyncCoordinator(store, view, runner)
    runner.run(coordinator.start(), timeout=5)

    assert view.submit("lost").result(timeout=5) is False
    surface.clear_input.assert_not_called()

    store.fail = False
    assert view.submit("kept").result(timeout=5) is True
    surface.clear_input.assert_called_once()


def test_async_unexpected_error_is_logged(view, surface, runner):
    class BrokenStore:
        async def list(self):
            return []

        async def add(self, text):
            raise RuntimeError("bad row")

    coordinator = AsyncCoordinator(BrokenStore(), view, runner)
    runner.run(coordinator.start(), timeout=5)

    with patch.object(coordinator, "logger") as logger:
        future = view.submit("x")
        with pytest.raises(RuntimeError, match="bad row"):
            future.result(timeout=5)

    logger.exception.assert_called_once()
    assert "add" in logger.exception.call_args[0][0]
    surface.show_error.assert_not_called()
    surface.clear_input.assert_not_called()
