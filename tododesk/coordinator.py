import logging
from .exceptions import TodoDeskError


class Coordinator:
    """
    Wires View hooks to a synchronous store. Every handler runs
    mutation -> list() -> render(); a store failure is logged and shown,
    and the last rendered list stays on screen.
    """

    def __init__(self, store, view):
        self.store = store
        self.view = view
        self.logger = logging.getLogger("TodoDesk.Coordinator")

        self.view.render(self._initial_items())

        self.view.on_submit(self.handle_add)
        self.view.on_activate(self.handle_toggle)
        self.view.on_delete(self.handle_remove)

    def _initial_items(self):
        try:
            return self.store.list()
        except TodoDeskError as e:
            self._report("list", e)
            return []

    def _report(self, op, error):
        self.logger.error(f"Store {op} failed: {error}")
        self.view.show_error(str(error))

    def _apply(self, op, mutation, *args):
        try:
            mutation(*args)
            items = self.store.list()
        except TodoDeskError as e:
            self._report(op, e)
            return False
        self.view.render(items)
        return True

    def handle_add(self, text):
        self.logger.debug(f"Handling add todo: {text}")
        ok = self._apply("add", self.store.add, text)
        if ok:
            self.view.clear_input()
        return ok

    def handle_toggle(self, todo_id):
        return self._apply("toggle", self.store.toggle, todo_id)

    def handle_remove(self, todo_id):
        return self._apply("remove", self.store.remove, todo_id)


class AsyncCoordinator:
    """
    Coordinator for awaitable stores. Hooks fire on UI threads and hand their
    handler coroutine to ``runner`` (an EventLoopThread); inside a handler each
    step is awaited before the next one is issued.
    """

    def __init__(self, store, view, runner):
        self.store = store
        self.view = view
        self.runner = runner
        self.logger = logging.getLogger("TodoDesk.Coordinator")

    async def start(self):
        try:
            items = await self.store.list()
        except TodoDeskError as e:
            self._report("list", e)
            items = []
        self.view.render(items)

        self.view.on_submit(lambda text: self._schedule("add", self.handle_add(text)))
        self.view.on_activate(lambda todo_id: self._schedule("toggle", self.handle_toggle(todo_id)))
        self.view.on_delete(lambda todo_id: self._schedule("remove", self.handle_remove(todo_id)))
        return self

    def _schedule(self, op, coro):
        return self.runner.submit(self._logged(op, coro))

    async def _logged(self, op, coro):
        # Callers on UI threads drop the future, so unexpected errors are logged here
        try:
            return await coro
        except Exception as e:
            self.logger.exception(f"Unexpected error in {op} handler: {e}")
            raise

    def _report(self, op, error):
        self.logger.error(f"Store {op} failed: {error}")
        self.view.show_error(str(error))

    async def _apply(self, op, mutation, *args):
        try:
            await mutation(*args)
            items = await self.store.list()
        except TodoDeskError as e:
            self._report(op, e)
            return False
        self.view.render(items)
        return True

    async def handle_add(self, text):
        self.logger.debug(f"Handling add todo: {text}")
        ok = await self._apply("add", self.store.add, text)
        if ok:
            self.view.clear_input()
        return ok

    async def handle_toggle(self, todo_id):
        return await self._apply("toggle", self.store.toggle, todo_id)

    async def handle_remove(self, todo_id):
        return await self._apply("remove", self.store.remove, todo_id)
