import logging
from typing import List
from ..models import TodoItem
from ..keyvalue import KeyValueStore
from ..exceptions import NotFoundError, StorageError
from .base import TodoStore


class LocalTodoStore(TodoStore):
    """
    Keeps the collection in memory and mirrors it, whole, into a
    KeyValueStore under one key after every mutation.
    """

    def __init__(self, kv: KeyValueStore, key="todos"):
        self.kv = kv
        self.key = key
        self.logger = logging.getLogger("TodoDesk.Store")
        self.todos = self._load()
        self.last_id = max(
            [self.kv.get(self._last_id_key, 0) or 0] + [t.id for t in self.todos]
        )
        self.logger.info(f"Loaded {len(self.todos)} todo(s) from key '{key}'")

    @property
    def _last_id_key(self):
        return f"{self.key}:last_id"

    def _load(self):
        raw = self.kv.get(self.key) or []
        try:
            return [TodoItem(**entry) for entry in raw]
        except (TypeError, ValueError) as e:
            raise StorageError(f"Stored todos under '{self.key}' are malformed: {e}") from e

    def _save(self, todos, last_id=None):
        mapping = {self.key: todos}
        if last_id is not None:
            mapping[self._last_id_key] = last_id
        self.kv.update(mapping)
        self.todos = todos
        if last_id is not None:
            self.last_id = last_id

    def list(self) -> List[TodoItem]:
        return list(self.todos)

    def add(self, text: str) -> TodoItem:
        new_id = self.last_id + 1
        todo = TodoItem(id=new_id, text=text)
        self._save(self.todos + [todo], last_id=new_id)
        self.logger.debug(f"Added todo {new_id}")
        return todo

    def toggle(self, todo_id: int) -> None:
        if not any(t.id == todo_id for t in self.todos):
            raise NotFoundError(f"Todo {todo_id} does not exist", todo_id=todo_id)
        self._save([t.toggled() if t.id == todo_id else t for t in self.todos])

    def remove(self, todo_id: int) -> None:
        remaining = [t for t in self.todos if t.id != todo_id]
        if len(remaining) == len(self.todos):
            return
        self._save(remaining)
