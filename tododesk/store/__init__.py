from .base import TodoStore, AsyncTodoStore
from .local import LocalTodoStore
from .sqlite import SqliteTodoStore
from .remote import RemoteTodoStore

__all__ = [
    "TodoStore",
    "AsyncTodoStore",
    "LocalTodoStore",
    "SqliteTodoStore",
    "RemoteTodoStore",
]
