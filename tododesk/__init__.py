from .models import TodoItem
from .exceptions import (
    TodoDeskError,
    ConfigError,
    ValidationError,
    NotFoundError,
    StorageError,
    BridgeError,
)
from .keyvalue import KeyValueStore
from .store import TodoStore, AsyncTodoStore, LocalTodoStore, SqliteTodoStore, RemoteTodoStore
from .view import View
from .coordinator import Coordinator, AsyncCoordinator
from .application import App

__version__ = "0.1.0"
