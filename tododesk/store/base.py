from abc import ABC, abstractmethod
from typing import List
from ..models import TodoItem


class TodoStore(ABC):
    """
    Synchronous store contract shared by every in-process backend.

    ``toggle`` raises NotFoundError for an unknown id; ``remove`` of an
    unknown id is a no-op. Failures of the medium raise StorageError.
    """

    @abstractmethod
    def list(self) -> List[TodoItem]: ...

    @abstractmethod
    def add(self, text: str) -> TodoItem: ...

    @abstractmethod
    def toggle(self, todo_id: int) -> None: ...

    @abstractmethod
    def remove(self, todo_id: int) -> None: ...

    def close(self) -> None:
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


class AsyncTodoStore(ABC):
    """Same contract as TodoStore, with every operation awaitable."""

    @abstractmethod
    async def list(self) -> List[TodoItem]: ...

    @abstractmethod
    async def add(self, text: str) -> TodoItem: ...

    @abstractmethod
    async def toggle(self, todo_id: int) -> None: ...

    @abstractmethod
    async def remove(self, todo_id: int) -> None: ...

    async def close(self) -> None:
        pass
