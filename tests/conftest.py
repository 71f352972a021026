import pytest
from unittest.mock import MagicMock

from tododesk.keyvalue import KeyValueStore
from tododesk.store import LocalTodoStore, SqliteTodoStore


@pytest.fixture
def surface():
    return MagicMock()


@pytest.fixture
def kv(tmp_path):
    return KeyValueStore(str(tmp_path / "todos.json"))


@pytest.fixture
def local_store(kv):
    return LocalTodoStore(kv)


@pytest.fixture
def sqlite_store(tmp_path):
    store = SqliteTodoStore(str(tmp_path / "todos.db"))
    yield store
    store.close()


@pytest.fixture(params=["local", "sqlite"])
def store(request, tmp_path):
    if request.param == "local":
        s = LocalTodoStore(KeyValueStore(str(tmp_path / "todos.json")))
    else:
        s = SqliteTodoStore(str(tmp_path / "todos.db"))
    yield s
    s.close()
