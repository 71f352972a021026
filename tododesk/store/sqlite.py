import sqlite3
import logging
from typing import List
from ..models import TodoItem
from ..exceptions import NotFoundError, StorageError
from .base import TodoStore


SCHEMA = """
    CREATE TABLE IF NOT EXISTS todos (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        text TEXT NOT NULL,
        completed INTEGER NOT NULL DEFAULT 0
    )
"""


class SqliteTodoStore(TodoStore):
    """
    One row per todo. Each operation is a single committed statement;
    the connection is opened once and held until close().
    """

    def __init__(self, db_path="todos.db"):
        self.db_path = db_path
        self.logger = logging.getLogger("TodoDesk.Store")
        self.conn = None
        try:
            # Bridge calls arrive on pool threads
            self.conn = sqlite3.connect(db_path, check_same_thread=False)
            self.conn.row_factory = sqlite3.Row
            self.conn.execute(SCHEMA)
            self.conn.commit()
        except sqlite3.Error as e:
            self.logger.error(f"Error opening database {db_path}: {e}")
            raise StorageError(f"Could not open database {db_path}: {e}") from e
        self.logger.info(f"Connected to SQLite database: {db_path}")

    def _execute(self, op, sql, params=()):
        if self.conn is None:
            raise StorageError(f"{op} failed: database {self.db_path} is closed")
        try:
            cursor = self.conn.execute(sql, params)
            self.conn.commit()
            return cursor
        except sqlite3.Error as e:
            self.logger.error(f"Error in {op}: {e}")
            raise StorageError(f"{op} failed: {e}") from e

    def list(self) -> List[TodoItem]:
        cursor = self._execute("list", "SELECT id, text, completed FROM todos ORDER BY id")
        return [TodoItem(**dict(row)) for row in cursor.fetchall()]

    def add(self, text: str) -> TodoItem:
        cursor = self._execute(
            "add", "INSERT INTO todos (text, completed) VALUES (?, ?)", (text, 0)
        )
        return TodoItem(id=cursor.lastrowid, text=text, completed=False)

    def toggle(self, todo_id: int) -> None:
        cursor = self._execute(
            "toggle",
            "UPDATE todos SET completed = CASE completed WHEN 0 THEN 1 ELSE 0 END WHERE id = ?",
            (todo_id,),
        )
        if cursor.rowcount == 0:
            raise NotFoundError(f"Todo {todo_id} does not exist", todo_id=todo_id)

    def remove(self, todo_id: int) -> None:
        self._execute("remove", "DELETE FROM todos WHERE id = ?", (todo_id,))

    def close(self) -> None:
        if self.conn is not None:
            self.conn.close()
            self.conn = None
