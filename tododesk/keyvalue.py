import os
import json
import logging
import threading
import tempfile
from .exceptions import StorageError
from .serializer import serialize, dumps


class KeyValueStore:
    """
    Durable string-keyed store backed by a single JSON document.

    The whole document is loaded on open and rewritten on every set/update.
    With ``path=None`` the store lives in memory only.
    """

    def __init__(self, path=None):
        self.path = path
        self.logger = logging.getLogger("TodoDesk.Store")
        self._lock = threading.RLock()
        self.data = self._read()

    def _read(self):
        if not self.path or not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise StorageError(f"Corrupt key/value file {self.path}: {e}") from e
        except OSError as e:
            raise StorageError(f"Could not read {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise StorageError(f"Key/value file {self.path} does not hold an object")
        return data

    def _write(self, data):
        if not self.path:
            return
        directory = os.path.dirname(os.path.abspath(self.path))
        try:
            os.makedirs(directory, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=directory, suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(dumps(data))
                os.replace(tmp_path, self.path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.remove(tmp_path)
                raise
        except OSError as e:
            raise StorageError(f"Could not write {self.path}: {e}") from e
        self.logger.debug(f"Wrote {len(data)} key(s) to {self.path}")

    def get(self, key, default=None):
        with self._lock:
            return self.data.get(key, default)

    def set(self, key, value):
        self.update({key: value})

    def update(self, mapping: dict):
        """Persist several keys in one write; memory changes only if the write succeeds."""
        if not isinstance(mapping, dict):
            raise TypeError("mapping must be a dict")
        with self._lock:
            data = dict(self.data)
            data.update(serialize(mapping))
            self._write(data)
            self.data = data

