import os
import sys
import json
import logging
from ..utils import get_resource_path, safe_folder_name
from ..exceptions import ConfigError

DEFAULT_CONFIG = {
    "title": "TodoDesk",
    "width": 800,
    "height": 600,
    "resizable": True,
    "debug": False,
    "store": "local",
    "host": "process",
    "data_file": "todos.json",
    "db_path": "todos.db",
    "storage_key": "todos",
}

STORE_KINDS = ("local", "sqlite", "remote")
HOST_KINDS = ("process", "thread")


class ConfigMixin:
    def _setup_logging(self):
        logging.basicConfig(
            level=logging.INFO,
            format="[TodoDesk] %(asctime)s - %(levelname)s - %(message)s",
            datefmt="%H:%M:%S",
        )
        self.logger = logging.getLogger("TodoDesk")

    def _enable_debug_logging(self):
        self.logger.setLevel(logging.DEBUG)
        for handler in logging.root.handlers:
            handler.setLevel(logging.DEBUG)
        self.logger.debug("Debug mode enabled.")

    def _load_config(self, config_file, overrides=None):
        self.config = dict(DEFAULT_CONFIG)
        path = get_resource_path(config_file)
        self.logger.debug(f"Resolved settings path: {path}")

        if not os.path.exists(path):
            path = os.path.abspath(config_file)

        if os.path.exists(path):
            try:
                with open(path, "r") as f:
                    loaded = json.load(f)
            except json.JSONDecodeError as e:
                self.logger.error(f"Failed to parse settings.json: {e}")
                raise ConfigError(f"Invalid JSON in settings file: {path}") from e
            except OSError as e:
                self.logger.error(f"Failed to load settings: {e}")
                raise ConfigError(f"Could not load settings from {path}") from e
            if not isinstance(loaded, dict):
                raise ConfigError(f"Settings file must hold a JSON object: {path}")
            self.config.update(loaded)
            self.logger.debug(f"Loaded settings from {path}")
        else:
            self.logger.warning(f"Settings file not found at {path}. Using default configuration.")

        if overrides:
            self.config.update({k: v for k, v in overrides.items() if v is not None})

        if self.config["store"] not in STORE_KINDS:
            raise ConfigError(
                f"Unknown store '{self.config['store']}', expected one of {', '.join(STORE_KINDS)}"
            )
        if self.config["host"] not in HOST_KINDS:
            raise ConfigError(
                f"Unknown host '{self.config['host']}', expected one of {', '.join(HOST_KINDS)}"
            )

        if self.config.get("debug", False):
            self._enable_debug_logging()

    def _setup_storage(self):
        title = self.config.get("title") or DEFAULT_CONFIG["title"]
        safe_title = safe_folder_name(title) or DEFAULT_CONFIG["title"]

        storage_path = self.config.get("storage_path")
        if not storage_path:
            if sys.platform == "win32":
                base_path = os.environ.get("LOCALAPPDATA", os.path.expanduser("~"))
            else:
                base_path = os.path.expanduser("~/.config")

            if self.config.get("debug", False):
                storage_path = os.path.join(base_path, f"{safe_title}_Dev")
            else:
                storage_path = os.path.join(base_path, safe_title)

        self.storage_path = storage_path
        try:
            os.makedirs(self.storage_path, exist_ok=True)
            self.logger.info(f"Storage directory: {self.storage_path}")
        except OSError as e:
            self.logger.warning(f"Could not create storage directory at {self.storage_path}: {e}")

    def resolve_data_path(self, path):
        if path == ":memory:" or os.path.isabs(path):
            return path
        return os.path.join(self.storage_path, path)
