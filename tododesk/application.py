import webview
from .apputils.config import ConfigMixin
from .keyvalue import KeyValueStore
from .store import LocalTodoStore, SqliteTodoStore, RemoteTodoStore
from .bridge import HostBridge
from .channel import ThreadChannel
from .host import spawn_host
from .loop import EventLoopThread
from .view import View
from .coordinator import Coordinator, AsyncCoordinator
from .window import Window


class App(ConfigMixin):
    """
    Builds the store selected in settings.json, a window-backed View and the
    matching Coordinator, then runs the pywebview loop.

    Keyword overrides (``store="sqlite"``, ``debug=True`` ...) win over the
    settings file.
    """

    def __init__(self, config_file="settings.json", **overrides):
        self._on_exit_callbacks = []
        self.store = None
        self.view = None
        self.coordinator = None
        self.window = None
        self.runner = None
        self.host = None

        self._setup_logging()
        self._load_config(config_file, overrides)
        self._setup_storage()

    def on_exit(self, func):
        """
        Register a function to run when the application is exiting.
        Can be used as a decorator: @app.on_exit
        """
        self._on_exit_callbacks.append(func)
        return func

    @property
    def is_remote(self):
        return self.config["store"] == "remote"

    def build_store(self):
        """Open the synchronous store named by the ``store`` setting (local or sqlite)."""
        kind = self.config["store"]
        if kind == "sqlite":
            store = SqliteTodoStore(self.resolve_data_path(self.config["db_path"]))
        elif kind == "local":
            kv = KeyValueStore(self.resolve_data_path(self.config["data_file"]))
            store = LocalTodoStore(kv, key=self.config["storage_key"])
        else:
            raise ValueError("build_store() opens local stores; use build_remote_store()")
        self.logger.info(f"Using {kind} store")
        return store

    def build_remote_store(self):
        db_path = self.resolve_data_path(self.config["db_path"])
        if self.config["host"] == "process":
            self.host = spawn_host(db_path, debug=self.config.get("debug", False))
            channel = self.host.channel
            self.on_exit(self.host.stop)
        else:
            host_store = SqliteTodoStore(db_path)
            channel = ThreadChannel(HostBridge(host_store))
            self.on_exit(host_store.close)
            self.on_exit(channel.close)
        self.logger.info(f"Using remote store ({self.config['host']} host) for {db_path}")
        return RemoteTodoStore(channel)

    def setup(self):
        """Instantiate Store, View and Coordinator in dependency order."""
        self.window = Window(
            title=self.config["title"],
            url=self.config.get("url"),
            width=self.config["width"],
            height=self.config["height"],
            resizable=self.config["resizable"],
        )
        self.view = self.window.attach(View(self.window))

        if self.is_remote:
            self.runner = EventLoopThread()
            self.store = self.build_remote_store()
            self.coordinator = AsyncCoordinator(self.store, self.view, self.runner)
            self.runner.run(self.coordinator.start())
        else:
            self.store = self.build_store()
            self.on_exit(self.store.close)
            self.coordinator = Coordinator(self.store, self.view)
        return self

    def run(self):
        if self.coordinator is None:
            self.setup()
        self.window.create()
        try:
            # Blocks until the last window closes
            webview.start(debug=self.config.get("debug", False))
        finally:
            self.shutdown()

    def shutdown(self):
        for callback in reversed(self._on_exit_callbacks):
            try:
                callback()
            except Exception as e:
                self.logger.error(f"Error during shutdown: {e}")
        self._on_exit_callbacks.clear()
        if self.runner is not None:
            self.runner.stop()
            self.runner = None
