import logging
import multiprocessing
from .bridge import HostBridge, serve
from .channel import PipeChannel
from .store.sqlite import SqliteTodoStore


def _host_main(conn, db_path, debug=False):
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="[TodoDesk Host] %(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )
    store = SqliteTodoStore(db_path)
    try:
        serve(conn, HostBridge(store))
    finally:
        store.close()
        conn.close()


class HostProcess:
    """A child process holding the SQLite store, and the channel that reaches it."""

    def __init__(self, process, channel):
        self.process = process
        self.channel = channel
        self.logger = logging.getLogger("TodoDesk.Bridge")

    @property
    def is_alive(self):
        return self.process.is_alive()

    def stop(self, timeout=5):
        self.channel.close()
        self.process.join(timeout)
        if self.process.is_alive():
            self.logger.warning("Host process did not exit, terminating")
            self.process.terminate()
            self.process.join(timeout)


def spawn_host(db_path, debug=False):
    parent_conn, child_conn = multiprocessing.Pipe()
    process = multiprocessing.Process(
        target=_host_main,
        args=(child_conn, db_path, debug),
        name="tododesk-host",
        daemon=True,
    )
    process.start()
    # The child owns its end now
    child_conn.close()
    logging.getLogger("TodoDesk.Bridge").info(
        f"Started host process {process.pid} for {db_path}"
    )
    return HostProcess(process, PipeChannel(parent_conn))
