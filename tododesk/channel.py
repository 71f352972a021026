import asyncio
import itertools
import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from .bridge import encode_request, decode_response
from .exceptions import BridgeError


class Channel:
    """
    UI-side end of the bridge. ``invoke`` is one awaited round trip; the
    blocking transport work runs on an executor so the event loop stays free.
    """

    def __init__(self, executor=None):
        self._owns_executor = executor is None
        self.executor = executor or ThreadPoolExecutor(max_workers=1)
        self.logger = logging.getLogger("TodoDesk.Bridge")
        self._seq = itertools.count(1)

    async def invoke(self, name, *args):
        request = encode_request(next(self._seq), name, args)
        loop = asyncio.get_running_loop()
        raw = await loop.run_in_executor(self.executor, self._round_trip, request)
        return decode_response(raw)

    def _round_trip(self, request: str) -> str:
        raise NotImplementedError

    def close(self):
        if self._owns_executor and self.executor is not None:
            self.executor.shutdown(wait=False)
            self.executor = None


class ThreadChannel(Channel):
    """Reaches a HostBridge living in the same process."""

    def __init__(self, bridge, executor=None):
        super().__init__(executor)
        self.bridge = bridge

    def _round_trip(self, request):
        return self.bridge.handle(request)


class PipeChannel(Channel):
    """Reaches a HostBridge served over a multiprocessing connection."""

    def __init__(self, conn, executor=None):
        super().__init__(executor)
        self.conn = conn
        # One round trip in flight per connection
        self._lock = threading.Lock()
        self._closed = False

    def _round_trip(self, request):
        with self._lock:
            if self._closed:
                raise BridgeError("Channel is closed")
            try:
                self.conn.send(request)
                return self.conn.recv()
            except (EOFError, OSError) as e:
                self.logger.error(f"Host connection lost: {e}")
                raise BridgeError(f"Host connection lost: {e}") from e

    def close(self):
        with self._lock:
            if not self._closed:
                self._closed = True
                try:
                    self.conn.send(None)
                except (OSError, ValueError):
                    pass
                self.conn.close()
        super().close()
