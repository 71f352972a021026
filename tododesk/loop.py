import asyncio
import threading


class EventLoopThread:
    """An asyncio loop running forever on a daemon thread."""

    def __init__(self, name="tododesk-loop"):
        self.loop = asyncio.new_event_loop()

        def start_loop():
            asyncio.set_event_loop(self.loop)
            self.loop.run_forever()

        self._thread = threading.Thread(target=start_loop, name=name, daemon=True)
        self._thread.start()

    def submit(self, coro):
        """Schedule a coroutine from any thread; returns a concurrent.futures.Future."""
        return asyncio.run_coroutine_threadsafe(coro, self.loop)

    def run(self, coro, timeout=None):
        return self.submit(coro).result(timeout)

    def stop(self, timeout=5):
        if self.loop.is_closed():
            return
        self.loop.call_soon_threadsafe(self.loop.stop)
        self._thread.join(timeout)
        if not self._thread.is_alive():
            self.loop.close()
