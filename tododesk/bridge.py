"""
Host side of the request/response bridge.

Requests and responses are JSON text envelopes so the same bridge can sit
behind an in-process thread pool or a pipe to a child process:

    request:  {"seq": 1, "name": "addTodo", "args": ["buy milk"]}
    response: {"seq": 1, "status": 0, "result": {"id": 1}}
              {"seq": 1, "status": 1, "error": {"kind": "NotFoundError", "message": "..."}}
"""
import json
import logging
from .serializer import serialize, dumps
from .exceptions import BridgeError, error_from_kind

STATUS_OK = 0
STATUS_ERROR = 1

# Operation -> channel name exposed by the host
CHANNELS = {
    "list": "getTodos",
    "add": "addTodo",
    "toggle": "toggleTodo",
    "remove": "removeTodo",
}


class HostBridge:
    def __init__(self, store):
        self.store = store
        self.logger = logging.getLogger("TodoDesk.Bridge")
        self._handlers = {}

        self.bind(CHANNELS["list"], store.list)
        self.bind(CHANNELS["add"], self._add)
        self.bind(CHANNELS["toggle"], store.toggle)
        self.bind(CHANNELS["remove"], store.remove)

    def _add(self, text):
        return {"id": self.store.add(text).id}

    def bind(self, name, python_func):
        """Expose a callable under a channel name."""
        self._handlers[name] = python_func

    @property
    def channels(self):
        return sorted(self._handlers)

    def handle(self, request: str) -> str:
        seq = None
        try:
            payload = json.loads(request)
            seq = payload.get("seq")
            name = payload["name"]
            args = payload.get("args") or []
            if not isinstance(args, list):
                raise TypeError("args must be a list")
        except (json.JSONDecodeError, KeyError, TypeError, AttributeError) as e:
            self.logger.warning(f"Malformed bridge request: {e}")
            return self._error(seq, BridgeError(f"Malformed request: {e}"))

        handler = self._handlers.get(name)
        if handler is None:
            self.logger.warning(f"Unknown bridge channel: {name}")
            return self._error(seq, BridgeError(f"Unknown channel: {name}"))

        self.logger.debug(f"Bridge channel {name} invoked with args {args}")
        try:
            result = handler(*args)
            return dumps({"seq": seq, "status": STATUS_OK, "result": serialize(result)})
        except Exception as e:
            self.logger.error(f"Execution error in {name}: {e}")
            return self._error(seq, e)

    def _error(self, seq, exc):
        return dumps(
            {
                "seq": seq,
                "status": STATUS_ERROR,
                "error": {"kind": type(exc).__name__, "message": str(exc)},
            }
        )


def encode_request(seq, name, args):
    return dumps({"seq": seq, "name": name, "args": list(args)})


def decode_response(raw):
    """Return the result of a response envelope or raise the error it carries."""
    try:
        payload = json.loads(raw)
        status = payload["status"]
    except (json.JSONDecodeError, KeyError, TypeError) as e:
        raise BridgeError(f"Malformed response: {e}") from e

    if status == STATUS_OK:
        return payload.get("result")
    error = payload.get("error") or {}
    raise error_from_kind(error.get("kind"), error.get("message", ""))


def serve(conn, bridge):
    """
    Answer requests arriving on a multiprocessing connection until the peer
    sends None or hangs up.
    """
    logger = logging.getLogger("TodoDesk.Bridge")
    logger.info(f"Host bridge serving channels: {bridge.channels}")
    while True:
        try:
            request = conn.recv()
        except EOFError:
            break
        if request is None:
            break
        conn.send(bridge.handle(request))
    logger.info("Host bridge stopped")
