class TodoDeskError(Exception):
    """Base class for all TodoDesk exceptions."""

    def __init__(self, message, code=None):
        super().__init__(message)
        self.code = code


class ConfigError(TodoDeskError):
    """Raised when there is an error loading or parsing configuration."""

    pass


class ValidationError(TodoDeskError, ValueError):
    """Raised when submitted to-do text is empty or whitespace only."""

    pass


class NotFoundError(TodoDeskError, LookupError):
    """Raised when a mutation targets a to-do id that does not exist."""

    def __init__(self, message, todo_id=None, code=None):
        super().__init__(message, code)
        self.todo_id = todo_id


class StorageError(TodoDeskError):
    """Raised when the backing medium cannot be read or written."""

    pass


class BridgeError(TodoDeskError):
    """Raised when there is an error in the host request/response bridge."""

    pass


def error_from_kind(kind, message):
    """
    Rebuild an exception received over the bridge from its class name.
    Unknown kinds degrade to BridgeError.
    """
    known = {
        cls.__name__: cls
        for cls in (ConfigError, ValidationError, NotFoundError, StorageError, BridgeError)
    }
    cls = known.get(kind)
    if cls is None:
        return BridgeError(f"{kind}: {message}")
    return cls(message)
