"""Thread-local context management for request tracking."""

import threading

_request_context = threading.local()


def set_request_id(request_id: str) -> None:
    """Store the request ID for the current thread."""
    _request_context.request_id = request_id


def get_request_id() -> str | None:
    """Return the current thread's request ID, or None if not set."""
    return getattr(_request_context, "request_id", None)


def clear_request_id() -> None:
    """Forget the request ID once the request has been handled."""
    if hasattr(_request_context, "request_id"):
        delattr(_request_context, "request_id")
