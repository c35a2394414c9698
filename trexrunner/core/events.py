"""Named-event publish/subscribe hub."""

from __future__ import annotations

import threading
from typing import Any, Callable, Dict, List, Optional

Listener = Callable[..., Any]


class EventError(RuntimeError):
    """Raised when a listener cannot be invoked with the published arguments."""


def _invoke(label: str, listener: Listener, args: tuple) -> None:
    try:
        listener(*args)
    except TypeError as exc:
        # A traceback with no deeper frame means the call itself failed to
        # bind its arguments, rather than the listener failing inside.
        if exc.__traceback__ is not None and exc.__traceback__.tb_next is None:
            raise EventError(
                f"Failed to invoke event '{label}'. "
                "Check the parameters passed to Events.publish"
            ) from exc
        raise


class Events:
    """Registry of listeners keyed by event label."""

    def __init__(self) -> None:
        self._callbacks: Dict[str, List[Listener]] = {}

    def add_event_listener(self, label: str, listener: Listener) -> None:
        """Register ``listener`` to be called when ``label`` is published."""
        self._callbacks.setdefault(label, []).append(listener)

    def publish(self, label: str, *args: Any) -> None:
        """Call every listener of ``label`` with ``args``, in registration order."""
        for listener in list(self._callbacks.get(label, ())):
            _invoke(label, listener, args)

    def clear(self) -> None:
        """Remove every registered listener."""
        self._callbacks.clear()


_instance: Optional[Events] = None
_lock = threading.Lock()


def get_events() -> Events:
    """Return the process-wide event hub, creating it on first use."""
    global _instance
    with _lock:
        if _instance is None:
            _instance = Events()
        return _instance