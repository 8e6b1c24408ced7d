"""Pure Python signal system — no Qt dependency.

``Signal`` carries in-process observer callbacks between the state
components; ``ObservableProperty`` is the data-binding primitive used by
:mod:`assetpicker.gui.viewmodels`.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable

_logger = logging.getLogger(__name__)


class Signal:
    """Thread-safe list of callbacks.

    A handler that raises is logged and skipped so that the remaining
    handlers still run, matching ``EventBus`` semantics.
    """

    def __init__(self, name: str = "") -> None:
        self._name = name
        self._handlers: list[Callable] = []
        self._lock = threading.Lock()

    def connect(self, handler: Callable) -> None:
        with self._lock:
            if handler not in self._handlers:
                self._handlers.append(handler)

    def disconnect(self, handler: Callable) -> None:
        with self._lock:
            self._handlers.remove(handler)

    def emit(self, *args: Any, **kwargs: Any) -> None:
        with self._lock:
            handlers = list(self._handlers)
        for handler in handlers:
            try:
                handler(*args, **kwargs)
            except Exception:
                _logger.exception("Handler %r for signal %s failed", handler, self._name or "<anonymous>")

    @property
    def handler_count(self) -> int:
        with self._lock:
            return len(self._handlers)


class ObservableProperty:
    """Value holder emitting ``changed(new_value, old_value)`` on every real change."""

    def __init__(self, initial_value: Any = None) -> None:
        self._value = initial_value
        self.changed = Signal("changed")

    @property
    def value(self) -> Any:
        return self._value

    @value.setter
    def value(self, new_value: Any) -> None:
        if self._value != new_value:
            old_value = self._value
            self._value = new_value
            self.changed.emit(new_value, old_value)
