"""Log message distribution to registered callbacks."""

from __future__ import annotations

import enum
import threading
import time
from typing import Callable

LogCallback = Callable[["Priority", str], None]

_TIMESTAMP_FORMAT = "%Y-%m-%d %H-%M-%S"


class Priority(enum.Enum):
    UNIMPORTANT = "unimportant"
    IMPORTANT = "important"


class LoggingService:
    """Stamps log messages with the local time and forwards them to callbacks.

    A callback is any callable taking ``(priority, message)``.
    """

    def __init__(self) -> None:
        self._callbacks: list[LogCallback] = []
        self._lock = threading.RLock()

    def log_message(self, priority: Priority, message: str) -> None:
        """Send ``message``, prefixed with a timestamp, to every callback."""
        with self._lock:
            stamp = time.strftime(_TIMESTAMP_FORMAT, time.localtime())
            enriched = f"{stamp}: {message}"
            for callback in list(self._callbacks):
                callback(priority, enriched)

    def register_callback(self, callback: LogCallback) -> None:
        with self._lock:
            self._callbacks.append(callback)

    def unregister_callback(self, callback: LogCallback) -> None:
        """Remove every registration of ``callback``."""
        with self._lock:
            self._callbacks = [c for c in self._callbacks if c is not callback]