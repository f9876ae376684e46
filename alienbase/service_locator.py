"""Process-wide registry mapping service types to implementations."""

from __future__ import annotations

import threading
from typing import Any, ClassVar, Optional, TypeVar

T = TypeVar("T")


class ServiceLocator:
    """Looks up service implementations by the type they provide."""

    _instance: ClassVar[Optional["ServiceLocator"]] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self) -> None:
        self._services: dict[type, Any] = {}
        self._lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> "ServiceLocator":
        """Return the shared locator, creating it on first use."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    def register_service(self, service_type: type[T], service: T) -> None:
        """Register ``service`` for ``service_type``, replacing any earlier one."""
        with self._lock:
            self._services[service_type] = service

    def get_service(self, service_type: type[T]) -> Optional[T]:
        """Return the service registered for ``service_type`` or None."""
        with self._lock:
            return self._services.get(service_type)