"""Registration of the services every component relies on."""

from alienbase.logging_service import LoggingService
from alienbase.service_locator import ServiceLocator

_logging_service = LoggingService()


def register_base_services() -> LoggingService:
    """Register the shared logging service with the global locator and return it."""
    ServiceLocator.get_instance().register_service(LoggingService, _logging_service)
    return _logging_service