"""Base service logging mixin.

This module provides the LoggingMixin class for standardized structured
logging across application services and collectors. The logger can be
injected, so probe logic is testable without a configured backend.

Usage:
    from src.application.services.base import LoggingMixin

    class MyService(LoggingMixin):
        def __init__(self, dependency: SomePort, logger=None) -> None:
            self._dependency = dependency
            self._init_logger(component="probe", logger=logger)

        def do_something(self) -> None:
            log = self._log_operation("do_something", item_id="123")
            log.info("operation_started")
"""

from typing import Any

import structlog

from src.infrastructure.observability.correlation import get_correlation_id


class LoggingMixin:
    """Mixin providing structured logging for services.

    The logger is bound with:
    - service: The class name of the service
    - component: The component type

    Each operation gets:
    - operation: The name of the operation being performed
    - correlation_id: From context, when one is set
    - Any additional context passed to _log_operation()

    Attributes:
        _log: The structlog BoundLogger for this service instance.
    """

    _log: Any

    def _init_logger(self, component: str = "exporter", logger: Any = None) -> None:
        """Initialize the logger with service name binding.

        Should be called in __init__ after setting up dependencies.

        Args:
            component: The component type for log categorization.
            logger: Optional structlog logger to bind onto. Defaults to
                structlog.get_logger().
        """
        base = logger if logger is not None else structlog.get_logger()
        self._log = base.bind(
            service=self.__class__.__name__,
            component=component,
        )

    def _log_operation(self, operation: str, **context: object) -> Any:
        """Create operation-scoped logger with correlation ID.

        Args:
            operation: Name of the operation being performed.
            **context: Additional context to bind to the logger.

        Returns:
            BoundLogger with operation and correlation context.
        """
        correlation_id = get_correlation_id()
        if correlation_id:
            context["correlation_id"] = correlation_id
        return self._log.bind(operation=operation, **context)
