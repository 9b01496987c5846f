"""
Dependency Injection Container.

This module provides a simple DI container for wiring the session store
to its lesson source, simulator and configuration.
"""

import logging
from typing import Any, Callable, Dict, Optional, Type


logger = logging.getLogger(__name__)


class DIContainer:
    """
    Simple dependency injection container.

    Supports:
    - Service registration with factory functions
    - Singleton pattern for shared instances
    - Service resolution
    - Clear error messages for missing services

    Examples:
        >>> container = DIContainer()
        >>> configure_default_services(container)
        >>> store = container.resolve(SessionStore)

        >>> # Swap the lesson source for tests
        >>> container.register(LessonSource, lambda: FakeSource(), singleton=True)
    """

    def __init__(self):
        """Initialize empty container."""
        self._services: Dict[Type, Callable] = {}
        self._singletons: Dict[Type, Any] = {}
        self._singleton_flags: Dict[Type, bool] = {}

        logger.debug("DI Container initialized")

    def register(
        self,
        interface: Type,
        implementation: Callable,
        singleton: bool = False
    ):
        """
        Register a service in the container.

        Re-registering an interface replaces its factory and drops any
        cached singleton.

        Args:
            interface: Service interface or type
            implementation: Factory function that creates the service
            singleton: Whether to create a single shared instance
        """
        self._services[interface] = implementation
        self._singleton_flags[interface] = singleton
        self._singletons.pop(interface, None)

        logger.debug(
            f"Registered service: {interface.__name__} "
            f"(singleton={singleton})"
        )

    def resolve(self, interface: Type) -> Any:
        """
        Resolve a service from the container.

        Args:
            interface: Service interface or type to resolve

        Returns:
            Service instance

        Raises:
            ValueError: If service is not registered
        """
        if interface not in self._services:
            raise ValueError(
                f"Service not registered: {interface.__name__}. "
                f"Available services: {', '.join(self.get_registered_services())}"
            )

        if self._singleton_flags.get(interface, False):
            if interface not in self._singletons:
                logger.debug(f"Creating singleton instance: {interface.__name__}")
                self._singletons[interface] = self._services[interface]()
            return self._singletons[interface]

        logger.debug(f"Creating transient instance: {interface.__name__}")
        return self._services[interface]()

    def is_registered(self, interface: Type) -> bool:
        """Check if a service is registered."""
        return interface in self._services

    def clear(self):
        """Clear all registered services."""
        self._services.clear()
        self._singletons.clear()
        self._singleton_flags.clear()
        logger.debug("DI Container cleared")

    def get_registered_services(self) -> list:
        """
        Get list of all registered service types.

        Returns:
            List of registered service type names
        """
        return [service.__name__ for service in self._services.keys()]


def configure_default_services(container: DIContainer, app_config: Optional[Any] = None):
    """
    Configure the production services.

    Registers Config, the application logger, the HTTP lesson source, a
    randomly resolving simulator and the session store, all as singletons.

    Args:
        container: DI container to configure
        app_config: Config to use (default: the module-level singleton)
    """
    from ..practice.simulator import SubmissionSimulator, random_outcome
    from ..sources.http_source import HttpLessonSource
    from ..sources.interfaces import LessonSource
    from ..store.session_store import SessionStore
    from .config import Config
    from .logger import setup_logger

    if app_config is None:
        from .config import config as app_config

    container.register(Config, lambda: app_config, singleton=True)

    container.register(
        logging.Logger,
        lambda: setup_logger(
            "artium_lessons",
            level=getattr(logging, app_config.log_level, logging.INFO),
            log_file=app_config.log_file
        ),
        singleton=True
    )

    container.register(
        LessonSource,
        lambda: HttpLessonSource(app_config.lessons_url, timeout=app_config.fetch_timeout),
        singleton=True
    )

    container.register(
        SubmissionSimulator,
        lambda: SubmissionSimulator(
            outcome_strategy=random_outcome(),
            interval=app_config.upload_step_interval,
            step=app_config.upload_step_percent
        ),
        singleton=True
    )

    container.register(
        SessionStore,
        lambda: SessionStore(
            lesson_source=container.resolve(LessonSource),
            simulator=container.resolve(SubmissionSimulator)
        ),
        singleton=True
    )

    logger.info("Default services configured")
