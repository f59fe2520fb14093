"""
Service bootstrap (application context) for injector-based applications.

Owns configuration loading, logging setup, the dependency injection
container and its lifecycle. Subclasses contribute the DI modules and the
work to run once the container is ready.
"""

import logging
import sys
from abc import ABC, abstractmethod
from contextlib import contextmanager
from types import TracebackType
from typing import Iterator, List, Optional, Type, TypeVar

from injector import Injector, Module

from di_text_editor.infrastructure.bootstrap.startup_context import StartupContext
from di_text_editor.infrastructure.config.base_application_config import BaseApplicationConfig
from di_text_editor.infrastructure.config.service_config_loader import ServiceConfigLoader
from di_text_editor.infrastructure.logging.service_logger import (
    PACKAGE_LOGGER_NAME,
    ServiceLogger,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ApplicationContextNotActiveError(RuntimeError):
    """Raised when beans are requested from a context that is not running."""


class ServiceBootstrap(ABC):
    """
    Abstract base class for bootstrapping an application context.

    Bootstrap sequence (``initialize``):
    1. Load configuration
    2. Setup logging
    3. Initialize dependency injection
    4. Pre-instantiate singleton beans (when enabled)

    ``start`` runs the sequence, then ``_run_main_loop``, then ``close``.
    Any failure is logged and terminates the process with exit status 1.
    """

    def __init__(
        self,
        service_name: str,
        config_class: Type[BaseApplicationConfig],
        config: Optional[BaseApplicationConfig] = None,
    ):
        """
        Initialize service bootstrap.

        Args:
            service_name: Name of the service (e.g., "di-text-editor")
            config_class: Configuration class for this service
            config: Already-loaded configuration; skips the loader when given
        """
        self.service_name = service_name
        self.config_class = config_class
        self.config = config
        self.injector: Optional[Injector] = None
        self.is_running = False

    def start(self) -> None:
        """Run the full lifecycle; exits the process with status 1 on failure."""
        try:
            self.initialize()
            self._run_main_loop()
        except Exception as e:
            logger.error(f"Failed to run {self.service_name}: {e}", exc_info=True)
            self.close()
            sys.exit(1)
        self.close()

    def initialize(self) -> None:
        """Load config, configure logging and wire the container.

        A context that is already running is left untouched.
        """
        if self.is_running:
            logger.warning(f"{self.service_name} context is already running; initialize() ignored")
            return

        ctx = StartupContext(self.service_name)
        logger.info(f"Starting {self.service_name} context...")
        try:
            with ctx.phase("config"):
                self._load_configuration()
                ctx.attribute("stage", getattr(self.config, "stage", "unknown"))

            with ctx.phase("logging"):
                self._setup_logging()

            with ctx.phase("dependency_injection"):
                self._setup_dependency_injection()

            with ctx.phase("singleton_instantiation"):
                instantiated = self._preinstantiate_singletons()
                ctx.attribute("eager_beans", instantiated)
        finally:
            ctx.emit_summary(logger)

        self.is_running = True
        logger.info(f"{self.service_name} context started successfully")

    def get_bean(self, bean_type: Type[T]) -> T:
        """Return the container-managed instance of ``bean_type``."""
        if not self.is_running or self.injector is None:
            raise ApplicationContextNotActiveError(
                f"{self.service_name} context is not active; call initialize() first"
            )
        return self.injector.get(bean_type)

    def close(self) -> None:
        """Release the container. Safe to call multiple times."""
        if self.injector is None:
            return
        logger.info(f"Closing {self.service_name} context...")
        self.is_running = False
        self.injector = None
        logger.info(f"{self.service_name} context closed")

    def __enter__(self) -> "ServiceBootstrap":
        self.initialize()
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        self.close()

    def _load_configuration(self) -> None:
        if self.config is None:
            with self._config_phase_logging():
                self.config = ServiceConfigLoader.load_config(self.config_class)

    @contextmanager
    def _config_phase_logging(self) -> Iterator[None]:
        """Send package log records to stderr until ServiceLogger is configured."""
        package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(
            f"%(asctime)s | CONFIG   | %(levelname)-8s | {self.service_name} | %(message)s"
        ))
        previous_level = package_logger.level
        package_logger.addHandler(handler)
        package_logger.setLevel(logging.INFO)
        try:
            yield
        finally:
            package_logger.removeHandler(handler)
            package_logger.setLevel(previous_level)

    def _setup_logging(self) -> None:
        ServiceLogger(
            service_name=self.service_name,
            stage=getattr(self.config, "stage", "local"),
            config=getattr(self.config, "logging", None),
        ).configure()

    def _setup_dependency_injection(self) -> None:
        # Modules receive the loaded config so providers never reload it
        di_modules = self.get_dependency_modules(self.config)  # type: ignore[arg-type]
        self.injector = Injector(di_modules)
        logger.info("Dependency injection container initialized")

    def _preinstantiate_singletons(self) -> List[str]:
        if self.injector is None or not getattr(self.config, "eager_init", True):
            return []
        names = []
        for bean_type in self.get_bean_definitions():
            self.injector.get(bean_type)
            names.append(bean_type.__name__)
            logger.debug(f"Pre-instantiated singleton {bean_type.__name__}")
        return names

    @abstractmethod
    def get_dependency_modules(self, app_config: BaseApplicationConfig) -> List[Module]:
        """Return dependency injection modules for this service."""
        pass

    def get_bean_definitions(self) -> List[type]:
        """Bean types to pre-instantiate, in order. None by default."""
        return []

    @abstractmethod
    def _run_main_loop(self) -> None:
        """Run the application's work against the initialized container."""
        pass
