"""
Logging manager for the Instatus provider.

This module provides centralized logging configuration and management.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Dict, Optional, TextIO

from ..config.models import GlobalConfig, LoggingConfig, LogLevel
from .filters import ComponentFilter, SensitiveDataFilter
from .formatters import ColoredFormatter, StructuredFormatter

PROVIDER_LOGGER = "instatus_provider"


class LoggingManager:
    """Centralized logging manager."""

    def __init__(self) -> None:
        """Initialize logging manager."""
        self._configured = False
        self._handlers: Dict[str, logging.Handler] = {}
        self._loggers: Dict[str, logging.Logger] = {}

    def setup_logging(self, config: LoggingConfig) -> None:
        """
        Setup logging based on configuration.

        Args:
            config: Logging configuration
        """
        if self._configured:
            self.cleanup()

        root_logger = logging.getLogger()
        root_logger.setLevel(getattr(logging, config.level.value))

        if config.enable_console:
            self._setup_console_handler(config)

        if config.enable_file and config.file_path:
            self._setup_file_handler(config)

        self._setup_component_loggers(config)

        self._configured = True

        logger = logging.getLogger(__name__)
        logger.debug("Logging system configured successfully")

    def _build_formatter(
        self, config: LoggingConfig, stream: Optional[TextIO] = None
    ) -> logging.Formatter:
        if config.enable_structured:
            return StructuredFormatter()
        if stream is not None:
            return ColoredFormatter(config.format, stream=stream)
        return logging.Formatter(config.format)

    def _apply_filters(self, handler: logging.Handler, config: LoggingConfig) -> None:
        handler.addFilter(SensitiveDataFilter())
        if config.provider_logs_only:
            handler.addFilter(ComponentFilter(PROVIDER_LOGGER))

    def _setup_console_handler(self, config: LoggingConfig) -> None:
        """Setup console logging handler."""
        # stdout belongs to the host protocol; logs go to stderr
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(self._build_formatter(config, stream=handler.stream))
        handler.setLevel(getattr(logging, config.level.value))
        self._apply_filters(handler, config)
        self.add_handler("console", handler)

    def _setup_file_handler(self, config: LoggingConfig) -> None:
        """Setup rotating file logging handler."""
        log_path = Path(str(config.file_path))
        log_path.parent.mkdir(parents=True, exist_ok=True)

        handler = logging.handlers.RotatingFileHandler(
            filename=str(log_path),
            maxBytes=config.max_file_size,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
        handler.setFormatter(self._build_formatter(config))
        handler.setLevel(getattr(logging, config.level.value))
        self._apply_filters(handler, config)
        self.add_handler("file", handler)

    def _setup_component_loggers(self, config: LoggingConfig) -> None:
        """Setup component-specific logger levels."""
        for component, level in config.component_levels.items():
            logger = logging.getLogger(component)
            logger.setLevel(getattr(logging, level.value))
            self._loggers[component] = logger

    def set_level(self, level: LogLevel, component: Optional[str] = None) -> None:
        """
        Set logging level.

        Args:
            level: New logging level
            component: Specific component (None for root logger)
        """
        log_level = getattr(logging, level.value)

        if component:
            logging.getLogger(component).setLevel(log_level)
        else:
            logging.getLogger().setLevel(log_level)
            for handler in self._handlers.values():
                handler.setLevel(log_level)

    def add_handler(self, name: str, handler: logging.Handler) -> None:
        """
        Add a logging handler to the root logger.

        Args:
            name: Handler name
            handler: Logging handler
        """
        logging.getLogger().addHandler(handler)
        self._handlers[name] = handler

    def remove_handler(self, name: str) -> None:
        """
        Remove logging handler.

        Args:
            name: Handler name
        """
        handler = self._handlers.pop(name, None)
        if handler is not None:
            logging.getLogger().removeHandler(handler)
            handler.close()

    def cleanup(self) -> None:
        """Remove and close every handler this manager installed."""
        for name in list(self._handlers):
            self.remove_handler(name)

        for logger in self._loggers.values():
            logger.setLevel(logging.NOTSET)

        self._loggers.clear()
        self._configured = False

    def is_configured(self) -> bool:
        """Check if logging is configured."""
        return self._configured

    def configure(self, config: GlobalConfig) -> None:
        """
        Setup logging from the full provider configuration.

        Debug mode forces the DEBUG level regardless of ``logging.level``.

        Args:
            config: Provider configuration
        """
        logging_config = config.logging
        if config.environment.debug:
            logging_config = logging_config.model_copy(update={"level": LogLevel.DEBUG})
        self.setup_logging(logging_config)


# Global logging manager instance
_logging_manager = LoggingManager()


def setup_logging(config: LoggingConfig) -> None:
    """
    Setup logging with configuration.

    Args:
        config: Logging configuration
    """
    _logging_manager.setup_logging(config)


def configure_logging(config: GlobalConfig) -> None:
    """
    Setup logging from a loaded provider configuration.

    Args:
        config: Provider configuration, e.g. from ConfigLoader.load_config()
    """
    _logging_manager.configure(config)
