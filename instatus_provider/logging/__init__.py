"""
Logging system for the Instatus provider.

This module provides structured or colored console logging, rotating file
logging and credential masking.
"""

from .filters import ComponentFilter, SensitiveDataFilter
from .formatters import ColoredFormatter, StructuredFormatter
from .manager import LoggingManager, configure_logging, setup_logging

__all__ = [
    "LoggingManager",
    "setup_logging",
    "configure_logging",
    "StructuredFormatter",
    "ColoredFormatter",
    "SensitiveDataFilter",
    "ComponentFilter",
]
