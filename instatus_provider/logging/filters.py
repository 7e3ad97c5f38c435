"""
Custom logging filters for the Instatus provider.

This module provides filters for masking credentials and for restricting a
handler to a single logger hierarchy.
"""

import logging
import re
from typing import List, Pattern, Set, Tuple


class SensitiveDataFilter(logging.Filter):
    """Filter to mask API keys and tokens in log messages."""

    def __init__(self) -> None:
        """Initialize sensitive data filter."""
        super().__init__()

        self.rules: List[Tuple[Pattern[str], str]] = [
            # API keys and tokens
            (
                re.compile(
                    r'(api[_-]?key|token|secret)["\s]*[:=]["\s]*([a-zA-Z0-9+/=_-]{16,})',
                    re.IGNORECASE,
                ),
                r"\1: ***MASKED***",
            ),
            # Bearer tokens
            (
                re.compile(r"(bearer\s+)([a-zA-Z0-9+/=_-]{16,})", re.IGNORECASE),
                r"\1***MASKED***",
            ),
            # Authorization headers
            (
                re.compile(
                    r'(authorization["\s]*[:=]["\s]*["\']?)(?!bearer\s)([a-zA-Z0-9+/=_-]{16,})',
                    re.IGNORECASE,
                ),
                r"\1***MASKED***",
            ),
            # URLs with credentials
            (
                re.compile(r"(https?://[^:/\s]+):([^@\s]+)@", re.IGNORECASE),
                r"\1:***MASKED***@",
            ),
        ]

    def filter(self, record: logging.LogRecord) -> bool:
        """Filter log record to mask sensitive data."""
        try:
            message = record.getMessage()
        except (TypeError, ValueError):
            # Malformed format args; let the handler report it
            return True

        for pattern, replacement in self.rules:
            message = pattern.sub(replacement, message)

        record.msg = message
        record.args = ()
        return True


class ComponentFilter(logging.Filter):
    """Filter for component-specific logging."""

    def __init__(self, component: str, allowed_levels: Set[str] | None = None) -> None:
        """
        Initialize component filter.

        Args:
            component: Logger name prefix to accept
            allowed_levels: Set of allowed log levels
        """
        super().__init__()
        self.component = component
        self.allowed_levels = allowed_levels or {
            "DEBUG",
            "INFO",
            "WARNING",
            "ERROR",
            "CRITICAL",
        }

    def filter(self, record: logging.LogRecord) -> bool:
        """Filter based on component and level."""
        if not record.name.startswith(self.component):
            return False

        return record.levelname in self.allowed_levels


__all__ = ["SensitiveDataFilter", "ComponentFilter"]
