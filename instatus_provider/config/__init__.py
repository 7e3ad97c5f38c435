"""
Configuration management for the Instatus provider.

This module provides configuration loading from files and environment
variables into validated pydantic models.
"""

from .loader import ConfigLoader
from .models import (
    Environment,
    EnvironmentConfig,
    GlobalConfig,
    LoggingConfig,
    LogLevel,
)

__all__ = [
    "ConfigLoader",
    "GlobalConfig",
    "LoggingConfig",
    "LogLevel",
    "Environment",
    "EnvironmentConfig",
]
