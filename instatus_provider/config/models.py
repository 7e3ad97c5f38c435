"""
Configuration models for the Instatus provider.

This module defines all configuration data models with validation and defaults.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Environment(str, Enum):
    """Deployment environments."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(default=LogLevel.INFO, description="Default logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log message format",
    )
    file_path: Optional[Path] = Field(default=None, description="Log file path")
    max_file_size: int = Field(
        default=10 * 1024 * 1024, ge=1, description="Max log file size in bytes"
    )
    backup_count: int = Field(default=5, ge=0, description="Number of backup log files")
    enable_console: bool = Field(default=True, description="Enable console logging")
    enable_file: bool = Field(default=False, description="Enable file logging")
    enable_structured: bool = Field(
        default=False, description="Enable structured JSON logging"
    )

    provider_logs_only: bool = Field(
        default=False, description="Drop records from loggers outside instatus_provider"
    )

    # Per-logger levels, e.g. {"instatus_provider.resources": "DEBUG"}
    component_levels: Dict[str, LogLevel] = Field(
        default_factory=dict, description="Per-component log levels"
    )

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        """Accept level names in any case."""
        return v.upper() if isinstance(v, str) else v

    @field_validator("component_levels", mode="before")
    @classmethod
    def normalize_component_levels(cls, v: Any) -> Any:
        """Accept per-component level names in any case."""
        if isinstance(v, dict):
            return {k: lvl.upper() if isinstance(lvl, str) else lvl for k, lvl in v.items()}
        return v


class EnvironmentConfig(BaseModel):
    """Environment-specific configuration."""

    environment: Environment = Field(
        default=Environment.DEVELOPMENT, description="Current environment"
    )
    debug: bool = Field(default=False, description="Force DEBUG logging regardless of the configured level")


class GlobalConfig(BaseModel):
    """Top-level provider configuration."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    environment: EnvironmentConfig = Field(default_factory=EnvironmentConfig)

    model_config = ConfigDict(validate_assignment=True, extra="ignore")

    @classmethod
    def for_environment(cls, environment: Environment) -> "GlobalConfig":
        """
        Create configuration for specific environment.

        Args:
            environment: Target environment

        Returns:
            GlobalConfig configured for the environment
        """
        if environment == Environment.PRODUCTION:
            return cls(
                environment=EnvironmentConfig(environment=environment, debug=False),
                logging=LoggingConfig(level=LogLevel.WARNING, enable_structured=True),
            )
        return cls(
            environment=EnvironmentConfig(environment=environment, debug=True),
            logging=LoggingConfig(level=LogLevel.DEBUG),
        )


__all__ = [
    "LogLevel",
    "Environment",
    "LoggingConfig",
    "EnvironmentConfig",
    "GlobalConfig",
]
