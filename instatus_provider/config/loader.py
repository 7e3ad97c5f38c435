"""
Configuration loader for the Instatus provider.

This module handles loading configuration from configuration files and
``INSTATUS_`` environment variables.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .models import Environment, GlobalConfig


class ConfigLoader:
    """Configuration loader with support for multiple sources."""

    def __init__(self) -> None:
        """Initialize configuration loader."""
        self.config_paths = [
            Path("instatus.yaml"),
            Path("instatus.yml"),
            Path("instatus.json"),
            Path("config/instatus.yaml"),
            Path("config/instatus.yml"),
            Path("config/instatus.json"),
            Path.home() / ".instatus" / "config.yaml",
            Path.home() / ".instatus" / "config.yml",
            Path.home() / ".instatus" / "config.json",
        ]

        # Environment variable prefix
        self.env_prefix = "INSTATUS_"

    def load_config(
        self,
        config_file: Optional[Union[str, Path]] = None,
        environment: Optional[Environment] = None,
    ) -> GlobalConfig:
        """
        Load configuration from all available sources.

        Later sources win: environment defaults, then the config file, then
        environment variables.

        Args:
            config_file: Specific config file to load
            environment: Target environment whose defaults seed the config

        Returns:
            GlobalConfig instance with merged configuration
        """
        config_data: Dict[str, Any] = {}
        if environment:
            config_data = GlobalConfig.for_environment(environment).model_dump(
                mode="json"
            )

        # Load from file
        file_config = self._load_from_file(config_file)
        if file_config:
            config_data = self._deep_merge(config_data, file_config)

        # Load from environment variables
        env_config = self._load_from_environment()
        if env_config:
            config_data = self._deep_merge(config_data, env_config)

        return GlobalConfig(**config_data)

    def _load_from_file(
        self, config_file: Optional[Union[str, Path]] = None
    ) -> Optional[Dict[str, Any]]:
        """Load configuration from file."""
        if config_file:
            config_path = Path(config_file)
            if not config_path.exists():
                raise ValueError(f"Config file not found: {config_path}")
            return self._parse_config_file(config_path)

        for config_path in self.config_paths:
            if config_path.exists():
                return self._parse_config_file(config_path)

        return None

    def _parse_config_file(self, config_path: Path) -> Dict[str, Any]:
        """Parse configuration file based on extension."""
        suffix = config_path.suffix.lower()
        if suffix not in (".yaml", ".yml", ".json"):
            raise ValueError(f"Unsupported config file format: {config_path.suffix}")

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                if suffix == ".json":
                    return json.load(f) or {}
                return yaml.safe_load(f) or {}
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ValueError(f"Failed to parse config file {config_path}: {e}") from e

    def _load_from_environment(self) -> Dict[str, Any]:
        """Load configuration from environment variables."""
        config: Dict[str, Any] = {}

        env_mappings = {
            # Logging
            f"{self.env_prefix}LOG_LEVEL": ("logging", "level"),
            f"{self.env_prefix}LOG_FILE": ("logging", "file_path"),
            f"{self.env_prefix}LOG_FORMAT": ("logging", "format"),
            f"{self.env_prefix}LOG_STRUCTURED": ("logging", "enable_structured"),
            # Environment
            f"{self.env_prefix}ENVIRONMENT": ("environment", "environment"),
            f"{self.env_prefix}DEBUG": ("environment", "debug"),
        }

        for env_var, config_path in env_mappings.items():
            value = os.getenv(env_var)
            if value is not None:
                converted_value = self._convert_env_value(value)

                # Set nested configuration value
                current = config
                for key in config_path[:-1]:
                    current = current.setdefault(key, {})
                current[config_path[-1]] = converted_value

        return config

    def _convert_env_value(self, value: str) -> Any:
        """Convert environment variable string to appropriate type."""
        lower = value.lower()
        if lower in ("true", "yes", "on"):
            return True
        if lower in ("false", "no", "off"):
            return False

        try:
            if "." in value:
                return float(value)
            return int(value)
        except ValueError:
            pass

        return value

    def _deep_merge(
        self, base: Dict[str, Any], override: Dict[str, Any]
    ) -> Dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result


__all__ = ["ConfigLoader"]
