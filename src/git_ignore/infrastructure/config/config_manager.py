"""Configuration manager for loading and validating .git-ignore.yml"""

import copy
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from git_ignore.domain.config import AppConfig, EditorConfig, LoggingConfig

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".git-ignore.yml"
ENV_PREFIX = "GIT_IGNORE_"

# Environment variable suffix -> (section, field)
ENV_OVERRIDES = {
    "GLOBAL": ("editor", "global"),
    "UNIQUE": ("editor", "unique"),
    "VERBOSE": ("logging", "verbose"),
}


class ConfigurationError(Exception):
    """Configuration validation error."""

    pass


class ConfigManager:
    """Manages configuration from .git-ignore.yml and environment variables

    Configuration priority:
    1. Default values (defined in Pydantic models)
    2. .git-ignore.yml file (searched from current directory upward)
    3. Environment variables (GIT_IGNORE_GLOBAL, GIT_IGNORE_UNIQUE, GIT_IGNORE_VERBOSE)
    4. CLI flags (handled by CLI layer)
    """

    DEFAULT_CONFIG = {
        "editor": {
            "global": False,
            "unique": False,
        },
        "logging": {
            "verbose": False,
        },
    }

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize config manager

        Args:
            config_path: Path to .git-ignore.yml (searches from current dir if None)

        Raises:
            ConfigurationError: If configuration validation fails
        """
        if isinstance(config_path, str):
            config_path = Path(config_path)
        self.config_path = config_path or self._find_config_file()
        try:
            self.config: AppConfig = self._load_config()
        except ValidationError as e:
            errors = []
            for error in e.errors():
                field = ".".join(str(x) for x in error["loc"])
                msg = error["msg"]
                errors.append(f"  - {field}: {msg}")
            raise ConfigurationError(
                "Configuration validation failed:\n" + "\n".join(errors)
            ) from e

    def _find_config_file(self) -> Optional[Path]:
        """Find .git-ignore.yml starting from current directory

        Returns:
            Path to config file or None if not found
        """
        current = Path.cwd()
        for parent in [current] + list(current.parents):
            config_file = parent / CONFIG_FILE_NAME
            if config_file.is_file():
                logger.debug(f"Found config file: {config_file}")
                return config_file
        logger.debug(f"No {CONFIG_FILE_NAME} found, using defaults")
        return None

    def _load_config(self) -> AppConfig:
        """Load configuration from file and environment, then validate

        Returns:
            Validated AppConfig instance

        Raises:
            ValidationError: If configuration is invalid
        """
        config_dict = copy.deepcopy(self.DEFAULT_CONFIG)

        if self.config_path and self.config_path.exists():
            try:
                with open(self.config_path, "r", encoding="utf-8") as f:
                    file_config = yaml.safe_load(f) or {}
                if not isinstance(file_config, dict):
                    raise ValueError("top level must be a mapping")
                config_dict = self._merge_config(config_dict, file_config)
                logger.debug(f"Loaded configuration from {self.config_path}")
            except (OSError, ValueError, yaml.YAMLError) as e:
                logger.warning(f"Failed to load config from {self.config_path}: {e}")
                logger.info("Using default configuration")

        config_dict = self._apply_env_overrides(config_dict)

        return AppConfig(**config_dict)

    def _merge_config(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively merge configuration dictionaries

        Args:
            base: Base configuration
            override: Override configuration

        Returns:
            Merged configuration
        """
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_config(result[key], value)
            else:
                result[key] = value
        return result

    def _apply_env_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Apply GIT_IGNORE_* environment variable overrides

        Values are passed through as strings; pydantic coerces "1", "true",
        "yes", "on" (and their negatives) to booleans.

        Args:
            config: Configuration dictionary

        Returns:
            Configuration with env overrides applied
        """
        for suffix, (section, field) in ENV_OVERRIDES.items():
            value = os.getenv(ENV_PREFIX + suffix)
            if value:
                if not isinstance(config.get(section), dict):
                    config[section] = {}
                config[section][field] = value
        return config

    def get_editor_config(self) -> EditorConfig:
        """Get editor configuration

        Returns:
            Editor configuration model
        """
        return self.config.editor

    def get_logging_config(self) -> LoggingConfig:
        """Get logging configuration

        Returns:
            Logging configuration model
        """
        return self.config.logging

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by key (supports dot notation)

        Args:
            key: Configuration key (e.g., "editor.unique" or "editor")
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        keys = key.split(".")
        value = self.config.model_dump(by_alias=True)
        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value
