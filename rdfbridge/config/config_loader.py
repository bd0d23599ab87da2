"""
rdfbridge Configuration Loader

This module loads and validates rdfbridge configuration from YAML files.
When no file is given the built-in defaults are used, and a few settings can
be overridden through environment variables.
"""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional
import logging

logger = logging.getLogger(__name__)

_VALID_LOG_LEVELS = ('CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG')

_TRUE_VALUES = ('1', 'true', 'yes', 'on')
_FALSE_VALUES = ('0', 'false', 'no', 'off')


class ConfigurationError(Exception):
    """Raised when there are configuration loading or validation errors."""
    pass


class RdfBridgeConfig:
    """
    rdfbridge configuration loader and manager.

    Loads configuration from a YAML file and provides access to configuration
    sections merged over default values.
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the configuration loader.

        Args:
            config_path: Path to configuration file. Defaults are used when None.
        """
        self.config_data: Dict[str, Any] = {}
        self.config_path: Optional[str] = None

        if config_path is not None:
            self.load_config(config_path)

    def load_config(self, config_path: str) -> None:
        """
        Load configuration from a specific file path.

        Args:
            config_path: Path to the YAML configuration file

        Raises:
            ConfigurationError: If the file cannot be loaded or parsed
        """
        config_file = Path(config_path)

        if not config_file.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Error parsing YAML configuration: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Error loading configuration file: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration root must be a mapping, got {type(data).__name__}")

        self.config_data = data
        self.config_path = str(config_file.absolute())
        logger.info(f"Loaded configuration from: {self.config_path}")

    def _get_default_config(self) -> Dict[str, Any]:
        """
        Get the default configuration values.

        Returns:
            Dictionary containing default configuration values
        """
        return {
            'app': {
                'log_level': 'INFO'
            },
            'jsonld': {
                'allow_remote_contexts': False
            }
        }

    def _get_section(self, name: str) -> Dict[str, Any]:
        defaults = self._get_default_config().get(name, {})
        section = self.config_data.get(name) or {}
        if not isinstance(section, dict):
            raise ConfigurationError(f"Configuration section '{name}' must be a mapping")
        # Merge with defaults
        return {**defaults, **section}

    def get_app_config(self) -> Dict[str, Any]:
        """
        Get application configuration section.

        Returns:
            Dictionary containing app configuration
        """
        return self._get_section('app')

    def get_jsonld_config(self) -> Dict[str, Any]:
        """
        Get JSON-LD processing configuration section.

        Returns:
            Dictionary containing JSON-LD configuration
        """
        return self._get_section('jsonld')

    def get_log_level(self) -> str:
        """
        Get the package log level.

        Supports the RDFBRIDGE_LOG_LEVEL environment variable override.

        Returns:
            Upper-case logging level name
        """
        level = os.getenv('RDFBRIDGE_LOG_LEVEL', self.get_app_config().get('log_level', 'INFO'))
        return str(level).upper()

    def allow_remote_contexts(self) -> bool:
        """
        Whether JSON-LD parsing may fetch remote contexts.

        Supports the RDFBRIDGE_JSONLD_REMOTE_CONTEXTS environment variable override.
        """
        value = os.getenv('RDFBRIDGE_JSONLD_REMOTE_CONTEXTS')
        if value is None:
            value = self.get_jsonld_config().get('allow_remote_contexts', False)
        return _as_bool(value, 'jsonld.allow_remote_contexts')

    def validate_config(self) -> None:
        """
        Validate the loaded configuration.

        Raises:
            ConfigurationError: If configuration is invalid
        """
        level = self.get_log_level()
        if level not in _VALID_LOG_LEVELS:
            raise ConfigurationError(f"Invalid log level: {level}")

        self.allow_remote_contexts()

        logger.debug("Configuration validation passed")

    def __str__(self) -> str:
        """String representation of the configuration."""
        return f"RdfBridgeConfig(path={self.config_path}, sections={list(self.config_data.keys())})"


def _as_bool(value: Any, name: str) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {value!r}")


# Global configuration instance
_config_instance: Optional[RdfBridgeConfig] = None


def get_config(config_path: Optional[str] = None) -> RdfBridgeConfig:
    """
    Get the global configuration instance.

    Args:
        config_path: Optional path to configuration file. Only used on first call.

    Returns:
        RdfBridgeConfig instance
    """
    global _config_instance

    if _config_instance is None:
        _config_instance = RdfBridgeConfig(config_path)
        _config_instance.validate_config()

    return _config_instance


def reload_config(config_path: Optional[str] = None) -> RdfBridgeConfig:
    """
    Reload the global configuration instance.

    Args:
        config_path: Optional path to configuration file

    Returns:
        New RdfBridgeConfig instance
    """
    global _config_instance

    _config_instance = RdfBridgeConfig(config_path)
    _config_instance.validate_config()

    return _config_instance
