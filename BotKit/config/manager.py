"""
Configuration manager for BotKit.

This module implements the ConfigManager class that provides a centralized
configuration system with support for hierarchical keys, deep merging,
environment overrides and loading from files.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from BotKit.config.defaults import DEFAULT_CONFIG
from BotKit.config.schema import BotKitConfig, validate_config
from BotKit.exceptions import UnsupportedFormatError, ValidationError
from BotKit.objects import deep_clone, deep_merge
from BotKit.utils.logging import LOG_FILE_ENV_VAR, LOG_FORMAT_ENV_VAR, LOG_LEVEL_ENV_VAR, get_logger

# Prefix of environment variables overriding configuration values
ENV_PREFIX = "BOTKIT_"

CONFIG_FILE_NAME = "botkit.yml"

# Shorter names read by the logging module, accepted for the logging section
ENV_ALIASES = {
    "logging.level": LOG_LEVEL_ENV_VAR,
    "logging.format": LOG_FORMAT_ENV_VAR,
    "logging.file": LOG_FILE_ENV_VAR,
}


class ConfigManager:
    """
    Configuration manager for BotKit.

    Implements a singleton pattern to ensure only one configuration
    instance exists across the application.

    Features:
    - Hierarchical key access (e.g., "yaml.indent")
    - Deep merging of configuration files over the defaults
    - Loading from YAML or JSON files
    - Environment variable overrides (BOTKIT_YAML_INDENT=4)
    - Configuration validation

    Attributes:
        _instance (ConfigManager): The singleton instance
        _config (Dict[str, Any]): The configuration dictionary
        logger: The logger instance
    """
    _instance = None

    def __new__(cls) -> 'ConfigManager':
        if cls._instance is None:
            cls._instance = super(ConfigManager, cls).__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self) -> None:
        """Reset the configuration to the default values."""
        self._config = deep_clone(DEFAULT_CONFIG)
        self.logger = get_logger(__name__)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value using dot notation.

        Args:
            key (str): Hierarchical key using dot notation (e.g., "yaml.indent")
            default (Any, optional): Value to return if the key is not found

        Returns:
            Any: The configuration value if found, otherwise the default value.

        Examples:
            >>> config = get_config()
            >>> indent = config.get("yaml.indent", 2)
        """
        if not key:
            return default

        value = self._config
        for part in key.split('.'):
            if isinstance(value, dict) and part in value:
                value = value[part]
            else:
                return default

        return value

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value using dot notation.

        Creates intermediate dictionaries if they don't exist. The value is
        not validated.

        Args:
            key (str): Hierarchical key using dot notation (e.g., "yaml.sort_keys")
            value (Any): Value to set

        Examples:
            >>> config = get_config()
            >>> config.set("yaml.sort_keys", True)
        """
        if not key:
            return

        parts = key.split('.')
        config = self._config

        for part in parts[:-1]:
            if part not in config or not isinstance(config[part], dict):
                config[part] = {}
            config = config[part]

        config[parts[-1]] = value

    def get_yaml_settings(self) -> Dict[str, Any]:
        """
        Get the options used for reading and writing YAML files.

        Returns:
            Dict[str, Any]: ``encoding`` plus the keyword arguments passed to ``yaml.safe_dump``
        """
        return {
            "encoding": self.get("yaml.encoding", "utf-8"),
            "indent": self.get("yaml.indent", 2),
            "sort_keys": self.get("yaml.sort_keys", False),
            "allow_unicode": self.get("yaml.allow_unicode", True),
            "default_flow_style": self.get("yaml.default_flow_style", False),
            "explicit_start": self.get("yaml.explicit_start", False),
        }

    def get_logging_settings(self) -> Dict[str, Any]:
        """
        Get the logging settings.

        Returns:
            Dict[str, Any]: Dictionary with ``level``, ``format`` and ``file``
        """
        return {
            "level": self.get("logging.level", "info"),
            "format": self.get("logging.format", "text"),
            "file": self.get("logging.file"),
        }

    def apply_env_overrides(self, environ: Optional[Dict[str, str]] = None) -> List[str]:
        """
        Override configuration values from environment variables.

        Every known key can be overridden with ``BOTKIT_<SECTION>_<KEY>``
        (e.g. ``BOTKIT_YAML_INDENT=4``). Values are parsed as YAML scalars so
        numbers and booleans get their proper types.
        The logging keys also accept the names the logging module reads
        (``BOTKIT_LOG_LEVEL``, ``BOTKIT_LOG_FORMAT``, ``BOTKIT_LOG_FILE``);
        the full ``BOTKIT_LOGGING_*`` name wins when both are set.

        Args:
            environ: Mapping to read instead of ``os.environ``

        Returns:
            List[str]: The dot-notation keys that were overridden
        """
        environ = os.environ if environ is None else environ
        overridden = []

        for section, values in DEFAULT_CONFIG.items():
            for key in values:
                env_names = [f"{ENV_PREFIX}{section}_{key}".upper()]
                if f"{section}.{key}" in ENV_ALIASES:
                    env_names.append(ENV_ALIASES[f"{section}.{key}"])

                env_name = next((name for name in env_names if name in environ), None)
                if env_name is None:
                    continue

                raw = environ[env_name]
                try:
                    value = yaml.safe_load(raw)
                except yaml.YAMLError:
                    value = raw

                errors = validate_config({section: {key: value}})
                if errors:
                    self.logger.warning(f"Ignoring {env_name}: {errors[section]}")
                    continue

                self.set(f"{section}.{key}", value)
                overridden.append(f"{section}.{key}")

        if overridden:
            self.logger.debug(f"Applied environment overrides: {', '.join(overridden)}")

        return overridden

    def find_config_file(self) -> Optional[Path]:
        """
        Find the configuration file in standard locations.

        Searches in the following order:
        1. Current working directory: ./botkit.yml
        2. User's home directory: ~/.botkit/botkit.yml

        Returns:
            Optional[Path]: Path to the configuration file if found, None otherwise
        """
        search_locations = [
            Path.cwd() / CONFIG_FILE_NAME,
            Path.home() / '.botkit' / CONFIG_FILE_NAME,
        ]

        for path in search_locations:
            if path.is_file():
                self.logger.debug(f"Found configuration file at: {path}")
                return path

        self.logger.debug("No configuration file found in standard locations")
        return None

    def load_config(self) -> bool:
        """
        Load configuration from the first available standard location.

        The file is merged over a fresh copy of the defaults, then environment
        overrides are applied. If no file is found, or the file is invalid,
        the defaults (plus environment overrides) stay in effect.

        Returns:
            bool: True if a configuration file was found and loaded, False otherwise
        """
        config_path = self.find_config_file()

        if not config_path:
            self.logger.debug("No configuration file found, using defaults")
            self.apply_env_overrides()
            return False

        try:
            config = self._read_file(config_path)
        except (OSError, yaml.YAMLError) as e:
            self.logger.error(f"Failed to load configuration file {config_path}: {e}")
            self.apply_env_overrides()
            return False

        errors = validate_config(config)
        if errors:
            self.logger.warning(f"Configuration validation errors in {config_path}: {errors}")
            self.apply_env_overrides()
            return False

        self._config = deep_merge(deep_clone(DEFAULT_CONFIG), config)
        self.apply_env_overrides()

        self.logger.info(f"Loaded configuration from {config_path}")
        return True

    def load_from_file(self, path: Union[str, Path], strict: bool = False) -> Dict[str, List[str]]:
        """
        Load configuration from a specific file.

        Loads a YAML or JSON file and merges it over the current configuration
        if it passes validation.

        Args:
            path (Union[str, Path]): Path to the configuration file
            strict (bool): Raise ValidationError instead of returning errors

        Returns:
            Dict[str, List[str]]: Dictionary of validation errors, if any

        Raises:
            FileNotFoundError: If the file does not exist
            UnsupportedFormatError: If the file extension is not .yml, .yaml or .json
            ValidationError: If ``strict`` is set and the file is invalid

        Examples:
            >>> config = get_config()
            >>> errors = config.load_from_file("/path/to/botkit.yml")
            >>> if errors:
            ...     print("Configuration validation errors:", errors)
        """
        path = Path(path)

        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        config = self._read_file(path)
        errors = validate_config(config)

        if errors:
            if strict:
                raise ValidationError(
                    f"Invalid configuration in {path}",
                    context={"path": str(path), "errors": errors}
                )
            return errors

        deep_merge(self._config, config)
        self.logger.debug(f"Merged configuration from {path}")
        return errors

    def _read_file(self, path: Path) -> Any:
        suffix = path.suffix.lower()
        if suffix in ('.yaml', '.yml'):
            with open(path, 'r', encoding='utf-8') as f:
                return yaml.safe_load(f)
        if suffix == '.json':
            with open(path, 'r', encoding='utf-8') as f:
                return json.load(f)
        raise UnsupportedFormatError(
            f"Unsupported configuration file format: {path.suffix}",
            context={"path": str(path)}
        )

    def get_all(self) -> BotKitConfig:
        """
        Get a deep copy of the entire configuration dictionary.

        Examples:
            >>> config = get_config()
            >>> print(json.dumps(config.get_all(), indent=2))
        """
        return deep_clone(self._config)


def get_config() -> ConfigManager:
    """
    Get the singleton ConfigManager instance.

    Examples:
        >>> from BotKit.config import get_config
        >>> config = get_config()
        >>> encoding = config.get("yaml.encoding")
    """
    return ConfigManager()
