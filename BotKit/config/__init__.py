"""
BotKit Configuration System.

This package provides a centralized configuration system for BotKit with
support for hierarchical keys, deep merging, environment overrides and
validation.

Usage:
    from BotKit.config import get_config

    # Get a configuration value
    indent = get_config().get("yaml.indent")

    # Set a configuration value
    get_config().set("yaml.sort_keys", True)

    # Load configuration from standard locations
    get_config().load_config()
"""

from BotKit.config.manager import ConfigManager, get_config
from BotKit.config.schema import validate_config

__all__ = ["ConfigManager", "get_config", "validate_config"]
