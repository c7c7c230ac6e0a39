"""
Default configuration values for BotKit.

These values are used when no custom configuration is provided and define the
structure a configuration file may override.

Default configuration values can be overridden by:
1. Configuration files (botkit.yml)
2. Environment variables (BOTKIT_SECTION_KEY)
3. Programmatic configuration via the ConfigManager
"""

from typing import Dict, Any

# YAML helper options, passed via ConfigManager.get_yaml_settings()
YAML_DEFAULTS: Dict[str, Any] = {
    # Encoding used for reading and writing files
    "encoding": "utf-8",
    # Number of spaces per indentation level
    "indent": 2,
    # Sort mapping keys on output (False keeps insertion order)
    "sort_keys": False,
    # Write non-ASCII characters as-is instead of escaping them
    "allow_unicode": True,
    # Use flow style ({a: 1}) for collections instead of block style
    "default_flow_style": False,
    # Start documents with an explicit '---' marker
    "explicit_start": False
}

# Default logging configuration
LOGGING_DEFAULTS: Dict[str, Any] = {
    # Logging level: 'debug', 'info', 'warning', 'error', 'critical'
    "level": "info",
    # Logging format: 'json', 'text'
    "format": "text",
    # Log file path (null = log to stderr only)
    "file": None
}

# Complete default configuration structure
DEFAULT_CONFIG: Dict[str, Dict[str, Any]] = {
    "yaml": YAML_DEFAULTS,
    "logging": LOGGING_DEFAULTS
}
