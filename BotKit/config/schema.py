"""
Configuration schema and validation for BotKit.

Configuration files only need to contain the values they override, so every
section and key is optional. Unknown sections or keys are reported as errors
so that typos do not silently fall back to defaults.
"""

import codecs
from typing import TypedDict, Literal, Optional, Dict, Any, List

from BotKit.config.defaults import DEFAULT_CONFIG

LoggingLevel = Literal["debug", "info", "warning", "error", "critical"]
LoggingFormat = Literal["json", "text"]

VALID_LOGGING_LEVELS = ("debug", "info", "warning", "error", "critical")
VALID_LOGGING_FORMATS = ("json", "text")

MIN_INDENT = 2
MAX_INDENT = 9


class YamlConfig(TypedDict, total=False):
    """TypedDict for YAML output configuration validation"""
    encoding: str
    indent: int
    sort_keys: bool
    allow_unicode: bool
    default_flow_style: bool
    explicit_start: bool


class LoggingConfig(TypedDict, total=False):
    """TypedDict for logging configuration validation"""
    level: LoggingLevel
    format: LoggingFormat
    file: Optional[str]


class BotKitConfig(TypedDict, total=False):
    """TypedDict for the complete configuration"""
    yaml: YamlConfig
    logging: LoggingConfig


def _unknown_keys(section: str, values: Dict[str, Any]) -> List[str]:
    known = DEFAULT_CONFIG[section]
    return [f"Unknown {section} setting: {key}" for key in values if key not in known]


def _is_bool(value: Any) -> bool:
    return isinstance(value, bool)


def _is_int(value: Any) -> bool:
    # bool is a subclass of int
    return isinstance(value, int) and not isinstance(value, bool)


def is_valid_encoding(encoding: str) -> bool:
    """Return True if ``encoding`` names a codec Python knows."""
    try:
        codecs.lookup(encoding)
        return True
    except LookupError:
        return False


def validate_yaml_config(yaml_config: Dict[str, Any]) -> List[str]:
    """
    Validate the ``yaml`` section.

    Args:
        yaml_config: The yaml section of the configuration

    Returns:
        List of error messages, empty if valid
    """
    if not isinstance(yaml_config, dict):
        return ["YAML configuration must be a mapping"]

    errors = _unknown_keys("yaml", yaml_config)

    if "encoding" in yaml_config:
        encoding = yaml_config["encoding"]
        if not isinstance(encoding, str) or not is_valid_encoding(encoding):
            errors.append(f"Invalid encoding: {encoding}")

    if "indent" in yaml_config:
        indent = yaml_config["indent"]
        if not _is_int(indent) or not MIN_INDENT <= indent <= MAX_INDENT:
            errors.append(f"Invalid indent: {indent}. Must be an integer between {MIN_INDENT} and {MAX_INDENT}")

    for flag in ("sort_keys", "allow_unicode", "default_flow_style", "explicit_start"):
        if flag in yaml_config and not _is_bool(yaml_config[flag]):
            errors.append(f"Invalid {flag}: {yaml_config[flag]}. Must be true or false")

    return errors


def validate_logging_config(logging_config: Dict[str, Any]) -> List[str]:
    """
    Validate the ``logging`` section.

    Args:
        logging_config: The logging section of the configuration

    Returns:
        List of error messages, empty if valid
    """
    if not isinstance(logging_config, dict):
        return ["Logging configuration must be a mapping"]

    errors = _unknown_keys("logging", logging_config)

    if "level" in logging_config:
        level = logging_config["level"]
        if not isinstance(level, str) or level.lower() not in VALID_LOGGING_LEVELS:
            errors.append(f"Invalid logging level: {level}. Must be one of: {', '.join(VALID_LOGGING_LEVELS)}")

    if "format" in logging_config:
        fmt = logging_config["format"]
        if not isinstance(fmt, str) or fmt.lower() not in VALID_LOGGING_FORMATS:
            errors.append(f"Invalid logging format: {fmt}. Must be one of: {', '.join(VALID_LOGGING_FORMATS)}")

    if "file" in logging_config:
        log_file = logging_config["file"]
        if log_file is not None and not isinstance(log_file, str):
            errors.append(f"Invalid log file: {log_file}. Must be a path or null")

    return errors


def validate_config(config: Any) -> Dict[str, List[str]]:
    """
    Validate a configuration structure.

    Args:
        config: The configuration dictionary to validate

    Returns:
        Dictionary mapping sections to lists of error messages
    """
    if config is None:
        return {}
    if not isinstance(config, dict):
        return {"config": ["Configuration must be a mapping of sections"]}

    errors: Dict[str, List[str]] = {}

    validators = {
        "yaml": validate_yaml_config,
        "logging": validate_logging_config,
    }

    for section, value in config.items():
        validator = validators.get(section)
        if validator is None:
            errors.setdefault("config", []).append(f"Unknown configuration section: {section}")
            continue

        section_errors = validator(value)
        if section_errors:
            errors[section] = section_errors

    return errors
