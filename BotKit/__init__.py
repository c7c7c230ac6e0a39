"""
BotKit - General-purpose helpers for bot projects.

Key Components:
- YAML file I/O: read_sync/read and write_sync/write, blocking and asyncio
- deep_merge: recursive in-place merge of configuration-style dictionaries
- deep_clone: independent copy of JSON-representable data
- check_uin: account number validation
- get_stack: call stack capture

Usage Examples:
    from BotKit import read_sync, write_sync, deep_merge

    settings = deep_merge(read_sync('defaults.yml'), read_sync('local.yml'))
    write_sync('merged.yml', settings)

    # Async variants
    from BotKit import read
    settings = await read('defaults.yml')

    # Setting the log level
    from BotKit import set_log_level
    set_log_level('debug')
"""

__version__ = '1.0.0'

from BotKit.config import get_config
from BotKit.utils.logging import get_logger, set_log_level, configure_logging

logger = get_logger(__name__)


def initialize_config() -> bool:
    """
    Initialize the BotKit configuration system.

    Searches for a configuration file in standard locations, loads it if
    found and applies its logging settings.

    Returns:
        bool: True if a config file was found and loaded, False if using defaults
    """
    logger.debug("Initializing configuration system")
    config = get_config()
    loaded = config.load_config()

    settings = config.get_logging_settings()
    configure_logging(
        level=settings["level"],
        use_json=str(settings["format"]).lower() == "json",
        log_file=settings["file"]
    )
    return loaded


from BotKit.objects import deep_clone, deep_merge
from BotKit.serialization import yaml_io
from BotKit.serialization.yaml_io import parse, read, read_sync, stringify, write, write_sync
from BotKit.utils import check_uin, get_stack

__all__ = [
    'yaml_io', 'read', 'read_sync', 'write', 'write_sync', 'parse', 'stringify',
    'check_uin', 'get_stack', 'deep_merge', 'deep_clone',
    'initialize_config', 'set_log_level', 'get_config',
]
