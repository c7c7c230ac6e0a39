"""
Structured-data file helpers.

The YAML helpers are grouped in the ``yaml_io`` namespace module and also
exported here under their own names.
"""

from BotKit.serialization import yaml_io
from BotKit.serialization.yaml_io import parse, read, read_sync, stringify, write, write_sync

__all__ = ["yaml_io", "parse", "read", "read_sync", "stringify", "write", "write_sync"]
