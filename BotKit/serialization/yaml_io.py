"""
Reading and writing YAML files.

Blocking and asyncio variants of the same two operations. The async variants
run the blocking file work in the event loop's default executor.

Files are parsed with ``yaml.safe_load`` and written with ``yaml.safe_dump``.
The helpers hold no state: the encoding and any ``yaml.safe_dump`` option are
passed per call, and anything not passed uses ``DEFAULT_ENCODING`` and
``DEFAULT_DUMP_OPTIONS``. Nothing here catches errors: a missing file raises
``FileNotFoundError``, malformed YAML raises ``yaml.YAMLError`` and
unrepresentable values raise ``yaml.representer.RepresenterError``.

Example:
    >>> from BotKit.serialization import yaml_io
    >>> yaml_io.write_sync('settings.yml', {'owner': 10001, 'plugins': ['echo']})
    >>> yaml_io.read_sync('settings.yml')
    {'owner': 10001, 'plugins': ['echo']}

    # Using the options from the configuration system
    >>> from BotKit.config import get_config
    >>> yaml_io.write_sync('settings.yml', data, **get_config().get_yaml_settings())
"""

import asyncio
import os
from typing import Any, Dict, Union

import yaml

from BotKit.utils.logging import get_logger

logger = get_logger(__name__)

PathLike = Union[str, os.PathLike]

DEFAULT_ENCODING = "utf-8"

# Block style, insertion order, unicode written as-is
DEFAULT_DUMP_OPTIONS: Dict[str, Any] = {
    "indent": 2,
    "sort_keys": False,
    "allow_unicode": True,
    "default_flow_style": False,
    "explicit_start": False,
}


def _write_text(path: PathLike, text: str, encoding: str) -> None:
    logger.debug(f"Writing YAML file {path}")
    with open(path, 'w', encoding=encoding) as f:
        f.write(text)


def parse(text: str) -> Any:
    """
    Parse a YAML document.

    Args:
        text: YAML source

    Returns:
        The parsed value; None for an empty document
    """
    return yaml.safe_load(text)


def stringify(data: Any, **dump_options: Any) -> str:
    """
    Serialize ``data`` to a YAML document.

    Args:
        data: Value built from dicts, lists and scalars
        **dump_options: ``yaml.safe_dump`` keyword arguments overriding DEFAULT_DUMP_OPTIONS

    Returns:
        The YAML text
    """
    options = dict(DEFAULT_DUMP_OPTIONS, **dump_options)
    return yaml.safe_dump(data, **options)


def read_sync(path: PathLike, *, encoding: str = DEFAULT_ENCODING) -> Any:
    """
    Read and parse a YAML file.

    Args:
        path: File to read
        encoding: Text encoding of the file

    Returns:
        The parsed value; None for an empty file
    """
    logger.debug(f"Reading YAML file {path}")
    with open(path, 'r', encoding=encoding) as f:
        text = f.read()
    return parse(text)


def write_sync(path: PathLike, data: Any, *, encoding: str = DEFAULT_ENCODING, **dump_options: Any) -> None:
    """
    Serialize ``data`` and write it to a YAML file, replacing its contents.

    Args:
        path: File to write; its directory must already exist
        data: Value to serialize
        encoding: Text encoding of the file
        **dump_options: ``yaml.safe_dump`` keyword arguments overriding DEFAULT_DUMP_OPTIONS
    """
    _write_text(path, stringify(data, **dump_options), encoding)


async def read(path: PathLike, *, encoding: str = DEFAULT_ENCODING) -> Any:
    """
    Read and parse a YAML file without blocking the event loop.

    Args:
        path: File to read
        encoding: Text encoding of the file

    Returns:
        The parsed value; None for an empty file
    """
    loop = asyncio.get_event_loop()
    return await loop.run_in_executor(None, lambda: read_sync(path, encoding=encoding))


async def write(path: PathLike, data: Any, *, encoding: str = DEFAULT_ENCODING, **dump_options: Any) -> None:
    """
    Serialize ``data`` and write it to a YAML file without blocking the event loop.

    Serialization happens on the event loop thread; only the file write is
    handed to the executor.

    Args:
        path: File to write; its directory must already exist
        data: Value to serialize
        encoding: Text encoding of the file
        **dump_options: ``yaml.safe_dump`` keyword arguments overriding DEFAULT_DUMP_OPTIONS
    """
    text = stringify(data, **dump_options)
    loop = asyncio.get_event_loop()
    await loop.run_in_executor(None, _write_text, path, text, encoding)
