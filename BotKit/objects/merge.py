"""
Deep merging of mapping objects.

``deep_merge`` copies every key of a source mapping into a target mapping,
recursing wherever the target already holds a nested structure. The target is
mutated in place and returned; the source is never modified.

Whether to recurse is decided by the type of the value already in the
*target*, never by the source value. This has one visible consequence: a
nested mapping in the target survives a scalar in the source::

    >>> deep_merge({'a': {'x': 1}}, {'a': 5})
    {'a': {'x': 1}}

because the recursive call ``deep_merge({'x': 1}, 5)`` finds no keys in ``5``.
"""

from collections.abc import Mapping
from typing import Any, Iterable, Optional, Tuple, TypeVar

T = TypeVar('T')

# A key the target does not have, as opposed to one holding None
_MISSING = object()


def _is_mergeable(value: Any, legacy: bool) -> bool:
    """Return True if the merge should recurse into ``value``."""
    if isinstance(value, Mapping):
        return True
    if legacy:
        # Mirrors a JavaScript "typeof value === 'object'" check
        return value is None or isinstance(value, (list, tuple))
    return False


def _source_items(source: Any, legacy: bool) -> Iterable[Tuple[Any, Any]]:
    if isinstance(source, Mapping):
        return list(source.items())
    if legacy and isinstance(source, (list, tuple)):
        # Indices are exposed as strings, like Object.keys on an array
        return [(str(index), item) for index, item in enumerate(source)]
    # None and scalars have no keys to contribute
    return []


def _index(key: Any) -> Any:
    """Convert a digit-string key to a list index; other keys pass through."""
    if isinstance(key, str) and key.isascii() and key.isdecimal():
        return int(key)
    return key


def _lookup(target: Any, key: Any) -> Any:
    if isinstance(target, Mapping):
        return target.get(key, _MISSING)
    if isinstance(target, (list, tuple)):
        index = _index(key)
        if isinstance(index, int) and 0 <= index < len(target):
            return target[index]
    return _MISSING


def _assign(target: Any, key: Any, value: Any) -> None:
    if isinstance(target, (list, tuple)):
        key = _index(key)
    if isinstance(target, list) and key == len(target):
        # Sequential indices past the end grow the list
        target.append(value)
    else:
        target[key] = value


def deep_merge(target: T, source: Optional[Any] = None, legacy: bool = False) -> T:
    """
    Recursively merge ``source`` into ``target``, with source values taking precedence.

    Rules:
    - If ``target[key]`` is a mapping, recurse into it with ``source[key]``
    - Otherwise replace ``target[key]`` with ``source[key]`` (by reference, not copied)
    - A ``source`` that is None or not a mapping contributes nothing

    With ``legacy=True`` lists, tuples and None found in the target are also
    recursed into, and list sources contribute their indices as string keys
    ("0", "1", ...). Recursing into None with a non-empty source raises
    TypeError on assignment. Recursing into a list assigns by index, where
    digit-string keys are converted to ints and an index equal to the list
    length appends.

    Args:
        target: Mapping to merge into; mutated in place
        source: Mapping whose values take precedence, or None
        legacy: Treat sequences and None as mergeable containers

    Returns:
        ``target`` itself, for chaining

    Raises:
        TypeError: If a key has to be assigned on an object that does not
            support item assignment
        RecursionError: If the inputs are nested too deeply or contain a cycle

    Examples:
        >>> deep_merge({'a': 1, 'b': {'c': 2}}, {'b': {'d': 3}})
        {'a': 1, 'b': {'c': 2, 'd': 3}}
        >>> deep_merge({'tags': ['x']}, {'tags': ['y']})
        {'tags': ['y']}
    """
    for key, value in _source_items(source, legacy):
        current = _lookup(target, key)

        if _is_mergeable(current, legacy):
            _assign(target, key, deep_merge(current, value, legacy))
        else:
            _assign(target, key, value)

    return target
