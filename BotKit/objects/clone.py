"""
Deep copying of JSON-representable data.
"""

import json
from typing import TypeVar

T = TypeVar('T')


def deep_clone(obj: T) -> T:
    """
    Return a structurally independent copy of ``obj``.

    The copy is made by serializing to JSON and parsing the result, so it
    follows JSON semantics: tuples come back as lists and non-string mapping
    keys come back as strings.

    Args:
        obj: A JSON-representable value (dicts, lists, strings, numbers, bools, None)

    Returns:
        A deep copy sharing no mutable state with ``obj``

    Raises:
        TypeError: If ``obj`` contains a value JSON cannot represent (functions, sets, ...)
        ValueError: If ``obj`` contains a circular reference, NaN or Infinity

    Example:
        >>> original = {'a': [1, 2], 'b': {'c': None}}
        >>> copy = deep_clone(original)
        >>> copy == original, copy['a'] is original['a']
        (True, False)
    """
    return json.loads(json.dumps(obj, allow_nan=False))
