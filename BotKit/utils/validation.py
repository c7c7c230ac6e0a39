"""
Validation helpers for account identifiers.
"""

import re
from typing import Any

# 5 to 11 digits, no leading zero
UIN_PATTERN = re.compile(r'[1-9][0-9]{4,10}')


def check_uin(uin: Any) -> bool:
    """
    Check whether ``uin`` is a valid numeric user account number.

    The value is converted with ``str()`` first, so anything can be passed;
    only a decimal string of 5 to 11 digits that does not start with 0 is
    accepted.

    Args:
        uin: The account number, normally an int

    Returns:
        bool: True if the whole string form matches, False otherwise

    Examples:
        >>> check_uin(10001)
        True
        >>> check_uin(1234)
        False
    """
    return UIN_PATTERN.fullmatch(str(uin)) is not None
