"""
Utility functions for the BotKit package.

This package holds the small standalone helpers (account number validation,
call stack capture) along with the package's logging setup.
"""

from BotKit.utils.stack import get_stack
from BotKit.utils.validation import check_uin

__all__ = ["check_uin", "get_stack"]
