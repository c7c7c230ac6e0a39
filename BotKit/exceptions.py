"""
Custom exceptions for the BotKit package.

The utility functions themselves never wrap errors: I/O, parse and type
errors reach the caller unchanged. These classes are raised by the
configuration layer, where a loaded file can be wrong in ways the
standard exceptions do not describe.
"""

from typing import Optional, Dict, Any
import traceback
import sys


class BotKitError(Exception):
    """Base exception for all BotKit errors."""

    error_code = "BK-GENERIC-ERROR"
    user_message = "An unexpected error occurred."

    def __init__(
        self,
        message: str = None,
        user_message: str = None,
        error_code: str = None,
        context: Dict[str, Any] = None,
        cause: Exception = None,
        include_traceback: bool = True
    ):
        # Technical message for logs
        self.message = message or self.__class__.__doc__ or "An error occurred."
        super().__init__(self.message)

        self.user_message = user_message or self.__class__.user_message
        self.error_code = error_code or self.__class__.error_code

        self.context = context or {}
        self.cause = cause

        self.traceback: Optional[str] = None
        if include_traceback:
            self.traceback = traceback.format_exc() if sys.exc_info()[0] else None

    def to_dict(self) -> Dict[str, Any]:
        """Convert the exception to a dictionary suitable for logging or display."""
        error_dict = {
            "error_code": self.error_code,
            "message": self.user_message,
        }

        if self.context.get('debug'):
            error_dict["technical_details"] = {
                "message": self.message,
                "context": self.context,
            }
            if self.traceback:
                error_dict["technical_details"]["traceback"] = self.traceback
            if self.cause:
                error_dict["technical_details"]["cause"] = str(self.cause)

        return error_dict


# Configuration Errors - 1000 range
class ConfigError(BotKitError):
    """Exception raised when the configuration cannot be loaded."""
    error_code = "BK-CFG-1000"
    user_message = "The configuration could not be loaded."


class UnsupportedFormatError(ConfigError):
    """Exception raised when a configuration file has an unknown extension."""
    error_code = "BK-CFG-1001"
    user_message = "Configuration files must be YAML (.yml, .yaml) or JSON (.json)."


class ValidationError(ConfigError):
    """Exception raised when configuration values fail validation."""
    error_code = "BK-CFG-1002"
    user_message = "The configuration contains invalid values."
