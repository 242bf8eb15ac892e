"""
Custom exceptions for the momento2dayone application.

This module defines application-specific exceptions that provide
clear error handling and debugging information.
"""

from typing import Optional, Dict, Any


class Momento2DayOneError(Exception):
    """Base exception for all momento2dayone application errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class ConfigurationError(Momento2DayOneError):
    """Raised when there are configuration-related errors."""

    def __init__(self, message: str, config_key: Optional[str] = None) -> None:
        super().__init__(message, "CONFIG_ERROR")
        self.config_key = config_key


class ExportFileError(Momento2DayOneError):
    """Raised when the export file path is not usable."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message, "EXPORT_FILE_ERROR", {"path": path})
        self.path = path


class MalformedTimestampError(Momento2DayOneError):
    """
    Raised when a date header and a time header do not form a calendar instant.

    Parsing stops at the first occurrence; a misdated moment would break
    the chronological order of everything imported after it.
    """

    def __init__(
        self,
        message: str,
        date_text: Optional[str] = None,
        time_text: Optional[str] = None
    ) -> None:
        super().__init__(
            message,
            "MALFORMED_TIMESTAMP",
            {"date_text": date_text, "time_text": time_text}
        )
        self.date_text = date_text
        self.time_text = time_text


class EnvironmentCheckError(Momento2DayOneError):
    """Raised when the host cannot run the Day One command line tool."""

    def __init__(
        self,
        message: str,
        requirement: Optional[str] = None
    ) -> None:
        super().__init__(message, "ENVIRONMENT_ERROR")
        self.requirement = requirement
