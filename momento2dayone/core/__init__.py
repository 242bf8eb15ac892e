"""Core application modules and shared utilities."""

from .exceptions import Momento2DayOneError
from .logging import setup_logging, get_logger

__all__ = [
    "Momento2DayOneError",
    "setup_logging",
    "get_logger"
]
