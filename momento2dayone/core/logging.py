"""
Logging configuration and utilities for the momento2dayone application.

This module provides centralized logging setup using Loguru with
structured logging and configurable output formats.
"""

import sys
from typing import TYPE_CHECKING, Optional, Dict, Any

from loguru import logger

if TYPE_CHECKING:
    from ..settings import LoggingSettings


# Store configured loggers to avoid reconfiguration
_configured_loggers: Dict[str, bool] = {}


def setup_logging(
    log_settings: "LoggingSettings",
    logger_name: str = "momento2dayone"
) -> None:
    """
    Set up application logging with Loguru.

    Args:
        log_settings: Logging configuration settings
        logger_name: Name of the logger instance
    """
    if logger_name in _configured_loggers:
        return  # Already configured

    # Remove default handler
    logger.remove()

    # Console handler with colored output. stdout carries command output.
    logger.add(
        sys.stderr,
        level=log_settings.level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{extra[module]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>"
        ),
        colorize=True,
        backtrace=True,
        diagnose=True
    )

    # File handler if specified
    if log_settings.file:
        log_settings.file.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_settings.file,
            level=log_settings.level,
            format=(
                "{time:YYYY-MM-DD HH:mm:ss} | "
                "{level: <8} | "
                "{extra[module]}:{function}:{line} | "
                "{message}"
            ),
            rotation="10 MB",
            retention="1 month",
            compression="gz",
            backtrace=True,
            diagnose=True
        )

    # Records logged without get_logger() still need extra[module]
    logger.configure(extra={"module": logger_name})

    _configured_loggers[logger_name] = True
    logger.info(f"Logging configured for {logger_name} at level {log_settings.level}")


def get_logger(module_name: str) -> Any:
    """
    Get a logger instance for a specific module.

    Args:
        module_name: Name of the module requesting the logger

    Returns:
        Configured logger instance
    """
    return logger.bind(module=module_name)


def log_processing_stage(stage: str, details: Optional[Dict[str, Any]] = None) -> None:
    """Log processing pipeline stages."""
    logger.bind(module="pipeline", stage=stage, details=details or {}).info(
        f"Processing stage: {stage}"
    )


def log_error_with_context(
    error: Exception,
    context: Optional[Dict[str, Any]] = None,
    module: Optional[str] = None
) -> None:
    """Log errors with additional context information."""
    logger.bind(
        module=module or "unknown",
        error_type=type(error).__name__,
        context=context or {}
    ).error(f"Error in {module or 'unknown module'}: {error}")
