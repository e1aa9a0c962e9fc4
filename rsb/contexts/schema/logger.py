"""
Schema context logger.

Provides logging interface for the schema context with automatic [schema] prefix.
All schema modules should import from this module, not from loguru directly.
"""

from pathlib import Path

from loguru import logger

CONTEXT_PREFIX = "[schema]"


def _log_info(message: str) -> None:
    """Log info message with [schema] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [schema] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [schema] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [schema] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [schema] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level schema-specific logging helpers


def log_load_start(path: Path, file_type_name: str) -> None:
    """Log start of loading a resume file."""
    _log_info(f"Loading {path.name} as {file_type_name}")
    _log_debug(f"Source: {path}")


def log_load_result(path: Path, resume) -> None:
    """
    Log a successfully decoded document.

    Args:
        path: Source file
        resume: Decoded Resume
    """
    _log_success(f"{path.name}: decoded")
    _log_debug(f"found data: {resume}")
