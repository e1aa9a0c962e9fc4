"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[render]"


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_render_start(section_count: int) -> None:
    _log_debug(f"Rendering {section_count} sections")


def log_render_result(notices: list, elapsed_time: float) -> None:
    """
    Log render completion with a notice summary.

    Args:
        notices: RenderNotice list collected during the render
        elapsed_time: Time taken in seconds
    """
    skipped = sum(1 for notice in notices if notice.kind.value == "skipped")
    ignored = len(notices) - skipped
    _log_success(
        f"Rendered HTML ({elapsed_time:.2f}s, {skipped} items skipped, {ignored} field notices)"
    )
