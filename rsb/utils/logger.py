"""
Generic logger setup utilities.

Provides reusable loguru configuration with provenance tracking.
Context-specific wrappers should be defined in contexts/{context}/logger.py.
Library modules only emit messages; sinks are configured by entry points.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

# Default level colors for console output
LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}


def setup_logger(
    context_name: str,
    level: str = "INFO",
    log_dir: Optional[Path] = None,
    extra_provenance: Optional[dict] = None,
    level_colors: Optional[dict] = None,
) -> Optional[Path]:
    """
    Configure loguru for an entry point with provenance tracking.

    Console output goes to stderr so that stdout stays free for generated
    documents. When log_dir is given, a DEBUG-level file sink is added too.

    Args:
        context_name: Context identifier used for the log file name (e.g. "generate")
        level: Minimum level shown on the console
        log_dir: Optional directory for a detailed log file
        extra_provenance: Additional key-value pairs for provenance header
        level_colors: Override default level colors (e.g., {"INFO": "<cyan>"})

    Returns:
        Path to log file, or None when logging to the console only

    Example:
        from rsb.utils.logger import setup_logger

        setup_logger("validate", level="DEBUG", log_dir=Path("outs/logs"))
    """
    # Remove default logger
    logger.remove()

    colors = {**LEVEL_COLORS, **(level_colors or {})}
    for level_name, color in colors.items():
        logger.level(level_name, color=color)

    log_file = None
    if log_dir is not None:
        log_dir.mkdir(exist_ok=True, parents=True)
        log_file = log_dir / f"{context_name}.log"
        logger.add(
            log_file, format="{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}", level="DEBUG"
        )

    logger.add(
        sys.stderr,
        format="{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>",
        level=level.upper(),
        colorize=True,
    )

    log_provenance(extra_provenance)

    return log_file


def log_provenance(extra_context: Optional[dict] = None) -> None:
    """
    Log execution provenance to current logger.

    Logs standard context (script, command, working directory, Python version)
    plus any additional context provided. Written at DEBUG so it lands in log
    files without cluttering the console.

    Args:
        extra_context: Additional key-value pairs to log
    """
    logger.debug("=" * 80)
    logger.debug(f"Script: {sys.argv[0]}")
    logger.debug(f"Command: {' '.join(sys.argv)}")
    logger.debug(f"Working directory: {Path.cwd()}")
    logger.debug(f"Python: {sys.version.split()[0]}")

    if extra_context:
        for key, value in extra_context.items():
            logger.debug(f"{key}: {value}")

    logger.debug("=" * 80)
