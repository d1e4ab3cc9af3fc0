"""
Generic logger setup utilities.

Provides reusable loguru configuration with provenance tracking.
Context-specific wrappers are defined in contexts/{context}/logger.py.

Library code only logs; sinks are configured by entry points (scripts/) via
setup_logger().
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

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"
)


def setup_logger(
    context_name: str,
    log_dir: Optional[Path] = None,
    extra_provenance: Optional[dict] = None,
    console_level: str = "INFO",
    level_colors: Optional[dict] = None,
) -> Optional[Path]:
    """
    Configure loguru for a context with provenance tracking.

    Sets up a console sink and, when log_dir is given, a DEBUG-level file sink,
    then logs execution provenance (script, command, working directory,
    Python version, plus any extra context).

    Args:
        context_name: Context identifier (e.g., "normalize", "features")
        log_dir: Directory for this logging session (no file sink if None)
        extra_provenance: Additional key-value pairs for provenance header
        console_level: Minimum level shown on the console (default: INFO)
        level_colors: Override default level colors (e.g., {"INFO": "<cyan>"})

    Returns:
        Path to log file, or None when only console logging is configured

    Example:
        from jobjumper.utils.logger import setup_logger

        log_file = setup_logger(
            context_name="normalize",
            log_dir=Path("outs/logs/normalize_20260101_120000"),
            extra_provenance={"Feature": "job_fit"},
        )
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
        # File handler captures everything
        logger.add(log_file, format=FILE_FORMAT, level="DEBUG")

    # Console goes to stderr so stdout stays clean for piped JSON output
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    log_provenance(extra_provenance)

    return log_file


def log_provenance(extra_context: Optional[dict] = None) -> None:
    """
    Log execution provenance to current logger.

    Logs standard context (script, command, working directory, Python version)
    plus any additional context provided.
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
