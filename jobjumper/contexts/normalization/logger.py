"""
Normalization context logger.

Provides logging interface for the normalization pipeline with automatic
[normalize] prefix. Normalization modules import from here, not from loguru
directly.
"""

from loguru import logger

from jobjumper.utils.text_processing import truncate_display

CONTEXT_PREFIX = "[normalize]"


def _log_debug(message: str) -> None:
    """Log debug message with [normalize] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [normalize] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def log_located(start: int, end: int, total: int, fallback: bool = False) -> None:
    """Log which span of the model output was parsed."""
    method = "outermost-brace fallback" if fallback else "balanced scan"
    _log_debug(f"Located JSON span [{start}:{end}] of {total} chars ({method})")


def log_structural_failure(reason: str, text: str) -> None:
    """Log a model output that yielded no JSON object."""
    preview = truncate_display(" ".join(text.split()), 120)
    _log_warning(f"No JSON object recovered ({reason}): '{preview}'")


def log_field_defaulted(path: str) -> None:
    """Log a field that was present but mistyped and fell back to its default."""
    _log_debug(f"'{path}' has the wrong type, using default")
