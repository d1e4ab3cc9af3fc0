"""
Features context logger.

Provides logging interface for feature handlers with automatic [features]
prefix. Feature modules import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from jobjumper.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[features]"


def setup_features_logger(
    feature: str, log_dir: Optional[Path] = None, verbose: bool = False
) -> Optional[Path]:
    """
    Setup logger for a normalization run.

    Args:
        feature: Feature being normalized (recorded in the provenance header)
        log_dir: Directory for this session (console only if None)
        verbose: Show DEBUG messages on the console

    Returns:
        Path to log file, or None when only console logging is configured
    """
    return _setup_logger(
        context_name="normalize",
        log_dir=log_dir,
        extra_provenance={"Feature": feature},
        console_level="DEBUG" if verbose else "INFO",
    )


# Wrapper functions with automatic [features] prefix


def _log_info(message: str) -> None:
    """Log info message with [features] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [features] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [features] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_pipeline_start(feature: str, shape: str, policy: str, text_length: int) -> None:
    """Log start of a pipeline run with context."""
    _log_debug(f"Normalizing {feature} response as '{shape}' ({text_length} chars, policy={policy})")


def log_pipeline_result(feature: str, record) -> None:
    """Log the record type produced for a feature."""
    _log_info(f"{feature}: produced {type(record).__name__}")


def log_substituted(feature: str, reason: str) -> None:
    """Log a structural failure that was replaced by a default record."""
    _log_warning(f"{feature}: structural failure ({reason}), substituting default record")


def log_propagated(feature: str, reason: str) -> None:
    """Log a structural failure that is re-raised to the caller."""
    _log_warning(f"{feature}: structural failure ({reason}), propagating error")
