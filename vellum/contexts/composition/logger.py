"""
Composition context logger.

Provides logging interface for the composition context with automatic [compose] prefix.
All composition modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from vellum.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[compose]"


def setup_composition_logger(log_dir: Path = None, template_id: str = "") -> Path:
    """
    Setup logger for the composition context.

    Args:
        log_dir: Directory for this render session (defaults to a timestamped
            directory under LOGS_PATH)
        template_id: Template used for the render, recorded in the provenance header

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="compose",
        log_dir=log_dir,
        extra_provenance={"Template": template_id or "(from resume)"},
    )


# Wrapper functions with automatic [compose] prefix


def _log_info(message: str) -> None:
    """Log info message with [compose] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [compose] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [compose] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [compose] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [compose] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")
