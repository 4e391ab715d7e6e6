"""
Layout context logger.

Provides logging interface for the layout context with automatic [layout] prefix.
All layout modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from vellum.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[layout]"


def setup_layout_logger(log_dir: Path = None, edit_command: str = "") -> Path:
    """
    Setup logger for a layout editing session.

    Args:
        log_dir: Directory for this session (defaults to a timestamped
            directory under LOGS_PATH)
        edit_command: Editor command being run, recorded in the provenance header

    Returns:
        Path to log file

    Example:
        from vellum.contexts.layout.logger import setup_layout_logger, _log_info

        log_file = setup_layout_logger(log_dir, edit_command="toggle")
        _log_info("Applying edit...")
    """
    return _setup_logger(
        context_name="layout",
        log_dir=log_dir,
        extra_provenance={"Edit": edit_command or "(none)"},
    )


# Wrapper functions with automatic [layout] prefix


def _log_info(message: str) -> None:
    """Log info message with [layout] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [layout] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [layout] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [layout] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")
