"""
Rendering context logger.

Provides logging interface for the rendering context with automatic [export] prefix.
Sinks are configured by the CLI session (see vellum.utils.logger.setup_logger).
"""

from loguru import logger

CONTEXT_PREFIX = "[export]"


# Wrapper functions with automatic [export] prefix


def _log_info(message: str) -> None:
    """Log info message with [export] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [export] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [export] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [export] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")
