"""
Session logging for the VELLUM command-line tools.

Each CLI invocation is one session: a log directory holding one
`<context>.log` file with a provenance header, plus colourised console
output. Engine modules never configure sinks; they log through their
context's prefixed wrappers (contexts/{context}/logger.py).
"""

import os
import sys
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

import vellum

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"


def session_log_dir(session_name: str, root: Path = None) -> Path:
    """
    Directory for a new logging session.

    Example:
        >>> session_log_dir("compose", Path("outs/logs"))  # doctest: +SKIP
        PosixPath('outs/logs/compose_20260114_123456')
    """
    root = LOGS_PATH if root is None else Path(root)
    return root / f"{session_name}_{datetime.now():%Y%m%d_%H%M%S}"


def setup_logger(
    context_name: str,
    log_dir: Path = None,
    extra_provenance: dict = None,
) -> Path:
    """
    Start a logging session for one CLI run.

    Replaces any configured sinks with a DEBUG file sink in `log_dir` and an
    INFO console sink, then writes the provenance header.

    Args:
        context_name: Context running the session ("compose", "layout");
            names the log file
        log_dir: Session directory (defaults to a timestamped directory
            under LOGS_PATH)
        extra_provenance: Extra header lines, e.g. {"Template": "classic"}

    Returns:
        Path to the session log file
    """
    log_dir = session_log_dir(context_name) if log_dir is None else Path(log_dir)
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    for level_name, color in LEVEL_COLORS.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level="INFO", colorize=True)

    log_provenance(extra_provenance)
    return log_file


def log_provenance(extra_context: dict = None) -> None:
    """Write the session header: version, command line and interpreter."""
    logger.info("=" * 80)
    logger.info(f"VELLUM {vellum.__version__}")
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"Python: {sys.version.split()[0]}")

    for key, value in (extra_context or {}).items():
        logger.info(f"{key}: {value}")

    logger.info("=" * 80)
