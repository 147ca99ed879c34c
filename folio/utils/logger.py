"""
Logging session setup shared by every context.

A session writes DEBUG and above to `{log_dir}/{context}.log` and mirrors
FOLIO_LOG_LEVEL and above to the console. Context-specific wrappers with a
[prefix] live in contexts/{context}/logger.py.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional, TextIO

from dotenv import load_dotenv
from loguru import logger

from folio import __version__

load_dotenv()
CONSOLE_LEVEL = os.getenv("FOLIO_LOG_LEVEL", "INFO")

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"

LEVEL_COLORS = {
    "SUCCESS": "<green>",
    "WARNING": "<yellow>",
    "ERROR": "<red>",
}

HEADER_RULE = "-" * 72


def setup_logger(
    context_name: str,
    log_dir: Path,
    provenance: Optional[Dict[str, Any]] = None,
    console_level: str = CONSOLE_LEVEL,
    console: Optional[TextIO] = None,
) -> Path:
    """
    Start a logging session for one run of a context.

    Replaces any sinks configured earlier in the process.

    Args:
        context_name: Context identifier, also the log file stem (e.g., "render")
        log_dir: Directory for this session, created if needed
        provenance: Inputs of this run, written to the session header
        console_level: Minimum level echoed to the console
        console: Console stream (default: sys.stdout at call time)

    Returns:
        Path to log file

    Example:
        log_file = setup_logger(
            "render",
            Path("outs/logs/render_20251114_123456"),
            provenance={"Page": "site/index.html"},
        )
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    for level_name, color in LEVEL_COLORS.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG", encoding="utf-8")
    logger.add(
        console or sys.stdout,
        format=CONSOLE_FORMAT,
        level=console_level,
        colorize=True,
    )

    log_provenance(context_name, provenance)
    return log_file


def log_provenance(context_name: str, provenance: Optional[Dict[str, Any]] = None) -> None:
    """Write the session header: folio version, invocation and run inputs."""
    logger.debug(HEADER_RULE)
    logger.info(f"folio {__version__} | {context_name} session")
    logger.debug(f"Command: {' '.join(sys.argv)}")
    logger.debug(f"Working directory: {Path.cwd()}")
    logger.debug(f"Python: {sys.version.split()[0]}")

    for key, value in (provenance or {}).items():
        logger.info(f"{key}: {value}")

    logger.debug(HEADER_RULE)
