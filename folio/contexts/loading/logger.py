"""
Loading context logger.

Provides logging interface for loading context with automatic [load] prefix.
All loading modules should import from this module, not from utils.logger directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[load]"


# Wrapper functions with automatic [load] prefix


def _log_info(message: str) -> None:
    """Log info message with [load] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [load] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [load] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [load] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [load] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level loading-specific logging helpers


def log_load_start(location: str) -> None:
    """Log start of profile loading."""
    _log_info("Loading profile data...")
    _log_debug(f"  Source: {location}")


def log_load_result(location: str, document, elapsed_time: float) -> None:
    """
    Log a successful load with a short summary of what the document holds.

    Args:
        location: Where the document came from
        document: ProfileDocument that was loaded
        elapsed_time: Time taken to fetch and parse
    """
    _log_success(f"Profile loaded from {location} ({elapsed_time:.2f}s)")
    _log_debug(f"  Personal: {'yes' if document.personal else 'no'}")
    _log_debug(f"  Skill categories: {len(document.skills or ())}")
    _log_debug(f"  Experience entries: {len(document.experience or ())}")
    _log_debug(f"  Projects: {len(document.projects or ())}")
    _log_debug(f"  Stats: {len(document.stats or ())}")
