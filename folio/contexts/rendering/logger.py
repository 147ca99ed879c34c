"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from folio.utils.logger import CONSOLE_LEVEL
from folio.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path, page: Path, profile: str, verbose: bool = False) -> Path:
    """
    Setup logger for a page build.

    Configures loguru with provenance tracking and the inputs of this build.

    Args:
        log_dir: Directory for this rendering session
        page: Page template being populated
        profile: Profile document location
        verbose: Echo DEBUG messages to the console too

    Returns:
        Path to log file

    Example:
        from folio.contexts.rendering.logger import setup_rendering_logger, _log_info

        log_file = setup_rendering_logger(log_dir, page, "data/profile.json")
        _log_info("Starting render...")
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        provenance={"Page": page, "Profile source": profile},
        console_level="DEBUG" if verbose else CONSOLE_LEVEL,
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_region_presence(presence: dict) -> None:
    """Log which expected regions the page provides."""
    _log_debug("Checking containers:")
    for name, present in presence.items():
        _log_debug(f"  {name}: {'found' if present else 'missing'}")


def log_render_result(result, elapsed_time: float) -> None:
    """
    Log pipeline result.

    Args:
        result: RenderResult from run_pipeline()
        elapsed_time: Time taken by load + render
    """
    if result.success:
        _log_success(
            f"Portfolio data rendered: {len(result.rendered_sections)} sections "
            f"({elapsed_time:.2f}s)"
        )
        if result.skipped_sections:
            _log_info(f"  Skipped: {', '.join(result.skipped_sections)}")
        if result.failed_sections:
            _log_warning(f"  Failed: {', '.join(result.failed_sections)}")
    else:
        _log_error(f"Render aborted: profile data unavailable ({elapsed_time:.2f}s)")
