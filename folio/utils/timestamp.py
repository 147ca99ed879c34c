"""Timestamp formatting utilities."""

from datetime import datetime


def now() -> str:
    """
    Current local time as a filesystem-safe string.

    Used to name per-run log directories (e.g., outs/logs/render_20251114_123456).

    Returns:
        Timestamp formatted as YYYYmmdd_HHMMSS
    """
    return datetime.now().strftime("%Y%m%d_%H%M%S")
