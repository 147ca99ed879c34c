"""
Error Reporter

Two channels:
- Diagnostic log: every failure and every missing region or slice
- Banner: one dismissable message on the page, only for load failures
"""

from typing import List

from folio.contexts.rendering.exceptions import DataMissing, RegionMissing
from folio.contexts.rendering.logger import _log_error, _log_warning


class ErrorReporter:
    """
    Routes failures to the log and, for fatal ones, to the page banner.

    Attributes:
        reported: Every error reported so far, in order
        banners_shown: Number of times a banner was put on the page
    """

    def __init__(self, surface, templates):
        self.surface = surface
        self.templates = templates
        self.reported: List[Exception] = []
        self.banners_shown = 0

    def report(self, error: Exception) -> None:
        """Log a failure. Missing regions and slices are warnings; the rest are errors."""
        self.reported.append(error)
        if isinstance(error, (RegionMissing, DataMissing)):
            _log_warning(str(error))
        else:
            _log_error(f"Error loading portfolio data: {error}")

    def show_banner(self, message: str) -> None:
        """Put the user-facing banner on the page, replacing any earlier one."""
        self.surface.show_banner(self.templates.render("error_banner", message=message))
        self.banners_shown += 1
