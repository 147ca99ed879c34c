"""
Markup Class Constants

CSS classes and attributes shared between the section templates and the code
that looks elements up after rendering (animation sweeps, banner replacement).
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class BarClasses:
    """
    Percentage bar fills that sweeps animate.

    Each bar starts at its template width and carries its target in VALUE_ATTR.
    """
    METER_FILL: str = "meter-fill"
    STAT_FILL: str = "stat-fill"
    VALUE_ATTR: str = "data-value"


@dataclass(frozen=True)
class BannerClasses:
    """User-visible error banner."""
    ERROR_MESSAGE: str = "error-message"
