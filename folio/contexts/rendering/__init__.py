"""
Rendering Context

Responsibilities:
- Binds a loaded profile document to the page's named regions
- Builds section markup from escaped templates
- Schedules deferred bar-fill sweeps
- Reports missing regions/data and shows the load-failure banner

Owns: Section renderers, page surface, animation scheduling, error reporting
Never: Fetches or modifies the profile document
"""

from folio.contexts.rendering.error_reporter import ErrorReporter
from folio.contexts.rendering.exceptions import DataMissing, RegionMissing, SectionRenderError
from folio.contexts.rendering.layout import SurfaceLayout, load_surface_layout
from folio.contexts.rendering.pipeline import (
    LOAD_FAILURE_MESSAGE,
    RenderResult,
    render_sections,
    run_pipeline,
)
from folio.contexts.rendering.registries import TemplateRegistry
from folio.contexts.rendering.scheduler import AnimationScheduler
from folio.contexts.rendering.site_context import SiteContext, build_site_context
from folio.contexts.rendering.surface import Surface

__all__ = [
    # Pipeline orchestration
    "run_pipeline",
    "render_sections",
    "RenderResult",
    "LOAD_FAILURE_MESSAGE",
    # Context and collaborators
    "SiteContext",
    "build_site_context",
    "Surface",
    "SurfaceLayout",
    "load_surface_layout",
    "TemplateRegistry",
    "AnimationScheduler",
    "ErrorReporter",
    # Errors
    "RegionMissing",
    "DataMissing",
    "SectionRenderError",
]
