"""
Site Context

Explicit value holding everything one page build needs. Created once at startup
and passed to every renderer call.
"""

from dataclasses import dataclass
from typing import Optional

from folio.contexts.loading.profile_data_structure import ProfileDocument
from folio.contexts.rendering.error_reporter import ErrorReporter
from folio.contexts.rendering.layout import SurfaceLayout, load_surface_layout
from folio.contexts.rendering.registries import TemplateRegistry
from folio.contexts.rendering.scheduler import AnimationScheduler
from folio.contexts.rendering.surface import Surface


@dataclass
class SiteContext:
    """
    Attributes:
        surface: Page being populated
        layout: Insertion point identifiers and sweep delays
        templates: Section templates
        reporter: Error reporter for this page
        scheduler: Animation scheduler for this page
        document: Profile document, set once after a successful load
        ready: True only after the document loaded successfully
    """

    surface: Surface
    layout: SurfaceLayout
    templates: TemplateRegistry
    reporter: ErrorReporter
    scheduler: AnimationScheduler
    document: Optional[ProfileDocument] = None
    ready: bool = False


def build_site_context(
    surface: Surface,
    layout: SurfaceLayout = None,
    templates: TemplateRegistry = None,
) -> SiteContext:
    """
    Wire a SiteContext for one page.

    Args:
        surface: Page to populate
        layout: Defaults to load_surface_layout()
        templates: Defaults to a TemplateRegistry over the packaged templates
    """
    layout = layout or load_surface_layout()
    templates = templates or TemplateRegistry()
    return SiteContext(
        surface=surface,
        layout=layout,
        templates=templates,
        reporter=ErrorReporter(surface, templates),
        scheduler=AnimationScheduler(surface),
    )
