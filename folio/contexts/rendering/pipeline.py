"""
Render Pipeline

load -> validate -> per-section render -> deferred sweeps.

A load failure shows the banner and touches no region. After a successful load
every renderer runs once, in order; a failure inside one renderer is reported
and the remaining renderers still run.
"""

import time
from dataclasses import dataclass, field
from typing import List

from folio.contexts.loading.exceptions import MalformedDocument, SourceUnavailable
from folio.contexts.loading.loader import ProfileLoader
from folio.contexts.rendering.exceptions import SectionRenderError
from folio.contexts.rendering.logger import log_region_presence, log_render_result
from folio.contexts.rendering.section_renderers import SECTION_RENDERERS
from folio.contexts.rendering.site_context import SiteContext

LOAD_FAILURE_MESSAGE = "Failed to load portfolio data. Please refresh the page."


@dataclass
class RenderResult:
    """
    Result of one pipeline run.

    Attributes:
        success: Whether the profile document loaded
        rendered_sections: Sections that wrote to the page
        skipped_sections: Sections with no data or no region
        failed_sections: Sections whose renderer raised
        errors: Errors reported during this run
        banner_shown: Whether the load-failure banner was shown
    """

    success: bool
    rendered_sections: List[str] = field(default_factory=list)
    skipped_sections: List[str] = field(default_factory=list)
    failed_sections: List[str] = field(default_factory=list)
    errors: List[Exception] = field(default_factory=list)
    banner_shown: bool = False


def render_sections(context: SiteContext) -> RenderResult:
    """
    Run every section renderer once against the loaded document.

    Call from inside a running event loop: the skills and stats sweeps are
    scheduled on it. Without one those two sections fail and their regions
    are left untouched.

    Args:
        context: SiteContext with a document

    Returns:
        RenderResult (success=True)
    """
    reported_before = len(context.reporter.reported)
    result = RenderResult(success=True)

    for section, renderer in SECTION_RENDERERS:
        try:
            rendered = renderer(context)
        except Exception as e:
            context.reporter.report(SectionRenderError(section, e))
            result.failed_sections.append(section)
            continue

        if rendered:
            result.rendered_sections.append(section)
        else:
            result.skipped_sections.append(section)

    result.errors = context.reporter.reported[reported_before:]
    return result


async def run_pipeline(context: SiteContext, loader: ProfileLoader) -> RenderResult:
    """
    Load the profile document once and render every section.

    Args:
        context: SiteContext for the page
        loader: ProfileLoader bound to the Source

    Returns:
        RenderResult
    """
    start_time = time.time()
    log_region_presence(context.surface.region_presence(context.layout))

    try:
        document = await loader.load()
    except (SourceUnavailable, MalformedDocument) as e:
        context.reporter.report(e)
        context.reporter.show_banner(LOAD_FAILURE_MESSAGE)
        result = RenderResult(success=False, errors=[e], banner_shown=True)
        log_render_result(result, time.time() - start_time)
        return result

    context.document = document
    context.ready = True

    result = render_sections(context)
    log_render_result(result, time.time() - start_time)
    return result
