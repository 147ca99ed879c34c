"""
Section Renderers

One renderer per page region: Personal, Skills, Experience, Projects, Stats.

Every renderer:
- Returns without side effects when its data slice is absent or empty
- Reports RegionMissing and returns when its region is absent (never raises for it)
- Otherwise replaces the region's whole content with freshly rendered markup

Each returns True if it wrote to the page, False if it skipped.
"""

from typing import Optional

from bs4 import Tag

from folio.contexts.rendering.exceptions import DataMissing, RegionMissing
from folio.contexts.rendering.logger import _log_debug, _log_info
from folio.contexts.rendering.markup_classes import BarClasses
from folio.contexts.rendering.site_context import SiteContext
from folio.utils.text_processing import dial_number, download_filename, format_label


def _find_region(context: SiteContext, section: str) -> Optional[Tag]:
    region_id = context.layout.region_id(section)
    region = context.surface.find_region(region_id)
    if region is None:
        context.reporter.report(RegionMissing(section, region_id))
    return region


def _field_element(context: SiteContext, field_name: str) -> Optional[Tag]:
    """Element for a personal field; reported when the layout names one the page lacks."""
    element_id = context.layout.personal_fields.get(field_name)
    if element_id is None:
        return None
    element = context.surface.find_region(element_id)
    if element is None:
        context.reporter.report(RegionMissing("personal", element_id))
    return element


def _write_text(context: SiteContext, field_name: str, value: Optional[str]) -> None:
    if not value:
        return
    element = _field_element(context, field_name)
    if element is not None:
        element.string = value


def _write_link(context: SiteContext, field_name: str, label: str, href: Optional[str]) -> None:
    if not href:
        return
    element = _field_element(context, field_name)
    if element is not None:
        element["href"] = href
        element.string = label


def render_personal(context: SiteContext) -> bool:
    """
    Fill personal fields, page title and description.

    Fields are independent: each is written only when both its element and
    its value exist.
    """
    personal = context.document.personal
    if personal is None:
        return False

    surface = context.surface
    surface.set_title(f"{personal.name} | {personal.title}")
    surface.set_meta_content(context.layout.description_meta, personal.summary or "")

    _write_text(context, "name", personal.name)
    _write_text(context, "title", personal.title)
    _write_text(context, "summary", personal.summary)
    _write_text(context, "location", personal.location)

    if personal.phone:
        phone_element = _field_element(context, "phone")
        if phone_element is not None:
            phone_element.string = personal.phone
            phone_element["href"] = f"tel:{dial_number(personal.phone)}"

    _write_link(context, "linkedin", "LinkedIn", personal.social.linkedin)
    _write_link(context, "github", "GitHub", personal.social.github)

    if personal.resume:
        resume_action = surface.select(context.layout.resume_action)
        if resume_action is not None:
            resume_action["href"] = personal.resume
            resume_action["download"] = download_filename(personal.name)
        else:
            context.reporter.report(RegionMissing("personal", context.layout.resume_action))

    if personal.email:
        email_action = surface.find_region(context.layout.email_action)
        if email_action is not None:
            email_action["href"] = f"mailto:{personal.email}"
            email_action.string = personal.email
        else:
            context.reporter.report(RegionMissing("personal", context.layout.email_action))

    _log_debug(f"Rendered personal info for {personal.name}")
    return True


def render_skills(context: SiteContext) -> bool:
    """Render skill categories as meters or tags and schedule the meter sweep."""
    skills = context.document.skills
    if not skills:
        return False

    region = _find_region(context, "skills")
    if region is None:
        return False

    categories = [category for category in skills if category.items]
    markup = context.templates.render("skills", categories=categories)
    # Scheduling needs a running loop; fail before the region is touched
    context.scheduler.schedule_sweep(BarClasses.METER_FILL, context.layout.skill_sweep_delay_s)
    context.surface.replace_content(region, markup)
    _log_debug(f"Rendered {len(categories)} skill categories")
    return True


def render_experience(context: SiteContext) -> bool:
    """Render the work history timeline in document order."""
    experience = context.document.experience
    if not experience:
        return False

    region = _find_region(context, "experience")
    if region is None:
        return False

    markup = context.templates.render("experience", entries=experience)
    context.surface.replace_content(region, markup)

    _log_debug(f"Rendered {len(experience)} experience entries")
    return True


def render_projects(context: SiteContext) -> bool:
    """Render project cards; placeholder links are dropped by the model."""
    projects = context.document.projects
    if not projects:
        return False

    region = _find_region(context, "projects")
    if region is None:
        return False

    markup = context.templates.render("projects", projects=projects)
    context.surface.replace_content(region, markup)

    _log_debug(f"Rendered {len(projects)} project cards")
    return True


def render_stats(context: SiteContext) -> bool:
    """
    Render stat cards and schedule the stat sweep.

    Stats are expected in every document, so a missing slice is reported.
    """
    stats = context.document.stats
    if stats is None:
        context.reporter.report(DataMissing("stats"))
        return False
    if not stats:
        _log_info("Stats section is empty")
        return False

    region = _find_region(context, "stats")
    if region is None:
        return False

    rows = [{"label": format_label(key), "value": value} for key, value in stats]
    markup = context.templates.render("stats", stats=rows)
    context.scheduler.schedule_sweep(BarClasses.STAT_FILL, context.layout.stat_sweep_delay_s)
    context.surface.replace_content(region, markup)
    _log_debug(f"Rendered {len(rows)} stats")
    return True


# Fixed render order
SECTION_RENDERERS = (
    ("personal", render_personal),
    ("skills", render_skills),
    ("experience", render_experience),
    ("projects", render_projects),
    ("stats", render_stats),
)
