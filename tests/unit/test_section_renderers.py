"""Unit tests for the five section renderers."""

import pytest

from folio.contexts.rendering import DataMissing, RegionMissing
from folio.contexts.rendering.section_renderers import (
    render_experience,
    render_personal,
    render_projects,
    render_skills,
    render_stats,
)


def _texts(tags):
    return [tag.get_text(strip=True) for tag in tags]


def _remove(context, element_id):
    context.surface.find_region(element_id).decompose()


# Personal


@pytest.mark.unit
def test_render_personal_fills_every_field(make_context, profile_data, in_loop):
    context = make_context(data=profile_data)
    surface = context.surface

    assert in_loop(render_personal, context) is True

    assert surface.soup.title.string == "Jordan Rivera | QA Automation Engineer"
    assert surface.select('meta[name="description"]')["content"] == (
        "Test automation engineer focused on reliable CI pipelines."
    )
    assert surface.find_region("hero-name").string == "Jordan Rivera"
    assert surface.find_region("hero-location").string == "Austin, TX"

    phone = surface.find_region("hero-phone")
    assert phone.string == "+1 (555) 010-2030"
    assert phone["href"] == "tel:15550102030"

    linkedin = surface.find_region("linkedin-link")
    assert linkedin["href"] == "https://www.linkedin.com/in/jordan-rivera"
    assert linkedin.string == "LinkedIn"

    resume = surface.select(".btn-outline[download]")
    assert resume["href"] == "assets/resume.pdf"
    assert resume["download"] == "Jordan_Rivera_Resume.pdf"

    email = surface.find_region("email-tracked")
    assert email["href"] == "mailto:jordan@example.com"
    assert email.string == "jordan@example.com"

    assert context.reporter.reported == []


@pytest.mark.unit
@pytest.mark.parametrize(
    "field_name, element_id, static_text",
    [
        ("summary", "hero-summary", "Short bio"),
        ("phone", "hero-phone", "Phone"),
        ("location", "hero-location", "Somewhere"),
        ("email", "email-tracked", "Email"),
    ],
)
def test_render_personal_missing_field_leaves_only_that_field(
    make_context, profile_data, in_loop, field_name, element_id, static_text
):
    del profile_data["personal"][field_name]
    context = make_context(data=profile_data)

    in_loop(render_personal, context)

    assert context.surface.find_region(element_id).get_text() == static_text
    # Neighbouring fields still render
    assert context.surface.find_region("hero-name").string == "Jordan Rivera"
    assert context.surface.find_region("github-link")["href"] == "https://github.com/jordan-rivera"


@pytest.mark.unit
def test_render_personal_social_links_are_independent(make_context, profile_data, in_loop):
    del profile_data["personal"]["social"]["linkedin"]
    context = make_context(data=profile_data)

    in_loop(render_personal, context)

    assert context.surface.find_region("linkedin-link")["href"] == "#"
    assert context.surface.find_region("github-link")["href"] == "https://github.com/jordan-rivera"


@pytest.mark.unit
def test_render_personal_without_resume_data_keeps_button(make_context, profile_data, in_loop):
    del profile_data["personal"]["resume"]
    context = make_context(data=profile_data)

    in_loop(render_personal, context)

    assert context.surface.select(".btn-outline[download]")["href"] == "#"


@pytest.mark.unit
def test_render_personal_missing_elements_are_reported(make_context, profile_data, in_loop):
    context = make_context(data=profile_data)
    _remove(context, "hero-phone")
    context.surface.select(".btn-outline[download]").decompose()

    assert in_loop(render_personal, context) is True

    missing = [e.region_id for e in context.reporter.reported if isinstance(e, RegionMissing)]
    assert missing == ["hero-phone", ".btn-outline[download]"]
    assert context.surface.find_region("email-tracked").string == "jordan@example.com"


@pytest.mark.unit
def test_render_personal_without_personal_data_is_noop(make_context, profile_data, in_loop):
    del profile_data["personal"]
    context = make_context(data=profile_data)
    before = context.surface.serialize()

    assert in_loop(render_personal, context) is False
    assert context.surface.serialize() == before


# Skills


@pytest.mark.unit
def test_render_skills(make_context, profile_data, in_loop):
    context = make_context(data=profile_data)

    assert in_loop(render_skills, context) is True

    region = context.surface.find_region("skills-container")
    # Empty 'soft' category is skipped
    assert _texts(region.select(".skill-category > h3")) == [
        "Programming Languages",
        "CI/CD",
        "Testing Tools",
    ]

    fills = region.select(".meter-fill")
    assert [bar["data-value"] for bar in fills] == ["90", "75"]
    assert all(bar["style"] == "width: 0%" for bar in fills)
    assert _texts(region.select(".meter-label span")) == ["Python", "90%", "JavaScript", "75%"]

    assert _texts(region.select(".skill-tag")) == [
        "Jenkins",
        "GitHub Actions",
        "GitLab CI",
        "Selenium",
        "Playwright",
    ]
    assert region.find("p") is None


@pytest.mark.unit
def test_render_skills_plain_first_element_renders_all_tags(make_context, in_loop):
    context = make_context(data={"skills": {"mixed": ["Python", {"name": "Go", "level": 50}]}})

    in_loop(render_skills, context)

    region = context.surface.find_region("skills-container")
    assert _texts(region.select(".skill-tag")) == ["Python", "Go"]
    assert region.select(".skill-meter") == []


@pytest.mark.unit
def test_render_skills_leveled_first_element_renders_all_meters(make_context, in_loop):
    context = make_context(data={"skills": {"mixed": [{"name": "Go", "level": 50}, "Rust"]}})

    in_loop(render_skills, context)

    region = context.surface.find_region("skills-container")
    assert [bar["data-value"] for bar in region.select(".meter-fill")] == ["50", "0"]
    assert region.select(".skill-tag") == []


@pytest.mark.unit
def test_render_skills_missing_region_is_reported(make_context, profile_data, in_loop):
    context = make_context(data=profile_data)
    _remove(context, "skills-container")

    assert in_loop(render_skills, context) is False

    (error,) = context.reporter.reported
    assert isinstance(error, RegionMissing)
    assert error.section == "skills"
    assert context.scheduler.pending_sweeps == 0


@pytest.mark.unit
def test_render_skills_schedules_one_sweep(make_context, profile_data, in_loop):
    context = make_context(data=profile_data)

    in_loop(render_skills, context)

    assert len(context.scheduler._pending) == 1


# Experience


@pytest.mark.unit
def test_render_experience(make_context, profile_data, in_loop):
    context = make_context(data=profile_data)

    assert in_loop(render_experience, context) is True

    items = context.surface.find_region("experience-timeline").select(".timeline-item")
    assert len(items) == 2

    first, second = items
    assert first.select_one(".timeline-date").get_text() == "2022 - Present"
    assert first.h3.get_text() == "Senior QA Engineer"
    assert first.h4.get_text() == "Acme Corp • Remote"
    assert first.select_one(".project-highlight").get_text() == "Project: Payments Platform"
    assert _texts(first.select(".achievements li")) == [
        "Cut regression time from 6h to 40m",
        "Introduced contract tests for 12 services",
    ]
    assert _texts(first.select(".tech-badge")) == ["Python", "Pytest", "Docker"]

    # No project line, empty bullet container, zero badges
    assert second.select_one(".project-highlight") is None
    assert second.select_one("ul.achievements") is not None
    assert second.select(".achievements li") == []
    assert second.select(".tech-badge") == []


@pytest.mark.unit
def test_render_experience_escapes_achievements(make_context, in_loop):
    context = make_context(
        data={"experience": [{"company": "Acme", "achievements": ["<b>bold</b> claim"]}]}
    )

    in_loop(render_experience, context)

    item = context.surface.select(".achievements li")
    assert item.get_text() == "<b>bold</b> claim"
    assert item.find("b") is None


@pytest.mark.unit
def test_render_experience_without_location(make_context, in_loop):
    context = make_context(data={"experience": [{"company": "Acme", "position": "QA"}]})

    in_loop(render_experience, context)

    assert context.surface.select(".timeline-content h4").get_text() == "Acme"


@pytest.mark.unit
def test_render_experience_empty_list_is_noop(make_context, in_loop):
    context = make_context(data={"experience": []})

    assert in_loop(render_experience, context) is False
    assert context.surface.find_region("experience-timeline").p.get_text() == "Loading experience..."


# Projects


@pytest.mark.unit
def test_render_projects(make_context, profile_data, in_loop):
    context = make_context(data=profile_data)

    assert in_loop(render_projects, context) is True

    cards = context.surface.find_region("projects-container").select(".projects-grid > .project-card")
    assert _texts(card.h3 for card in cards) == ["Flaky Test Detector", "Load Test Kit"]

    first, second = cards
    assert first.select_one(".project-category").get_text() == "Tooling"
    assert _texts(first.select(".project-tech span")) == ["Python", "SQLite"]
    assert [a["href"] for a in first.select(".project-card-footer a")] == [
        "https://example.com/flaky",
        "https://github.com/jordan-rivera/flaky",
    ]

    # Placeholder '#' link is suppressed, GitHub link still rendered
    assert second.select_one(".project-category") is None
    assert second.select(".project-tech span") == []
    links = second.select(".project-card-footer a")
    assert [a.get_text() for a in links] == ["GitHub"]
    assert all(a["href"] != "#" for a in links)
    assert all(a["target"] == "_blank" for a in links)


# Stats


@pytest.mark.unit
def test_render_stats(make_context, profile_data, in_loop):
    context = make_context(data=profile_data)

    assert in_loop(render_stats, context) is True

    region = context.surface.find_region("stats-container")
    assert _texts(region.select(".stat-card h3")) == ["Test Coverage", "Automation Rate", "CI/CD"]
    assert _texts(region.select(".stat-number")) == ["87%", "72%", "95%"]
    assert [bar["data-value"] for bar in region.select(".stat-fill")] == ["87", "72", "95"]
    assert len(context.scheduler._pending) == 1


@pytest.mark.unit
def test_render_stats_missing_slice_is_reported(make_context, profile_data, in_loop):
    del profile_data["stats"]
    context = make_context(data=profile_data)

    assert in_loop(render_stats, context) is False

    (error,) = context.reporter.reported
    assert isinstance(error, DataMissing)
    assert context.surface.find_region("stats-container").p.get_text() == "Loading stats..."
    assert context.reporter.banners_shown == 0


@pytest.mark.unit
def test_render_stats_empty_slice_is_silent(make_context, in_loop):
    context = make_context(data={"stats": {}})

    assert in_loop(render_stats, context) is False
    assert context.reporter.reported == []
