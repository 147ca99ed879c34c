"""Unit tests for surface layout loading."""

import pytest

from folio.contexts.rendering import load_surface_layout

REGIONS_YAML = """regions:
  skills: skills-box
  experience: timeline
  projects: cards
  stats: numbers
"""


@pytest.mark.unit
def test_packaged_layout():
    layout = load_surface_layout()

    assert layout.region_id("experience") == "experience-timeline"
    assert layout.personal_fields["linkedin"] == "linkedin-link"
    assert layout.resume_action == ".btn-outline[download]"
    assert layout.skill_sweep_delay_s == 0.5
    assert layout.stat_sweep_delay_s == 1.0


@pytest.mark.unit
def test_minimal_layout_uses_defaults(tmp_path):
    path = tmp_path / "layout.yaml"
    path.write_text(REGIONS_YAML, encoding="utf-8")

    layout = load_surface_layout(path)

    assert layout.region_id("skills") == "skills-box"
    assert layout.personal_fields == {}
    assert layout.email_action == "email-tracked"
    assert layout.description_meta == 'meta[name="description"]'


@pytest.mark.unit
def test_layout_missing_region_is_rejected(tmp_path):
    path = tmp_path / "layout.yaml"
    path.write_text("regions:\n  skills: skills-box\n", encoding="utf-8")

    with pytest.raises(ValueError, match="missing regions"):
        load_surface_layout(path)


@pytest.mark.unit
def test_layout_equal_sweep_delays_are_rejected(tmp_path):
    path = tmp_path / "layout.yaml"
    path.write_text(
        REGIONS_YAML + "animation:\n  skill_sweep_delay_s: 1\n  stat_sweep_delay_s: 1\n",
        encoding="utf-8",
    )

    with pytest.raises(ValueError, match="Sweep delays must differ"):
        load_surface_layout(path)
