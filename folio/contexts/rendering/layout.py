"""
Surface Layout Configuration

Loads the identifiers of every insertion point the renderers use, plus the
sweep delays, from surface_layout.yaml (or FOLIO_SURFACE_LAYOUT_PATH).
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict

from dotenv import load_dotenv
from omegaconf import OmegaConf

load_dotenv()
DEFAULT_LAYOUT_PATH = Path(__file__).parent / "surface_layout.yaml"
SURFACE_LAYOUT_PATH = Path(os.getenv("FOLIO_SURFACE_LAYOUT_PATH", str(DEFAULT_LAYOUT_PATH)))


@dataclass(frozen=True)
class SurfaceLayout:
    """
    Named insertion points on the page.

    Attributes:
        regions: Section name -> container element id
        personal_fields: Personal field -> element id
        email_action: Element id of the mailto link
        resume_action: CSS selector of the resume download action
        description_meta: CSS selector of the description meta tag
        skill_sweep_delay_s: Delay before skill meters fill
        stat_sweep_delay_s: Delay before stat bars fill
    """

    regions: Dict[str, str] = field(default_factory=dict)
    personal_fields: Dict[str, str] = field(default_factory=dict)
    email_action: str = "email-tracked"
    resume_action: str = ".btn-outline[download]"
    description_meta: str = 'meta[name="description"]'
    skill_sweep_delay_s: float = 0.5
    stat_sweep_delay_s: float = 1.0

    def region_id(self, section: str) -> str:
        return self.regions[section]


def load_surface_layout(config_path: Path = None) -> SurfaceLayout:
    """
    Load the surface layout config.

    Args:
        config_path: Optional path to a layout YAML (defaults to SURFACE_LAYOUT_PATH)

    Returns:
        SurfaceLayout

    Raises:
        ValueError: If a section region is missing or the two sweep delays are equal
    """
    if config_path is None:
        config_path = SURFACE_LAYOUT_PATH

    config = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)

    regions = dict(config.get("regions") or {})
    missing = {"skills", "experience", "projects", "stats"} - set(regions)
    if missing:
        raise ValueError(f"Layout {config_path} is missing regions: {sorted(missing)}")

    actions = config.get("actions") or {}
    meta = config.get("meta") or {}
    animation = config.get("animation") or {}

    layout = SurfaceLayout(
        regions=regions,
        personal_fields=dict(config.get("personal_fields") or {}),
        email_action=actions.get("email", SurfaceLayout.email_action),
        resume_action=actions.get("resume", SurfaceLayout.resume_action),
        description_meta=meta.get("description", SurfaceLayout.description_meta),
        skill_sweep_delay_s=float(
            animation.get("skill_sweep_delay_s", SurfaceLayout.skill_sweep_delay_s)
        ),
        stat_sweep_delay_s=float(
            animation.get("stat_sweep_delay_s", SurfaceLayout.stat_sweep_delay_s)
        ),
    )

    # Skill and stat reveals must not start together
    if layout.skill_sweep_delay_s == layout.stat_sweep_delay_s:
        raise ValueError(
            f"Sweep delays must differ, both are {layout.skill_sweep_delay_s}s in {config_path}"
        )

    return layout
