"""
Profile Document Structure

Defines the immutable, validated representation of the profile document.
This structure is the interface between the Loading and Rendering contexts.

Loading owns:
- Turning a parsed JSON/YAML mapping into a ProfileDocument
- Rejecting shapes the renderers cannot consume (MalformedDocument)
- Deciding each skill category's kind once, from its first element

Rendering only reads ProfileDocument instances; it never re-inspects raw shapes.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

from folio.contexts.loading.exceptions import MalformedDocument
from folio.contexts.loading.logger import _log_warning
from folio.utils.text_processing import format_label

# Link value the data source uses for "no link yet"
PLACEHOLDER_LINK = "#"

Number = Union[int, float]


class SkillKind(str, Enum):
    """How a skill category is presented."""

    LEVELED = "leveled"
    TAGS = "tags"


@dataclass(frozen=True)
class SocialLinks:
    linkedin: Optional[str] = None
    github: Optional[str] = None


@dataclass(frozen=True)
class PersonalInfo:
    """
    Personal block of the profile.

    Attributes:
        name: Full name (required when the block exists)
        title: Professional title (required when the block exists)
        summary: Short bio, also used as the page description
        phone: Phone number as displayed (formatting preserved)
        location: Free-text location
        email: Contact address
        resume: Link to a downloadable resume
        social: Social profile links
    """

    name: str
    title: str
    summary: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    email: Optional[str] = None
    resume: Optional[str] = None
    social: SocialLinks = field(default_factory=SocialLinks)


@dataclass(frozen=True)
class PlainSkill:
    label: str


@dataclass(frozen=True)
class LeveledSkill:
    name: str
    level: Number


Skill = Union[PlainSkill, LeveledSkill]


@dataclass(frozen=True)
class SkillCategory:
    """
    One skill category with an already-disambiguated element kind.

    Attributes:
        key: Category identifier exactly as it appears in the document
        kind: LEVELED (meters) or TAGS (flat labels) for the whole category
        items: Skills in document order, all matching `kind`
    """

    key: str
    kind: SkillKind
    items: Tuple[Skill, ...] = ()

    @property
    def label(self) -> str:
        return format_label(self.key)


@dataclass(frozen=True)
class ExperienceEntry:
    period: str = ""
    position: str = ""
    company: str = ""
    location: Optional[str] = None
    project: Optional[str] = None
    achievements: Tuple[str, ...] = ()
    technologies: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ProjectEntry:
    title: str
    description: str = ""
    category: Optional[str] = None
    technologies: Tuple[str, ...] = ()
    link: Optional[str] = None
    github: Optional[str] = None

    @property
    def project_link(self) -> Optional[str]:
        """Link to the live project, or None when absent or the placeholder."""
        return _actionable(self.link)

    @property
    def github_link(self) -> Optional[str]:
        """Repository link, or None when absent or the placeholder."""
        return _actionable(self.github)


@dataclass(frozen=True)
class ProfileDocument:
    """
    Root profile document.

    Slices are None when the document does not contain them, and empty tuples
    when present but empty. Renderers rely on that distinction.

    Attributes:
        personal: Personal block
        skills: Skill categories in document order
        experience: Work history in presentation order
        projects: Project cards in presentation order
        stats: (key, percentage) pairs in document order
        education: Raw education slice (carried, not rendered)
        certifications: Raw certifications slice (carried, not rendered)
    """

    personal: Optional[PersonalInfo] = None
    skills: Optional[Tuple[SkillCategory, ...]] = None
    experience: Optional[Tuple[ExperienceEntry, ...]] = None
    projects: Optional[Tuple[ProjectEntry, ...]] = None
    stats: Optional[Tuple[Tuple[str, Number], ...]] = None
    education: Any = None
    certifications: Any = None

    @classmethod
    def from_dict(cls, data: Any) -> "ProfileDocument":
        """
        Validate a parsed document and build the immutable representation.

        Args:
            data: Parsed JSON/YAML value

        Returns:
            ProfileDocument

        Raises:
            MalformedDocument: If the root or any slice has the wrong shape
        """
        root = _require_mapping(data, "<root>")

        personal = root.get("personal")
        skills = root.get("skills")
        experience = root.get("experience")
        projects = root.get("projects")
        stats = root.get("stats")

        return cls(
            personal=None if personal is None else _parse_personal(personal),
            skills=None if skills is None else _parse_skills(skills),
            experience=None if experience is None else _parse_experience(experience),
            projects=None if projects is None else _parse_projects(projects),
            stats=None if stats is None else _parse_stats(stats),
            education=root.get("education"),
            certifications=root.get("certifications"),
        )


def _actionable(link: Optional[str]) -> Optional[str]:
    if not link or link == PLACEHOLDER_LINK:
        return None
    return link


# Shape checks


def _require_mapping(value: Any, path: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise MalformedDocument(
            f"Expected a mapping, got {type(value).__name__}", path=path, snippet=repr(value)
        )
    return value


def _require_list(value: Any, path: str) -> List[Any]:
    if not isinstance(value, list):
        raise MalformedDocument(
            f"Expected a list, got {type(value).__name__}", path=path, snippet=repr(value)
        )
    return value


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _optional_text(value: Any, path: str) -> Optional[str]:
    """Text field that may be absent. Numbers are accepted and stringified."""
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if _is_number(value):
        return str(value)
    raise MalformedDocument(
        f"Expected text, got {type(value).__name__}", path=path, snippet=repr(value)
    )


def _required_text(mapping: Dict[str, Any], key: str, path: str) -> str:
    value = _optional_text(mapping.get(key), f"{path}.{key}")
    if value is None:
        raise MalformedDocument(f"Missing required field '{key}'", path=path)
    return value


def _text_list(value: Any, path: str) -> Tuple[str, ...]:
    if value is None:
        return ()
    items = _require_list(value, path)
    return tuple(_required_item_text(item, f"{path}[{i}]") for i, item in enumerate(items))


def _required_item_text(value: Any, path: str) -> str:
    text = _optional_text(value, path)
    if text is None:
        raise MalformedDocument("Null entry in text list", path=path)
    return text


def _percentage(value: Any, path: str) -> Number:
    if not _is_number(value):
        raise MalformedDocument(
            f"Expected a numeric percentage, got {type(value).__name__}",
            path=path,
            snippet=repr(value),
        )
    return value


# Slice parsers


def _parse_personal(value: Any) -> PersonalInfo:
    personal = _require_mapping(value, "personal")

    social = personal.get("social")
    if social is None:
        social_links = SocialLinks()
    else:
        social = _require_mapping(social, "personal.social")
        social_links = SocialLinks(
            linkedin=_optional_text(social.get("linkedin"), "personal.social.linkedin"),
            github=_optional_text(social.get("github"), "personal.social.github"),
        )

    return PersonalInfo(
        name=_required_text(personal, "name", "personal"),
        title=_required_text(personal, "title", "personal"),
        summary=_optional_text(personal.get("summary"), "personal.summary"),
        phone=_optional_text(personal.get("phone"), "personal.phone"),
        location=_optional_text(personal.get("location"), "personal.location"),
        email=_optional_text(personal.get("email"), "personal.email"),
        resume=_optional_text(personal.get("resume"), "personal.resume"),
        social=social_links,
    )


def _parse_skills(value: Any) -> Tuple[SkillCategory, ...]:
    skills = _require_mapping(value, "skills")
    categories = []

    for key, items in skills.items():
        path = f"skills.{key}"
        if not str(key):
            _log_warning("Skipping skill category with an empty key")
            continue
        if not isinstance(items, list):
            _log_warning(f"Skipping skill category '{key}': not a list")
            continue
        categories.append(_parse_skill_category(str(key), items, path))

    return tuple(categories)


def _parse_skill_category(key: str, items: List[Any], path: str) -> SkillCategory:
    """
    Build a category whose kind is decided by its first element.

    A record with a 'name' field as first element makes the whole category
    LEVELED; anything else makes it TAGS. Later elements are converted to the
    decided kind instead of switching it.
    """
    if not items:
        return SkillCategory(key=key, kind=SkillKind.TAGS)

    first = items[0]
    kind = SkillKind.LEVELED if isinstance(first, dict) and "name" in first else SkillKind.TAGS

    if kind is SkillKind.LEVELED:
        parsed = tuple(_as_leveled(item, f"{path}[{i}]") for i, item in enumerate(items))
    else:
        parsed = tuple(_as_plain(item, f"{path}[{i}]") for i, item in enumerate(items))

    return SkillCategory(key=key, kind=kind, items=parsed)


def _as_leveled(item: Any, path: str) -> LeveledSkill:
    if isinstance(item, dict) and "name" in item:
        name = _required_text(item, "name", path)
        if item.get("level") is None:
            _log_warning(f"{path}: leveled skill '{name}' has no level, using 0")
            return LeveledSkill(name=name, level=0)
        return LeveledSkill(name=name, level=_percentage(item["level"], f"{path}.level"))

    label = _optional_text(item, path)
    if label is None:
        raise MalformedDocument("Null skill entry", path=path)
    _log_warning(f"{path}: plain skill '{label}' in a leveled category, using level 0")
    return LeveledSkill(name=label, level=0)


def _as_plain(item: Any, path: str) -> PlainSkill:
    if isinstance(item, dict):
        if "name" not in item:
            raise MalformedDocument("Skill record without 'name'", path=path, snippet=repr(item))
        return PlainSkill(label=_required_text(item, "name", path))

    label = _optional_text(item, path)
    if label is None:
        raise MalformedDocument("Null skill entry", path=path)
    return PlainSkill(label=label)


def _parse_experience(value: Any) -> Tuple[ExperienceEntry, ...]:
    entries = []
    for i, item in enumerate(_require_list(value, "experience")):
        path = f"experience[{i}]"
        exp = _require_mapping(item, path)
        entries.append(
            ExperienceEntry(
                period=_optional_text(exp.get("period"), f"{path}.period") or "",
                position=_optional_text(exp.get("position"), f"{path}.position") or "",
                company=_optional_text(exp.get("company"), f"{path}.company") or "",
                location=_optional_text(exp.get("location"), f"{path}.location"),
                project=_optional_text(exp.get("project"), f"{path}.project"),
                achievements=_text_list(exp.get("achievements"), f"{path}.achievements"),
                technologies=_text_list(exp.get("technologies"), f"{path}.technologies"),
            )
        )
    return tuple(entries)


def _parse_projects(value: Any) -> Tuple[ProjectEntry, ...]:
    entries = []
    for i, item in enumerate(_require_list(value, "projects")):
        path = f"projects[{i}]"
        project = _require_mapping(item, path)
        entries.append(
            ProjectEntry(
                title=_required_text(project, "title", path),
                description=_optional_text(project.get("description"), f"{path}.description")
                or "",
                category=_optional_text(project.get("category"), f"{path}.category"),
                technologies=_text_list(project.get("technologies"), f"{path}.technologies"),
                link=_optional_text(project.get("link"), f"{path}.link"),
                github=_optional_text(project.get("github"), f"{path}.github"),
            )
        )
    return tuple(entries)


def _parse_stats(value: Any) -> Tuple[Tuple[str, Number], ...]:
    stats = _require_mapping(value, "stats")
    parsed = []

    for key, percentage in stats.items():
        if not str(key):
            _log_warning("Skipping stat with an empty key")
            continue
        parsed.append((str(key), _percentage(percentage, f"stats.{key}")))

    return tuple(parsed)
