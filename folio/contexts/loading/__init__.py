"""
Loading Context

Responsibilities:
- Fetches the profile document from a Source (local file or HTTP URL)
- Parses JSON/YAML bodies
- Validates the document shape and decides skill category kinds once

Owns: Profile document model, Sources, load-time validation
Never: Touches the page surface
"""

from folio.contexts.loading.exceptions import FolioError, MalformedDocument, SourceUnavailable
from folio.contexts.loading.loader import ProfileLoader, parse_profile_text
from folio.contexts.loading.profile_data_structure import (
    ExperienceEntry,
    LeveledSkill,
    PersonalInfo,
    PlainSkill,
    ProfileDocument,
    ProjectEntry,
    SkillCategory,
    SkillKind,
    SocialLinks,
)
from folio.contexts.loading.sources import FileSource, HttpSource, source_for

__all__ = [
    # Loading orchestration
    "ProfileLoader",
    "parse_profile_text",
    # Sources
    "FileSource",
    "HttpSource",
    "source_for",
    # Errors
    "FolioError",
    "SourceUnavailable",
    "MalformedDocument",
    # Data structure classes
    "ProfileDocument",
    "PersonalInfo",
    "SocialLinks",
    "SkillCategory",
    "SkillKind",
    "PlainSkill",
    "LeveledSkill",
    "ExperienceEntry",
    "ProjectEntry",
]
