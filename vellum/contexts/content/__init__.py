"""
Content Context

Responsibilities:
- Represents resume content (basics plus eleven entry collections)
- Loads and saves resume documents as YAML
- Validates collection structure and degrades malformed scalar fields

Owns: Resume data model, persisted document format
Never: Makes layout or styling decisions
"""

from vellum.contexts.content.exceptions import InvalidResumeStructureError
from vellum.contexts.content.resume_data_structure import (
    AwardEntry,
    Basics,
    CertificateEntry,
    CustomItem,
    CustomSection,
    EducationEntry,
    InterestEntry,
    LanguageEntry,
    Location,
    Profile,
    ProjectEntry,
    PublicationEntry,
    ReferenceEntry,
    Resume,
    ResumeMeta,
    SkillEntry,
    WorkEntry,
    load_resume,
    save_resume,
)

__all__ = [
    # Document
    "Resume",
    "ResumeMeta",
    "Basics",
    "Location",
    "Profile",
    # Entries
    "WorkEntry",
    "EducationEntry",
    "SkillEntry",
    "ProjectEntry",
    "CertificateEntry",
    "LanguageEntry",
    "InterestEntry",
    "PublicationEntry",
    "AwardEntry",
    "ReferenceEntry",
    "CustomSection",
    "CustomItem",
    # I/O
    "load_resume",
    "save_resume",
    "InvalidResumeStructureError",
]
