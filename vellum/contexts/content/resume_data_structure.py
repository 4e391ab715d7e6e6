"""
Resume Document Structure

Defines the structured representation of resume content consumed by the
composition engine. Field names follow the JSON Resume vocabulary; persisted
documents use camelCase keys (startDate, studyType) which are mapped onto the
snake_case attributes below when loading.

Content owns:
- Parsing YAML/JSON-like mappings into Resume instances
- Structural validation of the collections
- Writing content plus the user-override layer back to YAML
"""

import re
import uuid
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional

from omegaconf import OmegaConf

from vellum.contexts.content.exceptions import InvalidResumeStructureError
from vellum.contexts.content.logger import _log_debug, _log_info, _log_warning


def _snake_case(key: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", key).lower()


def _camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _text(value: Any, field_name: str) -> str:
    """Coerce a scalar to display text; malformed values degrade to empty."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    _log_warning(f"Ignoring non-text value for '{field_name}': {value!r}")
    return ""


def _text_list(value: Any, field_name: str) -> List[str]:
    """Coerce a list of strings; a non-list degrades to an empty list."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        _log_warning(f"Ignoring non-list value for '{field_name}': {value!r}")
        return []
    return [_text(item, field_name) for item in value if item is not None]


def _new_id() -> str:
    return str(uuid.uuid4())


# ============================================================================
# Entry Dataclasses
# ============================================================================


@dataclass
class Entry:
    """
    Base class for collection entries.

    Subclasses declare their text fields as `str` and list fields as
    `List[str]`; `from_dict` coerces raw values accordingly.
    """

    id: str = field(default_factory=_new_id)

    @classmethod
    def from_dict(cls, raw: Dict[str, Any], section: str) -> "Entry":
        if not isinstance(raw, dict):
            raise InvalidResumeStructureError(
                f"Entries of '{section}' must be mappings", section=section, value=raw
            )

        known = {f.name: f for f in fields(cls)}
        values: Dict[str, Any] = {}
        for key, value in raw.items():
            name = _snake_case(key)
            if name not in known:
                _log_debug(f"Ignoring unknown field '{key}' in {section}")
                continue
            if known[name].type in (List[str], "List[str]"):
                values[name] = _text_list(value, f"{section}.{key}")
            else:
                values[name] = _text(value, f"{section}.{key}")

        if not values.get("id"):
            values["id"] = _new_id()
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        return {_camel_case(f.name): getattr(self, f.name) for f in fields(self)}


@dataclass
class WorkEntry(Entry):
    company: str = ""
    position: str = ""
    url: str = ""
    start_date: str = ""
    end_date: str = ""
    summary: str = ""
    highlights: List[str] = field(default_factory=list)


@dataclass
class EducationEntry(Entry):
    institution: str = ""
    url: str = ""
    area: str = ""
    study_type: str = ""
    start_date: str = ""
    end_date: str = ""
    score: str = ""
    summary: str = ""
    courses: List[str] = field(default_factory=list)


@dataclass
class SkillEntry(Entry):
    name: str = ""
    level: str = ""
    keywords: List[str] = field(default_factory=list)


@dataclass
class ProjectEntry(Entry):
    name: str = ""
    description: str = ""
    highlights: List[str] = field(default_factory=list)
    keywords: List[str] = field(default_factory=list)
    start_date: str = ""
    end_date: str = ""
    url: str = ""


@dataclass
class CertificateEntry(Entry):
    name: str = ""
    issuer: str = ""
    date: str = ""
    url: str = ""
    summary: str = ""


@dataclass
class LanguageEntry(Entry):
    language: str = ""
    fluency: str = ""


@dataclass
class InterestEntry(Entry):
    name: str = ""
    keywords: List[str] = field(default_factory=list)


@dataclass
class PublicationEntry(Entry):
    name: str = ""
    publisher: str = ""
    release_date: str = ""
    url: str = ""
    summary: str = ""


@dataclass
class AwardEntry(Entry):
    title: str = ""
    date: str = ""
    awarder: str = ""
    summary: str = ""


@dataclass
class ReferenceEntry(Entry):
    name: str = ""
    position: str = ""
    reference: str = ""


@dataclass
class CustomItem(Entry):
    name: str = ""
    description: str = ""
    date: str = ""
    url: str = ""
    summary: str = ""


@dataclass
class CustomSection:
    """A named, user-defined section holding uniformly shaped items."""

    id: str = field(default_factory=_new_id)
    name: str = ""
    items: List[CustomItem] = field(default_factory=list)

    @classmethod
    def from_dict(cls, raw: Dict[str, Any], section: str = "custom") -> "CustomSection":
        if not isinstance(raw, dict):
            raise InvalidResumeStructureError(
                "Custom sections must be mappings", section=section, value=raw
            )
        items = _entries(raw.get("items"), CustomItem, f"{section}.items")
        return cls(
            id=_text(raw.get("id"), f"{section}.id") or _new_id(),
            name=_text(raw.get("name"), f"{section}.name"),
            items=items,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "items": [item.to_dict() for item in self.items]}


def _entries(raw: Any, entry_cls, section: str) -> list:
    """Build a typed collection, rejecting anything that is not a list."""
    if raw is None:
        return []
    if not isinstance(raw, (list, tuple)):
        raise InvalidResumeStructureError(
            f"Collection '{section}' must be a list", section=section, value=raw
        )
    return [entry_cls.from_dict(item, section) for item in raw]


# ============================================================================
# Basics
# ============================================================================


@dataclass
class Location:
    city: str = ""
    country: str = ""


@dataclass
class Profile:
    network: str = ""
    username: str = ""
    url: str = ""


@dataclass
class Basics:
    """
    Identity and contact details shown in the document header.

    Attributes:
        name: Full name
        label: Professional title shown under the name
        image: Profile image source (URL or data URI)
        summary: Free text backing the "summary" section
        profiles: Social/professional profiles (network, username, url)
    """

    name: str = ""
    label: str = ""
    image: str = ""
    email: str = ""
    phone: str = ""
    url: str = ""
    summary: str = ""
    location: Location = field(default_factory=Location)
    profiles: List[Profile] = field(default_factory=list)

    @classmethod
    def from_dict(cls, raw: Optional[Dict[str, Any]]) -> "Basics":
        if raw is None:
            return cls()
        if not isinstance(raw, dict):
            raise InvalidResumeStructureError("'basics' must be a mapping", section="basics", value=raw)

        location_raw = raw.get("location") or {}
        if not isinstance(location_raw, dict):
            _log_warning(f"Ignoring malformed basics.location: {location_raw!r}")
            location_raw = {}

        profiles_raw = raw.get("profiles") or []
        if not isinstance(profiles_raw, (list, tuple)):
            raise InvalidResumeStructureError(
                "'basics.profiles' must be a list", section="basics.profiles", value=profiles_raw
            )

        profiles = []
        for profile in profiles_raw:
            if not isinstance(profile, dict):
                _log_warning(f"Ignoring malformed profile: {profile!r}")
                continue
            profiles.append(
                Profile(
                    network=_text(profile.get("network"), "profiles.network"),
                    username=_text(profile.get("username"), "profiles.username"),
                    url=_text(profile.get("url"), "profiles.url"),
                )
            )

        return cls(
            name=_text(raw.get("name"), "basics.name"),
            label=_text(raw.get("label"), "basics.label"),
            image=_text(raw.get("image"), "basics.image"),
            email=_text(raw.get("email"), "basics.email"),
            phone=_text(raw.get("phone"), "basics.phone"),
            url=_text(raw.get("url"), "basics.url"),
            summary=_text(raw.get("summary"), "basics.summary"),
            location=Location(
                city=_text(location_raw.get("city"), "location.city"),
                country=_text(location_raw.get("country"), "location.country"),
            ),
            profiles=profiles,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "label": self.label,
            "image": self.image,
            "email": self.email,
            "phone": self.phone,
            "url": self.url,
            "summary": self.summary,
            "location": {"city": self.location.city, "country": self.location.country},
            "profiles": [
                {"network": p.network, "username": p.username, "url": p.url} for p in self.profiles
            ],
        }


# ============================================================================
# Resume
# ============================================================================


@dataclass
class ResumeMeta:
    """
    Document-level metadata.

    Attributes:
        title: Document title (used for export file names)
        template_id: Selected template (unknown ids fall back to "ats")
        theme_color: Accent colour; None means "use the template's colour"
        last_modified: ISO timestamp of the last edit
        layout_settings: User-override layer only, never the effective config
    """

    title: str = "Untitled Resume"
    template_id: str = "ats"
    theme_color: Optional[str] = None
    last_modified: Optional[str] = None
    layout_settings: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, raw: Optional[Dict[str, Any]]) -> "ResumeMeta":
        if raw is None:
            return cls()
        if not isinstance(raw, dict):
            raise InvalidResumeStructureError("'meta' must be a mapping", section="meta", value=raw)

        settings = raw.get("layoutSettings", raw.get("layout_settings")) or {}
        if not isinstance(settings, dict):
            _log_warning(f"Ignoring malformed layout settings: {settings!r}")
            settings = {}

        return cls(
            title=_text(raw.get("title"), "meta.title") or "Untitled Resume",
            template_id=_text(raw.get("templateId", raw.get("template_id")), "meta.templateId")
            or "ats",
            theme_color=_text(raw.get("themeColor", raw.get("theme_color")), "meta.themeColor")
            or None,
            last_modified=_text(raw.get("lastModified", raw.get("last_modified")), "meta.lastModified")
            or None,
            layout_settings=dict(settings),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "templateId": self.template_id,
            "themeColor": self.theme_color,
            "lastModified": self.last_modified,
            "layoutSettings": dict(self.layout_settings),
        }


# Collection name -> entry class (order matches the default section order)
COLLECTION_TYPES = {
    "work": WorkEntry,
    "education": EducationEntry,
    "skills": SkillEntry,
    "projects": ProjectEntry,
    "certificates": CertificateEntry,
    "languages": LanguageEntry,
    "interests": InterestEntry,
    "publications": PublicationEntry,
    "awards": AwardEntry,
    "references": ReferenceEntry,
}


@dataclass
class Resume:
    """
    A complete resume document: metadata, basics and eleven collections.

    The twelfth section, "summary", is backed by `basics.summary`.
    """

    id: str = field(default_factory=_new_id)
    meta: ResumeMeta = field(default_factory=ResumeMeta)
    basics: Basics = field(default_factory=Basics)
    work: List[WorkEntry] = field(default_factory=list)
    education: List[EducationEntry] = field(default_factory=list)
    skills: List[SkillEntry] = field(default_factory=list)
    projects: List[ProjectEntry] = field(default_factory=list)
    certificates: List[CertificateEntry] = field(default_factory=list)
    languages: List[LanguageEntry] = field(default_factory=list)
    interests: List[InterestEntry] = field(default_factory=list)
    publications: List[PublicationEntry] = field(default_factory=list)
    awards: List[AwardEntry] = field(default_factory=list)
    references: List[ReferenceEntry] = field(default_factory=list)
    custom: List[CustomSection] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Resume":
        """
        Build a Resume from a plain mapping (parsed YAML or JSON).

        Args:
            data: Mapping with optional keys id, meta, basics and the collections

        Returns:
            Resume instance with ids assigned to entries that lack one

        Raises:
            InvalidResumeStructureError: If the root or a collection has the wrong shape
        """
        if not isinstance(data, dict):
            raise InvalidResumeStructureError("Resume root must be a mapping", value=data)

        collections = {
            name: _entries(data.get(name), entry_cls, name)
            for name, entry_cls in COLLECTION_TYPES.items()
        }
        custom = _entries(data.get("custom"), CustomSection, "custom")

        return cls(
            id=_text(data.get("id"), "id") or _new_id(),
            meta=ResumeMeta.from_dict(data.get("meta")),
            basics=Basics.from_dict(data.get("basics")),
            custom=custom,
            **collections,
        )

    def to_dict(self) -> Dict[str, Any]:
        data = {"id": self.id, "meta": self.meta.to_dict(), "basics": self.basics.to_dict()}
        for name in COLLECTION_TYPES:
            data[name] = [entry.to_dict() for entry in getattr(self, name)]
        data["custom"] = [section.to_dict() for section in self.custom]
        return data


def load_resume(path: Path) -> Resume:
    """
    Load a resume document from a YAML (or JSON) file.

    Args:
        path: Path to the resume file

    Returns:
        Parsed Resume

    Raises:
        FileNotFoundError: If the file does not exist
        InvalidResumeStructureError: If the content has the wrong shape
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Resume file not found: {path}")

    data = OmegaConf.to_container(OmegaConf.load(path), resolve=False)
    resume = Resume.from_dict(data)
    _log_info(f"Loaded resume '{resume.meta.title}' from {path}")
    return resume


def save_resume(resume: Resume, path: Path) -> Path:
    """
    Write a resume (content plus user-override layer) to YAML.

    Effective configuration is never written: only `meta.layout_settings`,
    which holds the user's overrides, is persisted.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    OmegaConf.save(OmegaConf.create(resume.to_dict()), path)

    # Strip trailing blank lines for consistency
    content = path.read_text()
    path.write_text(content.rstrip() + "\n")

    _log_info(f"Saved resume '{resume.meta.title}' to {path}")
    return path
