"""
Per-field style accessor.

Layout settings store per-section, per-field toggles as flat keys such as
`experienceCompanyBold` or `projectsAchievementsListStyle`. Renderers read
them through `field_style()` instead of building key names by hand.
"""

from dataclasses import dataclass
from typing import Optional

from vellum.contexts.layout.config_resolver import EffectiveConfig

LIST_STYLES = ("bullet", "number", "dash", "hyphen", "none", "blank", "inline")

# Section id -> prefix used by its flat setting keys
FIELD_KEY_PREFIXES = {
    "work": "experience",
    "education": "education",
    "skills": "skills",
    "projects": "projects",
    "certificates": "certificates",
    "languages": "languages",
    "interests": "interests",
    "publications": "publications",
    "awards": "awards",
    "references": "references",
    "custom": "customSection",
}


@dataclass(frozen=True)
class FieldStyle:
    """
    Resolved style of one field of one section.

    Attributes:
        bold: Render the field in bold weight
        italic: Render the field in italic
        list_style: Marker style when the field is rendered as a list
    """

    bold: bool = False
    italic: bool = False
    list_style: str = "bullet"


def field_key(section_id: str, field_id: str, attribute: str) -> Optional[str]:
    """
    Build the flat settings key for a section field attribute.

    Args:
        section_id: Section id (e.g., "work")
        field_id: Field name in camelCase (e.g., "company"); empty for the section itself
        attribute: "Bold", "Italic" or "ListStyle"

    Returns:
        Key such as "experienceCompanyBold", or None for sections without field styles

    Example:
        >>> field_key("work", "company", "Bold")
        'experienceCompanyBold'
        >>> field_key("projects", "", "ListStyle")
        'projectsListStyle'
    """
    prefix = FIELD_KEY_PREFIXES.get(section_id)
    if prefix is None:
        return None
    field_part = field_id[:1].upper() + field_id[1:]
    return f"{prefix}{field_part}{attribute}"


def field_style(
    config: EffectiveConfig,
    section_id: str,
    field_id: str = "",
    default: FieldStyle = FieldStyle(),
) -> FieldStyle:
    """
    Read the bold/italic/list-style toggles of a field.

    Missing or malformed keys fall back to the renderer-supplied default.

    Args:
        config: Effective configuration for the render pass
        section_id: Section id (e.g., "education")
        field_id: Field name (e.g., "gpa"); empty for the section-level list style
        default: Renderer-local defaults

    Returns:
        FieldStyle for the field

    Example:
        >>> field_style(config, "work", "achievements").list_style
        'bullet'
    """
    if section_id not in FIELD_KEY_PREFIXES:
        return default

    return FieldStyle(
        bold=config.get_bool(field_key(section_id, field_id, "Bold"), default.bold),
        italic=config.get_bool(field_key(section_id, field_id, "Italic"), default.italic),
        list_style=config.get_choice(
            field_key(section_id, field_id, "ListStyle"), LIST_STYLES, default.list_style
        ),
    )
