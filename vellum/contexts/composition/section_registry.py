"""
Section Registry

Single table mapping each section id to its title, data accessor, renderer
and default column. The composer walks the section order through this table
instead of branching on section ids. Default columns are read from
vellum.contexts.layout.column_distributor.DEFAULT_MEMBERSHIP.

Unknown ids are skipped. A renderer that fails on malformed data is logged
and only that section is omitted from the document.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional

from vellum.contexts.composition.colors import ColorResolver
from vellum.contexts.composition.logger import _log_debug, _log_error
from vellum.contexts.composition.render_tree import Container
from vellum.contexts.composition.sections import (
    render_awards,
    render_certificates,
    render_custom,
    render_education,
    render_interests,
    render_languages,
    render_projects,
    render_publications,
    render_references,
    render_skills,
    render_summary,
    render_work,
)
from vellum.contexts.composition.typography import FontConfig
from vellum.contexts.content import Resume
from vellum.contexts.layout.column_distributor import DEFAULT_MEMBERSHIP
from vellum.contexts.layout.config_resolver import EffectiveConfig
from vellum.contexts.layout.defaults import DEFAULT_SECTION_TITLES


@dataclass(frozen=True)
class SectionDescriptor:
    """
    How one section is found and rendered.

    Attributes:
        title: Default heading text
        data_accessor: Extracts the section's data from a resume
        renderer: Section renderer (see vellum.contexts.composition.sections)
        default_column: Column of the default membership ("left" or "main")
    """

    title: str
    data_accessor: Callable[[Resume], Any]
    renderer: Callable[..., Optional[Container]]
    default_column: str = "main"


@dataclass
class RenderProps:
    """
    Everything a section renderer needs besides its data.

    Attributes:
        resume: Resume being rendered
        config: Effective configuration
        fonts: Font configuration
        font_size: Base font size
        get_color: Colour resolver
        line_height: Body line height
        section_margin: Bottom margin of each section
        titles: Heading overrides by section id
    """

    resume: Resume
    config: EffectiveConfig
    fonts: FontConfig
    font_size: float
    get_color: ColorResolver
    line_height: Optional[float] = None
    section_margin: Optional[float] = None
    titles: Dict[str, str] = field(default_factory=dict)


def _collection(name: str) -> Callable[[Resume], Any]:
    return lambda resume: getattr(resume, name)


def _descriptor(
    section_id: str, data_accessor: Callable[[Resume], Any], renderer: Callable[..., Optional[Container]]
) -> SectionDescriptor:
    return SectionDescriptor(
        title=DEFAULT_SECTION_TITLES[section_id],
        data_accessor=data_accessor,
        renderer=renderer,
        default_column=DEFAULT_MEMBERSHIP.column_of(section_id) or "main",
    )


SECTION_DESCRIPTORS: Dict[str, SectionDescriptor] = {
    "summary": _descriptor("summary", lambda resume: resume.basics.summary, render_summary),
    "work": _descriptor("work", _collection("work"), render_work),
    "education": _descriptor("education", _collection("education"), render_education),
    "skills": _descriptor("skills", _collection("skills"), render_skills),
    "projects": _descriptor("projects", _collection("projects"), render_projects),
    "certificates": _descriptor("certificates", _collection("certificates"), render_certificates),
    "languages": _descriptor("languages", _collection("languages"), render_languages),
    "interests": _descriptor("interests", _collection("interests"), render_interests),
    "publications": _descriptor("publications", _collection("publications"), render_publications),
    "awards": _descriptor("awards", _collection("awards"), render_awards),
    "references": _descriptor("references", _collection("references"), render_references),
    "custom": _descriptor("custom", _collection("custom"), render_custom),
}


def get_descriptor(section_id: str) -> Optional[SectionDescriptor]:
    """Look up a section descriptor; None for unknown ids."""
    return SECTION_DESCRIPTORS.get(section_id)


def get_data(resume: Resume, section_id: str) -> Any:
    """
    Get a section's data from a resume.

    Returns:
        The section's collection (or summary text), or None for unknown ids
    """
    descriptor = get_descriptor(section_id)
    if descriptor is None:
        return None
    return descriptor.data_accessor(resume)


def has_data(resume: Resume, section_id: str) -> bool:
    """
    Whether a section has anything to render.

    Example:
        >>> has_data(Resume(), "work")
        False
    """
    data = get_data(resume, section_id)
    if isinstance(data, str):
        return bool(data.strip())
    return bool(data)


def render_one(section_id: str, props: RenderProps) -> Optional[Container]:
    """
    Render one section.

    Args:
        section_id: Section id
        props: Shared render inputs

    Returns:
        Section container, or None for unknown ids, empty sections and
        sections whose renderer failed
    """
    descriptor = get_descriptor(section_id)
    if descriptor is None:
        _log_debug(f"Skipping unknown section '{section_id}'")
        return None

    try:
        return descriptor.renderer(
            descriptor.data_accessor(props.resume),
            props.config,
            props.fonts,
            props.font_size,
            props.get_color,
            title=props.titles.get(section_id) or descriptor.title,
            line_height=props.line_height,
            section_margin=props.section_margin,
        )
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        _log_error(f"Failed to render section '{section_id}': {type(e).__name__}: {e}")
        return None


def render_many(
    ordered_ids: Iterable[str],
    props: RenderProps,
    include: Optional[Iterable[str]] = None,
    exclude: Optional[Iterable[str]] = None,
) -> List[Container]:
    """
    Render sections in order, skipping empty and unknown ones.

    Args:
        ordered_ids: Section ids in display order
        props: Shared render inputs
        include: If given, only these ids are rendered
        exclude: Ids never rendered (applied after include)

    Returns:
        Rendered section containers in input order
    """
    included = set(include) if include is not None else None
    excluded = set(exclude or ())

    rendered = []
    for section_id in ordered_ids:
        if included is not None and section_id not in included:
            continue
        if section_id in excluded:
            continue
        node = render_one(section_id, props)
        if node is not None:
            rendered.append(node)
    return rendered
