"""
Section renderers.

One renderer per section id. Every renderer shares the signature
`render_<section>(data, config, fonts, font_size, get_color, title=...,
line_height=None, section_margin=None)` and returns None for empty input,
regardless of heading visibility.
"""

from vellum.contexts.composition.sections.awards import render_awards
from vellum.contexts.composition.sections.certificates import render_certificates
from vellum.contexts.composition.sections.custom import render_custom
from vellum.contexts.composition.sections.education import render_education
from vellum.contexts.composition.sections.interests import render_interests
from vellum.contexts.composition.sections.languages import render_languages
from vellum.contexts.composition.sections.projects import render_projects
from vellum.contexts.composition.sections.publications import render_publications
from vellum.contexts.composition.sections.references import render_references
from vellum.contexts.composition.sections.skills import render_skills
from vellum.contexts.composition.sections.summary import render_summary
from vellum.contexts.composition.sections.work import render_work

__all__ = [
    "render_awards",
    "render_certificates",
    "render_custom",
    "render_education",
    "render_interests",
    "render_languages",
    "render_projects",
    "render_publications",
    "render_references",
    "render_skills",
    "render_summary",
    "render_work",
]
