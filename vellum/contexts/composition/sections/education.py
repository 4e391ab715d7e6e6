"""
Education section.
"""

from typing import Optional, Sequence

from vellum.contexts.composition.colors import ColorResolver
from vellum.contexts.composition.entry_header import ENTRY_LAYOUT_STYLES, TITLE_SIZE_STEPS, EntryFields, entry_header
from vellum.contexts.composition.lists import render_inline_list
from vellum.contexts.composition.media import link_display_mode
from vellum.contexts.composition.render_tree import Container
from vellum.contexts.composition.sections.common import (
    BODY_TEXT_COLOR,
    DEFAULT_LINE_HEIGHT,
    body_text,
    entry_block,
    section_container,
)
from vellum.contexts.composition.typography import FontConfig
from vellum.contexts.content import EducationEntry
from vellum.contexts.layout.config_resolver import EffectiveConfig
from vellum.contexts.layout.defaults import DEFAULT_SECTION_TITLES
from vellum.contexts.layout.field_styles import FieldStyle, field_style
from vellum.utils.dates import format_date_range
from vellum.utils.text_processing import join_present

COURSES_LABEL = "Relevant Coursework:"


def degree_text(study_type: str, area: str) -> str:
    """
    Combine degree type and field of study.

    Example:
        >>> degree_text("BSc", "Computer Science")
        'BSc in Computer Science'
        >>> degree_text("", "Computer Science")
        'Computer Science'
    """
    return join_present([study_type, area], " in ")


def score_text(score: str) -> str:
    """
    Prefix a bare score with "GPA: ".

    Scores that already carry a label (a colon or the word GPA) are kept as is.

    Example:
        >>> score_text("3.8/4.0"), score_text("Grade: First")
        ('GPA: 3.8/4.0', 'Grade: First')
    """
    if not score:
        return ""
    if ":" in score or "gpa" in score.lower():
        return score
    return f"GPA: {score}"


def render_education(
    education: Sequence[EducationEntry],
    config: EffectiveConfig,
    fonts: FontConfig,
    font_size: float,
    get_color: ColorResolver,
    title: str = DEFAULT_SECTION_TITLES["education"],
    line_height: Optional[float] = None,
    section_margin: Optional[float] = None,
) -> Optional[Container]:
    """
    Render education entries.

    Each entry shows institution, degree, dates, score, summary and an
    inline list of courses.

    Returns:
        Section container, or None without entries
    """
    if not education:
        return None

    line_height = line_height or config.get_number("lineHeight", DEFAULT_LINE_HEIGHT)
    institution_style = field_style(config, "education", "institution", FieldStyle(bold=True, list_style="none"))
    degree_style = field_style(config, "education", "degree", FieldStyle(bold=True))
    date_style = field_style(config, "education", "date")
    gpa_style = field_style(config, "education", "gpa")
    courses_style = field_style(config, "education", "courses")

    layout_style = config.get_choice("entryLayoutStyle", ENTRY_LAYOUT_STYLES, 1)
    title_size = config.get_choice("entryTitleSize", tuple(TITLE_SIZE_STEPS), "M")
    link_mode = link_display_mode(config)

    entries = []
    for index, school in enumerate(education):
        fields = EntryFields(
            title=school.institution,
            subtitle=degree_text(school.study_type, school.area),
            date=format_date_range(school.start_date, school.end_date),
            url=school.url,
        )
        header = entry_header(
            fields,
            layout_style,
            fonts,
            font_size,
            get_color,
            title_style=institution_style,
            subtitle_style=degree_style,
            date_style=date_style,
            list_style=institution_style.list_style,
            index=index,
            link_mode=link_mode,
            title_size=title_size,
        )
        entries.append(
            entry_block(
                [
                    header,
                    body_text(
                        score_text(school.score),
                        fonts,
                        font_size,
                        line_height,
                        color=get_color("subtext", BODY_TEXT_COLOR),
                        style=gpa_style,
                        role="score",
                    ),
                    body_text(school.summary, fonts, font_size, line_height, role="entry-summary"),
                    render_inline_list(
                        school.courses,
                        fonts,
                        font_size,
                        BODY_TEXT_COLOR,
                        courses_style.bold,
                        courses_style.italic,
                        label=COURSES_LABEL,
                    ),
                ],
                key=school.id,
            )
        )

    return section_container("education", title, entries, config, fonts, font_size, get_color, section_margin)
