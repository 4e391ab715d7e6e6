"""
Projects section.
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
    highlights_list,
    section_container,
)
from vellum.contexts.composition.typography import FontConfig
from vellum.contexts.content import ProjectEntry
from vellum.contexts.layout.config_resolver import EffectiveConfig
from vellum.contexts.layout.defaults import DEFAULT_SECTION_TITLES
from vellum.contexts.layout.field_styles import FieldStyle, field_style
from vellum.utils.dates import format_date_range

TECHNOLOGIES_LABEL = "Technologies:"


def render_projects(
    projects: Sequence[ProjectEntry],
    config: EffectiveConfig,
    fonts: FontConfig,
    font_size: float,
    get_color: ColorResolver,
    title: str = DEFAULT_SECTION_TITLES["projects"],
    line_height: Optional[float] = None,
    section_margin: Optional[float] = None,
) -> Optional[Container]:
    """
    Render project entries.

    Each entry shows the project name with its link and dates, the
    description, "Technologies:" keywords and the highlights list.

    Returns:
        Section container, or None without entries
    """
    if not projects:
        return None

    line_height = line_height or config.get_number("lineHeight", DEFAULT_LINE_HEIGHT)
    section_style = field_style(config, "projects", "", FieldStyle(list_style="none"))
    name_style = field_style(config, "projects", "name", FieldStyle(bold=True))
    date_style = field_style(config, "projects", "date")
    url_style = field_style(config, "projects", "url")
    technologies_style = field_style(config, "projects", "technologies")
    features_style = field_style(config, "projects", "features")
    highlights_style = field_style(config, "projects", "achievements").list_style

    layout_style = config.get_choice("entryLayoutStyle", ENTRY_LAYOUT_STYLES, 1)
    title_size = config.get_choice("entryTitleSize", tuple(TITLE_SIZE_STEPS), "M")
    link_mode = link_display_mode(config)

    entries = []
    for index, project in enumerate(projects):
        fields = EntryFields(
            title=project.name,
            date=format_date_range(project.start_date, project.end_date),
            url=project.url,
        )
        header = entry_header(
            fields,
            layout_style,
            fonts,
            font_size,
            get_color,
            title_style=name_style,
            date_style=date_style,
            url_style=url_style,
            list_style=section_style.list_style,
            index=index,
            link_mode=link_mode,
            title_size=title_size,
        )
        entries.append(
            entry_block(
                [
                    header,
                    body_text(project.description, fonts, font_size, line_height, role="entry-summary"),
                    render_inline_list(
                        project.keywords,
                        fonts,
                        font_size,
                        BODY_TEXT_COLOR,
                        technologies_style.bold,
                        technologies_style.italic,
                        label=TECHNOLOGIES_LABEL,
                    ),
                    highlights_list(
                        project.highlights,
                        highlights_style,
                        config,
                        fonts,
                        font_size,
                        get_color,
                        features_style,
                        line_height,
                    ),
                ],
                key=project.id,
            )
        )

    return section_container("projects", title, entries, config, fonts, font_size, get_color, section_margin)
