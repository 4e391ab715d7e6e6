"""
Publications section.
"""

from typing import Optional, Sequence

from vellum.contexts.composition.colors import ColorResolver
from vellum.contexts.composition.media import link_display_mode
from vellum.contexts.composition.render_tree import Container
from vellum.contexts.composition.sections.common import (
    DEFAULT_LINE_HEIGHT,
    body_text,
    entry_block,
    header_row,
    secondary_line,
    section_container,
)
from vellum.contexts.composition.typography import FontConfig
from vellum.contexts.content import PublicationEntry
from vellum.contexts.layout.config_resolver import EffectiveConfig
from vellum.contexts.layout.defaults import DEFAULT_SECTION_TITLES
from vellum.contexts.layout.field_styles import FieldStyle, field_style
from vellum.utils.dates import format_event_date


def render_publications(
    publications: Sequence[PublicationEntry],
    config: EffectiveConfig,
    fonts: FontConfig,
    font_size: float,
    get_color: ColorResolver,
    title: str = DEFAULT_SECTION_TITLES["publications"],
    line_height: Optional[float] = None,
    section_margin: Optional[float] = None,
) -> Optional[Container]:
    """Render publications: name, link and release date, then publisher and summary."""
    if not publications:
        return None

    line_height = line_height or config.get_number("lineHeight", DEFAULT_LINE_HEIGHT)
    list_style = field_style(config, "publications", "", FieldStyle(list_style="none")).list_style
    name_style = field_style(config, "publications", "name", FieldStyle(bold=True))
    publisher_style = field_style(config, "publications", "publisher")
    date_style = field_style(config, "publications", "date")
    url_style = field_style(config, "publications", "url")
    link_mode = link_display_mode(config)

    entries = []
    for index, publication in enumerate(publications):
        row = header_row(
            publication.name,
            format_event_date(publication.release_date),
            fonts,
            font_size,
            get_color,
            title_style=name_style,
            date_style=date_style,
            list_style=list_style,
            index=index,
            url=publication.url,
            url_style=url_style,
            link_mode=link_mode,
        )
        entries.append(
            entry_block(
                [
                    row,
                    secondary_line(publication.publisher, fonts, font_size, get_color, publisher_style, role="publisher"),
                    body_text(publication.summary, fonts, font_size, line_height, role="entry-summary"),
                ],
                key=publication.id,
            )
        )

    return section_container("publications", title, entries, config, fonts, font_size, get_color, section_margin)
