"""
User-defined custom sections.

Every custom section is rendered with its own heading (the section name);
the group shares the `custom` slot of the section order.
"""

from typing import List, Optional, Sequence

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
from vellum.contexts.content import CustomSection
from vellum.contexts.layout.config_resolver import EffectiveConfig
from vellum.contexts.layout.defaults import DEFAULT_SECTION_TITLES
from vellum.contexts.layout.field_styles import FieldStyle, field_style
from vellum.utils.dates import format_event_date


def render_custom(
    sections: Sequence[CustomSection],
    config: EffectiveConfig,
    fonts: FontConfig,
    font_size: float,
    get_color: ColorResolver,
    title: str = DEFAULT_SECTION_TITLES["custom"],
    line_height: Optional[float] = None,
    section_margin: Optional[float] = None,
) -> Optional[Container]:
    """
    Render custom sections.

    Sections without items are skipped. A section without a name uses the
    title argument as its heading.

    Returns:
        Group container holding one section container per custom section,
        or None when no custom section has items
    """
    if not sections:
        return None

    line_height = line_height or config.get_number("lineHeight", DEFAULT_LINE_HEIGHT)
    list_style = field_style(config, "custom", "", FieldStyle(list_style="none")).list_style
    name_style = field_style(config, "custom", "name", FieldStyle(bold=True))
    description_style = field_style(config, "custom", "description")
    date_style = field_style(config, "custom", "date")
    url_style = field_style(config, "custom", "url")
    link_mode = link_display_mode(config)

    rendered: List[Container] = []
    for section in sections:
        if not section.items:
            continue

        entries = []
        for index, item in enumerate(section.items):
            row = header_row(
                item.name,
                format_event_date(item.date),
                fonts,
                font_size,
                get_color,
                title_style=name_style,
                date_style=date_style,
                list_style=list_style,
                index=index,
                url=item.url,
                url_style=url_style,
                link_mode=link_mode,
            )
            entries.append(
                entry_block(
                    [
                        row,
                        secondary_line(item.description, fonts, font_size, get_color, description_style, role="description"),
                        body_text(item.summary, fonts, font_size, line_height, role="entry-summary"),
                    ],
                    key=item.id,
                )
            )

        rendered.append(
            section_container(
                "custom",
                section.name or title,
                entries,
                config,
                fonts,
                font_size,
                get_color,
                section_margin,
                key=section.id,
            )
        )

    if not rendered:
        return None
    return Container(rendered, {}, role="section-group", key="custom")
