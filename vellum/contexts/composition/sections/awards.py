"""
Awards section.
"""

from typing import Optional, Sequence

from vellum.contexts.composition.colors import ColorResolver
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
from vellum.contexts.content import AwardEntry
from vellum.contexts.layout.config_resolver import EffectiveConfig
from vellum.contexts.layout.defaults import DEFAULT_SECTION_TITLES
from vellum.contexts.layout.field_styles import FieldStyle, field_style
from vellum.utils.dates import format_event_date


def render_awards(
    awards: Sequence[AwardEntry],
    config: EffectiveConfig,
    fonts: FontConfig,
    font_size: float,
    get_color: ColorResolver,
    title: str = DEFAULT_SECTION_TITLES["awards"],
    line_height: Optional[float] = None,
    section_margin: Optional[float] = None,
) -> Optional[Container]:
    if not awards:
        return None

    line_height = line_height or config.get_number("lineHeight", DEFAULT_LINE_HEIGHT)
    list_style = field_style(config, "awards", "", FieldStyle(list_style="none")).list_style
    title_style = field_style(config, "awards", "title", FieldStyle(bold=True))
    awarder_style = field_style(config, "awards", "awarder")
    date_style = field_style(config, "awards", "date")

    entries = []
    for index, award in enumerate(awards):
        row = header_row(
            award.title,
            format_event_date(award.date),
            fonts,
            font_size,
            get_color,
            title_style=title_style,
            date_style=date_style,
            list_style=list_style,
            index=index,
        )
        entries.append(
            entry_block(
                [
                    row,
                    secondary_line(award.awarder, fonts, font_size, get_color, awarder_style, role="awarder"),
                    body_text(award.summary, fonts, font_size, line_height, role="entry-summary"),
                ],
                key=award.id,
                margin_bottom=6,
            )
        )

    return section_container("awards", title, entries, config, fonts, font_size, get_color, section_margin)
