"""
Work experience section.

Field style keys use the `experience` prefix (experienceCompanyBold,
experienceAchievementsListStyle, ...).
"""

from typing import Optional, Sequence

from vellum.contexts.composition.colors import ColorResolver
from vellum.contexts.composition.entry_header import ENTRY_LAYOUT_STYLES, TITLE_SIZE_STEPS, EntryFields, entry_header
from vellum.contexts.composition.media import link_display_mode
from vellum.contexts.composition.render_tree import Container
from vellum.contexts.composition.sections.common import (
    DEFAULT_LINE_HEIGHT,
    body_text,
    entry_block,
    highlights_list,
    section_container,
)
from vellum.contexts.composition.typography import FontConfig
from vellum.contexts.content import WorkEntry
from vellum.contexts.layout.config_resolver import EffectiveConfig
from vellum.contexts.layout.defaults import DEFAULT_SECTION_TITLES
from vellum.contexts.layout.field_styles import FieldStyle, field_style
from vellum.utils.dates import format_date_range


def render_work(
    work: Sequence[WorkEntry],
    config: EffectiveConfig,
    fonts: FontConfig,
    font_size: float,
    get_color: ColorResolver,
    title: str = DEFAULT_SECTION_TITLES["work"],
    line_height: Optional[float] = None,
    section_margin: Optional[float] = None,
) -> Optional[Container]:
    """
    Render work entries.

    Each entry gets a header (company, position, dates, website) laid out by
    entryLayoutStyle, then its summary and achievements list.

    Args:
        work: Work entries
        config: Effective configuration
        fonts: Font configuration
        font_size: Base font size
        get_color: Colour resolver
        title: Section heading text
        line_height: Body line height (defaults to the lineHeight setting)
        section_margin: Bottom margin (defaults to the sectionMargin setting)

    Returns:
        Section container, or None without entries
    """
    if not work:
        return None

    line_height = line_height or config.get_number("lineHeight", DEFAULT_LINE_HEIGHT)
    company_style = field_style(config, "work", "company", FieldStyle(bold=True, list_style="none"))
    position_style = field_style(config, "work", "position", FieldStyle(bold=True))
    website_style = field_style(config, "work", "website")
    date_style = field_style(config, "work", "date")
    achievements_style = field_style(config, "work", "achievements")

    layout_style = config.get_choice("entryLayoutStyle", ENTRY_LAYOUT_STYLES, 1)
    title_size = config.get_choice("entryTitleSize", tuple(TITLE_SIZE_STEPS), "M")
    link_mode = link_display_mode(config)

    entries = []
    for index, job in enumerate(work):
        fields = EntryFields(
            title=job.company,
            subtitle=job.position,
            date=format_date_range(job.start_date, job.end_date),
            url=job.url,
        )
        header = entry_header(
            fields,
            layout_style,
            fonts,
            font_size,
            get_color,
            title_style=company_style,
            subtitle_style=position_style,
            date_style=date_style,
            url_style=website_style,
            list_style=company_style.list_style,
            index=index,
            link_mode=link_mode,
            title_size=title_size,
        )
        entries.append(
            entry_block(
                [
                    header,
                    body_text(job.summary, fonts, font_size, line_height, role="entry-summary"),
                    highlights_list(
                        job.highlights,
                        achievements_style.list_style,
                        config,
                        fonts,
                        font_size,
                        get_color,
                        achievements_style,
                        line_height,
                    ),
                ],
                key=job.id,
            )
        )

    return section_container("work", title, entries, config, fonts, font_size, get_color, section_margin)
