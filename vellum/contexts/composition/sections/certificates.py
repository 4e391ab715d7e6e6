"""
Certificates section.
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
from vellum.contexts.content import CertificateEntry
from vellum.contexts.layout.config_resolver import EffectiveConfig
from vellum.contexts.layout.defaults import DEFAULT_SECTION_TITLES
from vellum.contexts.layout.field_styles import FieldStyle, field_style
from vellum.utils.dates import format_event_date


def render_certificates(
    certificates: Sequence[CertificateEntry],
    config: EffectiveConfig,
    fonts: FontConfig,
    font_size: float,
    get_color: ColorResolver,
    title: str = DEFAULT_SECTION_TITLES["certificates"],
    line_height: Optional[float] = None,
    section_margin: Optional[float] = None,
) -> Optional[Container]:
    """Render certificates: name, link and date, then issuer and summary."""
    if not certificates:
        return None

    line_height = line_height or config.get_number("lineHeight", DEFAULT_LINE_HEIGHT)
    list_style = field_style(config, "certificates", "", FieldStyle(list_style="none")).list_style
    name_style = field_style(config, "certificates", "name", FieldStyle(bold=True))
    issuer_style = field_style(config, "certificates", "issuer")
    date_style = field_style(config, "certificates", "date")
    url_style = field_style(config, "certificates", "url")
    link_mode = link_display_mode(config)

    entries = []
    for index, certificate in enumerate(certificates):
        row = header_row(
            certificate.name,
            format_event_date(certificate.date),
            fonts,
            font_size,
            get_color,
            title_style=name_style,
            date_style=date_style,
            list_style=list_style,
            index=index,
            url=certificate.url,
            url_style=url_style,
            link_mode=link_mode,
        )
        entries.append(
            entry_block(
                [
                    row,
                    secondary_line(certificate.issuer, fonts, font_size, get_color, issuer_style, role="issuer"),
                    body_text(certificate.summary, fonts, font_size, line_height, role="entry-summary"),
                ],
                key=certificate.id,
                margin_bottom=6,
            )
        )

    return section_container("certificates", title, entries, config, fonts, font_size, get_color, section_margin)
