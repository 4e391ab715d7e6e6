"""
References section.
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
from vellum.contexts.content import ReferenceEntry
from vellum.contexts.layout.config_resolver import EffectiveConfig
from vellum.contexts.layout.defaults import DEFAULT_SECTION_TITLES
from vellum.contexts.layout.field_styles import FieldStyle, field_style


def quoted(text: str) -> str:
    """Wrap reference text in double quotes; blank text stays blank."""
    return f'"{text}"' if text else ""


def render_references(
    references: Sequence[ReferenceEntry],
    config: EffectiveConfig,
    fonts: FontConfig,
    font_size: float,
    get_color: ColorResolver,
    title: str = DEFAULT_SECTION_TITLES["references"],
    line_height: Optional[float] = None,
    section_margin: Optional[float] = None,
) -> Optional[Container]:
    """Render references: name and position, then the quoted reference in italics."""
    if not references:
        return None

    line_height = line_height or config.get_number("lineHeight", DEFAULT_LINE_HEIGHT)
    list_style = field_style(config, "references", "", FieldStyle(list_style="none")).list_style
    name_style = field_style(config, "references", "name", FieldStyle(bold=True))
    position_style = field_style(config, "references", "position")

    entries = []
    for index, reference in enumerate(references):
        row = header_row(
            reference.name,
            "",
            fonts,
            font_size,
            get_color,
            title_style=name_style,
            list_style=list_style,
            index=index,
        )
        entries.append(
            entry_block(
                [
                    row,
                    secondary_line(reference.position, fonts, font_size, get_color, position_style, role="position"),
                    body_text(
                        quoted(reference.reference),
                        fonts,
                        font_size,
                        line_height,
                        color=get_color("text", "#555555"),
                        style=FieldStyle(italic=True),
                        role="reference",
                    ),
                ],
                key=reference.id,
            )
        )

    return section_container("references", title, entries, config, fonts, font_size, get_color, section_margin)
