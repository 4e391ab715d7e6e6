"""
Professional summary section.
"""

from typing import Optional

from vellum.contexts.composition.colors import ColorResolver
from vellum.contexts.composition.render_tree import Container
from vellum.contexts.composition.sections.common import DEFAULT_LINE_HEIGHT, body_text, section_container
from vellum.contexts.composition.typography import FontConfig
from vellum.contexts.layout.config_resolver import EffectiveConfig
from vellum.contexts.layout.defaults import DEFAULT_SECTION_TITLES


def render_summary(
    summary: str,
    config: EffectiveConfig,
    fonts: FontConfig,
    font_size: float,
    get_color: ColorResolver,
    title: str = DEFAULT_SECTION_TITLES["summary"],
    line_height: Optional[float] = None,
    section_margin: Optional[float] = None,
) -> Optional[Container]:
    """Render the summary paragraph, or None when it is blank."""
    if not summary or not summary.strip():
        return None

    line_height = line_height or config.get_number("lineHeight", DEFAULT_LINE_HEIGHT)
    paragraph = body_text(summary.strip(), fonts, font_size, line_height, color=get_color("text", "#333333"))
    return section_container("summary", title, [paragraph], config, fonts, font_size, get_color, section_margin)
