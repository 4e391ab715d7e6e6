"""
Languages section.

Display styles (languagesDisplayStyle):
    list    one language per line with an optional marker, "Language - Fluency"
    inline  all languages on one wrapping row
    level   language name with a five-dot fluency indicator
"""

from typing import List, Optional, Sequence

from vellum.contexts.composition.colors import ColorResolver
from vellum.contexts.composition.levels import level_indicator
from vellum.contexts.composition.lists import list_marker
from vellum.contexts.composition.render_tree import Container, Node, TextRun
from vellum.contexts.composition.sections.common import section_container
from vellum.contexts.composition.typography import FontConfig, text_style
from vellum.contexts.content import LanguageEntry
from vellum.contexts.layout.config_resolver import EffectiveConfig
from vellum.contexts.layout.defaults import DEFAULT_SECTION_TITLES
from vellum.contexts.layout.field_styles import FieldStyle, field_style

LANGUAGES_DISPLAY_STYLES = ("list", "inline", "level")
FLUENCY_SEPARATOR = "-"

# Dots, as the fluency indicator of the level style
FLUENCY_LEVEL_STYLE = 1


def render_languages(
    languages: Sequence[LanguageEntry],
    config: EffectiveConfig,
    fonts: FontConfig,
    font_size: float,
    get_color: ColorResolver,
    title: str = DEFAULT_SECTION_TITLES["languages"],
    line_height: Optional[float] = None,
    section_margin: Optional[float] = None,
    display_style: Optional[str] = None,
) -> Optional[Container]:
    """
    Render languages in the configured display style.

    Args:
        languages: Language entries
        config: Effective configuration
        fonts: Font configuration
        font_size: Base font size
        get_color: Colour resolver
        title: Section heading text
        line_height: Unused; accepted for a uniform renderer signature
        section_margin: Bottom margin
        display_style: Override of the languagesDisplayStyle setting

    Returns:
        Section container, or None without languages
    """
    if not languages:
        return None

    style = display_style if display_style in LANGUAGES_DISPLAY_STYLES else None
    style = style or config.get_choice("languagesDisplayStyle", LANGUAGES_DISPLAY_STYLES, "list")
    list_style = field_style(config, "languages", "", FieldStyle(list_style="none")).list_style
    name_style = field_style(config, "languages", "name", FieldStyle(bold=True))
    fluency_style = field_style(config, "languages", "fluency")

    name_color = get_color("title", "#1a1a1a")
    fluency_color = get_color("subtext", "#666666")

    def name_and_fluency(language: LanguageEntry) -> List[Node]:
        parts: List[Node] = [
            TextRun(
                language.language,
                text_style(fonts, font_size, name_color, name_style.bold, name_style.italic),
                role="language",
            )
        ]
        if language.fluency:
            parts.append(
                TextRun(FLUENCY_SEPARATOR, text_style(fonts, font_size, "#999999", marginHorizontal=4), role="separator")
            )
            parts.append(
                TextRun(
                    language.fluency,
                    text_style(fonts, font_size, fluency_color, fluency_style.bold, fluency_style.italic),
                    role="fluency",
                )
            )
        return parts

    body: List[Node] = []

    if style == "inline":
        items = [
            Container(
                name_and_fluency(language),
                {"flexDirection": "row", "marginRight": 12},
                role="language-item",
                key=language.id,
            )
            for language in languages
        ]
        body.append(Container(items, {"flexDirection": "row", "flexWrap": "wrap"}, role="languages-inline"))

    elif style == "level":
        accent = get_color("decorations", "#666666")
        for language in languages:
            parts: List[Node] = [
                TextRun(
                    language.language,
                    text_style(fonts, font_size, name_color, name_style.bold, name_style.italic),
                    role="language",
                )
            ]
            indicator = level_indicator(language.fluency, FLUENCY_LEVEL_STYLE, fonts, font_size, accent, fluency_color)
            if indicator is not None:
                parts.append(indicator)
            row_style = {"flexDirection": "row", "justifyContent": "space-between", "alignItems": "center", "marginBottom": 4}
            body.append(Container(parts, row_style, role="language-item", key=language.id))

    else:
        for index, language in enumerate(languages):
            parts = name_and_fluency(language)
            marker = list_marker(list_style, index)
            if marker:
                parts.insert(0, TextRun(marker, text_style(fonts, font_size, fluency_color, marginRight=6), role="marker"))
            body.append(Container(parts, {"flexDirection": "row", "marginBottom": 3}, role="language-item", key=language.id))

    return section_container("languages", title, body, config, fonts, font_size, get_color, section_margin)
