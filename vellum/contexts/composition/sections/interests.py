"""
Interests section.

Display styles (interestsDisplayStyle):
    list     one interest per line, "Name: keyword, keyword"
    compact  every interest on one line separated by " • "
    bubble   one tag per interest
"""

from typing import List, Optional, Sequence

from vellum.contexts.composition.colors import ColorResolver
from vellum.contexts.composition.lists import list_marker
from vellum.contexts.composition.render_tree import Container, Node, TextRun
from vellum.contexts.composition.sections.common import DEFAULT_LINE_HEIGHT, section_container, tag
from vellum.contexts.composition.typography import FontConfig, text_style
from vellum.contexts.content import InterestEntry
from vellum.contexts.layout.config_resolver import EffectiveConfig
from vellum.contexts.layout.defaults import DEFAULT_SECTION_TITLES
from vellum.contexts.layout.field_styles import FieldStyle, field_style
from vellum.utils.text_processing import present_items

INTERESTS_DISPLAY_STYLES = ("list", "compact", "bubble")
COMPACT_SEPARATOR = " • "


def interest_text(interest: InterestEntry) -> str:
    """
    One interest as a single phrase.

    Example:
        >>> interest_text(InterestEntry(name="Music", keywords=["Jazz", "Piano"]))
        'Music (Jazz, Piano)'
    """
    keywords = ", ".join(present_items(interest.keywords))
    if interest.name and keywords:
        return f"{interest.name} ({keywords})"
    return interest.name or keywords


def render_interests(
    interests: Sequence[InterestEntry],
    config: EffectiveConfig,
    fonts: FontConfig,
    font_size: float,
    get_color: ColorResolver,
    title: str = DEFAULT_SECTION_TITLES["interests"],
    line_height: Optional[float] = None,
    section_margin: Optional[float] = None,
    display_style: Optional[str] = None,
) -> Optional[Container]:
    """Render interests in the configured display style, or None without interests."""
    if not interests:
        return None

    line_height = line_height or config.get_number("lineHeight", DEFAULT_LINE_HEIGHT)
    style = display_style if display_style in INTERESTS_DISPLAY_STYLES else None
    style = style or config.get_choice("interestsDisplayStyle", INTERESTS_DISPLAY_STYLES, "list")
    list_style = field_style(config, "interests", "", FieldStyle(list_style="none")).list_style
    name_style = field_style(config, "interests", "name", FieldStyle(bold=True))
    keywords_style = field_style(config, "interests", "keywords")
    text_color = get_color("text", "#444444")

    body: List[Node] = []

    if style == "compact":
        text = COMPACT_SEPARATOR.join(filter(None, (interest_text(interest) for interest in interests)))
        compact_style = text_style(fonts, font_size, text_color, lineHeight=line_height)
        body.append(TextRun(text, compact_style, role="interests-compact"))

    elif style == "bubble":
        tags = [tag(text, fonts, font_size, get_color) for text in map(interest_text, interests) if text]
        body.append(Container(tags, {"flexDirection": "row", "flexWrap": "wrap", "gap": 6}, role="tags"))

    else:
        for index, interest in enumerate(interests):
            parts: List[Node] = []
            marker = list_marker(list_style, index)
            if marker:
                marker_style = text_style(fonts, font_size, get_color("subtext", "#666666"), marginRight=6)
                parts.append(TextRun(marker, marker_style, role="marker"))
            if interest.name:
                parts.append(
                    TextRun(
                        interest.name,
                        text_style(fonts, font_size, get_color("title", "#1a1a1a"), name_style.bold, name_style.italic),
                        role="interest",
                    )
                )
            keywords = present_items(interest.keywords)
            if keywords:
                text = ", ".join(keywords)
                parts.append(
                    TextRun(
                        f": {text}" if interest.name else text,
                        text_style(fonts, font_size, text_color, keywords_style.bold, keywords_style.italic),
                        role="keywords",
                    )
                )
            row_style = {"flexDirection": "row", "flexWrap": "wrap", "marginBottom": 3}
            body.append(Container(parts, row_style, role="interest-item", key=interest.id))

    return section_container("interests", title, body, config, fonts, font_size, get_color, section_margin)
