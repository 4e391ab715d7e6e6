"""
Building blocks shared by the section renderers.
"""

from typing import List, Optional, Sequence

from vellum.contexts.composition.colors import ColorResolver
from vellum.contexts.composition.headings import section_heading
from vellum.contexts.composition.lists import list_marker, render_list
from vellum.contexts.composition.media import url_affordance
from vellum.contexts.composition.render_tree import Container, Node, TextRun
from vellum.contexts.composition.typography import FontConfig, text_style
from vellum.contexts.layout.config_resolver import EffectiveConfig
from vellum.contexts.layout.field_styles import FieldStyle

DEFAULT_LINE_HEIGHT = 1.2
DEFAULT_SECTION_MARGIN = 12
BODY_TEXT_COLOR = "#444444"


def heading_visible(config: EffectiveConfig, section_id: str) -> bool:
    """Whether the heading of a section is shown (visible unless set to False)."""
    return config.get_bool(f"{section_id}HeadingVisible", True)


def section_container(
    section_id: str,
    title: str,
    body: Sequence[Node],
    config: EffectiveConfig,
    fonts: FontConfig,
    font_size: float,
    get_color: ColorResolver,
    section_margin: Optional[float] = None,
    show_heading: Optional[bool] = None,
    key: Optional[str] = None,
) -> Container:
    """
    Wrap rendered entries in a section container with an optional heading.

    Args:
        section_id: Section id (selects the HeadingVisible setting)
        title: Heading text
        body: Rendered entries
        config: Effective configuration
        fonts: Font configuration
        font_size: Base font size
        get_color: Colour resolver
        section_margin: Bottom margin (defaults to the sectionMargin setting)
        show_heading: Force heading visibility (defaults to the section's HeadingVisible setting)
        key: Container key (defaults to the section id)

    Returns:
        Section container
    """
    if section_margin is None:
        section_margin = config.get_number("sectionMargin", DEFAULT_SECTION_MARGIN)
    if show_heading is None:
        show_heading = heading_visible(config, section_id)

    children: List[Node] = []
    if show_heading:
        children.append(section_heading(title, config, fonts, font_size, get_color))
    children.extend(body)
    return Container(children, {"marginBottom": section_margin}, role="section", key=key or section_id)


def body_text(
    text: str,
    fonts: FontConfig,
    font_size: float,
    line_height: float = DEFAULT_LINE_HEIGHT,
    color: str = BODY_TEXT_COLOR,
    style: FieldStyle = FieldStyle(),
    role: str = "summary",
) -> Optional[TextRun]:
    """Render a paragraph of body text, or None when the text is empty."""
    if not text:
        return None
    return TextRun(
        text,
        text_style(fonts, font_size, color, style.bold, style.italic, lineHeight=line_height, marginTop=2),
        role=role,
    )


def highlights_list(
    items: Sequence[str],
    list_style: str,
    config: EffectiveConfig,
    fonts: FontConfig,
    font_size: float,
    get_color: ColorResolver,
    style: FieldStyle = FieldStyle(),
    line_height: float = DEFAULT_LINE_HEIGHT,
) -> Optional[Container]:
    """
    Render an entry's highlights.

    With useBullets off the items are still listed, without markers.
    """
    if not config.get_bool("useBullets", True):
        list_style = "none"
    return render_list(
        items,
        list_style,
        fonts,
        font_size,
        text_color=BODY_TEXT_COLOR,
        marker_color=get_color("decorations", "#333333"),
        bold=style.bold,
        italic=style.italic,
        bullet_margin=config.get_number("bulletMargin", 1),
        line_height=line_height,
    )


def header_row(
    title: str,
    date: str,
    fonts: FontConfig,
    font_size: float,
    get_color: ColorResolver,
    title_style: FieldStyle = FieldStyle(bold=True),
    date_style: FieldStyle = FieldStyle(),
    list_style: str = "none",
    index: int = 0,
    url: str = "",
    url_style: FieldStyle = FieldStyle(),
    link_mode: str = "hidden",
) -> Container:
    """
    Two-column row: marker, label and link on the left, date right-aligned.
    """
    left: List[Node] = []
    marker = list_marker(list_style, index)
    if marker:
        left.append(TextRun(marker, text_style(fonts, font_size, marginRight=4), role="marker"))
    if title:
        left.append(
            TextRun(
                title,
                text_style(fonts, font_size + 1, get_color("title", "#1a1a1a"), title_style.bold, title_style.italic),
                role="title",
            )
        )
    link = url_affordance(
        url, link_mode, fonts, font_size, get_color("links", "#1a1a1a"), url_style.bold, url_style.italic
    )
    if link is not None:
        left.append(link)

    children: List[Node] = [
        Container(left, {"flexDirection": "row", "alignItems": "center", "flex": 1}, role="header-left")
    ]
    if date:
        children.append(
            TextRun(
                date,
                text_style(
                    fonts, font_size, get_color("meta", "#666666"), date_style.bold, date_style.italic, textAlign="right"
                ),
                role="date",
            )
        )
    return Container(
        children,
        {"flexDirection": "row", "justifyContent": "space-between", "alignItems": "baseline", "marginBottom": 2},
        role="header-row",
    )


def secondary_line(
    text: str,
    fonts: FontConfig,
    font_size: float,
    get_color: ColorResolver,
    style: FieldStyle = FieldStyle(),
    role: str = "subtitle",
) -> Optional[TextRun]:
    """Render a secondary label line (issuer, publisher, awarder, position)."""
    if not text:
        return None
    return TextRun(
        text,
        text_style(fonts, font_size, get_color("subtext", BODY_TEXT_COLOR), style.bold, style.italic),
        role=role,
    )


def entry_block(children: Sequence[Optional[Node]], key: str, margin_bottom: float = 8) -> Container:
    """Group an entry's rendered parts, dropping absent ones."""
    return Container(
        [child for child in children if child is not None],
        {"marginBottom": margin_bottom},
        role="entry",
        key=key,
    )


def tag(text: str, fonts: FontConfig, font_size: float, get_color: ColorResolver) -> Container:
    """A rounded, tinted bubble around a short text."""
    tint = get_color("decorations", "#666666") + "15"
    return Container(
        [TextRun(text, text_style(fonts, font_size - 1, get_color("text", "#374151")), role="tag-text")],
        {"backgroundColor": tint, "paddingHorizontal": 8, "paddingVertical": 3, "borderRadius": 12},
        role="tag",
    )
