"""
List markers and list rendering.

List styles:
    bullet  -> "•"
    number  -> "1.", "2.", ...
    dash    -> "-" (alias: hyphen)
    none    -> no marker (alias: blank)
    inline  -> items joined on one line with ", "
"""

from typing import Any, Dict, List, Optional, Sequence

from vellum.contexts.composition.render_tree import Container, TextRun
from vellum.contexts.composition.typography import FontConfig, text_style

INLINE_SEPARATOR = ", "

_MARKERS = {
    "bullet": "•",
    "dash": "-",
    "hyphen": "-",
    "none": "",
    "blank": "",
    "inline": "",
}


def list_marker(list_style: str, index: int) -> str:
    """
    Marker text for the item at a zero-based index.

    Unknown styles fall back to a bullet.

    Example:
        >>> [list_marker("number", i) for i in range(3)]
        ['1.', '2.', '3.']
    """
    if list_style == "number":
        return f"{index + 1}."
    return _MARKERS.get(list_style, _MARKERS["bullet"])


def render_inline_list(
    items: Sequence[str],
    fonts: FontConfig,
    font_size: float,
    color: str,
    bold: bool = False,
    italic: bool = False,
    separator: str = INLINE_SEPARATOR,
    label: Optional[str] = None,
) -> Optional[Container]:
    """
    Render items joined on a single line, optionally preceded by a bold label.

    Example:
        "Relevant Coursework: Algorithms, Databases"
    """
    present = [item for item in items if item]
    if not present:
        return None

    children = []
    if label:
        children.append(
            TextRun(f"{label} ", text_style(fonts, font_size, color, bold=True), role="label")
        )
    children.append(
        TextRun(separator.join(present), text_style(fonts, font_size, color, bold, italic), role="item")
    )
    return Container(children, {"flexDirection": "row", "flexWrap": "wrap"}, role="inline-list")


def render_list(
    items: Sequence[str],
    list_style: str,
    fonts: FontConfig,
    font_size: float,
    text_color: str = "#444444",
    marker_color: str = "#333333",
    bold: bool = False,
    italic: bool = False,
    bullet_margin: float = 1,
    line_height: float = 1.2,
) -> Optional[Container]:
    """
    Render a list of strings with markers, one row per item.

    Args:
        items: Item texts (blank items are skipped)
        list_style: bullet | number | dash | none | inline
        fonts: Font configuration
        font_size: Item font size
        text_color: Item colour
        marker_color: Marker colour (typically the "decorations" target)
        bold: Bold item text
        italic: Italic item text
        bullet_margin: Vertical gap between items
        line_height: Item line height

    Returns:
        Container of item rows, or None if there is nothing to render
    """
    present = [item for item in items if item]
    if not present:
        return None

    if list_style == "inline":
        return render_inline_list(present, fonts, font_size, text_color, bold, italic)

    rows: List[Container] = []
    for index, item in enumerate(present):
        children = []
        marker = list_marker(list_style, index)
        if marker:
            marker_style: Dict[str, Any] = text_style(
                fonts, font_size, marker_color, minWidth=14 if list_style == "number" else 10
            )
            children.append(TextRun(marker, marker_style, role="marker"))
        children.append(
            TextRun(
                item,
                text_style(fonts, font_size, text_color, bold, italic, lineHeight=line_height),
                role="item",
            )
        )
        rows.append(
            Container(children, {"flexDirection": "row", "marginBottom": bullet_margin}, role="list-item")
        )

    return Container(rows, {"marginTop": 2}, role="list")
