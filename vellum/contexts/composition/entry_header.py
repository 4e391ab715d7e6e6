"""
Entry header layouts for work, education and project entries.

Layout styles:
    1  title, link and date on line 1; "subtitle | location" on line 2
    2  "title | subtitle | location" with the date on the right
    3  title on line 1; "subtitle | location" and the date on line 2
    4  stacked: title, subtitle, location, date on separate lines
    5  compact: "title - subtitle (location)" with the date on the right

Absent fields are omitted together with their separators.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from vellum.contexts.composition.colors import ColorResolver
from vellum.contexts.composition.lists import list_marker
from vellum.contexts.composition.media import url_affordance
from vellum.contexts.composition.render_tree import Container, TextRun
from vellum.contexts.composition.typography import FontConfig, text_style
from vellum.contexts.layout.field_styles import FieldStyle

ENTRY_LAYOUT_STYLES = (1, 2, 3, 4, 5)
FIELD_SEPARATOR = "|"
TITLE_SIZE_STEPS = {"S": 0, "M": 1, "L": 2}


@dataclass(frozen=True)
class EntryFields:
    """
    The header fields of one entry.

    Attributes:
        title: Primary label (company, institution, project name)
        subtitle: Secondary label (position, degree)
        location: Tertiary label
        date: Preformatted date or date range
        url: Link target
    """

    title: str
    subtitle: str = ""
    location: str = ""
    date: str = ""
    url: str = ""


@dataclass
class HeaderLine:
    """One line of an arranged header: left-aligned slots and right-aligned slots."""

    left: List[str] = field(default_factory=list)
    right: List[str] = field(default_factory=list)


def _joined(fields: EntryFields, names: List[str]) -> List[str]:
    """Field names interleaved with separators, skipping empty fields."""
    slots: List[str] = []
    for name in names:
        if not getattr(fields, name):
            continue
        if slots:
            slots.append("separator")
        slots.append(name)
    return slots


def arrange_entry_header(fields: EntryFields, style_id: int) -> List[HeaderLine]:
    """
    Arrange header slots into lines for a layout style.

    Slots name the field shown ("title", "subtitle", "location", "date",
    "url", "separator", or "compact" for style 5's combined text). Invalid
    style ids fall back to style 1.

    Example:
        >>> arrange_entry_header(EntryFields("Acme", date="2020"), 2)
        [HeaderLine(left=['title'], right=['date'])]
    """
    if isinstance(style_id, bool) or style_id not in ENTRY_LAYOUT_STYLES:
        style_id = 1

    title = ["title"] if fields.title else []
    link = ["url"] if fields.url else []
    date = ["date"] if fields.date else []
    details = _joined(fields, ["subtitle", "location"])

    if style_id == 1:
        lines = [HeaderLine(title + link, date)]
        if details:
            lines.append(HeaderLine(details))
        return lines

    if style_id == 2:
        return [HeaderLine(_joined(fields, ["title", "subtitle", "location"]) + link, date)]

    if style_id == 3:
        lines = [HeaderLine(title + link)]
        if details or date:
            lines.append(HeaderLine(details, date))
        return lines

    if style_id == 4:
        lines = [HeaderLine(title + link)]
        lines.extend(HeaderLine([name]) for name in ("subtitle", "location", "date") if getattr(fields, name))
        return lines

    return [HeaderLine(["compact"], date)]


def compact_header_text(fields: EntryFields) -> str:
    """
    Combined text of the compact layout.

    Example:
        >>> compact_header_text(EntryFields("Acme", "Engineer", "Berlin"))
        'Acme - Engineer (Berlin)'
    """
    text = fields.title
    if fields.subtitle:
        text += f" - {fields.subtitle}"
    if fields.location:
        text += f" ({fields.location})"
    return text


def entry_header(
    fields: EntryFields,
    style_id: int,
    fonts: FontConfig,
    font_size: float,
    get_color: ColorResolver,
    title_style: FieldStyle = FieldStyle(bold=True),
    subtitle_style: FieldStyle = FieldStyle(italic=True),
    date_style: FieldStyle = FieldStyle(),
    url_style: FieldStyle = FieldStyle(),
    list_style: str = "none",
    index: int = 0,
    link_mode: str = "icon",
    title_size: str = "M",
) -> Container:
    """
    Render an entry header.

    Args:
        fields: Header fields
        style_id: Layout style 1-5
        fonts: Font configuration
        font_size: Base font size
        get_color: Colour resolver ("title", "subtext", "meta", "links" targets)
        title_style: Bold/italic of the title
        subtitle_style: Bold/italic of the subtitle
        date_style: Bold/italic of the date
        url_style: Bold/italic of the link
        list_style: Marker placed before the title ("none" for no marker)
        index: Entry index, used by numbered markers
        link_mode: icon | full | hidden
        title_size: S | M | L (points added to the title size)

    Returns:
        Header container with one row per line
    """
    title_color = get_color("title", "#1a1a1a")
    subtitle_color = get_color("subtext", "#444444")
    date_color = get_color("meta", "#666666")
    link_color = get_color("links", "#1a1a1a")
    title_font_size = font_size + TITLE_SIZE_STEPS.get(title_size, 1)
    stacked = isinstance(style_id, int) and style_id == 4

    def slot_node(name: str) -> Optional[object]:
        if name == "title":
            return TextRun(
                fields.title,
                text_style(fonts, title_font_size, title_color, title_style.bold, title_style.italic),
                role="title",
            )
        if name == "compact":
            return TextRun(
                compact_header_text(fields),
                text_style(fonts, font_size, title_color, title_style.bold, title_style.italic),
                role="title",
            )
        if name == "subtitle":
            return TextRun(
                fields.subtitle,
                text_style(fonts, font_size, subtitle_color, subtitle_style.bold, subtitle_style.italic),
                role="subtitle",
            )
        if name == "location":
            return TextRun(
                fields.location, text_style(fonts, font_size - 1, get_color("subtext", "#666666")), role="location"
            )
        if name == "date":
            return TextRun(
                fields.date,
                text_style(
                    fonts,
                    font_size,
                    date_color,
                    date_style.bold,
                    date_style.italic,
                    textAlign="left" if stacked else "right",
                ),
                role="date",
            )
        if name == "url":
            return url_affordance(
                fields.url, link_mode, fonts, font_size, link_color, url_style.bold, url_style.italic
            )
        return TextRun(
            FIELD_SEPARATOR,
            text_style(fonts, font_size, get_color("text", "#666666"), marginHorizontal=4),
            role="separator",
        )

    marker = list_marker(list_style, index)
    rows = []
    for line_number, line in enumerate(arrange_entry_header(fields, style_id)):
        left = [node for node in (slot_node(name) for name in line.left) if node is not None]
        if line_number == 0 and marker:
            left.insert(0, TextRun(marker, text_style(fonts, font_size, marginRight=4), role="marker"))
        right = [node for node in (slot_node(name) for name in line.right) if node is not None]

        children = [Container(left, {"flexDirection": "row", "flexWrap": "wrap", "flex": 1}, role="header-left")]
        if right:
            children.append(Container(right, {"flexDirection": "row"}, role="header-right"))
        rows.append(
            Container(
                children,
                {
                    "flexDirection": "row",
                    "justifyContent": "space-between",
                    "alignItems": "baseline",
                    "marginTop": 1 if line_number else 0,
                },
                role="header-line",
            )
        )

    return Container(rows, {"marginBottom": 2}, role="entry-header")
