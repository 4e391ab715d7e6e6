"""Unit tests for the style primitives: lists, headings, entry headers, links and levels."""

import pytest

from vellum.contexts.composition.entry_header import (
    EntryFields,
    HeaderLine,
    arrange_entry_header,
    compact_header_text,
    entry_header,
)
from vellum.contexts.composition.headings import (
    format_heading_text,
    heading_decoration,
    section_heading,
)
from vellum.contexts.composition.levels import level_indicator, score_of
from vellum.contexts.composition.lists import list_marker, render_inline_list, render_list
from vellum.contexts.composition.media import (
    ContactItem,
    contact_info,
    link_display_mode,
    profile_image,
    url_affordance,
    url_affordance_text,
)
from vellum.contexts.composition.render_tree import collect_text, find_by_role
from vellum.contexts.composition.typography import text_style

ACCENT = "#ff0000"


# ============================================================================
# Lists
# ============================================================================


@pytest.mark.unit
def test_number_markers():
    """Test numbered markers count from one."""
    assert [list_marker("number", index) for index in range(3)] == ["1.", "2.", "3."]


@pytest.mark.unit
@pytest.mark.parametrize(
    "style,marker",
    [("bullet", "•"), ("dash", "-"), ("hyphen", "-"), ("none", ""), ("blank", ""), ("stars", "•")],
)
def test_list_markers(style, marker):
    """Test each list style's marker, unknown styles using a bullet."""
    assert list_marker(style, 0) == marker


@pytest.mark.unit
def test_render_list_skips_blank_items(fonts):
    """Test blank items produce no rows."""
    node = render_list(["One", "", "Two"], "number", fonts, 9)

    assert [run.text for run in find_by_role(node, "marker")] == ["1.", "2."]
    assert [run.text for run in find_by_role(node, "item")] == ["One", "Two"]


@pytest.mark.unit
def test_render_list_none_style_has_no_markers(fonts):
    """Test the none style renders items only."""
    node = render_list(["One"], "none", fonts, 9)
    assert find_by_role(node, "marker") == []


@pytest.mark.unit
def test_render_list_empty(fonts):
    """Test nothing is rendered for an empty list."""
    assert render_list([], "bullet", fonts, 9) is None
    assert render_list(["", ""], "bullet", fonts, 9) is None


@pytest.mark.unit
def test_inline_list(fonts):
    """Test inline lists join items on one line after a label."""
    node = render_list(["A", "B"], "inline", fonts, 9)
    assert node.role == "inline-list"
    assert collect_text(node) == "A, B"

    labelled = render_inline_list(["Algorithms"], fonts, 9, "#000000", label="Relevant Coursework:")
    assert collect_text(labelled, "") == "Relevant Coursework: Algorithms"


# ============================================================================
# Headings
# ============================================================================


@pytest.mark.unit
def test_heading_decorations():
    """Test decoration geometry of each heading style."""
    assert heading_decoration(1).border_position == "bottom"
    assert heading_decoration(2).border_position is None
    assert heading_decoration(3).border_width == 2
    assert heading_decoration(4).background_tint
    assert heading_decoration(5).border_position == "left"
    assert heading_decoration(6).border_position == "top-bottom"
    assert heading_decoration(7).border_style == "dashed"
    assert heading_decoration(8).border_style == "dotted"


@pytest.mark.unit
@pytest.mark.parametrize("style_id", [0, 9, "1", True, None])
def test_invalid_heading_style_uses_underline(style_id):
    """Test invalid heading styles fall back to style 1."""
    assert heading_decoration(style_id) == heading_decoration(1)


@pytest.mark.unit
def test_heading_style_colors():
    """Test decorations take the given colour."""
    style = heading_decoration(6).to_style("#ff0000")
    assert style["borderTopColor"] == style["borderBottomColor"] == "#ff0000"
    assert heading_decoration(4).to_style("#ff0000")["backgroundColor"] == "#ff000020"


@pytest.mark.unit
@pytest.mark.parametrize(
    "capitalization,expected",
    [
        ("uppercase", "WORK HISTORY"),
        ("lowercase", "work history"),
        ("capitalize", "Work History"),
        ("none", "work HISTORY"),
    ],
)
def test_heading_capitalization(capitalization, expected):
    """Test heading text capitalization modes."""
    assert format_heading_text("work HISTORY", capitalization) == expected


@pytest.mark.unit
def test_section_heading(make_config, fonts, get_color):
    """Test the heading run uses the headings colour and configured size."""
    config = make_config(sectionHeadingStyle=5, sectionHeadingSize="L", sectionHeadingAlign="center")
    node = section_heading("Skills", config, fonts, 9, get_color)
    run = node.children[0]

    assert run.text == "SKILLS"
    assert run.style["color"] == ACCENT
    assert run.style["fontSize"] == 11
    assert node.style["borderLeftColor"] == ACCENT
    assert node.style["justifyContent"] == "center"


# ============================================================================
# Entry Headers
# ============================================================================


@pytest.mark.unit
def test_arrange_style_1():
    """Test title and date share line one; details go on line two."""
    fields = EntryFields("Acme", "Engineer", "Berlin", "2020", "https://acme.io")
    assert arrange_entry_header(fields, 1) == [
        HeaderLine(["title", "url"], ["date"]),
        HeaderLine(["subtitle", "separator", "location"]),
    ]


@pytest.mark.unit
def test_arrange_style_2():
    """Test everything joins on one line with the date right."""
    fields = EntryFields("Acme", "Engineer", "Berlin", "2020")
    assert arrange_entry_header(fields, 2) == [
        HeaderLine(["title", "separator", "subtitle", "separator", "location"], ["date"])
    ]


@pytest.mark.unit
def test_arrange_style_3_and_4():
    """Test the split and stacked arrangements."""
    fields = EntryFields("Acme", "Engineer", date="2020")

    assert arrange_entry_header(fields, 3) == [
        HeaderLine(["title"]),
        HeaderLine(["subtitle"], ["date"]),
    ]
    assert arrange_entry_header(fields, 4) == [
        HeaderLine(["title"]),
        HeaderLine(["subtitle"]),
        HeaderLine(["date"]),
    ]


@pytest.mark.unit
def test_absent_fields_drop_their_separators():
    """Test missing subtitle and location leave no dangling separator."""
    fields = EntryFields("Acme", location="Berlin")
    lines = arrange_entry_header(fields, 2)

    assert lines == [HeaderLine(["title", "separator", "location"], [])]
    assert arrange_entry_header(EntryFields("Acme"), 1) == [HeaderLine(["title"], [])]


@pytest.mark.unit
@pytest.mark.parametrize("style_id", [0, 6, True, "2"])
def test_invalid_entry_layout_uses_style_1(style_id):
    """Test invalid layout ids fall back to style 1."""
    fields = EntryFields("Acme", "Engineer")
    assert arrange_entry_header(fields, style_id) == arrange_entry_header(fields, 1)


@pytest.mark.unit
def test_compact_header_text():
    """Test the compact layout text."""
    assert compact_header_text(EntryFields("Acme", "Engineer", "Berlin")) == "Acme - Engineer (Berlin)"
    assert compact_header_text(EntryFields("Acme", location="Berlin")) == "Acme (Berlin)"
    assert arrange_entry_header(EntryFields("Acme", date="2020"), 5) == [HeaderLine(["compact"], ["date"])]


@pytest.mark.unit
def test_entry_header_render(fonts, get_color):
    """Test rendered headers carry markers, links and dates."""
    fields = EntryFields("Acme", "Engineer", date="2020 – Present", url="https://acme.io")
    node = entry_header(fields, 1, fonts, 9, get_color, list_style="number", index=1, link_mode="full")

    assert [run.text for run in find_by_role(node, "marker")] == ["2."]
    assert find_by_role(node, "url")[0].text == "acme.io"
    assert find_by_role(node, "date")[0].style["textAlign"] == "right"
    assert len(find_by_role(node, "header-line")) == 2


# ============================================================================
# Links, Contact and Profile Image
# ============================================================================


@pytest.mark.unit
def test_link_display_mode(make_config):
    """Test the full URL setting wins over the icon setting."""
    assert link_display_mode(make_config()) == "icon"
    assert link_display_mode(make_config(linkShowFullUrl=True)) == "full"
    assert link_display_mode(make_config(linkShowIcon=False)) == "hidden"


@pytest.mark.unit
def test_url_affordance_text():
    """Test each display mode's text."""
    assert url_affordance_text("https://example.com/", "full") == "example.com"
    assert url_affordance_text("https://example.com/", "icon") == "🔗"
    assert url_affordance_text("https://example.com/", "hidden") is None
    assert url_affordance_text("", "full") is None


@pytest.mark.unit
def test_url_affordance_link(fonts):
    """Test the link keeps the full target."""
    link = url_affordance("https://example.com/", "full", fonts, 9, "#0000ff")
    assert link.href == "https://example.com/"
    assert link.style["color"] == "#0000ff"


@pytest.mark.unit
def test_contact_separators_only_between_items(fonts, get_color):
    """Test n items get n-1 separators."""
    items = [
        ContactItem("email", "a@b.c", "mailto:a@b.c"),
        ContactItem("phone", "555"),
        ContactItem("location", "Berlin"),
    ]
    node = contact_info(items, "bar", fonts, 9, get_color)
    roles = [child.role for child in node.children]

    assert roles == ["contact-item", "separator", "contact-item", "separator", "contact-item"]
    assert {run.text for run in find_by_role(node, "separator")} == {"|"}


@pytest.mark.unit
def test_contact_icon_style(fonts, get_color):
    """Test the icon style uses the contactSeparator glyph and icon colour."""
    items = [ContactItem("email", "a@b.c", "mailto:a@b.c"), ContactItem("phone", "555")]
    node = contact_info(items, "icon", fonts, 9, get_color, separator="dash")

    assert [run.text for run in find_by_role(node, "separator")] == ["-"]
    assert find_by_role(node, "icon")[0].style["color"] == ACCENT


@pytest.mark.unit
def test_contact_stacked_and_empty(fonts, get_color):
    """Test stacked contacts have no separators and no items render nothing."""
    node = contact_info([ContactItem("phone", "555"), ContactItem("location", "Berlin")], "stacked", fonts, 9, get_color)

    assert find_by_role(node, "separator") == []
    assert contact_info([], "bar", fonts, 9, get_color) is None


@pytest.mark.unit
@pytest.mark.parametrize("size,dimension", [("S", 50), ("M", 80), ("L", 120), ("XXL", 80)])
def test_profile_image_sizes(size, dimension):
    """Test named sizes map to points, unknown sizes to M."""
    image = profile_image("face.png", size=size)
    assert image.style["width"] == image.style["height"] == dimension
    assert image.style["borderRadius"] == dimension / 2


@pytest.mark.unit
def test_profile_image_square_with_border():
    """Test square images have no radius and borders take the given colour."""
    image = profile_image("face.png", shape="square", border=True, border_color="#ff0000")

    assert image.style["borderRadius"] == 0
    assert image.style["borderColor"] == "#ff0000"
    assert profile_image("") is None


# ============================================================================
# Levels
# ============================================================================


@pytest.mark.unit
@pytest.mark.parametrize(
    "level,score",
    [
        ("Native speaker", 5),
        ("ADVANCED", 4),
        ("Fluent", 4),
        ("Upper intermediate", 3),
        ("Basic", 2),
        ("", 2),
        (None, 2),
    ],
)
def test_score_of(level, score):
    """Test keyword scoring of free-text levels."""
    assert score_of(level) == score


@pytest.mark.unit
def test_level_dots(fonts):
    """Test filled marks match the score."""
    node = level_indicator("Advanced", 1, fonts, 9, "#ff0000")
    fills = [mark.style["backgroundColor"] for mark in node.children]

    assert fills.count("#ff0000") == 4
    assert len(fills) == 5
    assert node.children[0].style["borderRadius"] == 4


@pytest.mark.unit
def test_level_bars_grow(fonts):
    """Test growing bars get taller at each step."""
    node = level_indicator("Native", 3, fonts, 9, "#ff0000")
    assert [mark.style["height"] for mark in node.children] == [2, 4, 6, 8, 10]


@pytest.mark.unit
def test_level_text(fonts):
    """Test style 4 shows the level text in parentheses."""
    node = level_indicator("Advanced", 4, fonts, 9, "#ff0000")
    assert collect_text(node) == "(Advanced)"


@pytest.mark.unit
@pytest.mark.parametrize("level,style", [("Advanced", 0), ("Advanced", 7), ("", 1), ("Advanced", True)])
def test_level_indicator_hidden(fonts, level, style):
    """Test no indicator is rendered for style 0, unknown styles or empty levels."""
    assert level_indicator(level, style, fonts, 9, "#ff0000") is None


# ============================================================================
# Typography
# ============================================================================


@pytest.mark.unit
def test_text_style(fonts):
    """Test weight and style flags."""
    style = text_style(fonts, 9, "#333333", bold=True, italic=True, marginTop=2)

    assert style["fontWeight"] == "bold"
    assert style["fontStyle"] == "italic"
    assert style["marginTop"] == 2
    assert "color" not in text_style(fonts, 9)
