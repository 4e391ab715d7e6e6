"""
Section heading decoration and rendering.

Heading styles:
    1  solid underline         5  left accent bar
    2  no decoration           6  top and bottom border
    3  thick underline         7  dashed underline
    4  background highlight    8  dotted underline
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from vellum.contexts.composition.colors import ColorResolver
from vellum.contexts.composition.render_tree import Container, TextRun
from vellum.contexts.composition.typography import FontConfig, text_style
from vellum.contexts.layout.config_resolver import EffectiveConfig
from vellum.utils.text_processing import capitalize_words

HEADING_STYLES = (1, 2, 3, 4, 5, 6, 7, 8)
HEADING_ALIGNMENTS = ("left", "center", "right")
HEADING_CAPITALIZATIONS = ("uppercase", "capitalize", "lowercase", "none")

# Points added to the base font size
HEADING_SIZE_STEPS = {"S": 0, "M": 1, "L": 2, "XL": 4}

# Appended to the decoration colour for the style 4 background tint
BACKGROUND_TINT_ALPHA = "20"


@dataclass(frozen=True)
class HeadingDecoration:
    """
    Decoration of a heading wrapper, independent of colour.

    Attributes:
        border_position: None, "bottom", "left" or "top-bottom"
        border_width: Border width in points
        border_style: "solid", "dashed" or "dotted"
        background_tint: Whether the wrapper is filled with a tinted decoration colour
        padding: Wrapper padding (paddingBottom, paddingLeft, ...)
        border_radius: Corner radius (background style only)
    """

    border_position: Optional[str] = None
    border_width: float = 0
    border_style: str = "solid"
    background_tint: bool = False
    padding: Dict[str, float] = None
    border_radius: float = 0

    def to_style(self, decoration_color: str) -> Dict[str, Any]:
        """Resolve the decoration into wrapper style properties."""
        style: Dict[str, Any] = dict(self.padding or {})

        if self.border_position == "bottom":
            style.update(borderBottomWidth=self.border_width, borderBottomColor=decoration_color)
        elif self.border_position == "left":
            style.update(borderLeftWidth=self.border_width, borderLeftColor=decoration_color)
        elif self.border_position == "top-bottom":
            style.update(
                borderTopWidth=self.border_width,
                borderBottomWidth=self.border_width,
                borderTopColor=decoration_color,
                borderBottomColor=decoration_color,
            )

        if self.border_position:
            style["borderStyle"] = self.border_style
        if self.background_tint:
            style["backgroundColor"] = decoration_color + BACKGROUND_TINT_ALPHA
        if self.border_radius:
            style["borderRadius"] = self.border_radius
        return style


_DECORATIONS = {
    1: HeadingDecoration("bottom", 1, "solid", padding={"paddingBottom": 3}),
    2: HeadingDecoration(),
    3: HeadingDecoration("bottom", 2, "solid", padding={"paddingBottom": 3}),
    4: HeadingDecoration(
        background_tint=True,
        padding={"paddingVertical": 2, "paddingHorizontal": 6},
        border_radius=3,
    ),
    5: HeadingDecoration("left", 2, "solid", padding={"paddingLeft": 6}),
    6: HeadingDecoration("top-bottom", 1, "solid", padding={"paddingVertical": 2}),
    7: HeadingDecoration("bottom", 1, "dashed", padding={"paddingBottom": 3}),
    8: HeadingDecoration("bottom", 1, "dotted", padding={"paddingBottom": 3}),
}


def heading_decoration(style_id: Any) -> HeadingDecoration:
    """
    Map a heading style id (1-8) to its decoration.

    Invalid ids fall back to style 1 (solid underline).

    Example:
        >>> heading_decoration(5).border_position
        'left'
    """
    if isinstance(style_id, bool) or style_id not in _DECORATIONS:
        return _DECORATIONS[1]
    return _DECORATIONS[style_id]


def format_heading_text(text: str, capitalization: str) -> str:
    """
    Apply heading capitalization.

    Example:
        >>> format_heading_text("professional experience", "capitalize")
        'Professional Experience'
    """
    if capitalization == "uppercase":
        return text.upper()
    if capitalization == "lowercase":
        return text.lower()
    if capitalization == "capitalize":
        return capitalize_words(text)
    return text


def section_heading(
    title: str,
    config: EffectiveConfig,
    fonts: FontConfig,
    font_size: float,
    get_color: ColorResolver,
) -> Container:
    """
    Render a section heading using the global heading settings.

    Heading text takes the "headings" colour target, decorations the
    "decorations" target.

    Args:
        title: Heading text before capitalization
        config: Effective configuration
        fonts: Font configuration
        font_size: Base font size
        get_color: Colour resolver

    Returns:
        Heading container with one text run
    """
    style_id = config.get_choice("sectionHeadingStyle", HEADING_STYLES, 1)
    align = config.get_choice("sectionHeadingAlign", HEADING_ALIGNMENTS, "left")
    bold = config.get_bool("sectionHeadingBold", True)
    capitalization = config.get_choice("sectionHeadingCapitalization", HEADING_CAPITALIZATIONS, "uppercase")
    size = config.get_choice("sectionHeadingSize", tuple(HEADING_SIZE_STEPS), "M")
    letter_spacing = config.get_number("sectionHeadingLetterSpacing", 0.5)

    decoration_color = get_color("decorations", "#000000")
    heading_color = get_color("headings", "#1a1a1a")

    wrapper_style = {
        "marginBottom": 3,
        "flexDirection": "row",
        "justifyContent": {"left": "flex-start", "center": "center", "right": "flex-end"}[align],
        "alignItems": "center",
    }
    wrapper_style.update(heading_decoration(style_id).to_style(decoration_color))

    run_style = text_style(
        fonts,
        font_size + HEADING_SIZE_STEPS[size],
        heading_color,
        bold=bold,
        letterSpacing=letter_spacing,
        textAlign=align,
    )
    return Container(
        [TextRun(format_heading_text(title, capitalization), run_style, role="heading-text")],
        wrapper_style,
        role="heading",
    )
