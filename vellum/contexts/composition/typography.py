"""
Font configuration and text style helpers shared by all primitives.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class FontConfig:
    """
    Font family names for each variant.

    Families are registered by the export collaborator; the engine only names
    them. All variants share the configured family, and weight/style are
    carried separately on each text run.
    """

    base: str
    bold: str
    italic: str
    bold_italic: str


def create_font_config(font_family: str) -> FontConfig:
    """Create a FontConfig using one family for every variant."""
    family = font_family or "Roboto"
    return FontConfig(base=family, bold=family, italic=family, bold_italic=family)


def text_style(
    fonts: FontConfig,
    font_size: float,
    color: Optional[str] = None,
    bold: bool = False,
    italic: bool = False,
    **extra: Any,
) -> Dict[str, Any]:
    """
    Build the style dict of a text run.

    Args:
        fonts: Font configuration
        font_size: Size in points
        color: Resolved colour (omitted when None)
        bold: Bold weight
        italic: Italic style
        **extra: Additional properties (lineHeight, textAlign, marginTop, ...)

    Returns:
        Style dict with fontFamily, fontSize, fontWeight, fontStyle and color

    Example:
        >>> text_style(create_font_config("Roboto"), 9, "#333333", bold=True)["fontWeight"]
        'bold'
    """
    if bold and italic:
        family = fonts.bold_italic
    elif bold:
        family = fonts.bold
    elif italic:
        family = fonts.italic
    else:
        family = fonts.base

    style = {
        "fontFamily": family,
        "fontSize": font_size,
        "fontWeight": "bold" if bold else "normal",
        "fontStyle": "italic" if italic else "normal",
    }
    if color is not None:
        style["color"] = color
    style.update(extra)
    return style
