"""
Links, profile image and contact row primitives.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

from vellum.contexts.composition.colors import ColorResolver
from vellum.contexts.composition.render_tree import Container, Image, Link, TextRun
from vellum.contexts.composition.typography import FontConfig, text_style
from vellum.contexts.layout.config_resolver import EffectiveConfig
from vellum.utils.text_processing import join_present, strip_url_scheme

LINK_ICON = "🔗"

PROFILE_IMAGE_SIZES = {"S": 50, "M": 80, "L": 120}
PROFILE_IMAGE_SHAPES = ("circle", "square")

CONTACT_STYLES = ("icon", "bullet", "bar", "comma", "stacked")
CONTACT_SEPARATORS = {"bar": "|", "comma": ",", "bullet": "•"}
# contactSeparator setting -> glyph used between items in icon style
ICON_STYLE_SEPARATORS = {"pipe": "|", "dash": "-", "comma": ",", "bullet": "•"}

CONTACT_ICONS = {
    "email": "✉",
    "phone": "☎",
    "location": "⌂",
    "url": LINK_ICON,
    "profile": "@",
}


# ============================================================================
# Links
# ============================================================================


def link_display_mode(config: EffectiveConfig) -> str:
    """
    Derive the global link display mode from the link settings.

    Returns:
        "full" when linkShowFullUrl is set, else "icon" when linkShowIcon is
        set, else "hidden"
    """
    if config.get_bool("linkShowFullUrl", False):
        return "full"
    if config.get_bool("linkShowIcon", True):
        return "icon"
    return "hidden"


def url_affordance_text(url: str, mode: str) -> Optional[str]:
    """
    Display text of a URL affordance, or None when nothing is shown.

    Example:
        >>> url_affordance_text("https://example.com/", "full")
        'example.com'
    """
    if not url or mode == "hidden":
        return None
    if mode == "full":
        return strip_url_scheme(url)
    return LINK_ICON


def url_affordance(
    url: str,
    mode: str,
    fonts: FontConfig,
    font_size: float,
    color: str,
    bold: bool = False,
    italic: bool = False,
) -> Optional[Link]:
    """Render a URL as an icon or full-text link according to the display mode."""
    display = url_affordance_text(url, mode)
    if display is None:
        return None
    style = text_style(fonts, font_size - 1, color, bold, italic, marginLeft=4, textDecoration="none")
    return Link(href=url, text=display, style=style, role="url")


# ============================================================================
# Profile Image
# ============================================================================


def profile_image(
    src: str,
    size: str = "M",
    shape: str = "circle",
    border: bool = False,
    border_color: str = "#000000",
) -> Optional[Image]:
    """
    Render the profile image at a named size.

    Sizes: S=50pt, M=80pt, L=120pt (unknown sizes use M). A circle has a
    corner radius of half its size.

    Returns:
        Image node, or None when there is no source
    """
    if not src:
        return None

    dimension = PROFILE_IMAGE_SIZES.get(size, PROFILE_IMAGE_SIZES["M"])
    style = {
        "width": dimension,
        "height": dimension,
        "objectFit": "cover",
        "borderRadius": dimension / 2 if shape == "circle" else 0,
    }
    if border:
        style.update(borderWidth=2, borderColor=border_color, borderStyle="solid")
    return Image(src=src, style=style, role="profile-image")


# ============================================================================
# Contact Info
# ============================================================================


@dataclass(frozen=True)
class ContactItem:
    """
    One entry of the contact row.

    Attributes:
        type: email | phone | location | url | profile
        value: Display text
        url: Link target (None for plain text such as location)
        label: Optional label (profile network)
    """

    type: str
    value: str
    url: Optional[str] = None
    label: Optional[str] = None


def contact_items_from_basics(basics) -> List[ContactItem]:
    """
    Build contact items from resume basics, skipping absent fields.

    Args:
        basics: Basics dataclass from the content context

    Returns:
        Items in display order: email, phone, location, url, profiles
    """
    items: List[ContactItem] = []

    if basics.email:
        items.append(ContactItem("email", basics.email, f"mailto:{basics.email}"))
    if basics.phone:
        items.append(ContactItem("phone", basics.phone, f"tel:{basics.phone}"))
    if basics.location.city:
        location = join_present([basics.location.city, basics.location.country], ", ")
        items.append(ContactItem("location", location))
    if basics.url:
        items.append(ContactItem("url", strip_url_scheme(basics.url), basics.url))

    for profile in basics.profiles:
        if profile.url:
            items.append(
                ContactItem(
                    "profile",
                    profile.username or profile.network or profile.url,
                    profile.url,
                    profile.network or None,
                )
            )

    return items


def contact_info(
    items: Sequence[ContactItem],
    style: str,
    fonts: FontConfig,
    font_size: float,
    get_color: ColorResolver,
    align: str = "left",
    bold: bool = False,
    italic: bool = False,
    separator: str = "pipe",
) -> Optional[Container]:
    """
    Render the contact row.

    Separators appear only between items, never before the first or after
    the last. The "stacked" style puts each item on its own line.

    Args:
        items: Contact items
        style: icon | bullet | bar | comma | stacked (unknown styles use bar)
        fonts: Font configuration
        font_size: Contact font size
        get_color: Colour resolver ("links" and "icons" targets)
        align: left | center | right
        bold: Bold contact text
        italic: Italic contact text
        separator: contactSeparator setting, used by the icon style

    Returns:
        Contact container, or None without items
    """
    if not items:
        return None
    if style not in CONTACT_STYLES:
        style = "bar"

    text_color = get_color("text", "#444444")
    link_color = get_color("links", text_color)
    icon_color = get_color("icons", "#666666")
    justify = {"left": "flex-start", "center": "center", "right": "flex-end"}.get(align, "flex-start")

    rendered = []
    for item in items:
        parts = []
        if style == "icon":
            icon = CONTACT_ICONS.get(item.type, "•")
            parts.append(TextRun(icon, text_style(fonts, font_size, icon_color, marginRight=3), role="icon"))
        value_style = text_style(fonts, font_size, link_color if item.url else text_color, bold, italic)
        if item.url:
            parts.append(Link(href=item.url, text=item.value, style=value_style, role="contact"))
        else:
            parts.append(TextRun(item.value, value_style, role="contact"))
        rendered.append(Container(parts, {"flexDirection": "row", "alignItems": "center"}, role="contact-item"))

    if style == "stacked":
        return Container(rendered, {"alignItems": justify, "gap": 2}, role="contact-info")

    glyph = ICON_STYLE_SEPARATORS.get(separator, "|") if style == "icon" else CONTACT_SEPARATORS[style]
    children = []
    for index, item_node in enumerate(rendered):
        if index > 0:
            spacing = {"marginRight": 6} if style == "comma" else {"marginHorizontal": 6}
            children.append(
                TextRun(glyph, text_style(fonts, font_size, "#999999", **spacing), role="separator")
            )
        children.append(item_node)

    return Container(
        children,
        {"flexDirection": "row", "flexWrap": "wrap", "justifyContent": justify, "alignItems": "center"},
        role="contact-info",
    )
