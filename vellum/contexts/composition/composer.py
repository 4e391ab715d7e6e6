"""
Document Composer

Turns a resume plus its layout settings into a complete render tree:

    resolve config -> fonts + colours -> header -> section order
    -> columns -> sections -> page geometry -> document

The composer performs no I/O; exporting the tree is the rendering context's job.
"""

from typing import Any, Dict, List, Mapping, Optional

from vellum.contexts.composition.colors import ColorResolver, create_color_palette
from vellum.contexts.composition.logger import _log_debug, _log_info
from vellum.contexts.composition.media import (
    CONTACT_STYLES,
    PROFILE_IMAGE_SHAPES,
    PROFILE_IMAGE_SIZES,
    contact_info,
    contact_items_from_basics,
    profile_image,
)
from vellum.contexts.composition.render_tree import Container, Node, TextRun
from vellum.contexts.composition.section_registry import RenderProps, render_many
from vellum.contexts.composition.typography import FontConfig, create_font_config, text_style
from vellum.contexts.content import Resume
from vellum.contexts.layout.column_distributor import (
    SUPPORTED_COLUMN_COUNTS,
    Column,
    complete_section_order,
    distribute,
)
from vellum.contexts.layout.config_resolver import EffectiveConfig
from vellum.contexts.layout.template_registry import TemplateRegistry, TemplateSpec, get_template_registry

# Points per millimetre
MM_TO_PT = 2.835

# Horizontal gap between columns, in percent of the content width
COLUMN_GAP_PERCENT = 4

MIN_SIDE_COLUMN_PERCENT = 10
MAX_SIDE_COLUMN_PERCENT = 48
MAX_THREE_COLUMN_SIDE_PERCENT = 30

ALIGNMENTS = ("left", "center", "right")
JUSTIFY = {"left": "flex-start", "center": "center", "right": "flex-end"}
HEADER_POSITIONS = ("top", "left")


def mm_to_pt(mm: float) -> float:
    """
    Convert millimetres to PDF points.

    Example:
        >>> mm_to_pt(10)
        28.35
    """
    return round(mm * MM_TO_PT, 2)


def column_widths(column_count: int, left_width: float) -> Dict[str, float]:
    """
    Width of each column in percent of the content width.

    Side columns take `left_width` percent (clamped to a usable range); the
    main column takes what remains after the 4% gaps.

    Example:
        >>> column_widths(2, 30)
        {'left': 30, 'main': 66}
    """
    if column_count not in SUPPORTED_COLUMN_COUNTS or column_count == 1:
        return {"main": 100}

    side = min(max(left_width, MIN_SIDE_COLUMN_PERCENT), MAX_SIDE_COLUMN_PERCENT)
    if column_count == 2:
        return {"left": side, "main": 100 - side - COLUMN_GAP_PERCENT}

    side = min(side, MAX_THREE_COLUMN_SIDE_PERCENT)
    return {"left": side, "main": 100 - 2 * side - 2 * COLUMN_GAP_PERCENT, "right": side}


# ============================================================================
# Header
# ============================================================================


def render_header(
    resume: Resume,
    config: EffectiveConfig,
    fonts: FontConfig,
    get_color: ColorResolver,
) -> Optional[Container]:
    """
    Render the personal details header: profile image, name, title and contact row.

    Args:
        resume: Resume being rendered
        config: Effective configuration
        fonts: Font configuration
        get_color: Colour resolver ("name", "title", "links", "icons" targets)

    Returns:
        Header container, or None when the resume has no personal details
    """
    basics = resume.basics
    align = config.get_choice("personalDetailsAlign", ALIGNMENTS, "left")
    stacked = config.get_choice("personalDetailsArrangement", (1, 2), 1) == 2

    details: List[Node] = []
    if basics.name:
        details.append(
            TextRun(
                basics.name,
                text_style(
                    fonts,
                    config.get_number("nameFontSize", 28),
                    get_color("name", "#1a1a1a"),
                    bold=config.get_bool("nameBold", True),
                    lineHeight=config.get_number("nameLineHeight", 1.2),
                    letterSpacing=config.get_number("nameLetterSpacing", 0),
                    textAlign=align,
                ),
                role="name",
            )
        )
    if basics.label:
        details.append(
            TextRun(
                basics.label,
                text_style(
                    fonts,
                    config.get_number("titleFontSize", 14),
                    get_color("title", "#444444"),
                    bold=config.get_bool("titleBold", False),
                    italic=config.get_bool("titleItalic", False),
                    lineHeight=config.get_number("titleLineHeight", 1.2),
                    textAlign=align,
                    marginTop=2,
                ),
                role="headline",
            )
        )

    if stacked:
        contact_style = "stacked"
    else:
        contact_style = config.get_choice("personalDetailsContactStyle", CONTACT_STYLES, "icon")
    contact = contact_info(
        contact_items_from_basics(basics),
        contact_style,
        fonts,
        config.get_number("contactFontSize", 10),
        get_color,
        align=align,
        bold=config.get_bool("contactBold", False),
        italic=config.get_bool("contactItalic", False),
        separator=str(config.get("contactSeparator", "pipe")),
    )
    if contact is not None:
        contact.style["marginTop"] = 4
        details.append(contact)

    image = None
    if config.get_bool("showProfileImage", False):
        image = profile_image(
            basics.image,
            size=config.get_choice("profileImageSize", tuple(PROFILE_IMAGE_SIZES), "M"),
            shape=config.get_choice("profileImageShape", PROFILE_IMAGE_SHAPES, "circle"),
            border=config.get_bool("profileImageBorder", False),
            border_color=get_color("decorations", "#000000"),
        )

    if not details and image is None:
        return None

    children: List[Node] = []
    if image is not None:
        children.append(image)
    if details:
        children.append(Container(details, {"flex": 1}, role="personal-details"))

    header_style: Dict[str, Any] = {"marginBottom": config.get_number("headerBottomMargin", 12), "gap": 12}
    if image is not None and align != "center":
        header_style.update(flexDirection="row", alignItems="center")
    else:
        header_style.update(flexDirection="column", alignItems=JUSTIFY[align])
    return Container(children, header_style, role="header")


# ============================================================================
# Composition
# ============================================================================


def _column_node(column: Column, sections: List[Container], width: float) -> Container:
    return Container(sections, {"width": f"{width}%"}, role="column", key=column.name)


def compose_resume(
    resume: Resume,
    template_id: Optional[str] = None,
    registry: Optional[TemplateRegistry] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> Container:
    """
    Compose the full render tree of a resume.

    Args:
        resume: Resume content
        template_id: Template to render with (defaults to resume.meta.template_id;
                     unknown ids fall back to "ats")
        registry: Template registry (defaults to the shared registry)
        overrides: User override layer (defaults to resume.meta.layout_settings)

    Returns:
        Document container holding one page

    Example:
        >>> document = compose_resume(load_resume("resume.yaml"), "classic")
        >>> [column.key for column in find_by_role(document, "column")]
        ['main']
    """
    registry = registry or get_template_registry()
    spec: TemplateSpec = registry.resolve_template(template_id or resume.meta.template_id)
    if overrides is None:
        overrides = resume.meta.layout_settings
    config = registry.resolve_config(spec.id, overrides)

    accent_color = resume.meta.theme_color or spec.theme_color
    get_color = ColorResolver(accent_color, config.get("themeColorTarget"))
    palette = create_color_palette(get_color)
    fonts = create_font_config(str(config.get("fontFamily", "Roboto")))
    font_size = config.get_number("fontSize", 9)
    line_height = config.get_number("lineHeight", 1.3)

    _log_info(f"Composing '{resume.meta.title}' with template '{spec.id}' (accent {accent_color})")

    props = RenderProps(
        resume=resume,
        config=config,
        fonts=fonts,
        font_size=font_size,
        get_color=get_color,
        line_height=line_height,
        section_margin=config.get_number("sectionMargin", 12),
    )

    order = complete_section_order(config.get_list("sectionOrder"))
    column_count = config.get_choice("columnCount", SUPPORTED_COLUMN_COUNTS, 1)
    columns = distribute(order, column_count, spec.membership)
    widths = column_widths(column_count, config.get_number("leftColumnWidth", 30))

    header = render_header(resume, config, fonts, get_color)
    header_in_sidebar = (
        header is not None
        and column_count > 1
        and config.get_choice("headerPosition", HEADER_POSITIONS, "top") == "left"
    )

    column_nodes = []
    for column in columns:
        sections = render_many(column.section_ids, props)
        if header_in_sidebar and column.name == "left":
            sections.insert(0, header)
        _log_debug(f"Column '{column.name}': {[node.key for node in sections]}")
        column_nodes.append(_column_node(column, sections, widths[column.name]))

    page_children: List[Node] = []
    if header is not None and not header_in_sidebar:
        page_children.append(header)
    if column_count == 1:
        page_children.extend(column_nodes)
    else:
        page_children.append(
            Container(column_nodes, {"flexDirection": "row", "columnGap": f"{COLUMN_GAP_PERCENT}%"}, role="columns")
        )

    page = Container(
        page_children,
        {
            "size": "A4",
            "paddingHorizontal": mm_to_pt(config.get_number("marginHorizontal", 12)),
            "paddingVertical": mm_to_pt(config.get_number("marginVertical", 12)),
            "fontFamily": fonts.base,
            "fontSize": font_size,
            "lineHeight": line_height,
            "color": palette.text,
            "backgroundColor": "#ffffff",
        },
        role="page",
    )
    return Container(
        [page],
        {
            "title": resume.meta.title,
            "templateId": spec.id,
            "layoutType": spec.layout_type,
            "accentColor": palette.primary,
        },
        role="document",
        key=resume.id,
    )
