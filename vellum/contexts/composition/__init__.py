"""
Composition Context

Responsibilities:
- Resolves colours and fonts for a render pass
- Provides style primitives (lists, headings, entry headers, links, levels)
- Renders the twelve resume sections through the section registry
- Composes header, columns and page geometry into a render tree

Owns: Render tree nodes, section renderers, document composition
Never: Reads or writes files, mutates layout settings
"""

from vellum.contexts.composition.colors import COLOR_TARGETS, ColorPalette, ColorResolver, create_color_palette
from vellum.contexts.composition.composer import column_widths, compose_resume, mm_to_pt, render_header
from vellum.contexts.composition.render_tree import (
    Container,
    Image,
    Link,
    Node,
    TextRun,
    collect_text,
    find_all,
    find_by_role,
    find_section,
    iter_nodes,
)
from vellum.contexts.composition.section_registry import (
    SECTION_DESCRIPTORS,
    RenderProps,
    SectionDescriptor,
    get_data,
    has_data,
    render_many,
    render_one,
)
from vellum.contexts.composition.typography import FontConfig, create_font_config

__all__ = [
    # Document
    "compose_resume",
    "render_header",
    "column_widths",
    "mm_to_pt",
    # Render tree
    "Container",
    "TextRun",
    "Link",
    "Image",
    "Node",
    "iter_nodes",
    "find_all",
    "find_by_role",
    "find_section",
    "collect_text",
    # Colours and fonts
    "ColorResolver",
    "ColorPalette",
    "create_color_palette",
    "COLOR_TARGETS",
    "FontConfig",
    "create_font_config",
    # Sections
    "SECTION_DESCRIPTORS",
    "SectionDescriptor",
    "RenderProps",
    "has_data",
    "get_data",
    "render_one",
    "render_many",
]
