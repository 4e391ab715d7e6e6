"""
Rendering Context

Responsibilities:
- Serializes composed render trees to JSON or YAML
- Renders HTML previews of render trees with Jinja2

Owns: Export formats, preview template
Never: Makes layout decisions or changes the render tree
"""

from vellum.contexts.rendering.exporter import (
    EXPORT_FORMATS,
    ExportResult,
    export_format,
    export_tree,
    tree_to_json,
    tree_to_yaml,
)
from vellum.contexts.rendering.preview import PreviewRenderer, css_declarations

__all__ = [
    "EXPORT_FORMATS",
    "ExportResult",
    "export_format",
    "export_tree",
    "tree_to_json",
    "tree_to_yaml",
    "PreviewRenderer",
    "css_declarations",
]
