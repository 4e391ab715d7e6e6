"""
HTML Preview

Renders a composed render tree to a standalone HTML page with Jinja2, for
checking layouts in a browser without a PDF backend.
"""

import re
from pathlib import Path
from typing import Any, Dict

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template

from vellum.contexts.composition.render_tree import Container
from vellum.contexts.rendering.logger import _log_info, _log_success

PREVIEW_TEMPLATES_PATH = Path(__file__).parent / "template"
PREVIEW_TEMPLATE_NAME = "preview.html.jinja"

# Style properties rendered without a unit
UNITLESS_PROPERTIES = {"lineHeight", "fontWeight", "flex", "flexShrink", "flexGrow", "opacity", "zIndex"}

# react-pdf shorthands without a CSS counterpart
SHORTHANDS = {
    "paddingHorizontal": ("padding-left", "padding-right"),
    "paddingVertical": ("padding-top", "padding-bottom"),
    "marginHorizontal": ("margin-left", "margin-right"),
    "marginVertical": ("margin-top", "margin-bottom"),
}

# Document-level properties that are not CSS
NON_CSS_PROPERTIES = {"size", "title", "templateId", "layoutType", "accentColor", "objectFit"}


def _kebab(name: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "-", name).lower()


def css_declarations(style: Dict[str, Any]) -> str:
    """
    Convert a node style dict to an inline CSS declaration string.

    Numbers become points except for unitless properties.

    Example:
        >>> css_declarations({"fontSize": 9, "paddingHorizontal": 4, "lineHeight": 1.3})
        'font-size: 9pt; padding-left: 4pt; padding-right: 4pt; line-height: 1.3'
    """
    declarations = []
    for name, value in style.items():
        if name in NON_CSS_PROPERTIES or value is None:
            continue
        if isinstance(value, (int, float)) and not isinstance(value, bool) and name not in UNITLESS_PROPERTIES:
            value = f"{value}pt"
        for prop in SHORTHANDS.get(name, (_kebab(name),)):
            declarations.append(f"{prop}: {value}")
    return "; ".join(declarations)


class PreviewRenderer:
    """
    Jinja2 renderer for HTML previews.

    The template is loaded once and reused for every preview.
    """

    def __init__(self, templates_path: Path = None):
        """
        Initialize the preview renderer.

        Args:
            templates_path: Directory holding preview.html.jinja. Defaults to
                            the packaged template directory
        """
        if templates_path is None:
            templates_path = PREVIEW_TEMPLATES_PATH

        self.templates_path = Path(templates_path)
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["css"] = css_declarations
        self._template: Template = None

    @property
    def template(self) -> Template:
        if self._template is None:
            self._template = self.env.get_template(PREVIEW_TEMPLATE_NAME)
        return self._template

    def render(self, tree: Container) -> str:
        """Render a document tree to an HTML string."""
        document = tree.to_dict()
        title = document["style"].get("title") or "Resume"
        return self.template.render(document=document, title=title)

    def write(self, tree: Container, output_path: Path) -> Path:
        """
        Render a document tree and write it to an HTML file.

        Returns:
            Path written
        """
        output_path = Path(output_path)
        _log_info(f"Rendering HTML preview to {output_path}")
        html = self.render(tree)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html, encoding="utf-8")
        _log_success(f"Wrote preview {output_path} ({len(html)} bytes)")
        return output_path
