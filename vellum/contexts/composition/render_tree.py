"""
Render Tree Data Structures

Defines the nodes handed to the export collaborator: containers, text runs,
images and links, each carrying fully-resolved style properties (colours,
font family/weight/style, sizes, borders, padding).

Every node has a `role` naming what it is (e.g., "section", "heading",
"marker", "date") so exporters and tests can locate parts of the tree
without depending on its exact nesting.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Union


@dataclass
class TextRun:
    """
    A run of text with a single style.

    Attributes:
        text: Display text
        style: Resolved style properties (fontFamily, fontSize, fontWeight, color, ...)
        role: Semantic role (e.g., "title", "date", "marker", "separator")
    """

    text: str
    style: Dict[str, Any] = field(default_factory=dict)
    role: str = "text"

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "text", "role": self.role, "text": self.text, "style": dict(self.style)}


@dataclass
class Link:
    """
    A hyperlink with display text.

    Attributes:
        href: Link target
        text: Display text (full URL, icon glyph, ...)
        style: Resolved style properties
        role: Semantic role
    """

    href: str
    text: str
    style: Dict[str, Any] = field(default_factory=dict)
    role: str = "link"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "link",
            "role": self.role,
            "href": self.href,
            "text": self.text,
            "style": dict(self.style),
        }


@dataclass
class Image:
    """
    An image with resolved geometry.

    Attributes:
        src: Image source (URL or data URI)
        style: width, height, borderRadius, border properties
        role: Semantic role
    """

    src: str
    style: Dict[str, Any] = field(default_factory=dict)
    role: str = "image"

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "image", "role": self.role, "src": self.src, "style": dict(self.style)}


@dataclass
class Container:
    """
    A box grouping child nodes.

    Attributes:
        children: Child nodes in display order
        style: Layout properties (flexDirection, margins, borders, width, ...)
        role: Semantic role (e.g., "document", "page", "column", "section", "entry")
        key: Identifier for sections and entries (section id, entry id)
    """

    children: List["Node"] = field(default_factory=list)
    style: Dict[str, Any] = field(default_factory=dict)
    role: str = "container"
    key: str = ""

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "type": "container",
            "role": self.role,
            "style": dict(self.style),
            "children": [child.to_dict() for child in self.children],
        }
        if self.key:
            data["key"] = self.key
        return data


Node = Union[Container, TextRun, Link, Image]


# ============================================================================
# Traversal Helpers
# ============================================================================


def iter_nodes(node: Node) -> Iterator[Node]:
    """Yield a node and all of its descendants, depth first."""
    yield node
    if isinstance(node, Container):
        for child in node.children:
            yield from iter_nodes(child)


def find_all(node: Node, predicate: Callable[[Node], bool]) -> List[Node]:
    """Return every node in the subtree matching a predicate."""
    return [candidate for candidate in iter_nodes(node) if predicate(candidate)]


def find_by_role(node: Node, role: str) -> List[Node]:
    """Return every node in the subtree with the given role."""
    return find_all(node, lambda candidate: candidate.role == role)


def find_section(node: Node, section_id: str) -> Union[Container, None]:
    """Return the first section container keyed by section_id, if any."""
    for candidate in iter_nodes(node):
        if isinstance(candidate, Container) and candidate.role == "section" and candidate.key == section_id:
            return candidate
    return None


def collect_text(node: Node, separator: str = " ") -> str:
    """Concatenate the display text of every text run and link in a subtree."""
    parts = [
        candidate.text
        for candidate in iter_nodes(node)
        if isinstance(candidate, (TextRun, Link)) and candidate.text
    ]
    return separator.join(parts)
