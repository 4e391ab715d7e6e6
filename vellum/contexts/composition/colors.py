"""
Color Resolver

Decides, per visual target, whether an element takes the accent colour or
its own fallback. A target is coloured only if it is listed in the
`themeColorTarget` setting.
"""

from dataclasses import dataclass
from typing import Any, FrozenSet

from vellum.contexts.composition.logger import _log_warning

DEFAULT_FALLBACK = "#000000"

# Known targets (unknown labels are accepted and simply never match)
COLOR_TARGETS = (
    "name",
    "title",
    "headings",
    "links",
    "icons",
    "decorations",
    "text",
    "meta",
    "subtext",
    "primary",
)


def _coerce_targets(targets: Any) -> FrozenSet[str]:
    if targets is None:
        return frozenset()
    if isinstance(targets, str) or not isinstance(targets, (list, tuple, set, frozenset)):
        _log_warning(f"Malformed themeColorTarget {targets!r}; no targets will be coloured")
        return frozenset()
    return frozenset(target for target in targets if isinstance(target, str))


class ColorResolver:
    """
    Callable mapping a colour target to a concrete colour.

    The target set is captured at construction, so a resolver built for one
    render pass always answers the same way.

    Example:
        >>> get_color = ColorResolver("#ff0000", ["headings"])
        >>> get_color("headings")
        '#ff0000'
        >>> get_color("links", "#123456")
        '#123456'
    """

    def __init__(self, accent_color: str, targets: Any):
        self.accent_color = accent_color
        self.targets = _coerce_targets(targets)

    def __call__(self, target: str, fallback: str = DEFAULT_FALLBACK) -> str:
        return self.accent_color if target in self.targets else fallback

    def is_targeted(self, target: str) -> bool:
        return target in self.targets

    def __repr__(self) -> str:
        return f"ColorResolver({self.accent_color!r}, {sorted(self.targets)!r})"


@dataclass(frozen=True)
class ColorPalette:
    """Named colours for a render pass, derived from a ColorResolver."""

    primary: str
    text: str
    muted: str
    heading: str
    link: str
    decoration: str
    icon: str


def create_color_palette(get_color: ColorResolver) -> ColorPalette:
    """
    Build the named palette used by the document header and page chrome.

    Example:
        >>> create_color_palette(ColorResolver("#ff0000", ["links"])).link
        '#ff0000'
    """
    return ColorPalette(
        primary=get_color.accent_color,
        text="#333333",
        muted="#666666",
        heading=get_color("headings", "#1a1a1a"),
        link=get_color("links", "#3b82f6"),
        decoration=get_color("decorations", DEFAULT_FALLBACK),
        icon=get_color("icons", "#666666"),
    )
