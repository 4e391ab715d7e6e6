"""
Proficiency level scoring and indicators for skills and languages.
"""

from typing import Optional

from vellum.contexts.composition.render_tree import Container, TextRun
from vellum.contexts.composition.typography import FontConfig, text_style

MAX_SCORE = 5
EMPTY_COLOR = "#e5e7eb"

# 0 none, 1 dots, 2 squares, 3 growing bars, 4 text label
LEVEL_STYLES = (0, 1, 2, 3, 4)


def score_of(level: Optional[str]) -> int:
    """
    Map a free-text proficiency level to a score from 1 to 5.

    Case-insensitive substring match, checked in order:
        "native" -> 5; "advanced" or "fluent" -> 4; "intermediate" -> 3;
        anything else (including empty) -> 2

    Example:
        >>> score_of("Native speaker"), score_of("FLUENT"), score_of("basic")
        (5, 4, 2)
    """
    text = (level or "").lower()
    if "native" in text:
        return 5
    if "advanced" in text or "fluent" in text:
        return 4
    if "intermediate" in text:
        return 3
    return 2


def level_indicator(
    level: str,
    level_style: int,
    fonts: FontConfig,
    font_size: float,
    color: str,
    text_color: str = "#666666",
) -> Optional[Container]:
    """
    Render a level indicator.

    Args:
        level: Free-text level (e.g., "Advanced")
        level_style: 0 none, 1 dots, 2 squares, 3 growing bars, 4 text "(level)"
        fonts: Font configuration
        font_size: Base font size (text style)
        color: Filled marker colour
        text_color: Colour of the text style

    Returns:
        Indicator container, or None for style 0, unknown styles or an empty level
    """
    if not level or isinstance(level_style, bool) or level_style not in LEVEL_STYLES[1:]:
        return None

    if level_style == 4:
        return Container(
            [TextRun(f"({level})", text_style(fonts, font_size - 1, text_color), role="level-text")],
            {"marginLeft": 4},
            role="level",
        )

    score = score_of(level)
    marks = []
    for step in range(1, MAX_SCORE + 1):
        fill = color if step <= score else EMPTY_COLOR
        if level_style == 3:
            mark_style = {"width": 4, "height": step * 2, "backgroundColor": fill}
        else:
            mark_style = {
                "width": 8,
                "height": 8,
                "borderRadius": 4 if level_style == 1 else 0,
                "backgroundColor": fill,
            }
        marks.append(Container([], mark_style, role="level-mark"))

    container_style = {"flexDirection": "row", "gap": 2, "marginLeft": 4}
    if level_style == 3:
        container_style.update(alignItems="flex-end", height=10)
    return Container(marks, container_style, role="level")
