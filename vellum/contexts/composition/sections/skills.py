"""
Skills section.

Display styles (skillsDisplayStyle):
    grid     name with level indicator, keywords underneath, two per row
    level    one row per skill, name and level indicator side by side
    compact  all skills on one line separated by " • "
    bubble   name heading followed by tinted keyword tags
    boxed    name heading followed by outlined keyword boxes

An "inline" skillsListStyle overrides the display style and renders one
"name: keyword, keyword" line per skill.
"""

from typing import List, Optional, Sequence

from vellum.contexts.composition.colors import ColorResolver
from vellum.contexts.composition.levels import LEVEL_STYLES, level_indicator
from vellum.contexts.composition.lists import list_marker
from vellum.contexts.composition.render_tree import Container, Node, TextRun
from vellum.contexts.composition.sections.common import DEFAULT_LINE_HEIGHT, section_container, tag
from vellum.contexts.composition.typography import FontConfig, text_style
from vellum.contexts.content import SkillEntry
from vellum.contexts.layout.config_resolver import EffectiveConfig
from vellum.contexts.layout.defaults import DEFAULT_SECTION_TITLES
from vellum.contexts.layout.field_styles import LIST_STYLES
from vellum.utils.text_processing import present_items

SKILLS_DISPLAY_STYLES = ("grid", "level", "compact", "bubble", "boxed")
COMPACT_SEPARATOR = " • "


def compact_skill_text(skill: SkillEntry, show_level: bool = False) -> str:
    """
    One skill as a single line of text.

    Example:
        >>> compact_skill_text(SkillEntry(name="Python", level="Advanced", keywords=["Django"]), True)
        'Python: Django (Advanced)'
    """
    keywords = ", ".join(present_items(skill.keywords))
    if skill.name and keywords:
        text = f"{skill.name}: {keywords}"
    else:
        text = skill.name or keywords
    if show_level and skill.level and text:
        text += f" ({skill.level})"
    return text


def render_skills(
    skills: Sequence[SkillEntry],
    config: EffectiveConfig,
    fonts: FontConfig,
    font_size: float,
    get_color: ColorResolver,
    title: str = DEFAULT_SECTION_TITLES["skills"],
    line_height: Optional[float] = None,
    section_margin: Optional[float] = None,
    display_style: Optional[str] = None,
) -> Optional[Container]:
    """
    Render skills in the configured display style.

    Args:
        skills: Skill entries
        config: Effective configuration
        fonts: Font configuration
        font_size: Base font size
        get_color: Colour resolver
        title: Section heading text
        line_height: Keyword line height
        section_margin: Bottom margin
        display_style: Override of the skillsDisplayStyle setting

    Returns:
        Section container, or None without skills
    """
    if not skills:
        return None

    line_height = line_height or config.get_number("lineHeight", DEFAULT_LINE_HEIGHT)
    style = display_style if display_style in SKILLS_DISPLAY_STYLES else None
    style = style or config.get_choice("skillsDisplayStyle", SKILLS_DISPLAY_STYLES, "grid")
    level_style = config.get_choice("skillsLevelStyle", LEVEL_STYLES, 0)
    list_style = config.get_choice("skillsListStyle", LIST_STYLES, "none")

    accent = get_color("decorations", "#666666")
    name_color = get_color("title", "#1a1a1a")
    text_color = get_color("text", "#555555")
    subtext_color = get_color("subtext", "#666666")

    def name_run(skill: SkillEntry, bold: bool = True, size_step: int = 1) -> TextRun:
        return TextRun(
            skill.name, text_style(fonts, font_size + size_step, name_color, bold=bold), role="skill-name"
        )

    def keywords_run(skill: SkillEntry) -> Optional[TextRun]:
        keywords = present_items(skill.keywords)
        if not keywords:
            return None
        return TextRun(
            ", ".join(keywords), text_style(fonts, font_size, text_color, lineHeight=line_height), role="keywords"
        )

    def name_parts(skill: SkillEntry, bold: bool = True, size_step: int = 1) -> List[Node]:
        parts: List[Node] = []
        if skill.name:
            parts.append(name_run(skill, bold, size_step))
        indicator = level_indicator(skill.level, level_style, fonts, font_size, accent, subtext_color)
        if indicator is not None:
            parts.append(indicator)
        return parts

    def name_row(skill: SkillEntry, bold: bool = True, size_step: int = 1, **extra) -> Container:
        row_style = {"flexDirection": "row", "alignItems": "center", "flexWrap": "wrap", **extra}
        return Container(name_parts(skill, bold, size_step), row_style, role="skill-row")

    def with_marker(index: int, content: List[Optional[Node]], **extra) -> Container:
        marker = list_marker(list_style, index)
        children: List[Node] = []
        if marker:
            marker_style = text_style(
                fonts, font_size, subtext_color, marginRight=6, minWidth=18 if list_style == "number" else 12
            )
            children.append(TextRun(marker, marker_style, role="marker"))
        children.append(Container([node for node in content if node is not None], {"flexShrink": 1}))
        row_style = {"flexDirection": "row", "alignItems": "flex-start", **extra}
        return Container(children, row_style, role="skill", key=skills[index].id)

    def box(keyword: str) -> Container:
        keyword_run = TextRun(
            keyword, text_style(fonts, font_size, get_color("text", "#374151"), bold=True), role="tag-text"
        )
        box_style = {
            "borderWidth": 1,
            "borderColor": accent,
            "paddingHorizontal": 10,
            "paddingVertical": 5,
            "borderRadius": 2,
        }
        return Container([keyword_run], box_style, role="tag")

    body: List[Node] = []

    if list_style == "inline":
        for skill in skills:
            parts = name_parts(skill)
            keywords = present_items(skill.keywords)
            if keywords:
                text = ", ".join(keywords)
                parts.append(
                    TextRun(
                        f": {text}" if skill.name else text,
                        text_style(fonts, font_size, text_color, lineHeight=line_height),
                        role="keywords",
                    )
                )
            row_style = {"flexDirection": "row", "flexWrap": "wrap", "alignItems": "center", "marginBottom": 4}
            body.append(Container(parts, row_style, role="skill", key=skill.id))

    elif style == "compact":
        text = COMPACT_SEPARATOR.join(
            filter(None, (compact_skill_text(skill, show_level=level_style != 0) for skill in skills))
        )
        compact_style = text_style(fonts, font_size, get_color("text", "#444444"), lineHeight=line_height)
        body.append(TextRun(text, compact_style, role="skills-compact"))

    elif style in ("bubble", "boxed"):
        for skill in skills:
            tags: List[Node] = []
            for keyword in present_items(skill.keywords):
                if style == "bubble":
                    tags.append(tag(keyword, fonts, font_size, get_color))
                else:
                    tags.append(box(keyword))
            children: List[Node] = []
            if skill.name or skill.level:
                children.append(name_row(skill, size_step=0))
            if tags:
                tags_style = {"flexDirection": "row", "flexWrap": "wrap", "gap": 6 if style == "bubble" else 8}
                children.append(Container(tags, tags_style, role="tags"))
            body.append(Container(children, {"marginBottom": 8}, role="skill", key=skill.id))

    elif style == "level":
        for index, skill in enumerate(skills):
            row = name_row(skill, bold=False, size_step=0, justifyContent="space-between", marginBottom=4)
            body.append(with_marker(index, [row, keywords_run(skill)], marginBottom=6))

    else:
        cells = [
            with_marker(index, [name_row(skill, marginBottom=2), keywords_run(skill)], minWidth="45%")
            for index, skill in enumerate(skills)
        ]
        body.append(Container(cells, {"flexDirection": "row", "flexWrap": "wrap", "gap": 12}, role="skills-grid"))

    return section_container("skills", title, body, config, fonts, font_size, get_color, section_margin)
