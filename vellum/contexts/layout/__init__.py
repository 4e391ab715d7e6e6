"""
Layout Context

Responsibilities:
- Defines the hardcoded, total layer of layout settings
- Composes template defaults from named theme presets
- Resolves the effective configuration (hardcoded -> template -> user)
- Orders sections and distributes them into page columns
- Applies user edits to the override layer

Owns: Layout settings, theme presets, template definitions, section ordering
Never: Produces render nodes or reads resume content
"""

from vellum.contexts.layout.column_distributor import (
    Column,
    ColumnMembership,
    complete_section_order,
    distribute,
    normalize_section_order,
)
from vellum.contexts.layout.config_resolver import (
    EffectiveConfig,
    compose_theme,
    load_theme_presets,
    resolve,
)
from vellum.contexts.layout.defaults import (
    DEFAULT_SECTION_TITLES,
    HARDCODED_DEFAULTS,
    SECTION_IDS,
    get_hardcoded_defaults,
)
from vellum.contexts.layout.edits import (
    MoveSection,
    MoveSectionByDrag,
    ResetOverrides,
    SetSetting,
    ToggleSetting,
    apply_edit,
    reset_overrides,
)
from vellum.contexts.layout.exceptions import PresetNotFoundError, TemplateNotFoundError
from vellum.contexts.layout.field_styles import FieldStyle, field_style
from vellum.contexts.layout.reorder import move_by_drag, swap_adjacent
from vellum.contexts.layout.template_registry import (
    TemplateRegistry,
    TemplateSpec,
    get_template_defaults,
    get_template_registry,
    resolve_for_template,
)

__all__ = [
    # Configuration cascade
    "EffectiveConfig",
    "resolve",
    "resolve_for_template",
    "get_hardcoded_defaults",
    "HARDCODED_DEFAULTS",
    "SECTION_IDS",
    "DEFAULT_SECTION_TITLES",
    # Presets and templates
    "load_theme_presets",
    "compose_theme",
    "TemplateRegistry",
    "TemplateSpec",
    "get_template_registry",
    "get_template_defaults",
    "PresetNotFoundError",
    "TemplateNotFoundError",
    # Field styles
    "FieldStyle",
    "field_style",
    # Ordering and columns
    "Column",
    "ColumnMembership",
    "distribute",
    "complete_section_order",
    "normalize_section_order",
    "move_by_drag",
    "swap_adjacent",
    # Edits
    "SetSetting",
    "ToggleSetting",
    "MoveSectionByDrag",
    "MoveSection",
    "ResetOverrides",
    "apply_edit",
    "reset_overrides",
]
