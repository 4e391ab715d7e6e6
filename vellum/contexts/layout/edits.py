"""
Layout Edit Reducer

Every change a settings editor can make is expressed as an immutable
EditAction and applied with `apply_edit`, which returns a new user-override
layer. The previous layer is never mutated, so each edit is atomic.

Resetting all overrides is destructive and therefore gated behind an
explicit confirmation callback.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Union

from vellum.contexts.layout.column_distributor import normalize_section_order
from vellum.contexts.layout.config_resolver import EffectiveConfig
from vellum.contexts.layout.logger import _log_info, _log_warning
from vellum.contexts.layout.reorder import move_by_drag, swap_adjacent


# ============================================================================
# Edit Actions
# ============================================================================


@dataclass(frozen=True)
class SetSetting:
    """Set one setting key to a value (None removes the override)."""

    key: str
    value: Any


@dataclass(frozen=True)
class ToggleSetting:
    """Flip a boolean setting relative to its effective value."""

    key: str


@dataclass(frozen=True)
class MoveSectionByDrag:
    """Drag section `from_id` onto the position of `to_id`."""

    from_id: str
    to_id: str


@dataclass(frozen=True)
class MoveSection:
    """Move the section at `index` one step up or down."""

    index: int
    direction: str = "up"


@dataclass(frozen=True)
class ResetOverrides:
    """Drop every user override. Issue through reset_overrides() to get the confirmation step."""


EditAction = Union[SetSetting, ToggleSetting, MoveSectionByDrag, MoveSection, ResetOverrides]


def apply_edit(
    overrides: Mapping[str, Any], action: EditAction, effective: Optional[EffectiveConfig] = None
) -> Dict[str, Any]:
    """
    Apply an edit action to the user-override layer.

    Args:
        overrides: Current user-override layer (not modified)
        action: Edit to apply
        effective: Effective configuration the editor is currently showing;
                   toggles and moves start from its values (required for them)

    Returns:
        New override layer

    Raises:
        TypeError: If action is not a known EditAction
        ValueError: If a toggle or move is applied without the effective configuration

    Example:
        >>> apply_edit({}, MoveSection(index=1, direction="up"), effective)["sectionOrder"][:2]
        ['work', 'summary']
    """
    updated = dict(overrides)

    if isinstance(action, SetSetting):
        if action.value is None:
            updated.pop(action.key, None)
        else:
            updated[action.key] = action.value
        return updated

    if isinstance(action, ResetOverrides):
        return {}

    if isinstance(action, (ToggleSetting, MoveSectionByDrag, MoveSection)) and effective is None:
        raise ValueError(f"{type(action).__name__} needs the effective configuration")

    if isinstance(action, ToggleSetting):
        current = effective.get(action.key)
        if not isinstance(current, bool):
            _log_warning(f"Cannot toggle non-boolean setting '{action.key}' ({current!r})")
            return updated
        updated[action.key] = not current
        return updated

    if isinstance(action, (MoveSectionByDrag, MoveSection)):
        order = normalize_section_order(effective.get_list("sectionOrder"))
        if isinstance(action, MoveSectionByDrag):
            updated["sectionOrder"] = move_by_drag(order, action.from_id, action.to_id)
        else:
            updated["sectionOrder"] = swap_adjacent(order, action.index, action.direction)
        return updated

    raise TypeError(f"Unknown edit action: {action!r}")


def reset_overrides(
    overrides: Mapping[str, Any],
    confirm: Callable[[str], bool],
) -> Dict[str, Any]:
    """
    Discard every user override after explicit confirmation.

    Args:
        overrides: Current user-override layer
        confirm: Called with a prompt; must return True to proceed

    Returns:
        Empty layer if confirmed, otherwise an unchanged copy of `overrides`
    """
    if not overrides:
        return {}

    prompt = f"Reset {len(overrides)} customized setting(s) to template defaults?"
    if not confirm(prompt):
        _log_info("Reset declined; settings unchanged")
        return dict(overrides)

    _log_info(f"Reset {len(overrides)} setting(s) to template defaults")
    return apply_edit(overrides, ResetOverrides())
