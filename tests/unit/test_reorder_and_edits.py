"""Unit tests for section reordering and the layout edit reducer."""

import pytest

from vellum.contexts.layout.config_resolver import EffectiveConfig
from vellum.contexts.layout.defaults import SECTION_IDS
from vellum.contexts.layout.edits import (
    MoveSection,
    MoveSectionByDrag,
    ResetOverrides,
    SetSetting,
    ToggleSetting,
    apply_edit,
    reset_overrides,
)
from vellum.contexts.layout.reorder import move_by_drag, swap_adjacent


# ============================================================================
# Reorder
# ============================================================================


@pytest.mark.unit
def test_swap_adjacent_up():
    """Test swapping the middle element upward."""
    order = ["work", "education", "skills"]
    assert swap_adjacent(order, 1) == ["education", "work", "skills"]
    assert order == ["work", "education", "skills"]


@pytest.mark.unit
def test_swap_adjacent_down():
    """Test swapping downward."""
    assert swap_adjacent(["a", "b", "c"], 1, "down") == ["a", "c", "b"]


@pytest.mark.unit
@pytest.mark.parametrize(
    "index,direction",
    [(0, "up"), (2, "down"), (-1, "up"), (5, "up"), (1, "sideways")],
)
def test_swap_adjacent_boundaries_are_no_ops(index, direction):
    """Test moves past either end or with bad arguments change nothing."""
    assert swap_adjacent(["a", "b", "c"], index, direction) == ["a", "b", "c"]


@pytest.mark.unit
def test_move_by_drag_forward():
    """Test dragging an element onto a later position."""
    assert move_by_drag(["a", "b", "c", "d"], "a", "c") == ["b", "c", "a", "d"]


@pytest.mark.unit
def test_move_by_drag_backward():
    """Test dragging an element onto an earlier position."""
    assert move_by_drag(["a", "b", "c", "d"], "d", "b") == ["a", "d", "b", "c"]


@pytest.mark.unit
@pytest.mark.parametrize("from_id,to_id", [("a", "a"), ("x", "b"), ("a", "x")])
def test_move_by_drag_no_ops(from_id, to_id):
    """Test self-drops and unknown ids leave the order unchanged."""
    assert move_by_drag(["a", "b", "c"], from_id, to_id) == ["a", "b", "c"]


@pytest.mark.unit
def test_reorders_are_permutations():
    """Test every reorder returns the same multiset of ids."""
    order = list(SECTION_IDS)
    for result in (move_by_drag(order, "custom", "summary"), swap_adjacent(order, 4, "down")):
        assert sorted(result) == sorted(order)
        assert len(result) == len(order)


# ============================================================================
# Edit Reducer
# ============================================================================


@pytest.fixture
def effective():
    return EffectiveConfig({"useBullets": True, "fontSize": 9, "sectionOrder": list(SECTION_IDS)})


@pytest.mark.unit
def test_set_setting_returns_new_layer():
    """Test setting a value leaves the input layer untouched."""
    overrides = {"fontSize": 10}
    updated = apply_edit(overrides, SetSetting("fontSize", 11))

    assert updated == {"fontSize": 11}
    assert overrides == {"fontSize": 10}


@pytest.mark.unit
def test_set_setting_none_removes_override():
    """Test a None value removes the key from the layer."""
    assert apply_edit({"fontSize": 10}, SetSetting("fontSize", None)) == {}


@pytest.mark.unit
def test_toggle_uses_effective_value(effective):
    """Test toggling flips the effective value, not the override."""
    assert apply_edit({}, ToggleSetting("useBullets"), effective) == {"useBullets": False}


@pytest.mark.unit
def test_toggle_non_boolean_is_ignored(effective):
    """Test toggling a number leaves the layer unchanged."""
    assert apply_edit({"x": 1}, ToggleSetting("fontSize"), effective) == {"x": 1}


@pytest.mark.unit
def test_move_section(effective):
    """Test moving a section writes the full new order."""
    updated = apply_edit({}, MoveSection(index=1, direction="up"), effective)
    assert updated["sectionOrder"][:2] == ["work", "summary"]


@pytest.mark.unit
def test_move_section_by_drag(effective):
    """Test dragging writes a permutation of the known ids."""
    updated = apply_edit({}, MoveSectionByDrag("custom", "summary"), effective)

    assert updated["sectionOrder"][0] == "custom"
    assert sorted(updated["sectionOrder"]) == sorted(SECTION_IDS)


@pytest.mark.unit
@pytest.mark.parametrize("action", [ToggleSetting("useBullets"), MoveSection(0), MoveSectionByDrag("a", "b")])
def test_actions_needing_effective_config(action):
    """Test toggles and moves refuse to run without the effective configuration."""
    with pytest.raises(ValueError):
        apply_edit({}, action)


@pytest.mark.unit
def test_unknown_action():
    """Test anything that is not an EditAction raises TypeError."""
    with pytest.raises(TypeError):
        apply_edit({}, "make it pretty")


@pytest.mark.unit
def test_reset_overrides_action():
    """Test ResetOverrides empties the layer."""
    assert apply_edit({"fontSize": 10, "useBullets": False}, ResetOverrides()) == {}


@pytest.mark.unit
def test_reset_requires_confirmation():
    """Test a declined confirmation keeps every override."""
    prompts = []

    def decline(prompt):
        prompts.append(prompt)
        return False

    overrides = {"fontSize": 10}
    assert reset_overrides(overrides, decline) == {"fontSize": 10}
    assert len(prompts) == 1


@pytest.mark.unit
def test_reset_confirmed():
    """Test a confirmed reset empties the layer."""
    assert reset_overrides({"fontSize": 10}, lambda prompt: True) == {}


@pytest.mark.unit
def test_reset_empty_layer_does_not_prompt():
    """Test nothing is asked when there is nothing to reset."""

    def fail(prompt):
        raise AssertionError("confirmation should not be requested")

    assert reset_overrides({}, fail) == {}
