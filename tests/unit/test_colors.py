"""Unit tests for the colour resolver."""

import pytest

from vellum.contexts.composition.colors import ColorResolver, create_color_palette


@pytest.mark.unit
def test_targeted_and_untargeted_colors():
    """Test listed targets take the accent and others keep their fallback."""
    get_color = ColorResolver("#ff0000", ["headings", "links"])

    assert get_color("links", "#000000") == "#ff0000"
    assert get_color("text", "#000000") == "#000000"


@pytest.mark.unit
def test_unknown_target_uses_fallback():
    """Test labels the engine does not know are accepted and never coloured."""
    get_color = ColorResolver("#ff0000", ["headings", "sparkles"])
    assert get_color("nonsense", "#123456") == "#123456"
    assert get_color("sparkles", "#123456") == "#ff0000"


@pytest.mark.unit
def test_default_fallback_is_black():
    """Test the fallback defaults to black."""
    assert ColorResolver("#ff0000", [])("headings") == "#000000"


@pytest.mark.unit
@pytest.mark.parametrize("targets", [None, "headings", 42, {"headings": True}])
def test_malformed_targets_color_nothing(targets):
    """Test a missing or malformed target set behaves as an empty set."""
    get_color = ColorResolver("#ff0000", targets)
    assert get_color("headings", "#111111") == "#111111"
    assert not get_color.is_targeted("headings")


@pytest.mark.unit
def test_tuple_targets_accepted():
    """Test frozen (tuple) target lists from an EffectiveConfig work."""
    get_color = ColorResolver("#00ff00", ("icons",))
    assert get_color("icons") == "#00ff00"


@pytest.mark.unit
def test_color_palette():
    """Test the palette follows the resolver."""
    palette = create_color_palette(ColorResolver("#ff0000", ["links"]))

    assert palette.primary == "#ff0000"
    assert palette.link == "#ff0000"
    assert palette.heading == "#1a1a1a"
