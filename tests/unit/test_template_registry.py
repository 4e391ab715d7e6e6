"""Unit tests for TemplateRegistry class."""

import pytest

from vellum.contexts.layout.config_resolver import load_theme_presets
from vellum.contexts.layout.defaults import HARDCODED_DEFAULTS
from vellum.contexts.layout.exceptions import TemplateNotFoundError
from vellum.contexts.layout.template_registry import (
    FALLBACK_TEMPLATE_ID,
    TemplateRegistry,
    TemplateSpec,
    get_template_registry,
)


@pytest.mark.unit
def test_template_registry_init(registry):
    """Test TemplateRegistry initialization."""
    assert registry.templates_path.exists()
    assert registry._cache == {}


@pytest.mark.unit
def test_list_templates(registry):
    """Test every defined template is listed, ATS first."""
    ids = [spec.id for spec in registry.list_templates()]

    assert ids[0] == "ats"
    assert {"classic", "creative", "professional", "multicolumn"} <= set(ids)


@pytest.mark.unit
def test_get_template_not_found(registry):
    """Test strict lookup raises for unknown templates."""
    with pytest.raises(TemplateNotFoundError) as excinfo:
        registry.get_template("nonexistent")

    assert excinfo.value.template_id == "nonexistent"
    assert "ats" in excinfo.value.available


@pytest.mark.unit
@pytest.mark.parametrize("template_id", ["nonexistent", None, ""])
def test_resolve_template_falls_back_to_ats(registry, template_id):
    """Test rendering lookups never fail."""
    assert registry.resolve_template(template_id).id == FALLBACK_TEMPLATE_ID


@pytest.mark.unit
def test_template_caching(registry):
    """Test composed defaults are cached after first load."""
    assert not registry.is_cached("classic")

    first = registry.get_template_defaults("classic")
    assert registry.is_cached("classic")

    # Returned dicts are copies of the cached layer
    first["fontSize"] = 99
    assert registry.get_template_defaults("classic")["fontSize"] == 8.5


@pytest.mark.unit
def test_clear_cache(registry):
    """Test cache clearing."""
    registry.get_template_defaults("ats")
    registry.clear_cache()
    assert len(registry._cache) == 0


@pytest.mark.unit
def test_template_overrides_follow_presets(registry):
    """Test template overrides are layered after the presets."""
    defaults = registry.get_template_defaults("classic")

    assert defaults["fontFamily"] == "Times-Roman"
    assert defaults["fontSize"] == 8.5
    assert defaults["experienceCompanyListStyle"] == "bullet"


@pytest.mark.unit
def test_presets_and_templates_only_set_known_settings(registry):
    """Test every preset and template key is a setting the renderers read."""
    for name, preset in load_theme_presets().items():
        assert set(preset) <= set(HARDCODED_DEFAULTS), name
    for spec in registry.list_templates():
        assert set(spec.overrides) <= set(HARDCODED_DEFAULTS), spec.id


@pytest.mark.unit
def test_creative_degree_line_is_italic(registry):
    """Test the creative template styles the degree line through the degree field."""
    config = registry.resolve_config("creative")
    assert config["educationDegreeItalic"] is True


@pytest.mark.unit
def test_resolve_config_applies_user_overrides(registry):
    """Test the full cascade through the registry."""
    config = registry.resolve_config("classic", {"fontSize": 10})

    assert config["fontSize"] == 10
    assert config["fontFamily"] == "Times-Roman"
    assert config["useBullets"] is True


@pytest.mark.unit
def test_multicolumn_membership(registry):
    """Test three-column membership is read from the template file."""
    spec = registry.get_template("multicolumn")

    assert spec.membership.left == frozenset({"skills", "languages", "interests"})
    assert "education" in spec.membership.right
    assert registry.resolve_config("multicolumn")["columnCount"] == 3


@pytest.mark.unit
def test_theme_color(registry):
    """Test each template supplies a default accent colour."""
    assert registry.get_template_theme_color("modern") == "#10b981"
    assert registry.get_template_theme_color("bogus") == registry.get_template_theme_color("ats")


@pytest.mark.unit
def test_template_spec_unknown_layout_type():
    """Test unknown layout types degrade to single-column."""
    spec = TemplateSpec.from_dict("odd", {"layout_type": "hexagonal"})

    assert spec.layout_type == "single-column"
    assert spec.name == "odd"


@pytest.mark.unit
def test_custom_templates_file(tmp_path):
    """Test a registry built from another templates file."""
    templates = tmp_path / "templates.yaml"
    templates.write_text(
        "ats:\n"
        "  name: Plain\n"
        "  theme: {}\n"
        "  overrides:\n"
        "    fontSize: 12\n"
    )
    registry = TemplateRegistry(templates_path=templates)

    assert registry.resolve_config("anything")["fontSize"] == 12


@pytest.mark.unit
def test_shared_registry_is_singleton():
    """Test the module-level registry is built once."""
    assert get_template_registry() is get_template_registry()
