"""Unit tests for page geometry and the document header."""

import pytest

from vellum.contexts.composition.composer import column_widths, mm_to_pt, render_header
from vellum.contexts.composition.render_tree import collect_text, find_by_role
from vellum.contexts.content import Resume


@pytest.mark.unit
def test_mm_to_pt():
    """Test millimetre conversion."""
    assert mm_to_pt(10) == 28.35
    assert mm_to_pt(0) == 0


@pytest.mark.unit
def test_column_widths():
    """Test widths for one, two and three columns."""
    assert column_widths(1, 30) == {"main": 100}
    assert column_widths(2, 30) == {"left": 30, "main": 66}
    assert column_widths(3, 25) == {"left": 25, "main": 42, "right": 25}


@pytest.mark.unit
def test_column_widths_are_clamped():
    """Test extreme side widths are clamped."""
    assert column_widths(2, 90)["left"] == 48
    assert column_widths(2, 0)["left"] == 10
    assert column_widths(3, 45)["left"] == 30
    assert column_widths(7, 30) == {"main": 100}


@pytest.mark.unit
def test_header(sample_resume, config, fonts, get_color):
    """Test the header shows name, headline and contact items."""
    header = render_header(sample_resume, config, fonts, get_color)

    assert [run.text for run in find_by_role(header, "name")] == ["Philip J. Fry"]
    assert [run.text for run in find_by_role(header, "headline")] == ["Senior Delivery Boy"]
    contacts = [node.text for node in find_by_role(header, "contact")]
    assert contacts[:2] == ["fry@planetexpress.com", "+1 555 0100"]
    assert "New New York, USA" in contacts
    assert "planetexpress.com" in contacts
    assert find_by_role(header, "profile-image") == []


@pytest.mark.unit
def test_header_stacked_arrangement(sample_resume, make_config, fonts, get_color):
    """Test arrangement 2 stacks contact items without separators."""
    header = render_header(sample_resume, make_config(personalDetailsArrangement=2), fonts, get_color)
    assert find_by_role(header, "separator") == []


@pytest.mark.unit
def test_header_profile_image(sample_resume, make_config, fonts, get_color):
    """Test the profile image appears only when enabled."""
    config = make_config(showProfileImage=True, profileImageSize="L", profileImageShape="square")
    header = render_header(sample_resume, config, fonts, get_color)
    image = find_by_role(header, "profile-image")[0]

    assert image.src == "https://example.com/fry.png"
    assert image.style["width"] == 120
    assert image.style["borderRadius"] == 0


@pytest.mark.unit
def test_header_empty_resume(config, fonts, get_color):
    """Test a resume without personal details has no header."""
    assert render_header(Resume(), config, fonts, get_color) is None


@pytest.mark.unit
def test_header_name_only(config, fonts, get_color):
    """Test absent fields are omitted."""
    resume = Resume()
    resume.basics.name = "Ada"
    header = render_header(resume, config, fonts, get_color)

    assert collect_text(header) == "Ada"
