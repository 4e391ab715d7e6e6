"""
Integration tests for composing a complete resume.

Tests: resume YAML -> effective config -> render tree, across templates.
Covers:
- Section presence and order in single-column templates
- Column split of two- and three-column templates
- Header placement (top of page or top of the sidebar)
- Accent colour and override precedence
"""

import pytest

from vellum.contexts.composition import (
    collect_text,
    compose_resume,
    find_by_role,
    find_section,
)
from vellum.contexts.content import Resume


def column_keys(document):
    return {
        column.key: [node.key for node in column.children if node.role in ("section", "section-group")]
        for column in find_by_role(document, "column")
    }


@pytest.mark.integration
def test_compose_classic(sample_resume, registry):
    """Test the stored template renders every section with data in one column."""
    document = compose_resume(sample_resume, registry=registry)

    assert document.role == "document"
    assert document.key == "resume-fry"
    assert document.style["templateId"] == "classic"
    assert document.style["accentColor"] == "#c2410c"

    columns = column_keys(document)
    assert list(columns) == ["main"]
    # Publications are empty and never rendered
    assert columns["main"] == [
        "summary",
        "work",
        "education",
        "skills",
        "projects",
        "certificates",
        "languages",
        "interests",
        "awards",
        "references",
        "custom",
    ]


@pytest.mark.integration
def test_page_geometry(sample_resume, registry):
    """Test page padding converts millimetres and font size follows the override."""
    document = compose_resume(sample_resume, registry=registry)
    page = document.children[0]

    assert page.role == "page"
    assert page.style["size"] == "A4"
    assert page.style["paddingHorizontal"] == 34.02
    assert page.style["fontSize"] == 10
    assert page.style["fontFamily"] == "Times-Roman"


@pytest.mark.integration
def test_compose_multicolumn(sample_resume, registry):
    """Test a three-column template splits sections by membership."""
    document = compose_resume(sample_resume, "multicolumn", registry=registry)
    columns = column_keys(document)

    assert columns["left"] == ["skills", "languages", "interests"]
    assert columns["main"] == ["summary", "work", "projects", "custom"]
    assert columns["right"] == ["education", "certificates", "awards", "references"]
    widths = [column.style["width"] for column in find_by_role(document, "column")]
    assert widths == ["25%", "42%", "25%"]


@pytest.mark.integration
def test_multicolumn_header_has_profile_image(sample_resume, registry):
    """Test templates enabling the profile image render it in the header."""
    document = compose_resume(sample_resume, "multicolumn", registry=registry)
    header = find_by_role(document, "header")[0]

    assert find_by_role(header, "profile-image")


@pytest.mark.integration
def test_professional_header_in_sidebar(sample_resume, registry):
    """Test a left header position moves the header into the left column."""
    document = compose_resume(sample_resume, "professional", registry=registry)
    left = find_by_role(document, "column")[0]

    assert left.key == "left"
    assert left.children[0].role == "header"
    page = document.children[0]
    assert [child.role for child in page.children] == ["columns"]


@pytest.mark.integration
def test_overrides_column_count(sample_resume, registry):
    """Test a user column count splits a single-column template."""
    overrides = dict(sample_resume.meta.layout_settings, columnCount=2)
    document = compose_resume(sample_resume, "classic", registry=registry, overrides=overrides)
    columns = column_keys(document)

    assert list(columns) == ["left", "main"]
    assert columns["main"] == ["summary", "work", "projects", "custom"]
    assert "skills" in columns["left"]


@pytest.mark.integration
def test_user_section_order(sample_resume, registry):
    """Test a stored section order is followed and completed."""
    overrides = {"sectionOrder": ["skills", "work"]}
    document = compose_resume(sample_resume, "ats", registry=registry, overrides=overrides)
    keys = column_keys(document)["main"]

    assert keys[:2] == ["skills", "work"]
    assert "summary" in keys


@pytest.mark.integration
def test_unknown_template_falls_back(sample_resume, registry):
    """Test an unknown template id renders with ATS."""
    document = compose_resume(sample_resume, "does-not-exist", registry=registry)
    assert document.style["templateId"] == "ats"


@pytest.mark.integration
def test_template_theme_color_used_without_resume_color(sample_resume, registry):
    """Test the template colour applies when the resume sets none."""
    sample_resume.meta.theme_color = None
    document = compose_resume(sample_resume, "modern", registry=registry)
    heading = find_by_role(find_section(document, "work"), "heading-text")[0]

    assert document.style["accentColor"] == "#10b981"
    assert heading.style["color"] == "#10b981"


@pytest.mark.integration
def test_theme_color_targets(sample_resume, registry):
    """Test only targeted elements take the accent colour."""
    overrides = {"themeColorTarget": ["links"]}
    document = compose_resume(sample_resume, "ats", registry=registry, overrides=overrides)
    heading = find_by_role(find_section(document, "work"), "heading-text")[0]

    assert heading.style["color"] != "#c2410c"


@pytest.mark.integration
def test_hidden_heading_override(sample_resume, registry):
    """Test a per-section heading toggle."""
    document = compose_resume(sample_resume, "ats", registry=registry, overrides={"workHeadingVisible": False})

    assert find_by_role(find_section(document, "work"), "heading") == []
    assert find_by_role(find_section(document, "education"), "heading")


@pytest.mark.integration
def test_custom_section_heading(sample_resume, registry):
    """Test each custom section renders under its own name."""
    document = compose_resume(sample_resume, registry=registry)
    volunteer = find_section(document, "custom-volunteer")

    assert "VOLUNTEERING" in collect_text(volunteer)
    assert "Robot Rights Rally" in collect_text(volunteer)


@pytest.mark.integration
def test_compose_empty_resume(registry):
    """Test an empty resume composes to an empty page."""
    document = compose_resume(Resume(), registry=registry)

    assert find_by_role(document, "section") == []
    assert find_by_role(document, "header") == []
