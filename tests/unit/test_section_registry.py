"""Unit tests for the section registry."""

import pytest

from vellum.contexts.composition.section_registry import (
    SECTION_DESCRIPTORS,
    RenderProps,
    get_data,
    has_data,
    render_many,
    render_one,
)
from vellum.contexts.content import Resume
from vellum.contexts.layout.column_distributor import DEFAULT_MEMBERSHIP
from vellum.contexts.layout.defaults import SECTION_IDS


@pytest.fixture
def props(sample_resume, config, fonts, get_color):
    return RenderProps(resume=sample_resume, config=config, fonts=fonts, font_size=9, get_color=get_color)


@pytest.mark.unit
def test_every_section_has_a_descriptor():
    """Test the table covers exactly the twelve section ids."""
    assert set(SECTION_DESCRIPTORS) == set(SECTION_IDS)


@pytest.mark.unit
def test_default_columns_match_default_membership():
    """Test each descriptor's default column is the one the distributor uses."""
    columns = {"left": set(), "main": set()}
    for section_id, descriptor in SECTION_DESCRIPTORS.items():
        columns[descriptor.default_column].add(section_id)

    assert columns["left"] == DEFAULT_MEMBERSHIP.left
    assert columns["main"] == DEFAULT_MEMBERSHIP.main
    assert SECTION_DESCRIPTORS["skills"].default_column == "left"
    assert SECTION_DESCRIPTORS["work"].default_column == "main"


@pytest.mark.unit
def test_get_data(sample_resume):
    """Test accessors return the section's collection or summary text."""
    assert get_data(sample_resume, "summary") == sample_resume.basics.summary
    assert get_data(sample_resume, "work") is sample_resume.work
    assert get_data(sample_resume, "bogus") is None


@pytest.mark.unit
def test_has_data(sample_resume):
    """Test empty collections, blank summaries and unknown ids have no data."""
    assert has_data(sample_resume, "work")
    assert not has_data(sample_resume, "publications")
    assert not has_data(sample_resume, "bogus")

    blank = Resume()
    blank.basics.summary = "  "
    assert not has_data(blank, "summary")


@pytest.mark.unit
def test_render_one_unknown_id(props):
    """Test unknown ids render nothing."""
    assert render_one("bogus", props) is None


@pytest.mark.unit
def test_render_one_uses_title_override(props):
    """Test per-section title overrides reach the heading."""
    props.titles = {"work": "Experience"}
    node = render_one("work", props)

    assert node.key == "work"
    assert node.children[0].children[0].text == "EXPERIENCE"


@pytest.mark.unit
def test_render_many_keeps_order_and_skips_empty(props):
    """Test sections render in order with empty and unknown ones skipped."""
    nodes = render_many(["skills", "publications", "bogus", "work"], props)
    assert [node.key for node in nodes] == ["skills", "work"]


@pytest.mark.unit
def test_render_many_include_exclude(props):
    """Test include restricts and exclude removes sections."""
    order = ["summary", "work", "skills", "education"]

    included = render_many(order, props, include=["work", "skills"])
    excluded = render_many(order, props, include=["work", "skills"], exclude=["skills"])

    assert [node.key for node in included] == ["work", "skills"]
    assert [node.key for node in excluded] == ["work"]


@pytest.mark.unit
def test_renderer_failure_omits_only_that_section(props):
    """Test malformed data in one section does not stop the others."""
    props.resume.skills = [None]
    nodes = render_many(["summary", "skills", "work"], props)

    assert [node.key for node in nodes] == ["summary", "work"]
