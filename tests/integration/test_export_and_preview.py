"""
Integration tests for exporting composed render trees.

Tests: resume YAML -> render tree -> JSON / YAML / HTML on disk.
"""

import json

import pytest
from omegaconf import OmegaConf

from vellum.contexts.composition import compose_resume, iter_nodes
from vellum.contexts.rendering import (
    PreviewRenderer,
    css_declarations,
    export_format,
    export_tree,
    tree_to_json,
)


@pytest.fixture
def document(sample_resume, registry):
    return compose_resume(sample_resume, registry=registry)


@pytest.mark.integration
def test_export_json(document, tmp_path):
    """Test the JSON export mirrors the tree."""
    output = tmp_path / "trees" / "resume.json"
    result = export_tree(document, output)

    assert result.success
    assert result.format == "json"
    assert result.node_count == sum(1 for _ in iter_nodes(document))

    data = json.loads(output.read_text(encoding="utf-8"))
    assert data["role"] == "document"
    assert data["key"] == "resume-fry"
    assert data["children"][0]["role"] == "page"


@pytest.mark.integration
def test_export_yaml(document, tmp_path):
    """Test the YAML export loads back with OmegaConf."""
    output = tmp_path / "resume.yml"
    result = export_tree(document, output)
    data = OmegaConf.to_container(OmegaConf.load(output))

    assert result.format == "yaml"
    assert data == json.loads(tree_to_json(document))


@pytest.mark.integration
def test_export_unknown_format(document, tmp_path):
    """Test an unknown extension fails without writing."""
    output = tmp_path / "resume.pdf"
    result = export_tree(document, output)

    assert not result.success
    assert "Cannot infer export format" in result.error
    assert not output.exists()


@pytest.mark.integration
def test_export_format_explicit():
    """Test explicit formats override the extension."""
    assert export_format("tree.txt", "JSON") == "json"
    with pytest.raises(ValueError):
        export_format("tree.json", "pdf")


@pytest.mark.integration
def test_css_declarations():
    """Test style dicts become inline CSS."""
    css = css_declarations({"fontSize": 9, "paddingHorizontal": 4, "lineHeight": 1.3, "size": "A4"})
    assert css == "font-size: 9pt; padding-left: 4pt; padding-right: 4pt; line-height: 1.3"


@pytest.mark.integration
def test_preview_html(document, tmp_path):
    """Test the HTML preview contains the resume content, escaped."""
    path = PreviewRenderer().write(document, tmp_path / "preview.html")
    html = path.read_text(encoding="utf-8")

    assert html.lstrip().lower().startswith("<!doctype html>")
    assert "<title>Philip J. Fry - Delivery Lead</title>" in html
    assert "Planet Express" in html
    assert "Panucci&#39;s Pizza" in html
    assert 'href="https://github.com/pjfry"' in html
