"""
Integration tests for the render_resume and edit_layout command-line tools.
"""

import importlib.util
import json
import shutil
import sys
from pathlib import Path

import pytest
from loguru import logger
from typer.testing import CliRunner

from vellum.contexts.content import load_resume

SCRIPTS_PATH = Path(__file__).parents[2] / "scripts"

runner = CliRunner()


def load_script(name: str):
    spec = importlib.util.spec_from_file_location(name, SCRIPTS_PATH / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture(autouse=True)
def reset_logger():
    """Detach sinks bound to the runner's streams once a command finishes."""
    yield
    logger.remove()
    logger.add(sys.stderr, level="WARNING")


@pytest.fixture
def resume_copy(sample_resume_path, tmp_path) -> Path:
    path = tmp_path / "resume.yaml"
    shutil.copy(sample_resume_path, path)
    return path


@pytest.fixture
def render_app():
    return load_script("render_resume").app


@pytest.fixture
def edit_app():
    return load_script("edit_layout").app


# ============================================================================
# render_resume.py
# ============================================================================


@pytest.mark.integration
def test_templates_command(render_app):
    """Test listing templates."""
    result = runner.invoke(render_app, ["templates"])

    assert result.exit_code == 0
    assert "multicolumn" in result.output


@pytest.mark.integration
def test_render_command(render_app, resume_copy, tmp_path):
    """Test rendering writes the tree and the preview."""
    tree = tmp_path / "outs" / "tree.json"
    preview = tmp_path / "outs" / "preview.html"
    result = runner.invoke(
        render_app,
        [
            "render",
            str(resume_copy),
            "--template",
            "multicolumn",
            "--output",
            str(tree),
            "--preview",
            str(preview),
            "--log-dir",
            str(tmp_path / "logs"),
        ],
    )

    assert result.exit_code == 0, result.output
    assert json.loads(tree.read_text(encoding="utf-8"))["style"]["templateId"] == "multicolumn"
    assert preview.exists()
    assert (tmp_path / "logs" / "compose.log").exists()


@pytest.mark.integration
def test_render_unknown_template(render_app, resume_copy):
    """Test an explicit unknown template is an error on the command line."""
    result = runner.invoke(render_app, ["render", str(resume_copy), "--template", "nope"])
    assert result.exit_code == 1


@pytest.mark.integration
def test_render_missing_file(render_app, tmp_path):
    """Test a missing resume file is reported."""
    result = runner.invoke(render_app, ["render", str(tmp_path / "missing.yaml")])
    assert result.exit_code == 1


@pytest.mark.integration
def test_columns_command(render_app, resume_copy):
    """Test the column split printout."""
    result = runner.invoke(render_app, ["columns", str(resume_copy), "-t", "multicolumn"])

    assert result.exit_code == 0
    assert "3 column(s)" in result.output
    assert "skills, languages, interests" in result.output


# ============================================================================
# edit_layout.py
# ============================================================================


@pytest.fixture
def edit(edit_app, tmp_path):
    """Invoke the layout editor with its session log kept under tmp_path."""

    def _invoke(*args, input=None):
        return runner.invoke(edit_app, ["--log-dir", str(tmp_path / "logs"), *args], input=input)

    return _invoke


@pytest.mark.integration
def test_set_command(edit, resume_copy, tmp_path):
    """Test setting a value stores only the override."""
    result = edit("set", str(resume_copy), "columnCount", "2")

    assert result.exit_code == 0, result.output
    settings = load_resume(resume_copy).meta.layout_settings
    assert settings == {"fontSize": 10, "useBullets": True, "columnCount": 2}

    # Closing the sinks flushes the session log
    logger.remove()
    assert "Edit: set" in (tmp_path / "logs" / "layout.log").read_text(encoding="utf-8")


@pytest.mark.integration
def test_set_null_removes_override(edit, resume_copy):
    """Test null removes a key from the override layer."""
    edit("set", str(resume_copy), "fontSize", "null")
    assert "fontSize" not in load_resume(resume_copy).meta.layout_settings


@pytest.mark.integration
def test_toggle_command(edit, resume_copy):
    """Test toggling flips the effective value."""
    result = edit("toggle", str(resume_copy), "useBullets")

    assert result.exit_code == 0
    assert load_resume(resume_copy).meta.layout_settings["useBullets"] is False


@pytest.mark.integration
def test_move_and_swap_commands(edit, resume_copy):
    """Test drag and swap moves write a full section order."""
    edit("move", str(resume_copy), "skills", "summary")
    order = load_resume(resume_copy).meta.layout_settings["sectionOrder"]
    assert order[0] == "skills"

    edit("swap", str(resume_copy), "0", "--down")
    order = load_resume(resume_copy).meta.layout_settings["sectionOrder"]
    assert order[:2] == ["summary", "skills"]


@pytest.mark.integration
def test_reset_requires_confirmation(edit, resume_copy):
    """Test declining the prompt keeps the overrides."""
    result = edit("reset", str(resume_copy), input="n\n")

    assert result.exit_code == 0
    assert "Reset cancelled" in result.output
    assert load_resume(resume_copy).meta.layout_settings


@pytest.mark.integration
def test_reset_confirmed(edit, resume_copy):
    """Test --yes clears every override."""
    result = edit("reset", str(resume_copy), "--yes")

    assert result.exit_code == 0
    assert load_resume(resume_copy).meta.layout_settings == {}


@pytest.mark.integration
def test_show_command(edit, resume_copy):
    """Test printing the override layer."""
    result = edit("show", str(resume_copy))

    assert result.exit_code == 0
    assert "fontSize: 10" in result.output
