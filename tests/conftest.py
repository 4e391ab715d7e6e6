"""Shared fixtures for VELLUM tests."""

from pathlib import Path

import pytest

from vellum.contexts.composition.colors import ColorResolver
from vellum.contexts.composition.typography import create_font_config
from vellum.contexts.content import load_resume
from vellum.contexts.layout.config_resolver import resolve
from vellum.contexts.layout.defaults import HARDCODED_DEFAULTS
from vellum.contexts.layout.template_registry import TemplateRegistry

FIXTURES_PATH = Path(__file__).parent / "fixtures"

ACCENT = "#ff0000"


@pytest.fixture
def sample_resume_path() -> Path:
    return FIXTURES_PATH / "sample_resume.yaml"


@pytest.fixture
def sample_resume(sample_resume_path):
    return load_resume(sample_resume_path)


@pytest.fixture
def make_config():
    """Build an effective configuration from hardcoded defaults plus overrides."""

    def _make(**overrides):
        return resolve(HARDCODED_DEFAULTS, None, overrides)

    return _make


@pytest.fixture
def config(make_config):
    return make_config()


@pytest.fixture
def fonts():
    return create_font_config("Roboto")


@pytest.fixture
def get_color():
    return ColorResolver(ACCENT, ["headings", "links", "icons", "decorations"])


@pytest.fixture
def registry() -> TemplateRegistry:
    return TemplateRegistry()
