"""
Template Registry

Loads template definitions from templates.yaml and caches their composed
default settings (the template layer of the configuration cascade).
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf

from vellum.contexts.layout.column_distributor import DEFAULT_MEMBERSHIP, ColumnMembership
from vellum.contexts.layout.config_resolver import (
    EffectiveConfig,
    compose_theme,
    load_theme_presets,
    resolve,
)
from vellum.contexts.layout.defaults import DEFAULT_THEME_COLOR, HARDCODED_DEFAULTS
from vellum.contexts.layout.exceptions import TemplateNotFoundError
from vellum.contexts.layout.logger import _log_debug, _log_warning

load_dotenv()
TEMPLATES_PATH = Path(
    os.getenv("VELLUM_TEMPLATES_PATH", Path(__file__).parent / "presets" / "templates.yaml")
)

FALLBACK_TEMPLATE_ID = "ats"

LAYOUT_TYPES = (
    "single-column",
    "single-column-centered",
    "two-column-sidebar-left",
    "two-column-sidebar-right",
    "two-column-equal",
    "creative-sidebar",
)


@dataclass
class TemplateSpec:
    """
    A template definition.

    Attributes:
        id: Template identifier (e.g., "classic")
        name: Display name
        layout_type: Page structure (see LAYOUT_TYPES)
        theme_color: Default accent colour when the resume sets none
        theme: Category -> preset name selections
        overrides: Template-specific settings applied after the presets
        membership: Column membership used when the page is split
    """

    id: str
    name: str
    layout_type: str = "single-column"
    theme_color: str = DEFAULT_THEME_COLOR
    theme: Dict[str, str] = field(default_factory=dict)
    overrides: Dict[str, Any] = field(default_factory=dict)
    membership: ColumnMembership = DEFAULT_MEMBERSHIP

    @classmethod
    def from_dict(cls, template_id: str, raw: Mapping[str, Any]) -> "TemplateSpec":
        columns = raw.get("columns") or {}
        if columns:
            membership = ColumnMembership.from_lists(
                left=columns.get("left"), main=columns.get("main"), right=columns.get("right")
            )
        else:
            membership = DEFAULT_MEMBERSHIP

        layout_type = raw.get("layout_type", "single-column")
        if layout_type not in LAYOUT_TYPES:
            _log_warning(f"Template '{template_id}' has unknown layout type '{layout_type}'")
            layout_type = "single-column"

        return cls(
            id=template_id,
            name=raw.get("name", template_id),
            layout_type=layout_type,
            theme_color=raw.get("theme_color") or DEFAULT_THEME_COLOR,
            theme=dict(raw.get("theme") or {}),
            overrides=dict(raw.get("overrides") or {}),
            membership=membership,
        )


class TemplateRegistry:
    """
    Registry for loading template definitions and caching composed defaults.

    Template defaults are composed from theme presets on first access and
    cached by template id.
    """

    def __init__(self, templates_path: Path = None, presets_path: Path = None):
        """
        Initialize the template registry.

        Args:
            templates_path: Template definitions YAML. Defaults to VELLUM_TEMPLATES_PATH
            presets_path: Theme presets YAML. Defaults to VELLUM_PRESETS_PATH
        """
        if templates_path is None:
            templates_path = TEMPLATES_PATH

        self.templates_path = Path(templates_path)
        self.presets_path = presets_path
        raw = OmegaConf.to_container(OmegaConf.load(self.templates_path), resolve=True)
        self._templates: Dict[str, TemplateSpec] = {
            template_id: TemplateSpec.from_dict(template_id, definition)
            for template_id, definition in raw.items()
        }
        self._presets: Optional[Dict[str, Dict[str, Any]]] = None
        self._cache: Dict[str, Dict[str, Any]] = {}

    def list_templates(self) -> List[TemplateSpec]:
        """Return all template definitions in file order."""
        return list(self._templates.values())

    def get_template(self, template_id: str) -> TemplateSpec:
        """
        Get a template definition by id.

        Raises:
            TemplateNotFoundError: If the template is not defined
        """
        if template_id not in self._templates:
            raise TemplateNotFoundError(template_id, self._templates.keys())
        return self._templates[template_id]

    def resolve_template(self, template_id: Optional[str]) -> TemplateSpec:
        """
        Get a template definition, falling back to the ATS template.

        Unknown or missing ids never fail a render.
        """
        if template_id in self._templates:
            return self._templates[template_id]
        _log_warning(f"Unknown template '{template_id}', falling back to '{FALLBACK_TEMPLATE_ID}'")
        return self._templates[FALLBACK_TEMPLATE_ID]

    def get_template_defaults(self, template_id: Optional[str]) -> Dict[str, Any]:
        """
        Get the composed template layer for a template, loading and caching it.

        Args:
            template_id: Template id (unknown ids fall back to "ats")

        Returns:
            Copy of the template's default settings
        """
        spec = self.resolve_template(template_id)

        if spec.id not in self._cache:
            if self._presets is None:
                self._presets = load_theme_presets(self.presets_path)
            self._cache[spec.id] = compose_theme(spec.theme, spec.overrides, self._presets)
            _log_debug(f"Composed defaults for template '{spec.id}' ({len(self._cache[spec.id])} keys)")

        return dict(self._cache[spec.id])

    def get_template_theme_color(self, template_id: Optional[str]) -> str:
        """Return the template's default accent colour."""
        return self.resolve_template(template_id).theme_color

    def resolve_config(
        self, template_id: Optional[str], user_overrides: Optional[Mapping[str, Any]] = None
    ) -> EffectiveConfig:
        """
        Resolve hardcoded defaults, this template's defaults and user overrides.

        Example:
            >>> registry.resolve_config("classic", {"fontSize": 10})["fontSize"]
            10
        """
        return resolve(HARDCODED_DEFAULTS, self.get_template_defaults(template_id), user_overrides)

    def clear_cache(self):
        """Clear the composed defaults cache."""
        self._cache.clear()
        self._presets = None

    def is_cached(self, template_id: str) -> bool:
        """
        Check if a template's composed defaults are in the cache.

        Args:
            template_id: Template id

        Returns:
            True if cached, False otherwise
        """
        return template_id in self._cache


_default_registry: Optional[TemplateRegistry] = None


def get_template_registry() -> TemplateRegistry:
    """Return the shared registry built from the configured YAML files."""
    global _default_registry
    if _default_registry is None:
        _default_registry = TemplateRegistry()
    return _default_registry


def get_template_defaults(template_id: Optional[str]) -> Dict[str, Any]:
    """Module-level shortcut for get_template_registry().get_template_defaults()."""
    return get_template_registry().get_template_defaults(template_id)


def resolve_for_template(
    template_id: Optional[str], user_overrides: Optional[Mapping[str, Any]] = None
) -> EffectiveConfig:
    """Module-level shortcut for get_template_registry().resolve_config()."""
    return get_template_registry().resolve_config(template_id, user_overrides)
