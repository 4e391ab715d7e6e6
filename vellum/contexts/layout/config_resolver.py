"""
Configuration Resolution for Resume Layout

Resolves the effective layout configuration for a render pass from three
layers, highest precedence last:

    hardcoded defaults -> template defaults -> user overrides

The template layer is itself composed from named theme presets (typography,
headings, layout, entries, contact) plus template-specific overrides.

Examples:
    # Resolve a configuration directly
    >>> config = resolve(get_hardcoded_defaults(), {"fontSize": 10}, {"fontSize": 11})
    >>> config["fontSize"]
    11

    # Compose a template layer from presets
    >>> compose_theme({"typography": "classic", "headings": "underline"})
"""

import os
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Sequence

from dotenv import load_dotenv
from omegaconf import OmegaConf

from vellum.contexts.layout.exceptions import PresetNotFoundError
from vellum.contexts.layout.logger import _log_debug, _log_warning

load_dotenv()
PRESETS_PATH = Path(
    os.getenv("VELLUM_PRESETS_PATH", Path(__file__).parent / "presets" / "themes.yaml")
)

# Order in which preset categories are layered onto a template
PRESET_CATEGORIES = ("typography", "headings", "layout", "entries", "contact")


# ============================================================================
# Effective Configuration
# ============================================================================


def _freeze(value: Any) -> Any:
    if isinstance(value, list):
        return tuple(_freeze(item) for item in value)
    if isinstance(value, dict):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, tuple):
        return [_thaw(item) for item in value]
    if isinstance(value, Mapping):
        return {key: _thaw(item) for key, item in value.items()}
    return value


class EffectiveConfig(Mapping):
    """
    Immutable, fully-resolved layout configuration for one render pass.

    Behaves as a read-only mapping. List values are stored as tuples so that
    no renderer can mutate shared state. The typed getters fail closed:
    a value of the wrong type yields the caller's default and a warning.
    """

    def __init__(self, values: Mapping[str, Any]):
        self._values = MappingProxyType({key: _freeze(value) for key, value in values.items()})

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"EffectiveConfig({len(self._values)} keys)"

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Return a boolean setting, or default if absent or not a bool."""
        value = self._values.get(key)
        if value is None:
            return default
        if not isinstance(value, bool):
            _log_warning(f"Setting '{key}' expected bool, got {value!r}; using {default!r}")
            return default
        return value

    def get_number(self, key: str, default: float = 0) -> float:
        """Return a numeric setting, or default if absent or not a number."""
        value = self._values.get(key)
        if value is None:
            return default
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            _log_warning(f"Setting '{key}' expected number, got {value!r}; using {default!r}")
            return default
        return value

    def get_choice(self, key: str, allowed: Iterable[Any], default: Any) -> Any:
        """Return a setting restricted to an allowed set, or default otherwise."""
        value = self._values.get(key)
        if value is None:
            return default
        if isinstance(value, bool) != isinstance(default, bool) or value not in tuple(allowed):
            _log_warning(f"Setting '{key}' has unsupported value {value!r}; using {default!r}")
            return default
        return value

    def get_list(self, key: str, default: Sequence[Any] = ()) -> List[Any]:
        """Return a list setting as a fresh list, or default if not a sequence."""
        value = self._values.get(key)
        if value is None:
            return list(default)
        if not isinstance(value, tuple):
            _log_warning(f"Setting '{key}' expected list, got {value!r}; using {list(default)!r}")
            return list(default)
        return list(value)

    def to_dict(self) -> Dict[str, Any]:
        """Return a mutable deep copy with lists restored."""
        return {key: _thaw(value) for key, value in self._values.items()}


def resolve(
    hardcoded_defaults: Mapping[str, Any],
    template_defaults: Optional[Mapping[str, Any]],
    user_overrides: Optional[Mapping[str, Any]],
) -> EffectiveConfig:
    """
    Merge the three configuration layers into an EffectiveConfig.

    For every key, the user override wins when present, else the template
    default, else the hardcoded default. A value counts as present unless it
    is missing or None: False, 0, "" and [] are legitimate overrides. Keys the
    hardcoded layer does not define are ignored.

    Args:
        hardcoded_defaults: Total bottom layer (defines the key set)
        template_defaults: Template layer (may be partial or None)
        user_overrides: User layer (may be partial or None)

    Returns:
        Immutable EffectiveConfig

    Examples:
        >>> resolve({"x": 1}, {"x": 2}, {"x": None})["x"]
        2
        >>> resolve({"x": 1}, {"x": 2}, {"x": 0})["x"]
        0
    """
    resolved = dict(hardcoded_defaults)

    for layer_name, layer in (("template", template_defaults), ("user", user_overrides)):
        if not layer:
            continue
        for key, value in layer.items():
            if key not in hardcoded_defaults:
                _log_debug(f"Ignoring unknown {layer_name} setting '{key}'")
                continue
            if value is None:
                continue
            resolved[key] = value

    return EffectiveConfig(resolved)


# ============================================================================
# Theme Presets
# ============================================================================


def load_theme_presets(config_path: Path = None) -> Dict[str, Dict[str, Any]]:
    """
    Load themes.yaml and flatten to a single-level dict.

    Collapses nested structure: typography.modern -> typography_modern

    Args:
        config_path: Optional path to presets file (defaults to VELLUM_PRESETS_PATH)

    Returns:
        Flattened dict mapping preset names to setting dicts
        Example: {"typography_modern": {...}, "headings_framed": {...}}
    """
    if config_path is None:
        config_path = PRESETS_PATH

    nested = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)

    flattened = {}
    for category, presets in nested.items():
        for name, config in presets.items():
            flattened[f"{category}_{name}"] = config

    return flattened


def compose_theme(
    theme: Mapping[str, str],
    overrides: Optional[Mapping[str, Any]] = None,
    presets: Optional[Dict[str, Dict[str, Any]]] = None,
) -> Dict[str, Any]:
    """
    Compose a template layer from preset selections and overrides.

    Presets are layered in PRESET_CATEGORIES order, each replacing keys set by
    earlier ones; overrides are applied last. List values are replaced
    wholesale, never merged.

    Args:
        theme: Category -> preset name (e.g., {"typography": "classic"})
        overrides: Template-specific settings applied after the presets
        presets: Pre-loaded flattened presets (defaults to load_theme_presets())

    Returns:
        Partial settings dict forming the template layer

    Raises:
        PresetNotFoundError: If a selected preset does not exist
    """
    if presets is None:
        presets = load_theme_presets()

    composed: Dict[str, Any] = {}
    for category in PRESET_CATEGORIES:
        preset_name = theme.get(category)
        if not preset_name:
            continue
        key = f"{category}_{preset_name}"
        if key not in presets:
            raise PresetNotFoundError(key, PRESETS_PATH)
        composed.update(presets[key])

    if overrides:
        composed.update(overrides)

    return composed
