"""Custom exceptions for the layout context."""

from pathlib import Path
from typing import Iterable, Optional


class TemplateNotFoundError(KeyError):
    """
    Exception raised when a template id is not defined.

    Only raised by strict lookups; rendering paths fall back to the ATS
    template instead.

    Attributes:
        template_id: The id that was requested
        available: Template ids that do exist
    """

    def __init__(self, template_id: str, available: Iterable[str] = ()):
        self.template_id = template_id
        self.available = sorted(available)
        message = f"Template '{template_id}' not found. Available templates: {self.available}"
        super().__init__(message)

    def __str__(self) -> str:
        return self.args[0]


class PresetNotFoundError(ValueError):
    """
    Exception raised when a template references an undefined theme preset.

    Attributes:
        preset_name: Flattened preset name (e.g., 'typography_modern')
        presets_path: YAML file the presets were loaded from
    """

    def __init__(self, preset_name: str, presets_path: Optional[Path] = None):
        self.preset_name = preset_name
        self.presets_path = presets_path

        parts = [f"Preset '{preset_name}' not found"]
        if presets_path:
            parts.append(f"Presets file: {presets_path}")

        super().__init__("\n".join(parts))
