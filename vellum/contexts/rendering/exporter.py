"""
Render Tree Export

Writes a composed render tree to JSON or YAML for handoff to a PDF or
preview backend.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from omegaconf import OmegaConf

from vellum.contexts.composition.render_tree import Container, iter_nodes
from vellum.contexts.rendering.logger import _log_error, _log_info, _log_success

EXPORT_FORMATS = {".json": "json", ".yaml": "yaml", ".yml": "yaml"}


@dataclass
class ExportResult:
    """
    Result of exporting a render tree.

    Attributes:
        success: Whether the file was written
        output_path: Path written (None if failed)
        format: "json" or "yaml"
        node_count: Number of nodes in the exported tree
        error: Error message when the export failed
    """

    success: bool
    output_path: Optional[Path] = None
    format: str = ""
    node_count: int = 0
    error: str = ""


def tree_to_json(tree: Container, indent: int = 2) -> str:
    """Serialize a render tree to a JSON string."""
    return json.dumps(tree.to_dict(), indent=indent, ensure_ascii=False)


def tree_to_yaml(tree: Container) -> str:
    """Serialize a render tree to a YAML string."""
    return OmegaConf.to_yaml(OmegaConf.create(tree.to_dict()))


def export_format(output_path: Path, fmt: Optional[str] = None) -> str:
    """
    Pick the export format from an explicit name or the file extension.

    Raises:
        ValueError: If the format cannot be determined
    """
    if fmt:
        fmt = fmt.lower()
        if fmt not in EXPORT_FORMATS.values():
            raise ValueError(f"Unsupported export format '{fmt}'. Supported: json, yaml")
        return fmt

    suffix = Path(output_path).suffix.lower()
    if suffix not in EXPORT_FORMATS:
        raise ValueError(
            f"Cannot infer export format from '{output_path}'. "
            f"Use one of {sorted(EXPORT_FORMATS)} or pass a format explicitly"
        )
    return EXPORT_FORMATS[suffix]


def export_tree(tree: Container, output_path: Path, fmt: Optional[str] = None) -> ExportResult:
    """
    Write a render tree to disk.

    Args:
        tree: Composed document tree
        output_path: Destination file (parent directories are created)
        fmt: "json" or "yaml"; inferred from the extension when omitted

    Returns:
        ExportResult describing the write

    Example:
        >>> result = export_tree(compose_resume(resume), Path("outs/tree.json"))
        >>> result.format
        'json'
    """
    output_path = Path(output_path)
    try:
        fmt = export_format(output_path, fmt)
    except ValueError as e:
        _log_error(str(e))
        return ExportResult(success=False, error=str(e))

    node_count = sum(1 for _ in iter_nodes(tree))
    _log_info(f"Exporting {node_count} nodes as {fmt} to {output_path}")

    content = tree_to_json(tree) if fmt == "json" else tree_to_yaml(tree)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content, encoding="utf-8")
    except OSError as e:
        _log_error(f"Failed to write {output_path}: {e}")
        return ExportResult(success=False, format=fmt, node_count=node_count, error=str(e))

    _log_success(f"Wrote {output_path}")
    return ExportResult(success=True, output_path=output_path, format=fmt, node_count=node_count)
