#!/usr/bin/env python3
"""
Layout Settings Editor CLI

Applies layout edits to the user-override layer stored in a resume YAML
file. Every command resolves the resume's effective configuration, applies
one edit action, and writes back only the overrides.

Commands:
    set    - Set one setting (value parsed as JSON: true, 3, "text", [...])
    toggle - Flip a boolean setting
    move   - Drag a section onto another section's position
    swap   - Move the section at an index one step up or down
    reset  - Discard all overrides (asks for confirmation)
    show   - Print the current override layer

Examples:\n

    edit_layout.py set resume.yaml columnCount 2              # Two-column page

    edit_layout.py toggle resume.yaml useBullets              # Flip bullets

    edit_layout.py move resume.yaml skills work               # Drag skills onto work

    edit_layout.py swap resume.yaml 2 --down                  # Move third section down

    edit_layout.py reset resume.yaml                          # Back to template defaults
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

import typer
from typing_extensions import Annotated

from vellum.contexts.content import InvalidResumeStructureError, Resume, load_resume, save_resume
from vellum.contexts.layout import (
    MoveSection,
    MoveSectionByDrag,
    SetSetting,
    ToggleSetting,
    apply_edit,
    get_template_registry,
    reset_overrides,
)
from vellum.contexts.layout.defaults import HARDCODED_DEFAULTS
from vellum.contexts.layout.logger import setup_layout_logger

app = typer.Typer(
    help="Edit the layout settings stored in a resume file",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(
    ctx: typer.Context,
    log_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--log-dir",
            help="Directory for the session log (defaults to a timestamped directory under LOGS_PATH)",
        ),
    ] = None,
):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()
    setup_layout_logger(log_dir, edit_command=ctx.invoked_subcommand)


def parse_value(text: str) -> Any:
    """Parse a command-line value as JSON, falling back to the raw string."""
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text


def _load(resume_path: Path) -> Resume:
    try:
        return load_resume(resume_path)
    except (FileNotFoundError, InvalidResumeStructureError) as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


def _apply(resume_path: Path, action) -> None:
    """Apply one edit action to a resume file and save it."""
    resume = _load(resume_path)
    overrides = resume.meta.layout_settings
    effective = get_template_registry().resolve_config(resume.meta.template_id, overrides)

    updated = apply_edit(overrides, action, effective)
    if updated == overrides:
        typer.secho("No change\n", fg=typer.colors.YELLOW)
        return

    resume.meta.layout_settings = updated
    resume.meta.last_modified = datetime.now().isoformat(timespec="seconds")
    save_resume(resume, resume_path)

    changed = sorted(key for key in set(updated) | set(overrides) if updated.get(key) != overrides.get(key))
    for key in changed:
        typer.echo(f"  {key}: {overrides.get(key, '(template)')!r} -> {updated.get(key, '(template)')!r}")
    typer.secho(f"✓ Saved {resume_path}\n", fg=typer.colors.GREEN)


ResumeArgument = Annotated[Path, typer.Argument(help="Resume YAML file")]


@app.command("set")
def set_command(
    resume_path: ResumeArgument,
    key: Annotated[str, typer.Argument(help="Setting key (e.g., sectionHeadingStyle)")],
    value: Annotated[str, typer.Argument(help="New value as JSON; null removes the override")],
):
    """
    Set one layout setting.

    Examples:\n

        $ edit_layout.py set resume.yaml sectionHeadingStyle 4

        $ edit_layout.py set resume.yaml themeColorTarget '["headings", "links"]'
    """
    if key not in HARDCODED_DEFAULTS:
        typer.secho(f"Warning: '{key}' is not a known setting and will be ignored when rendering", fg=typer.colors.YELLOW)
    _apply(resume_path, SetSetting(key, parse_value(value)))


@app.command("toggle")
def toggle_command(
    resume_path: ResumeArgument,
    key: Annotated[str, typer.Argument(help="Boolean setting key (e.g., useBullets)")],
):
    """
    Flip a boolean layout setting.

    Examples:\n

        $ edit_layout.py toggle resume.yaml linkShowFullUrl
    """
    _apply(resume_path, ToggleSetting(key))


@app.command("move")
def move_command(
    resume_path: ResumeArgument,
    from_id: Annotated[str, typer.Argument(help="Section being dragged")],
    to_id: Annotated[str, typer.Argument(help="Section it is dropped on")],
):
    """
    Move a section to another section's position in the section order.

    Examples:\n

        $ edit_layout.py move resume.yaml skills summary
    """
    _apply(resume_path, MoveSectionByDrag(from_id, to_id))


@app.command("swap")
def swap_command(
    resume_path: ResumeArgument,
    index: Annotated[int, typer.Argument(help="Zero-based position in the section order")],
    down: Annotated[
        bool,
        typer.Option(
            "--down",
            "-d",
            help="Move down instead of up",
        ),
    ] = False,
):
    """
    Move the section at a position one step up (or down).

    Examples:\n

        $ edit_layout.py swap resume.yaml 3

        $ edit_layout.py swap resume.yaml 0 --down
    """
    _apply(resume_path, MoveSection(index, "down" if down else "up"))


@app.command("reset")
def reset_command(
    resume_path: ResumeArgument,
    yes: Annotated[
        bool,
        typer.Option(
            "--yes",
            "-y",
            help="Skip the confirmation prompt",
        ),
    ] = False,
):
    """
    Discard all layout overrides and return to the template defaults.

    Examples:\n

        $ edit_layout.py reset resume.yaml
    """
    resume = _load(resume_path)
    overrides = resume.meta.layout_settings
    if not overrides:
        typer.secho("No overrides to reset\n", fg=typer.colors.YELLOW)
        return

    updated = reset_overrides(overrides, confirm=lambda prompt: yes or typer.confirm(prompt))
    if updated == overrides:
        typer.echo("Reset cancelled\n")
        return

    resume.meta.layout_settings = updated
    resume.meta.last_modified = datetime.now().isoformat(timespec="seconds")
    save_resume(resume, resume_path)
    typer.secho(f"✓ Reset {len(overrides)} setting(s) in {resume_path}\n", fg=typer.colors.GREEN)


@app.command("show")
def show_command(resume_path: ResumeArgument):
    """
    Print the override layer stored in a resume.

    Examples:\n

        $ edit_layout.py show resume.yaml
    """
    resume = _load(resume_path)
    overrides = resume.meta.layout_settings
    typer.secho(f"\n{resume.meta.title} (template: {resume.meta.template_id})\n", fg=typer.colors.BLUE, bold=True)
    if not overrides:
        typer.echo("  (no overrides)")
    for key in sorted(overrides):
        typer.echo(f"  {key}: {overrides[key]!r}")
    typer.echo("")


if __name__ == "__main__":
    app()
