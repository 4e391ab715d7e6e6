#!/usr/bin/env python3
"""
Resume Rendering CLI

Composes resume YAML files into render trees using the composition context,
and exports them as JSON/YAML trees or HTML previews.

Commands:
    templates - List available templates
    render    - Compose a resume and export the render tree
    columns   - Show how a resume's sections are distributed into columns

Examples:\n

    render_resume.py templates                                          # List templates

    render_resume.py render resume.yaml --output outs/tree.json         # Export JSON tree

    render_resume.py render resume.yaml -t modern --preview outs/r.html # HTML preview

    render_resume.py columns resume.yaml --template multicolumn         # Column split
"""

from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from vellum.contexts.composition import compose_resume, find_by_role
from vellum.contexts.composition.logger import setup_composition_logger
from vellum.contexts.content import InvalidResumeStructureError, load_resume
from vellum.contexts.layout import TemplateNotFoundError, complete_section_order, distribute, get_template_registry
from vellum.contexts.rendering import PreviewRenderer, export_tree

app = typer.Typer(
    help="Compose resumes into render trees and export them",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _load(resume_path: Path):
    try:
        return load_resume(resume_path)
    except (FileNotFoundError, InvalidResumeStructureError) as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


def _check_template(template_id: Optional[str]) -> None:
    """Reject unknown template ids given explicitly on the command line."""
    if template_id is None:
        return
    try:
        get_template_registry().get_template(template_id)
    except TemplateNotFoundError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


@app.command("templates")
def templates_command():
    """
    List available templates.

    Examples:\n

        $ render_resume.py templates
    """
    registry = get_template_registry()
    typer.secho(f"\nTemplates ({registry.templates_path}):\n", fg=typer.colors.BLUE, bold=True)
    for spec in registry.list_templates():
        typer.echo(f"  {spec.id:<15} {spec.name:<20} {spec.layout_type:<26} {spec.theme_color}")
    typer.echo("")


@app.command("render")
def render_command(
    resume_path: Annotated[
        Path,
        typer.Argument(
            help="Resume YAML file",
        ),
    ],
    template_id: Annotated[
        Optional[str],
        typer.Option(
            "--template",
            "-t",
            help="Template id (defaults to the template stored in the resume)",
        ),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="Render tree output file (.json, .yaml or .yml)",
        ),
    ] = None,
    preview: Annotated[
        Optional[Path],
        typer.Option(
            "--preview",
            "-p",
            help="HTML preview output file",
        ),
    ] = None,
    log_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--log-dir",
            help="Directory for the session log (defaults to a timestamped directory under LOGS_PATH)",
        ),
    ] = None,
):
    """
    Compose a resume and export its render tree.

    Examples:\n

        $ render_resume.py render resume.yaml --output outs/tree.json

        $ render_resume.py render resume.yaml -t classic --preview outs/classic.html
    """
    _check_template(template_id)
    resume = _load(resume_path)

    log_file = setup_composition_logger(log_dir, template_id or resume.meta.template_id)

    typer.secho(f"\nRendering: {resume_path}", fg=typer.colors.BLUE, bold=True)
    document = compose_resume(resume, template_id)
    sections = [node.key for node in find_by_role(document, "section")]
    typer.echo(f"Template: {document.style['templateId']}")
    typer.echo(f"Sections: {', '.join(sections) if sections else '(none)'}")

    failed = False
    if output is not None:
        result = export_tree(document, output)
        if result.success:
            typer.secho(f"✓ Render tree: {result.output_path} ({result.node_count} nodes)", fg=typer.colors.GREEN)
        else:
            typer.secho(f"✗ Export failed: {result.error}", fg=typer.colors.RED, err=True)
            failed = True

    if preview is not None:
        path = PreviewRenderer().write(document, preview)
        typer.secho(f"✓ Preview: {path}", fg=typer.colors.GREEN)

    typer.echo(f"  Log: {log_file}\n")
    raise typer.Exit(code=1 if failed else 0)


@app.command("columns")
def columns_command(
    resume_path: Annotated[
        Path,
        typer.Argument(
            help="Resume YAML file",
        ),
    ],
    template_id: Annotated[
        Optional[str],
        typer.Option(
            "--template",
            "-t",
            help="Template id (defaults to the template stored in the resume)",
        ),
    ] = None,
):
    """
    Show the section order and column distribution of a resume.

    Examples:\n

        $ render_resume.py columns resume.yaml --template multicolumn
    """
    _check_template(template_id)
    resume = _load(resume_path)

    registry = get_template_registry()
    spec = registry.resolve_template(template_id or resume.meta.template_id)
    config = registry.resolve_config(spec.id, resume.meta.layout_settings)

    order = complete_section_order(config.get_list("sectionOrder"))
    column_count = config.get_choice("columnCount", (1, 2, 3), 1)

    typer.secho(f"\n{spec.name} ({spec.id}), {column_count} column(s)\n", fg=typer.colors.BLUE, bold=True)
    for column in distribute(order, column_count, spec.membership):
        typer.echo(f"  {column.name:<6} {', '.join(column.section_ids)}")
    typer.echo("")


if __name__ == "__main__":
    app()
