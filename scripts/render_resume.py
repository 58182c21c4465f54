#!/usr/bin/env python3
"""
Resume Rendering CLI

Renders a resume content file with a design into a laid-out document tree (JSON), and lists
the available templates and presets.

Commands:
    render    - Render a resume to a JSON document tree
    templates - List layout templates
    presets   - List preset keys (margins, font sizes, spacing, paper sizes, colors, fonts)

Examples:\n

    render_resume.py render resume.yaml                            # Classic template, default design

    render_resume.py render resume.yaml --design design.yaml       # Custom design

    render_resume.py render resume.json --template modern -o out.json

    render_resume.py templates
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

import typer
from dotenv import load_dotenv
from omegaconf import OmegaConf
from typing_extensions import Annotated

from folio.contexts.content import InvalidResumeStructureError
from folio.contexts.layout import list_templates
from folio.contexts.rendering import DocumentAssemblyError, render_resume
from folio.contexts.rendering.logger import setup_rendering_logger
from folio.contexts.styling.presets import list_color_presets, preset_keys

load_dotenv()


def load_mapping(path: Path) -> Dict[str, Any]:
    """Load a YAML or JSON file into a plain dict (JSON is valid YAML)."""
    data = OmegaConf.to_container(OmegaConf.load(path), resolve=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidResumeStructureError(f"{path} must contain a mapping at the top level")
    return data


app = typer.Typer(
    help="Render resumes into laid-out document trees with one of eight templates",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("render")
def render_command(
    content_path: Annotated[
        Path,
        typer.Argument(
            help="Resume content file (YAML or JSON)",
            exists=True,
            dir_okay=False,
        ),
    ],
    design_path: Annotated[
        Optional[Path],
        typer.Option(
            "--design",
            "-d",
            help="Design file (YAML or JSON); missing keys use the defaults",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    template_id: Annotated[
        Optional[str],
        typer.Option(
            "--template",
            "-t",
            help="Template id, overrides the design's templateId",
        ),
    ] = None,
    output_path: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="Write the document tree here instead of stdout",
        ),
    ] = None,
    log_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--log-dir",
            help="Directory for the session log (default: FOLIO_LOGS_PATH)",
        ),
    ] = None,
):
    """
    Render a resume to a JSON document tree.

    Examples:\n

        $ render_resume.py render resume.yaml                        # Print to stdout

        $ render_resume.py render resume.yaml -t elegant -o out.json # Write to file
    """
    setup_rendering_logger(log_dir, template_id=template_id)

    try:
        content = load_mapping(content_path)
        design = load_mapping(design_path) if design_path else {}
        if template_id:
            design["templateId"] = template_id
        document = render_resume(content, design)
    except (InvalidResumeStructureError, DocumentAssemblyError) as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    payload = json.dumps(document.to_dict(), indent=2, ensure_ascii=False)

    if output_path is None:
        typer.echo(payload)
        return

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(payload, encoding="utf-8")
    sections = ", ".join(document.section_keys()) or "(none)"
    typer.secho(f"✓ Rendered with '{document.metadata.template_id}'", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  Sections: {sections}")
    typer.echo(f"  Output: {output_path}")


@app.command("templates")
def templates_command():
    """List available layout templates."""
    typer.secho("\nTemplates:", fg=typer.colors.BLUE, bold=True)
    for template in list_templates():
        layout = "sidebar" if template["has_sidebar"] else "single column"
        typer.echo(f"  {template['id']:<14}{template['name']:<14}[{template['category']}, {layout}]")
        typer.echo(f"  {'':<14}{template['description']}")


@app.command("presets")
def presets_command():
    """List preset keys for every preset table."""
    for table, keys in preset_keys().items():
        typer.secho(f"\n{table}:", fg=typer.colors.BLUE, bold=True)
        typer.echo(f"  {', '.join(keys)}")

    typer.secho("\ncolor presets:", fg=typer.colors.BLUE, bold=True)
    for preset in list_color_presets():
        typer.echo(f"  {preset['id']:<14}primary {preset['primary']}  accent {preset['accent']}")


if __name__ == "__main__":
    app()
