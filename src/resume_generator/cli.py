"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from resume_generator.clients.llm_client import LLMClient
from resume_generator.config import load_config
from resume_generator.errors import PipelineError, ResumeGenerationError
from resume_generator.models.request import GenerationRequest
from resume_generator.pipeline.orchestrator import ResumeGenerator
from resume_generator.profiles.store import ProfileStore
from resume_generator.templates.loader import list_templates
from resume_generator.templates.renderer import render_to_html, save_html

app = typer.Typer(
    name="resume-generator",
    help="Tailored resume generation from a stored profile and a job description",
    no_args_is_help=True,
)
console = Console()

EXIT_PIPELINE_ERROR = 1
EXIT_INPUT_ERROR = 2


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def generate(
    profile: str = typer.Argument(help="Profile id (file name in the profiles directory, without .json)"),
    jd: Path = typer.Option(..., "--jd", help="Job description text file"),
    company: str = typer.Option(..., "--company", "-c", help="Company name"),
    role: str = typer.Option(..., "--role", "-r", help="Role name"),
    template: str = typer.Option(None, "--template", "-t", help="Template id"),
    output: Path = typer.Option(None, "--output", "-o", help="Output directory or .pdf path"),
    html: bool = typer.Option(False, "--html", help="Also save the rendered HTML"),
    config_path: Path = typer.Option(None, "--config", help="config.yaml path"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Generate a tailored resume PDF."""
    _configure_logging(verbose)
    if not jd.exists():
        console.print(f"[red]Job description file not found: {jd}[/red]")
        raise typer.Exit(EXIT_INPUT_ERROR)

    config = load_config(config_path)
    request = GenerationRequest(
        profile=profile,
        jd=jd.read_text(encoding="utf-8"),
        company_name=company,
        role_name=role,
        template=template,
    )
    generator = ResumeGenerator(config, LLMClient(config.llm))

    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
        ) as progress:
            progress.add_task("Generating resume...", total=None)
            result = asyncio.run(generator.generate(request))
    except PipelineError as exc:
        console.print(f"[red]PDF generation failed ({exc.kind}): {exc}[/red]")
        raise typer.Exit(EXIT_PIPELINE_ERROR)
    except ResumeGenerationError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(EXIT_INPUT_ERROR)

    if output is None:
        output = Path("./output")
    pdf_path = output if output.suffix == ".pdf" else output / result.filename
    pdf_path.parent.mkdir(parents=True, exist_ok=True)
    pdf_path.write_bytes(result.pdf)
    console.print(f"\n[green]Resume saved: {pdf_path}[/green]")

    if html:
        html_path = save_html(result.html, str(pdf_path.with_suffix(".html")))
        console.print(f"[green]HTML saved: {html_path}[/green]")

    usage = result.usage
    console.print(
        Panel(
            f"Title: {result.record.title}\n"
            f"Experience entries: {len(result.record.experience)} | "
            f"Skill categories: {len(result.record.skills)}\n"
            f"Tokens: {usage.get('input', 0)} in / {usage.get('output', 0)} out"
            f" (~${usage.get('estimated_cost_usd', 0.0):.3f})"
            + (f"\nModel calls: {len(usage['calls'])}" if len(usage.get("calls", [])) > 1 else "")
            + f"\nElapsed: {result.elapsed_seconds:.1f}s",
            title="Generation",
        )
    )


@app.command()
def preview(
    profile: str = typer.Argument(help="Profile id"),
    jd: Path = typer.Option(..., "--jd", help="Job description text file"),
    company: str = typer.Option(..., "--company", "-c", help="Company name"),
    role: str = typer.Option(..., "--role", "-r", help="Role name"),
    template: str = typer.Option(None, "--template", "-t", help="Template id"),
    output: Path = typer.Option(Path("./output/preview.html"), "--output", "-o", help="HTML output path"),
    config_path: Path = typer.Option(None, "--config", help="config.yaml path"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Generate content and save the rendered HTML without exporting a PDF."""
    _configure_logging(verbose)
    if not jd.exists():
        console.print(f"[red]Job description file not found: {jd}[/red]")
        raise typer.Exit(EXIT_INPUT_ERROR)

    config = load_config(config_path)
    request = GenerationRequest(
        profile=profile,
        jd=jd.read_text(encoding="utf-8"),
        company_name=company,
        role_name=role,
        template=template,
    )
    generator = ResumeGenerator(config, LLMClient(config.llm))
    try:
        draft = asyncio.run(generator.build_record(request))
    except PipelineError as exc:
        console.print(f"[red]Generation failed ({exc.kind}): {exc}[/red]")
        raise typer.Exit(EXIT_PIPELINE_ERROR)
    except ResumeGenerationError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(EXIT_INPUT_ERROR)

    path = save_html(render_to_html(draft.record, draft.template_path), str(output))
    console.print(f"[green]HTML saved: {path}[/green]")
    console.print(f"[dim]{path.resolve().as_uri()}[/dim]")


@app.command()
def templates(
    config_path: Path = typer.Option(None, "--config", help="config.yaml path"),
) -> None:
    """List available templates."""
    config = load_config(config_path)
    table = Table(title="Templates")
    table.add_column("ID")
    table.add_column("Name")
    table.add_column("File", style="dim")
    for info in list_templates(config.storage.resolved_templates_dir):
        table.add_row(info.id, info.name, info.file)
    console.print(table)


@app.command()
def profiles(
    config_path: Path = typer.Option(None, "--config", help="config.yaml path"),
) -> None:
    """List available profiles."""
    config = load_config(config_path)
    ids = ProfileStore(config.storage.resolved_profiles_dir).list()
    if not ids:
        console.print(f"[yellow]No profiles in {config.storage.resolved_profiles_dir}[/yellow]")
        return
    for profile_id in ids:
        console.print(f"  - {profile_id}")


if __name__ == "__main__":
    app()
