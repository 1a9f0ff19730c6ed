"""CLI entry point for the vid2pdf converter.

Usage:
    vid2pdf run                 # Convert every video under the source root
    vid2pdf scan                # List the videos that would be converted
    vid2pdf info                # Show the effective configuration
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from vid2pdf.core.logging import setup_logging

app = typer.Typer(name="vid2pdf", help="Convert videos into PDFs of sampled frames")
console = Console()
logger = logging.getLogger("vid2pdf")

DEFAULT_CONFIG = Path("configs/vid2pdf.yaml")


@app.command()
def run(
    config: Path = typer.Option(DEFAULT_CONFIG, help="Converter config path"),
    log_level: str = typer.Option("INFO", help="Logging level"),
) -> None:
    """Convert all videos to PDFs."""
    setup_logging(log_level)
    import yaml
    from pydantic import ValidationError

    from vid2pdf.core.errors import Vid2PdfError
    from vid2pdf.core.pipeline_runner import load_config, run_conversion

    # Failures are reported in the log; the process still exits normally.
    try:
        cfg = load_config(config)
        report = run_conversion(cfg)
    except (Vid2PdfError, ValidationError, yaml.YAMLError, OSError) as exc:
        logger.error(f"Error: {exc}")
        return

    if not report.batches:
        return
    table = Table(title="Conversion summary")
    table.add_column("Directory", style="cyan")
    table.add_column("Succeeded", style="green")
    table.add_column("Failed", style="red")
    for batch in report.batches:
        table.add_row(str(batch.directory), str(batch.succeeded), str(batch.failed))
    console.print(table)
    if report.kept_dirs:
        console.print(f"[yellow]Kept directories:[/yellow] {', '.join(map(str, report.kept_dirs))}")


@app.command()
def scan(config: Path = typer.Option(DEFAULT_CONFIG, help="Converter config path")) -> None:
    """List discovered videos grouped by directory."""
    setup_logging("WARNING")
    from vid2pdf.core.errors import FilesystemError
    from vid2pdf.core.pipeline_runner import load_config
    from vid2pdf.steps.s01_discover_videos.contracts import DiscoverVideosInput
    from vid2pdf.steps.s01_discover_videos.step import DiscoverVideosStep

    cfg = load_config(config)
    try:
        output = DiscoverVideosStep(cfg.discover).execute(DiscoverVideosInput(root=cfg.source_root))
    except FilesystemError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)

    table = Table(title=f"Videos under {cfg.source_root}")
    table.add_column("#", style="dim")
    table.add_column("Directory", style="cyan")
    table.add_column("Videos", style="green")
    for i, (directory, names) in enumerate(output.videos.items(), 1):
        table.add_row(str(i), directory, ", ".join(names))
    console.print(table)
    console.print(f"{output.video_count} videos in {len(output.videos)} directories")


@app.command()
def info(config: Path = typer.Option(DEFAULT_CONFIG, help="Converter config path")) -> None:
    """Show the effective configuration."""
    from vid2pdf.core.pipeline_runner import load_config

    cfg = load_config(config)
    table = Table(title="vid2pdf configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    for key, value in cfg.model_dump(mode="json").items():
        if isinstance(value, dict):
            for sub_key, sub_value in value.items():
                table.add_row(f"{key}.{sub_key}", str(sub_value))
        else:
            table.add_row(key, str(value))
    console.print(table)


if __name__ == "__main__":
    app()
