"""CLI entry point for vid2gif.

Usage:
    vid2gif convert video.mp4              # -> video-gifski.gif next to the video
    vid2gif convert video.mp4 out -q 80    # -> out.gif next to the video
    vid2gif convert video.mp4 --fps 15 -v
    vid2gif info                           # Show tools and configuration
    vid2gif schema encode_gif              # Step input/output/config schemas
"""

from __future__ import annotations

import shutil
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from vid2gif.core.logging import level_for, setup_logging

app = typer.Typer(name="vid2gif", help="Convert a video to a GIF with ffmpeg and gifski")
console = Console()
err_console = Console(stderr=True)

DEFAULT_CONFIG = Path("configs/pipeline.yaml")


@app.command()
def convert(
    input_path: Path = typer.Argument(..., metavar="INPUT", help="Video file to process"),
    output: str = typer.Argument(None, metavar="OUTPUT", help="Name or path of the output file"),
    quality: int = typer.Option(100, "--quality", "-q", help="Quality for gifski (clamped to 0-100)"),
    fps: float = typer.Option(None, "--fps", "-f", help="Frame rate for gifski (default: read from the video)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose mode"),
    config: Path = typer.Option(DEFAULT_CONFIG, help="Pipeline config path"),
) -> None:
    """Convert a video into an animated GIF."""
    setup_logging(level_for(verbose))
    from vid2gif.core.contracts import RunConfig
    from vid2gif.core.errors import Vid2GifError
    from vid2gif.core.pipeline_runner import load_pipeline_config, run_pipeline

    try:
        pipeline_cfg = load_pipeline_config(config, required=config != DEFAULT_CONFIG)
        run_config = RunConfig(source_path=input_path, output=output, quality=quality, fps=fps, verbose=verbose)
        console.rule("vid2gif")
        result = run_pipeline(run_config, pipeline_cfg)
    except Vid2GifError as e:
        stage = e.stage or "configuration"
        err_console.print(f"[red]{escape(stage)} failed:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    console.rule()
    console.print(
        f"[green]Done.[/green] {escape(str(result.output_path))} "
        f"({result.frame_count} frames @ {result.fps_used:g} fps, quality {result.quality_used}, "
        f"{result.elapsed_seconds:.1f}s)"
    )
    if result.cleanup_warning:
        err_console.print(f"[yellow]Warning:[/yellow] {escape(result.cleanup_warning)}")


@app.command()
def info(config: Path = typer.Option(DEFAULT_CONFIG, help="Pipeline config path")) -> None:
    """Show tool locations and pipeline settings."""
    from vid2gif.core.errors import Vid2GifError
    from vid2gif.core.pipeline_runner import load_pipeline_config

    try:
        pipeline_cfg = load_pipeline_config(config, required=config != DEFAULT_CONFIG)
    except Vid2GifError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    table = Table(title=f"Pipeline: {pipeline_cfg.project_name}")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    table.add_column("Resolved", style="yellow")

    for label, command in (("ffmpeg", pipeline_cfg.extract.ffmpeg), ("gifski", pipeline_cfg.encode.gifski)):
        resolved = shutil.which(command)
        table.add_row(label, command, resolved or "[red]not found[/red]")
    table.add_row("workspace", str(pipeline_cfg.workspace_dir), "-")
    table.add_row("default name", f"<stem>-{pipeline_cfg.output_suffix}{pipeline_cfg.output_extension}", "-")
    table.add_row("max fps", f"{pipeline_cfg.encode.max_fps:g}", "-")
    table.add_row("max quality", str(pipeline_cfg.encode.max_quality), "-")
    console.print(table)


@app.command()
def schema(
    step_name: str = typer.Argument(..., help="Step name (extract_frames or encode_gif)"),
) -> None:
    """Print the JSON schemas of a step's input, output and config."""
    import json

    from vid2gif.core.pipeline_runner import STEPS

    step_cls = STEPS.get(step_name)
    if step_cls is None:
        err_console.print(f"[red]Unknown step '{escape(step_name)}'. Choose from: {', '.join(STEPS)}[/red]")
        raise typer.Exit(1)

    schemas = {
        "input": step_cls.get_input_schema(),
        "output": step_cls.get_output_schema(),
        "config": step_cls.get_config_schema(),
    }
    typer.echo(json.dumps(schemas, indent=2))


if __name__ == "__main__":
    app()
