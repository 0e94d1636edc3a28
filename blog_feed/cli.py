"""
Command-line interface for the blog feed builder.

Uses Typer to provide a CLI with options for the main configuration
settings. Values given on the command line override the YAML config.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from .config import load_config
from .core.errors import FeedError
from .feed.serializer import FEED_FORMATS
from .runner import run_build, validate_content

app = typer.Typer(add_completion=False)
console = Console()


@app.command()
def build(
    content: Path | None = typer.Option(None, "--content", "-c", help="Content root directory."),
    output: Path | None = typer.Option(None, "--output", "-o", help="Feed output file."),
    config: Path | None = typer.Option(None, "--config", exists=True, readable=True),
    fmt: str | None = typer.Option(None, "--format", help="Feed format: rss or atom."),
    full_render: bool | None = typer.Option(
        None,
        "--full-render/--preview-only",
        help="Render full post bodies, or only previews with a read-more link.",
    ),
    workers: int | None = typer.Option(None, "--workers", min=1, help="Item build threads."),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
    log_format: str | None = typer.Option(
        None, "--log-format", help="Log file format: jsonl or plain."
    ),
    log_file: bool | None = typer.Option(
        None, "--log-file/--no-log-file", help="Enable or disable file logging."
    ),
):
    """Build the blog feed from the content collection."""
    cfg = load_config(str(config) if config else None)

    if content is not None:
        cfg.content.root = str(content)
    if output is not None:
        cfg.output.path = str(output)
    if fmt:
        if fmt not in FEED_FORMATS:
            raise typer.BadParameter(f"must be one of: {', '.join(FEED_FORMATS)}", param_hint="--format")
        cfg.output.format = fmt
    if full_render is not None:
        cfg.feed.full_render = full_render
    if workers is not None:
        cfg.feed.workers = workers
    if log_level:
        cfg.logging.level = log_level
    if log_format:
        cfg.logging.format = log_format
    if log_file is not None:
        cfg.logging.file = log_file

    try:
        output_path = run_build(Path(cfg.content.root), Path(cfg.output.path), cfg, console=console)
    except FeedError as exc:
        console.print(f"[red]Feed build failed:[/red] {exc}")
        raise typer.Exit(code=1) from exc
    console.print(f"Feed generated: {output_path}")


@app.command()
def validate(
    content: Path | None = typer.Option(None, "--content", "-c", help="Content root directory."),
    config: Path | None = typer.Option(None, "--config", exists=True, readable=True),
):
    """Check collection frontmatter and blog post ids without writing a feed."""
    cfg = load_config(str(config) if config else None)
    if content is not None:
        cfg.content.root = str(content)

    try:
        counts = validate_content(Path(cfg.content.root), cfg)
    except FeedError as exc:
        console.print(f"[red]Invalid content:[/red] {exc}")
        raise typer.Exit(code=1) from exc
    for name, count in counts.items():
        console.print(f"{name}: {count} documents")


if __name__ == "__main__":
    app()
