"""Build command."""

import click
from pathlib import Path

from loguru import logger

from engine.bundle import write_artifacts
from cli.config import load_layout


@click.command()
@click.option(
    "--root",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
    help="Project directory (defaults to the current directory)",
)
@click.option("--output", type=click.Path(path_type=Path), help="Output directory for the compiled application")
def build(root: Path, output: Path):
    """Write index.html, index.js and index.css once and exit."""
    layout = load_layout(root, output)
    logger.info("building compiled application")
    click.echo(f"📦 Building {layout.root}")

    try:
        artifacts = write_artifacts(layout)
    except Exception as e:
        logger.error(f"Build failed: {e}")
        click.echo(f"❌ Build failed: {e}", err=True)
        raise click.Abort()

    click.echo(f"  ✅ {artifacts.index_html}")
    click.echo(f"  ✅ {artifacts.index_js} ({len(artifacts.script.modules)} modules)")
    click.echo(f"  ✅ {artifacts.index_css} ({len(artifacts.style.snapshot)} style sheets)")
