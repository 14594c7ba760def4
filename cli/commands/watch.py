"""Watch command."""

import click
import uvicorn
from pathlib import Path

from loguru import logger

from cli.config import DEFAULT_HOST, DEFAULT_PORT, load_layout
from cli.server import create_app


@click.command()
@click.option(
    "--root",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
    help="Project directory (defaults to the current directory)",
)
@click.option("--host", default=DEFAULT_HOST, show_default=True, help="Interface to bind")
@click.option("--port", default=DEFAULT_PORT, show_default=True, type=int, help="Port to listen on")
def watch(root: Path, host: str, port: int):
    """Serve the application, rebuilding bundles on every request."""
    layout = load_layout(root)
    app = create_app(layout)

    logger.info(f"starting server on {host}:{port}")
    click.echo(f"👀 Serving {layout.root} on http://{host}:{port}")

    try:
        uvicorn.run(app, host=host, port=port, log_level="warning", access_log=False)
    except Exception as e:
        logger.error(f"Server failed: {e}")
        click.echo(f"❌ Server failed: {e}", err=True)
        raise click.Abort()
