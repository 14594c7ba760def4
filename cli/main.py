"""CLI entrypoint."""

import sys

import click
from loguru import logger

from .config import TOOL_VERSION
from .commands.build import build
from .commands.watch import watch


def setup_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "INFO")


@click.group(invoke_without_command=True)
@click.version_option(version=TOOL_VERSION, prog_name="assetpipe")
@click.option("-v", "--verbose", is_flag=True, help="Log every file added to a bundle")
@click.pass_context
def cli(ctx: click.Context, verbose: bool):
    """assetpipe - bundle vendor scripts, app modules and styles."""
    setup_logging(verbose)
    if ctx.invoked_subcommand is None:
        ctx.invoke(watch)


cli.add_command(build)
cli.add_command(watch)


if __name__ == "__main__":
    cli()
