"""CLI interface for flatwiki.

Command-line tool for serving a file-backed wiki.
"""

import logging
import sys
from pathlib import Path

import click

from flatwiki.config import Config


def setup_logging(verbose: bool) -> None:
    """Configure root logging for the server process."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    # per-request lines are logged by flatwiki.views
    logging.getLogger("aiohttp.access").setLevel(logging.WARNING)


@click.group()
def cli() -> None:
    """flatwiki - a wiki kept in plain files."""


@cli.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover flatwiki.toml)",
)
@click.option(
    "--data-dir",
    "-d",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Page storage directory (overrides config)",
)
@click.option(
    "--templates-dir",
    "-t",
    type=click.Path(exists=True, path_type=Path, file_okay=False),
    default=None,
    help="Templates directory (overrides config, default: bundled templates)",
)
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
@click.option(
    "--front-page",
    default=None,
    help="Title shown at / (overrides config)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging",
)
def serve(
    config_path: Path | None,
    data_dir: Path | None,
    templates_dir: Path | None,
    host: str | None,
    port: int | None,
    front_page: str | None,
    verbose: bool,
) -> None:
    """Start the wiki server."""
    from flatwiki.server import run_server

    try:
        config = Config.load(config_path).with_overrides(
            host=host,
            port=port,
            data_dir=data_dir,
            templates_dir=templates_dir,
            front_page=front_page,
        )
    except (FileNotFoundError, ValueError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)

    setup_logging(verbose)

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Data directory: {config.wiki.data_dir}")
    if config.wiki.templates_dir is not None:
        click.echo(f"Templates directory: {config.wiki.templates_dir}")
    else:
        click.echo("Templates: bundled")
    click.echo(f"Front page: {config.wiki.front_page}")
    if not config.wiki.data_dir.is_dir():
        click.echo(
            click.style(
                f"Warning: data directory {config.wiki.data_dir} does not exist, saves will fail",
                fg="yellow",
            ),
            err=True,
        )

    run_server(config)


if __name__ == "__main__":
    cli()
