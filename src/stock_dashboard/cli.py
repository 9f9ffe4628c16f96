"""CLI for Stock Dashboard."""

import logging
import sys
from pathlib import Path

import click
from rich.console import Console

from . import __version__
from .config import load_config

error_console = Console(stderr=True)


@click.command()
@click.version_option(version=__version__, prog_name="stock-dashboard")
@click.argument("source", required=False)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Config file (default: .stock-dashboard/config.json)",
)
@click.option(
    "--page-size",
    type=click.IntRange(min=1),
    help="Products per page",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write logs to this file (the TUI owns the terminal)",
)
@click.option("--verbose", "-v", is_flag=True, help="Log debug messages")
def main(
    source: str | None,
    config_path: Path | None,
    page_size: int | None,
    log_file: Path | None,
    verbose: bool,
) -> None:
    """Stock Dashboard - Inventory dashboard in the terminal.

    Loads products once from SOURCE (a JSON file or an http(s) URL,
    default: products.json) and opens the dashboard:

        ctrl+n    Add a product
        ctrl+g    Switch between grid and list view
        ctrl+f    Search products by name
        ctrl+q    Quit
    """
    if log_file is not None:
        logging.basicConfig(
            filename=log_file,
            level=logging.DEBUG if verbose else logging.INFO,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    try:
        config = load_config(config_path=config_path)
    except (ValueError, OSError) as e:
        error_console.print(f"[red]Error:[/red] Invalid configuration: {e}")
        sys.exit(1)

    overrides = {}
    if source:
        overrides["source"] = source
    if page_size:
        overrides["page_size"] = page_size
    if overrides:
        config = config.model_copy(update=overrides)

    from .tui.app import run_app

    run_app(config)


if __name__ == "__main__":
    main()
