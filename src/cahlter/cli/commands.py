"""
Click-based CLI commands for cahlter.

This module provides the command-line interface:
- init: create a new vault
- build: turn a vault into a static site
- serve: build a vault and serve it locally
- version: show the installed version
"""

import functools
import logging
import sys
from collections.abc import Callable
from http.server import SimpleHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from typing import Any

import click
from rich.console import Console

from .. import __version__
from ..display import VALID_LOG_LEVELS, EmojiLoggerAdapter, setup_rich_logger
from ..models.config import CahlterSettings
from ..utils.exceptions import CahlterError
from ..vault import Vault


# Initialize Rich console for pretty output
console = Console()

VAULT_PATH = click.argument(
    "vault_path",
    required=False,
    default=".",
    type=click.Path(file_okay=False, dir_okay=True, path_type=Path),
)


def log_level_option(func: Callable[..., Any]) -> Callable[..., Any]:
    return click.option(
        "--log-level",
        type=click.Choice(VALID_LOG_LEVELS, case_sensitive=False),
        default=None,
        help="Set the logging level for detailed output. Defaults to $CAHLTER_LOG_LEVEL or INFO.",
    )(func)


def get_logger(log_level: str | None) -> EmojiLoggerAdapter:
    """Configure the "Cahlter" logger tree and return the CLI's adapter."""
    settings = CahlterSettings()
    setup_rich_logger("Cahlter", log_level or settings.log_level)
    return EmojiLoggerAdapter(logging.getLogger("Cahlter.CLI"), {})


def run_or_exit(logger: EmojiLoggerAdapter, action: Callable[[], Any]) -> Any:
    """Run ``action``, turning cahlter errors into a message and exit status 1."""
    try:
        return action()
    except CahlterError as e:
        logger.error(str(e))
        sys.exit(1)


@click.group(invoke_without_command=True)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """
    cahlter - A minimalistic static web site generator.

    Turns a vault (a directory of markdown files plus a cahlter.yml) into
    a navigable multi-page HTML site.

    \b
    Examples:
      # Create a vault in ./notes
      cahlter init notes

      # Build it into notes/build
      cahlter build notes

      # Build and serve it on port 3000
      cahlter serve notes --port 3000
    """
    # If no subcommand is given, show help
    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        ctx.exit()


@cli.command()
@VAULT_PATH
@log_level_option
def init(vault_path: Path, log_level: str | None) -> None:
    """Initialize a new vault at VAULT_PATH (default: current directory)."""
    logger = get_logger(log_level)
    logger.info("Preparing the vault...", extra={"emoji": "prepare"})

    vault = Vault(vault_path.absolute())
    logger.info(f"Initializing the vault at {vault.path}...", extra={"emoji": "init"})
    run_or_exit(logger, vault.init)

    logger.info("Done", extra={"emoji": "done"})


@cli.command()
@VAULT_PATH
@log_level_option
def build(vault_path: Path, log_level: str | None) -> None:
    """Build the vault at VAULT_PATH into its build directory."""
    logger = get_logger(log_level)
    logger.info("Reading the vault...", extra={"emoji": "read"})
    vault = run_or_exit(logger, lambda: Vault.from_disk(vault_path.absolute()))

    logger.info("Building...", extra={"emoji": "build"})
    pages = run_or_exit(logger, vault.build)

    logger.info(f"Done, wrote {len(pages)} pages to {vault.build_dir}", extra={"emoji": "done"})


@cli.command()
@VAULT_PATH
@click.option("--port", "-p", type=click.IntRange(1, 65535), default=None, help="Port to listen on.")
@click.option("--host", default=None, help="Interface to bind to.")
@log_level_option
def serve(vault_path: Path, port: int | None, host: str | None, log_level: str | None) -> None:
    """Build the vault at VAULT_PATH and serve its build directory."""
    logger = get_logger(log_level)
    settings = CahlterSettings()

    if port is None:
        port = settings.port
        logger.warning(f"No port specified. Using default: {port}")
    host = host or settings.host

    logger.info("Reading the vault...", extra={"emoji": "read"})
    vault = run_or_exit(logger, lambda: Vault.from_disk(vault_path.absolute()))
    logger.info("Building...", extra={"emoji": "build"})
    run_or_exit(logger, vault.build)

    handler = functools.partial(SimpleHTTPRequestHandler, directory=str(vault.build_dir))
    with ThreadingHTTPServer((host, port), handler) as httpd:
        logger.info(f"Serving the vault at http://{host}:{port}", extra={"emoji": "serve"})
        try:
            httpd.serve_forever()
        except KeyboardInterrupt:
            console.print("\nServer stopped.")


@cli.command()
def version() -> None:
    """Display the version of cahlter."""
    console.print(f"[bold cyan]cahlter[/bold cyan] version {__version__}")


# Entry point for the CLI
def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
