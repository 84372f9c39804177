"""Command line interface for webhook-solver."""

from __future__ import annotations

import logging
import sys

import click
from colorama import init, Fore
from pydantic import ValidationError

from webhook_solver import __version__
from webhook_solver.client import HttpClient
from webhook_solver.core import run
from webhook_solver.settings import resolve_config

init(autoreset=True)


def setup_logging(verbose: bool = False) -> None:
    """Setup logging configuration."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def parse_defines(defines: tuple[str, ...]) -> dict[str, str]:
    """Turn ``key=value`` pairs into a properties mapping."""
    properties = {}
    for item in defines:
        if "=" not in item:
            raise ValueError(f"Invalid property definition: {item}")
        key, value = item.split("=", 1)
        key = key.strip()
        if not key:
            raise ValueError(f"Invalid property definition: {item}")
        properties[key] = value
    return properties


@click.command()
@click.version_option(version=__version__, prog_name="webhook-solver")
@click.option(
    "--define", "-D", "defines", multiple=True, metavar="KEY=VALUE",
    help="Set a property, e.g. -D final.query=42 or -D user.regno=REG123",
)
@click.option("--dry-run", is_flag=True, help="Log the submission instead of sending it")
@click.option("--download-pdf", is_flag=True, help="Download the question PDF to downloads/")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(defines: tuple[str, ...], dry_run: bool, download_pdf: bool, verbose: bool) -> None:
    """Request a webhook access token and submit the final query."""
    setup_logging(verbose)

    try:
        properties = parse_defines(defines)
    except ValueError as e:
        click.echo(f"{Fore.RED}Error: {e}", err=True)
        sys.exit(1)

    if dry_run:
        properties["DRY_RUN"] = "true"
    if download_pdf:
        properties["DOWNLOAD_PDF"] = "true"

    try:
        config = resolve_config(properties=properties)
    except ValidationError as e:
        click.echo(f"{Fore.RED}Error: invalid configuration: {e}", err=True)
        sys.exit(1)

    outcome = run(config, client=HttpClient())

    if outcome.ok:
        click.echo(f"{Fore.GREEN}✓ {outcome.message}")
    else:
        click.echo(f"{Fore.RED}✗ {outcome.message} (exit code {int(outcome.exit_code)})", err=True)
    sys.exit(int(outcome.exit_code))


def main() -> None:
    cli(prog_name="webhook-solver")


if __name__ == "__main__":
    main()
