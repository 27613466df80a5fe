"""
Command line entry point: run the airport status strategies one by one or all together.

Usage:
    airport-status all
    airport-status wait-each --verbose
"""

import asyncio
import logging

import typer
from rich.console import Console

from .reporting import StatusReporter
from .services.client import AirportStatusClient
from .services.runners import (
    run_sequential,
    run_wait_all,
    run_fire_and_report,
    run_wait_each,
)
from .utils.config import get_config

app = typer.Typer(help="Sequential vs concurrent airport status fetching")
console = Console()

SECTIONS = {
    "sequential": "Sequential Fetching",
    "wait_all": "Concurrent Fetching, Wait for All",
    "fire_and_report": "Fire-and-Forget Tasks and a Failure Handler",
    "wait_each": "Concurrent Tasks and Per-Result Recovery",
}


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _context():
    config = get_config()
    reporter = StatusReporter(console=console, prefix_length=config.error_prefix_length)
    return AirportStatusClient(config), reporter


def _sequential(client: AirportStatusClient, reporter: StatusReporter) -> None:
    reporter.section(SECTIONS["sequential"])
    run_sequential(client, reporter)


def _wait_all(client: AirportStatusClient, reporter: StatusReporter) -> None:
    reporter.section(SECTIONS["wait_all"])
    asyncio.run(run_wait_all(client, reporter))


def _fire_and_report(client: AirportStatusClient, reporter: StatusReporter) -> None:
    reporter.section(SECTIONS["fire_and_report"])
    asyncio.run(run_fire_and_report(client, reporter, reporter.caught))


def _wait_each(client: AirportStatusClient, reporter: StatusReporter) -> None:
    reporter.section(SECTIONS["wait_each"])
    asyncio.run(run_wait_each(client, reporter))


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log every request and failure"
    )
):
    """Fetch FAA airport status records with different concurrency strategies."""
    configure_logging("DEBUG" if verbose else get_config().log_level)


@app.command()
def sequential():
    """Fetch one airport after another."""
    _sequential(*_context())


@app.command("wait-all")
def wait_all():
    """Fetch all airports concurrently and wait for every result."""
    _wait_all(*_context())


@app.command("fire-and-report")
def fire_and_report():
    """Launch fire-and-forget tasks whose failures go to a shared handler."""
    _fire_and_report(*_context())


@app.command("wait-each")
def wait_each():
    """Launch tasks concurrently and recover each failure where its result is read."""
    _wait_each(*_context())


@app.command("all")
def run_all():
    """Run the four strategies in order."""
    client, reporter = _context()
    _sequential(client, reporter)
    _wait_all(client, reporter)
    _fire_and_report(client, reporter)
    _wait_each(client, reporter)


if __name__ == "__main__":
    app()
