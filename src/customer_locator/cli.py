"""CLI entrypoint for customer-locator."""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.table import Table

from customer_locator.config import load_settings
from customer_locator.geo import Location, ValidationError
from customer_locator.locator import CustomerLocator
from customer_locator.sources import SourceError, source_for
from customer_locator.units import Kilometers

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def _parse_location(ctx, param, value):
    if value is None:
        return None
    try:
        return Location.parse(value)
    except ValidationError as exc:
        raise click.BadParameter("; ".join(exc.errors)) from exc


def _parse_radius(ctx, param, value):
    if value is None:
        return None
    try:
        return Kilometers(value)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc


@click.group()
def cli():
    """Customer Locator: find customers within a radius of a point."""


@cli.command()
@click.option("--source", default=None, help="JSON-lines file path or http(s) URL.")
@click.option("--radius", type=float, default=None, callback=_parse_radius,
              help="Search radius in kilometers.")
@click.option("--origin", default=None, callback=_parse_location,
              help='Reference point as "LAT,LON".')
@click.option("--sort/--no-sort", default=True, help="Order rows by user id (default) or keep load order.")
@click.option("--verbose", is_flag=True, help="Enable debug logging.")
def locate(source, radius, origin, sort: bool, verbose: bool):
    """List customers within RADIUS km of ORIGIN."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        settings = load_settings()
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc

    if source is None:
        source = settings.source
    if radius is None:
        radius = settings.radius
    if origin is None:
        origin = settings.origin

    try:
        locator = CustomerLocator.from_source(source_for(source, timeout=settings.http_timeout))
    except SourceError as exc:
        logger.error("Load failed: %s", exc)
        err_console.print(f"[red]Error:[/] {exc}")
        raise SystemExit(1)

    found = locator.find_within(radius, origin)
    if sort:
        found = found.sorted_by_user_id()

    table = Table(title=f"Customers within {radius} of ({origin.latitude}, {origin.longitude})")
    table.add_column("ID", justify="right")
    table.add_column("Name")
    table.add_column("Distance", justify="right")

    for customer in found:
        table.add_row(str(customer.user_id), customer.name, str(customer.distance_to(origin)))

    console.print(table)
    console.print(f"{len(found)} of {len(locator)} customer(s) matched.")


@cli.command()
@click.argument("start", callback=_parse_location)
@click.argument("end", callback=_parse_location)
def distance(start: Location, end: Location):
    """Great-circle distance between two "LAT,LON" points."""
    console.print(str(start.distance_to(end)))


if __name__ == "__main__":
    cli()
