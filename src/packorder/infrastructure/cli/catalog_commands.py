"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from packorder.application.list_catalog import ListCatalogHandler
from packorder.domain.exceptions import DomainException
from packorder.infrastructure.bootstrap import product_repository


@click.command("list")
def catalog_list() -> None:
    """List all products and the packs they are sold in."""
    try:
        handler = ListCatalogHandler(product_repo=product_repository())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    lines = handler.handle()
    if not lines:
        click.echo("No products found.")
        return

    click.echo(f"{'Code':<8} {'Name':<20} {'Packs'}")
    click.echo("-" * 60)
    for line in lines:
        packs = ", ".join(f"{size} @ {price}" for size, price in line.packs)
        click.echo(f"{line.code:<8} {line.name:<20} {packs}")
