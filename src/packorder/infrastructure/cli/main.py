import click

from packorder.infrastructure.bootstrap import configure_logging
from packorder.infrastructure.cli.catalog_commands import catalog_list
from packorder.infrastructure.cli.order_commands import order_submit


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """packorder — pack allocation and order pricing"""
    configure_logging(verbose)


@cli.group()
def order() -> None:
    """Submit orders."""


@cli.group()
def catalog() -> None:
    """Inspect the product catalog."""


# Register subcommands
order.add_command(order_submit)
catalog.add_command(catalog_list)
