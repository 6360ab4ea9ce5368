"""CLI commands for order submission."""

from __future__ import annotations

import click

from packorder.application.dto import OrderItemSpec, SubmissionResult
from packorder.domain.exceptions import DomainException
from packorder.infrastructure.bootstrap import order_manager


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse 'VS5:10,MB11:14' into OrderItemSpec list.

    Quantities stay as text; the order manager decides whether they are valid.
    """
    specs: list[OrderItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            continue
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'CODE:Quantity'."
            )
        code, qty_str = pair.rsplit(":", 1)
        specs.append(OrderItemSpec(product_code=code.strip(), quantity=qty_str.strip()))
    return specs


def _display_result(result: SubmissionResult) -> None:
    """Shared formatting for an accepted order."""
    click.echo(f"Order {result.order_id} accepted")
    click.echo()
    for line in result.lines:
        click.echo(f"  {line.quantity} {line.product_code} {line.price}")
        for pack in line.packs:
            click.echo(f"      {pack.count} x {pack.size} {pack.unit_price}")
    click.echo(f"  {'-'*30}")
    click.echo(f"  {'Order Total':<20} {result.total:>9}")


@click.command("submit")
@click.option("--id", "order_id", required=True, help="Order ID (must be unique).")
@click.option("--items", default="", help="Items as 'CODE:Qty,CODE:Qty'.")
def order_submit(order_id: str, items: str) -> None:
    """Pack and price an order."""
    specs = _parse_items(items)

    try:
        manager = order_manager()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    result = manager.submit_order(order_id, specs)

    if result.is_noop:
        click.echo(result.message)
        return
    if not result.ok:
        raise click.ClickException(result.message or result.error.value)

    _display_result(result)
