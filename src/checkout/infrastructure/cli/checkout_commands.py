"""CLI commands for checking out a cart."""

from __future__ import annotations

import click

from checkout.application.dto import CartItemSpec, ReceiptDTO
from checkout.domain.exceptions import DomainException
from checkout.infrastructure.bootstrap import Container


def _parse_items(raw: str) -> list[CartItemSpec]:
    """Parse 'Cheese:2,Scratch Card:1' into CartItemSpec list."""
    specs: list[CartItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductName:Quantity'."
            )
        name, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{name}'."
            )
        specs.append(CartItemSpec(product_name=name.strip(), quantity=qty))
    return specs


def _run_checkout(container: Container, customer: str, specs: list[CartItemSpec]) -> None:
    handler = container.checkout_handler()

    try:
        dto = handler.handle(customer_name=customer, item_specs=specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_receipt(dto)


def _display_receipt(dto: ReceiptDTO) -> None:
    for line in dto.text:
        click.echo(line)


@click.command("buy")
@click.option("--customer", required=True, help="Customer name.")
@click.option("--items", required=True, help="Items as 'Product:Qty,Product:Qty'.")
@click.pass_obj
def checkout_buy(container: Container, customer: str, items: str) -> None:
    """Check out a cart for a customer."""
    _run_checkout(container, customer, _parse_items(items))


@click.command("demo")
@click.pass_obj
def checkout_demo(container: Container) -> None:
    """Replay the demo order from the seed file."""
    if container.demo is None:
        raise click.ClickException(
            f"Seed file {container.settings.seed_file} has no demo order"
        )
    _run_checkout(container, container.demo.customer_name, container.demo.items)
