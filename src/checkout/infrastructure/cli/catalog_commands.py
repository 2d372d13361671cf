"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from checkout.infrastructure.bootstrap import Container


@click.command("catalog")
@click.pass_obj
def catalog_list(container: Container) -> None:
    """List all products in the catalog."""
    lines = container.catalog_handler().handle()

    if not lines:
        click.echo("No products found.")
        return

    click.echo(
        f"{'ID':<4} {'Name':<16} {'Price':>8} {'Stock':>6} {'Kind':<20} {'Expires':<10} {'Weight':>8}"
    )
    click.echo("-" * 78)
    for line in lines:
        weight = f"{line.weight_grams}g" if line.weight_grams is not None else ""
        click.echo(
            f"{line.product_id:<4} {line.name:<16} {line.price:>8} {line.quantity:>6} "
            f"{line.kind:<20} {line.expiry_date:<10} {weight:>8}"
        )
