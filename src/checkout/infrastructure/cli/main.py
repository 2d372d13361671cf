from __future__ import annotations

from decimal import Decimal, InvalidOperation
from pathlib import Path

import click

from checkout.domain.exceptions import DomainException
from checkout.infrastructure.bootstrap import build_container
from checkout.infrastructure.cli.catalog_commands import catalog_list
from checkout.infrastructure.cli.checkout_commands import checkout_buy, checkout_demo
from checkout.infrastructure.cli.console_notifier import ConsoleShipmentNotifier
from checkout.infrastructure.config import Settings
from checkout.infrastructure.logging_config import configure_logging


def _parse_fee(ctx: click.Context, param: click.Parameter, value: str | None) -> Decimal | None:
    if value is None:
        return None
    try:
        fee = Decimal(value)
    except InvalidOperation:
        raise click.BadParameter(f"'{value}' is not a number.")
    if not fee.is_finite():
        raise click.BadParameter(f"'{value}' is not a finite number.")
    return fee


@click.group()
@click.option(
    "--seed", "seed_file", type=click.Path(dir_okay=False, path_type=Path),
    default=None, help="JSON seed file with products and customers.",
)
@click.option(
    "--shipping-fee", callback=_parse_fee, default=None,
    help="Flat shipping fee charged when any item ships.",
)
@click.option("--log-level", default=None, help="Logging level (e.g. INFO, DEBUG).")
@click.pass_context
def cli(
    ctx: click.Context,
    seed_file: Path | None,
    shipping_fee: Decimal | None,
    log_level: str | None,
) -> None:
    """Checkout: retail checkout simulator"""
    try:
        settings = Settings.from_env().override(
            shipping_fee=shipping_fee, seed_file=seed_file, log_level=log_level,
        )
        configure_logging(settings.log_level)
        ctx.obj = build_container(settings, notifier=ConsoleShipmentNotifier())
    except DomainException as exc:
        raise click.ClickException(str(exc))


# Register subcommands
cli.add_command(catalog_list)
cli.add_command(checkout_buy)
cli.add_command(checkout_demo)
