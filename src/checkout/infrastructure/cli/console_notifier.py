"""ShipmentNotifier that prints the notice to the console."""

from __future__ import annotations

import click

from checkout.domain.repository.shipment_notifier import ShipmentNotifier
from checkout.domain.service.shipping_service import ShipmentManifest


class ConsoleShipmentNotifier(ShipmentNotifier):

    def notify(self, manifest: ShipmentManifest) -> None:
        for line in manifest.render():
            click.echo(line)
