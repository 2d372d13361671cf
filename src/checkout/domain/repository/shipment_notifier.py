"""Outbound port for shipment notices."""

from __future__ import annotations

from abc import ABC, abstractmethod

from checkout.domain.service.shipping_service import ShipmentManifest


class ShipmentNotifier(ABC):

    @abstractmethod
    def notify(self, manifest: ShipmentManifest) -> None:
        """Publish a shipment manifest. Called before the customer is charged."""
