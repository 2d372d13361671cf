"""Domain service: Shipping.

Builds the shipment manifest for the shippable items of a cart.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from checkout.domain.model.cart import CartItem
from checkout.domain.model.value_objects import Weight


@dataclass(frozen=True)
class ShipmentLine:

    quantity: int
    product_name: str
    weight: Weight  # unit weight x quantity

    def render(self) -> str:
        return f"{self.quantity}x {self.product_name} {self.weight.grams}g"


@dataclass(frozen=True)
class ShipmentManifest:

    lines: tuple[ShipmentLine, ...]

    @property
    def total_weight(self) -> Weight:
        total = Weight.zero()
        for line in self.lines:
            total = total + line.weight
        return total

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def render(self) -> list[str]:
        return [
            "** Shipment notice **",
            *(line.render() for line in self.lines),
            f"Total package weight {self.total_weight.kilograms_display}kg",
        ]


def build_manifest(items: Iterable[CartItem]) -> ShipmentManifest:
    """One line per shippable item, in cart order."""
    lines = [
        ShipmentLine(
            quantity=item.quantity.value,
            product_name=item.product.name,
            weight=item.product.weight * item.quantity.value,
        )
        for item in items
        if item.product.weight is not None
    ]
    return ShipmentManifest(lines=tuple(lines))
