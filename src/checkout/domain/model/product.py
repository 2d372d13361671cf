"""Product aggregate.

Products are shared between the catalog and any cart that references
them; checkout decrements stock on the shared instance.

Shipping and expiry are optional capabilities carried as fields rather
than subclasses: a product is shippable when it has a ``weight`` and
expirable when it has an ``expiry_date``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from checkout.domain.exceptions import InvariantViolation, ValidationError
from checkout.domain.model.value_objects import Money, Weight


@dataclass(eq=False)
class Product:
    """A product in the catalog.

    Use ``Product.create()`` for new products; it validates the input.
    The ``__init__`` is intentionally simple so the seed loader and tests
    can build products directly.
    """

    id: str
    name: str
    price: Money
    quantity: int
    expiry_date: date | None = None
    weight: Weight | None = None

    @staticmethod
    def create(
        id: str,
        name: str,
        price: Money,
        quantity: int,
        expiry_date: date | None = None,
        weight: Weight | None = None,
    ) -> Product:
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Product name is required")
        if not isinstance(quantity, int) or isinstance(quantity, bool):
            raise ValidationError(
                f"Stock quantity must be an integer, got {type(quantity).__name__}"
            )
        if quantity < 0:
            raise ValidationError(f"Stock quantity for {name} cannot be negative")
        return Product(
            id=id,
            name=name.strip(),
            price=price,
            quantity=quantity,
            expiry_date=expiry_date,
            weight=weight,
        )

    # --- Capabilities ---------------------------------------------------------

    @property
    def is_expirable(self) -> bool:
        return self.expiry_date is not None

    @property
    def is_shippable(self) -> bool:
        return self.weight is not None

    @property
    def kind(self) -> str:
        if self.is_expirable and self.is_shippable:
            return "expirable+shippable"
        if self.is_expirable:
            return "expirable"
        if self.is_shippable:
            return "shippable"
        return "digital"

    def is_expired(self, today: date) -> bool:
        """True once *today* is past the expiry date. Never cached."""
        return self.expiry_date is not None and today > self.expiry_date

    # --- Stock ----------------------------------------------------------------

    def decrease_quantity(self, amount: int) -> None:
        """Deduct sold stock.

        Callers check availability first; reaching the guard below means
        that check was skipped.
        """
        if amount < 0:
            raise InvariantViolation(
                f"Cannot decrease stock of {self.name} by a negative amount ({amount})"
            )
        if amount > self.quantity:
            raise InvariantViolation(
                f"Stock of {self.name} would go negative "
                f"(decrease {amount}, have {self.quantity})"
            )
        self.quantity -= amount
