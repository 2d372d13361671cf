"""Cart and CartItem.

The cart references catalog products; it never copies them. Items keep
insertion order, which is also the order of the shipment notice and
receipt lines.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from checkout.domain.exceptions import InsufficientStockError
from checkout.domain.model.product import Product
from checkout.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class CartItem:

    product: Product
    quantity: Quantity

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity.value


@dataclass
class Cart:
    """Ordered list of items staged for checkout.

    Adding the same product twice keeps two entries, but stock is checked
    against the combined demand for that product.
    """

    _items: list[CartItem] = field(default_factory=list)

    def add(self, product: Product, quantity: int) -> CartItem:
        qty = Quantity(quantity)
        requested = self.quantity_for(product.id) + qty.value
        if requested > product.quantity:
            raise InsufficientStockError(product.name, requested, product.quantity)
        item = CartItem(product=product, quantity=qty)
        self._items.append(item)
        return item

    def is_empty(self) -> bool:
        return not self._items

    @property
    def items(self) -> tuple[CartItem, ...]:
        return tuple(self._items)

    def quantity_for(self, product_id: str) -> int:
        """Total quantity requested for one product across all entries."""
        return sum(
            item.quantity.value for item in self._items
            if item.product.id == product_id
        )

    def __len__(self) -> int:
        return len(self._items)
