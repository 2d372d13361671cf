"""Receipt and Quote: the priced outcome of a cart."""

from __future__ import annotations

from dataclasses import dataclass

from checkout.domain.model.value_objects import Money

RECEIPT_SEPARATOR = "-" * 22


@dataclass(frozen=True)
class Quote:
    """Totals for a cart before anything is charged."""

    subtotal: Money
    shipping: Money
    needs_shipping: bool

    @property
    def total(self) -> Money:
        return self.subtotal + self.shipping


@dataclass(frozen=True)
class ReceiptLine:

    quantity: int
    product_name: str
    line_total: Money


@dataclass(frozen=True)
class Receipt:

    customer_name: str
    lines: tuple[ReceiptLine, ...]
    subtotal: Money
    shipping: Money
    total: Money
    balance: Money  # customer balance after payment

    def render(self) -> list[str]:
        return [
            "** Checkout receipt **",
            *(
                f"{line.quantity}x {line.product_name} {line.line_total}"
                for line in self.lines
            ),
            RECEIPT_SEPARATOR,
            f"Subtotal {self.subtotal}",
            f"Shipping {self.shipping}",
            f"Amount {self.total}",
            f"Customer balance {self.balance}",
        ]
