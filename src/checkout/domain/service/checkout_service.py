"""Domain service: Checkout.

Turns a cart into a paid, stock-adjusted transaction.

Validate-then-commit: every check runs before any mutation, so a failed
checkout leaves customer balance and product stock untouched. Each check
returns its failure as a value and the first one found aborts the
checkout.

Commit order is observable and fixed:
  1. shipment notice (only if something ships)
  2. payment
  3. stock decrement, in cart order
  4. receipt
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date

from checkout.domain.exceptions import (
    CheckoutError,
    EmptyCartError,
    ExpiredProductError,
    InsufficientBalanceError,
    InvariantViolation,
    OutOfStockError,
)
from checkout.domain.model.cart import Cart, CartItem
from checkout.domain.model.customer import Customer
from checkout.domain.model.receipt import Quote, Receipt, ReceiptLine
from checkout.domain.model.value_objects import Money
from checkout.domain.repository.shipment_notifier import ShipmentNotifier
from checkout.domain.service.shipping_service import build_manifest

logger = logging.getLogger(__name__)

Clock = Callable[[], date]


class CheckoutService:

    def __init__(
        self,
        notifier: ShipmentNotifier,
        shipping_fee: Money,
        clock: Clock = date.today,
    ) -> None:
        self._notifier = notifier
        self._shipping_fee = shipping_fee
        self._clock = clock

    # --- Pricing ----------------------------------------------------------------

    def quote(self, cart: Cart) -> Quote:
        """Subtotal plus one flat shipping fee if any item ships."""
        subtotal = Money.zero(self._shipping_fee.currency)
        needs_shipping = False
        for item in cart.items:
            subtotal = subtotal + item.line_total
            if item.product.is_shippable:
                needs_shipping = True
        shipping = self._shipping_fee if needs_shipping else Money.zero(subtotal.currency)
        return Quote(subtotal=subtotal, shipping=shipping, needs_shipping=needs_shipping)

    # --- Validation -------------------------------------------------------------

    def validate(self, customer: Customer, cart: Cart) -> CheckoutError | None:
        """Return the first reason this checkout cannot proceed, or None."""
        if cart.is_empty():
            return EmptyCartError()

        today = self._clock()
        for item in cart.items:
            error = self._check_item(item, cart, today)
            if error is not None:
                return error

        total = self.quote(cart).total
        if not customer.can_afford(total):
            return InsufficientBalanceError(required=total, balance=customer.balance)
        return None

    @staticmethod
    def _check_item(item: CartItem, cart: Cart, today: date) -> CheckoutError | None:
        product = item.product
        if product.is_expired(today):
            return ExpiredProductError(product.name)
        # Demand is summed across every entry for this product, not just this one.
        requested = cart.quantity_for(product.id)
        if requested > product.quantity:
            return OutOfStockError(product.name, requested, product.quantity)
        return None

    # --- Checkout ---------------------------------------------------------------

    def checkout(self, customer: Customer, cart: Cart) -> Receipt:
        """Validate, then charge the customer and deduct stock.

        Raises the first ``CheckoutError`` found; nothing is mutated in
        that case. Once validation passes, the commit cannot fail short
        of an ``InvariantViolation``.
        """
        error = self.validate(customer, cart)
        if error is not None:
            logger.info("Checkout for %s rejected: %s", customer.name, error)
            raise error

        quote = self.quote(cart)

        if quote.needs_shipping:
            self._notifier.notify(build_manifest(cart.items))

        try:
            customer.pay(quote.total)
        except InsufficientBalanceError as exc:
            raise InvariantViolation(
                f"Payment failed after balance was validated: {exc}"
            ) from exc

        for item in cart.items:
            item.product.decrease_quantity(item.quantity.value)
            logger.debug(
                "Stock of %s decreased by %d to %d",
                item.product.name, item.quantity.value, item.product.quantity,
            )

        logger.info(
            "Checkout for %s complete: total %s, balance %s",
            customer.name, quote.total, customer.balance,
        )
        return Receipt(
            customer_name=customer.name,
            lines=tuple(
                ReceiptLine(
                    quantity=item.quantity.value,
                    product_name=item.product.name,
                    line_total=item.line_total,
                )
                for item in cart.items
            ),
            subtotal=quote.subtotal,
            shipping=quote.shipping,
            total=quote.total,
            balance=customer.balance,
        )
