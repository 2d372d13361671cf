"""Application service: Checkout use case.

Resolves the customer and the requested products, stages them in a
cart and hands the cart to the domain checkout service.
"""

from __future__ import annotations

from checkout.application.dto import CartItemSpec, ReceiptDTO, ReceiptLineDTO
from checkout.domain.exceptions import EntityNotFoundError
from checkout.domain.model.cart import Cart
from checkout.domain.model.receipt import Receipt
from checkout.domain.repository.customer_repository import CustomerRepository
from checkout.domain.repository.product_repository import ProductRepository
from checkout.domain.service.checkout_service import CheckoutService


class CheckoutHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        customer_repo: CustomerRepository,
        service: CheckoutService,
    ) -> None:
        self._product_repo = product_repo
        self._customer_repo = customer_repo
        self._service = service

    def handle(self, customer_name: str, item_specs: list[CartItemSpec]) -> ReceiptDTO:
        """Check out *item_specs* for *customer_name*.

        Steps:
        1. Resolve the customer and every product name (fail if not found).
        2. Add each item to a fresh cart (stock is checked at add-time).
        3. Let the checkout service validate, charge and deduct stock.
        4. Store the updated aggregates and return a DTO.
        """
        customer = self._customer_repo.get_by_name(customer_name)
        if customer is None:
            raise EntityNotFoundError(f"Customer not found: '{customer_name}'")

        cart = Cart()
        for spec in item_specs:
            product = self._product_repo.get_by_name(spec.product_name)
            if product is None:
                raise EntityNotFoundError(
                    f"Product not found: '{spec.product_name}'"
                )
            cart.add(product, spec.quantity)

        receipt = self._service.checkout(customer, cart)

        self._customer_repo.save(customer)
        for item in cart.items:
            self._product_repo.save(item.product)

        return self._to_dto(receipt)

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(receipt: Receipt) -> ReceiptDTO:
        return ReceiptDTO(
            customer_name=receipt.customer_name,
            lines=[
                ReceiptLineDTO(
                    product_name=line.product_name,
                    quantity=line.quantity,
                    line_total=line.line_total.rounded(),
                )
                for line in receipt.lines
            ],
            subtotal=receipt.subtotal.rounded(),
            shipping=receipt.shipping.rounded(),
            total=receipt.total.rounded(),
            balance=receipt.balance.rounded(),
            text=receipt.render(),
        )
