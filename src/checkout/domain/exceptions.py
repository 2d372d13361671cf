"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class CheckoutError(DomainException):
    """A checkout was aborted. Nothing has been mutated."""


class EmptyCartError(CheckoutError):

    def __init__(self) -> None:
        super().__init__("Cart is empty")


class ProductCheckoutError(CheckoutError):
    """A checkout failure caused by one specific product."""

    def __init__(self, product_name: str, message: str) -> None:
        super().__init__(message)
        self.product_name = product_name


class ExpiredProductError(ProductCheckoutError):

    def __init__(self, product_name: str) -> None:
        super().__init__(product_name, f"{product_name} is expired")


class OutOfStockError(ProductCheckoutError):

    headline = "{name} is out of stock"

    def __init__(self, product_name: str, requested: int, available: int) -> None:
        super().__init__(
            product_name,
            self.headline.format(name=product_name)
            + f" (need {requested}, have {available} available)",
        )
        self.requested = requested
        self.available = available


class InsufficientStockError(OutOfStockError):
    """Raised by ``Cart.add`` when the cart would ask for more than is stocked."""

    headline = "Not enough stock for {name}"


class InsufficientBalanceError(CheckoutError):

    def __init__(self, required: object, balance: object) -> None:
        super().__init__(
            f"Customer does not have enough balance (need {required}, have {balance})"
        )
        self.required = required
        self.balance = balance


class InvariantViolation(RuntimeError):
    """Internal consistency failure. Never reported as a user error."""
