"""Prices, item counts and parcel weights.

All three are frozen and compare by value. Amounts are Decimals; NaN and
infinity are refused at construction so every amount can be rounded for
the receipt.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from checkout.domain.exceptions import ValidationError


def _to_decimal(value: str | float | int | Decimal, what: str) -> Decimal:
    if isinstance(value, bool) or not isinstance(value, (str, float, int, Decimal)):
        raise ValidationError(f"Invalid {what}: {value!r}")
    try:
        result = Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid {what}: {value!r}") from exc
    if not result.is_finite():
        raise ValidationError(f"Invalid {what}: {value!r} is not a finite number")
    return result


@dataclass(frozen=True)
class Money:
    """A price, balance or total in one currency.

    Sums keep full precision; ``rounded()`` gives the whole units printed on
    the receipt.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __sub__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        result = self.amount - other.amount
        if result < Decimal("0"):
            raise ValidationError("Money subtraction would result in a negative amount")
        return Money(result, self.currency)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    def __lt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount >= other.amount

    # --- Display --------------------------------------------------------------

    def rounded(self) -> int:
        """Whole currency units, half-up. Display only."""
        return int(self.amount.to_integral_value(rounding=ROUND_HALF_UP))

    def __str__(self) -> str:
        return str(self.rounded())

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal, currency: str = "USD") -> Money:
        """Convenient factory that coerces to Decimal safely."""
        return Money(_to_decimal(amount, "money amount"), currency)

    @staticmethod
    def zero(currency: str = "USD") -> Money:
        return Money(Decimal("0"), currency)


@dataclass(frozen=True)
class Quantity:
    """How many units of a product a cart line asks for. Always >= 1."""

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Weight:
    """Physical weight in kilograms."""

    kilograms: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.kilograms, Decimal):
            raise ValidationError(
                f"Weight must be a Decimal, got {type(self.kilograms).__name__}"
            )
        if not self.kilograms.is_finite():
            raise ValidationError(f"Weight must be finite, got {self.kilograms}")
        if self.kilograms < Decimal("0"):
            raise ValidationError(f"Weight cannot be negative, got {self.kilograms}")

    def __add__(self, other: Weight) -> Weight:
        return Weight(self.kilograms + other.kilograms)

    def __mul__(self, factor: int) -> Weight:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Weight by int, got {type(factor).__name__}")
        return Weight(self.kilograms * factor)

    @property
    def grams(self) -> int:
        return int((self.kilograms * 1000).to_integral_value(rounding=ROUND_HALF_UP))

    @property
    def kilograms_display(self) -> str:
        tenths = (self.kilograms * 10).to_integral_value(rounding=ROUND_HALF_UP)
        return f"{tenths / 10:.1f}"

    @staticmethod
    def of(kilograms: str | float | int | Decimal) -> Weight:
        return Weight(_to_decimal(kilograms, "weight"))

    @staticmethod
    def zero() -> Weight:
        return Weight(Decimal("0"))
