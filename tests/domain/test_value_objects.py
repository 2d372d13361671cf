"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from checkout.domain.exceptions import ValidationError
from checkout.domain.model.value_objects import Money, Quantity, Weight


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "USD"

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("ten")

    def test_float_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(10.5)

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_subtraction_going_negative_rejected(self):
        with pytest.raises(ValidationError, match="negative amount"):
            Money.of("5") - Money.of("10")

    def test_multiplication_by_int(self):
        assert Money.of("7.50") * 3 == Money.of("22.50")

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money.of("10", "USD") + Money.of("5", "EGP")

    def test_rounded_is_half_up(self):
        assert Money.of("10.5").rounded() == 11
        assert Money.of("10.49").rounded() == 10

    def test_str_is_whole_units(self):
        assert str(Money.of("430")) == "430"
        assert str(Money.of("99.5")) == "100"

    def test_arithmetic_keeps_full_precision(self):
        total = Money.of("0.4") + Money.of("0.4")
        assert total.amount == Decimal("0.8")
        assert total.rounded() == 1

    @pytest.mark.parametrize("raw", ["NaN", "sNaN", "Infinity", "-Infinity", "nan"])
    def test_of_rejects_non_finite(self, raw):
        with pytest.raises(ValidationError, match="not a finite number"):
            Money.of(raw)

    def test_non_finite_decimal_rejected(self):
        with pytest.raises(ValidationError, match="must be finite"):
            Money(Decimal("NaN"))
        with pytest.raises(ValidationError, match="must be finite"):
            Money(Decimal("Infinity"))

    @pytest.mark.parametrize("raw", [None, True, [1], {"amount": 1}])
    def test_of_rejects_non_numbers(self, raw):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of(raw)

    def test_rounded_handles_large_amounts(self):
        assert Money.of("1e30").rounded() == 10**30


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_non_integer_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(2.5)


# ── Weight ───────────────────────────────────────────────────────────────────


class TestWeight:

    def test_grams(self):
        assert Weight.of("0.2").grams == 200
        assert (Weight.of("0.2") * 2).grams == 400

    def test_grams_rounded_to_whole(self):
        assert Weight.of("0.0004").grams == 0
        assert Weight.of("0.0005").grams == 1

    def test_kilograms_display_one_decimal(self):
        assert Weight.of("0.4").kilograms_display == "0.4"
        assert Weight.of("5").kilograms_display == "5.0"
        assert Weight.of("0.25").kilograms_display == "0.3"

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Weight.of("-0.1")

    def test_non_finite_rejected(self):
        with pytest.raises(ValidationError, match="not a finite number"):
            Weight.of("Infinity")
        with pytest.raises(ValidationError, match="must be finite"):
            Weight(Decimal("NaN"))
