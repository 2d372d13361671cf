"""Unit tests for the checkout domain service."""

from datetime import timedelta

import pytest

from checkout.domain.exceptions import (
    EmptyCartError,
    ExpiredProductError,
    InsufficientBalanceError,
    InvariantViolation,
    OutOfStockError,
)
from checkout.domain.model.cart import Cart
from checkout.domain.model.customer import Customer
from checkout.domain.model.value_objects import Money
from checkout.domain.service.checkout_service import CheckoutService
from tests.fakes import TODAY, RecordingNotifier, fixed_clock, make_products


def _service(notifier=None, fee="30", clock=fixed_clock):
    return CheckoutService(
        notifier=notifier or RecordingNotifier(),
        shipping_fee=Money.of(fee),
        clock=clock,
    )


def _reference_cart(products):
    cart = Cart()
    cart.add(products["cheese"], 2)
    cart.add(products["biscuits"], 1)
    cart.add(products["scratch_card"], 1)
    return cart


def _stock(products):
    return {key: p.quantity for key, p in products.items()}


class TestReferenceScenario:

    def test_totals_balance_and_stock(self):
        products = make_products()
        customer = Customer(name="Mariam", balance=Money.of("1000"))

        receipt = _service().checkout(customer, _reference_cart(products))

        assert receipt.subtotal == Money.of("400")
        assert receipt.shipping == Money.of("30")
        assert receipt.total == Money.of("430")
        assert customer.balance == Money.of("570")
        assert _stock(products) == {
            "cheese": 3, "biscuits": 1, "tv": 3, "scratch_card": 9,
        }

    def test_shipment_notice(self):
        products = make_products()
        notifier = RecordingNotifier()
        customer = Customer(name="Mariam", balance=Money.of("1000"))

        _service(notifier).checkout(customer, _reference_cart(products))

        assert len(notifier.manifests) == 1
        assert notifier.manifests[0].render() == [
            "** Shipment notice **",
            "2x Cheese 400g",
            "Total package weight 0.4kg",
        ]

    def test_receipt_text(self):
        products = make_products()
        customer = Customer(name="Mariam", balance=Money.of("1000"))

        receipt = _service().checkout(customer, _reference_cart(products))

        assert receipt.render() == [
            "** Checkout receipt **",
            "2x Cheese 200",
            "1x Biscuits 150",
            "1x Scratch Card 50",
            "----------------------",
            "Subtotal 400",
            "Shipping 30",
            "Amount 430",
            "Customer balance 570",
        ]

    def test_repeat_with_fresh_state_is_identical(self):
        outputs = []
        for _ in range(2):
            products = make_products()
            notifier = RecordingNotifier()
            customer = Customer(name="Mariam", balance=Money.of("1000"))
            receipt = _service(notifier).checkout(customer, _reference_cart(products))
            outputs.append((notifier.manifests[0].render(), receipt.render()))
        assert outputs[0] == outputs[1]


class TestShippingFee:

    def test_no_fee_without_shippable_items(self):
        products = make_products()
        customer = Customer(name="Mariam", balance=Money.of("1000"))
        notifier = RecordingNotifier()
        cart = Cart()
        cart.add(products["scratch_card"], 2)

        receipt = _service(notifier).checkout(customer, cart)

        assert receipt.shipping == Money.of("0")
        assert receipt.total == Money.of("100")
        assert notifier.manifests == []

    def test_single_flat_fee_for_many_shippable_items(self):
        products = make_products()
        customer = Customer(name="Mariam", balance=Money.of("10000"))
        cart = Cart()
        cart.add(products["cheese"], 1)
        cart.add(products["tv"], 2)

        receipt = _service().checkout(customer, cart)

        assert receipt.shipping == Money.of("30")
        assert receipt.total == Money.of("6130")

    def test_fee_is_configurable(self):
        products = make_products()
        customer = Customer(name="Mariam", balance=Money.of("1000"))
        cart = Cart()
        cart.add(products["cheese"], 1)

        receipt = _service(fee="12.5").checkout(customer, cart)

        assert receipt.total == Money.of("112.5")
        assert customer.balance == Money.of("887.5")


class TestCheckoutFailures:

    def test_empty_cart(self):
        customer = Customer(name="Mariam", balance=Money.of("1000"))
        with pytest.raises(EmptyCartError, match="Cart is empty"):
            _service().checkout(customer, Cart())
        assert customer.balance == Money.of("1000")

    def test_expired_product_leaves_state_unchanged(self):
        products = make_products()
        customer = Customer(name="Mariam", balance=Money.of("1000"))
        cart = _reference_cart(products)
        notifier = RecordingNotifier()
        later = lambda: TODAY + timedelta(days=2)  # noqa: E731

        with pytest.raises(ExpiredProductError, match="Biscuits is expired") as exc_info:
            _service(notifier, clock=later).checkout(customer, cart)

        assert exc_info.value.product_name == "Biscuits"
        assert customer.balance == Money.of("1000")
        assert _stock(products) == _stock(make_products())
        assert notifier.manifests == []

    def test_first_failing_item_in_cart_order_reported(self):
        products = make_products()
        customer = Customer(name="Mariam", balance=Money.of("1000"))
        cart = _reference_cart(products)
        much_later = lambda: TODAY + timedelta(days=30)  # noqa: E731

        with pytest.raises(ExpiredProductError, match="Cheese"):
            _service(clock=much_later).checkout(customer, cart)

    def test_out_of_stock_at_checkout(self):
        products = make_products()
        customer = Customer(name="Mariam", balance=Money.of("10000"))
        cart = Cart()
        cart.add(products["tv"], 3)
        products["tv"].quantity = 2  # sold elsewhere after it was added

        with pytest.raises(OutOfStockError, match="TV is out of stock") as exc_info:
            _service().checkout(customer, cart)

        assert exc_info.value.product_name == "TV"
        assert products["tv"].quantity == 2
        assert customer.balance == Money.of("10000")

    def test_cross_item_demand_checked_at_checkout(self):
        products = make_products()
        customer = Customer(name="Mariam", balance=Money.of("10000"))
        cart = Cart()
        cart.add(products["tv"], 1)
        cart.add(products["tv"], 1)
        products["tv"].quantity = 1

        with pytest.raises(OutOfStockError, match=r"need 2, have 1"):
            _service().checkout(customer, cart)
        assert products["tv"].quantity == 1

    def test_insufficient_balance_including_shipping(self):
        products = make_products()
        customer = Customer(name="Mariam", balance=Money.of("429"))
        notifier = RecordingNotifier()

        with pytest.raises(InsufficientBalanceError, match="enough balance"):
            _service(notifier).checkout(customer, _reference_cart(products))

        assert customer.balance == Money.of("429")
        assert _stock(products) == _stock(make_products())
        assert notifier.manifests == []

    def test_exact_balance_succeeds(self):
        products = make_products()
        customer = Customer(name="Mariam", balance=Money.of("430"))
        _service().checkout(customer, _reference_cart(products))
        assert customer.balance == Money.of("0")


class TestValidate:

    def test_returns_none_when_valid(self):
        products = make_products()
        customer = Customer(name="Mariam", balance=Money.of("1000"))
        assert _service().validate(customer, _reference_cart(products)) is None

    def test_returns_error_without_raising(self):
        customer = Customer(name="Mariam", balance=Money.of("1000"))
        assert isinstance(_service().validate(customer, Cart()), EmptyCartError)


class TestCommitOrdering:

    def test_notice_sent_before_payment(self):
        products = make_products()
        customer = Customer(name="Mariam", balance=Money.of("1000"))
        seen = []
        notifier = RecordingNotifier(
            on_notify=lambda _: seen.append((customer.balance, products["cheese"].quantity))
        )

        _service(notifier).checkout(customer, _reference_cart(products))

        assert seen == [(Money.of("1000"), 5)]

    def test_payment_failure_after_validation_is_invariant_violation(self):
        products = make_products()
        customer = Customer(name="Mariam", balance=Money.of("1000"))
        # Drain the balance from inside the notifier, between validation and payment.
        notifier = RecordingNotifier(
            on_notify=lambda _: setattr(customer, "balance", Money.of("0"))
        )

        with pytest.raises(InvariantViolation, match="Payment failed"):
            _service(notifier).checkout(customer, _reference_cart(products))
