"""Customer aggregate, a named wallet that checkout charges."""

from __future__ import annotations

from dataclasses import dataclass

from checkout.domain.exceptions import InsufficientBalanceError, ValidationError
from checkout.domain.model.value_objects import Money


@dataclass
class Customer:
    """Invariant: ``balance`` never drops below zero; payment fails instead."""

    name: str
    balance: Money

    @staticmethod
    def create(name: str, balance: Money) -> Customer:
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Customer name is required")
        return Customer(name=name.strip(), balance=balance)

    def can_afford(self, amount: Money) -> bool:
        return amount <= self.balance

    def pay(self, amount: Money) -> None:
        """Charge *amount* in full, or raise without touching the balance."""
        if not self.can_afford(amount):
            raise InsufficientBalanceError(required=amount, balance=self.balance)
        self.balance = self.balance - amount
