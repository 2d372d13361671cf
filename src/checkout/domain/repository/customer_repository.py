"""Abstract repository for Customer aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from checkout.domain.model.customer import Customer


class CustomerRepository(ABC):

    @abstractmethod
    def get_by_name(self, name: str) -> Customer | None:
        """Return a customer by name (case-insensitive), or None."""

    @abstractmethod
    def list_all(self) -> list[Customer]:
        """Return every customer."""

    @abstractmethod
    def save(self, customer: Customer) -> None:
        """Store a new or updated customer."""
