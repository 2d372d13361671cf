"""In-memory repositories.

Nothing outlives the process: the catalog and customers are loaded from
seed data at startup and mutated in place by checkout.
"""

from __future__ import annotations

from checkout.domain.model.customer import Customer
from checkout.domain.model.product import Product
from checkout.domain.repository.customer_repository import CustomerRepository
from checkout.domain.repository.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self.save(p)

    def get_by_id(self, product_id: str) -> Product | None:
        return self._store.get(product_id)

    def get_by_name(self, name: str) -> Product | None:
        for p in self._store.values():
            if p.name.lower() == name.strip().lower():
                return p
        return None

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        self._store[product.id] = product


class InMemoryCustomerRepository(CustomerRepository):

    def __init__(self, customers: list[Customer] | None = None) -> None:
        self._store: dict[str, Customer] = {}
        for c in customers or []:
            self.save(c)

    def get_by_name(self, name: str) -> Customer | None:
        return self._store.get(name.strip().lower())

    def list_all(self) -> list[Customer]:
        return list(self._store.values())

    def save(self, customer: Customer) -> None:
        self._store[customer.name.lower()] = customer
