"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from checkout.application.checkout_cart import CheckoutHandler
from checkout.application.show_catalog import ShowCatalogHandler
from checkout.domain.model.value_objects import Money
from checkout.domain.repository.shipment_notifier import ShipmentNotifier
from checkout.domain.service.checkout_service import CheckoutService, Clock
from checkout.infrastructure.config import Settings
from checkout.infrastructure.persistence.json_seed_loader import DemoOrder, load_seed
from checkout.infrastructure.persistence.memory_repositories import (
    InMemoryCustomerRepository,
    InMemoryProductRepository,
)


@dataclass
class Container:
    """Everything one CLI invocation needs, built from one seed load."""

    settings: Settings
    product_repo: InMemoryProductRepository
    customer_repo: InMemoryCustomerRepository
    checkout_service: CheckoutService
    demo: DemoOrder | None

    def checkout_handler(self) -> CheckoutHandler:
        return CheckoutHandler(
            product_repo=self.product_repo,
            customer_repo=self.customer_repo,
            service=self.checkout_service,
        )

    def catalog_handler(self) -> ShowCatalogHandler:
        return ShowCatalogHandler(product_repo=self.product_repo)


def build_container(
    settings: Settings,
    notifier: ShipmentNotifier,
    clock: Clock = date.today,
) -> Container:
    seed = load_seed(settings.seed_file, today=clock(), currency=settings.currency)
    service = CheckoutService(
        notifier=notifier,
        shipping_fee=Money.of(settings.shipping_fee, settings.currency),
        clock=clock,
    )
    return Container(
        settings=settings,
        product_repo=InMemoryProductRepository(seed.products),
        customer_repo=InMemoryCustomerRepository(seed.customers),
        checkout_service=service,
        demo=seed.demo,
    )
