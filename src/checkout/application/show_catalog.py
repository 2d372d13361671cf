"""Application service: Show Catalog use case (query)."""

from __future__ import annotations

from checkout.application.dto import CatalogLineDTO
from checkout.domain.repository.product_repository import ProductRepository


class ShowCatalogHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[CatalogLineDTO]:
        return [
            CatalogLineDTO(
                product_id=p.id,
                name=p.name,
                price=p.price.rounded(),
                quantity=p.quantity,
                kind=p.kind,
                expiry_date=p.expiry_date.isoformat() if p.expiry_date else "",
                weight_grams=p.weight.grams if p.weight is not None else None,
            )
            for p in self._product_repo.list_all()
        ]
