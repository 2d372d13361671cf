"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CartItemSpec:
    """Input: what the customer asked for (product name + quantity)."""

    product_name: str
    quantity: int


@dataclass(frozen=True)
class ReceiptLineDTO:
    """Output: a single receipt line as displayed to the user."""

    product_name: str
    quantity: int
    line_total: int  # rounded to whole currency units


@dataclass(frozen=True)
class ReceiptDTO:
    """Output: a completed checkout."""

    customer_name: str
    lines: list[ReceiptLineDTO]
    subtotal: int
    shipping: int
    total: int
    balance: int
    text: list[str]  # rendered receipt, one entry per console line


@dataclass(frozen=True)
class CatalogLineDTO:
    """Output: one product as listed in the catalog."""

    product_id: str
    name: str
    price: int
    quantity: int
    kind: str
    expiry_date: str  # ISO date, or "" when not expirable
    weight_grams: int | None
