"""Load catalog products and customers from a JSON seed file.

Expected shape::

    {
      "products": [
        {"id": "1", "name": "Cheese", "price": "100", "quantity": 5,
         "expires_in_days": 2, "weight_kg": "0.2"}
      ],
      "customers": [{"name": "Mariam", "balance": "1000"}]
    }

A product expires either on a fixed ``expiry_date`` (ISO format) or
``expires_in_days`` after *today*. A product with ``weight_kg`` ships.
An optional ``demo`` block ({"customer": ..., "items": [{"product": ...,
"quantity": ...}]}) names the order replayed by ``checkout demo``.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import date, timedelta
from pathlib import Path
from typing import Any

from checkout.application.dto import CartItemSpec
from checkout.domain.exceptions import ValidationError
from checkout.domain.model.customer import Customer
from checkout.domain.model.product import Product
from checkout.domain.model.value_objects import Money, Weight

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DemoOrder:
    """A canned order replayed by the `checkout demo` command."""

    customer_name: str
    items: list[CartItemSpec]


@dataclass(frozen=True)
class Seed:

    products: list[Product]
    customers: list[Customer]
    demo: DemoOrder | None = None


def load_seed(file_path: Path, today: date, currency: str = "USD") -> Seed:
    try:
        raw = json.loads(file_path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ValidationError(f"Seed file not found: {file_path}") from exc
    except json.JSONDecodeError as exc:
        raise ValidationError(f"Seed file {file_path} is not valid JSON: {exc}") from exc

    seed = parse_seed(raw, today, currency)
    logger.info(
        "Loaded %d products and %d customers from %s",
        len(seed.products), len(seed.customers), file_path,
    )
    return seed


def parse_seed(raw: dict[str, Any], today: date, currency: str = "USD") -> Seed:
    if not isinstance(raw, dict):
        raise ValidationError("Seed data must be a JSON object")

    products = [
        _parse_product(item, today, currency) for item in _records(raw, "products")
    ]
    customers = [_parse_customer(item, currency) for item in _records(raw, "customers")]

    names = [p.name.lower() for p in products]
    if len(set(names)) != len(names):
        raise ValidationError("Seed data contains duplicate product names")
    ids = [p.id for p in products]
    if len(set(ids)) != len(ids):
        raise ValidationError("Seed data contains duplicate product IDs")
    customer_names = [c.name.lower() for c in customers]
    if len(set(customer_names)) != len(customer_names):
        raise ValidationError("Seed data contains duplicate customer names")

    demo = _parse_demo(raw["demo"]) if "demo" in raw else None
    return Seed(products=products, customers=customers, demo=demo)


# --- Per-record parsing -------------------------------------------------------


def _records(raw: dict[str, Any], key: str) -> list[dict[str, Any]]:
    records = raw.get(key, [])
    if not isinstance(records, list):
        raise ValidationError(f"Seed field '{key}' must be a list")
    for record in records:
        if not isinstance(record, dict):
            raise ValidationError(
                f"Every entry in '{key}' must be an object, got {record!r}"
            )
    return records


def _parse_product(item: dict[str, Any], today: date, currency: str) -> Product:
    try:
        return Product.create(
            id=str(item["id"]),
            name=item["name"],
            price=Money.of(item["price"], currency),
            quantity=item["quantity"],
            expiry_date=_parse_expiry(item, today),
            weight=Weight.of(item["weight_kg"]) if "weight_kg" in item else None,
        )
    except KeyError as exc:
        raise ValidationError(f"Product record is missing field {exc}") from exc
    except TypeError as exc:
        raise ValidationError(f"Invalid product record {item!r}: {exc}") from exc


def _parse_expiry(item: dict[str, Any], today: date) -> date | None:
    if "expiry_date" in item and "expires_in_days" in item:
        raise ValidationError(
            f"Product '{item.get('name')}' sets both expiry_date and expires_in_days"
        )
    if "expiry_date" in item:
        try:
            return date.fromisoformat(item["expiry_date"])
        except (TypeError, ValueError) as exc:
            raise ValidationError(
                f"Invalid expiry_date for '{item.get('name')}': {item['expiry_date']!r}"
            ) from exc
    if "expires_in_days" in item:
        days = item["expires_in_days"]
        if not isinstance(days, int) or isinstance(days, bool):
            raise ValidationError(
                f"expires_in_days for '{item.get('name')}' must be an integer"
            )
        try:
            return today + timedelta(days=days)
        except OverflowError as exc:
            raise ValidationError(
                f"expires_in_days for '{item.get('name')}' is out of range"
            ) from exc
    return None


def _parse_customer(item: dict[str, Any], currency: str) -> Customer:
    try:
        return Customer.create(
            name=item["name"],
            balance=Money.of(item["balance"], currency),
        )
    except KeyError as exc:
        raise ValidationError(f"Customer record is missing field {exc}") from exc
    except TypeError as exc:
        raise ValidationError(f"Invalid customer record {item!r}: {exc}") from exc


def _parse_demo(item: dict[str, Any]) -> DemoOrder:
    try:
        demo = DemoOrder(
            customer_name=item["customer"],
            items=[
                CartItemSpec(product_name=line["product"], quantity=line["quantity"])
                for line in item["items"]
            ],
        )
    except (KeyError, TypeError) as exc:
        raise ValidationError(f"Invalid demo order in seed data: {exc}") from exc

    names = [demo.customer_name, *(spec.product_name for spec in demo.items)]
    if not all(isinstance(name, str) for name in names):
        raise ValidationError("Demo order customer and product names must be strings")
    return demo
