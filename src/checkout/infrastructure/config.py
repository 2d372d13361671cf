"""Runtime configuration, read from environment variables.

CLI options override these values; see ``cli/main.py``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from decimal import Decimal, InvalidOperation
from pathlib import Path

from checkout.domain.exceptions import ValidationError

DEFAULT_SEED_FILE = Path(__file__).resolve().parents[1] / "data" / "seed.json"
DEFAULT_SHIPPING_FEE = Decimal("30")


def _get_decimal(name: str, default: Decimal) -> Decimal:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = Decimal(raw.strip())
    except InvalidOperation as exc:
        raise ValidationError(f"{name} must be a number, got {raw!r}") from exc
    if not value.is_finite():
        raise ValidationError(f"{name} must be a finite number, got {raw!r}")
    return value


def _get_path(name: str, default: Path) -> Path:
    raw = os.getenv(name, "").strip()
    return Path(raw) if raw else default


@dataclass(frozen=True)
class Settings:
    shipping_fee: Decimal = DEFAULT_SHIPPING_FEE
    currency: str = "USD"
    seed_file: Path = DEFAULT_SEED_FILE
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            shipping_fee=_get_decimal("CHECKOUT_SHIPPING_FEE", DEFAULT_SHIPPING_FEE),
            currency=os.getenv("CHECKOUT_CURRENCY", "USD").strip() or "USD",
            seed_file=_get_path("CHECKOUT_SEED_FILE", DEFAULT_SEED_FILE),
            log_level=os.getenv("LOG_LEVEL", "WARNING").strip().upper() or "WARNING",
        )

    def override(
        self,
        shipping_fee: Decimal | None = None,
        seed_file: Path | None = None,
        log_level: str | None = None,
    ) -> Settings:
        """Return a copy with every non-None argument applied."""
        changes: dict[str, object] = {}
        if shipping_fee is not None:
            if not shipping_fee.is_finite():
                raise ValidationError(f"Shipping fee must be a finite number, got {shipping_fee}")
            if shipping_fee < 0:
                raise ValidationError("Shipping fee cannot be negative")
            changes["shipping_fee"] = shipping_fee
        if seed_file is not None:
            changes["seed_file"] = seed_file
        if log_level is not None:
            changes["log_level"] = log_level.upper()
        return replace(self, **changes)
