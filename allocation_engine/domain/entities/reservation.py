"""Reservation item — one customer reservation reported by an intake feed."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import datetime, timezone

from allocation_engine.domain.value_objects.enums import SourceTier
from allocation_engine.domain.value_objects.sku import Sku

logger = logging.getLogger(__name__)

# Substituted for missing or unparsable receipt times; sorts first within a tier.
EPOCH_SENTINEL = datetime(1970, 1, 1, tzinfo=timezone.utc)

_FALLBACK_FORMATS = (
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M",
    "%Y/%m/%d %H:%M:%S",
    "%Y/%m/%d %H:%M",
    "%Y.%m.%d %H:%M:%S",
    "%Y.%m.%d %H:%M",
)


@dataclass(frozen=True)
class ReservationItem:
    customer_name: str
    store_code: str
    model: str
    color: str
    receipt_time: str | None = None
    reservation_number: str | None = None
    tier: SourceTier | None = None

    @property
    def sku(self) -> Sku:
        return Sku(model=self.model, color=self.color)

    @property
    def dedup_key(self) -> str:
        return f"{self.customer_name}_{self.store_code}"

    @property
    def source(self) -> str | None:
        return self.tier.source if self.tier is not None else None

    def with_tier(self, tier: SourceTier) -> ReservationItem:
        return replace(self, tier=tier)


def parse_receipt_time(value: str | None) -> datetime:
    """Parse a receipt timestamp; fall back to EPOCH_SENTINEL.

    Naive timestamps are treated as UTC so every result is comparable.
    """
    if not value or not str(value).strip():
        return EPOCH_SENTINEL

    text = str(value).strip()
    parsed: datetime | None = None
    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        for fmt in _FALLBACK_FORMATS:
            try:
                parsed = datetime.strptime(text, fmt)
                break
            except ValueError:
                continue

    if parsed is None:
        logger.warning("Unparsable receipt time %r, using epoch sentinel", text)
        return EPOCH_SENTINEL

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
