"""ReservationDeduplication — merge three ranked feeds into one work queue."""

from __future__ import annotations

from collections.abc import Iterable

from allocation_engine.domain.entities.reservation import ReservationItem, parse_receipt_time
from allocation_engine.domain.value_objects.enums import SourceTier
from allocation_engine.domain.value_objects.sku import Sku


def deduplicate_reservations(
    on_sale: list[ReservationItem],
    yard: list[ReservationItem],
    site: list[ReservationItem],
    configured: Iterable[Sku],
) -> list[ReservationItem]:
    """Build the ranked, deduplicated reservation queue.

    Rules:
      - Items whose (model, color) is not configured are dropped.
      - Keyed by ``customerName_storeCode``; on-sale items are inserted
        first, then yard, then site, each only if the key is absent. The
        surviving item is the highest-priority source for that pair.
      - On-sale and yard items are ordered by the receipt time of the
        matching site record for the same customer/store when one exists,
        otherwise by their own receipt time. Site items use their own.
      - Tiers are concatenated 1, 2, 3: priority always dominates time.

    Returns:
        Items tagged with their SourceTier, in assignment order.
    """
    wanted = set(configured)
    chosen: dict[str, ReservationItem] = {}

    for tier, feed in (
        (SourceTier.ON_SALE, on_sale),
        (SourceTier.YARD, yard),
        (SourceTier.SITE, site),
    ):
        for item in feed:
            if item.sku not in wanted:
                continue
            if item.dedup_key not in chosen:
                chosen[item.dedup_key] = item.with_tier(tier)

    # First site record per customer/store, unfiltered by SKU.
    site_times: dict[str, str | None] = {}
    for item in site:
        site_times.setdefault(item.dedup_key, item.receipt_time)

    def _site_governed_time(item: ReservationItem):
        return parse_receipt_time(site_times.get(item.dedup_key) or item.receipt_time)

    def _own_time(item: ReservationItem):
        return parse_receipt_time(item.receipt_time)

    survivors = list(chosen.values())
    queue: list[ReservationItem] = []
    for tier in SourceTier:
        in_tier = [i for i in survivors if i.tier == tier]
        key = _own_time if tier == SourceTier.SITE else _site_governed_time
        queue.extend(sorted(in_tier, key=key))
    return queue
