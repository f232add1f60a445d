"""Payload normalization — turns raw feed JSON into domain objects."""

from __future__ import annotations

import logging
from typing import Any

from allocation_engine.domain.entities.agent import Agent
from allocation_engine.domain.entities.reservation import ReservationItem

logger = logging.getLogger(__name__)


def clean_string(value: Any) -> str | None:
    """Strip whitespace and return None for empty or missing values."""
    if value is None:
        return None
    value = str(value).strip()
    return value if value else None


def _first(row: dict, *names: str) -> str | None:
    for name in names:
        value = clean_string(row.get(name))
        if value is not None:
            return value
    return None


def parse_reservation(row: dict) -> ReservationItem | None:
    """Build a ReservationItem; rows missing customer, model or color are dropped."""
    customer = _first(row, "customerName", "customer_name")
    model = _first(row, "model", "modelName")
    color = _first(row, "color")
    if not customer or not model or not color:
        return None
    return ReservationItem(
        customer_name=customer,
        store_code=_first(row, "storeCode", "store_code", "posCode") or "",
        model=model,
        color=color,
        receipt_time=_first(row, "receiptTime", "receipt_time", "reservationTime"),
        reservation_number=_first(row, "reservationNumber", "reservation_number"),
    )


def parse_reservations(payload: Any) -> list[ReservationItem]:
    """Accept ``{"data": [...]}`` or a bare list."""
    rows = payload.get("data") if isinstance(payload, dict) else payload
    if not isinstance(rows, list):
        logger.warning("Reservation payload has no data list, treating as empty")
        return []
    items = [parse_reservation(r) for r in rows if isinstance(r, dict)]
    parsed = [i for i in items if i is not None]
    if len(parsed) != len(rows):
        logger.info("Dropped %d malformed reservation rows", len(rows) - len(parsed))
    return parsed


def parse_agent(row: dict) -> Agent | None:
    agent_id = _first(row, "contactId", "id")
    name = _first(row, "target", "name")
    if not agent_id or not name:
        return None
    return Agent(
        id=agent_id,
        name=name,
        office=_first(row, "office") or "",
        department=_first(row, "department") or "",
        store=_first(row, "store", "storeName", "posName"),
    )


def parse_agents(payload: Any) -> list[Agent]:
    rows = payload.get("data") if isinstance(payload, dict) else payload
    if not isinstance(rows, list):
        logger.warning("Agent payload is not a list, treating as empty")
        return []
    agents = [parse_agent(r) for r in rows if isinstance(r, dict)]
    return [a for a in agents if a is not None]


def parse_stores(payload: Any) -> list[dict]:
    """Accept ``{"stores": [...]}`` or a bare list."""
    rows = payload.get("stores") if isinstance(payload, dict) else payload
    if not isinstance(rows, list):
        logger.warning("Store payload is not a list, treating as empty")
        return []
    return [r for r in rows if isinstance(r, dict)]
