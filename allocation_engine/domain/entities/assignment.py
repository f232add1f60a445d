"""Assignment entities — records, summary and the immutable result snapshot."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Mapping


@dataclass(frozen=True)
class AssignmentRecord:
    """Units of one SKU handed to one agent.

    Waterfall records always carry quantity 1 and the reservation they
    came from; proportional records carry the agent's whole share.
    """

    agent_id: str
    agent: str
    model: str
    color: str
    quantity: int
    priority: int | None = None
    source: str | None = None
    receipt_time: str | None = None
    reservation_number: str | None = None
    customer_name: str | None = None
    timestamp: str | None = None

    def to_dict(self) -> dict:
        return {
            "agentId": self.agent_id,
            "agent": self.agent,
            "model": self.model,
            "color": self.color,
            "quantity": self.quantity,
            "priority": self.priority,
            "source": self.source,
            "receiptTime": self.receipt_time,
            "reservationNumber": self.reservation_number,
            "customerName": self.customer_name,
            "timestamp": self.timestamp,
        }


@dataclass(frozen=True)
class SkippedItem:
    """A queue item that produced no record, with the reason."""

    customer_name: str
    store_code: str
    model: str
    color: str
    reason: str

    def to_dict(self) -> dict:
        return {
            "customerName": self.customer_name,
            "storeCode": self.store_code,
            "model": self.model,
            "color": self.color,
            "reason": self.reason,
        }


@dataclass(frozen=True)
class AssignmentResult:
    """Immutable snapshot returned by one allocation run."""

    assignments: tuple[AssignmentRecord, ...]
    summary: Mapping[str, Any]
    timestamp: str
    settings: Mapping[str, Any] = field(default_factory=dict)
    skipped_items: tuple[SkippedItem, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "summary", _freeze(self.summary))
        object.__setattr__(self, "settings", _freeze(self.settings))

    @property
    def total_quantity(self) -> int:
        return sum(r.quantity for r in self.assignments)

    def to_dict(self) -> dict:
        return {
            "assignments": [r.to_dict() for r in self.assignments],
            "summary": _thaw(self.summary),
            "settings": _thaw(self.settings),
            "skippedItems": [s.to_dict() for s in self.skipped_items],
            "timestamp": self.timestamp,
        }


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def record_from_dict(data: dict) -> AssignmentRecord:
    """Inverse of AssignmentRecord.to_dict, tolerant of missing keys."""
    return AssignmentRecord(
        agent_id=str(data.get("agentId") or data.get("agent") or ""),
        agent=str(data.get("agent") or ""),
        model=str(data.get("model") or ""),
        color=str(data.get("color") or ""),
        quantity=int(data.get("quantity") or 0),
        priority=data.get("priority"),
        source=data.get("source"),
        receipt_time=data.get("receiptTime"),
        reservation_number=data.get("reservationNumber"),
        customer_name=data.get("customerName"),
        timestamp=data.get("timestamp"),
    )


def result_from_dict(data: dict) -> AssignmentResult:
    """Rebuild a result received over the wire (skipped items are not kept)."""
    return AssignmentResult(
        assignments=tuple(record_from_dict(r) for r in data.get("assignments") or []),
        summary=data.get("summary") or {},
        timestamp=str(data.get("timestamp") or ""),
        settings=data.get("settings") or {},
    )


def _freeze(value: Any) -> Any:
    """Deep read-only copy: mappings become MappingProxyType, lists become tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: _thaw(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_thaw(v) for v in value]
    if hasattr(value, "__dataclass_fields__"):
        return asdict(value)
    return value
