"""History item — a confirmed assignment run kept for later review."""

from __future__ import annotations

import time
import uuid
from dataclasses import dataclass, field

from allocation_engine.domain.entities.assignment import utc_now_iso
from allocation_engine.domain.value_objects.enums import Metric, Regime

HISTORY_VERSION = "1.0"


@dataclass
class HistoryItem:
    id: str
    timestamp: str
    regime: Regime
    settings: dict
    result: dict
    agents: list[dict] = field(default_factory=list)
    metadata: dict = field(default_factory=dict)
    version: str = HISTORY_VERSION

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "timestamp": self.timestamp,
            "regime": self.regime.value,
            "settings": self.settings,
            "result": self.result,
            "agents": self.agents,
            "metadata": self.metadata,
            "version": self.version,
        }


def generate_history_id() -> str:
    return f"assignment_{int(time.time() * 1000)}_{uuid.uuid4().hex[:9]}"


def create_history_item(
    regime: Regime,
    result: dict,
    agents: list[dict] | None = None,
    extra_metadata: dict | None = None,
) -> HistoryItem:
    """Snapshot a serialized result (``AssignmentResult.to_dict()``)."""
    by_model = (result.get("summary") or {}).get("byModel", [])
    metadata = {
        "totalAgents": len(agents or []),
        "totalModels": len(by_model),
        "totalAssigned": sum(m.get("assigned", 0) for m in by_model),
        "totalQuantity": sum(m.get("requested", 0) for m in by_model),
        **(extra_metadata or {}),
    }
    return HistoryItem(
        id=generate_history_id(),
        timestamp=utc_now_iso(),
        regime=regime,
        settings=dict(result.get("settings") or {}),
        result=result,
        agents=list(agents or []),
        metadata=metadata,
    )


def _change(before, after) -> dict:
    change = None
    if before is not None and after is not None:
        change = after - before
    return {"before": before, "after": after, "change": change}


def compare_history_items(first: HistoryItem, second: HistoryItem) -> dict:
    """Before/after/change of ratios and totals between two runs.

    Ratios are only present for proportional runs; missing values compare
    as None.
    """
    ratios_a = first.settings.get("ratios") or {}
    ratios_b = second.settings.get("ratios") or {}
    return {
        "timestamp1": first.timestamp,
        "timestamp2": second.timestamp,
        "settings": {m.value: _change(ratios_a.get(m.value), ratios_b.get(m.value)) for m in Metric},
        "results": {
            "totalAssigned": _change(
                first.metadata.get("totalAssigned"), second.metadata.get("totalAssigned")
            ),
            "totalAgents": _change(
                first.metadata.get("totalAgents"), second.metadata.get("totalAgents")
            ),
        },
    }
