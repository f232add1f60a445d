"""WaterfallPolicy — one unit at a time to the least-loaded eligible agent."""

from __future__ import annotations

from dataclasses import dataclass, field

from allocation_engine.domain.entities.agent import Agent
from allocation_engine.domain.entities.assignment import AssignmentRecord, SkippedItem
from allocation_engine.domain.entities.reservation import ReservationItem
from allocation_engine.domain.policies.least_loaded import pick_least_loaded
from allocation_engine.domain.value_objects.sku import Sku, SkuConfig

SKIP_NOT_CONFIGURED = "sku_not_configured"
SKIP_QUANTITY_REACHED = "quantity_reached"
SKIP_NO_AGENTS = "no_eligible_agents"


@dataclass
class WaterfallOutcome:
    records: list[AssignmentRecord] = field(default_factory=list)
    skipped: list[SkippedItem] = field(default_factory=list)
    agent_totals: dict[str, int] = field(default_factory=dict)
    sku_totals: dict[Sku, int] = field(default_factory=dict)


class WaterfallAllocator:
    """Least-loaded round-robin gated by a ranked queue and per-SKU caps.

    State per run: a running total per eligible agent (selection order,
    starting at 0) and a running total per SKU. Each queue item either
    yields one record of quantity 1 or is skipped with a reason.
    """

    def __init__(self, agents: list[Agent], sku_index: dict[Sku, SkuConfig]):
        self._agents = {a.id: a for a in agents}
        self._sku_index = sku_index

    def allocate(self, queue: list[ReservationItem], timestamp: str | None = None) -> WaterfallOutcome:
        outcome = WaterfallOutcome(
            agent_totals={agent_id: 0 for agent_id in self._agents},
            sku_totals={sku: 0 for sku in self._sku_index},
        )

        for item in queue:
            config = self._sku_index.get(item.sku)
            if config is None:
                outcome.skipped.append(_skip(item, SKIP_NOT_CONFIGURED))
                continue
            if outcome.sku_totals[item.sku] >= config.quantity:
                outcome.skipped.append(_skip(item, SKIP_QUANTITY_REACHED))
                continue
            if not outcome.agent_totals:
                outcome.skipped.append(_skip(item, SKIP_NO_AGENTS))
                continue

            agent_id = pick_least_loaded(outcome.agent_totals)
            agent = self._agents[agent_id]
            outcome.records.append(
                AssignmentRecord(
                    agent_id=agent.id,
                    agent=agent.name,
                    model=item.model,
                    color=item.color,
                    quantity=1,
                    priority=int(item.tier) if item.tier is not None else None,
                    source=item.source,
                    receipt_time=item.receipt_time,
                    reservation_number=item.reservation_number,
                    customer_name=item.customer_name,
                    timestamp=timestamp,
                )
            )
            outcome.agent_totals[agent_id] += 1
            outcome.sku_totals[item.sku] += 1

        return outcome


def _skip(item: ReservationItem, reason: str) -> SkippedItem:
    return SkippedItem(
        customer_name=item.customer_name,
        store_code=item.store_code,
        model=item.model,
        color=item.color,
        reason=reason,
    )
