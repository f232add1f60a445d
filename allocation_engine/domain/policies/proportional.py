"""ProportionalPolicy — integral per-agent shares of a SKU quantity."""

from __future__ import annotations

import math
from fractions import Fraction

from allocation_engine.domain.entities.metrics import AgentMetrics


def allocate_proportionally(
    agent_ids: list[str],
    scores: dict[str, float],
    total_quantity: int,
    metrics: dict[str, AgentMetrics] | None = None,
) -> dict[str, int]:
    """Split *total_quantity* across agents in proportion to their scores.

    1. ``floor(score_i / sum(scores) * total)`` per agent (exact arithmetic).
    2. Leftover units go one at a time in descending order of
       (fractional remainder, sales volume, store count), selection order
       breaking any remaining tie.
    3. If every score is zero the quantity is split evenly and the
       leftover goes to the first agents in selection order.

    The returned quantities always sum to *total_quantity*.

    Raises:
        ValueError: if total_quantity is negative.
    """
    if total_quantity < 0:
        raise ValueError("Cannot allocate a negative quantity")
    if not agent_ids:
        return {}

    metrics = metrics or {}
    weights = {aid: Fraction(max(scores.get(aid, 0.0), 0.0)) for aid in agent_ids}
    score_sum = sum(weights.values(), Fraction(0))

    if score_sum == 0:
        base, extra = divmod(total_quantity, len(agent_ids))
        return {aid: base + (1 if i < extra else 0) for i, aid in enumerate(agent_ids)}

    shares: dict[str, int] = {}
    remainders: dict[str, Fraction] = {}
    for aid in agent_ids:
        exact = weights[aid] / score_sum * total_quantity
        whole = math.floor(exact)
        shares[aid] = whole
        remainders[aid] = exact - whole

    leftover = total_quantity - sum(shares.values())
    if leftover:
        position = {aid: i for i, aid in enumerate(agent_ids)}

        def _rank(aid: str) -> tuple:
            m = metrics.get(aid)
            sales = m.sales_volume if m else 0.0
            stores = m.store_count if m else 0.0
            return (-remainders[aid], -sales, -stores, position[aid])

        order = sorted(agent_ids, key=_rank)
        for i in range(leftover):
            shares[order[i % len(order)]] += 1

    return shares
