"""ScoringPolicy — weighted min-max fitness score per agent for one SKU."""

from __future__ import annotations

from allocation_engine.domain.entities.metrics import AgentMetrics, Ratios
from allocation_engine.domain.value_objects.enums import Metric


def normalize(values: list[float]) -> list[float]:
    """Min-max normalize so the best value maps to 1 and the worst to 0.

    When every value is equal there is no spread to rank on: all agents
    get 1.0 if the shared value is positive, otherwise 0.0.
    """
    if not values:
        return []
    low, high = min(values), max(values)
    if high == low:
        return [1.0 if high > 0 else 0.0 for _ in values]
    span = high - low
    return [(v - low) / span for v in values]


def score_agents(
    agent_ids: list[str],
    metrics: dict[str, AgentMetrics],
    ratios: Ratios,
) -> dict[str, float]:
    """Compute ``sum(weight_i/100 * normalized_metric_i)`` per agent.

    Higher raw value is better for every metric; remaining inventory is
    already defined as sales minus stock, so restock-hungry agents rank
    higher. Agents without metrics are scored on zeros.

    Args:
        agent_ids: eligible agents, in selection order.
        metrics: agent id → metrics for the SKU being scored.
        ratios: configured weights (percentages).

    Returns:
        agent id → score in [0, 1] when weights sum to 100.
    """
    rows = [metrics.get(aid) or AgentMetrics(agent_id=aid, model="", color="") for aid in agent_ids]
    scores = {aid: 0.0 for aid in agent_ids}

    for metric in Metric:
        weight = ratios.weight(metric) / 100
        if weight == 0:
            continue
        normalized = normalize([row.value(metric) for row in rows])
        for aid, norm in zip(agent_ids, normalized):
            scores[aid] += weight * norm

    return scores
