"""Reporting — summaries and statistics over assignment records."""

from __future__ import annotations

from collections import OrderedDict

from allocation_engine.domain.entities.agent import Agent
from allocation_engine.domain.entities.assignment import AssignmentRecord, AssignmentResult
from allocation_engine.domain.value_objects.enums import SourceTier
from allocation_engine.domain.value_objects.sku import SkuConfig


def _by_agent(records: list[AssignmentRecord], agents: list[Agent]) -> list[dict]:
    rows: dict[str, dict] = OrderedDict(
        (a.id, {"agentId": a.id, "agent": a.name, "totalQuantity": 0, "assignments": 0})
        for a in agents
    )
    for r in records:
        row = rows.setdefault(
            r.agent_id, {"agentId": r.agent_id, "agent": r.agent, "totalQuantity": 0, "assignments": 0}
        )
        row["totalQuantity"] += r.quantity
        row["assignments"] += 1
    return list(rows.values())


def _by_model(records: list[AssignmentRecord], configs: list[SkuConfig]) -> list[dict]:
    return [
        {
            "key": c.key,
            "model": c.name,
            "color": c.color,
            "requested": c.quantity,
            "assigned": sum(r.quantity for r in records if r.model == c.name and r.color == c.color),
        }
        for c in configs
    ]


def summarize_waterfall(
    records: list[AssignmentRecord],
    agents: list[Agent],
    configs: list[SkuConfig],
) -> dict:
    """Totals by priority tier, by agent and by SKU."""
    return {
        "totalAssignments": len(records),
        "byPriority": {
            int(tier): sum(1 for r in records if r.priority == int(tier)) for tier in SourceTier
        },
        "byAgent": _by_agent(records, agents),
        "byModel": _by_model(records, configs),
    }


def _aggregate(records: list[AssignmentRecord], agents: list[Agent], attr: str) -> dict:
    totals_by_agent: dict[str, int] = {}
    for r in records:
        totals_by_agent[r.agent_id] = totals_by_agent.get(r.agent_id, 0) + r.quantity

    groups: dict[str, dict] = {}
    for agent in agents:
        name = getattr(agent, attr)
        group = groups.setdefault(
            name, {attr: name, "agentCount": 0, "totalQuantity": 0, "agents": []}
        )
        group["agentCount"] += 1
        group["agents"].append(agent.id)
        group["totalQuantity"] += totals_by_agent.get(agent.id, 0)
    return groups


def summarize_proportional(
    records: list[AssignmentRecord],
    agents: list[Agent],
    configs: list[SkuConfig],
) -> dict:
    """Totals by agent and SKU plus office and department roll-ups."""
    return {
        "totalAssignments": len(records),
        "totalQuantity": sum(r.quantity for r in records),
        "byAgent": _by_agent(records, agents),
        "byModel": _by_model(records, configs),
        "byOffice": _aggregate(records, agents, "office"),
        "byDepartment": _aggregate(records, agents, "department"),
    }


def generate_assignment_stats(result: AssignmentResult | None) -> dict | None:
    """Per-priority share, per-agent and per-SKU breakdowns of a result."""
    if result is None:
        return None

    records = list(result.assignments)
    total = len(records)

    priority_stats = {int(tier): {"count": 0, "percentage": 0} for tier in SourceTier}
    for r in records:
        if r.priority in priority_stats:
            priority_stats[r.priority]["count"] += 1
    for stats in priority_stats.values():
        stats["percentage"] = round(stats["count"] / total * 100) if total else 0

    agent_stats: dict[str, dict] = {}
    model_stats: dict[str, dict] = {}
    for r in records:
        label = f"{r.model} {r.color}"
        a = agent_stats.setdefault(r.agent, {"count": 0, "models": []})
        a["count"] += 1
        if label not in a["models"]:
            a["models"].append(label)
        m = model_stats.setdefault(label, {"count": 0, "agents": []})
        m["count"] += 1
        if r.agent not in m["agents"]:
            m["agents"].append(r.agent)

    return {
        "total": total,
        "priorityStats": priority_stats,
        "agentStats": [{"agent": k, **v} for k, v in agent_stats.items()],
        "modelStats": [{"model": k, **v} for k, v in model_stats.items()],
    }
