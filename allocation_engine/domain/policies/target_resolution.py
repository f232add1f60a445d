"""TargetResolution — turn a TargetSelection into the eligible agent list."""

from __future__ import annotations

from allocation_engine.domain.entities.agent import Agent
from allocation_engine.domain.entities.target_selection import TargetSelection


def resolve_reservation_targets(selection: TargetSelection, agents: list[Agent]) -> list[Agent]:
    """Store-priority resolution used by the reservation (waterfall) regime.

    Tiers, highest first:
      1. agents whose home store is selected
      2. directly selected agents
      3. agents of a selected department
      4. agents of a selected office

    Each tier only adds agents not already added by a higher tier, so the
    result is deduplicated and ordered by tier, then by selection order,
    then by roster order.
    """
    by_id = {a.id: a for a in agents}
    chosen: dict[str, Agent] = {}

    for store, on in selection.stores.items():
        if on:
            for agent in agents:
                if agent.store == store:
                    chosen.setdefault(agent.id, agent)

    for agent_id, on in selection.agents.items():
        if on and agent_id in by_id:
            chosen.setdefault(agent_id, by_id[agent_id])

    for department, on in selection.departments.items():
        if on:
            for agent in agents:
                if agent.department == department:
                    chosen.setdefault(agent.id, agent)

    for office, on in selection.offices.items():
        if on:
            for agent in agents:
                if agent.office == office:
                    chosen.setdefault(agent.id, agent)

    return list(chosen.values())


def resolve_ratio_targets(selection: TargetSelection, agents: list[Agent]) -> list[Agent]:
    """Cascade-honoring resolution used by the proportional regime.

    The most specific entry wins: an explicit agent entry, else the
    agent's department entry, else its office entry. Result keeps roster
    order and holds each agent id once.
    """
    eligible = []
    seen: set[str] = set()
    for agent in agents:
        if agent.id in seen:
            continue
        seen.add(agent.id)
        explicit = selection.agents.get(agent.id)
        if explicit is not None:
            if explicit:
                eligible.append(agent)
            continue
        department = selection.departments.get(agent.department)
        on = department if department is not None else selection.offices.get(agent.office, False)
        if on:
            eligible.append(agent)
    return eligible
