"""LeastLoadedPolicy — deterministic pick of the agent with the fewest units."""

from __future__ import annotations


def pick_least_loaded(running_totals: dict[str, int]) -> str:
    """Return the agent id with the minimum running total.

    Ties go to the agent inserted first, i.e. the earliest in selection
    order.

    Raises:
        ValueError: if there are no agents to pick from.
    """
    if not running_totals:
        raise ValueError("Cannot pick from an empty agent set")

    chosen, lowest = None, None
    for agent_id, total in running_totals.items():
        if lowest is None or total < lowest:
            chosen, lowest = agent_id, total
    return chosen
