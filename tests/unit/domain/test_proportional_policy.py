"""Tests for ProportionalPolicy."""

import pytest

from allocation_engine.domain.entities.metrics import AgentMetrics
from allocation_engine.domain.policies.proportional import allocate_proportionally


def _m(aid, sales=0.0, stores=0.0):
    return AgentMetrics(agent_id=aid, model="X", color="Blue", sales_volume=sales, store_count=stores)


@pytest.mark.parametrize("total", [0, 1, 7, 10, 101])
def test_shares_always_sum_to_total(total):
    scores = {"a": 0.7, "b": 0.2, "c": 0.1}
    shares = allocate_proportionally(["a", "b", "c"], scores, total)
    assert sum(shares.values()) == total
    assert all(v >= 0 for v in shares.values())


def test_exact_proportions():
    shares = allocate_proportionally(["a", "b"], {"a": 3.0, "b": 1.0}, 8)
    assert shares == {"a": 6, "b": 2}


def test_largest_remainder_gets_leftover():
    shares = allocate_proportionally(["a", "b", "c"], {"a": 0.6, "b": 0.4, "c": 0.0}, 3)
    # a=1.8 b=1.2 c=0 → floors 1,1,0; leftover 1 → a (0.8 > 0.2)
    assert shares == {"a": 2, "b": 1, "c": 0}


def test_remainder_tie_broken_by_sales_then_store_count():
    metrics = {"a": _m("a", sales=5), "b": _m("b", sales=9)}
    shares = allocate_proportionally(["a", "b"], {"a": 1.0, "b": 1.0}, 3, metrics)
    assert shares == {"a": 1, "b": 2}

    metrics = {"a": _m("a", sales=5, stores=1), "b": _m("b", sales=5, stores=4)}
    shares = allocate_proportionally(["a", "b"], {"a": 1.0, "b": 1.0}, 3, metrics)
    assert shares == {"a": 1, "b": 2}


def test_full_tie_goes_to_selection_order():
    shares = allocate_proportionally(["b", "a"], {"a": 1.0, "b": 1.0}, 1)
    assert shares == {"b": 1, "a": 0}


def test_all_zero_scores_split_evenly():
    shares = allocate_proportionally(["a", "b", "c"], {"a": 0.0, "b": 0.0, "c": 0.0}, 5)
    assert shares == {"a": 2, "b": 2, "c": 1}


def test_no_agents_returns_empty():
    assert allocate_proportionally([], {}, 10) == {}


def test_negative_total_raises():
    with pytest.raises(ValueError):
        allocate_proportionally(["a"], {"a": 1.0}, -1)
