"""Tests for ScoringPolicy."""

import pytest

from allocation_engine.domain.entities.metrics import AgentMetrics, Ratios
from allocation_engine.domain.policies.scoring import normalize, score_agents


def _m(aid, turnover=0.0, stores=0.0, sales=0.0, stock=0.0):
    return AgentMetrics(
        agent_id=aid, model="X", color="Blue",
        turnover_rate=turnover, store_count=stores, sales_volume=sales, current_stock=stock,
    )


def test_normalize_best_one_worst_zero():
    assert normalize([2.0, 4.0, 6.0]) == [0.0, 0.5, 1.0]


def test_normalize_equal_positive_values():
    assert normalize([5.0, 5.0]) == [1.0, 1.0]


def test_normalize_all_zero():
    assert normalize([0.0, 0.0, 0.0]) == [0.0, 0.0, 0.0]


def test_normalize_empty():
    assert normalize([]) == []


def test_score_with_single_metric_weight():
    ratios = Ratios(turnover_rate=100, store_count=0, remaining_inventory=0, sales_volume=0)
    scores = score_agents(["a", "b"], {"a": _m("a", turnover=1), "b": _m("b", turnover=3)}, ratios)
    assert scores == {"a": 0.0, "b": pytest.approx(1.0)}


def test_scores_bounded_by_one():
    metrics = {
        "a": _m("a", turnover=5, stores=1, sales=20, stock=5),
        "b": _m("b", turnover=2, stores=4, sales=10, stock=1),
        "c": _m("c", turnover=9, stores=2, sales=30, stock=40),
    }
    scores = score_agents(["a", "b", "c"], metrics, Ratios())
    assert all(0.0 <= s <= 1.0 + 1e-9 for s in scores.values())


def test_agent_without_metrics_scored_on_zeros():
    ratios = Ratios(turnover_rate=0, store_count=0, remaining_inventory=0, sales_volume=100)
    scores = score_agents(["a", "ghost"], {"a": _m("a", sales=10)}, ratios)
    assert scores["ghost"] == 0.0
    assert scores["a"] == pytest.approx(1.0)


def test_remaining_inventory_favors_hungry_agents():
    ratios = Ratios(turnover_rate=0, store_count=0, remaining_inventory=100, sales_volume=0)
    metrics = {"full": _m("full", sales=10, stock=10), "hungry": _m("hungry", sales=10, stock=0)}
    scores = score_agents(["full", "hungry"], metrics, ratios)
    assert scores["hungry"] > scores["full"]
