"""Tests for domain entities."""

import pytest

from allocation_engine.domain.entities.agent import Agent
from allocation_engine.domain.entities.assignment import (
    AssignmentRecord,
    AssignmentResult,
    record_from_dict,
)
from allocation_engine.domain.entities.metrics import AgentMetrics, Ratios
from allocation_engine.domain.entities.reservation import ReservationItem
from allocation_engine.domain.value_objects.enums import SourceTier
from allocation_engine.domain.value_objects.sku import Sku, SkuConfig, index_by_sku, parse_sku_configs


def test_agent_has_org_placement():
    assert Agent(id="1", name="Kim", office="Seoul", department="Sales 1").has_org_placement() is True
    assert Agent(id="2", name="Lee", office="  ", department="Sales 1").has_org_placement() is False
    assert Agent(id="3", name="Park", office="Seoul", department="").has_org_placement() is False


def test_sku_config_rejects_negative_quantity():
    with pytest.raises(ValueError, match="negative quantity"):
        SkuConfig(key="X|Blue", name="X", color="Blue", quantity=-1)


def test_parse_sku_configs_skips_disabled():
    configs = parse_sku_configs({
        "X|256|Blue": {"name": "X", "color": "Blue", "capacity": "256", "enabled": True, "quantity": 3},
        "X|256|Red": {"name": "X", "color": "Red", "enabled": False, "quantity": 9},
        "Y|128|Black": {"name": "Y", "color": "Black", "quantity": 2},
    })
    assert [c.key for c in configs] == ["X|256|Blue", "Y|128|Black"]
    assert configs[0].capacity == "256"
    assert configs[0].sku == Sku("X", "Blue")


def test_index_by_sku_first_entry_wins():
    configs = [
        SkuConfig(key="X|128|Blue", name="X", color="Blue", quantity=1),
        SkuConfig(key="X|256|Blue", name="X", color="Blue", quantity=5),
    ]
    index = index_by_sku(configs)
    assert index[Sku("X", "Blue")].key == "X|128|Blue"


def test_reservation_dedup_key_and_source():
    item = ReservationItem(customer_name="C1", store_code="S1", model="X", color="Blue")
    assert item.dedup_key == "C1_S1"
    assert item.source is None
    tagged = item.with_tier(SourceTier.YARD)
    assert tagged.source == "yard"
    assert item.tier is None  # input unchanged


def test_remaining_inventory_is_sales_minus_stock():
    m = AgentMetrics(agent_id="a", model="X", color="Blue", sales_volume=10, current_stock=14)
    assert m.remaining_inventory == -4


def test_ratios_validity():
    assert Ratios().is_valid() is True
    bad = Ratios.from_dict({"turnoverRate": 50, "storeCount": 50, "remainingInventory": 10, "salesVolume": 0})
    assert bad.total == 110
    assert bad.is_valid() is False


def test_result_is_immutable_snapshot():
    record = AssignmentRecord(agent_id="a1", agent="Kim", model="X", color="Blue", quantity=1)
    result = AssignmentResult(assignments=(record,), summary={"totalAssignments": 1}, timestamp="t")
    with pytest.raises(TypeError):
        result.summary["totalAssignments"] = 2
    with pytest.raises(AttributeError):
        result.assignments = ()
    assert result.total_quantity == 1


def test_record_round_trip_through_dict():
    record = AssignmentRecord(
        agent_id="a1", agent="Kim", model="X", color="Blue", quantity=1,
        priority=2, source="yard", reservation_number="R-7", customer_name="C1",
    )
    assert record_from_dict(record.to_dict()) == record


def test_result_nested_summary_is_read_only():
    result = AssignmentResult(
        assignments=(),
        summary={"byAgent": [{"agentId": "a1", "totalQuantity": 1}], "byPriority": {1: 1}},
        timestamp="t",
        settings={"targets": {"agents": {"a1": True}}},
    )
    with pytest.raises(TypeError):
        result.summary["byAgent"][0]["totalQuantity"] = 99
    with pytest.raises(TypeError):
        result.summary["byPriority"][1] = 42
    with pytest.raises(TypeError):
        result.settings["targets"]["agents"]["a1"] = False
    with pytest.raises(AttributeError):
        result.summary["byAgent"].append({})
    assert result.to_dict()["summary"]["byAgent"] == [{"agentId": "a1", "totalQuantity": 1}]


def test_result_does_not_share_caller_containers():
    summary = {"byModel": [{"assigned": 1}]}
    result = AssignmentResult(assignments=(), summary=summary, timestamp="t")
    summary["byModel"][0]["assigned"] = 5
    assert result.summary["byModel"][0]["assigned"] == 1
