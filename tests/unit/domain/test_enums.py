"""Tests for domain enums."""

from allocation_engine.domain.value_objects.enums import CacheKind, Metric, SourceTier, TargetLevel


def test_source_tier_order():
    assert SourceTier.ON_SALE < SourceTier.YARD < SourceTier.SITE
    assert [int(t) for t in SourceTier] == [1, 2, 3]


def test_source_tier_names():
    assert SourceTier.ON_SALE.source == "onSale"
    assert SourceTier.YARD.source == "yard"
    assert SourceTier.SITE.source == "site"


def test_metric_values():
    assert {m.value for m in Metric} == {
        "turnoverRate", "storeCount", "remainingInventory", "salesVolume",
    }


def test_cache_kind_values():
    assert CacheKind.HIERARCHICAL_STRUCTURE.value == "hierarchicalStructure"
    assert CacheKind.AVAILABLE_MODELS.value == "availableModels"
    assert CacheKind.ASSIGNMENT_CALCULATION.value == "assignmentCalculation"


def test_target_levels_count():
    assert len(TargetLevel) == 4
