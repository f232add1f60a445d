"""Business metrics feeding the proportional regime."""

from __future__ import annotations

from dataclasses import dataclass

from allocation_engine.domain.value_objects.enums import Metric


@dataclass(frozen=True)
class AgentMetrics:
    """Raw per (agent, SKU) figures.

    ``remaining_inventory`` is sales minus stock on hand, so agents closer
    to running out (or already oversold) carry a larger value.
    """

    agent_id: str
    model: str
    color: str
    turnover_rate: float = 0.0
    store_count: float = 0.0
    sales_volume: float = 0.0
    current_stock: float = 0.0

    @property
    def remaining_inventory(self) -> float:
        return self.sales_volume - self.current_stock

    def value(self, metric: Metric) -> float:
        if metric == Metric.TURNOVER_RATE:
            return self.turnover_rate
        if metric == Metric.STORE_COUNT:
            return self.store_count
        if metric == Metric.REMAINING_INVENTORY:
            return self.remaining_inventory
        return self.sales_volume


@dataclass(frozen=True)
class Ratios:
    """Metric weights in percent."""

    turnover_rate: float = 30
    store_count: float = 25
    remaining_inventory: float = 25
    sales_volume: float = 20

    @classmethod
    def from_dict(cls, raw: dict) -> Ratios:
        return cls(
            turnover_rate=float(raw.get(Metric.TURNOVER_RATE.value, 0)),
            store_count=float(raw.get(Metric.STORE_COUNT.value, 0)),
            remaining_inventory=float(raw.get(Metric.REMAINING_INVENTORY.value, 0)),
            sales_volume=float(raw.get(Metric.SALES_VOLUME.value, 0)),
        )

    def weight(self, metric: Metric) -> float:
        return {
            Metric.TURNOVER_RATE: self.turnover_rate,
            Metric.STORE_COUNT: self.store_count,
            Metric.REMAINING_INVENTORY: self.remaining_inventory,
            Metric.SALES_VOLUME: self.sales_volume,
        }[metric]

    @property
    def total(self) -> float:
        return self.turnover_rate + self.store_count + self.remaining_inventory + self.sales_volume

    def is_valid(self) -> bool:
        return abs(self.total - 100) < 1e-9

    def to_dict(self) -> dict:
        return {m.value: self.weight(m) for m in Metric}
