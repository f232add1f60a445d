"""SKU value objects — a (model, color) pair and its configured quantity."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Sku:
    model: str
    color: str


@dataclass(frozen=True)
class SkuConfig:
    """One enabled entry of the ``models`` settings map."""

    key: str
    name: str
    color: str
    quantity: int
    capacity: str | None = None
    enabled: bool = True

    def __post_init__(self) -> None:
        if self.quantity < 0:
            raise ValueError(f"SKU {self.key!r} has negative quantity {self.quantity}")

    @property
    def sku(self) -> Sku:
        return Sku(model=self.name, color=self.color)


def parse_sku_configs(models: dict[str, dict]) -> list[SkuConfig]:
    """Turn the raw ``models`` settings map into enabled SkuConfig entries.

    Disabled entries are dropped. Insertion order of the map is kept.
    """
    configs: list[SkuConfig] = []
    for key, raw in models.items():
        if not raw.get("enabled", True):
            continue
        configs.append(
            SkuConfig(
                key=key,
                name=raw["name"],
                color=raw["color"],
                quantity=int(raw.get("quantity") or 0),
                capacity=raw.get("capacity"),
                enabled=True,
            )
        )
    return configs


def index_by_sku(configs: list[SkuConfig]) -> dict[Sku, SkuConfig]:
    """Map each SKU to its configuration; the first entry for a SKU wins."""
    index: dict[Sku, SkuConfig] = {}
    for config in configs:
        index.setdefault(config.sku, config)
    return index
