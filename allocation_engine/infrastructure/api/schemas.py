"""Request bodies for the assignment API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from allocation_engine.domain.entities.agent import Agent
from allocation_engine.domain.entities.metrics import AgentMetrics
from allocation_engine.domain.value_objects.enums import Regime


class ModelConfigIn(BaseModel):
    name: str
    color: str
    capacity: str | None = None
    enabled: bool = True
    quantity: int = Field(default=0, ge=0)


class TargetsIn(BaseModel):
    offices: dict[str, bool] = Field(default_factory=dict)
    departments: dict[str, bool] = Field(default_factory=dict)
    agents: dict[str, bool] = Field(default_factory=dict)
    stores: dict[str, bool] = Field(default_factory=dict)


class PrioritiesIn(BaseModel):
    """Informational only. Tier order is fixed: on-sale, then yard, then site."""

    onSaleReceipt: int = 1
    yardReceipt: int = 2
    reservationSite: int = 3


class ReservationSettingsIn(BaseModel):
    priorities: PrioritiesIn = Field(default_factory=PrioritiesIn)
    models: dict[str, ModelConfigIn] = Field(default_factory=dict)
    targets: TargetsIn = Field(default_factory=TargetsIn)


class RatiosIn(BaseModel):
    turnoverRate: float = 30
    storeCount: float = 25
    remainingInventory: float = 25
    salesVolume: float = 20


class RatioSettingsIn(BaseModel):
    ratios: RatiosIn = Field(default_factory=RatiosIn)
    models: dict[str, ModelConfigIn] = Field(default_factory=dict)
    targets: TargetsIn = Field(default_factory=TargetsIn)


class AgentIn(BaseModel):
    id: str
    name: str
    office: str = ""
    department: str = ""
    store: str | None = None

    def to_domain(self) -> Agent:
        return Agent(
            id=self.id, name=self.name, office=self.office,
            department=self.department, store=self.store,
        )


class MetricsIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    agent_id: str = Field(alias="agentId")
    model: str
    color: str
    turnover_rate: float = Field(default=0.0, alias="turnoverRate")
    store_count: float = Field(default=0.0, alias="storeCount")
    sales_volume: float = Field(default=0.0, alias="salesVolume")
    current_stock: float = Field(default=0.0, alias="currentStock")

    def to_domain(self) -> AgentMetrics:
        return AgentMetrics(
            agent_id=self.agent_id,
            model=self.model,
            color=self.color,
            turnover_rate=self.turnover_rate,
            store_count=self.store_count,
            sales_volume=self.sales_volume,
            current_stock=self.current_stock,
        )


class ReservationRunIn(BaseModel):
    settings: ReservationSettingsIn
    agents: list[AgentIn] | None = None


class RatioRunIn(BaseModel):
    settings: RatioSettingsIn
    agents: list[AgentIn] | None = None
    metrics: list[MetricsIn] = Field(default_factory=list)


class ResultIn(BaseModel):
    assignments: list[dict] = Field(default_factory=list)
    summary: dict = Field(default_factory=dict)
    settings: dict = Field(default_factory=dict)
    skippedItems: list[dict] = Field(default_factory=list)
    timestamp: str = ""


class HistorySaveIn(BaseModel):
    regime: Regime
    result: ResultIn
    agents: list[dict] = Field(default_factory=list)
