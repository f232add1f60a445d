"""Domain enums — pure Python, no external dependencies."""

from enum import Enum, IntEnum


class SourceTier(IntEnum):
    """Reservation intake source. Lower value = higher priority."""

    ON_SALE = 1
    YARD = 2
    SITE = 3

    @property
    def source(self) -> str:
        return _SOURCE_NAMES[self]


_SOURCE_NAMES = {
    SourceTier.ON_SALE: "onSale",
    SourceTier.YARD: "yard",
    SourceTier.SITE: "site",
}


class Metric(str, Enum):
    TURNOVER_RATE = "turnoverRate"
    STORE_COUNT = "storeCount"
    REMAINING_INVENTORY = "remainingInventory"
    SALES_VOLUME = "salesVolume"


class TargetLevel(str, Enum):
    OFFICES = "offices"
    DEPARTMENTS = "departments"
    AGENTS = "agents"
    STORES = "stores"


class CacheKind(str, Enum):
    HIERARCHICAL_STRUCTURE = "hierarchicalStructure"
    AVAILABLE_MODELS = "availableModels"
    AGENTS = "agents"
    STORES = "stores"
    ASSIGNMENT_CALCULATION = "assignmentCalculation"


class Regime(str, Enum):
    RATIO = "ratio"
    RESERVATION = "reservation"
