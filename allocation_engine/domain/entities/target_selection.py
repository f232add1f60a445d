"""TargetSelection — four independent boolean maps with downward cascade."""

from __future__ import annotations

from dataclasses import dataclass, field

from allocation_engine.domain.entities.org_structure import OrgStructure
from allocation_engine.domain.value_objects.enums import TargetLevel


@dataclass
class TargetSelection:
    """Which offices, departments, agents (by id) and stores are selected.

    Writes at a higher level cascade down to every contained entry;
    writes at a lower level never propagate upward. The last write for a
    given entry wins.
    """

    offices: dict[str, bool] = field(default_factory=dict)
    departments: dict[str, bool] = field(default_factory=dict)
    agents: dict[str, bool] = field(default_factory=dict)
    stores: dict[str, bool] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, raw: dict | None) -> TargetSelection:
        raw = raw or {}
        return cls(
            offices={str(k): bool(v) for k, v in (raw.get("offices") or {}).items()},
            departments={str(k): bool(v) for k, v in (raw.get("departments") or {}).items()},
            agents={str(k): bool(v) for k, v in (raw.get("agents") or {}).items()},
            stores={str(k): bool(v) for k, v in (raw.get("stores") or {}).items()},
        )

    def to_dict(self) -> dict:
        return {
            "offices": dict(self.offices),
            "departments": dict(self.departments),
            "agents": dict(self.agents),
            "stores": dict(self.stores),
        }

    def level_map(self, level: TargetLevel) -> dict[str, bool]:
        return getattr(self, level.value)

    def toggle(self, level: TargetLevel, name: str, checked: bool, org: OrgStructure) -> None:
        self.level_map(level)[name] = checked

        if level == TargetLevel.OFFICES:
            for department in org.departments_in_office(name):
                self.departments[department] = checked
            for agent_id in org.agents_in_office(name):
                self.agents[agent_id] = checked
        elif level == TargetLevel.DEPARTMENTS:
            for agent_id in org.agents_in_department(name):
                self.agents[agent_id] = checked

    def select_all(self, level: TargetLevel, checked: bool, org: OrgStructure) -> None:
        for name in _names_at(level, org):
            self.toggle(level, name, checked, org)

    def reset(self, level: TargetLevel, org: OrgStructure) -> None:
        self.select_all(level, False, org)

    def selected(self, level: TargetLevel) -> list[str]:
        return [name for name, on in self.level_map(level).items() if on]


def _names_at(level: TargetLevel, org: OrgStructure) -> list[str]:
    if level == TargetLevel.OFFICES:
        return list(org.offices)
    if level == TargetLevel.DEPARTMENTS:
        return list(org.departments)
    if level == TargetLevel.AGENTS:
        return list(org.agents)
    return list(org.stores)
