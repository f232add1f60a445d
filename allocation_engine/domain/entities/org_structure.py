"""Organizational hierarchy — offices, departments, agents and stores."""

from __future__ import annotations

from dataclasses import dataclass, field

from allocation_engine.domain.entities.agent import Agent


@dataclass
class OrgNode:
    """An office, department, agent or store with its contained members."""

    name: str
    parent: str | None = None
    departments: set[str] = field(default_factory=set)
    agents: set[str] = field(default_factory=set)
    stores: set[str] = field(default_factory=set)


@dataclass
class OrgStructure:
    offices: dict[str, OrgNode] = field(default_factory=dict)
    departments: dict[str, OrgNode] = field(default_factory=dict)
    agents: dict[str, OrgNode] = field(default_factory=dict)
    stores: dict[str, OrgNode] = field(default_factory=dict)

    def agents_in_office(self, office: str) -> set[str]:
        node = self.offices.get(office)
        return set(node.agents) if node else set()

    def departments_in_office(self, office: str) -> set[str]:
        node = self.offices.get(office)
        return set(node.departments) if node else set()

    def agents_in_department(self, department: str) -> set[str]:
        node = self.departments.get(department)
        return set(node.agents) if node else set()

    def to_dict(self) -> dict:
        def _node(n: OrgNode) -> dict:
            return {
                "name": n.name,
                "parent": n.parent,
                "departments": sorted(n.departments),
                "agents": sorted(n.agents),
                "stores": sorted(n.stores),
            }

        return {
            "offices": {k: _node(v) for k, v in self.offices.items()},
            "departments": {k: _node(v) for k, v in self.departments.items()},
            "agents": {k: _node(v) for k, v in self.agents.items()},
            "stores": {k: _node(v) for k, v in self.stores.items()},
        }


def build_org_structure(
    agents: list[Agent],
    store_assignments: dict[str, list[str]] | None = None,
) -> OrgStructure:
    """Build the cascading office → department → agent hierarchy.

    Args:
        agents: full agent roster. Agents without office or department
            are left out of the structure.
        store_assignments: optional agent name → store names mapping. Each
            store is attached to the agent and bubbles up to the agent's
            department and office.

    Returns:
        OrgStructure keyed by office name, department name, agent id and
        store name.
    """
    structure = OrgStructure()
    placed = [a for a in agents if a.has_org_placement()]

    for agent in placed:
        office = agent.office.strip()
        department = agent.department.strip()

        office_node = structure.offices.setdefault(office, OrgNode(name=office))
        office_node.departments.add(department)
        office_node.agents.add(agent.id)

        dept_node = structure.departments.setdefault(
            department, OrgNode(name=department, parent=office)
        )
        dept_node.agents.add(agent.id)

        agent_node = OrgNode(name=agent.name, parent=department)
        if agent.store:
            agent_node.stores.add(agent.store)
        structure.agents[agent.id] = agent_node

    by_name = {a.name: a for a in placed}
    for agent_name, store_names in (store_assignments or {}).items():
        agent = by_name.get(agent_name)
        if agent is None:
            continue
        for store in store_names:
            structure.stores.setdefault(store, OrgNode(name=store)).agents.add(agent.id)
            structure.agents[agent.id].stores.add(store)
            structure.departments[agent.department.strip()].stores.add(store)
            structure.offices[agent.office.strip()].stores.add(store)

    # Agents carrying a home store also populate the store axis.
    for agent in placed:
        if agent.store:
            structure.stores.setdefault(agent.store, OrgNode(name=agent.store)).agents.add(agent.id)
            structure.departments[agent.department.strip()].stores.add(agent.store)
            structure.offices[agent.office.strip()].stores.add(agent.store)

    return structure
