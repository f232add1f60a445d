"""Agent entity — a sales agent that can receive inventory units."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Agent:
    id: str
    name: str
    office: str
    department: str
    store: str | None = None

    def has_org_placement(self) -> bool:
        """True when both office and department are filled in."""
        return bool(self.office and self.office.strip()) and bool(
            self.department and self.department.strip()
        )
