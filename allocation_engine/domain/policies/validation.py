"""Validation — pre-run request checks and post-hoc result checks.

Both return structured outcomes instead of raising, so callers branch on
the result.
"""

from __future__ import annotations

from dataclasses import dataclass

from allocation_engine.domain.entities.agent import Agent
from allocation_engine.domain.entities.assignment import AssignmentResult
from allocation_engine.domain.entities.metrics import Ratios
from allocation_engine.domain.value_objects.sku import SkuConfig

NO_AGENTS_MESSAGE = "No assignment targets are selected. Select at least one agent."
NO_SKUS_MESSAGE = "No models are configured for assignment. Add at least one model."
BAD_RATIOS_MESSAGE = "Assignment ratios must sum to 100 (got {total:g})."
NO_RESULT_MESSAGE = "There is no assignment result."
EMPTY_RESULT_MESSAGE = "No items were assigned."
DUPLICATE_MESSAGE = "Duplicate assignment found."


@dataclass(frozen=True)
class ValidationOutcome:
    valid: bool
    error: str | None = None

    def to_dict(self) -> dict:
        data: dict = {"valid": self.valid}
        if self.error is not None:
            data["error"] = self.error
        return data


def validate_run_request(
    agents: list[Agent],
    configs: list[SkuConfig],
    ratios: Ratios | None = None,
) -> ValidationOutcome:
    """Reject a run with no eligible agents, no SKUs or bad ratios."""
    if not agents:
        return ValidationOutcome(False, NO_AGENTS_MESSAGE)
    if not configs:
        return ValidationOutcome(False, NO_SKUS_MESSAGE)
    if ratios is not None and not ratios.is_valid():
        return ValidationOutcome(False, BAD_RATIOS_MESSAGE.format(total=ratios.total))
    return ValidationOutcome(True)


def validate_assignment_result(result: AssignmentResult | None) -> ValidationOutcome:
    """Check a result is non-empty and has no duplicate
    (agent, model, color, reservation number) tuples."""
    if result is None:
        return ValidationOutcome(False, NO_RESULT_MESSAGE)
    if not result.assignments:
        return ValidationOutcome(False, EMPTY_RESULT_MESSAGE)

    seen: set[tuple] = set()
    for r in result.assignments:
        key = (r.agent, r.model, r.color, r.reservation_number)
        if key in seen:
            return ValidationOutcome(False, DUPLICATE_MESSAGE)
        seen.add(key)
    return ValidationOutcome(True)
