"""EngineResponse — the success/error envelope every engine call returns."""

from __future__ import annotations

from dataclasses import dataclass

from allocation_engine.domain.entities.assignment import AssignmentResult


@dataclass(frozen=True)
class EngineResponse:
    success: bool
    data: AssignmentResult | None = None
    error: str | None = None

    @classmethod
    def ok(cls, result: AssignmentResult) -> EngineResponse:
        return cls(success=True, data=result)

    @classmethod
    def failure(cls, error: str) -> EngineResponse:
        return cls(success=False, error=error)

    def to_dict(self) -> dict:
        if self.success and self.data is not None:
            return {"success": True, "data": self.data.to_dict()}
        return {"success": False, "error": self.error}
