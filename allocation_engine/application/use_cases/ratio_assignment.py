"""RatioAssignmentUseCase — score-weighted proportional split per SKU."""

from __future__ import annotations

import logging

from allocation_engine.application.services.assignment_cache import AssignmentCache
from allocation_engine.application.use_cases.engine_response import EngineResponse
from allocation_engine.domain.entities.agent import Agent
from allocation_engine.domain.entities.assignment import (
    AssignmentRecord,
    AssignmentResult,
    utc_now_iso,
)
from allocation_engine.domain.entities.metrics import AgentMetrics, Ratios
from allocation_engine.domain.entities.target_selection import TargetSelection
from allocation_engine.domain.policies.proportional import allocate_proportionally
from allocation_engine.domain.policies.reporting import summarize_proportional
from allocation_engine.domain.policies.scoring import score_agents
from allocation_engine.domain.policies.target_resolution import resolve_ratio_targets
from allocation_engine.domain.policies.validation import validate_run_request
from allocation_engine.domain.value_objects.enums import CacheKind
from allocation_engine.domain.value_objects.sku import parse_sku_configs

logger = logging.getLogger(__name__)

RATIO_SOURCE = "ratio"


class RatioAssignmentUseCase:
    """Orchestrates the proportional regime.

    For every enabled SKU: score the eligible agents on the weighted
    metrics, then split the SKU quantity in proportion to the scores.
    """

    def __init__(
        self,
        cache: AssignmentCache | None = None,
        cache_ttl: float | None = None,
        log: logging.Logger | None = None,
    ):
        self._log = log or logger
        self._calculate = self._compute
        if cache is not None:
            self._calculate = cache.wrap(
                CacheKind.ASSIGNMENT_CALCULATION,
                self._compute,
                ttl=cache_ttl,
                key_params=lambda settings, agents, metrics: {
                    "regime": RATIO_SOURCE,
                    "settings": settings,
                    "agents": agents,
                    "metrics": metrics,
                },
            )

    async def execute(
        self,
        settings: dict,
        agents: list[Agent],
        metrics: list[AgentMetrics],
    ) -> EngineResponse:
        try:
            configs = parse_sku_configs(settings.get("models") or {})
            targets = resolve_ratio_targets(TargetSelection.from_dict(settings.get("targets")), agents)
            ratios = Ratios.from_dict(settings["ratios"]) if settings.get("ratios") else Ratios()
            check = validate_run_request(targets, configs, ratios)
            if not check.valid:
                self._log.warning("Ratio assignment rejected: %s", check.error)
                return EngineResponse.failure(check.error)

            result = await self._calculate(settings, agents, metrics)
            return EngineResponse.ok(result)
        except Exception as e:
            self._log.exception("Ratio assignment failed")
            return EngineResponse.failure(str(e))

    async def _compute(
        self,
        settings: dict,
        agents: list[Agent],
        metrics: list[AgentMetrics],
    ) -> AssignmentResult:
        configs = parse_sku_configs(settings.get("models") or {})
        targets = resolve_ratio_targets(TargetSelection.from_dict(settings.get("targets")), agents)
        ratios = Ratios.from_dict(settings["ratios"]) if settings.get("ratios") else Ratios()
        agent_ids = [a.id for a in targets]
        by_id = {a.id: a for a in targets}
        timestamp = utc_now_iso()

        records: list[AssignmentRecord] = []
        scores_by_sku: dict[str, dict[str, float]] = {}
        for config in configs:
            sku_metrics = {
                m.agent_id: m
                for m in metrics
                if m.model == config.name and m.color == config.color
            }
            scores = score_agents(agent_ids, sku_metrics, ratios)
            shares = allocate_proportionally(agent_ids, scores, config.quantity, sku_metrics)
            scores_by_sku[config.key] = {aid: round(s, 6) for aid, s in scores.items()}

            for aid in agent_ids:
                if shares[aid] <= 0:
                    continue
                records.append(
                    AssignmentRecord(
                        agent_id=aid,
                        agent=by_id[aid].name,
                        model=config.name,
                        color=config.color,
                        quantity=shares[aid],
                        source=RATIO_SOURCE,
                        timestamp=timestamp,
                    )
                )
            self._log.info(
                "SKU %s: %d units over %d agents", config.key, config.quantity, len(agent_ids)
            )

        summary = summarize_proportional(records, targets, configs)
        summary["scores"] = scores_by_sku
        return AssignmentResult(
            assignments=tuple(records),
            summary=summary,
            timestamp=timestamp,
            settings=settings,
        )
