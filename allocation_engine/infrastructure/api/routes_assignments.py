"""Assignment endpoints — run either regime, validate and summarize results."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from allocation_engine.application.use_cases.catalog import CatalogUseCase
from allocation_engine.application.use_cases.ratio_assignment import RatioAssignmentUseCase
from allocation_engine.application.use_cases.reservation_assignment import (
    ReservationAssignmentUseCase,
)
from allocation_engine.domain.entities.assignment import result_from_dict
from allocation_engine.domain.policies.reporting import generate_assignment_stats
from allocation_engine.domain.policies.validation import validate_assignment_result
from allocation_engine.infrastructure.api.dependencies import (
    get_catalog_uc,
    get_ratio_uc,
    get_reservation_uc,
)
from allocation_engine.infrastructure.api.schemas import RatioRunIn, ReservationRunIn, ResultIn

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/assignments", tags=["assignments"])


@router.post("/reservation")
async def run_reservation_assignment(
    body: ReservationRunIn,
    uc: ReservationAssignmentUseCase = Depends(get_reservation_uc),
    catalog: CatalogUseCase = Depends(get_catalog_uc),
):
    """Priority-waterfall assignment of reservations to the least-loaded agents."""
    if body.agents is not None:
        agents = [a.to_domain() for a in body.agents]
    else:
        agents = await catalog.get_agents()
    response = await uc.execute(body.settings.model_dump(), agents)
    return response.to_dict()


@router.post("/ratio")
async def run_ratio_assignment(
    body: RatioRunIn,
    uc: RatioAssignmentUseCase = Depends(get_ratio_uc),
    catalog: CatalogUseCase = Depends(get_catalog_uc),
):
    """Score-weighted proportional split of each configured SKU."""
    if body.agents is not None:
        agents = [a.to_domain() for a in body.agents]
    else:
        agents = await catalog.get_agents()
    metrics = [m.to_domain() for m in body.metrics]
    response = await uc.execute(body.settings.model_dump(), agents, metrics)
    return response.to_dict()


@router.post("/validate")
async def validate_result(body: ResultIn):
    """Check a result for emptiness and duplicate records."""
    return validate_assignment_result(result_from_dict(body.model_dump())).to_dict()


@router.post("/stats")
async def result_stats(body: ResultIn):
    """Priority, agent and SKU breakdowns of a result."""
    return generate_assignment_stats(result_from_dict(body.model_dump()))
