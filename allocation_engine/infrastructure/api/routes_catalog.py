"""Catalog endpoints — cached roster, org hierarchy and model catalogue."""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends

from allocation_engine.application.use_cases.catalog import CatalogUseCase
from allocation_engine.infrastructure.api.dependencies import get_catalog_uc

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get("/agents")
async def list_agents(catalog: CatalogUseCase = Depends(get_catalog_uc)):
    agents = await catalog.get_agents()
    return {"total": len(agents), "agents": [asdict(a) for a in agents]}


@router.get("/stores")
async def list_stores(catalog: CatalogUseCase = Depends(get_catalog_uc)):
    stores = await catalog.get_stores()
    return {"total": len(stores), "stores": stores}


@router.get("/hierarchy")
async def get_hierarchy(catalog: CatalogUseCase = Depends(get_catalog_uc)):
    """Office → department → agent structure with attached stores."""
    structure = await catalog.get_org_structure()
    return structure.to_dict()


@router.get("/models")
async def get_models(catalog: CatalogUseCase = Depends(get_catalog_uc)):
    return await catalog.get_available_models()
