# -*- coding: utf-8 -*-
"""
backend/app/modules/catalog/routes/item_routes.py

Rutas de ítems (/items). Lecturas públicas; escrituras solo admin.

Fecha: 2026-09-02
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_async_session
from app.modules.auth.dependencies import require_admin
from app.modules.auth.schemas import TokenClaims
from app.modules.catalog.schemas import ItemCreateRequest, ItemUpdateRequest
from app.modules.catalog.services import ItemService
from app.shared.utils.api_response import created, ok

router = APIRouter(prefix="/items", tags=["items"])


def get_item_service(db: AsyncSession = Depends(get_async_session)) -> ItemService:
    return ItemService(db)


@router.post("/createItem")
async def create_item(
    payload: ItemCreateRequest,
    admin: TokenClaims = Depends(require_admin),
    service: ItemService = Depends(get_item_service),
):
    return created(await service.create(payload, created_by=admin.id), message="Ítem creado")


@router.get("/getItems")
async def list_items(
    q: Optional[str] = Query(None),
    type_id: Optional[str] = Query(None, alias="type"),
    category_id: Optional[str] = Query(None, alias="category"),
    page: Optional[int] = Query(None, ge=1),
    limit: Optional[int] = Query(None, ge=1, le=100),
    service: ItemService = Depends(get_item_service),
):
    return ok(await service.list(q=q, type_id=type_id, category_id=category_id, page=page, limit=limit))


@router.get("/categories")
async def distinct_categories(service: ItemService = Depends(get_item_service)):
    return ok(await service.distinct_categories())


@router.get("/types")
async def distinct_types(service: ItemService = Depends(get_item_service)):
    return ok(await service.distinct_types())


@router.get("/getItem/{id}")
async def get_item(id: str, service: ItemService = Depends(get_item_service)):
    return ok(await service.get_by_id(id))


@router.put("/updateItem/{id}")
async def update_item(
    id: str,
    payload: ItemUpdateRequest,
    admin: TokenClaims = Depends(require_admin),
    service: ItemService = Depends(get_item_service),
):
    return ok(await service.update_by_id(id, payload, updated_by=admin.id), message="Actualizado")


@router.delete("/deleteItem/{id}")
async def delete_item(
    id: str,
    _: TokenClaims = Depends(require_admin),
    service: ItemService = Depends(get_item_service),
):
    return ok(await service.remove_by_id(id), message="Eliminado")
