# -*- coding: utf-8 -*-
"""
backend/app/modules/catalog/routes/category_routes.py

Rutas de categorías (/categories). Lecturas públicas; escrituras solo admin.

Fecha: 2026-09-02
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_async_session
from app.modules.auth.dependencies import require_admin
from app.modules.auth.schemas import TokenClaims
from app.modules.catalog.schemas import CategoryCreateRequest, CategoryUpdateRequest
from app.modules.catalog.services import CategoryService
from app.shared.utils.api_response import created, ok

router = APIRouter(prefix="/categories", tags=["categories"])


def get_category_service(db: AsyncSession = Depends(get_async_session)) -> CategoryService:
    return CategoryService(db)


@router.post("/createCategory")
async def create_category(
    payload: CategoryCreateRequest,
    admin: TokenClaims = Depends(require_admin),
    service: CategoryService = Depends(get_category_service),
):
    return created(await service.create(payload, created_by=admin.id), message="Categoría creada")


@router.get("/getCategories")
async def list_categories(
    type_id: Optional[str] = Query(None, alias="typeId"),
    type_slug: Optional[str] = Query(None, alias="typeSlug"),
    service: CategoryService = Depends(get_category_service),
):
    return ok(await service.list(type_id=type_id, type_slug=type_slug))


@router.get("/getCategoriesByType")
async def categories_by_type(
    type_id: Optional[str] = Query(None, alias="typeId"),
    type_slug: Optional[str] = Query(None, alias="typeSlug"),
    service: CategoryService = Depends(get_category_service),
):
    return ok(await service.distinct_by_type(type_id=type_id, type_slug=type_slug))


@router.get("/getCategory/{id}")
async def get_category(id: str, service: CategoryService = Depends(get_category_service)):
    return ok(await service.get_by_id(id))


@router.patch("/updateCategory/{id}")
async def update_category(
    id: str,
    payload: CategoryUpdateRequest,
    admin: TokenClaims = Depends(require_admin),
    service: CategoryService = Depends(get_category_service),
):
    return ok(await service.update_by_id(id, payload, updated_by=admin.id), message="Categoría actualizada")


@router.delete("/deleteCategory/{id}")
async def delete_category(
    id: str,
    _: TokenClaims = Depends(require_admin),
    service: CategoryService = Depends(get_category_service),
):
    return ok(await service.remove_by_id(id), message="Categoría eliminada")
