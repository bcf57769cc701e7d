# -*- coding: utf-8 -*-
"""
backend/app/modules/catalog/routes/type_routes.py

Rutas de tipos (/types). Lecturas públicas; escrituras solo admin.

Fecha: 2026-09-02
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_async_session
from app.modules.auth.dependencies import require_admin
from app.modules.auth.schemas import TokenClaims
from app.modules.catalog.schemas import TypeCreateRequest, TypeUpdateRequest
from app.modules.catalog.services import TypeService
from app.shared.utils.api_response import created, ok

router = APIRouter(prefix="/types", tags=["types"])


def get_type_service(db: AsyncSession = Depends(get_async_session)) -> TypeService:
    return TypeService(db)


@router.post("/createType")
async def create_type(
    payload: TypeCreateRequest,
    admin: TokenClaims = Depends(require_admin),
    service: TypeService = Depends(get_type_service),
):
    return created(await service.create(payload, created_by=admin.id), message="Tipo creado")


@router.get("/getTypes")
async def list_types(service: TypeService = Depends(get_type_service)):
    return ok(await service.list())


@router.get("/getType/{id}")
async def get_type(id: str, service: TypeService = Depends(get_type_service)):
    return ok(await service.get_by_id(id))


@router.patch("/updateType/{id}")
async def update_type(
    id: str,
    payload: TypeUpdateRequest,
    admin: TokenClaims = Depends(require_admin),
    service: TypeService = Depends(get_type_service),
):
    return ok(await service.update_by_id(id, payload, updated_by=admin.id), message="Actualizado")


@router.delete("/deleteType/{id}")
async def delete_type(
    id: str,
    _: TokenClaims = Depends(require_admin),
    service: TypeService = Depends(get_type_service),
):
    result = await service.remove_by_id(id)
    return ok(result, message="Eliminado" if result["deleted"] else "No existía")
