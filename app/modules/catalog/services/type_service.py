# -*- coding: utf-8 -*-
"""
backend/app/modules/catalog/services/type_service.py

Servicio de tipos de catálogo (producto/servicio).

Fecha: 2026-09-02
"""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.catalog.models import CatalogType
from app.modules.catalog.repositories import TypeRepository
from app.modules.catalog.schemas import TypeCreateRequest, TypeOut, TypeUpdateRequest
from app.shared.errors import ConflictError, NotFoundError, ValidationError
from app.shared.utils.slug_utils import slugify
from app.shared.utils.validators import is_uuid

logger = logging.getLogger(__name__)


class TypeService:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db
        self.repo = TypeRepository(db)

    async def _get_or_404(self, type_id: str) -> CatalogType:
        if not is_uuid(type_id):
            raise ValidationError("ID inválido")
        obj = await self.repo.get_by_id(type_id)
        if obj is None:
            raise NotFoundError("Tipo no encontrado")
        return obj

    async def create(self, data: TypeCreateRequest, created_by: str) -> TypeOut:
        name = data.name
        slug = slugify(name.value)
        if await self.repo.find_duplicate(name, slug):
            raise ConflictError("El tipo ya existe")

        obj = CatalogType(name=name, slug=slug, created_by=created_by, updated_by=created_by)
        self.db.add(obj)
        await self.db.commit()
        await self.db.refresh(obj)
        logger.info("type_created id=%s name=%s", obj.id, name)
        return TypeOut.model_validate(obj)

    async def list(self) -> list[TypeOut]:
        return [TypeOut.model_validate(t) for t in await self.repo.list_sorted()]

    async def get_by_id(self, type_id: str) -> TypeOut:
        return TypeOut.model_validate(await self._get_or_404(type_id))

    async def update_by_id(self, type_id: str, data: TypeUpdateRequest, updated_by: str) -> TypeOut:
        if data.name is None:
            raise ValidationError("Nada para actualizar")
        obj = await self._get_or_404(type_id)

        slug = slugify(data.name.value)
        if await self.repo.find_duplicate(data.name, slug, exclude_id=obj.id):
            raise ConflictError("Ya existe un tipo con ese nombre/slug")

        obj.name = data.name
        obj.slug = slug
        obj.updated_by = updated_by
        await self.db.commit()
        await self.db.refresh(obj)
        return TypeOut.model_validate(obj)

    async def remove_by_id(self, type_id: str) -> dict[str, bool]:
        if not is_uuid(type_id):
            raise ValidationError("ID inválido")
        obj = await self.repo.get_by_id(type_id)
        if obj is None:
            return {"deleted": False}
        await self.repo.delete(self.db, obj)
        await self.db.commit()
        return {"deleted": True}


__all__ = ["TypeService"]
