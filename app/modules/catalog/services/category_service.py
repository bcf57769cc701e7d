# -*- coding: utf-8 -*-
"""
backend/app/modules/catalog/services/category_service.py

Servicio de categorías:
- El tipo asociado debe existir al crear/mover una categoría.
- El slug se recalcula cuando cambia el nombre.
- Filtros por type_id o, en su defecto, por type_slug.

Fecha: 2026-09-02
"""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.catalog.models import Category
from app.modules.catalog.repositories import CategoryRepository, TypeRepository
from app.modules.catalog.schemas import CategoryCreateRequest, CategoryOut, CategoryUpdateRequest
from app.shared.errors import ConflictError, NotFoundError, ValidationError
from app.shared.utils.slug_utils import slugify
from app.shared.utils.validators import is_uuid

logger = logging.getLogger(__name__)

_NO_MATCH = object()


class CategoryService:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db
        self.repo = CategoryRepository(db)
        self.types = TypeRepository(db)

    async def _get_or_404(self, category_id: str) -> Category:
        if not is_uuid(category_id):
            raise ValidationError("ID inválido")
        obj = await self.repo.get_by_id(category_id)
        if obj is None:
            raise NotFoundError("Categoría no encontrada")
        return obj

    async def _require_type(self, type_id: str) -> None:
        if not is_uuid(type_id):
            raise ValidationError("typeId inválido")
        if await self.types.get_by_id(type_id) is None:
            raise ValidationError("El tipo asociado no existe")

    async def _resolve_type_filter(
        self, type_id: Optional[str], type_slug: Optional[str]
    ) -> object:
        """
        type_id tiene prioridad; un type_slug inexistente no filtra
        (se listan todas las categorías).
        """
        if type_id:
            if not is_uuid(type_id):
                raise ValidationError("typeId inválido")
            return type_id
        if type_slug:
            t = await self.types.get_by_slug(type_slug.strip().lower())
            if t is not None:
                return t.id
        return _NO_MATCH

    async def create(self, data: CategoryCreateRequest, created_by: str) -> CategoryOut:
        await self._require_type(data.type_id)
        slug = slugify(data.name)
        if not slug:
            raise ValidationError("nombre obligatorio")
        if await self.repo.find_duplicate(data.type_id, data.name, slug):
            raise ConflictError("La categoría ya existe para ese tipo")

        obj = Category(
            name=data.name,
            slug=slug,
            type_id=data.type_id,
            created_by=created_by,
            updated_by=created_by,
        )
        self.db.add(obj)
        await self.db.commit()
        await self.db.refresh(obj)
        logger.info("category_created id=%s name=%s type_id=%s", obj.id, obj.name, obj.type_id)
        return CategoryOut.model_validate(obj)

    async def list(
        self, type_id: Optional[str] = None, type_slug: Optional[str] = None
    ) -> dict[str, list[CategoryOut]]:
        resolved = await self._resolve_type_filter(type_id, type_slug)
        rows = await self.repo.list_by_type(None if resolved is _NO_MATCH else str(resolved))
        return {"items": [CategoryOut.model_validate(c) for c in rows]}

    async def get_by_id(self, category_id: str) -> CategoryOut:
        return CategoryOut.model_validate(await self._get_or_404(category_id))

    async def update_by_id(
        self, category_id: str, data: CategoryUpdateRequest, updated_by: str
    ) -> CategoryOut:
        if data.name is None and data.type_id is None:
            raise ValidationError("Nada para actualizar")
        obj = await self._get_or_404(category_id)

        name = data.name if data.name is not None else obj.name
        type_id = data.type_id if data.type_id is not None else obj.type_id
        if data.type_id is not None:
            await self._require_type(data.type_id)
        slug = slugify(name)
        if await self.repo.find_duplicate(type_id, name, slug, exclude_id=obj.id):
            raise ConflictError("Ya existe una categoría con ese nombre/slug")

        obj.name = name
        obj.slug = slug
        obj.type_id = type_id
        obj.updated_by = updated_by
        await self.db.commit()
        await self.db.refresh(obj)
        return CategoryOut.model_validate(obj)

    async def remove_by_id(self, category_id: str) -> dict[str, bool]:
        obj = await self._get_or_404(category_id)
        await self.repo.delete(self.db, obj)
        await self.db.commit()
        return {"deleted": True}

    async def distinct_by_type(
        self, type_id: Optional[str] = None, type_slug: Optional[str] = None
    ) -> list[str]:
        resolved = await self._resolve_type_filter(type_id, type_slug)
        return await self.repo.distinct_names(None if resolved is _NO_MATCH else str(resolved))


__all__ = ["CategoryService"]
