# -*- coding: utf-8 -*-
"""
backend/app/modules/catalog/services/item_service.py

Servicio de ítems del catálogo.

La categoría de un ítem debe pertenecer a su tipo; se valida en cada
create/update contra el estado final (campos nuevos + actuales).

Fecha: 2026-09-02
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.catalog.models import Item
from app.modules.catalog.repositories import CategoryRepository, ItemRepository, TypeRepository
from app.modules.catalog.schemas import ItemCreateRequest, ItemOut, ItemUpdateRequest
from app.shared.errors import NotFoundError, ValidationError
from app.shared.utils.pagination import PageParams, page_result
from app.shared.utils.validators import is_uuid

logger = logging.getLogger(__name__)


class ItemService:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db
        self.repo = ItemRepository(db)
        self.types = TypeRepository(db)
        self.categories = CategoryRepository(db)

    async def _get_or_404(self, item_id: str) -> Item:
        if not is_uuid(item_id):
            raise ValidationError("ID inválido")
        obj = await self.repo.get_by_id(item_id)
        if obj is None:
            raise NotFoundError("No encontrado")
        return obj

    async def _check_type_category(self, type_id: str, category_id: str) -> None:
        if not is_uuid(type_id) or not is_uuid(category_id):
            raise ValidationError("typeId/categoryId inválido")
        if await self.types.get_by_id(type_id) is None:
            raise ValidationError("El tipo asociado no existe")
        category = await self.categories.get_by_id(category_id)
        if category is None:
            raise ValidationError("La categoría asociada no existe")
        if category.type_id != type_id:
            raise ValidationError("La categoría seleccionada no pertenece al mismo tipo del ítem.")

    async def create(self, data: ItemCreateRequest, created_by: str) -> ItemOut:
        await self._check_type_category(data.type_id, data.category_id)
        obj = Item(
            **data.model_dump(),
            created_by=created_by,
            updated_by=created_by,
        )
        self.db.add(obj)
        await self.db.commit()
        await self.db.refresh(obj)
        logger.info("item_created id=%s name=%s", obj.id, obj.name)
        return ItemOut.model_validate(obj)

    async def list(
        self,
        q: Optional[str] = None,
        type_id: Optional[str] = None,
        category_id: Optional[str] = None,
        page: Any = None,
        limit: Any = None,
    ) -> dict[str, Any]:
        params = PageParams.normalize(page, limit, default_limit=10)
        rows, total = await self.repo.search(
            q=(q or "").strip() or None,
            # ids mal formados se ignoran como filtro
            type_id=type_id if is_uuid(type_id) else None,
            category_id=category_id if is_uuid(category_id) else None,
            offset=params.offset,
            limit=params.limit,
        )
        return page_result([ItemOut.model_validate(i) for i in rows], params, total)

    async def get_by_id(self, item_id: str) -> ItemOut:
        return ItemOut.model_validate(await self._get_or_404(item_id))

    async def update_by_id(self, item_id: str, data: ItemUpdateRequest, updated_by: str) -> ItemOut:
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        if not changes:
            raise ValidationError("Nada para actualizar")
        obj = await self._get_or_404(item_id)

        if "type_id" in changes or "category_id" in changes:
            await self._check_type_category(
                changes.get("type_id", obj.type_id),
                changes.get("category_id", obj.category_id),
            )
        for field, value in changes.items():
            setattr(obj, field, value)
        obj.updated_by = updated_by
        await self.db.commit()
        await self.db.refresh(obj)
        return ItemOut.model_validate(obj)

    async def remove_by_id(self, item_id: str) -> dict[str, bool]:
        obj = await self._get_or_404(item_id)
        await self.repo.delete(self.db, obj)
        await self.db.commit()
        return {"deleted": True}

    async def distinct_categories(self) -> list[str]:
        return await self.repo.distinct_category_names()

    async def distinct_types(self) -> list[str]:
        return await self.repo.distinct_type_names()


__all__ = ["ItemService"]
