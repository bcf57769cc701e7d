# -*- coding: utf-8 -*-
"""
backend/app/modules/catalog/repositories/item_repository.py

Acceso a datos de ítems: búsqueda paginada y distintos en uso.

Fecha: 2026-09-02
"""

from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.catalog.models import CatalogType, Category, Item
from app.shared.database.repository import BaseRepository


class ItemRepository(BaseRepository[Item]):
    def __init__(self, db: AsyncSession) -> None:
        super().__init__(Item)
        self._db = db

    async def get_by_id(self, item_id: str) -> Optional[Item]:
        return await self.get(self._db, item_id)

    async def search(
        self,
        *,
        q: Optional[str],
        type_id: Optional[str],
        category_id: Optional[str],
        offset: int,
        limit: int,
    ) -> tuple[Sequence[Item], int]:
        stmt = select(Item)
        if type_id:
            stmt = stmt.where(Item.type_id == type_id)
        if category_id:
            stmt = stmt.where(Item.category_id == category_id)
        if q:
            pattern = f"%{q.strip()}%"
            stmt = stmt.where(or_(Item.name.ilike(pattern), Item.description.ilike(pattern)))
        stmt = stmt.order_by(Item.created_at.desc())
        return await self.paginate(self._db, stmt, offset=offset, limit=limit)

    async def distinct_category_names(self) -> list[str]:
        stmt = (
            select(Category.name)
            .where(Category.id.in_(select(Item.category_id).distinct()))
            .distinct()
            .order_by(Category.name.asc())
        )
        return list((await self._db.execute(stmt)).scalars().all())

    async def distinct_type_names(self) -> list[str]:
        stmt = (
            select(CatalogType.name)
            .where(CatalogType.id.in_(select(Item.type_id).distinct()))
            .order_by(CatalogType.name.asc())
        )
        return [str(n) for n in (await self._db.execute(stmt)).scalars().all()]


__all__ = ["ItemRepository"]
