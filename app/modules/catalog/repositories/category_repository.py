# -*- coding: utf-8 -*-
"""
backend/app/modules/catalog/repositories/category_repository.py

Acceso a datos de categorías.

Fecha: 2026-09-02
"""

from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.catalog.models import Category
from app.shared.database.repository import BaseRepository


class CategoryRepository(BaseRepository[Category]):
    def __init__(self, db: AsyncSession) -> None:
        super().__init__(Category)
        self._db = db

    async def get_by_id(self, category_id: str) -> Optional[Category]:
        return await self.get(self._db, category_id)

    async def find_duplicate(
        self,
        type_id: str,
        name: str,
        slug: str,
        exclude_id: Optional[str] = None,
    ) -> Optional[Category]:
        """Colisión por (type_id, name) o por slug global."""
        stmt = select(Category).where(
            or_(
                (Category.type_id == type_id) & (Category.name == name),
                Category.slug == slug,
            )
        )
        if exclude_id:
            stmt = stmt.where(Category.id != exclude_id)
        result = await self._db.execute(stmt.limit(1))
        return result.scalar_one_or_none()

    async def list_by_type(self, type_id: Optional[str] = None) -> Sequence[Category]:
        stmt = select(Category)
        if type_id:
            stmt = stmt.where(Category.type_id == type_id)
        result = await self._db.execute(stmt.order_by(Category.name.asc()))
        return result.scalars().all()

    async def distinct_names(self, type_id: Optional[str] = None) -> list[str]:
        stmt = select(Category.name).distinct()
        if type_id:
            stmt = stmt.where(Category.type_id == type_id)
        result = await self._db.execute(stmt.order_by(Category.name.asc()))
        return list(result.scalars().all())


__all__ = ["CategoryRepository"]
