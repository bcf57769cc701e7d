# -*- coding: utf-8 -*-
"""
backend/app/modules/catalog/repositories/type_repository.py

Acceso a datos de tipos de catálogo.

Fecha: 2026-09-02
"""

from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.catalog.models import CatalogType
from app.shared.database.repository import BaseRepository


class TypeRepository(BaseRepository[CatalogType]):
    def __init__(self, db: AsyncSession) -> None:
        super().__init__(CatalogType)
        self._db = db

    async def get_by_id(self, type_id: str) -> Optional[CatalogType]:
        return await self.get(self._db, type_id)

    async def get_by_slug(self, slug: str) -> Optional[CatalogType]:
        result = await self._db.execute(select(CatalogType).where(CatalogType.slug == slug))
        return result.scalar_one_or_none()

    async def find_duplicate(
        self, name: str, slug: str, exclude_id: Optional[str] = None
    ) -> Optional[CatalogType]:
        stmt = select(CatalogType).where(or_(CatalogType.name == name, CatalogType.slug == slug))
        if exclude_id:
            stmt = stmt.where(CatalogType.id != exclude_id)
        result = await self._db.execute(stmt.limit(1))
        return result.scalar_one_or_none()

    async def list_sorted(self) -> Sequence[CatalogType]:
        result = await self._db.execute(select(CatalogType).order_by(CatalogType.name.asc()))
        return result.scalars().all()


__all__ = ["TypeRepository"]
