# -*- coding: utf-8 -*-
"""
backend/app/modules/orders/repositories/order_repository.py

Acceso a datos de ventas y compras.

insert_if_absent() es la única vía de alta desde la conciliación de pagos:
un INSERT ... ON CONFLICT (preference_id) DO NOTHING atómico, de modo que
dos webhooks duplicados concurrentes generan a lo sumo una fila.
No hay lectura previa: la unicidad la garantiza la base de datos.

Fecha: 2026-09-02
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional, Sequence, Type

from sqlalchemy import select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.orders.enums import OrderPaymentStatus, SaleStatus
from app.modules.orders.models import Purchase, Sale
from app.shared.database.base import new_uuid, utcnow
from app.shared.database.repository import BaseRepository

_DIALECT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


async def insert_if_absent(
    session: AsyncSession,
    model: Type[Sale] | Type[Purchase],
    values: dict[str, Any],
) -> bool:
    """
    Inserta una fila keyed por preference_id si no existe.

    Devuelve True si se insertó, False si ya existía. No hace commit.
    """
    dialect = session.bind.dialect.name
    insert_fn = _DIALECT_INSERTS.get(dialect)
    if insert_fn is None:
        raise RuntimeError(f"Dialecto sin soporte para ON CONFLICT: {dialect}")

    now = utcnow()
    row = {"id": new_uuid(), "created_at": now, "updated_at": now, **values}
    stmt = insert_fn(model).values(**row).on_conflict_do_nothing(index_elements=["preference_id"])
    result = await session.execute(stmt)
    return bool(result.rowcount)


class SaleRepository(BaseRepository[Sale]):
    def __init__(self, db: AsyncSession) -> None:
        super().__init__(Sale)
        self._db = db

    async def get_by_id(self, sale_id: str) -> Optional[Sale]:
        return await self.get(self._db, sale_id)

    async def get_owned(self, sale_id: str, user_id: str) -> Optional[Sale]:
        stmt = select(Sale).where(Sale.id == sale_id, Sale.user_id == user_id)
        return (await self._db.execute(stmt)).scalars().first()

    async def get_by_preference_id(self, preference_id: str) -> Optional[Sale]:
        stmt = select(Sale).where(Sale.preference_id == preference_id)
        return (await self._db.execute(stmt)).scalars().first()

    async def search(
        self,
        *,
        user_id: Optional[str] = None,
        date_from: Optional[datetime] = None,
        date_to: Optional[datetime] = None,
        status: Optional[SaleStatus] = None,
        payment_status: Optional[OrderPaymentStatus] = None,
        offset: int,
        limit: int,
    ) -> tuple[Sequence[Sale], int]:
        stmt = _apply_range(select(Sale), Sale, date_from, date_to)
        if user_id:
            stmt = stmt.where(Sale.user_id == user_id)
        if status:
            stmt = stmt.where(Sale.status == status)
        if payment_status:
            stmt = stmt.where(Sale.payment_status == payment_status)
        stmt = stmt.order_by(Sale.created_at.desc())
        return await self.paginate(self._db, stmt, offset=offset, limit=limit)

    async def totals_in_range(
        self,
        date_from: Optional[datetime],
        date_to: Optional[datetime],
    ) -> list[tuple[datetime, Any, OrderPaymentStatus]]:
        """(created_at, total, payment_status) de las ventas del rango, para métricas."""
        stmt = _apply_range(
            select(Sale.created_at, Sale.total, Sale.payment_status), Sale, date_from, date_to
        ).order_by(Sale.created_at.asc())
        return [tuple(r) for r in (await self._db.execute(stmt)).all()]


class PurchaseRepository(BaseRepository[Purchase]):
    def __init__(self, db: AsyncSession) -> None:
        super().__init__(Purchase)
        self._db = db

    async def get_owned(self, purchase_id: str, user_id: str) -> Optional[Purchase]:
        stmt = select(Purchase).where(Purchase.id == purchase_id, Purchase.user_id == user_id)
        return (await self._db.execute(stmt)).scalars().first()

    async def get_by_preference_id(self, preference_id: str) -> Optional[Purchase]:
        stmt = select(Purchase).where(Purchase.preference_id == preference_id)
        return (await self._db.execute(stmt)).scalars().first()

    async def search_for_user(
        self,
        user_id: str,
        *,
        payment_status: Optional[OrderPaymentStatus] = None,
        offset: int,
        limit: int,
    ) -> tuple[Sequence[Purchase], int]:
        stmt = select(Purchase).where(Purchase.user_id == user_id)
        if payment_status:
            stmt = stmt.where(Purchase.payment_status == payment_status)
        stmt = stmt.order_by(Purchase.created_at.desc())
        return await self.paginate(self._db, stmt, offset=offset, limit=limit)

    async def add(self, obj: Purchase) -> Purchase:
        self._db.add(obj)
        await self._db.flush()
        return obj


def _apply_range(stmt, model, date_from: Optional[datetime], date_to: Optional[datetime]):
    if date_from:
        stmt = stmt.where(model.created_at >= date_from)
    if date_to:
        stmt = stmt.where(model.created_at <= date_to)
    return stmt


__all__ = ["SaleRepository", "PurchaseRepository", "insert_if_absent"]
