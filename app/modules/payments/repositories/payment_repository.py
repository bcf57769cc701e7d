# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/repositories/payment_repository.py

Repositorio para la tabla payments.

Responsabilidades:
- Búsqueda por preference_id (clave de conciliación)
- Listado filtrado por estado/usuario, más recientes primero

Fecha: 2026-09-02
"""

from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.payments.models import Payment
from app.shared.database.repository import BaseRepository


class PaymentRepository(BaseRepository[Payment]):
    def __init__(self, db: AsyncSession) -> None:
        super().__init__(Payment)
        self._db = db

    async def get_by_id(self, payment_pk: str) -> Optional[Payment]:
        return await self.get(self._db, payment_pk)

    async def get_by_preference_id(self, preference_id: str) -> Optional[Payment]:
        """La conciliación busca por preferencia: el payment_id no existe hasta la primera."""
        stmt = select(Payment).where(Payment.preference_id == preference_id)
        result = await self._db.execute(stmt)
        return result.scalars().first()

    async def search(
        self,
        *,
        status: Optional[str] = None,
        user_id: Optional[str] = None,
        offset: int,
        limit: int,
    ) -> tuple[Sequence[Payment], int]:
        stmt = select(Payment)
        if status:
            stmt = stmt.where(Payment.status == status)
        if user_id:
            stmt = stmt.where(Payment.user_id == user_id)
        stmt = stmt.order_by(Payment.created_at.desc())
        return await self.paginate(self._db, stmt, offset=offset, limit=limit)

    async def add(self, payment: Payment) -> Payment:
        self._db.add(payment)
        await self._db.flush()
        return payment


__all__ = ["PaymentRepository"]

# Fin del archivo backend/app/modules/payments/repositories/payment_repository.py
