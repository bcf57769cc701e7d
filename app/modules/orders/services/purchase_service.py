# -*- coding: utf-8 -*-
"""
backend/app/modules/orders/services/purchase_service.py

Servicio de compras del comprador autenticado.

Fecha: 2026-09-02
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.auth.schemas import TokenClaims
from app.modules.orders.enums import OrderPaymentStatus
from app.modules.orders.models import Purchase
from app.modules.orders.repositories import PurchaseRepository
from app.modules.orders.schemas import OrderItem, PurchaseCreateRequest, PurchaseOut
from app.shared.errors import NotFoundError, ValidationError
from app.shared.utils.pagination import PageParams, page_result
from app.shared.utils.validators import is_uuid

logger = logging.getLogger(__name__)

CANCEL_NOTE = "Cancelada por el usuario"


def _snapshot(item: OrderItem) -> dict[str, Any]:
    line = {
        "title": item.title,
        "quantity": item.quantity,
        "unit_price": float(item.unit_price),
        "currency_id": item.currency_id,
    }
    if item.item_id:
        line["item_id"] = item.item_id
    return line


class PurchaseService:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db
        self.repo = PurchaseRepository(db)

    async def _get_owned_or_404(self, user_id: str, purchase_id: str) -> Purchase:
        if not is_uuid(purchase_id):
            raise ValidationError("ID inválido")
        obj = await self.repo.get_owned(purchase_id, user_id)
        if obj is None:
            raise NotFoundError("Compra no encontrada")
        return obj

    async def list_my_purchases(
        self,
        user_id: str,
        payment_status: Optional[OrderPaymentStatus] = None,
        page: Any = None,
        limit: Any = None,
    ) -> dict[str, Any]:
        params = PageParams.normalize(page, limit, default_limit=10)
        rows, total = await self.repo.search_for_user(
            user_id,
            payment_status=payment_status,
            offset=params.offset,
            limit=params.limit,
        )
        return page_result([PurchaseOut.model_validate(p) for p in rows], params, total)

    async def get_my_purchase(self, user_id: str, purchase_id: str) -> PurchaseOut:
        return PurchaseOut.model_validate(await self._get_owned_or_404(user_id, purchase_id))

    async def create_purchase(self, user: TokenClaims, data: PurchaseCreateRequest) -> PurchaseOut:
        items = [_snapshot(i) for i in data.items]
        subtotal = sum((i.unit_price * i.quantity for i in data.items), Decimal("0"))
        obj = Purchase(
            user_id=user.id,
            items=items,
            subtotal=subtotal,
            total=subtotal,
            currency_id=data.items[0].currency_id,
            payer_email=user.email,
            payment_status=OrderPaymentStatus.pending,
            payment_provider=data.payment_provider,
            notes=data.notes,
            created_by=user.id,
            updated_by=user.id,
        )
        await self.repo.add(obj)
        await self.db.commit()
        await self.db.refresh(obj)
        logger.info("purchase_created id=%s user=%s total=%s", obj.id, user.id, obj.total)
        return PurchaseOut.model_validate(obj)

    async def cancel_purchase(self, user_id: str, purchase_id: str) -> dict[str, bool]:
        obj = await self._get_owned_or_404(user_id, purchase_id)
        if obj.payment_status != OrderPaymentStatus.pending:
            raise ValidationError("La compra no se puede cancelar en este estado")
        obj.payment_status = OrderPaymentStatus.failed
        obj.notes = CANCEL_NOTE
        obj.updated_by = user_id
        await self.db.commit()
        logger.info("purchase_cancelled id=%s user=%s", obj.id, user_id)
        return {"cancelled": True}


__all__ = ["PurchaseService", "CANCEL_NOTE"]
