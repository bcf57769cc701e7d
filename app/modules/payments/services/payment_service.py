# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/services/payment_service.py

Servicio de consulta y actualización administrativa de pagos.

Flujos cubiertos:
- Listado filtrado por estado/usuario, paginado (20 por defecto, máx. 100)
- Detalle por id
- Actualización de status / items / payer_email. Si cambian los ítems se
  re-normalizan y Payment.set_items() recalcula amount y currency_id.
  preference_id y created_by nunca se modifican.

Fecha: 2026-09-02
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.payments.facades.checkout.items import normalize_items
from app.modules.payments.models import DEFAULT_CURRENCY, Payment
from app.modules.payments.repositories import PaymentRepository
from app.modules.payments.schemas import PaymentOut, PaymentUpdateRequest
from app.shared.errors import NotFoundError, ValidationError
from app.shared.utils.pagination import PageParams, page_result
from app.shared.utils.validators import is_uuid

logger = logging.getLogger(__name__)


class PaymentService:
    def __init__(self, db: AsyncSession, default_currency: str = DEFAULT_CURRENCY) -> None:
        self.db = db
        self.repo = PaymentRepository(db)
        self.default_currency = default_currency

    async def _get_or_404(self, payment_pk: str) -> Payment:
        if not is_uuid(payment_pk):
            raise ValidationError("ID inválido")
        obj = await self.repo.get_by_id(payment_pk)
        if obj is None:
            raise NotFoundError("Pago no encontrado")
        return obj

    async def list(
        self,
        status: Optional[str] = None,
        user_id: Optional[str] = None,
        page: Any = None,
        limit: Any = None,
    ) -> dict[str, Any]:
        params = PageParams.normalize(page, limit)
        rows, total = await self.repo.search(
            status=(status or "").strip() or None,
            user_id=(user_id or "").strip() or None,
            offset=params.offset,
            limit=params.limit,
        )
        return page_result([PaymentOut.model_validate(p) for p in rows], params, total)

    async def get_by_id(self, payment_pk: str) -> PaymentOut:
        return PaymentOut.model_validate(await self._get_or_404(payment_pk))

    async def update_by_id(self, payment_pk: str, data: PaymentUpdateRequest, updated_by: str) -> PaymentOut:
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        if not changes:
            raise ValidationError("Nada para actualizar")
        obj = await self._get_or_404(payment_pk)

        if "items" in changes:
            obj.set_items(normalize_items(data.items or [], self.default_currency))
        if "status" in changes:
            obj.status = data.status.value
        if "payer_email" in changes:
            obj.set_payer_email(data.payer_email)
        obj.updated_by = updated_by

        await self.db.commit()
        await self.db.refresh(obj)
        logger.info(
            "payment_updated id=%s fields=%s status=%s amount=%s by=%s",
            obj.id, sorted(changes), obj.status, obj.amount, updated_by,
        )
        return PaymentOut.model_validate(obj)


__all__ = ["PaymentService"]
