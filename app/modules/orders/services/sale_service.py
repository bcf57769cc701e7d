# -*- coding: utf-8 -*-
"""
backend/app/modules/orders/services/sale_service.py

Servicio de ventas.

- Vistas del comprador: sus propias ventas (list_my_sales / get_my_sale).
- Vistas del admin: listado con filtros, detalle, cambio de estado y métricas.

Las métricas se agregan en Python sobre (created_at, total, payment_status)
para que los buckets day/week/month se comporten igual en PostgreSQL y
SQLite. Semana = semana ISO (%G-%V).

Fecha: 2026-09-02
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.orders.enums import OrderPaymentStatus, SaleStatus
from app.modules.orders.models import Sale
from app.modules.orders.repositories import SaleRepository
from app.modules.orders.schemas import MetricsOverview, SaleOut, TimeSeriesPoint
from app.shared.errors import NotFoundError, ValidationError
from app.shared.utils.pagination import PageParams, page_result
from app.shared.utils.validators import is_uuid

logger = logging.getLogger(__name__)

BUCKET_FORMATS = {
    "day": "%Y-%m-%d",
    "week": "%G-%V",
    "month": "%Y-%m",
}

_CENTS = Decimal("0.01")


class SaleService:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db
        self.repo = SaleRepository(db)

    async def _get_or_404(self, sale_id: str, user_id: Optional[str] = None) -> Sale:
        if not is_uuid(sale_id):
            raise ValidationError("ID inválido")
        if user_id is None:
            obj = await self.repo.get_by_id(sale_id)
        else:
            obj = await self.repo.get_owned(sale_id, user_id)
        if obj is None:
            raise NotFoundError("Venta no encontrada")
        return obj

    # ----- comprador -----

    async def list_my_sales(self, user_id: str, page: Any = None, limit: Any = None) -> dict[str, Any]:
        params = PageParams.normalize(page, limit, default_limit=10)
        rows, total = await self.repo.search(user_id=user_id, offset=params.offset, limit=params.limit)
        return page_result([SaleOut.model_validate(s) for s in rows], params, total)

    async def get_my_sale(self, user_id: str, sale_id: str) -> SaleOut:
        return SaleOut.model_validate(await self._get_or_404(sale_id, user_id=user_id))

    # ----- admin -----

    async def list_sales(
        self,
        *,
        date_from: Optional[datetime] = None,
        date_to: Optional[datetime] = None,
        status: Optional[SaleStatus] = None,
        payment_status: Optional[OrderPaymentStatus] = None,
        page: Any = None,
        limit: Any = None,
    ) -> dict[str, Any]:
        params = PageParams.normalize(page, limit)
        rows, total = await self.repo.search(
            date_from=date_from,
            date_to=date_to,
            status=status,
            payment_status=payment_status,
            offset=params.offset,
            limit=params.limit,
        )
        return page_result([SaleOut.model_validate(s) for s in rows], params, total)

    async def get_sale(self, sale_id: str) -> SaleOut:
        return SaleOut.model_validate(await self._get_or_404(sale_id))

    async def update_status(self, sale_id: str, status: SaleStatus, updated_by: str) -> SaleOut:
        obj = await self._get_or_404(sale_id)
        previous = obj.status
        obj.status = status
        obj.updated_by = updated_by
        await self.db.commit()
        await self.db.refresh(obj)
        logger.info("sale_status_updated id=%s from=%s to=%s by=%s", obj.id, previous, status, updated_by)
        return SaleOut.model_validate(obj)

    async def metrics_overview(
        self,
        date_from: Optional[datetime] = None,
        date_to: Optional[datetime] = None,
    ) -> MetricsOverview:
        rows = await self.repo.totals_in_range(date_from, date_to)
        count = len(rows)
        revenue = sum((Decimal(total or 0) for _, total, _ in rows), Decimal("0"))
        paid = sum(1 for _, _, status in rows if status == OrderPaymentStatus.paid)
        avg = (revenue / count).quantize(_CENTS) if count else Decimal("0")
        return MetricsOverview(
            orders_count=count,
            total_revenue=revenue,
            paid_orders=paid,
            avg_order=avg,
        )

    async def metrics_time_series(
        self,
        date_from: Optional[datetime] = None,
        date_to: Optional[datetime] = None,
        interval: str = "day",
    ) -> list[TimeSeriesPoint]:
        fmt = BUCKET_FORMATS.get(interval)
        if fmt is None:
            raise ValidationError("interval debe ser day, week o month")

        buckets: OrderedDict[str, list] = OrderedDict()
        for created_at, total, _ in await self.repo.totals_in_range(date_from, date_to):
            key = created_at.strftime(fmt)
            acc = buckets.setdefault(key, [Decimal("0"), 0])
            acc[0] += Decimal(total or 0)
            acc[1] += 1

        return [
            TimeSeriesPoint(bucket=key, revenue=revenue, count=count)
            for key, (revenue, count) in sorted(buckets.items())
        ]


__all__ = ["SaleService", "BUCKET_FORMATS"]
