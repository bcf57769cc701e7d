# -*- coding: utf-8 -*-
"""
backend/app/modules/orders/routes/sale_routes.py

Rutas de ventas (/sales).

- Comprador (buyer o admin): mySales, getMySale/{id}
- Admin: listSales, getSale/{id}, updateSaleStatus/{id}, metrics/*

Fecha: 2026-09-02
"""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_async_session
from app.modules.auth.dependencies import require_admin, require_buyer
from app.modules.auth.schemas import TokenClaims
from app.modules.orders.enums import OrderPaymentStatus, SaleStatus
from app.modules.orders.schemas import MetricsInterval, SaleStatusUpdateRequest
from app.modules.orders.services import SaleService
from app.shared.utils.api_response import ok

router = APIRouter(prefix="/sales", tags=["sales"])


def get_sale_service(db: AsyncSession = Depends(get_async_session)) -> SaleService:
    return SaleService(db)


# ----- comprador -----

@router.get("/mySales")
async def list_my_sales(
    page: Optional[int] = Query(None, ge=1),
    limit: Optional[int] = Query(None, ge=1, le=100),
    user: TokenClaims = Depends(require_buyer),
    service: SaleService = Depends(get_sale_service),
):
    return ok(await service.list_my_sales(user.id, page=page, limit=limit))


@router.get("/getMySale/{id}")
async def get_my_sale(
    id: str,
    user: TokenClaims = Depends(require_buyer),
    service: SaleService = Depends(get_sale_service),
):
    return ok(await service.get_my_sale(user.id, id))


# ----- admin -----

@router.get("/listSales")
async def list_sales(
    date_from: Optional[datetime] = Query(None, alias="from"),
    date_to: Optional[datetime] = Query(None, alias="to"),
    status: Optional[SaleStatus] = Query(None),
    payment_status: Optional[OrderPaymentStatus] = Query(None, alias="paymentStatus"),
    page: Optional[int] = Query(None, ge=1),
    limit: Optional[int] = Query(None, ge=1, le=100),
    _: TokenClaims = Depends(require_admin),
    service: SaleService = Depends(get_sale_service),
):
    return ok(
        await service.list_sales(
            date_from=date_from,
            date_to=date_to,
            status=status,
            payment_status=payment_status,
            page=page,
            limit=limit,
        )
    )


@router.get("/getSale/{id}")
async def get_sale(
    id: str,
    _: TokenClaims = Depends(require_admin),
    service: SaleService = Depends(get_sale_service),
):
    return ok(await service.get_sale(id))


@router.patch("/updateSaleStatus/{id}")
async def update_sale_status(
    id: str,
    payload: SaleStatusUpdateRequest,
    admin: TokenClaims = Depends(require_admin),
    service: SaleService = Depends(get_sale_service),
):
    return ok(await service.update_status(id, payload.status, updated_by=admin.id), message="Estado actualizado")


@router.get("/metrics/overview")
async def metrics_overview(
    date_from: Optional[datetime] = Query(None, alias="from"),
    date_to: Optional[datetime] = Query(None, alias="to"),
    _: TokenClaims = Depends(require_admin),
    service: SaleService = Depends(get_sale_service),
):
    return ok(await service.metrics_overview(date_from, date_to))


@router.get("/metrics/timeseries")
async def metrics_time_series(
    date_from: Optional[datetime] = Query(None, alias="from"),
    date_to: Optional[datetime] = Query(None, alias="to"),
    interval: MetricsInterval = Query("day"),
    _: TokenClaims = Depends(require_admin),
    service: SaleService = Depends(get_sale_service),
):
    return ok(await service.metrics_time_series(date_from, date_to, interval=interval))
