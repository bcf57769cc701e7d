# -*- coding: utf-8 -*-
"""
backend/app/modules/orders/routes/purchase_routes.py

Rutas de compras del comprador (/purchases). Todas exigen buyer o admin.

Fecha: 2026-09-02
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_async_session
from app.modules.auth.dependencies import require_buyer
from app.modules.auth.schemas import TokenClaims
from app.modules.orders.enums import OrderPaymentStatus
from app.modules.orders.schemas import PurchaseCreateRequest
from app.modules.orders.services import PurchaseService
from app.shared.utils.api_response import created, ok

router = APIRouter(prefix="/purchases", tags=["purchases"])


def get_purchase_service(db: AsyncSession = Depends(get_async_session)) -> PurchaseService:
    return PurchaseService(db)


@router.get("/myPurchases")
async def list_my_purchases(
    payment_status: Optional[OrderPaymentStatus] = Query(None, alias="paymentStatus"),
    page: Optional[int] = Query(None, ge=1),
    limit: Optional[int] = Query(None, ge=1, le=100),
    user: TokenClaims = Depends(require_buyer),
    service: PurchaseService = Depends(get_purchase_service),
):
    return ok(await service.list_my_purchases(user.id, payment_status=payment_status, page=page, limit=limit))


@router.get("/getPurchase/{id}")
async def get_my_purchase(
    id: str,
    user: TokenClaims = Depends(require_buyer),
    service: PurchaseService = Depends(get_purchase_service),
):
    return ok(await service.get_my_purchase(user.id, id))


@router.post("/createPurchase")
async def create_purchase(
    payload: PurchaseCreateRequest,
    user: TokenClaims = Depends(require_buyer),
    service: PurchaseService = Depends(get_purchase_service),
):
    return created(await service.create_purchase(user, payload), message="Compra creada")


@router.post("/cancelPurchase/{id}")
async def cancel_purchase(
    id: str,
    user: TokenClaims = Depends(require_buyer),
    service: PurchaseService = Depends(get_purchase_service),
):
    return ok(await service.cancel_purchase(user.id, id), message="Compra cancelada")
