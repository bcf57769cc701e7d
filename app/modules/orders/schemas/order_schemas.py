# -*- coding: utf-8 -*-
"""
backend/app/modules/orders/schemas/order_schemas.py

Esquemas Pydantic de ventas, compras y métricas.

Fecha: 2026-09-02
"""

from datetime import datetime
from decimal import Decimal
from typing import Literal, Optional

from pydantic import Field

from app.modules.orders.enums import OrderPaymentStatus, PaymentProvider, SaleStatus
from app.shared.utils.base_models import Money, Quantity, ShopModel

MetricsInterval = Literal["day", "week", "month"]


class OrderItem(ShopModel):
    """Línea de snapshot; item_id solo viene en compras manuales."""
    item_id: Optional[str] = Field(None, alias="itemId")
    title: str = Field(..., min_length=1, max_length=200)
    quantity: int = Field(..., ge=1)
    unit_price: Decimal = Field(..., ge=0)
    currency_id: str = Field("CLP", min_length=3, max_length=8)


class OrderItemOut(OrderItem):
    """Línea leída de un snapshot; las ventas conciliadas pueden traer cantidades fraccionarias."""
    quantity: Quantity = Field(..., ge=1)
    unit_price: Money = Field(..., ge=0)


class _OrderOut(ShopModel):
    id: str
    preference_id: Optional[str] = None
    user_id: Optional[str] = None
    items: list[OrderItemOut] = Field(default_factory=list)
    subtotal: Money
    total: Money
    currency_id: str
    payer_email: Optional[str] = None
    payment_status: OrderPaymentStatus
    payment_provider: PaymentProvider
    created_by: Optional[str] = None
    updated_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class SaleOut(_OrderOut):
    taxes: Money
    status: SaleStatus
    checkout_session_id: Optional[str] = None


class PurchaseOut(_OrderOut):
    notes: Optional[str] = None


class SaleStatusUpdateRequest(ShopModel):
    status: SaleStatus


class PurchaseCreateRequest(ShopModel):
    items: list[OrderItem] = Field(..., min_length=1)
    payment_provider: PaymentProvider = Field(PaymentProvider.transfer, alias="paymentProvider")
    notes: Optional[str] = Field(None, max_length=500)


class MetricsOverview(ShopModel):
    orders_count: int
    total_revenue: Money
    paid_orders: int
    avg_order: Money


class TimeSeriesPoint(ShopModel):
    bucket: str
    revenue: Money
    count: int


__all__ = [
    "MetricsInterval",
    "OrderItem",
    "OrderItemOut",
    "SaleOut",
    "PurchaseOut",
    "SaleStatusUpdateRequest",
    "PurchaseCreateRequest",
    "MetricsOverview",
    "TimeSeriesPoint",
]
