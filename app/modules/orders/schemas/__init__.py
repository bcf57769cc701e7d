# -*- coding: utf-8 -*-
"""
backend/app/modules/orders/schemas/__init__.py
"""

from .order_schemas import (
    MetricsInterval,
    MetricsOverview,
    OrderItem,
    OrderItemOut,
    PurchaseCreateRequest,
    PurchaseOut,
    SaleOut,
    SaleStatusUpdateRequest,
    TimeSeriesPoint,
)

__all__ = [
    "OrderItem",
    "OrderItemOut",
    "SaleOut",
    "SaleStatusUpdateRequest",
    "PurchaseCreateRequest",
    "PurchaseOut",
    "MetricsInterval",
    "MetricsOverview",
    "TimeSeriesPoint",
]
