# -*- coding: utf-8 -*-
"""
backend/app/modules/orders/enums/__init__.py

Enums de ventas y compras.

Fecha: 2026-09-02
"""

from enum import StrEnum


class SaleStatus(StrEnum):
    """Estado operativo de una venta (gestión interna del admin)."""
    nuevo = "nuevo"
    en_proceso = "en_proceso"
    completado = "completado"
    cancelado = "cancelado"


class OrderPaymentStatus(StrEnum):
    """Estado de cobro de una venta/compra."""
    pending = "pending"
    paid = "paid"
    failed = "failed"
    refunded = "refunded"


class PaymentProvider(StrEnum):
    mercadopago = "mercadopago"
    webpay = "webpay"
    transfer = "transfer"
    manual = "manual"


__all__ = ["SaleStatus", "OrderPaymentStatus", "PaymentProvider"]
