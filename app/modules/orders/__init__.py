# -*- coding: utf-8 -*-
"""
backend/app/modules/orders/__init__.py

Módulo Orders: ventas y compras (snapshots de pagos aprobados y compras
manuales del comprador), vistas de comprador/admin y métricas.

Los routers se exponen vía app.modules.orders.routes.get_orders_routers().
"""

from .enums import OrderPaymentStatus, PaymentProvider, SaleStatus

__all__ = ["SaleStatus", "OrderPaymentStatus", "PaymentProvider"]
