# -*- coding: utf-8 -*-
"""
backend/app/modules/orders/routes/__init__.py

Ensambla los routers de ventas y compras para montarlos bajo /api.
"""

from fastapi import APIRouter

from .purchase_routes import router as purchase_router
from .sale_routes import router as sale_router


def get_orders_routers() -> list[APIRouter]:
    return [sale_router, purchase_router]


__all__ = ["get_orders_routers"]
