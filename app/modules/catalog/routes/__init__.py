# -*- coding: utf-8 -*-
"""
backend/app/modules/catalog/routes/__init__.py

Ensambla los routers del catálogo para montarlos bajo /api.
"""

from fastapi import APIRouter

from .category_routes import router as category_router
from .item_routes import router as item_router
from .type_routes import router as type_router


def get_catalog_routers() -> list[APIRouter]:
    return [type_router, category_router, item_router]


__all__ = ["get_catalog_routers"]
