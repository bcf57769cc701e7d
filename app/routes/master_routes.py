# -*- coding: utf-8 -*-
"""
backend/app/routes/master_routes.py

Router maestro: monta los routers de cada módulo bajo /api.

Orden de montaje: auth, catalog, navbar, orders, payments.

Fecha: 2026-09-02
"""

from __future__ import annotations

import logging

from fastapi import APIRouter

from app.modules.auth.routes import get_auth_routers
from app.modules.catalog.routes import get_catalog_routers
from app.modules.navbar.routes import router as navbar_router
from app.modules.orders.routes import get_orders_routers
from app.modules.payments.routes import get_payments_routers

logger = logging.getLogger(__name__)

api = APIRouter(prefix="/api")

_loaded: list[str] = []  # trazabilidad/debug


def _include(target: APIRouter, router: APIRouter, name: str) -> None:
    """Incluye un router en la capa dada y registra trazabilidad en logs."""
    target.include_router(router)
    _loaded.append(f"{target.prefix or '/'}:{name}")
    logger.debug(
        "Router '%s' montado en prefix '%s' (router.prefix='%s')",
        name,
        target.prefix or "/",
        getattr(router, "prefix", ""),
    )


def _tag(router: APIRouter) -> str:
    return str(router.tags[0]) if router.tags else "unknown"


for r in get_auth_routers():
    _include(api, r, f"auth.{_tag(r)}")

for r in get_catalog_routers():
    _include(api, r, f"catalog.{_tag(r)}")

_include(api, navbar_router, "navbar")

for r in get_orders_routers():
    _include(api, r, f"orders.{_tag(r)}")

for r in get_payments_routers():
    _include(api, r, f"payments.{_tag(r)}")


def loaded_routers() -> list[str]:
    return list(_loaded)


__all__ = ["api", "loaded_routers"]

# Fin del archivo backend/app/routes/master_routes.py
