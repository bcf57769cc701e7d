# -*- coding: utf-8 -*-
"""
backend/app/routes/health_routes.py

Endpoint básico de health check.

Fecha: 2026-09-02
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from app.core.db import check_database_health
from app.core.settings import get_settings
from app.shared.utils.api_response import ok

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    summary="Health check del backend",
    description="Estado básico del backend y conectividad a la base de datos.",
)
async def health_check():
    settings = get_settings()
    db_ok = await check_database_health(timeout_s=2.0)

    return ok(
        {
            "status": "ok" if db_ok else "degraded",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "environment": settings.python_env,
            "database": {"reachable": db_ok},
            "service": {"name": settings.app_name, "version": settings.app_version},
        }
    )

# Fin del archivo backend/app/routes/health_routes.py
