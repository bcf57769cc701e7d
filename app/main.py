# -*- coding: utf-8 -*-
"""
backend/app/main.py

Punto de entrada principal del backend de la tienda.

Ajustes clave:
- Uso de app.core.settings como fachada de configuración.
- Logging vía dictConfig (plain/json) configurado antes de montar rutas.
- create_all opcional en startup (DB_CREATE_ALL).
- Middlewares: request logging, JSON de excepciones no controladas y CORS.
- Errores de dominio traducidos al sobre {code, message, data}.
- Health principal /health delegado al paquete app.routes (health_routes.py).

Fecha: 2026-09-02
"""

import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path

# ---------------------------------------------------------------------------
# Cargar .env ANTES de resolver settings (no pisa variables ya definidas)
# ---------------------------------------------------------------------------
from dotenv import load_dotenv

_ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
load_dotenv(dotenv_path=_ENV_PATH, override=False)

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.db import init_models
from app.core.logging import setup_logging
from app.core.settings import get_settings
from app.shared.middleware import (
    JSONExceptionMiddleware,
    RequestLoggingMiddleware,
    register_error_handlers,
)
from app.shared.utils.json_response import UTF8JSONResponse

setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # ────────── STARTUP ──────────
    settings = get_settings()
    if settings.db_create_all:
        await init_models()
    logger.info("Backend iniciado env=%s version=%s", settings.python_env, settings.app_version)
    try:
        yield
    finally:
        # ────────── SHUTDOWN ──────────
        logger.info("Backend apagado.")


openapi_tags = [
    {"name": "users", "description": "Registro, login, tokens y administración de usuarios"},
    {"name": "types", "description": "Tipos de catálogo (producto/servicio)"},
    {"name": "categories", "description": "Categorías por tipo"},
    {"name": "items", "description": "Ítems del catálogo"},
    {"name": "navbar", "description": "Menú de navegación por rol"},
    {"name": "sales", "description": "Ventas y métricas"},
    {"name": "purchases", "description": "Compras del comprador"},
    {"name": "payments", "description": "Preferencias, webhooks y conciliación de pagos"},
]


def _configure_cors(app_instance: FastAPI) -> dict:
    """
    Configura CORS a partir de CORS_ORIGINS (+ FRONT_URL).

    "*" con allow_credentials=True es inválido en navegadores: en modo
    wildcard se desactivan las credenciales.
    """
    origins_list = get_settings().get_cors_origins()
    is_wildcard_only = origins_list == ["*"]

    cors_config = {
        "allow_origins": origins_list,
        "allow_credentials": not is_wildcard_only,
        "allow_methods": ["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"] if not is_wildcard_only else ["*"],
        "allow_headers": ["*"],
        "expose_headers": ["X-Request-ID"],
        "max_age": 600,
    }
    app_instance.add_middleware(CORSMiddleware, **cors_config)
    logger.info("CORS origins=%s wildcard=%s", origins_list, is_wildcard_only)
    return cors_config


def create_app() -> FastAPI:
    settings = get_settings()
    app_instance = FastAPI(
        title=settings.app_name,
        description="API de la tienda: catálogo, usuarios, ventas y pagos",
        version=settings.app_version,
        lifespan=lifespan,
        openapi_tags=openapi_tags,
        default_response_class=UTF8JSONResponse,
    )

    # El orden real de ejecución de middlewares es inverso al registro:
    # CORS se registra al final para ejecutarse primero (outermost).
    app_instance.add_middleware(RequestLoggingMiddleware)
    app_instance.add_middleware(JSONExceptionMiddleware)
    _configure_cors(app_instance)

    register_error_handlers(app_instance)

    from app.routes import router as main_router

    app_instance.include_router(main_router)
    return app_instance


app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    enable_reload = settings.is_dev and os.getenv("DISABLE_RELOAD", "").lower() not in ("true", "1", "yes")

    logger.info("Starting server with reload=%s (env=%s)", enable_reload, settings.python_env)

    uvicorn.run(
        "app.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=enable_reload,
    )

# Fin del archivo backend/app/main.py
