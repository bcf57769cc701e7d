# -*- coding: utf-8 -*-
"""
backend/app/core/__init__.py

Fachada unificada para componentes centrales del backend de la tienda:
- Configuración (settings)
- Logging
- Motor de base de datos y sesiones

Envuelve la implementación en `app.shared.*` para que los módulos
dependan de un punto de entrada estable.

Fecha: 2026-09-02
"""

from .settings import get_settings
from .logging import setup_logging
from .db import (
    engine,
    SessionLocal,
    Base,
    get_async_session,
    session_scope,
    init_models,
    check_database_health,
)

__all__ = [
    "get_settings",
    "setup_logging",
    "engine",
    "SessionLocal",
    "Base",
    "get_async_session",
    "session_scope",
    "init_models",
    "check_database_health",
]

# Fin del archivo backend/app/core/__init__.py
