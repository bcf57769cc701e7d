# -*- coding: utf-8 -*-
"""
backend/app/core/db.py

Fachada para la capa de acceso a datos basada en SQLAlchemy async.
Los módulos de dominio importan sesión y Base desde aquí, sin conocer
`app.shared.database`.

Fecha: 2026-09-02
"""

from app.shared.database.database import (
    engine,
    SessionLocal,
    Base,
    get_async_session,
    session_scope,
    init_models,
    check_database_health,
)

__all__ = [
    "engine",
    "SessionLocal",
    "Base",
    "get_async_session",
    "session_scope",
    "init_models",
    "check_database_health",
]

# Fin del archivo backend/app/core/db.py
