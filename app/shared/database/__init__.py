# -*- coding: utf-8 -*-
"""
backend/app/shared/database/__init__.py

Re-exporta utilidades comunes de base de datos.

Fecha: 2026-09-02
"""

from __future__ import annotations

from .base import (
    ActorMixin,
    Base,
    NAMING_CONVENTION,
    TimestampMixin,
    as_str_enum,
    new_uuid,
    utcnow,
)
from .database import (
    SessionLocal,
    build_engine,
    check_database_health,
    engine,
    get_async_session,
    init_models,
    session_scope,
)
from .repository import BaseRepository

__all__ = [
    "engine",
    "SessionLocal",
    "Base",
    "NAMING_CONVENTION",
    "as_str_enum",
    "new_uuid",
    "utcnow",
    "TimestampMixin",
    "ActorMixin",
    "BaseRepository",
    "build_engine",
    "get_async_session",
    "session_scope",
    "init_models",
    "check_database_health",
]

# Fin del archivo backend/app/shared/database/__init__.py
