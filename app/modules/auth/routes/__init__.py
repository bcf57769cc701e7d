# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/routes/__init__.py

Ensambla los routers del módulo Auth.
Se importa desde master_routes.py para montar sobre /api.
"""

from fastapi import APIRouter

from .user_routes import router as user_router


def get_auth_routers() -> list[APIRouter]:
    """Devuelve todos los routers listos para montar."""
    return [user_router]

# Fin del archivo backend/app/modules/auth/routes/__init__.py
