# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/__init__.py

Módulo Auth: usuarios, roles, login/JWT y dependencias de autorización.

Los routers se exponen vía app.modules.auth.routes.get_auth_routers().
"""

from .enums import UserRole

__all__ = ["UserRole"]
