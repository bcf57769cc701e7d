# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/enums/__init__.py

Export central de enums de autenticación.

Fecha: 2026-09-02
"""

from .role_enum import UserRole

__all__ = ["UserRole"]
