# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/enums/role_enum.py

Enum de roles de usuario.

Roles disponibles: buyer, admin, guest

Fecha: 2026-09-02
"""
from enum import StrEnum


class UserRole(StrEnum):
    buyer = "buyer"
    admin = "admin"
    guest = "guest"


__all__ = ["UserRole"]

# Fin del archivo backend/app/modules/auth/enums/role_enum.py
