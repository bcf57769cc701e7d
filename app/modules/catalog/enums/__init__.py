# -*- coding: utf-8 -*-
"""
backend/app/modules/catalog/enums/__init__.py

Enums del catálogo.

Fecha: 2026-09-02
"""

from enum import StrEnum


class TypeName(StrEnum):
    """Únicos tipos de catálogo admitidos."""
    producto = "producto"
    servicio = "servicio"


__all__ = ["TypeName"]
