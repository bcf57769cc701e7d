# -*- coding: utf-8 -*-
"""
backend/app/modules/navbar/schemas.py

Esquemas del menú de navegación.

Fecha: 2026-09-02
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from app.modules.auth.enums import UserRole


class NavItem(BaseModel):
    menuname: str
    route: Optional[str] = None
    submenu: list["NavItem"] = Field(default_factory=list)
    roles: list[UserRole] = Field(default_factory=list)
    require_auth: bool = False
    hide_when_authenticated: bool = False
    order: int = 0
    enabled: bool = True
    display_menu_name: bool = True


class NavResponse(BaseModel):
    role: UserRole
    is_authenticated: bool
    items: list[NavItem]


NavItem.model_rebuild()

__all__ = ["NavItem", "NavResponse"]
