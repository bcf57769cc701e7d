# -*- coding: utf-8 -*-
"""
backend/app/modules/navbar/navbar_service.py

Filtrado del menú por rol y autenticación.

Reglas (en orden):
1. Se descartan entradas deshabilitadas.
2. Se descartan entradas con roles que no incluyen el rol actual.
3. require_auth oculta para anónimos; hide_when_authenticated oculta
   para usuarios con sesión.
4. Los submenús se filtran recursivamente.
5. Se descartan entradas sin ruta y sin hijos visibles.
6. Orden estable por `order`.

Fecha: 2026-09-02
"""

from __future__ import annotations

from typing import Iterable, Sequence

from app.modules.auth.enums import UserRole

from .base_menu import BASE_MENU
from .schemas import NavItem, NavResponse


class NavbarService:
    def __init__(self, menu: Sequence[NavItem] = BASE_MENU) -> None:
        self.menu = menu

    def get_menu(self, role: UserRole, is_authenticated: bool) -> NavResponse:
        items = filter_menu(self.menu, role, is_authenticated)
        return NavResponse(role=role, is_authenticated=is_authenticated, items=items)


def _visible(item: NavItem, role: UserRole, is_auth: bool) -> bool:
    if not item.enabled:
        return False
    if item.roles and role not in item.roles:
        return False
    if item.require_auth and not is_auth:
        return False
    if item.hide_when_authenticated and is_auth:
        return False
    return True


def filter_menu(items: Iterable[NavItem], role: UserRole, is_auth: bool) -> list[NavItem]:
    result: list[NavItem] = []
    for item in items:
        if not _visible(item, role, is_auth):
            continue
        children = filter_menu(item.submenu, role, is_auth) if item.submenu else []
        if not item.route and not children:
            continue
        result.append(item.model_copy(update={"submenu": children}))
    return sorted(result, key=lambda it: it.order)


__all__ = ["NavbarService", "filter_menu"]
