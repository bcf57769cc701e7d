# -*- coding: utf-8 -*-
"""
backend/app/modules/navbar/base_menu.py

Menú base de la tienda. NavbarService lo filtra por rol/sesión.

Fecha: 2026-09-02
"""

from app.modules.auth.enums import UserRole

from .schemas import NavItem

BASE_MENU: tuple[NavItem, ...] = (
    NavItem(
        menuname="Gestion",
        roles=[UserRole.admin],
        submenu=[
            NavItem(menuname="Usuarios", route="/gestion/usuarios"),
            NavItem(menuname="Items", route="/gestion/items"),
            NavItem(menuname="Ventas", route="/gestion/ventas"),
            NavItem(menuname="Categorías", route="/gestion/categorias"),
            NavItem(menuname="Tipos", route="/gestion/tipos"),
        ],
    ),
    NavItem(
        menuname="Servicios",
        submenu=[
            NavItem(menuname="Construcción", route="/servicio?tipo=servicio&categoria=construccion"),
            NavItem(menuname="Asesoría", route="/servicio?tipo=servicio&categoria=asesoria"),
            NavItem(menuname="Inspección", route="/servicio?tipo=servicio&categoria=inspeccion"),
            NavItem(menuname="Pericia", route="/servicio?tipo=servicio&categoria=pericia"),
        ],
    ),
    NavItem(
        menuname="Sobre Nosotros",
        submenu=[
            NavItem(menuname="Quienes Somos", route="/servicio/quienes-somos"),
            NavItem(menuname="Nuestros Proyectos", route="/servicio/nuestros-proyectos"),
            NavItem(menuname="Misión / Visión", route="/servicio/mision-vision"),
        ],
    ),
    NavItem(menuname="Contacto", route="/contacto"),
    NavItem(menuname="Perfil", route="/perfil", require_auth=True),
    NavItem(menuname="Iniciar Sesión", route="/login", hide_when_authenticated=True),
    NavItem(menuname="Cerrar Sesión", route="/logout", require_auth=True),
    NavItem(menuname="Carrito", route="/cart", display_menu_name=False, require_auth=True),
)

__all__ = ["BASE_MENU"]
