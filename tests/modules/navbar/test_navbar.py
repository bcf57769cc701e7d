# -*- coding: utf-8 -*-
"""
backend/tests/modules/navbar/test_navbar.py

Tests del menú de navegación filtrado por rol y sesión.

Fecha: 2026-09-02
"""

import pytest

from app.modules.auth.enums import UserRole
from app.modules.navbar.navbar_service import NavbarService, filter_menu
from app.modules.navbar.schemas import NavItem

from tests.helpers import bearer


def _names(items) -> list[str]:
    return [it.menuname for it in items]


class TestNavbarService:
    """Tests para NavbarService.get_menu"""

    def test_guest_menu(self):
        """Test: invitado ve Iniciar Sesión y no ve Gestion/Perfil/Carrito"""
        menu = NavbarService().get_menu(UserRole.guest, is_authenticated=False)
        names = _names(menu.items)

        assert "Iniciar Sesión" in names
        assert "Gestion" not in names
        assert "Perfil" not in names
        assert "Carrito" not in names
        assert menu.is_authenticated is False

    def test_buyer_menu(self):
        """Test: comprador autenticado ve Perfil/Carrito y no Iniciar Sesión"""
        names = _names(NavbarService().get_menu(UserRole.buyer, is_authenticated=True).items)

        assert {"Perfil", "Cerrar Sesión", "Carrito"} <= set(names)
        assert "Iniciar Sesión" not in names
        assert "Gestion" not in names

    def test_admin_menu_has_management(self):
        """Test: admin ve Gestion con sus submenús"""
        items = NavbarService().get_menu(UserRole.admin, is_authenticated=True).items
        gestion = next(it for it in items if it.menuname == "Gestion")
        assert "Ventas" in _names(gestion.submenu)

    def test_base_menu_is_not_mutated(self):
        """Test: el filtrado no altera el menú base"""
        service = NavbarService()
        service.get_menu(UserRole.guest, is_authenticated=False)
        admin_items = service.get_menu(UserRole.admin, is_authenticated=True).items
        assert "Gestion" in _names(admin_items)


class TestFilterMenu:
    """Tests para las reglas de filter_menu"""

    def test_disabled_and_empty_parents_are_dropped(self):
        """Test: entradas deshabilitadas y padres sin hijos visibles se descartan"""
        menu = [
            NavItem(menuname="Oculto", route="/x", enabled=False),
            NavItem(menuname="Padre", submenu=[NavItem(menuname="Hijo", route="/h", roles=[UserRole.admin])]),
            NavItem(menuname="Visible", route="/v"),
        ]
        assert _names(filter_menu(menu, UserRole.buyer, True)) == ["Visible"]

    def test_sorted_by_order(self):
        """Test: orden estable por `order`"""
        menu = [
            NavItem(menuname="B", route="/b", order=2),
            NavItem(menuname="A", route="/a", order=1),
            NavItem(menuname="C", route="/c", order=2),
        ]
        assert _names(filter_menu(menu, UserRole.guest, False)) == ["A", "B", "C"]


class TestNavbarRoute:
    """Tests para GET /api/navbar/menu"""

    @pytest.mark.asyncio
    async def test_anonymous(self, async_client):
        """Test: sin token devuelve el menú de invitado"""
        response = await async_client.get("/api/navbar/menu")

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Menú cargado correctamente"
        assert body["data"]["role"] == "guest"
        assert body["data"]["is_authenticated"] is False

    @pytest.mark.asyncio
    async def test_invalid_token_falls_back_to_guest(self, async_client):
        """Test: token inválido no falla, se trata como invitado"""
        response = await async_client.get("/api/navbar/menu", headers=bearer("basura"))
        assert response.status_code == 200
        assert response.json()["data"]["role"] == "guest"

    @pytest.mark.asyncio
    async def test_admin(self, async_client, admin_headers):
        """Test: admin autenticado"""
        response = await async_client.get("/api/navbar/menu", headers=admin_headers)
        data = response.json()["data"]
        assert data["role"] == "admin"
        assert "Gestion" in [it["menuname"] for it in data["items"]]
