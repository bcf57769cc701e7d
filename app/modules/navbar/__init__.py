# -*- coding: utf-8 -*-
"""
backend/app/modules/navbar/__init__.py

Módulo Navbar: menú de navegación filtrado por rol y estado de sesión.
"""

from .navbar_service import NavbarService

__all__ = ["NavbarService"]
