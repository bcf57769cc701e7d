# -*- coding: utf-8 -*-
"""
backend/app/modules/catalog/__init__.py

Módulo Catalog: tipos (producto/servicio), categorías e ítems.

Los routers se exponen vía app.modules.catalog.routes.get_catalog_routers().
"""

from .enums import TypeName

__all__ = ["TypeName"]
