# -*- coding: utf-8 -*-
"""
backend/app/models.py

Registro de modelos ORM.

Importar este módulo registra todas las tablas en Base.metadata; lo usan
init_models() y los fixtures de tests antes de create_all.

Fecha: 2026-09-02
"""

from app.modules.auth.models import User
from app.modules.catalog.models import CatalogType, Category, Item
from app.modules.orders.models import Purchase, Sale
from app.modules.payments.models import Payment

__all__ = ["User", "CatalogType", "Category", "Item", "Sale", "Purchase", "Payment"]

# Fin del archivo backend/app/models.py
