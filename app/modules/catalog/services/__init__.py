# -*- coding: utf-8 -*-
"""
backend/app/modules/catalog/services/__init__.py
"""

from .type_service import TypeService
from .category_service import CategoryService
from .item_service import ItemService

__all__ = ["TypeService", "CategoryService", "ItemService"]
