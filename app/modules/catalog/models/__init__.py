# -*- coding: utf-8 -*-
"""
backend/app/modules/catalog/models/__init__.py
"""

from .type_models import CatalogType
from .category_models import Category
from .item_models import Item

__all__ = ["CatalogType", "Category", "Item"]
