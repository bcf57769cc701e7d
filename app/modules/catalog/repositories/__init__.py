# -*- coding: utf-8 -*-
"""
backend/app/modules/catalog/repositories/__init__.py
"""

from .type_repository import TypeRepository
from .category_repository import CategoryRepository
from .item_repository import ItemRepository

__all__ = ["TypeRepository", "CategoryRepository", "ItemRepository"]
