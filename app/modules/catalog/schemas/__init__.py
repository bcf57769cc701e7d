# -*- coding: utf-8 -*-
"""
backend/app/modules/catalog/schemas/__init__.py
"""

from .catalog_schemas import (
    CategoryCreateRequest,
    CategoryOut,
    CategoryRef,
    CategoryUpdateRequest,
    ItemCreateRequest,
    ItemOut,
    ItemUpdateRequest,
    TypeCreateRequest,
    TypeOut,
    TypeRef,
    TypeUpdateRequest,
)

__all__ = [
    "TypeCreateRequest",
    "TypeUpdateRequest",
    "TypeOut",
    "TypeRef",
    "CategoryCreateRequest",
    "CategoryUpdateRequest",
    "CategoryOut",
    "CategoryRef",
    "ItemCreateRequest",
    "ItemUpdateRequest",
    "ItemOut",
]
