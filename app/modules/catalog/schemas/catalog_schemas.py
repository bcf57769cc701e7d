# -*- coding: utf-8 -*-
"""
backend/app/modules/catalog/schemas/catalog_schemas.py

Esquemas Pydantic de tipos, categorías e ítems.

Fecha: 2026-09-02
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field, field_validator

from app.modules.catalog.enums import TypeName
from app.shared.utils.base_models import Money, ShopModel


def _lower(v: Optional[str]) -> Optional[str]:
    return v.strip().lower() if isinstance(v, str) else v


# ========== TIPOS ==========

class TypeCreateRequest(ShopModel):
    name: TypeName

    @field_validator("name", mode="before")
    @classmethod
    def normalize_name(cls, v):
        return _lower(v)


class TypeUpdateRequest(ShopModel):
    name: Optional[TypeName] = None

    @field_validator("name", mode="before")
    @classmethod
    def normalize_name(cls, v):
        return _lower(v)


class TypeOut(ShopModel):
    id: str
    name: TypeName
    slug: str
    created_by: Optional[str] = None
    updated_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class TypeRef(ShopModel):
    id: str
    name: TypeName
    slug: str


# ========== CATEGORÍAS ==========

class CategoryCreateRequest(ShopModel):
    name: str = Field(..., min_length=1, max_length=120)
    type_id: str = Field(..., alias="typeId")

    @field_validator("name", mode="before")
    @classmethod
    def normalize_name(cls, v):
        return _lower(v)


class CategoryUpdateRequest(ShopModel):
    name: Optional[str] = Field(None, min_length=1, max_length=120)
    type_id: Optional[str] = Field(None, alias="typeId")

    @field_validator("name", mode="before")
    @classmethod
    def normalize_name(cls, v):
        return _lower(v)


class CategoryOut(ShopModel):
    id: str
    name: str
    slug: str
    type_id: str
    type: Optional[TypeRef] = None
    created_by: Optional[str] = None
    updated_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CategoryRef(ShopModel):
    id: str
    name: str
    slug: str


# ========== ÍTEMS ==========

class ItemCreateRequest(ShopModel):
    name: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    price: Decimal = Field(..., ge=0)
    type_id: str = Field(..., alias="typeId")
    category_id: str = Field(..., alias="categoryId")
    stock: Optional[int] = Field(None, ge=0)


class ItemUpdateRequest(ShopModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, min_length=1)
    price: Optional[Decimal] = Field(None, ge=0)
    type_id: Optional[str] = Field(None, alias="typeId")
    category_id: Optional[str] = Field(None, alias="categoryId")
    stock: Optional[int] = Field(None, ge=0)


class ItemOut(ShopModel):
    id: str
    name: str
    description: str
    price: Money
    stock: Optional[int] = None
    type_id: str
    category_id: str
    type: Optional[TypeRef] = None
    category: Optional[CategoryRef] = None
    created_by: Optional[str] = None
    updated_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


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
