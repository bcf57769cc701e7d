# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/__init__.py

Exportación de utilidades comunes.

Fecha: 2026-09-02
"""

from .api_response import created, envelope, fail, ok
from .base_models import EmailStr, Field, Money, Quantity, ShopModel
from .json_response import UTF8JSONResponse
from .pagination import PageParams, page_result
from .slug_utils import slugify
from .validators import ensure_url, is_uuid

__all__ = [
    "created",
    "envelope",
    "fail",
    "ok",
    "EmailStr",
    "Field",
    "Money",
    "Quantity",
    "ShopModel",
    "UTF8JSONResponse",
    "PageParams",
    "page_result",
    "slugify",
    "ensure_url",
    "is_uuid",
]
