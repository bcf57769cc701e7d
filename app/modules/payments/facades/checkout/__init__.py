# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/facades/checkout/__init__.py

Fachada de checkout: normalización de carrito y creación de preferencias.
"""

from .items import normalize_item, normalize_items
from .preference_creator import PreferenceCreator, PreferenceResult

__all__ = ["normalize_item", "normalize_items", "PreferenceCreator", "PreferenceResult"]
