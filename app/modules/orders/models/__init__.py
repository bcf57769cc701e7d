# -*- coding: utf-8 -*-
"""
backend/app/modules/orders/models/__init__.py
"""

from .order_models import Purchase, Sale

__all__ = ["Sale", "Purchase"]
