# -*- coding: utf-8 -*-
"""
backend/app/modules/orders/repositories/__init__.py
"""

from .order_repository import PurchaseRepository, SaleRepository, insert_if_absent

__all__ = ["SaleRepository", "PurchaseRepository", "insert_if_absent"]
