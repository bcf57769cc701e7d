# -*- coding: utf-8 -*-
"""
backend/app/modules/orders/services/__init__.py
"""

from .sale_service import SaleService
from .purchase_service import PurchaseService

__all__ = ["SaleService", "PurchaseService"]
