# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/models/__init__.py
"""

from .payment_models import DEFAULT_CURRENCY, Payment, compute_amount

__all__ = ["Payment", "compute_amount", "DEFAULT_CURRENCY"]
