# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/repositories/__init__.py
"""

from .payment_repository import PaymentRepository

__all__ = ["PaymentRepository"]
