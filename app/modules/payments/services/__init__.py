# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/services/__init__.py
"""

from .payment_service import PaymentService

__all__ = ["PaymentService"]
