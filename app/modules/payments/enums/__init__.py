# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/enums/__init__.py

Enums del módulo Payments.

Fecha: 2026-09-02
"""

from .payment_status_enum import PaymentStatus

__all__ = ["PaymentStatus"]
