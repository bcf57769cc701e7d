# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/schemas/__init__.py
"""

from .payment_schemas import (
    CartItemIn,
    CreatePreferenceRequest,
    PayerIn,
    PaymentItemOut,
    PaymentOut,
    PaymentUpdateRequest,
    PreferenceOut,
)

__all__ = [
    "CartItemIn",
    "PayerIn",
    "CreatePreferenceRequest",
    "PaymentItemOut",
    "PaymentOut",
    "PreferenceOut",
    "PaymentUpdateRequest",
]
