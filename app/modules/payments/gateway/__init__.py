# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/gateway/__init__.py

Integración con la pasarela de pago: cliente HTTP y parsers de respuesta.
"""

from .client import GatewayClient, MercadoPagoClient
from .parsers import (
    parse_charge_id,
    parse_payer_email,
    parse_payment_preference_id,
    parse_preference_id,
    parse_redirect_url,
    parse_topic,
)

__all__ = [
    "GatewayClient",
    "MercadoPagoClient",
    "parse_charge_id",
    "parse_payer_email",
    "parse_payment_preference_id",
    "parse_preference_id",
    "parse_redirect_url",
    "parse_topic",
]
