# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/__init__.py

Módulo de pagos de la tienda.

Este módulo gestiona:
- Registro de pagos (Payment) ligado a una preferencia de la pasarela
- Creación de preferencias (facades.checkout)
- Conciliación de webhooks y retornos (facades.webhooks)
- Consulta y actualización administrativa (services)

Estructura:
- enums: PaymentStatus
- models: Payment
- gateway: cliente httpx y parsers de respuestas de la pasarela
- facades: operaciones de alto nivel (API pública)
- routes: /payments/*
"""

from .config import PaymentsConfig
from .enums import PaymentStatus

__all__ = ["PaymentsConfig", "PaymentStatus"]
