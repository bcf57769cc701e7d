# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/facades/webhooks/__init__.py

Conciliación de webhooks y retornos de la pasarela.
"""

from .reconciler import ReconcileOutcome, ReconcileResult, Reconciler, SYSTEM_ACTOR, webhook_ack

__all__ = ["Reconciler", "ReconcileResult", "ReconcileOutcome", "SYSTEM_ACTOR", "webhook_ack"]
