# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/facades/__init__.py

Fachadas de alto nivel del módulo de pagos:
- checkout: creación de preferencias
- webhooks: conciliación de notificaciones y retornos
"""

from .checkout import PreferenceCreator, PreferenceResult
from .webhooks import ReconcileOutcome, ReconcileResult, Reconciler

__all__ = ["PreferenceCreator", "PreferenceResult", "Reconciler", "ReconcileResult", "ReconcileOutcome"]
