# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/routes/__init__.py

Ensambla los routers del módulo de pagos para montarlos bajo /api.
"""

from fastapi import APIRouter

from .payments import router as payments_router


def get_payments_routers() -> list[APIRouter]:
    return [payments_router]


__all__ = ["get_payments_routers"]
