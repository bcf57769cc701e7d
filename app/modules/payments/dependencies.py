# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/dependencies.py

Dependencias FastAPI del módulo de pagos.

La configuración y el cliente de la pasarela se resuelven por dependencia
para que los tests los sustituyan vía `app.dependency_overrides`.

Fecha: 2026-09-02
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_async_session
from app.modules.payments.config import PaymentsConfig
from app.modules.payments.facades.checkout import PreferenceCreator
from app.modules.payments.facades.webhooks import Reconciler
from app.modules.payments.gateway import GatewayClient, MercadoPagoClient
from app.modules.payments.services import PaymentService


def get_payments_config() -> PaymentsConfig:
    return PaymentsConfig.from_settings()


def get_gateway_client(config: PaymentsConfig = Depends(get_payments_config)) -> GatewayClient:
    return MercadoPagoClient(config)


def get_preference_creator(
    db: AsyncSession = Depends(get_async_session),
    config: PaymentsConfig = Depends(get_payments_config),
    gateway: GatewayClient = Depends(get_gateway_client),
) -> PreferenceCreator:
    return PreferenceCreator(db, config, gateway)


def get_reconciler(
    db: AsyncSession = Depends(get_async_session),
    gateway: GatewayClient = Depends(get_gateway_client),
) -> Reconciler:
    return Reconciler(db, gateway)


def get_payment_service(
    db: AsyncSession = Depends(get_async_session),
    config: PaymentsConfig = Depends(get_payments_config),
) -> PaymentService:
    return PaymentService(db, default_currency=config.default_currency)


__all__ = [
    "get_payments_config",
    "get_gateway_client",
    "get_preference_creator",
    "get_reconciler",
    "get_payment_service",
]
