# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/schemas/payment_schemas.py

Esquemas Pydantic del flujo de pagos: creación de preferencia,
lectura/actualización de Payment y acuse de webhook.

Los ítems del carrito se aceptan "sueltos" (cantidad o precio no
numéricos): la normalización de facades/checkout/items.py los corrige
en lugar de rechazarlos.

Fecha: 2026-09-02
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from app.modules.payments.enums import PaymentStatus
from app.shared.utils.base_models import EmailStr, Money, Quantity, ShopModel


class CartItemIn(ShopModel):
    title: Optional[str] = Field(default=None, description="Título visible en la pasarela.")
    quantity: Any = Field(default=None, description="Cantidad; no numérico o < 1 se corrige a 1, las fracciones se conservan.")
    unit_price: Any = Field(default=None, description="Precio unitario; no numérico o < 0 se corrige a 0.")
    currency_id: Optional[str] = Field(default=None, description="Moneda ISO; por defecto CLP.")


class PayerIn(ShopModel):
    email: Optional[EmailStr] = None
    name: Optional[str] = None
    surname: Optional[str] = None


class CreatePreferenceRequest(ShopModel):
    items: list[CartItemIn] = Field(default_factory=list)
    payer: Optional[PayerIn] = None


class PaymentItemOut(ShopModel):
    title: str
    quantity: Quantity
    unit_price: Money
    currency_id: str


class PaymentOut(ShopModel):
    id: str
    preference_id: str
    payment_id: Optional[str] = None
    items: list[PaymentItemOut]
    amount: Money
    currency_id: str
    status: str
    payer_email: Optional[str] = None
    external_reference: Optional[str] = None
    user_id: Optional[str] = None
    created_by: Optional[str] = None
    updated_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class PreferenceOut(ShopModel):
    preference_id: str
    redirect_url: str = Field(description="init_point de la pasarela al que se redirige al pagador.")
    payment: PaymentOut


class PaymentUpdateRequest(ShopModel):
    """Actualización administrativa: nunca toca preference_id ni created_by."""
    status: Optional[PaymentStatus] = None
    items: Optional[list[CartItemIn]] = Field(default=None, min_length=1)
    payer_email: Optional[EmailStr] = Field(default=None, alias="payerEmail")


__all__ = [
    "CartItemIn",
    "PayerIn",
    "CreatePreferenceRequest",
    "PaymentItemOut",
    "PaymentOut",
    "PreferenceOut",
    "PaymentUpdateRequest",
]
