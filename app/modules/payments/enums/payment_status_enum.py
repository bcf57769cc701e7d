# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/enums/payment_status_enum.py

Estados de un Payment, tal como los reporta la pasarela (MercadoPago).

La columna Payment.status es VARCHAR libre: la conciliación guarda el
estado de la pasarela tal cual, aunque no figure en este enum.

Fecha: 2026-09-02
"""

from enum import StrEnum


class PaymentStatus(StrEnum):
    pending = "pending"
    approved = "approved"
    authorized = "authorized"
    in_process = "in_process"
    in_mediation = "in_mediation"
    rejected = "rejected"
    cancelled = "cancelled"
    refunded = "refunded"
    charged_back = "charged_back"

    @classmethod
    def is_known(cls, value: object) -> bool:
        return value in cls._value2member_map_


__all__ = ["PaymentStatus"]

# Fin del archivo backend/app/modules/payments/enums/payment_status_enum.py
