# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/config.py

Configuración explícita del flujo de pagos.

PaymentsConfig se construye una vez (normalmente desde settings) y se
inyecta en el creador de preferencias, el conciliador y el cliente de la
pasarela. Ningún componente de pagos lee variables de entorno por su cuenta.

Fecha: 2026-09-02
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from app.shared.config import BaseAppSettings, get_settings

WEBHOOK_PATH = "/api/payments/webhook"


@dataclass(frozen=True)
class PaymentsConfig:
    access_token: Optional[str]
    front_url: Optional[str]
    backend_url: Optional[str] = None
    api_base_url: str = "https://api.mercadopago.com"
    sandbox: bool = True
    timeout_sec: float = 10.0
    statement_descriptor: str = "PROSAAV"
    default_currency: str = "CLP"

    @classmethod
    def from_settings(cls, settings: Optional[BaseAppSettings] = None) -> "PaymentsConfig":
        s = settings or get_settings()
        token = s.mp_access_token.get_secret_value() if s.mp_access_token else None
        return cls(
            access_token=token or None,
            front_url=s.front_url,
            backend_url=s.base_url,
            api_base_url=s.mp_api_base_url.rstrip("/"),
            sandbox=s.mp_sandbox,
            timeout_sec=s.mp_timeout_sec,
            statement_descriptor=s.mp_statement_descriptor,
            default_currency=s.default_currency,
        )

    def __repr__(self) -> str:
        # El token nunca se imprime en logs
        masked = "***" if self.access_token else None
        return (
            f"PaymentsConfig(access_token={masked!r}, front_url={self.front_url!r}, "
            f"backend_url={self.backend_url!r}, sandbox={self.sandbox})"
        )


__all__ = ["PaymentsConfig", "WEBHOOK_PATH"]
