# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/facades/checkout/preference_creator.py

Fachada de alto nivel para crear una preferencia de pago.

Orquesta:
- Validación de carrito y actor (ValidationError)
- Validación de configuración: FRONT_URL absoluta y MP_ACCESS_TOKEN (ConfigurationError)
- Normalización de ítems y cálculo del monto
- Llamada a la pasarela (UpstreamError si no devuelve id o URL de redirección)
- Alta de exactamente un Payment `pending`

No hay reintentos: ante un fallo de la pasarela el cliente repite la operación completa.

Fecha: 2026-09-02
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional
from uuid import uuid4

from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.payments.config import WEBHOOK_PATH, PaymentsConfig
from app.modules.payments.enums import PaymentStatus
from app.modules.payments.gateway import GatewayClient, parse_preference_id, parse_redirect_url
from app.modules.payments.models import Payment
from app.modules.payments.repositories import PaymentRepository
from app.shared.errors import ConfigurationError, UpstreamError, ValidationError
from app.shared.utils.validators import ensure_url, is_uuid

from .items import normalize_items

logger = logging.getLogger(__name__)


@dataclass
class PreferenceResult:
    preference_id: str
    redirect_url: str
    payment: Payment


def build_back_urls(front_url: str) -> dict[str, str]:
    return {
        "success": f"{front_url}/checkout/success",
        "failure": f"{front_url}/checkout/failure",
        "pending": f"{front_url}/checkout/pending",
    }


def build_notification_url(backend_url: Optional[str]) -> Optional[str]:
    base = ensure_url(backend_url)
    return f"{base}{WEBHOOK_PATH}" if base else None


class PreferenceCreator:
    def __init__(self, db: AsyncSession, config: PaymentsConfig, gateway: GatewayClient) -> None:
        self.db = db
        self.config = config
        self.gateway = gateway
        self.repo = PaymentRepository(db)

    def _front_url(self) -> str:
        front = ensure_url(self.config.front_url)
        if not front:
            logger.error("[MP] FRONT_URL inválida o no definida")
            raise ConfigurationError(
                "Config inválida: FRONT_URL no definida o inválida (debe incluir http/https)"
            )
        if not self.config.access_token:
            logger.error("[MP] MP_ACCESS_TOKEN no definido")
            raise ConfigurationError("Config inválida: MP_ACCESS_TOKEN no definido")
        return front

    def build_request_body(
        self,
        items: list[dict[str, Any]],
        *,
        front_url: str,
        external_reference: str,
        created_by: str,
        payer: Optional[Mapping[str, Any]] = None,
    ) -> dict[str, Any]:
        body: dict[str, Any] = {
            # La pasarela exige un id por línea; no se persiste
            "items": [{"id": str(uuid4()), **it} for it in items],
            "back_urls": build_back_urls(front_url),
            "auto_return": "approved",
            "binary_mode": False,
            "statement_descriptor": self.config.statement_descriptor,
            "external_reference": external_reference,
            "metadata": {"created_by": created_by},
        }
        if payer:
            body["payer"] = dict(payer)
        notification_url = build_notification_url(self.config.backend_url)
        if notification_url:
            body["notification_url"] = notification_url
        return body

    async def create_preference(
        self,
        items: Iterable[Any],
        *,
        created_by: Optional[str],
        payer: Optional[Mapping[str, Any]] = None,
    ) -> PreferenceResult:
        raw_items = list(items or [])
        if not raw_items:
            raise ValidationError("items obligatorio")
        if not is_uuid(created_by):
            raise ValidationError("Usuario no autenticado")
        front_url = self._front_url()

        normalized = normalize_items(raw_items, self.config.default_currency)
        external_reference = str(uuid4())
        payer_data = {k: v for k, v in (payer or {}).items() if v}
        body = self.build_request_body(
            normalized,
            front_url=front_url,
            external_reference=external_reference,
            created_by=created_by,
            payer=payer_data,
        )

        logger.info(
            "[MP] create_preference back_urls=%s notification_url=%s items=%d",
            body["back_urls"], body.get("notification_url"), len(normalized),
        )
        response = await self.gateway.create_preference(body)

        preference_id = parse_preference_id(response)
        redirect_url = parse_redirect_url(response, sandbox=self.config.sandbox)
        if not preference_id or not redirect_url:
            logger.error("[MP] La pasarela no retornó id o init_point: keys=%s", sorted(response or {}))
            raise UpstreamError("No se pudo crear la preferencia")

        payment = Payment(
            preference_id=preference_id,
            status=PaymentStatus.pending.value,
            external_reference=external_reference,
            user_id=created_by,
            created_by=created_by,
            updated_by=created_by,
        )
        payment.set_items(normalized)
        payment.set_payer_email(payer_data.get("email"))

        await self.repo.add(payment)
        await self.db.commit()
        await self.db.refresh(payment)

        logger.info(
            "[MP] preference_created preference_id=%s payment=%s amount=%s currency=%s",
            preference_id, payment.id, payment.amount, payment.currency_id,
        )
        return PreferenceResult(preference_id=preference_id, redirect_url=redirect_url, payment=payment)


__all__ = ["PreferenceCreator", "PreferenceResult", "build_back_urls", "build_notification_url"]
