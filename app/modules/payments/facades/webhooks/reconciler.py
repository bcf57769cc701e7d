# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/facades/webhooks/reconciler.py

Conciliación de pagos contra la pasarela.

Dos entradas convergen en un núcleo idempotente:

- process_webhook(body, query): notificación asíncrona. Extrae el id de
  cobro, consulta el pago canónico y concilia. NUNCA lanza: cualquier
  error se registra y se devuelve un acuse neutro, porque la pasarela
  reintenta ante respuestas no-2xx.
- confirm_from_return(query): retorno del pagador (back_url). Exige el
  query param `payment_id` antes de llamar a la pasarela; los errores
  se propagan a HTTP.

Núcleo persist_from_gateway_payment(gateway_payment):
1) preference id del pago de la pasarela (preference_id -> order.id -> metadata.preference_id)
2) Payment local por preference_id; si no existe no se crea nada
3) payment_id, status (tal cual lo reporta la pasarela), payer_email, updated_by="system"
4) si el nuevo status es `approved`: alta atómica de una Sale y una Purchase
   con ON CONFLICT (preference_id) DO NOTHING

Fecha: 2026-09-02
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from enum import StrEnum
from typing import Any, Mapping, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.orders.enums import OrderPaymentStatus, PaymentProvider, SaleStatus
from app.modules.orders.models import Purchase, Sale
from app.modules.orders.repositories import insert_if_absent
from app.modules.payments.enums import PaymentStatus
from app.modules.payments.gateway import (
    GatewayClient,
    parse_charge_id,
    parse_payer_email,
    parse_payment_preference_id,
    parse_topic,
)
from app.modules.payments.gateway.parsers import first_text
from app.modules.payments.models import Payment
from app.modules.payments.repositories import PaymentRepository
from app.shared.errors import ValidationError

logger = logging.getLogger(__name__)

SYSTEM_ACTOR = "system"


class ReconcileOutcome(StrEnum):
    updated = "updated"
    no_charge_id = "no_charge_id"
    no_preference_id = "no_preference_id"
    payment_not_found = "payment_not_found"
    error = "error"


WEBHOOK_MESSAGES = {
    ReconcileOutcome.updated: "OK",
    ReconcileOutcome.no_charge_id: "Sin paymentId",
    ReconcileOutcome.no_preference_id: "Sin preference_id",
    ReconcileOutcome.payment_not_found: "Payment no encontrado",
    ReconcileOutcome.error: "Error procesando webhook",
}


@dataclass
class ReconcileResult:
    outcome: ReconcileOutcome
    payment: Optional[Payment] = None
    status: Optional[str] = None
    sale_created: bool = False
    purchase_created: bool = False
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def message(self) -> str:
        return WEBHOOK_MESSAGES[self.outcome]


class Reconciler:
    def __init__(self, db: AsyncSession, gateway: GatewayClient) -> None:
        self.db = db
        self.gateway = gateway
        self.repo = PaymentRepository(db)

    # ------------------------------------------------------------------
    # Núcleo
    # ------------------------------------------------------------------
    async def persist_from_gateway_payment(self, gateway_payment: Mapping[str, Any]) -> ReconcileResult:
        preference_id = parse_payment_preference_id(gateway_payment)
        if not preference_id:
            logger.info("[MP] reconcile sin preference_id charge=%s", first_text(gateway_payment, (("id",),)))
            return ReconcileResult(outcome=ReconcileOutcome.no_preference_id)

        payment = await self.repo.get_by_preference_id(preference_id)
        if payment is None:
            logger.warning("[MP] Payment no encontrado para preference_id=%s", preference_id)
            return ReconcileResult(outcome=ReconcileOutcome.payment_not_found)

        try:
            self._apply_gateway_state(payment, gateway_payment)
            sale_created = purchase_created = False
            if payment.status == PaymentStatus.approved.value:
                sale_created, purchase_created = await self._materialize_orders(payment)
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        await self.db.refresh(payment)
        logger.info(
            "[MP] reconciled preference_id=%s payment_id=%s status=%s sale_created=%s purchase_created=%s",
            preference_id, payment.payment_id, payment.status, sale_created, purchase_created,
        )
        return ReconcileResult(
            outcome=ReconcileOutcome.updated,
            payment=payment,
            status=payment.status,
            sale_created=sale_created,
            purchase_created=purchase_created,
        )

    def _apply_gateway_state(self, payment: Payment, gateway_payment: Mapping[str, Any]) -> None:
        charge_id = first_text(gateway_payment, (("id",),))
        if charge_id:
            payment.payment_id = charge_id

        status = first_text(gateway_payment, (("status",),))
        if status:
            if not PaymentStatus.is_known(status):
                logger.warning(
                    "[MP] status desconocido preference_id=%s status=%s (se guarda tal cual)",
                    payment.preference_id, status,
                )
            payment.status = status
        else:
            logger.warning("[MP] pago sin status preference_id=%s", payment.preference_id)

        email = parse_payer_email(gateway_payment)
        if email:
            payment.set_payer_email(email)
        payment.updated_by = SYSTEM_ACTOR

    async def _materialize_orders(self, payment: Payment) -> tuple[bool, bool]:
        await self.db.flush()
        snapshot = {
            "preference_id": payment.preference_id,
            "user_id": payment.user_id,
            "items": [dict(it) for it in payment.items],
            "subtotal": Decimal(payment.amount),
            "total": Decimal(payment.amount),
            "currency_id": payment.currency_id,
            "payer_email": payment.payer_email,
            "payment_status": OrderPaymentStatus.paid,
            "payment_provider": PaymentProvider.mercadopago,
            "created_by": SYSTEM_ACTOR,
            "updated_by": SYSTEM_ACTOR,
        }
        sale_created = await insert_if_absent(
            self.db,
            Sale,
            {
                **snapshot,
                "taxes": Decimal("0"),
                "status": SaleStatus.nuevo,
                "checkout_session_id": payment.payment_id,
            },
        )
        purchase_created = await insert_if_absent(self.db, Purchase, snapshot)
        return sale_created, purchase_created

    # ------------------------------------------------------------------
    # Entradas
    # ------------------------------------------------------------------
    async def process_webhook(
        self,
        body: Any = None,
        query: Optional[Mapping[str, Any]] = None,
    ) -> ReconcileResult:
        try:
            topic = parse_topic(body, query)
            charge_id = parse_charge_id(body, query)
            logger.info("[MP] webhook topic=%s charge_id=%s", topic, charge_id)
            if not charge_id:
                return ReconcileResult(outcome=ReconcileOutcome.no_charge_id)

            gateway_payment = await self.gateway.get_payment(charge_id)
            return await self.persist_from_gateway_payment(gateway_payment)
        except Exception as e:
            logger.exception("[MP] Error procesando webhook: %s", e)
            await self._rollback_quietly()
            return ReconcileResult(outcome=ReconcileOutcome.error, extra={"error": type(e).__name__})

    async def _rollback_quietly(self) -> None:
        try:
            await self.db.rollback()
        except SQLAlchemyError as e:
            logger.warning("[MP] rollback tras error de webhook falló: %s", e)

    async def confirm_from_return(self, query: Optional[Mapping[str, Any]]) -> ReconcileResult:
        charge_id = first_text(query or {}, (("payment_id",),))
        if not charge_id:
            raise ValidationError("payment_id obligatorio")
        logger.info("[MP] confirm charge_id=%s", charge_id)
        gateway_payment = await self.gateway.get_payment(charge_id)
        return await self.persist_from_gateway_payment(gateway_payment)


def webhook_ack(result: ReconcileResult) -> dict[str, Any]:
    """Cuerpo `data` del acuse: siempre received=True."""
    return {"received": True, "outcome": result.outcome.value}


__all__ = [
    "Reconciler",
    "ReconcileResult",
    "ReconcileOutcome",
    "SYSTEM_ACTOR",
    "webhook_ack",
]
