# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/models/payment_models.py

Modelo ORM para la tabla payments.

Un Payment representa un intento de checkout: nace `pending` al crear la
preferencia en la pasarela y lo muta la conciliación (status, payment_id,
payer_email) o un admin (status/items/payer_email).

Invariante: `amount` y `currency_id` son función pura de `items` y solo
se escriben a través de `Payment.set_items()`.

Fecha: 2026-09-02
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Iterable, Mapping, Optional

from sqlalchemy import JSON, Index, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from app.modules.payments.enums import PaymentStatus
from app.shared.database.base import ActorMixin, Base, TimestampMixin, new_uuid

DEFAULT_CURRENCY = "CLP"


class Payment(TimestampMixin, ActorMixin, Base):
    """Pago registrado contra una preferencia de la pasarela."""

    __tablename__ = "payments"
    __table_args__ = (
        Index("ix_payments_user_id_created_at", "user_id", "created_at"),
        Index("ix_payments_status_created_at", "status", "created_at"),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_uuid)

    # Identificador de la preferencia asignado por la pasarela
    preference_id: Mapped[str] = mapped_column(String(128), nullable=False, unique=True)

    # Id del cobro en la pasarela; la pasarela puede reutilizarlo entre reintentos
    payment_id: Mapped[Optional[str]] = mapped_column(String(64), nullable=True, index=True)

    items: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)
    amount: Mapped[Decimal] = mapped_column(Numeric(14, 2), nullable=False, default=Decimal("0"))
    currency_id: Mapped[str] = mapped_column(String(8), nullable=False, default=DEFAULT_CURRENCY)

    # Texto libre: ver PaymentStatus para los valores esperados
    status: Mapped[str] = mapped_column(String(32), nullable=False, default=PaymentStatus.pending.value)

    payer_email: Mapped[Optional[str]] = mapped_column(String(254), nullable=True)
    external_reference: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    user_id: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)

    # ------------------------------------------------------------------
    # Escritura de ítems (única vía para amount/currency_id)
    # ------------------------------------------------------------------
    def set_items(self, items: Iterable[Mapping[str, Any]]) -> None:
        """
        Reemplaza los ítems y recalcula amount y currency_id.

        Los ítems deben llegar ya normalizados (quantity >= 1, unit_price >= 0).
        """
        lines = [dict(it) for it in items]
        if not lines:
            raise ValueError("Payment.items no puede estar vacío")
        self.items = lines
        self.amount = compute_amount(lines)
        self.currency_id = str(lines[0].get("currency_id") or DEFAULT_CURRENCY)

    def set_payer_email(self, email: Optional[str]) -> None:
        self.payer_email = email.strip().lower() if email else None

    def __repr__(self) -> str:
        return f"<Payment id={self.id} preference_id={self.preference_id} status={self.status}>"


def compute_amount(items: Iterable[Mapping[str, Any]]) -> Decimal:
    total = Decimal("0")
    for it in items:
        total += Decimal(str(it["unit_price"])) * Decimal(str(it["quantity"]))
    return total


__all__ = ["Payment", "compute_amount", "DEFAULT_CURRENCY"]

# Fin del archivo backend/app/modules/payments/models/payment_models.py
