# -*- coding: utf-8 -*-
"""
backend/app/modules/orders/models/order_models.py

Modelos ORM de ventas (`sales`) y compras (`purchases`).

Ambos son snapshots: copian ítems, totales y pagador del Payment en el
momento de la aprobación. `preference_id` es único; la conciliación
inserta con ON CONFLICT DO NOTHING y nunca vuelve a actualizarlos.
Las compras creadas manualmente por el comprador no tienen preference_id.

Fecha: 2026-09-02
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional

from sqlalchemy import JSON, Index, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.modules.orders.enums import OrderPaymentStatus, PaymentProvider, SaleStatus
from app.shared.database.base import ActorMixin, Base, TimestampMixin, as_str_enum, new_uuid


class _OrderSnapshotMixin:
    """Columnas comunes a Sale y Purchase."""

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_uuid)
    preference_id: Mapped[Optional[str]] = mapped_column(String(128), nullable=True, unique=True)
    user_id: Mapped[Optional[str]] = mapped_column(String(64), nullable=True, index=True)

    # [{title, quantity, unit_price, currency_id, item_id?}]
    items: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)
    subtotal: Mapped[Decimal] = mapped_column(Numeric(14, 2), nullable=False, default=Decimal("0"))
    total: Mapped[Decimal] = mapped_column(Numeric(14, 2), nullable=False, default=Decimal("0"))
    currency_id: Mapped[str] = mapped_column(String(8), nullable=False, default="CLP")
    payer_email: Mapped[Optional[str]] = mapped_column(String(254), nullable=True)

    payment_status: Mapped[OrderPaymentStatus] = mapped_column(
        as_str_enum(OrderPaymentStatus, name="order_payment_status"),
        nullable=False,
        default=OrderPaymentStatus.pending,
    )
    payment_provider: Mapped[PaymentProvider] = mapped_column(
        as_str_enum(PaymentProvider, name="payment_provider"),
        nullable=False,
        default=PaymentProvider.mercadopago,
    )


class Sale(_OrderSnapshotMixin, TimestampMixin, ActorMixin, Base):
    __tablename__ = "sales"
    __table_args__ = (
        Index("ix_sales_created_at", "created_at"),
        Index("ix_sales_status_created_at", "status", "created_at"),
    )

    taxes: Mapped[Decimal] = mapped_column(Numeric(14, 2), nullable=False, default=Decimal("0"))
    status: Mapped[SaleStatus] = mapped_column(
        as_str_enum(SaleStatus, name="sale_status"),
        nullable=False,
        default=SaleStatus.nuevo,
    )
    checkout_session_id: Mapped[Optional[str]] = mapped_column(String(128), nullable=True)

    def __repr__(self) -> str:
        return f"<Sale id={self.id} preference_id={self.preference_id} total={self.total}>"


class Purchase(_OrderSnapshotMixin, TimestampMixin, ActorMixin, Base):
    __tablename__ = "purchases"
    __table_args__ = (
        Index("ix_purchases_user_id_created_at", "user_id", "created_at"),
    )

    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Purchase id={self.id} user_id={self.user_id} total={self.total}>"


__all__ = ["Sale", "Purchase"]
