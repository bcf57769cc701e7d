# -*- coding: utf-8 -*-
"""
backend/app/modules/catalog/models/item_models.py

Modelo ORM de ítems vendibles (tabla `items`).

Invariante de dominio (validada en ItemService): la categoría del ítem
debe pertenecer al mismo tipo del ítem.

Fecha: 2026-09-02
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from sqlalchemy import CheckConstraint, ForeignKey, Index, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.shared.database.base import ActorMixin, Base, TimestampMixin, new_uuid

from .category_models import Category
from .type_models import CatalogType


class Item(TimestampMixin, ActorMixin, Base):
    __tablename__ = "items"
    __table_args__ = (
        CheckConstraint("price >= 0", name="price_non_negative"),
        CheckConstraint("stock IS NULL OR stock >= 0", name="stock_non_negative"),
        Index("ix_items_type_id_category_id", "type_id", "category_id"),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_uuid)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    stock: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    type_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("types.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    category_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("categories.id", ondelete="RESTRICT"), nullable=False, index=True
    )

    type: Mapped[CatalogType] = relationship(CatalogType, lazy="selectin")
    category: Mapped[Category] = relationship(Category, lazy="selectin")

    def __repr__(self) -> str:
        return f"<Item id={self.id} name={self.name!r} price={self.price}>"


__all__ = ["Item"]
