# -*- coding: utf-8 -*-
"""
backend/app/modules/catalog/models/category_models.py

Modelo ORM de categorías (tabla `categories`).

- name en minúsculas, único por tipo: UNIQUE(type_id, name)
- slug único global

Fecha: 2026-09-02
"""

from __future__ import annotations

from sqlalchemy import ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.shared.database.base import ActorMixin, Base, TimestampMixin, new_uuid

from .type_models import CatalogType


class Category(TimestampMixin, ActorMixin, Base):
    __tablename__ = "categories"
    __table_args__ = (
        UniqueConstraint("type_id", "name", name="uq_categories_type_id_name"),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_uuid)
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    slug: Mapped[str] = mapped_column(String(160), unique=True, nullable=False)
    type_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("types.id", ondelete="RESTRICT"), nullable=False, index=True
    )

    type: Mapped[CatalogType] = relationship(CatalogType, lazy="selectin")

    def __repr__(self) -> str:
        return f"<Category id={self.id} name={self.name!r} type_id={self.type_id}>"


__all__ = ["Category"]
