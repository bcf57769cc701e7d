# -*- coding: utf-8 -*-
"""
backend/app/modules/catalog/models/type_models.py

Modelo ORM de tipos de catálogo (tabla `types`).

Fecha: 2026-09-02
"""

from __future__ import annotations

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.modules.catalog.enums import TypeName
from app.shared.database.base import ActorMixin, Base, TimestampMixin, as_str_enum, new_uuid


class CatalogType(TimestampMixin, ActorMixin, Base):
    __tablename__ = "types"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_uuid)
    name: Mapped[TypeName] = mapped_column(as_str_enum(TypeName, name="type_name"), unique=True, nullable=False)
    slug: Mapped[str] = mapped_column(String(120), unique=True, nullable=False)

    def __repr__(self) -> str:
        return f"<CatalogType id={self.id} name={self.name}>"


__all__ = ["CatalogType"]
