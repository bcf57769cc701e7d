# -*- coding: utf-8 -*-
"""
backend/app/shared/database/base.py

Base declarativa y convención de nombres para modelos ORM.

Este módulo proporciona:
- Base: clase base declarativa de SQLAlchemy
- NAMING_CONVENTION: convención de nombres para constraints
- as_str_enum: helper para mapear enums Python a columnas VARCHAR portables
- TimestampMixin / ActorMixin: columnas comunes de auditoría
- new_uuid: generador de identificadores (UUID4 en texto)

Fecha: 2026-09-02
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Type
from uuid import uuid4

from sqlalchemy import DateTime, Enum as SAEnum, MetaData, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# ===== NAMING CONVENTION =====
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


# ===== BASE DECLARATIVA =====
class Base(DeclarativeBase):
    """
    Base declarativa para todos los modelos ORM de la tienda.
    Incluye convención de nombres para constraints.
    """
    metadata = MetaData(naming_convention=NAMING_CONVENTION)


def new_uuid() -> str:
    return str(uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ===== HELPER GENÉRICO PARA ENUMS =====
def as_str_enum(enum_cls: Type[Enum], name: str | None = None) -> SAEnum:
    """
    Devuelve un tipo Enum de SQLAlchemy persistido como VARCHAR + CHECK.

    Uso típico:

        from app.shared.database.base import Base, as_str_enum
        from .enums import SaleStatus

        class Sale(Base):
            status: Mapped[SaleStatus] = mapped_column(
                as_str_enum(SaleStatus, name="sale_status"),
                nullable=False,
            )

    - No usa ENUM nativo: funciona igual en PostgreSQL y en SQLite (tests).
    - Se persiste el `.value` del enum, no el nombre del miembro.
    """
    enum_name = name or enum_cls.__name__.lower()

    def _values(_: object) -> list[str]:
        return [e.value for e in enum_cls]  # type: ignore[arg-type]

    return SAEnum(
        enum_cls,
        name=enum_name,
        native_enum=False,
        create_constraint=False,
        length=32,
        values_callable=_values,
        validate_strings=True,
    )


# ===== MIXINS DE AUDITORÍA =====
class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )


class ActorMixin:
    """created_by es inmutable tras la creación; updated_by refleja el último actor."""
    created_by: Mapped[str] = mapped_column(String(64), nullable=False, default="system")
    updated_by: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)


__all__ = [
    "Base",
    "NAMING_CONVENTION",
    "as_str_enum",
    "new_uuid",
    "utcnow",
    "TimestampMixin",
    "ActorMixin",
]

# Fin del archivo backend/app/shared/database/base.py
