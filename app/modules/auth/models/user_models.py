# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/models/user_models.py

Modelo principal de usuarios (User).

- username y email se guardan en minúsculas y son únicos.
- password_hash nunca se serializa hacia la API (ver UserOut).

Fecha: 2026-09-02
"""

from __future__ import annotations

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.modules.auth.enums import UserRole
from app.shared.database.base import ActorMixin, Base, TimestampMixin, as_str_enum, new_uuid


class User(TimestampMixin, ActorMixin, Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_uuid)
    username: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    email: Mapped[str] = mapped_column(String(320), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[UserRole] = mapped_column(
        as_str_enum(UserRole, name="user_role"),
        nullable=False,
        default=UserRole.buyer,
    )

    def __repr__(self) -> str:
        return f"<User id={self.id} username={self.username!r} role={self.role}>"


__all__ = ["User"]
# Fin del archivo backend/app/modules/auth/models/user_models.py
