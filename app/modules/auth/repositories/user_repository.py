# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/repositories/user_repository.py

Repositorio de acceso a datos para User.
Encapsula consultas sobre la tabla users, dejando la lógica de negocio
(unicidad, hashing, permisos) en UserService.

Fecha: 2026-09-02
"""

from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.auth.models.user_models import User
from app.shared.database.repository import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repositorio de usuarios."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(User)
        self._db = db

    # ------------------------------------------------------------------
    # Lecturas
    # ------------------------------------------------------------------
    async def get_by_id(self, user_id: str) -> Optional[User]:
        return await self.get(self._db, user_id)

    async def get_by_email(self, email: str) -> Optional[User]:
        norm_email = (email or "").strip().lower()
        if not norm_email:
            return None
        result = await self._db.execute(select(User).where(User.email == norm_email))
        return result.scalar_one_or_none()

    async def find_by_email_or_username(
        self,
        email: Optional[str],
        username: Optional[str],
        exclude_id: Optional[str] = None,
    ) -> Optional[User]:
        """Primer usuario que colisiona por email o username (útil para 409)."""
        conds = []
        if email:
            conds.append(User.email == email)
        if username:
            conds.append(User.username == username)
        if not conds:
            return None
        stmt = select(User).where(or_(*conds))
        if exclude_id:
            stmt = stmt.where(User.id != exclude_id)
        result = await self._db.execute(stmt.limit(1))
        return result.scalar_one_or_none()

    async def search(
        self,
        q: Optional[str],
        *,
        offset: int,
        limit: int,
    ) -> tuple[Sequence[User], int]:
        """Búsqueda case-insensitive por username/email, más recientes primero."""
        stmt = select(User)
        if q:
            pattern = f"%{q.strip().lower()}%"
            stmt = stmt.where(or_(User.username.ilike(pattern), User.email.ilike(pattern)))
        stmt = stmt.order_by(User.created_at.desc())
        return await self.paginate(self._db, stmt, offset=offset, limit=limit)

    # ------------------------------------------------------------------
    # Escrituras
    # ------------------------------------------------------------------
    async def add(self, user: User) -> User:
        self._db.add(user)
        await self._db.commit()
        await self._db.refresh(user)
        return user

    async def save(self, user: User) -> User:
        await self._db.commit()
        await self._db.refresh(user)
        return user

    async def remove(self, user: User) -> None:
        await self.delete(self._db, user)
        await self._db.commit()


__all__ = ["UserRepository"]
