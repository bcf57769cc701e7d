# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/services/user_service.py

Servicio de usuarios y autenticación:
- Alta con unicidad de email/username (409 en colisión)
- Login con emisión de JWT (claims: sub, email, role, username)
- verifyToken con refresh opcional (token de 1 día)
- CRUD administrativo y cambio de contraseña

Fecha: 2026-09-02
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.auth.enums import UserRole
from app.modules.auth.models.user_models import User
from app.modules.auth.repositories import UserRepository
from app.modules.auth.schemas import (
    LoginRequest,
    LoginResult,
    TokenClaims,
    UserCreateRequest,
    UserOut,
    UserUpdateRequest,
    VerifyTokenResult,
)
from app.modules.auth.security import hash_password, issue_user_token, verify_password
from app.shared.errors import AuthError, ConflictError, NotFoundError, ValidationError
from app.shared.utils.pagination import PageParams, page_result
from app.shared.utils.validators import is_uuid

log = logging.getLogger(__name__)


def _mask_email(email: str) -> str:
    """Enmascara email para logging seguro: us***@dom***.com"""
    e = (email or "").strip().lower()
    if not e or "@" not in e:
        return "***@***.***"
    local, domain = e.split("@", 1)
    masked_local = f"{local[:2]}***" if len(local) >= 2 else "***"
    if "." in domain:
        dom_parts = domain.rsplit(".", 1)
        masked_domain = f"{dom_parts[0][:3]}***.{dom_parts[1]}"
    else:
        masked_domain = f"{domain[:3]}***"
    return f"{masked_local}@{masked_domain}"


class UserService:
    """Servicio de usuarios (lectura/escritura) sobre una AsyncSession prestada."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db
        self.repo = UserRepository(db)

    @staticmethod
    def _require_id(user_id: str) -> None:
        if not is_uuid(user_id):
            raise ValidationError("ID inválido")

    async def _get_or_404(self, user_id: str) -> User:
        self._require_id(user_id)
        user = await self.repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError("Usuario no encontrado")
        return user

    # ------------------------------------------------------------------
    # Alta / login / token
    # ------------------------------------------------------------------
    async def create(
        self,
        data: UserCreateRequest,
        actor: Optional[TokenClaims] = None,
    ) -> UserOut:
        username = data.username.strip().lower()
        email = str(data.email).strip().lower()
        if not username:
            raise ValidationError("Faltan campos obligatorios (username, email, password)")

        # Solo un admin autenticado puede crear otros admins
        role = data.role or UserRole.buyer
        if role == UserRole.admin and (actor is None or actor.role != UserRole.admin):
            role = UserRole.buyer

        if await self.repo.find_by_email_or_username(email, username):
            raise ConflictError("Usuario ya existe (email o username)")

        user = User(
            username=username,
            email=email,
            password_hash=hash_password(data.password),
            role=role,
            created_by=actor.id if actor else "system",
            updated_by=actor.id if actor else "system",
        )
        await self.repo.add(user)
        log.info("user_created id=%s email=%s role=%s", user.id, _mask_email(email), role)
        return UserOut.model_validate(user)

    async def login(self, data: LoginRequest) -> LoginResult:
        email = str(data.email).strip().lower()
        user = await self.repo.get_by_email(email)
        if user is None or not verify_password(data.password, user.password_hash):
            log.info("login_failed email=%s", _mask_email(email))
            raise AuthError("Credenciales inválidas")

        claims = TokenClaims(id=user.id, email=user.email, role=user.role, username=user.username)
        token = issue_user_token(claims)
        log.debug("login_ok id=%s", user.id)
        return LoginResult(user=UserOut.model_validate(user), access_token=token)

    async def verify_token(self, claims: TokenClaims, refresh: bool = False) -> VerifyTokenResult:
        """Confirma que el usuario del token aún existe; con refresh emite un token de 1 día."""
        user = await self.repo.get_by_id(claims.id) if is_uuid(claims.id) else None
        if user is None:
            raise AuthError("Sesión inválida (usuario no existe)")
        token = issue_user_token(claims, token_type="refresh") if refresh else None
        return VerifyTokenResult(valid=True, user=claims, token=token)

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------
    async def get_by_id(self, user_id: str) -> UserOut:
        return UserOut.model_validate(await self._get_or_404(user_id))

    async def list(
        self,
        q: Optional[str] = None,
        page: Any = None,
        limit: Any = None,
    ) -> dict[str, Any]:
        params = PageParams.normalize(page, limit, default_limit=10)
        rows, total = await self.repo.search(q, offset=params.offset, limit=params.limit)
        return page_result([UserOut.model_validate(u) for u in rows], params, total)

    async def update_by_id(
        self,
        user_id: str,
        data: UserUpdateRequest,
        actor: TokenClaims,
    ) -> UserOut:
        changes = data.model_dump(exclude_unset=True, exclude_none=True)
        # Un usuario no-admin solo puede modificar username/email propios
        if actor.role != UserRole.admin:
            changes.pop("role", None)
        if not changes:
            raise ValidationError("Nada para actualizar")

        user = await self._get_or_404(user_id)
        if "username" in changes:
            changes["username"] = changes["username"].strip().lower()
        if "email" in changes:
            changes["email"] = str(changes["email"]).strip().lower()

        clash = await self.repo.find_by_email_or_username(
            changes.get("email"), changes.get("username"), exclude_id=user.id
        )
        if clash:
            raise ConflictError("Usuario ya existe (email o username)")

        for field, value in changes.items():
            setattr(user, field, value)
        user.updated_by = actor.id
        await self.repo.save(user)
        return UserOut.model_validate(user)

    async def remove_by_id(self, user_id: str) -> dict[str, bool]:
        self._require_id(user_id)
        user = await self.repo.get_by_id(user_id)
        if user is None:
            return {"deleted": False}
        await self.repo.remove(user)
        log.info("user_deleted id=%s", user_id)
        return {"deleted": True}

    async def change_password(self, user_id: str, old_password: str, new_password: str) -> dict[str, bool]:
        if not new_password or len(new_password) < 8:
            raise ValidationError("La nueva contraseña debe tener al menos 8 caracteres")
        user = await self._get_or_404(user_id)
        if not verify_password(old_password, user.password_hash):
            raise ValidationError("Contraseña actual inválida")
        user.password_hash = hash_password(new_password)
        user.updated_by = user_id
        await self.repo.save(user)
        return {"changed": True}


__all__ = ["UserService"]
