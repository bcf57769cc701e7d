# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/dependencies.py

Dependencias de autenticación/autorización JWT para FastAPI.

Provee:
- get_current_user: exige Authorization: Bearer <token> (401 si falta/inválido)
- get_optional_user: igual pero devuelve None para anónimos o tokens inválidos
- require_roles(*roles): 403 si el rol no está permitido
- require_admin / require_buyer (buyer o admin)
- require_self_or_admin: el {id} de la ruta debe ser el propio usuario o admin

Fecha: 2026-09-02
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from fastapi import Depends

from app.modules.auth.enums import UserRole
from app.modules.auth.schemas import TokenClaims
from app.shared.errors import AuthError, AuthorizationError

from .security import TokenDecodeError, claims_from_token, oauth2_scheme

logger = logging.getLogger(__name__)


async def get_current_user(token: Optional[str] = Depends(oauth2_scheme)) -> TokenClaims:
    if not token:
        raise AuthError("Acceso no autorizado")
    try:
        return claims_from_token(token)
    except TokenDecodeError as e:
        raise AuthError("Token inválido o expirado") from e


async def get_optional_user(
    token: Optional[str] = Depends(oauth2_scheme),
) -> Optional[TokenClaims]:
    if not token:
        return None
    try:
        return claims_from_token(token)
    except TokenDecodeError as e:
        logger.info("optional_auth token descartado: %s", e)
        return None


def require_roles(*allowed: UserRole) -> Callable:
    """Factory de dependencias por rol."""

    async def _dep(user: TokenClaims = Depends(get_current_user)) -> TokenClaims:
        if user.role not in allowed:
            roles = " o ".join(r.value for r in allowed)
            raise AuthorizationError(f"No autorizado: se requiere rol {roles}")
        return user

    return _dep


require_admin = require_roles(UserRole.admin)
require_buyer = require_roles(UserRole.buyer, UserRole.admin)


async def require_self_or_admin(
    id: str,
    user: TokenClaims = Depends(get_current_user),
) -> TokenClaims:
    if user.role == UserRole.admin or user.id == id:
        return user
    raise AuthorizationError("No autorizado")


__all__ = [
    "get_current_user",
    "get_optional_user",
    "require_roles",
    "require_admin",
    "require_buyer",
    "require_self_or_admin",
]
