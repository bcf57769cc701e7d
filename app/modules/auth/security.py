# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/security.py

Seguridad del módulo Auth:
- Esquema OAuth2 (Bearer) sin auto_error: el 401 lo emite dependencies.py
  con el sobre estándar.
- Emisión de tokens de usuario (access 30 min / refresh 1 día).
- Lectura de claims de un token.

El hashing y la firma JWT viven en app.shared.utils.security.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Any, Dict, Optional

from fastapi.security import OAuth2PasswordBearer

from app.modules.auth.enums import UserRole
from app.modules.auth.schemas import TokenClaims
from app.shared.utils.security import (
    TokenDecodeError,
    create_access_token,
    decode_token,
    hash_password,
    verify_password,
)

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/users/login", auto_error=False)


def issue_user_token(
    claims: TokenClaims,
    token_type: str = "access",
    expires_delta: Optional[timedelta] = None,
) -> str:
    """Firma un JWT con sub=id y los claims públicos del usuario."""
    payload: Dict[str, Any] = {
        "sub": claims.id,
        "email": claims.email,
        "role": claims.role.value,
    }
    if claims.username:
        payload["username"] = claims.username
    return create_access_token(payload, expires_delta=expires_delta, token_type=token_type)


def claims_from_token(token: str) -> TokenClaims:
    """
    Decodifica el token y devuelve sus claims.

    Raises:
        TokenDecodeError: firma inválida, expirado o sin sub/rol válidos.
    """
    payload = decode_token(token)
    sub = payload.get("sub")
    if sub is None or not str(sub).strip():
        raise TokenDecodeError("Token sin 'sub'")
    try:
        role = UserRole(payload.get("role") or UserRole.guest)
    except ValueError as e:
        raise TokenDecodeError("Rol inválido en token") from e
    return TokenClaims(
        id=str(sub),
        email=str(payload.get("email") or ""),
        role=role,
        username=payload.get("username"),
    )


__all__ = [
    "oauth2_scheme",
    "issue_user_token",
    "claims_from_token",
    "hash_password",
    "verify_password",
    "TokenDecodeError",
]
# Fin del archivo
