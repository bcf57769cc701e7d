# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/security.py

Utilidades de seguridad:
- Hasheo y verificación de contraseñas (Argon2id via passlib)
- Emisión y validación de tokens JWT (python-jose)

Fecha: 2026-09-02
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
import logging
import uuid

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext

from app.shared.config import get_settings

logger = logging.getLogger(__name__)

# ===== PASSWORD HASHING (Argon2id) =====
# Límite máximo para prevenir DoS con payloads gigantes
MAX_PASSWORD_LENGTH = 1024

pwd_context = CryptContext(
    schemes=["argon2"],
    deprecated="auto",
    argon2__type="ID",
    argon2__memory_cost=19456,
    argon2__time_cost=2,
    argon2__parallelism=1,
)


class PasswordTooLongError(ValueError):
    """Contraseña excede el límite máximo permitido."""
    pass


class TokenDecodeError(Exception):
    """Token JWT inválido, expirado o de tipo inesperado."""

    def __init__(self, message: str = "Token inválido", expired: bool = False) -> None:
        super().__init__(message)
        self.expired = expired


def hash_password(password: str) -> str:
    if len(password) > MAX_PASSWORD_LENGTH:
        raise PasswordTooLongError(
            f"La contraseña no puede exceder {MAX_PASSWORD_LENGTH} caracteres"
        )
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    if len(plain_password) > MAX_PASSWORD_LENGTH:
        return False
    return pwd_context.verify(plain_password, hashed_password)


# ===== JWT TOKENS =====
def _now_utc() -> datetime:
    return datetime.now(timezone.utc)


def create_access_token(
    data: Dict[str, Any],
    expires_delta: Optional[timedelta] = None,
    token_type: str = "access",
) -> str:
    """
    Crea un JWT firmado con tipo y expiración.

    Args:
        data: Payload del token (ej: {"sub": user_id, "role": "buyer"})
        expires_delta: Duración (None = ACCESS/REFRESH_TOKEN_EXPIRE_MINUTES según tipo)
        token_type: "access" o "refresh"
    """
    settings = get_settings()
    to_encode = dict(data)

    if expires_delta is None:
        minutes = (
            settings.refresh_token_expire_minutes
            if token_type == "refresh"
            else settings.access_token_expire_minutes
        )
        expires_delta = timedelta(minutes=minutes)

    iat = _now_utc()
    to_encode.update({
        "exp": iat + expires_delta,
        "iat": iat,
        "jti": str(uuid.uuid4()),
        "token_type": token_type,
    })
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> Dict[str, Any]:
    """
    Decodifica y valida un JWT.

    Raises:
        TokenDecodeError: si expiró o la firma/formato no es válido.
    """
    settings = get_settings()
    try:
        return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except ExpiredSignatureError as e:
        logger.info("Token expirado: %s", e)
        raise TokenDecodeError("Token expirado", expired=True) from e
    except JWTError as e:
        logger.info("Token inválido: %s", e)
        raise TokenDecodeError("Token inválido") from e


__all__ = [
    "hash_password",
    "verify_password",
    "create_access_token",
    "decode_token",
    "TokenDecodeError",
    "MAX_PASSWORD_LENGTH",
    "PasswordTooLongError",
]
