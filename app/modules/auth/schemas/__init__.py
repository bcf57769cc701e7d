# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/schemas/__init__.py

Schemas Pydantic del módulo de autenticación.
"""

from .user_schemas import (
    # Requests
    UserCreateRequest,
    LoginRequest,
    UserUpdateRequest,
    ChangePasswordRequest,
    # Responses
    UserOut,
    LoginResult,
    TokenClaims,
    VerifyTokenResult,
)

__all__ = [
    "UserCreateRequest",
    "LoginRequest",
    "UserUpdateRequest",
    "ChangePasswordRequest",
    "UserOut",
    "LoginResult",
    "TokenClaims",
    "VerifyTokenResult",
]
