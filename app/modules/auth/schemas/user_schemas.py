# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/schemas/user_schemas.py

Esquemas Pydantic de usuarios y autenticación.

Los requests aceptan también los nombres camelCase que envía el
frontend (oldPassword, newPassword) gracias a populate_by_name.

Fecha: 2026-09-02
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from app.modules.auth.enums import UserRole
from app.shared.utils.base_models import EmailStr, ShopModel


# ========== PETICIONES ==========

class UserCreateRequest(ShopModel):
    username: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=1024)
    role: Optional[UserRole] = None


class LoginRequest(ShopModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class UserUpdateRequest(ShopModel):
    username: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    role: Optional[UserRole] = None


class ChangePasswordRequest(ShopModel):
    old_password: str = Field(..., min_length=1, alias="oldPassword")
    new_password: str = Field(..., min_length=8, max_length=1024, alias="newPassword")


# ========== RESPUESTAS ==========

class UserOut(ShopModel):
    id: str
    username: str
    email: str
    role: UserRole
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class LoginResult(ShopModel):
    user: UserOut
    access_token: str
    token_type: str = "bearer"


class TokenClaims(ShopModel):
    """Claims que viajan en el JWT y que verifyToken devuelve al cliente."""
    id: str
    email: str
    role: UserRole
    username: Optional[str] = None


class VerifyTokenResult(ShopModel):
    valid: bool
    user: TokenClaims
    token: Optional[str] = None


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
