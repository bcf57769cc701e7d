# -*- coding: utf-8 -*-
"""
backend/app/modules/navbar/routes.py

GET /navbar/menu con autenticación opcional: sin token (o token inválido)
se responde el menú de invitado.

Fecha: 2026-09-02
"""

from typing import Optional

from fastapi import APIRouter, Depends

from app.modules.auth.dependencies import get_optional_user
from app.modules.auth.enums import UserRole
from app.modules.auth.schemas import TokenClaims
from app.shared.utils.api_response import ok

from .navbar_service import NavbarService

router = APIRouter(prefix="/navbar", tags=["navbar"])


def get_navbar_service() -> NavbarService:
    return NavbarService()


@router.get("/menu")
async def get_menu(
    user: Optional[TokenClaims] = Depends(get_optional_user),
    service: NavbarService = Depends(get_navbar_service),
):
    role = user.role if user else UserRole.guest
    data = service.get_menu(role, is_authenticated=user is not None)
    return ok(data, message="Menú cargado correctamente")


__all__ = ["router"]
