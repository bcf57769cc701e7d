# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/routes/user_routes.py

Rutas de usuarios (/users):
- POST   /createUser            alta (pública; rol admin solo si lo crea un admin)
- POST   /login                 login, devuelve JWT de 30 min
- GET    /verifyToken           valida sesión (?refresh=true emite token de 1 día)
- GET    /listUsers             admin
- GET    /getUserInfo/{id}      propio usuario o admin
- PATCH  /updateUser/{id}       propio usuario o admin
- DELETE /deleteUser/{id}       admin
- POST   /changePassword        usuario autenticado

Fecha: 2026-09-02
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_async_session
from app.modules.auth.dependencies import (
    get_current_user,
    get_optional_user,
    require_admin,
    require_self_or_admin,
)
from app.modules.auth.schemas import (
    ChangePasswordRequest,
    LoginRequest,
    TokenClaims,
    UserCreateRequest,
    UserUpdateRequest,
)
from app.modules.auth.services import UserService
from app.shared.utils.api_response import created, ok

router = APIRouter(prefix="/users", tags=["users"])


def get_user_service(db: AsyncSession = Depends(get_async_session)) -> UserService:
    return UserService(db)


@router.post("/createUser", summary="Crear usuario")
async def create_user(
    payload: UserCreateRequest,
    actor: Optional[TokenClaims] = Depends(get_optional_user),
    service: UserService = Depends(get_user_service),
):
    return created(await service.create(payload, actor=actor), message="Usuario creado")


@router.post("/login", summary="Login con email y contraseña")
async def login(payload: LoginRequest, service: UserService = Depends(get_user_service)):
    return ok(await service.login(payload))


@router.get("/verifyToken", summary="Verificar/refrescar sesión")
async def verify_token(
    refresh: bool = Query(False),
    user: TokenClaims = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    return ok(await service.verify_token(user, refresh=refresh))


@router.get("/listUsers", summary="Listar usuarios (admin)")
async def list_users(
    q: Optional[str] = Query(None),
    page: Optional[int] = Query(None),
    limit: Optional[int] = Query(None),
    _: TokenClaims = Depends(require_admin),
    service: UserService = Depends(get_user_service),
):
    return ok(await service.list(q=q, page=page, limit=limit))


@router.get("/getUserInfo/{id}", summary="Detalle de usuario")
async def get_user_info(
    id: str,
    _: TokenClaims = Depends(require_self_or_admin),
    service: UserService = Depends(get_user_service),
):
    return ok(await service.get_by_id(id))


@router.patch("/updateUser/{id}", summary="Actualizar usuario")
async def update_user(
    id: str,
    payload: UserUpdateRequest,
    actor: TokenClaims = Depends(require_self_or_admin),
    service: UserService = Depends(get_user_service),
):
    return ok(await service.update_by_id(id, payload, actor), message="Actualizado")


@router.delete("/deleteUser/{id}", summary="Eliminar usuario (admin)")
async def delete_user(
    id: str,
    _: TokenClaims = Depends(require_admin),
    service: UserService = Depends(get_user_service),
):
    result = await service.remove_by_id(id)
    return ok(result, message="Eliminado" if result["deleted"] else "No existía")


@router.post("/changePassword", summary="Cambiar contraseña propia")
async def change_password(
    payload: ChangePasswordRequest,
    user: TokenClaims = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    result = await service.change_password(user.id, payload.old_password, payload.new_password)
    return ok(result, message="Contraseña actualizada")


# Fin del archivo backend/app/modules/auth/routes/user_routes.py
