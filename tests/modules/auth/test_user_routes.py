# -*- coding: utf-8 -*-
"""
backend/tests/modules/auth/test_user_routes.py

Tests HTTP de /api/users: alta, login, verifyToken, permisos por rol y
sobre de respuesta {code, message, data}.

Fecha: 2026-09-02
"""

import pytest

from app.modules.auth.enums import UserRole

from tests.helpers import bearer, make_token

NEW_USER = {"username": "carla", "email": "carla@example.com", "password": "clave-segura-1"}


async def _register_and_login(client, payload=NEW_USER) -> tuple[str, str]:
    created = await client.post("/api/users/createUser", json=payload)
    assert created.status_code == 201
    login = await client.post(
        "/api/users/login", json={"email": payload["email"], "password": payload["password"]}
    )
    assert login.status_code == 200
    return created.json()["data"]["id"], login.json()["data"]["access_token"]


class TestRegistrationAndLogin:
    """Tests para createUser / login / verifyToken"""

    @pytest.mark.asyncio
    async def test_create_user_envelope(self, async_client):
        """Test: alta pública responde 201 con el sobre estándar"""
        response = await async_client.post("/api/users/createUser", json=NEW_USER)

        assert response.status_code == 201
        body = response.json()
        assert body["code"] == 201
        assert body["message"] == "Usuario creado"
        assert body["data"]["role"] == "buyer"
        assert "password" not in body["data"]
        assert "password_hash" not in body["data"]

    @pytest.mark.asyncio
    async def test_create_user_duplicate(self, async_client):
        """Test: email repetido -> 409"""
        await async_client.post("/api/users/createUser", json=NEW_USER)
        response = await async_client.post("/api/users/createUser", json=NEW_USER)
        assert response.status_code == 409
        assert response.json()["code"] == 409

    @pytest.mark.asyncio
    async def test_create_user_validation_error(self, async_client):
        """Test: cuerpo inválido -> 400 con detalle de errores"""
        response = await async_client.post("/api/users/createUser", json={"email": "no-es-email"})
        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Datos de entrada inválidos"
        assert isinstance(body["data"], list)

    @pytest.mark.asyncio
    async def test_login_wrong_password(self, async_client):
        """Test: credenciales inválidas -> 401"""
        await async_client.post("/api/users/createUser", json=NEW_USER)
        response = await async_client.post(
            "/api/users/login", json={"email": NEW_USER["email"], "password": "otra-clave"}
        )
        assert response.status_code == 401
        assert response.json()["message"] == "Credenciales inválidas"

    @pytest.mark.asyncio
    async def test_verify_token_and_refresh(self, async_client):
        """Test: verifyToken con refresh=true devuelve un token nuevo"""
        user_id, token = await _register_and_login(async_client)

        response = await async_client.get("/api/users/verifyToken?refresh=true", headers=bearer(token))

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["valid"] is True
        assert data["user"]["id"] == user_id
        assert data["token"]

    @pytest.mark.asyncio
    async def test_verify_token_without_header(self, async_client):
        """Test: sin Authorization -> 401"""
        response = await async_client.get("/api/users/verifyToken")
        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_verify_token_invalid(self, async_client):
        """Test: token corrupto -> 401 'Token inválido o expirado'"""
        response = await async_client.get("/api/users/verifyToken", headers=bearer("xxx.yyy.zzz"))
        assert response.status_code == 401
        assert response.json()["message"] == "Token inválido o expirado"


class TestPermissions:
    """Tests de autorización por rol y propiedad"""

    @pytest.mark.asyncio
    async def test_list_users_admin_only(self, async_client, buyer_headers, admin_headers):
        """Test: listUsers es solo para admin"""
        await async_client.post("/api/users/createUser", json=NEW_USER)

        forbidden = await async_client.get("/api/users/listUsers", headers=buyer_headers)
        allowed = await async_client.get("/api/users/listUsers", headers=admin_headers)

        assert forbidden.status_code == 403
        assert allowed.status_code == 200
        assert allowed.json()["data"]["total"] == 1

    @pytest.mark.asyncio
    async def test_get_user_info_self_or_admin(self, async_client, admin_headers):
        """Test: el propio usuario y un admin ven el detalle; otro buyer no"""
        user_id, token = await _register_and_login(async_client)
        stranger = bearer(make_token(UserRole.buyer))

        own = await async_client.get(f"/api/users/getUserInfo/{user_id}", headers=bearer(token))
        admin = await async_client.get(f"/api/users/getUserInfo/{user_id}", headers=admin_headers)
        other = await async_client.get(f"/api/users/getUserInfo/{user_id}", headers=stranger)

        assert own.status_code == 200
        assert admin.status_code == 200
        assert other.status_code == 403

    @pytest.mark.asyncio
    async def test_update_user_self(self, async_client):
        """Test: el usuario actualiza su username"""
        user_id, token = await _register_and_login(async_client)
        response = await async_client.patch(
            f"/api/users/updateUser/{user_id}", json={"username": "Carla2"}, headers=bearer(token)
        )
        assert response.status_code == 200
        assert response.json()["data"]["username"] == "carla2"

    @pytest.mark.asyncio
    async def test_delete_user(self, async_client, admin_headers):
        """Test: deleteUser informa si existía"""
        user_id, _ = await _register_and_login(async_client)

        first = await async_client.delete(f"/api/users/deleteUser/{user_id}", headers=admin_headers)
        second = await async_client.delete(f"/api/users/deleteUser/{user_id}", headers=admin_headers)

        assert first.json()["message"] == "Eliminado"
        assert second.json()["message"] == "No existía"
        assert second.json()["data"] == {"deleted": False}

    @pytest.mark.asyncio
    async def test_change_password_camel_case(self, async_client):
        """Test: changePassword acepta oldPassword/newPassword"""
        _, token = await _register_and_login(async_client)
        response = await async_client.post(
            "/api/users/changePassword",
            json={"oldPassword": NEW_USER["password"], "newPassword": "otra-clave-segura"},
            headers=bearer(token),
        )
        assert response.status_code == 200
        assert response.json()["data"] == {"changed": True}
