# -*- coding: utf-8 -*-
"""
backend/tests/shared/test_shared_utils.py

Tests de utilidades compartidas: paginación, validadores, slugs,
sobre de respuesta y hashing de contraseñas.

Fecha: 2026-09-02
"""

import json

import pytest

from app.shared.utils.api_response import created, envelope, fail, ok
from app.shared.utils.pagination import MAX_LIMIT, PageParams, page_result
from app.shared.utils.security import (
    MAX_PASSWORD_LENGTH,
    PasswordTooLongError,
    hash_password,
    verify_password,
)
from app.shared.utils.slug_utils import slugify
from app.shared.utils.validators import ensure_url, is_uuid


class TestPageParams:
    """Tests para PageParams.normalize / page_result"""

    @pytest.mark.parametrize("page,limit,expected", [
        (None, None, (1, 20)),
        ("3", "5", (3, 5)),
        (0, 0, (1, 1)),
        (-2, 1000, (1, MAX_LIMIT)),
        ("x", "y", (1, 20)),
    ])
    def test_normalize(self, page, limit, expected):
        """Test: page/limit fuera de rango se acotan"""
        params = PageParams.normalize(page, limit)
        assert (params.page, params.limit) == expected

    def test_custom_default_limit(self):
        """Test: default_limit por listado"""
        assert PageParams.normalize(None, None, default_limit=10).limit == 10

    def test_page_result_has_more(self):
        """Test: has_more según offset + tamaño de página"""
        params = PageParams.normalize(2, 2)
        assert params.offset == 2
        assert page_result(["c", "d"], params, total=5)["has_more"] is True
        assert page_result(["e"], PageParams.normalize(3, 2), total=5)["has_more"] is False


class TestValidators:
    """Tests para is_uuid / ensure_url"""

    def test_is_uuid(self):
        """Test: solo textos UUID válidos"""
        assert is_uuid("00000000-0000-4000-8000-000000000001")
        assert not is_uuid("123")
        assert not is_uuid(None)
        assert not is_uuid(42)

    @pytest.mark.parametrize("value,expected", [
        ("https://shop.test/", "https://shop.test"),
        (" http://localhost:5173 ", "http://localhost:5173"),
        ("shop.test", None),
        ("javascript:alert(1)", None),
        (None, None),
    ])
    def test_ensure_url(self, value, expected):
        """Test: URL absoluta http/https sin barra final"""
        assert ensure_url(value) == expected


class TestSlugify:
    """Tests para slugify"""

    def test_accents_and_symbols(self):
        """Test: sin acentos, símbolos fuera, guiones simples"""
        assert slugify("Electrónica  & Hogar") == "electronica-hogar"
        assert slugify("  --Misión_Visión-- ") == "mision-vision"
        assert slugify("") == ""


class TestEnvelope:
    """Tests del sobre {code, message, data}"""

    def test_ok(self):
        """Test: ok usa code 200 y serializa data"""
        response = ok({"a": 1})
        assert response.status_code == 200
        assert json.loads(response.body) == {"code": 200, "message": "OK", "data": {"a": 1}}

    def test_created_and_fail(self):
        """Test: created -> 201; fail conserva code y headers"""
        assert created(None, message="Creado").status_code == 201
        response = fail("No autorizado", code=401, headers={"WWW-Authenticate": "Bearer"})
        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_utf8_content(self):
        """Test: los acentos se devuelven sin escapar"""
        response = ok(None, message="Categoría creada")
        assert "Categoría".encode("utf-8") in response.body

    def test_envelope_encodes_decimals(self):
        """Test: Decimal se serializa como número"""
        from decimal import Decimal
        assert envelope(200, "OK", {"total": Decimal("10.50")})["data"] == {"total": 10.5}


class TestPasswordHashing:
    """Tests para hash_password / verify_password (Argon2id)"""

    def test_roundtrip(self):
        """Test: el hash verifica la contraseña original y no otra"""
        hashed = hash_password("clave-super-segura")
        assert hashed.startswith("$argon2id$")
        assert verify_password("clave-super-segura", hashed)
        assert not verify_password("otra", hashed)

    def test_too_long(self):
        """Test: contraseñas gigantes se rechazan"""
        with pytest.raises(PasswordTooLongError):
            hash_password("x" * (MAX_PASSWORD_LENGTH + 1))
        assert verify_password("x" * (MAX_PASSWORD_LENGTH + 1), "irrelevante") is False
