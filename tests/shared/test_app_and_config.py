# -*- coding: utf-8 -*-
"""
backend/tests/shared/test_app_and_config.py

Tests de la app ensamblada (health, middlewares, handlers de error) y de
la configuración por entorno.

Fecha: 2026-09-02
"""

import logging

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from app.modules.payments.config import PaymentsConfig
from app.routes.master_routes import loaded_routers
from app.shared.config.config_loader import get_settings
from app.shared.config.logging_config import setup_logging
from app.shared.config.settings_dev import DevSettings
from app.shared.config.settings_prod import ProdSettings
from app.shared.config.settings_testing import EnvTestingSettings
from app.shared.errors import ConflictError, NotFoundError
from app.shared.middleware import JSONExceptionMiddleware, register_error_handlers


class TestHealthAndMiddlewares:
    """Tests de /health y de los middlewares globales"""

    @pytest.mark.asyncio
    async def test_health(self, async_client):
        """Test: /health responde con el sobre y el estado de la DB"""
        response = await async_client.get("/health")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["status"] in ("ok", "degraded")
        assert data["environment"] == "test"
        assert "reachable" in data["database"]

    @pytest.mark.asyncio
    async def test_request_id_header(self, async_client):
        """Test: se devuelve X-Request-ID y se respeta el recibido"""
        response = await async_client.get("/health", headers={"X-Request-ID": "abc123"})
        assert response.headers["X-Request-ID"] == "abc123"

    @pytest.mark.asyncio
    async def test_unknown_route_uses_envelope(self, async_client):
        """Test: 404 de ruta inexistente con el sobre estándar"""
        response = await async_client.get("/api/no-existe")
        assert response.status_code == 404
        assert response.json()["code"] == 404
        assert response.headers["content-type"].startswith("application/json")

    def test_all_routers_mounted(self, app):
        """Test: todos los módulos quedaron montados bajo /api"""
        names = {entry.split(":", 1)[1] for entry in loaded_routers()}
        assert {
            "auth.users", "catalog.types", "catalog.categories", "catalog.items",
            "navbar", "orders.sales", "orders.purchases", "payments.payments",
        } <= names


class TestErrorHandlers:
    """Tests de traducción de excepciones a respuestas HTTP"""

    def _app(self) -> FastAPI:
        app = FastAPI()
        app.add_middleware(JSONExceptionMiddleware)
        register_error_handlers(app)

        @app.get("/conflict")
        async def conflict():
            raise ConflictError("Duplicado", data={"field": "email"})

        @app.get("/missing")
        async def missing():
            raise NotFoundError()

        @app.get("/boom")
        async def boom():
            raise RuntimeError("explota")

        return app

    @pytest.mark.asyncio
    async def test_app_errors(self):
        """Test: AppError -> su status_code, message y data"""
        async with AsyncClient(transport=ASGITransport(app=self._app()), base_url="http://t") as client:
            conflict = await client.get("/conflict")
            missing = await client.get("/missing")

        assert conflict.status_code == 409
        assert conflict.json() == {"code": 409, "message": "Duplicado", "data": {"field": "email"}}
        assert missing.json()["message"] == "Recurso no encontrado"

    @pytest.mark.asyncio
    async def test_unhandled_exception_is_json_500(self):
        """Test: error inesperado -> 500 JSON con request_id"""
        transport = ASGITransport(app=self._app(), raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://t") as client:
            response = await client.get("/boom")

        assert response.status_code == 500
        body = response.json()
        assert body["message"] == "Error interno del servidor"
        assert body["data"]["request_id"]


class TestSettings:
    """Tests de settings por entorno"""

    def test_active_settings_are_testing(self):
        """Test: PYTHON_ENV=test carga EnvTestingSettings"""
        settings = get_settings()
        assert isinstance(settings, EnvTestingSettings)
        assert settings.is_test
        assert settings.database_url.startswith("sqlite+aiosqlite")

    def test_dev_defaults(self, monkeypatch):
        """Test: dev usa DEBUG y sandbox"""
        monkeypatch.setenv("PYTHON_ENV", "development")
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        s = DevSettings(_env_file=None)
        assert s.is_dev
        assert s.log_level == "DEBUG"
        assert s.mp_sandbox is True

    def test_prod_rejects_weak_secret(self, monkeypatch):
        """Test: en producción el JWT débil o SQLite abortan el arranque"""
        monkeypatch.setenv("PYTHON_ENV", "production")
        monkeypatch.delenv("JWT_SECRET_KEY", raising=False)
        monkeypatch.delenv("DB_URL", raising=False)
        with pytest.raises(ValueError, match="JWT_SECRET_KEY"):
            ProdSettings()._security_checks()

        monkeypatch.setenv("JWT_SECRET_KEY", "x" * 40)
        with pytest.raises(ValueError, match="SQLite"):
            ProdSettings()._security_checks()

    def test_postgres_url_is_normalized(self, monkeypatch):
        """Test: postgres:// -> postgresql+asyncpg://"""
        monkeypatch.setenv("DB_URL", "postgres://u:p@db:5432/shop")
        assert DevSettings(_env_file=None).database_url == "postgresql+asyncpg://u:p@db:5432/shop"

    def test_cors_origins_include_front_url(self, monkeypatch):
        """Test: FRONT_URL se agrega a los orígenes CORS"""
        monkeypatch.setenv("CORS_ORIGINS", "https://a.test, https://b.test")
        monkeypatch.setenv("FRONT_URL", "https://front.test/")
        origins = DevSettings(_env_file=None).get_cors_origins()
        assert origins == ["https://a.test", "https://b.test", "https://front.test"]

    def test_payments_config_from_settings(self):
        """Test: PaymentsConfig se arma desde los settings activos"""
        config = PaymentsConfig.from_settings(EnvTestingSettings(_env_file=None))
        assert config.access_token == "TEST-dummy-access-token"
        assert config.front_url == "http://localhost:5173"
        assert config.backend_url == "https://api.shop.test"
        assert config.sandbox is True


class TestLogging:
    """Tests de setup_logging"""

    def test_json_format(self):
        """Test: formato json usa JsonFormatter de python-json-logger"""
        setup_logging("INFO", "json")
        formatters = [type(h.formatter).__name__ for h in logging.getLogger().handlers if h.formatter]
        assert "JsonFormatter" in formatters
        setup_logging("WARNING", "plain")

    def test_level_is_applied(self):
        """Test: el nivel raíz refleja el configurado"""
        setup_logging("ERROR", "plain")
        assert logging.getLogger().level == logging.ERROR
        setup_logging("WARNING", "plain")
