# backend/tests/conftest.py
# -*- coding: utf-8 -*-
"""
Config global de tests de la tienda.

- Fuerza PYTHON_ENV=test ANTES de importar la app (SQLite en memoria,
  JWT y credenciales de pasarela dummy).
- Motor async `sqlite+aiosqlite` en memoria por test, con todas las tablas.
- App FastAPI con override de get_async_session y de la pasarela
  (FakeGateway) vía dependency_overrides.
- Headers Bearer por rol.
"""

import os

os.environ["PYTHON_ENV"] = "test"

from collections.abc import AsyncIterator

import pytest
from asgi_lifespan import LifespanManager
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from app.core.db import get_async_session
from app.modules.auth.enums import UserRole
from app.modules.auth.schemas import TokenClaims
from app.modules.payments.config import PaymentsConfig
from app.modules.payments.dependencies import get_gateway_client, get_payments_config
from app.shared.database.database import build_engine, init_models

from tests.helpers import ADMIN_ID, BUYER_ID, FakeGateway, bearer, make_token


# -----------------------------------------------------------------------------
# Base de datos
# -----------------------------------------------------------------------------
@pytest.fixture
async def engine() -> AsyncIterator[AsyncEngine]:
    eng = build_engine("sqlite+aiosqlite:///:memory:")
    await init_models(bind=eng)
    try:
        yield eng
    finally:
        await eng.dispose()


@pytest.fixture
def session_factory(engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=engine, expire_on_commit=False, autoflush=False)


@pytest.fixture
async def db_session(session_factory) -> AsyncIterator[AsyncSession]:
    async with session_factory() as session:
        yield session


# -----------------------------------------------------------------------------
# Pagos
# -----------------------------------------------------------------------------
@pytest.fixture
def payments_config() -> PaymentsConfig:
    return PaymentsConfig(
        access_token="TEST-dummy-access-token",
        front_url="http://localhost:5173/",
        backend_url="https://api.shop.test",
        sandbox=True,
    )


@pytest.fixture
def fake_gateway() -> FakeGateway:
    return FakeGateway()


# -----------------------------------------------------------------------------
# App + cliente httpx
# -----------------------------------------------------------------------------
@pytest.fixture(scope="session")
def app():
    """Carga la app después de fijar PYTHON_ENV=test."""
    from app.main import app as fastapi_app
    return fastapi_app


@pytest.fixture
async def async_client(app, session_factory, fake_gateway, payments_config) -> AsyncIterator[AsyncClient]:
    async def _override_session() -> AsyncIterator[AsyncSession]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_async_session] = _override_session
    app.dependency_overrides[get_gateway_client] = lambda: fake_gateway
    app.dependency_overrides[get_payments_config] = lambda: payments_config
    try:
        async with LifespanManager(app):
            transport = ASGITransport(app=app)
            async with AsyncClient(transport=transport, base_url="http://testserver") as client:
                yield client
    finally:
        app.dependency_overrides.clear()


# -----------------------------------------------------------------------------
# Tokens
# -----------------------------------------------------------------------------
@pytest.fixture
def admin_headers() -> dict[str, str]:
    return bearer(make_token(UserRole.admin, ADMIN_ID, "admin@example.com"))


@pytest.fixture
def buyer_headers() -> dict[str, str]:
    return bearer(make_token(UserRole.buyer, BUYER_ID, "buyer@example.com"))


@pytest.fixture
def buyer_claims() -> TokenClaims:
    return TokenClaims(id=BUYER_ID, email="buyer@example.com", role=UserRole.buyer)
