# -*- coding: utf-8 -*-
"""
backend/app/shared/config/settings_testing.py

Overrides para entorno de PRUEBAS (test) usando Pydantic v2.
Busca ser determinista: logging moderado, SQLite en memoria
y pasarela con claves dummy.

Fecha: 2026-09-02
"""

from pydantic import SecretStr
from pydantic_settings import SettingsConfigDict

from .settings_base import BaseAppSettings


class EnvTestingSettings(BaseAppSettings):
    # --- Identidad de entorno ---
    python_env: str = "test"

    # --- Logging en test: menos ruido ---
    log_level: str = "WARNING"
    log_format: str = "plain"

    # --- Base de datos: SQLite en memoria ---
    db_url: str = "sqlite+aiosqlite:///:memory:"
    db_create_all: bool = False

    # --- Auth ---
    jwt_secret_key: SecretStr = SecretStr("test-secret-for-shop-suite-please-change-me")

    # --- Pasarela ---
    mp_access_token: SecretStr = SecretStr("TEST-dummy-access-token")
    front_url: str = "http://localhost:5173"
    base_url: str = "https://api.shop.test"

    model_config = SettingsConfigDict(
        env_file=".env.test",
        env_file_encoding="utf-8",
        extra="ignore",
    )


__all__ = ["EnvTestingSettings"]
# Fin del archivo backend/app/shared/config/settings_testing.py
