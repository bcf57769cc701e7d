# -*- coding: utf-8 -*-
"""
backend/app/shared/config/settings_base.py

Base de configuración (Pydantic v2) para la tienda.
- Esta clase NO instancia singletons ni resuelve .env; eso lo hace config_loader.
- Es la base para settings_dev.py, settings_testing.py y settings_prod.py.

Fecha: 2026-09-02
"""

from typing import Literal, Optional

from pydantic import Field, SecretStr, computed_field
from pydantic_settings import BaseSettings


# Tipos de entorno soportados
EnvName = Literal["development", "test", "production"]


class BaseAppSettings(BaseSettings):
    # =========================
    # Núcleo de la aplicación
    # =========================
    python_env: EnvName = Field(default="development", validation_alias="PYTHON_ENV")
    app_name: str = Field(default="Prosaav Shop", validation_alias="APP_NAME")
    app_version: str = Field(default="1.0.0", validation_alias="APP_VERSION")
    app_host: str = Field(default="0.0.0.0", validation_alias="APP_HOST")
    app_port: int = Field(default=3000, validation_alias="PORT")
    debug: bool = Field(default=False, validation_alias="DEBUG")

    # =========================
    # Base de datos
    # =========================
    db_url: str = Field(default="sqlite+aiosqlite:///./shop.db", validation_alias="DB_URL")
    db_echo_sql: bool = Field(default=False, validation_alias="DB_ECHO_SQL")
    db_create_all: bool = Field(default=True, validation_alias="DB_CREATE_ALL")

    @computed_field  # type: ignore[misc]
    @property
    def database_url(self) -> str:
        """
        URL de conexión para SQLAlchemy async.
        Normaliza esquemas postgres:// / postgresql:// hacia asyncpg.
        """
        url = self.db_url
        if url.startswith("postgres://") or url.startswith("postgresql://"):
            url = (
                url.replace("postgres://", "postgresql+asyncpg://", 1)
                   .replace("postgresql://", "postgresql+asyncpg://", 1)
            )
        return url

    # =========================
    # CORS / Frontend / Backend público
    # =========================
    allowed_origins: str = Field(
        default="http://localhost:5173,http://127.0.0.1:5173",
        validation_alias="CORS_ORIGINS",
    )
    front_url: Optional[str] = Field(default=None, validation_alias="FRONT_URL")
    base_url: Optional[str] = Field(default=None, validation_alias="BASE_URL")

    # =========================
    # Auth / JWT
    # =========================
    jwt_secret_key: SecretStr = Field(default=SecretStr("please-change-me"), validation_alias="JWT_SECRET_KEY")
    jwt_algorithm: Literal["HS256", "HS384", "HS512"] = Field(default="HS256", validation_alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(default=30, validation_alias="ACCESS_TOKEN_EXPIRE_MINUTES")
    refresh_token_expire_minutes: int = Field(default=1440, validation_alias="REFRESH_TOKEN_EXPIRE_MINUTES")

    # =========================
    # Pasarela de pago (MercadoPago)
    # =========================
    mp_access_token: Optional[SecretStr] = Field(default=None, validation_alias="MP_ACCESS_TOKEN")
    mp_api_base_url: str = Field(default="https://api.mercadopago.com", validation_alias="MP_API_BASE_URL")
    mp_sandbox: bool = Field(default=True, validation_alias="MP_SANDBOX")
    mp_timeout_sec: float = Field(default=10.0, validation_alias="MP_TIMEOUT_SEC")
    mp_statement_descriptor: str = Field(default="PROSAAV", validation_alias="MP_STATEMENT_DESCRIPTOR")
    default_currency: str = Field(default="CLP", validation_alias="DEFAULT_CURRENCY")

    # Paginación
    page_size_default: int = Field(20, validation_alias="DEFAULT_PAGE_SIZE")
    page_size_max: int = Field(100, validation_alias="MAX_PAGE_SIZE")

    # =========================
    # Observabilidad / Logging
    # =========================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_format: Literal["json", "pretty", "plain"] = Field(default="plain", validation_alias="LOG_FORMAT")

    # ===== Helpers de entorno =====
    @computed_field  # type: ignore[misc]
    @property
    def is_dev(self) -> bool:
        return self.python_env == "development"

    @computed_field  # type: ignore[misc]
    @property
    def is_test(self) -> bool:
        return self.python_env == "test"

    @computed_field  # type: ignore[misc]
    @property
    def is_prod(self) -> bool:
        return self.python_env == "production"

    @property
    def jwt_secret(self) -> str:
        return self.jwt_secret_key.get_secret_value()

    # ===== Utilidad para normalizar CORS =====
    def get_cors_origins(self) -> list[str]:
        """Convierte allowed_origins en lista procesable para CORS middleware."""
        origins = [o.strip().strip('"').strip("'") for o in self.allowed_origins.split(",") if o.strip()]
        if self.front_url and self.front_url not in origins:
            origins.append(self.front_url.rstrip("/"))
        return origins or ["*"]

    def _security_checks(self) -> None:
        """
        Validaciones mínimas de seguridad y coherencia.
        Se invoca desde config_loader tras instanciar el settings.
        """
        import logging
        logger = logging.getLogger(__name__)

        jwt_key = self.jwt_secret_key.get_secret_value()
        weak_jwt = not jwt_key or jwt_key == "please-change-me" or len(jwt_key) < 32

        if self.is_prod:
            if weak_jwt:
                raise ValueError("JWT_SECRET_KEY debe tener ≥32 caracteres en producción")
            if self.database_url.startswith("sqlite"):
                raise ValueError("DB_URL no puede apuntar a SQLite en producción")

        if self.is_dev:
            if weak_jwt:
                logger.info("JWT_SECRET_KEY es débil o usa valor por defecto; usa una clave más segura")
            if not self.mp_access_token:
                logger.info("MP_ACCESS_TOKEN vacío: la creación de preferencias fallará con error de configuración")


__all__ = ["BaseAppSettings", "EnvName"]

# Fin del archivo backend/app/shared/config/settings_base.py
