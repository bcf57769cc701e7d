# -*- coding: utf-8 -*-
"""
backend/app/core/logging.py

Fachada de logging bajo `app.core`. Si no se indican nivel/formato se
toman de la configuración activa (LOG_LEVEL / LOG_FORMAT / DB_ECHO_SQL).

Fecha: 2026-09-02
"""

from typing import Optional

from app.shared.config.logging_config import setup_logging as _setup_logging


def setup_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    from app.core.settings import get_settings

    settings = get_settings()
    _setup_logging(
        level=level or settings.log_level,  # type: ignore[arg-type]
        fmt=fmt or settings.log_format,  # type: ignore[arg-type]
        echo_sql=settings.db_echo_sql,
    )


__all__ = ["setup_logging"]

# Fin del archivo backend/app/core/logging.py
