# -*- coding: utf-8 -*-
"""
backend/app/shared/config/logging_config.py

Logging de la tienda vía logging.config.dictConfig.

Formatos:
- plain / pretty: línea legible para desarrollo
- json: un objeto por línea (python-json-logger), pensado para producción

Los loggers ruidosos de librerías (sqlalchemy.engine, httpx) quedan en
WARNING salvo que se pida SQL explícito.

Fecha: 2026-09-02
"""

import logging.config
from typing import Any, Literal

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LogFormat = Literal["plain", "pretty", "json"]

PLAIN_FORMAT = "[%(asctime)s] %(levelname)s [%(name)s]: %(message)s"
JSON_FIELDS = "%(asctime)s %(name)s %(levelname)s %(message)s"


def build_logging_config(level: str, fmt: str, *, echo_sql: bool = False) -> dict[str, Any]:
    formatter = "json" if fmt == "json" else "plain"
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "plain": {"format": PLAIN_FORMAT, "datefmt": "%Y-%m-%d %H:%M:%S"},
            "json": {
                "()": "pythonjsonlogger.json.JsonFormatter",
                "format": JSON_FIELDS,
                "rename_fields": {"levelname": "level", "name": "logger"},
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": formatter,
                "stream": "ext://sys.stdout",
            }
        },
        "loggers": {
            "sqlalchemy.engine": {"level": "INFO" if echo_sql else "WARNING"},
            "httpx": {"level": "WARNING"},
            "httpcore": {"level": "WARNING"},
        },
        "root": {"handlers": ["console"], "level": level.upper()},
    }


def setup_logging(level: LogLevel = "INFO", fmt: LogFormat = "plain", *, echo_sql: bool = False) -> None:
    """
    Configura el logging raíz.

        >>> setup_logging("INFO", "plain")
        >>> setup_logging("WARNING", "json")
    """
    logging.config.dictConfig(build_logging_config(level, fmt, echo_sql=echo_sql))


__all__ = ["setup_logging", "build_logging_config"]
# Fin del archivo backend/app/shared/config/logging_config.py
