# -*- coding: utf-8 -*-
"""
backend/app/shared/middleware/error_handlers.py

Traducción de excepciones a respuestas HTTP con el sobre {code, message, data}.

- AppError (y subclases)      -> su status_code
- RequestValidationError      -> 400 con la lista de errores en data
- HTTPException               -> conserva su status
- IntegrityError (SQLAlchemy) -> 409

Fecha: 2026-09-02
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.shared.errors import AppError
from app.shared.utils.api_response import fail

logger = logging.getLogger(__name__)


async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error(
            "app_error %s path=%s message=%s",
            type(exc).__name__, request.url.path, exc.message,
        )
    else:
        logger.info(
            "app_error %s path=%s message=%s",
            type(exc).__name__, request.url.path, exc.message,
        )
    return fail(exc.message, code=exc.status_code, data=exc.data)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]
    return fail("Datos de entrada inválidos", code=400, data=jsonable_encoder(errors))


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    message = exc.detail if isinstance(exc.detail, str) else "Error"
    data = None if isinstance(exc.detail, str) else exc.detail
    return fail(message, code=exc.status_code, data=data, headers=getattr(exc, "headers", None))


async def integrity_error_handler(request: Request, exc: IntegrityError):
    logger.info("integrity_error path=%s error=%s", request.url.path, exc.orig)
    return fail("El recurso ya existe o viola una restricción única", code=409)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, request_validation_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(IntegrityError, integrity_error_handler)  # type: ignore[arg-type]


__all__ = ["register_error_handlers"]

# Fin del archivo backend/app/shared/middleware/error_handlers.py
