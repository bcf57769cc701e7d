# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/api_response.py

Sobre uniforme de respuestas de la API: {code, message, data}.

Uso:

    from app.shared.utils.api_response import ok

    @router.get("/getTypes")
    async def list_types(...):
        return ok(await service.list())

Las respuestas de error usan el mismo sobre (ver
`app.shared.middleware.error_handlers`).

Fecha: 2026-09-02
"""

from typing import Any, Optional

from fastapi.encoders import jsonable_encoder

from app.shared.utils.json_response import UTF8JSONResponse


def envelope(code: int, message: str, data: Any = None) -> dict[str, Any]:
    return {"code": code, "message": message, "data": jsonable_encoder(data)}


def ok(data: Any = None, message: str = "OK", code: int = 200) -> UTF8JSONResponse:
    """Respuesta exitosa con el status HTTP igual a `code`."""
    return UTF8JSONResponse(status_code=code, content=envelope(code, message, data))


def created(data: Any = None, message: str = "Creado") -> UTF8JSONResponse:
    return ok(data, message=message, code=201)


def fail(
    message: str = "NOK",
    code: int = 400,
    data: Any = None,
    headers: Optional[dict[str, str]] = None,
) -> UTF8JSONResponse:
    return UTF8JSONResponse(status_code=code, content=envelope(code, message, data), headers=headers)


__all__ = ["envelope", "ok", "created", "fail"]
# Fin del archivo backend/app/shared/utils/api_response.py
