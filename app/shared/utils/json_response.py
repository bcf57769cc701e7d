# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/json_response.py

JSONResponse con Content-Type: application/json; charset=utf-8.

Se usa como default_response_class de la app y como clase de respuesta
del sobre {code, message, data}, de modo que los mensajes con acentos
("Categoría no encontrada") lleguen íntegros a clientes que no asumen
UTF-8 por defecto.

Fecha: 2026-09-02
"""

from fastapi.responses import JSONResponse


class UTF8JSONResponse(JSONResponse):
    media_type = "application/json; charset=utf-8"


__all__ = ["UTF8JSONResponse"]
