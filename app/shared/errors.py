# -*- coding: utf-8 -*-
"""
backend/app/shared/errors.py

Errores de dominio compartidos por todos los módulos.

Objetivo:
- Definir excepciones semánticas que servicios y fachadas pueden lanzar
  sin acoplarse a FastAPI.
- Cada excepción declara su `status_code`; el handler registrado en
  `app.shared.middleware.error_handlers` la traduce al sobre
  {code, message, data}.

Fecha: 2026-09-02
"""

from __future__ import annotations

from typing import Any, Optional


class AppError(Exception):
    """
    Error base de la aplicación.
    """

    status_code: int = 500
    default_message: str = "Error interno"

    def __init__(self, message: Optional[str] = None, data: Any = None) -> None:
        self.message = message or self.default_message
        self.data = data
        super().__init__(self.message)


class ValidationError(AppError):
    """
    Entrada mal formada o incompleta.
    """

    status_code = 400
    default_message = "Solicitud inválida"


class AuthError(AppError):
    """
    Token ausente, inválido o expirado; credenciales incorrectas.
    """

    status_code = 401
    default_message = "Acceso no autorizado"


class AuthorizationError(AppError):
    """
    Usuario autenticado pero sin el rol/propiedad requerida.
    """

    status_code = 403
    default_message = "No autorizado"


class NotFoundError(AppError):
    status_code = 404
    default_message = "Recurso no encontrado"


class ConflictError(AppError):
    """
    Violación de unicidad (email, username, slug, preference_id...).
    """

    status_code = 409
    default_message = "El recurso ya existe"


class ConfigurationError(AppError):
    """
    Falta configuración obligatoria del despliegue (URLs, credenciales).
    """

    status_code = 500
    default_message = "Configuración incompleta"


class UpstreamError(AppError):
    """
    Falla de la pasarela externa o respuesta con forma inesperada.
    """

    status_code = 500
    default_message = "Error en servicio externo"


__all__ = [
    "AppError",
    "ValidationError",
    "AuthError",
    "AuthorizationError",
    "NotFoundError",
    "ConflictError",
    "ConfigurationError",
    "UpstreamError",
]

# Fin del archivo backend/app/shared/errors.py
