# -*- coding: utf-8 -*-
"""
backend/app/shared/middleware/__init__.py

Middlewares y handlers de excepciones compartidos.
"""

from .exception_handler import JSONExceptionMiddleware, get_request_id
from .error_handlers import register_error_handlers
from .request_logging import RequestLoggingMiddleware

__all__ = [
    "JSONExceptionMiddleware",
    "get_request_id",
    "register_error_handlers",
    "RequestLoggingMiddleware",
]
