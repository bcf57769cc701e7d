# -*- coding: utf-8 -*-
"""
backend/app/shared/__init__.py

Infraestructura común a todos los módulos de la tienda: configuración,
base de datos, errores de dominio, middlewares y utilidades HTTP.

Fecha: 2026-09-02
"""
