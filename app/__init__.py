# -*- coding: utf-8 -*-
"""
backend/app/__init__.py

Paquete principal 'app' del backend de la tienda (API REST con FastAPI).

Fecha: 2026-09-02
"""
