# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/repositories/__init__.py
"""

from .user_repository import UserRepository

__all__ = ["UserRepository"]
