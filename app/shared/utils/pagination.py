# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/pagination.py

Normalización de parámetros page/limit y armado del resultado paginado
{items, page, limit, total, has_more}.

Fecha: 2026-09-02
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Sequence

DEFAULT_LIMIT = 20
MAX_LIMIT = 100


@dataclass(frozen=True)
class PageParams:
    page: int
    limit: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    @classmethod
    def normalize(
        cls,
        page: Optional[Any] = None,
        limit: Optional[Any] = None,
        *,
        default_limit: int = DEFAULT_LIMIT,
        max_limit: int = MAX_LIMIT,
    ) -> "PageParams":
        """
        page < 1 o no numérico -> 1; limit fuera de 1..max_limit se acota,
        no numérico -> default_limit.
        """
        p = _to_int(page, 1)
        lim = _to_int(limit, default_limit)
        return cls(page=max(1, p), limit=min(max(1, lim), max_limit))


def _to_int(value: Any, default: int) -> int:
    if value is None or value == "":
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def page_result(items: Sequence[Any], params: PageParams, total: int) -> dict[str, Any]:
    return {
        "items": list(items),
        "page": params.page,
        "limit": params.limit,
        "total": total,
        "has_more": params.offset + len(items) < total,
    }


__all__ = ["PageParams", "page_result", "DEFAULT_LIMIT", "MAX_LIMIT"]

# Fin del archivo backend/app/shared/utils/pagination.py
