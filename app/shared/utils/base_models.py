# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/base_models.py

Modelo base Pydantic v2 para los esquemas de la API.

- Elimina espacios en campos de texto (`str_strip_whitespace=True`).
- Permite construir desde objetos ORM (`from_attributes=True`).
- Acepta tanto el nombre del campo como su alias (camelCase del frontend).

Tipos de salida:
- Money: Decimal internamente, número JSON en las respuestas (igual que un
  Decimal suelto pasado por jsonable_encoder).
- Quantity: cantidad de una línea; entera en JSON si no tiene fracción.

Fecha: 2026-09-02
"""

from decimal import Decimal
from typing import Annotated, Union

from pydantic import BaseModel, ConfigDict, EmailStr, Field, PlainSerializer


def _json_number(value: Union[Decimal, float, int]) -> Union[int, float]:
    number = float(value)
    return int(number) if number.is_integer() else number


Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]
Quantity = Annotated[float, PlainSerializer(_json_number, when_used="json")]


class ShopModel(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


__all__ = ["ShopModel", "Money", "Quantity", "EmailStr", "Field"]
# Fin del archivo backend/app/shared/utils/base_models.py
