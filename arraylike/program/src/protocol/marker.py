# program/src/protocol/marker.py
from __future__ import annotations
from typing import Any, TypeVar

# Nombre del atributo de clase que activa la convención
ARRAY_LIKE_MARKER = "__array_like__"

T = TypeVar("T", bound=type)


def array_like(cls: T) -> T:
    """
    Decorador de clase: marca `cls` como array-like.
    Pensado para tipos de terceros que no heredan de FixedSequence.
    """
    setattr(cls, ARRAY_LIKE_MARKER, True)
    return cls


def declares_array_like(value: Any) -> bool:
    """
    True si el *tipo* de `value` lleva el marcador con valor truthy.
    Nunca lanza: un marcador que explota al leerse o al evaluarse cuenta como ausente.
    """
    if value is None:
        return False
    try:
        flag = getattr(type(value), ARRAY_LIKE_MARKER, False)
        return bool(flag)
    except Exception:
        return False
