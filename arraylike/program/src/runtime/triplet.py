# program/src/runtime/triplet.py
from __future__ import annotations
from typing import Any

from .fixed import FixedSequence, slot_property


class Triplet(FixedSequence):
    """
    Contenedor de ejemplo de la convención array-like: exactamente 3 elementos.
    Soporta length, acceso indexado, for_each, reverse, to_string y join.
    """
    ARITY = 3

    first  = slot_property(0, "Posición 0")
    second = slot_property(1, "Posición 1")
    third  = slot_property(2, "Posición 2")

    def __init__(self, a: Any, b: Any, c: Any) -> None:
        super().__init__(a, b, c)


def triplet(a: Any, b: Any, c: Any) -> Triplet:
    # constructor estilo función; mismo resultado que Triplet(a, b, c)
    return Triplet(a, b, c)
