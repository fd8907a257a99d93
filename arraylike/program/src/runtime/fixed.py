# program/src/runtime/fixed.py
from __future__ import annotations
from collections.abc import Sequence
from typing import Any, Callable, List, Optional

from src.protocol.marker import array_like


# -----------------------------
# Excepciones
# -----------------------------
class ShapeViolation(ValueError):
    pass


# -----------------------------
# Contenedor de aridad fija
# -----------------------------
@array_like
class FixedSequence(Sequence):
    """
    Secuencia de aridad fija que se declara array-like.

    Decisiones:
      - Un único list de ARITY posiciones es el almacenamiento; índices y
        accesores con nombre leen y escriben ahí.
      - La forma no cambia nunca: cualquier operación que alteraría la aridad
        lanza ShapeViolation, sin recortar ni rellenar en silencio.
      - El contenido sí es mutable y opaco (no se validan tipos).
    """
    ARITY: int = 0

    def __init__(self, *values: Any) -> None:
        if len(values) != self.ARITY:
            raise TypeError(
                f"Aridad inválida: {type(self).__name__} espera {self.ARITY} valores, recibidos {len(values)}"
            )
        self._slots: List[Any] = list(values)

    # ---- length ----
    @property
    def length(self) -> int:
        return self.ARITY

    @length.setter
    def length(self, value: Any) -> None:
        if value != self.ARITY:
            raise ShapeViolation(
                f"no se puede fijar length a {value}, {type(self).__name__} debe tener length {self.ARITY}"
            )
        # mismo valor: no-op

    def __len__(self) -> int:
        return self.ARITY

    # ---- acceso indexado ----
    def __getitem__(self, idx):
        # slices devuelven una copia list, como list mismo
        return self._slots[idx]

    def __setitem__(self, idx, value: Any) -> None:
        if isinstance(idx, slice):
            self._reject_reshape("asignar un slice")
        self._slots[idx] = value

    def __delitem__(self, idx) -> None:
        self._reject_reshape("borrar posiciones")

    def __iter__(self):
        return iter(self._slots)

    # ---- operaciones tipo Array ----
    def for_each(self, fn: Callable[[Any], Any]) -> None:
        for i in range(self.ARITY):
            fn(self._slots[i])

    def join(self, sep: Optional[str] = None) -> str:
        s = "," if sep is None else str(sep)
        return s.join(str(v) for v in self._slots)

    def to_string(self) -> str:
        return self.join()

    def __str__(self) -> str:
        return self.to_string()

    def reverse(self) -> "FixedSequence":
        # en sitio, devuelve la instancia (igual que list.reverse + retorno)
        self._slots.reverse()
        return self

    def to_list(self) -> List[Any]:
        return list(self._slots)

    # ---- operaciones que cambian la aridad ----
    def splice(self, *args: Any, **kwargs: Any) -> None:
        self._reject_reshape("splice")

    def append(self, value: Any) -> None:
        self._reject_reshape("append")

    def extend(self, values: Any) -> None:
        self._reject_reshape("extend")

    def insert(self, idx: int, value: Any) -> None:
        self._reject_reshape("insert")

    def pop(self, idx: int = -1) -> Any:
        self._reject_reshape("pop")

    def remove(self, value: Any) -> None:
        self._reject_reshape("remove")

    def clear(self) -> None:
        self._reject_reshape("clear")

    def _reject_reshape(self, op: str) -> None:
        raise ShapeViolation(
            f"no se puede {op} en {type(self).__name__}, debe tener length {self.ARITY}"
        )

    # ---- utilidades ----
    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, FixedSequence):
            return NotImplemented
        return type(self) is type(other) and self._slots == other._slots

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(v) for v in self._slots)})"


def slot_property(index: int, doc: Optional[str] = None) -> property:
    """Accesor con nombre que lee/escribe la posición `index` del almacenamiento."""
    def _get(self: FixedSequence) -> Any:
        return self._slots[index]

    def _set(self: FixedSequence, value: Any) -> None:
        self._slots[index] = value

    return property(_get, _set, doc=doc)
