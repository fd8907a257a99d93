# program/src/protocol/types.py
from __future__ import annotations
from dataclasses import dataclass


# -----------------------------
# Clasificación (unión etiquetada)
# -----------------------------
@dataclass(frozen=True)
class SequenceKind:
    name: str

    def __str__(self) -> str:
        return self.name

    # Por defecto, nada es array-like
    @property
    def array_like(self) -> bool:
        return False


@dataclass(frozen=True)
class NativeKind(SequenceKind):
    # list nativa (o subclase), con o sin marcador
    @property
    def array_like(self) -> bool:
        return True


@dataclass(frozen=True)
class DeclaredKind(SequenceKind):
    # tipo que declaró __array_like__ en su clase
    @property
    def array_like(self) -> bool:
        return True


@dataclass(frozen=True)
class OpaqueKind(SequenceKind):
    pass


# Singletons
NATIVE   = NativeKind("native")
DECLARED = DeclaredKind("declared")
OPAQUE   = OpaqueKind("opaque")
