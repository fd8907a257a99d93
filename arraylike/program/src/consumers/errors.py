# program/src/consumers/errors.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List

# Códigos de rechazo de los consumidores
E_NOT_ARRAY_LIKE = "E100"
E_NOT_ARRAY      = "E101"

@dataclass
class Rejection:
    code: str
    message: str
    op: str

class RejectionReporter:
    """Acumula rechazos de valores sin abortar al consumidor."""
    def __init__(self) -> None:
        self.errors: List[Rejection] = []

    def reject(self, code: str, message: str, op: str = "") -> None:
        self.errors.append(Rejection(code, message, op))

    def has_errors(self) -> bool:
        return bool(self.errors)

    def __len__(self) -> int:
        return len(self.errors)

    def clear(self) -> None:
        self.errors.clear()

    def summary(self) -> str:
        return "\n".join(f"{e.code} @ {e.op} - {e.message}" for e in self.errors)
