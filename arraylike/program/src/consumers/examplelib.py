# program/src/consumers/examplelib.py
from __future__ import annotations
from typing import Any, Callable, Optional

from src.protocol.classifier import (
    is_array, is_array_secondary, is_array_like, is_array_like_secondary,
)
from src.runtime.builtins import length_of, for_each_of, join_of, str_of, reverse_of
from .errors import RejectionReporter, E_NOT_ARRAY_LIKE, E_NOT_ARRAY

Gate = Callable[[Any], bool]


class ExampleLib:
    """
    Biblioteca consumidora de ejemplo: suma, producto e inversión de arreglos.

    - primary: compuerta para describe_sum / describe_reversed
    - secondary: compuerta para describe_product
    Un valor que no pasa la compuerta se rechaza en el reporter y se devuelve None.
    """
    def __init__(
        self,
        reporter: RejectionReporter,
        primary: Gate,
        secondary: Gate,
        label: str,
        code: str,
    ) -> None:
        self.reporter = reporter
        self.primary = primary
        self.secondary = secondary
        self.label = label
        self.code = code

    def _accepts(self, gate: Gate, op: str, arr: Any) -> bool:
        if gate(arr):
            return True
        self.reporter.reject(self.code, f"{op}: Sorry {str_of(arr)} is not {self.label}", op=op)
        return False

    def describe_sum(self, arr: Any) -> Optional[str]:
        if not self._accepts(self.primary, "describe_sum", arr):
            return None
        total = 0
        for i in range(length_of(arr)):
            total += arr[i]
        return f"{join_of(arr, ' + ')} = {total}"

    def describe_product(self, arr: Any) -> Optional[str]:
        if not self._accepts(self.secondary, "describe_product", arr):
            return None
        product = 1

        def _mul(x: Any) -> None:
            nonlocal product
            product *= x

        for_each_of(arr, _mul)
        return f"{join_of(arr, ' * ')} = {product}"

    def describe_reversed(self, arr: Any) -> Optional[str]:
        if not self._accepts(self.primary, "describe_reversed", arr):
            return None
        before = str_of(arr)
        after = str_of(reverse_of(arr))
        reverse_of(arr)  # se deja como estaba
        return f"reverse: {before} => {after}"


def conforming(reporter: RejectionReporter) -> ExampleLib:
    # Acepta cualquier valor array-like (marcador o list nativo)
    return ExampleLib(reporter, is_array_like, is_array_like_secondary, "ArrayLike", E_NOT_ARRAY_LIKE)

def compatible(reporter: RejectionReporter) -> ExampleLib:
    # Sólo list nativo; no conoce la convención
    return ExampleLib(reporter, is_array, is_array_secondary, "an array", E_NOT_ARRAY)
