# program/src/runtime/builtins.py
from __future__ import annotations
from typing import Any, Callable, Optional

# Operaciones de Array sobre cualquier valor array-like.
# Un list nativo no tiene join/for_each/length; el contenedor sí.

def length_of(arr: Any) -> int:
    if hasattr(arr, "length"):
        return arr.length
    return len(arr)

def for_each_of(arr: Any, fn: Callable[[Any], Any]) -> None:
    if hasattr(arr, "for_each"):
        arr.for_each(fn)
        return
    for x in arr:
        fn(x)

def join_of(arr: Any, sep: Optional[str] = None) -> str:
    if hasattr(arr, "join"):
        return arr.join(sep)
    s = "," if sep is None else str(sep)
    return s.join(str(x) for x in arr)

def str_of(arr: Any) -> str:
    # list nativo se muestra como en JS: 1,2,3
    if issubclass(type(arr), list):
        return join_of(arr)
    return str(arr)

def reverse_of(arr: Any) -> Any:
    arr.reverse()
    return arr
