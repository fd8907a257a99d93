# program/src/protocol/classifier.py
from __future__ import annotations
from typing import Any

from .marker import declares_array_like
from .types import SequenceKind, NATIVE, DECLARED, OPAQUE

# Etiqueta de la secuencia nativa
LIST_TAG = "[object list]"
OPAQUE_TAG = "[object object]"


# -----------------------------
# Secuencia nativa
# -----------------------------
def type_tag(value: Any) -> str:
    """
    Etiqueta '[object <tipo>]' del builtin más cercano en la jerarquía de `value`.
    Una subclase de usuario de list sigue dando '[object list]'.
    """
    # object cierra siempre el MRO, así que siempre hay un builtin.
    # Una metaclase que explota al leer el MRO cuenta como no nativa.
    try:
        base = next(k for k in type(value).__mro__ if getattr(k, "__module__", None) == "builtins")
        return f"[object {base.__name__}]"
    except Exception:
        return OPAQUE_TAG

def is_array(value: Any) -> bool:
    # Prueba principal: inspección de la etiqueta, sin comparar identidad de tipos
    return type_tag(value) == LIST_TAG

def is_array_secondary(value: Any) -> bool:
    # Primitiva del lenguaje; debe coincidir con is_array en toda list.
    # isinstance puede leer value.__class__ por el __getattribute__ de la instancia
    try:
        return isinstance(value, list)
    except Exception:
        return False


# -----------------------------
# Array-like
# -----------------------------
def classify(value: Any) -> SequenceKind:
    if is_array(value):
        return NATIVE
    if declares_array_like(value):
        return DECLARED
    return OPAQUE

def is_array_like(value: Any) -> bool:
    return classify(value).array_like

def is_array_like_secondary(value: Any) -> bool:
    # Misma regla (marcador OR nativa) con la primitiva isinstance
    return declares_array_like(value) or is_array_secondary(value)
