# program/tests_runtime/test_fixed_sequence.py
import pytest

from src.runtime.fixed import FixedSequence, ShapeViolation, slot_property
from src.runtime.triplet import Triplet
from src.protocol.classifier import is_array_like, classify
from src.protocol.types import DECLARED


class Pair(FixedSequence):
    ARITY = 2
    left = slot_property(0)
    right = slot_property(1)


def test_generic_arity():
    p = Pair("a", "b")
    assert p.length == 2
    assert len(p) == 2
    assert p.join("|") == "a|b"
    p.length = 2
    with pytest.raises(ShapeViolation):
        p.length = 3

def test_generic_arity_construction_check():
    with pytest.raises(TypeError):
        Pair(1)

def test_subclasses_inherit_flag():
    assert is_array_like(Pair(1, 2))
    assert classify(Pair(1, 2)) == DECLARED

def test_slot_property_aliases_storage():
    p = Pair(1, 2)
    p.right = 20
    assert p[1] == 20
    p[0] = 10
    assert p.left == 10

def test_different_types_are_not_equal():
    assert Pair(1, 2) != Triplet(1, 2, 3)

def test_shape_violation_is_value_error():
    assert issubclass(ShapeViolation, ValueError)
    with pytest.raises(ValueError):
        Pair(1, 2).splice(0, 1)

def test_message_mentions_arity():
    with pytest.raises(ShapeViolation) as ei:
        Triplet(1, 2, 3).length = 5
    assert "5" in str(ei.value)
    assert "3" in str(ei.value)
