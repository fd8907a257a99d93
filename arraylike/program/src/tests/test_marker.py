# program/tests/test_marker.py
from src.protocol.marker import ARRAY_LIKE_MARKER, array_like, declares_array_like
from src.protocol.classifier import is_array_like

def test_marker_name():
    assert ARRAY_LIKE_MARKER == "__array_like__"

def test_decorator_sets_flag_and_returns_class():
    class Pair:
        def __init__(self, a, b):
            self.items = [a, b]

    out = array_like(Pair)
    assert out is Pair
    assert getattr(Pair, ARRAY_LIKE_MARKER) is True
    assert declares_array_like(Pair(1, 2))
    assert is_array_like(Pair(1, 2))

def test_flag_is_read_from_type_not_instance():
    class Plain:
        pass

    p = Plain()
    setattr(p, ARRAY_LIKE_MARKER, True)
    assert not declares_array_like(p)

def test_flag_is_inherited():
    @array_like
    class Base:
        pass

    class Child(Base):
        pass

    assert declares_array_like(Child())

def test_declares_none_and_primitives():
    assert declares_array_like(None) is False
    assert declares_array_like(0) is False
    assert declares_array_like([]) is False  # list nativo no lleva marcador
