# program/tests_runtime/test_builtins.py
from src.runtime.builtins import length_of, for_each_of, join_of, str_of, reverse_of
from src.runtime.triplet import Triplet

def test_length_of_native_and_triplet():
    assert length_of([1, 2]) == 2
    assert length_of(Triplet(1, 2, 3)) == 3

def test_for_each_of_both_shapes():
    seen = []
    for_each_of([1, 2], seen.append)
    for_each_of(Triplet(3, 4, 5), seen.append)
    assert seen == [1, 2, 3, 4, 5]

def test_join_of_both_shapes():
    assert join_of([1, 2, 3]) == "1,2,3"
    assert join_of([1, 2, 3], " + ") == "1 + 2 + 3"
    assert join_of(Triplet(1, 2, 3), "*") == "1*2*3"

def test_str_of_native_looks_like_join():
    assert str_of([1, 2]) == "1,2"
    assert str_of(Triplet(1, 2, 3)) == "1,2,3"
    assert str_of(7) == "7"

def test_reverse_of_returns_same_object():
    xs = [1, 2, 3]
    assert reverse_of(xs) is xs
    assert xs == [3, 2, 1]
    t = Triplet(1, 2, 3)
    assert reverse_of(t) is t
    assert t.join() == "3,2,1"

def test_length_of_prefers_declared_length():
    class OnlyLength:
        length = 2

    assert length_of(OnlyLength()) == 2
