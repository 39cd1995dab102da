import copy

import pytest

from linearstructs.ordered_set import OrderedSet


def test_empty_set():
    s = OrderedSet()
    assert len(s) == 0
    assert not s
    assert list(s) == []


def test_insert_keeps_sorted_and_distinct():
    s = OrderedSet()
    for value in [5, 3, 9, 3, 1, 5, 7]:
        s.insert(value)
    assert list(s) == sorted({5, 3, 9, 1, 7})
    assert len(s) == 5


def test_constructor_from_items():
    s = OrderedSet(["dog", "cat", "dog", "ant"])
    assert list(s) == ["ant", "cat", "dog"]


def test_find_returns_position_or_none():
    s = OrderedSet([10, 20, 30])
    assert s.find(10) == 0
    assert s.find(30) == 2
    assert s.find(25) is None
    assert s.find(40) is None


def test_contains():
    s = OrderedSet(["AngleFish", "Cod"])
    assert "Cod" in s
    assert "Shark" not in s


def test_erase_present_and_absent():
    s = OrderedSet([1, 2, 3])
    s.erase(2)
    assert list(s) == [1, 3]
    s.erase(42)
    assert list(s) == [1, 3]


def test_clear():
    s = OrderedSet([1, 2])
    s.clear()
    assert len(s) == 0
    s.insert(5)
    assert list(s) == [5]


@pytest.mark.parametrize(
    "left, right",
    [
        ([], []),
        ([1, 3, 5], [2, 3, 4]),
        ([1, 2], []),
        ([], [7, 8]),
        ([1.5, 2.5, 9.0], [2.5, 9.0, 10.0]),
    ],
)
def test_set_operations_match_builtin_sets(left, right):
    a, b = OrderedSet(left), OrderedSet(right)
    assert list(a | b) == sorted(set(left) | set(right))
    assert list(a & b) == sorted(set(left) & set(right))
    assert list(a - b) == sorted(set(left) - set(right))
    assert list(b - a) == sorted(set(right) - set(left))


def test_named_methods_equal_operators():
    a = OrderedSet("abcdefghij")
    b = OrderedSet("efghijklmn")
    assert a.union(b) == a | b
    assert a.intersection(b) == a & b
    assert a.difference(b) == a - b


def test_operations_do_not_modify_operands():
    a = OrderedSet([1, 2, 3])
    b = OrderedSet([3, 4])
    _ = a | b
    _ = a & b
    _ = a - b
    assert list(a) == [1, 2, 3]
    assert list(b) == [3, 4]


def test_operator_with_other_type_raises():
    with pytest.raises(TypeError):
        OrderedSet([1]) | {1}


def test_copy_is_independent():
    original = OrderedSet([1, 2, 3])
    duplicate = copy.copy(original)
    original.clear()
    assert list(duplicate) == [1, 2, 3]
    assert len(original) == 0