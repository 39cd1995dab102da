import copy

import pytest

from linearstructs.deque import EMPTY_DEQUE_MESSAGE, Deque, normalize


@pytest.mark.parametrize("index", range(-12, 13))
def test_normalize_stays_in_range(index):
    result = normalize(index, 4)
    assert 0 <= result < 4
    assert normalize(index + 4, 4) == result


@pytest.mark.parametrize("index", range(4))
def test_normalize_leaves_in_range_index_alone(index):
    assert normalize(index, 4) == index


def test_normalize_rejects_zero_capacity():
    with pytest.raises(ValueError):
        normalize(3, 0)


def test_new_deque_is_empty():
    d = Deque(10)
    assert len(d) == 0
    assert not d
    assert d.capacity() == 10


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        Deque(-1)


def test_front_on_empty_raises():
    with pytest.raises(IndexError, match=EMPTY_DEQUE_MESSAGE):
        Deque().front()


def test_back_on_empty_raises():
    with pytest.raises(IndexError, match=EMPTY_DEQUE_MESSAGE):
        Deque().back()


def test_pop_on_empty_does_nothing():
    d = Deque()
    d.pop_front()
    d.pop_back()
    assert len(d) == 0
    d.push_back("x")
    assert list(d) == ["x"]


def test_push_back_keeps_order():
    d = Deque()
    for value in [1, 2, 3, 4, 5]:
        d.push_back(value)
    assert list(d) == [1, 2, 3, 4, 5]
    assert d.front() == 1
    assert d.back() == 5


def test_push_front_reverses_order():
    d = Deque()
    for value in [1, 2, 3]:
        d.push_front(value)
    assert list(d) == [3, 2, 1]


def test_capacity_doubles_when_full():
    d = Deque()
    capacities = []
    for value in range(5):
        d.push_back(value)
        capacities.append(d.capacity())
    assert capacities == [1, 2, 4, 4, 8]


def test_wrapping_within_fixed_buffer():
    d = Deque(4)
    d.push_back("a")
    d.push_back("b")
    d.push_front("c")
    d.push_front("d")
    assert list(d) == ["d", "c", "a", "b"]
    assert d.capacity() == 4
    d.push_back("e")
    assert list(d) == ["d", "c", "a", "b", "e"]
    assert d.capacity() == 8


def test_pops_from_both_ends():
    d = Deque(4)
    for word in ["dog", "cat", "pig"]:
        d.push_back(word)
    d.pop_front()
    assert d.front() == "cat"
    d.pop_back()
    assert d.back() == "cat"
    assert len(d) == 1


def test_many_wraps_preserve_contents():
    d = Deque(3)
    expected = []
    for value in range(20):
        d.push_back(value)
        expected.append(value)
        d.pop_front()
        expected.pop(0)
        d.push_front(-value)
        expected.insert(0, -value)
    assert list(d) == expected


def test_clear_keeps_capacity():
    d = Deque()
    for value in range(3):
        d.push_back(value)
    d.clear()
    assert len(d) == 0
    assert d.capacity() == 4
    d.push_back(1.2)
    assert list(d) == [1.2]


def test_copy_is_independent():
    d = Deque()
    for value in [7, 8, 9]:
        d.push_back(value)
    duplicate = copy.copy(d)
    assert duplicate == d
    d.clear()
    assert list(duplicate) == [7, 8, 9]
    assert list(d) == []