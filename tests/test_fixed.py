from itertools import count

import pytest

from peekiter import (
    FixedDoubleEndedPeekableIterator,
    FixedPeekableIterator,
    fixed_double_ended,
    fixed_forward,
)


@pytest.mark.parametrize('capacity', [1, 3, 8])
def test_forward_capacity_is_a_hard_ceiling(capacity):
    it = fixed_forward(count(), capacity)

    for n in range(capacity):
        assert it.peek_nth(n) == n
    for n in range(capacity, capacity + 5):
        assert it.peek_nth(n) is None
        assert it.peek_nth(n, 'over') == 'over'

    assert it.peeked_len() == capacity


def test_forward_over_capacity_does_not_pull():
    pulled = []

    def gen():
        for n in count():
            pulled.append(n)
            yield n

    it = fixed_forward(gen(), 2)
    assert it.peek_nth(5) is None
    assert pulled == []


def test_forward_short_source():
    it = fixed_forward(range(2), 4)

    assert it.peek_nth(1) == 1
    assert it.peek_nth(2) is None
    assert it.peek_nth(4) is None


def test_forward_next_frees_capacity():
    it = fixed_forward(count(), 3)

    assert it.peek_nth(2) == 2
    assert it.peek_nth(3) is None
    assert next(it) == 0
    assert it.peek_nth(2) == 3
    assert [next(it) for _ in range(5)] == [1, 2, 3, 4, 5]


def test_forward_ring_wraps():
    it = fixed_forward(count(), 2)

    for n in range(10):
        assert it.peek_nth(1) == n + 1
        assert next(it) == n


def test_forward_range_is_cut_at_capacity():
    it = fixed_forward(range(10), 3)

    assert list(it.peek_range(1, 5)) == [1, 2]
    assert list(it.peek_range(0)) == [0, 1, 2]
    assert list(it.peek_range(3, 6)) == []


def test_forward_while_peek_stops_at_capacity():
    it = fixed_forward(count(), 4)

    assert list(it.while_peek(lambda n: True)) == [0, 1, 2, 3]
    assert list(it.while_next(lambda n: n < 6)) == [0, 1, 2, 3, 4, 5]


def test_forward_capacity_property():
    assert FixedPeekableIterator(range(3), 5).capacity == 5


@pytest.mark.parametrize('capacity', [0, -3])
def test_invalid_capacity(capacity):
    with pytest.raises(ValueError):
        fixed_forward(range(3), capacity)
    with pytest.raises(ValueError):
        fixed_double_ended(range(3), capacity, 1)
    with pytest.raises(ValueError):
        fixed_double_ended(range(3), 1, capacity)


def test_double_ended_capacities():
    it = fixed_double_ended(range(1, 10), 3, 2)

    assert it.front_capacity == 3
    assert it.back_capacity == 2
    assert it.peek_front_nth(1) == 2
    assert it.peek_front_nth(2) == 3
    assert it.peek_front_nth(3) is None
    assert it.peek_back_nth(1) == 8
    assert it.peek_back_nth(2) is None


def test_double_ended_back_capacity_defaults_to_front():
    it = FixedDoubleEndedPeekableIterator(range(5), 2)
    assert it.back_capacity == 2


def test_double_ended_meeting():
    it = fixed_double_ended(range(4), 3, 3)

    assert it.peek_front_nth(1) == 1
    # pulling the third element from the back drains the source, so offset 2
    # is answered from the front cache
    assert it.peek_back_nth(2) == 1
    assert it.back_peeked_len() == 2
    assert it.peek_back_nth(1) == 2
    assert it.peek_front_nth(2) == 2

    assert list(it) == [0, 1, 2, 3]


def test_double_ended_single_element():
    it = fixed_double_ended([5], 1, 1)

    assert it.peek_front() == 5
    assert it.peek_back() == 5
    assert next(it) == 5
    assert it.peek_back() is None


def test_double_ended_range_is_cut_at_capacity():
    it = fixed_double_ended(range(10), 2, 3)

    assert list(it.peek_front_range(0, 5)) == [0, 1]
    assert list(it.peek_back_range(0)) == [9, 8, 7]


def test_double_ended_consume_both_ends():
    it = fixed_double_ended(range(10), 2, 2)

    for n in range(5):
        assert it.peek_front_nth(1) == n + 1
        assert it.peek_back_nth(1) == 8 - n
        assert next(it) == n
        assert it.next_back() == 9 - n

    assert next(it, None) is None
    assert it.next_back() is None
