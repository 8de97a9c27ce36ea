from operator import length_hint

import pytest

from peekiter import DoubleEndedPeekableIterator, SequenceSource, double_ended


class CountingSource(SequenceSource):
    """A sequence source that records every pull.
    """
    def __init__(self, seq):
        super().__init__(seq)
        self.pulls = 0

    def pull_front(self):
        self.pulls += 1
        return super().pull_front()

    def pull_back(self):
        self.pulls += 1
        return super().pull_back()


def test_peek_both_ends():
    it = double_ended(range(1, 6))

    assert it.peek_front() == 1
    assert it.peek_back() == 5
    assert next(it) == 1
    assert it.next_back() == 5
    assert list(it) == [2, 3, 4]
    assert it.next_back() is None


def test_peek_nth_each_end():
    it = double_ended(range(6))

    assert it.peek_front_nth(0) == 0
    assert it.peek_front_nth(1) == 1
    assert it.peek_front_nth(4) == 4
    assert it.peek_front_nth(10) is None

    it = double_ended(range(6))
    assert it.peek_back_nth(0) == 5
    assert it.peek_back_nth(2) == 3


def test_single_element():
    it = double_ended([42])

    assert it.peek_front() == 42
    assert it.peek_back() == 42
    assert next(it) == 42
    assert it.peek_back() is None
    assert it.peek_front() is None
    assert it.next_back('done') == 'done'


def test_single_element_consumed_from_back():
    it = double_ended([42])

    assert it.peek_front() == 42
    assert it.next_back() == 42
    assert it.peek_front() is None
    with pytest.raises(StopIteration):
        next(it)


def test_front_peek_reaches_into_back_cache():
    it = double_ended(range(6))

    assert it.peek_back_nth(2) == 3
    assert it.back_peeked_len() == 3

    assert it.peek_front_nth(2) == 2
    assert it.peek_front_nth(3) == 3
    assert it.peek_front_nth(5) == 5
    assert it.peek_front_nth(6) is None

    # nothing was pulled twice
    assert it.front_peeked_len() + it.back_peeked_len() == 6


def test_back_peek_reaches_into_front_cache():
    it = double_ended(range(6))

    assert it.peek_front_nth(0) == 0
    assert it.peek_back_nth(5) == 0
    assert it.peek_back_nth(6) is None


def test_caches_stay_disjoint():
    it = double_ended(range(10))
    fronts = [it.peek_front_nth(n) for n in range(10)]

    it = double_ended(range(10))
    it.peek_front_nth(3)
    it.peek_back_nth(3)
    assert [it.peek_front_nth(n) for n in range(10)] == fronts
    assert [it.peek_back_nth(n) for n in range(10)] == fronts[::-1]
    assert it.front_peeked_len() + it.back_peeked_len() == 10

    assert list(it) == list(range(10))


def test_consumption_after_meeting():
    it = double_ended(range(5))
    it.peek_front_nth(1)
    it.peek_back_nth(1)
    it.peek_front_nth(4)

    assert [next(it) for _ in range(3)] == [0, 1, 2]
    assert it.next_back() == 4
    assert next(it) == 3
    assert next(it, None) is None
    assert it.next_back() is None


def test_no_pulls_after_exhaustion():
    source = CountingSource([1, 2])
    it = DoubleEndedPeekableIterator(source)

    assert it.peek_front_nth(5) is None
    pulls = source.pulls
    assert it.peek_back_nth(5) is None
    assert it.peek_back() == 2
    assert it.next_back() == 2
    assert next(it) == 1
    assert it.next_back() is None
    assert source.pulls == pulls


def test_peek_front_range():
    it = double_ended(range(5))

    assert list(it.peek_front_range(1, 4)) == [1, 2, 3]
    assert list(it.peek_range(0, 2)) == [0, 1]


def test_peek_front_range_through_back_cache():
    it = double_ended(range(6))
    it.peek_back_nth(2)

    assert list(it.peek_front_range(1, 10)) == [1, 2, 3, 4, 5]
    assert list(it.peek_front_range(0)) == [0, 1, 2, 3, 4, 5]


def test_peek_back_range():
    it = double_ended(range(6))
    it.peek_front_nth(1)

    assert list(it.peek_back_range(0, 3)) == [5, 4, 3]
    assert list(it.peek_back_range(3)) == [2, 1, 0]


def test_peek_back_range_shrinks_after_consumption():
    it = double_ended(range(6))
    view = it.peek_back_range(0, 3)
    it.next_back()

    assert len(view) == 2
    assert list(reversed(view)) == [3, 4]


def test_peek_range_invalid():
    it = double_ended(range(6))
    with pytest.raises(ValueError):
        it.peek_front_range(4, 2)
    with pytest.raises(ValueError):
        it.peek_back_nth(-1)


def test_reversed():
    it = double_ended(range(5))
    next(it)

    assert list(reversed(it)) == [4, 3, 2, 1]
    assert next(it, None) is None


def test_rejects_one_way_iterators():
    with pytest.raises(TypeError):
        double_ended(iter(range(3)))


def test_consume_peeked():
    it = double_ended(range(10))
    it.peek_front_nth(2)
    it.peek_back_nth(2)

    it.consume_front_peeked(1)
    it.consume_back_peeked()
    assert it.front_peeked_len() == 2
    assert it.back_peeked_len() == 0
    assert next(it) == 1
    assert it.next_back() == 6


@pytest.mark.parametrize('front, back, expected', [
    (None, None, (0, 0)),
    (1, None, (2, 0)),
    (None, 2, (0, 1)),
    (0, 0, (3, 3)),
    (5, 5, (0, 0)),
])
def test_consume_peeked_both_ends(front, back, expected):
    it = double_ended(range(10))
    it.peek_front_nth(2)
    it.peek_back_nth(2)

    it.consume_peeked(front, back)
    assert (it.front_peeked_len(), it.back_peeked_len()) == expected


def test_has_peeked():
    it = double_ended(range(10))
    it.peek_front_nth(1)

    assert it.has_front_peeked(1)
    assert not it.has_front_peeked(2)
    assert not it.has_back_peeked(0)


def test_conditional_methods():
    it = double_ended(range(10))

    assert list(it.while_next(lambda n: n < 3)) == [0, 1, 2]
    assert list(it.while_next_back(lambda n: n > 7)) == [9, 8]
    assert list(it.while_peek_front(lambda n: n < 5)) == [3, 4]
    assert list(it.while_peek_back(lambda n: n > 5)) == [7, 6]
    assert it.next_if_eq(3) == 3
    assert it.next_back_if(lambda n: n == 7) == 7
    assert it.next_back_if_eq(0) is None
    assert list(it) == [4, 5, 6]


def test_length_hint():
    it = double_ended(range(6))
    assert length_hint(it) == 6

    it.peek_front_nth(1)
    it.peek_back_nth(1)
    assert length_hint(it) == 6

    next(it)
    it.next_back()
    assert length_hint(it) == 4


def test_repr():
    it = double_ended(range(3))
    it.peek_front()
    it.peek_back()
    assert repr(it) == (
        'DoubleEndedPeekableIterator(front=[0], back=[2], exhausted=False)'
    )
