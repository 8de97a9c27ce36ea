from collections import deque
from functools import partial
from itertools import chain
from operator import length_hint

from . import conditional
from .ringbuffer import RingBuffer
from .source import double_ended_source
from .utils import (
    PeekView,
    check_offset,
    check_range,
    load_cache,
    missing,
    within_capacity,
)


class DoubleEndedPeekableIterator:
    """An iterator that can peek any number of steps ahead from the front and
    any number of steps back from the end without consuming anything.

    Parameters
    ----------
    source : Sequence or DoubleEndedSource
        The elements to iterate over. Sequences are read in place with a
        :class:`~peekiter.source.SequenceSource`.

    Notes
    -----
    Elements peeked from the front and from the back are kept in two separate
    caches. Once a pull from either end finds the source empty, the two ends
    have met: an offset past the end of one cache is answered from the far end
    of the other cache, and the source is never pulled from again. No element
    is ever held by both caches.

    Examples
    --------
    >>> it = DoubleEndedPeekableIterator(range(1, 6))
    >>> it.peek_front(), it.peek_back()
    (1, 5)
    >>> it.peek_back_nth(1)
    4
    >>> next(it), it.next_back()
    (1, 5)
    """
    def __init__(self, source):
        self._source = double_ended_source(source)
        self._front = deque()
        self._back = deque()
        self._exhausted = False

    @classmethod
    def from_buffer(cls, buffer):
        """Build a double-ended buffer out of another peek buffer.

        The source, the peeked elements at each end and the exhaustion state
        are moved over, so nothing that was already peeked is lost.

        Parameters
        ----------
        buffer : PeekableIterator, DoubleEndedPeekableIterator or
                 SingleStepPeekableIterator
            The buffer to convert. It must not be used afterwards.

        Returns
        -------
        converted : DoubleEndedPeekableIterator
            A buffer that yields exactly what ``buffer`` would have yielded.

        Raises
        ------
        TypeError
            Raised when ``buffer`` is a forward buffer whose source cannot be
            read from the back.

        Examples
        --------
        >>> from peekiter import forward
        >>> it = forward('abcd')
        >>> it.peek_nth(1)
        'b'
        >>> de = DoubleEndedPeekableIterator.from_buffer(it)
        >>> de.front_peeked_len(), de.peek_back()
        (2, 'd')
        >>> ''.join(de)
        'abcd'
        """
        source, front, back, exhausted = buffer._double_ended_parts()
        self = cls(source)
        self._adopt(front, back, exhausted)
        return self

    def _adopt(self, front, back, exhausted):
        load_cache(self._front, front)
        load_cache(self._back, back)
        self._exhausted = exhausted

    def _forward_parts(self):
        front = list(self._front)
        back = list(self._back)
        if not back:
            return self._source, front, self._exhausted

        # the back cache is ordered from the end, what is left of the source
        # comes before it
        source = () if self._exhausted else self._source
        return chain(source, reversed(back)), front, False

    def _double_ended_parts(self):
        return (
            self._source,
            list(self._front),
            list(self._back),
            self._exhausted,
        )

    def __iter__(self):
        return self

    def _pull(self, pull):
        if self._exhausted:
            return missing
        try:
            return pull()
        except StopIteration:
            self._exhausted = True
            return missing

    def _next(self, near, far, pull):
        if near:
            return near.popleft()

        item = self._pull(pull)
        if item is not missing:
            return item

        # the ends have met, the closest element left is the far cache's last
        if far:
            return far.pop()
        return missing

    def __next__(self):
        item = self._next(self._front, self._back, self._source.pull_front)
        if item is missing:
            raise StopIteration
        return item

    def next_back(self, default=None):
        """Consume and return the last element.

        Parameters
        ----------
        default : any, optional
            The value to return when there are no elements left.

        Returns
        -------
        item : any
            The last element or ``default``.
        """
        item = self._next(self._back, self._front, self._source.pull_back)
        if item is missing:
            return default
        return item

    def __reversed__(self):
        return iter(partial(self.next_back, missing), missing)

    def __length_hint__(self):
        buffered = len(self._front) + len(self._back)
        if self._exhausted:
            return buffered
        return buffered + length_hint(self._source)

    def _fill(self, cache, pull, count):
        maxlen = cache.maxlen
        if maxlen is not None and (count is None or count > maxlen):
            count = maxlen

        while count is None or len(cache) < count:
            item = self._pull(pull)
            if item is missing:
                break
            cache.append(item)

    def _cached(self, near, far, n):
        if n < len(near):
            return near[n]

        if self._exhausted:
            # ``far`` is ordered from the other end, its last element is the
            # one right after ``near``'s last element
            ix = len(near) + len(far) - 1 - n
            if ix >= 0:
                return far[ix]
        return missing

    def _front_cached(self, n):
        return self._cached(self._front, self._back, n)

    def _back_cached(self, n):
        return self._cached(self._back, self._front, n)

    def _peek_nth(self, near, far, pull, n, default):
        n = check_offset(n)
        if not within_capacity(near, n):
            return default

        self._fill(near, pull, n + 1)
        item = self._cached(near, far, n)
        if item is missing:
            return default
        return item

    def _peek_range(self, near, far, pull, lookup, start, stop):
        start, stop = check_range(start, stop)
        if start == stop:
            return PeekView(lookup, start, stop)

        self._fill(near, pull, stop)
        available = len(near)
        if self._exhausted:
            available += len(far)
        if near.maxlen is not None:
            available = min(available, near.maxlen)

        if stop is None or stop > available:
            stop = available
        return PeekView(lookup, start, stop)

    def peek_front_nth(self, n, default=None):
        """Return the element ``n`` steps from the front without consuming it.

        Parameters
        ----------
        n : int
            The offset from the first element.
        default : any, optional
            The value to return when there is no element at offset ``n``.

        Returns
        -------
        peeked : any
            The element at offset ``n`` or ``default``.
        """
        return self._peek_nth(
            self._front,
            self._back,
            self._source.pull_front,
            n,
            default,
        )

    def peek_back_nth(self, n, default=None):
        """Return the element ``n`` steps from the back without consuming it.

        Parameters
        ----------
        n : int
            The offset from the last element.
        default : any, optional
            The value to return when there is no element at offset ``n``.

        Returns
        -------
        peeked : any
            The element at offset ``n`` or ``default``.

        Examples
        --------
        >>> it = DoubleEndedPeekableIterator(range(6))
        >>> it.peek_back_nth(0)
        5
        >>> it.peek_front_nth(0)
        0
        >>> it.peek_back_nth(5)
        0
        >>> it.peek_back_nth(6) is None
        True
        """
        return self._peek_nth(
            self._back,
            self._front,
            self._source.pull_back,
            n,
            default,
        )

    def peek_front(self, default=None):
        return self.peek_front_nth(0, default)

    def peek_back(self, default=None):
        return self.peek_back_nth(0, default)

    def peek_front_range(self, start, stop=None):
        """Return a view of the elements at front offsets ``[start, stop)``
        without consuming them.

        See Also
        --------
        peekiter.iterator.PeekableIterator.peek_range
        """
        return self._peek_range(
            self._front,
            self._back,
            self._source.pull_front,
            self._front_cached,
            start,
            stop,
        )

    def peek_back_range(self, start, stop=None):
        """Return a view of the elements at back offsets ``[start, stop)``
        without consuming them. The view is ordered from the back.
        """
        return self._peek_range(
            self._back,
            self._front,
            self._source.pull_back,
            self._back_cached,
            start,
            stop,
        )

    # let this stand in for a forward buffer
    peek = peek_front
    peek_nth = peek_front_nth
    peek_range = peek_front_range

    def front_peeked_len(self):
        return len(self._front)

    def back_peeked_len(self):
        return len(self._back)

    def has_front_peeked(self, n):
        return len(self._front) > check_offset(n)

    def has_back_peeked(self, n):
        return len(self._back) > check_offset(n)

    @staticmethod
    def _consume(cache, n):
        if n is None:
            cache.clear()
        else:
            popleft = cache.popleft
            for _ in range(min(check_offset(n), len(cache))):
                popleft()

    def consume_front_peeked(self, n=None):
        """Drop elements buffered at the front without returning them.

        Parameters
        ----------
        n : int, optional
            The number of elements to drop. By default the whole front cache
            is dropped.
        """
        self._consume(self._front, n)

    def consume_back_peeked(self, n=None):
        """Drop elements buffered at the back without returning them.
        """
        self._consume(self._back, n)

    def consume_peeked(self, front=None, back=None):
        """Drop elements buffered at both ends without returning them.

        Parameters
        ----------
        front : int, optional
            The number of elements to drop from the front cache. By default
            the whole front cache is dropped.
        back : int, optional
            The number of elements to drop from the back cache. By default
            the whole back cache is dropped.

        Notes
        -----
        Pass ``0`` for an end that should be left alone. This never pulls
        from the source.

        Examples
        --------
        >>> it = DoubleEndedPeekableIterator(range(10))
        >>> it.peek_front_nth(2), it.peek_back_nth(2)
        (2, 7)
        >>> it.consume_peeked(front=1, back=0)
        >>> it.front_peeked_len(), it.back_peeked_len()
        (2, 3)
        >>> it.consume_peeked()
        >>> list(it)
        [3, 4, 5, 6]
        """
        self._consume(self._front, front)
        self._consume(self._back, back)

    def next_if(self, predicate, default=None):
        return conditional.next_if(self, predicate, default)

    def next_if_eq(self, expected, default=None):
        return conditional.next_if_eq(self, expected, default)

    def next_back_if(self, predicate, default=None):
        return conditional.next_back_if(self, predicate, default)

    def next_back_if_eq(self, expected, default=None):
        return conditional.next_back_if_eq(self, expected, default)

    def while_next(self, predicate):
        return conditional.while_next(self, predicate)

    def while_next_back(self, predicate):
        return conditional.while_next_back(self, predicate)

    def while_peek(self, predicate):
        return conditional.while_peek(self, predicate)

    while_peek_front = while_peek

    def while_peek_back(self, predicate):
        return conditional.while_peek_back(self, predicate)

    def __repr__(self):
        return '{.__name__}(front={!r}, back={!r}, exhausted={})'.format(
            type(self),
            list(self._front),
            list(self._back),
            self._exhausted,
        )


class FixedDoubleEndedPeekableIterator(DoubleEndedPeekableIterator):
    """A :class:`DoubleEndedPeekableIterator` with bounded caches.

    Parameters
    ----------
    source : Sequence or DoubleEndedSource
        The elements to iterate over.
    front_capacity : int
        The maximum number of elements buffered from the front.
    back_capacity : int, optional
        The maximum number of elements buffered from the back. Defaults to
        ``front_capacity``.

    Notes
    -----
    ``peek_front_nth(n)`` with ``n >= front_capacity`` and
    ``peek_back_nth(n)`` with ``n >= back_capacity`` always return the
    default.
    """
    def __init__(self, source, front_capacity, back_capacity=None):
        if back_capacity is None:
            back_capacity = front_capacity
        front = RingBuffer(front_capacity)
        back = RingBuffer(back_capacity)

        super().__init__(source)
        self._front = front
        self._back = back

    @classmethod
    def from_buffer(cls, buffer, front_capacity, back_capacity=None):
        """Build a fixed double-ended buffer out of another peek buffer.

        Raises
        ------
        ValueError
            Raised when either cache of ``buffer`` holds more elements than
            the matching capacity.
        """
        source, front, back, exhausted = buffer._double_ended_parts()
        self = cls(source, front_capacity, back_capacity)
        self._adopt(front, back, exhausted)
        return self

    @property
    def front_capacity(self):
        return self._front.maxlen

    @property
    def back_capacity(self):
        return self._back.maxlen


def double_ended(source):
    """Wrap ``source`` in a :class:`DoubleEndedPeekableIterator`.
    """
    return DoubleEndedPeekableIterator(source)


def fixed_double_ended(source, front_capacity, back_capacity=None):
    """Wrap ``source`` in a :class:`FixedDoubleEndedPeekableIterator`.
    """
    return FixedDoubleEndedPeekableIterator(
        source,
        front_capacity,
        back_capacity,
    )
