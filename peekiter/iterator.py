from collections import deque
from collections.abc import Sequence
from operator import length_hint

from . import conditional
from .ringbuffer import RingBuffer
from .source import SequenceSource, double_ended_source
from .utils import (
    PeekView,
    check_offset,
    check_range,
    load_cache,
    missing,
    within_capacity,
)


class PeekableIterator:
    """An iterator that can peek at elements any number of steps ahead
    without consuming them.

    Parameters
    ----------
    stream : iterable
        The underlying iterable to pull from.

    Notes
    -----
    Peeking at offset ``n`` will pull ``n + 1`` values into memory until
    they have been consumed with ``next``.

    The underlying iterator should not be consumed while the
    ``PeekableIterator`` is in use.

    Once the underlying iterator raises ``StopIteration`` it is never
    advanced again.

    Sequences are read in place with a
    :class:`~peekiter.source.SequenceSource`, so a buffer over a sequence can
    later be turned into a :class:`~peekiter.DoubleEndedPeekableIterator`
    with :meth:`~peekiter.DoubleEndedPeekableIterator.from_buffer`.
    """
    def __init__(self, stream):
        if isinstance(stream, Sequence):
            stream = SequenceSource(stream)
        self._stream = iter(stream)
        self._peeked = deque()
        self._exhausted = False

    @classmethod
    def from_buffer(cls, buffer):
        """Build a forward buffer out of another peek buffer.

        The source, the peeked elements and the exhaustion state are moved
        over, so nothing that was already peeked is lost.

        Parameters
        ----------
        buffer : PeekableIterator, DoubleEndedPeekableIterator or
                 SingleStepPeekableIterator
            The buffer to convert. It must not be used afterwards.

        Returns
        -------
        converted : PeekableIterator
            A buffer that yields exactly what ``buffer`` would have yielded
            from the front.

        Examples
        --------
        >>> from peekiter import double_ended
        >>> de = double_ended(range(5))
        >>> de.peek_front(), de.peek_back()
        (0, 4)
        >>> it = PeekableIterator.from_buffer(de)
        >>> it.peeked_len()
        1
        >>> list(it)
        [0, 1, 2, 3, 4]
        """
        stream, peeked, exhausted = buffer._forward_parts()
        self = cls(stream)
        self._adopt(peeked, exhausted)
        return self

    def _adopt(self, peeked, exhausted):
        load_cache(self._peeked, peeked)
        self._exhausted = exhausted

    def _forward_parts(self):
        return self._stream, list(self._peeked), self._exhausted

    def _double_ended_parts(self):
        if self._exhausted:
            source = SequenceSource(())
        else:
            source = double_ended_source(self._stream)
        return source, list(self._peeked), [], self._exhausted

    def __iter__(self):
        return self

    def __next__(self):
        try:
            return self._peeked.popleft()
        except IndexError:
            pass

        if self._exhausted:
            raise StopIteration
        try:
            return next(self._stream)
        except StopIteration:
            self._exhausted = True
            raise

    def __length_hint__(self):
        if self._exhausted:
            return len(self._peeked)
        return len(self._peeked) + length_hint(self._stream)

    def _fill(self, count):
        """Pull from the stream until ``count`` elements are buffered, the
        stream is exhausted, or the cache is full.

        Parameters
        ----------
        count : int or None
            The number of elements wanted. ``None`` pulls everything.

        Returns
        -------
        buffered : int
            The number of elements now buffered.
        """
        peeked = self._peeked
        maxlen = peeked.maxlen
        if maxlen is not None and (count is None or count > maxlen):
            count = maxlen

        while not self._exhausted and (count is None or len(peeked) < count):
            try:
                item = next(self._stream)
            except StopIteration:
                self._exhausted = True
            else:
                peeked.append(item)

        return len(peeked)

    def _cached(self, n):
        peeked = self._peeked
        if n < len(peeked):
            return peeked[n]
        return missing

    def peek_nth(self, n, default=None):
        """Return the element ``n`` steps ahead without consuming it.

        Parameters
        ----------
        n : int
            The offset from the next element. ``0`` is the next element.
        default : any, optional
            The value to return when there is no element at offset ``n``.

        Returns
        -------
        peeked : any
            The element at offset ``n`` or ``default``.

        Examples
        --------
        >>> it = PeekableIterator(iter((1, 2, 3, 4)))
        >>> it.peek_nth(2)
        3
        >>> next(it)
        1
        >>> it.peek_nth(2)
        4
        >>> it.peek_nth(3) is None
        True
        """
        n = check_offset(n)
        if within_capacity(self._peeked, n) and self._fill(n + 1) > n:
            return self._peeked[n]
        return default

    def peek(self, default=None):
        """Return the next element without consuming it.

        Examples
        --------
        >>> it = PeekableIterator(iter((1, 2)))
        >>> it.peek()
        1
        >>> next(it)
        1
        >>> next(it)
        2
        >>> it.peek('done')
        'done'
        """
        return self.peek_nth(0, default)

    def peek_range(self, start, stop=None):
        """Return a view of the elements at offsets ``[start, stop)`` without
        consuming them.

        Parameters
        ----------
        start : int
            The first offset.
        stop : int, optional
            One past the last offset. If not given, everything left in the
            stream is buffered.

        Returns
        -------
        view : PeekView
            The buffered elements in the range. This is shorter than
            ``stop - start`` if the stream runs out first.

        Raises
        ------
        ValueError
            Raised when ``start`` is greater than ``stop``.

        Examples
        --------
        >>> it = PeekableIterator(range(5))
        >>> list(it.peek_range(1, 4))
        [1, 2, 3]
        >>> list(it.peek_range(3, 10))
        [3, 4]
        """
        start, stop = check_range(start, stop)
        if start == stop:
            return PeekView(self._cached, start, stop)

        available = self._fill(stop)
        if stop is None or stop > available:
            stop = available
        return PeekView(self._cached, start, stop)

    def peeked_len(self):
        """The number of elements pulled but not yet consumed.
        """
        return len(self._peeked)

    def has_peeked(self, n):
        """Is the element at offset ``n`` already buffered?
        """
        return self.peeked_len() > check_offset(n)

    def consume_peeked(self, n=None):
        """Drop buffered elements without returning them.

        Parameters
        ----------
        n : int, optional
            The number of buffered elements to drop from the front. By default
            all of them are dropped. This never pulls from the stream.
        """
        if n is None:
            self._peeked.clear()
        else:
            popleft = self._peeked.popleft
            for _ in range(min(check_offset(n), len(self._peeked))):
                popleft()

    def next_if(self, predicate, default=None):
        return conditional.next_if(self, predicate, default)

    def next_if_eq(self, expected, default=None):
        return conditional.next_if_eq(self, expected, default)

    def while_next(self, predicate):
        """Return an iterator that consumes and yields elements while they
        match ``predicate``.

        This is particularly useful for ``takewhile`` style loops where you
        want to stop at some element without consuming it.

        Examples
        --------
        >>> it = PeekableIterator(iter((1, 2, 3)))
        >>> list(it.while_next(lambda n: n != 2))
        [1]
        >>> next(it)
        2
        """
        return conditional.while_next(self, predicate)

    def while_peek(self, predicate):
        return conditional.while_peek(self, predicate)

    def __repr__(self):
        return '{.__name__}(peeked={!r}, exhausted={})'.format(
            type(self),
            list(self._peeked),
            self._exhausted,
        )


class FixedPeekableIterator(PeekableIterator):
    """A :class:`PeekableIterator` that never buffers more than ``capacity``
    elements.

    Parameters
    ----------
    stream : iterable
        The underlying iterable to pull from.
    capacity : int
        The maximum number of buffered elements. This must be at least 1.

    Notes
    -----
    Peeking at an offset greater than or equal to ``capacity`` always returns
    the default, no matter how many elements the stream has left. Range peeks
    are cut off at ``capacity``.
    """
    def __init__(self, stream, capacity):
        cache = RingBuffer(capacity)
        super().__init__(stream)
        self._peeked = cache

    @classmethod
    def from_buffer(cls, buffer, capacity):
        """Build a fixed forward buffer out of another peek buffer.

        Parameters
        ----------
        buffer : PeekableIterator, DoubleEndedPeekableIterator or
                 SingleStepPeekableIterator
            The buffer to convert. It must not be used afterwards.
        capacity : int
            The capacity of the new buffer.

        Raises
        ------
        ValueError
            Raised when ``buffer`` holds more peeked elements than
            ``capacity``.
        """
        stream, peeked, exhausted = buffer._forward_parts()
        self = cls(stream, capacity)
        self._adopt(peeked, exhausted)
        return self

    @property
    def capacity(self):
        return self._peeked.maxlen


def forward(stream):
    """Wrap ``stream`` in a :class:`PeekableIterator`.
    """
    return PeekableIterator(stream)


def fixed_forward(stream, capacity):
    """Wrap ``stream`` in a :class:`FixedPeekableIterator`.
    """
    return FixedPeekableIterator(stream, capacity)
