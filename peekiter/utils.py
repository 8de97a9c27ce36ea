from collections.abc import Sequence
from operator import index


class _Missing:
    def __repr__(self):
        return '<missing>'


# Marks an offset that could not be filled. Never a valid element.
missing = _Missing()


def check_offset(n):
    """Validate a peek offset.

    Parameters
    ----------
    n : int
        The offset to check.

    Returns
    -------
    n : int
        The offset as an int.

    Raises
    ------
    TypeError
        Raised when ``n`` is not an integer.
    ValueError
        Raised when ``n`` is negative.
    """
    n = index(n)
    if n < 0:
        raise ValueError('offset must be non-negative, got %d' % n)
    return n


def check_range(start, stop):
    """Validate the bounds of a range peek.

    Parameters
    ----------
    start : int
        The first offset in the range.
    stop : int or None
        One past the last offset in the range. ``None`` means unbounded.

    Returns
    -------
    start, stop : int, int or None
        The bounds as ints.

    Raises
    ------
    ValueError
        Raised when a bound is negative or ``start`` is greater than ``stop``.
    """
    start = check_offset(start)
    if stop is None:
        return start, None

    stop = index(stop)
    if stop < 0:
        raise ValueError('range stop must be non-negative, got %d' % stop)
    if start > stop:
        raise ValueError(
            'range start (%d) must not exceed stop (%d)' % (start, stop),
        )
    return start, stop


def within_capacity(cache, n):
    """Can ``cache`` ever hold an element at offset ``n``?
    """
    maxlen = cache.maxlen
    return maxlen is None or n < maxlen


def load_cache(cache, items):
    """Append elements moved out of another buffer to an empty cache.

    Parameters
    ----------
    cache : deque or RingBuffer
        The cache to fill.
    items : list
        The elements in the order they would be consumed.

    Raises
    ------
    ValueError
        Raised when ``cache`` cannot hold all of ``items``.
    """
    maxlen = cache.maxlen
    if maxlen is not None and len(items) > maxlen:
        raise ValueError(
            'cannot move %d peeked elements into a cache of capacity %d' % (
                len(items),
                maxlen,
            ),
        )
    for item in items:
        cache.append(item)


class PeekView(Sequence):
    """A read-only window over the peeked elements of a buffer.

    Parameters
    ----------
    lookup : callable[int, any]
        Returns the cached element at an offset, or ``missing`` if that
        offset is no longer cached. This must not pull from the source.
    start : int
        The first offset in the view.
    stop : int
        One past the last offset in the view.

    Notes
    -----
    Every access reads the offsets out of the buffer again, so consuming from
    the buffer while holding a view shifts what the view shows. The view never
    grows past the range it was created with, but it shrinks when the buffer
    no longer holds the elements at the end of that range. ``len`` and
    ``reversed`` always agree with what iteration yields.
    """
    def __init__(self, lookup, start, stop):
        self._lookup = lookup
        self._start = start
        self._stop = max(start, stop)

    def __len__(self):
        # offsets drop out of a buffer from the far end of the range
        lookup = self._lookup
        stop = self._stop
        while stop > self._start and lookup(stop - 1) is missing:
            stop -= 1
        return stop - self._start

    def __getitem__(self, ix):
        size = len(self)
        if isinstance(ix, slice):
            return [self[n] for n in range(*ix.indices(size))]

        ix = index(ix)
        if ix < 0:
            ix += size
        if not 0 <= ix < size:
            raise IndexError('peek view index out of range')
        return self._lookup(self._start + ix)

    def __repr__(self):
        return '{.__name__}({!r})'.format(type(self), list(self))
