from operator import index


class RingBuffer:
    """A fixed size double-ended queue.

    This exposes the subset of :class:`collections.deque` that the peek
    buffers use so the two can be swapped for each other.

    Parameters
    ----------
    capacity : int
        The number of slots. This must be at least 1.

    Notes
    -----
    Unlike a bounded ``deque``, a full ``RingBuffer`` never evicts. Adding
    to a full buffer raises an ``IndexError``.
    """
    def __init__(self, capacity):
        capacity = index(capacity)
        if capacity < 1:
            raise ValueError('capacity must be at least 1, got %d' % capacity)

        self._slots = [None] * capacity
        self._head = 0
        self._len = 0

    @property
    def maxlen(self):
        return len(self._slots)

    def __len__(self):
        return self._len

    def _slot(self, ix):
        return (self._head + ix) % len(self._slots)

    def _check_room(self):
        if self._len == len(self._slots):
            raise IndexError('append to a full ring buffer')

    def append(self, item):
        self._check_room()
        self._slots[self._slot(self._len)] = item
        self._len += 1

    def popleft(self):
        if not self._len:
            raise IndexError('pop from an empty ring buffer')

        slots = self._slots
        item = slots[self._head]
        # drop our reference so the element can be collected
        slots[self._head] = None
        self._head = self._slot(1)
        self._len -= 1
        return item

    def pop(self):
        if not self._len:
            raise IndexError('pop from an empty ring buffer')

        ix = self._slot(self._len - 1)
        item = self._slots[ix]
        self._slots[ix] = None
        self._len -= 1
        return item

    def __getitem__(self, ix):
        ix = index(ix)
        if ix < 0:
            ix += self._len
        if not 0 <= ix < self._len:
            raise IndexError('ring buffer index out of range')
        return self._slots[self._slot(ix)]

    def __iter__(self):
        for ix in range(self._len):
            yield self._slots[self._slot(ix)]

    def clear(self):
        self._slots = [None] * len(self._slots)
        self._head = 0
        self._len = 0

    def __repr__(self):
        return '{.__name__}({!r}, capacity={})'.format(
            type(self),
            list(self),
            self.maxlen,
        )
