from itertools import chain

from . import conditional
from .source import double_ended_source
from .utils import missing


class SingleStepPeekableIterator:
    """A double-ended iterator that can look one element ahead from each end.

    This holds at most one peeked element per end, which is all that is
    needed for one token of lookahead or lookbehind.

    Parameters
    ----------
    source : Sequence or DoubleEndedSource
        The elements to iterate over.

    Notes
    -----
    When a single element is left and it has already been peeked from one
    end, peeking or consuming from the other end sees that same element.
    Consuming it from either end leaves nothing for the other.

    Examples
    --------
    >>> it = SingleStepPeekableIterator('ab')
    >>> it.peek_front(), it.peek_back()
    ('a', 'b')
    >>> it.next_back()
    'b'
    >>> it.peek_back()
    'a'
    >>> next(it)
    'a'
    >>> it.peek_back() is None
    True
    """
    def __init__(self, source):
        self._source = double_ended_source(source)
        self._front = missing
        self._back = missing
        self._exhausted = False

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

    def peek_front(self, default=None):
        """Return the first element without consuming it.
        """
        if self._front is missing:
            self._front = self._pull(self._source.pull_front)
        if self._front is not missing:
            return self._front
        if self._back is not missing:
            return self._back
        return default

    def peek_back(self, default=None):
        """Return the last element without consuming it.
        """
        if self._back is missing:
            self._back = self._pull(self._source.pull_back)
        if self._back is not missing:
            return self._back
        if self._front is not missing:
            return self._front
        return default

    peek = peek_front

    def _take_front(self):
        item = self._front
        if item is not missing:
            self._front = missing
            return item

        item = self._pull(self._source.pull_front)
        if item is missing:
            item = self._back
            self._back = missing
        return item

    def _take_back(self):
        item = self._back
        if item is not missing:
            self._back = missing
            return item

        item = self._pull(self._source.pull_back)
        if item is missing:
            item = self._front
            self._front = missing
        return item

    def __next__(self):
        item = self._take_front()
        if item is missing:
            raise StopIteration
        return item

    def next_back(self, default=None):
        item = self._take_back()
        if item is missing:
            return default
        return item

    def has_front_peeked(self):
        return self._front is not missing

    def has_back_peeked(self):
        return self._back is not missing

    def consume_front_peeked(self):
        """Drop the element peeked from the front, if any.

        The element is discarded. The next front peek pulls from the source
        again.
        """
        self._front = missing

    def consume_back_peeked(self):
        """Drop the element peeked from the back, if any.
        """
        self._back = missing

    def consume_peeked(self):
        """Drop the elements peeked from both ends.

        Examples
        --------
        >>> it = SingleStepPeekableIterator('abcd')
        >>> it.peek_front(), it.peek_back()
        ('a', 'd')
        >>> it.consume_peeked()
        >>> ''.join(it)
        'bc'
        """
        self._front = missing
        self._back = missing

    def _slots(self):
        front = [] if self._front is missing else [self._front]
        back = [] if self._back is missing else [self._back]
        return front, back

    def _forward_parts(self):
        front, back = self._slots()
        if not back:
            return self._source, front, self._exhausted

        source = () if self._exhausted else self._source
        return chain(source, back), front, False

    def _double_ended_parts(self):
        front, back = self._slots()
        return self._source, front, back, self._exhausted

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

    def __repr__(self):
        return '{.__name__}(front={!r}, back={!r}, exhausted={})'.format(
            type(self),
            self._front,
            self._back,
            self._exhausted,
        )


def lightweight(source):
    """Wrap ``source`` in a :class:`SingleStepPeekableIterator`.
    """
    return SingleStepPeekableIterator(source)
