from collections.abc import Sequence


class DoubleEndedSource:
    """A source that can be pulled from either end.

    Subclasses implement :meth:`pull_front` and :meth:`pull_back`. Both
    raise ``StopIteration`` once every element has been pulled; after that
    they must keep raising it.

    A ``DoubleEndedSource`` is also a plain iterator that reads from the
    front.
    """
    def pull_front(self):
        raise NotImplementedError('pull_front')

    def pull_back(self):
        raise NotImplementedError('pull_back')

    def __iter__(self):
        return self

    def __next__(self):
        return self.pull_front()


class SequenceSource(DoubleEndedSource):
    """Pull the elements of a sequence from either end without copying it.

    Parameters
    ----------
    seq : Sequence
        The sequence to read. This should not be mutated while the source is
        in use.

    Examples
    --------
    >>> src = SequenceSource('abc')
    >>> src.pull_back()
    'c'
    >>> src.pull_front()
    'a'
    >>> len(src)
    1
    """
    def __init__(self, seq):
        self._seq = seq
        self._lo = 0
        self._hi = len(seq)

    def pull_front(self):
        if self._lo >= self._hi:
            raise StopIteration
        item = self._seq[self._lo]
        self._lo += 1
        return item

    def pull_back(self):
        if self._lo >= self._hi:
            raise StopIteration
        self._hi -= 1
        return self._seq[self._hi]

    def __len__(self):
        return self._hi - self._lo

    def __repr__(self):
        return '{.__name__}({!r}, lo={}, hi={})'.format(
            type(self),
            self._seq,
            self._lo,
            self._hi,
        )


def double_ended_source(source):
    """Coerce an object into a :class:`DoubleEndedSource`.

    Parameters
    ----------
    source : DoubleEndedSource or Sequence
        The object to read from both ends.

    Returns
    -------
    source : DoubleEndedSource
        ``source`` itself, or a :class:`SequenceSource` over it.

    Raises
    ------
    TypeError
        Raised when ``source`` cannot be read from the back, for example a
        generator.
    """
    if isinstance(source, DoubleEndedSource):
        return source
    if isinstance(source, Sequence):
        return SequenceSource(source)
    raise TypeError(
        'cannot read a %s from both ends, pass a sequence or a'
        ' DoubleEndedSource' % type(source).__name__,
    )
