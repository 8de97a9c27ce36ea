"""Predicate driven consumption on top of any of the peek buffers.

Each function only needs the matching pair of peek and consume methods on the
buffer, so they work the same for the growable, fixed size, and single step
variants.
"""
from .utils import missing


def while_next(buffer, predicate):
    """Consume and yield elements from the front while ``predicate`` holds.

    Parameters
    ----------
    buffer : PeekableIterator
        Any buffer with ``peek`` and ``__next__``.
    predicate : callable[any, bool]
        The condition to check against each element.

    Yields
    ------
    item : any
        The consumed elements.

    Notes
    -----
    The first element that fails the predicate is not consumed, it is still
    the next element of ``buffer`` once this generator is exhausted.

    Examples
    --------
    >>> from peekiter import forward
    >>> it = forward(range(6))
    >>> list(while_next(it, lambda n: n < 3))
    [0, 1, 2]
    >>> it.peek()
    3
    """
    while True:
        item = buffer.peek(missing)
        if item is missing or not predicate(item):
            return
        yield next(buffer)


def while_next_back(buffer, predicate):
    """Consume and yield elements from the back while ``predicate`` holds.

    This is the mirror image of :func:`while_next` and needs ``peek_back`` and
    ``next_back`` on the buffer.
    """
    while True:
        item = buffer.peek_back(missing)
        if item is missing or not predicate(item):
            return
        yield buffer.next_back()


def _while_peek(peek_nth, predicate):
    n = 0
    while True:
        item = peek_nth(n, missing)
        if item is missing or not predicate(item):
            return
        yield item
        n += 1


def while_peek(buffer, predicate):
    """Yield elements from the front while ``predicate`` holds without
    consuming them.

    Parameters
    ----------
    buffer : PeekableIterator
        Any buffer with ``peek_nth``.
    predicate : callable[any, bool]
        The condition to check against each element.

    Yields
    ------
    item : any
        The matching elements. These are the buffered objects themselves, not
        copies.

    Notes
    -----
    Every matching element is pulled into the buffer's cache, plus the first
    element that fails. For the fixed size buffers the traversal ends at the
    capacity.

    Offsets are counted from the front as it is when each element is
    requested, so the buffer should not be consumed while this generator is
    being advanced.
    """
    return _while_peek(buffer.peek_nth, predicate)


# the front is the default end
while_peek_front = while_peek


def while_peek_back(buffer, predicate):
    """Yield elements from the back while ``predicate`` holds without
    consuming them.

    See Also
    --------
    while_peek
    """
    return _while_peek(buffer.peek_back_nth, predicate)


def next_if(buffer, predicate, default=None):
    """Consume the next element only if it matches ``predicate``.

    Parameters
    ----------
    buffer : PeekableIterator
        Any buffer with ``peek`` and ``__next__``.
    predicate : callable[any, bool]
        The condition to check.
    default : any, optional
        The value to return if the element does not match or the buffer is
        exhausted.

    Returns
    -------
    item : any
        The consumed element or ``default``.
    """
    item = buffer.peek(missing)
    if item is missing or not predicate(item):
        return default
    return next(buffer)


def next_if_eq(buffer, expected, default=None):
    """Consume the next element only if it is equal to ``expected``.
    """
    return next_if(buffer, lambda item: item == expected, default)


def next_back_if(buffer, predicate, default=None):
    """Consume the last element only if it matches ``predicate``.
    """
    item = buffer.peek_back(missing)
    if item is missing or not predicate(item):
        return default
    return buffer.next_back()


def next_back_if_eq(buffer, expected, default=None):
    return next_back_if(buffer, lambda item: item == expected, default)
