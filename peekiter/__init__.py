from .conditional import (
    next_back_if,
    next_back_if_eq,
    next_if,
    next_if_eq,
    while_next,
    while_next_back,
    while_peek,
    while_peek_back,
    while_peek_front,
)
from .double_ended import (
    DoubleEndedPeekableIterator,
    FixedDoubleEndedPeekableIterator,
    double_ended,
    fixed_double_ended,
)
from .iterator import (
    FixedPeekableIterator,
    PeekableIterator,
    fixed_forward,
    forward,
)
from .lightweight import SingleStepPeekableIterator, lightweight
from .ringbuffer import RingBuffer
from .source import DoubleEndedSource, SequenceSource, double_ended_source
from .utils import PeekView


__version__ = '0.1.0'


__all__ = [
    'DoubleEndedPeekableIterator',
    'DoubleEndedSource',
    'FixedDoubleEndedPeekableIterator',
    'FixedPeekableIterator',
    'PeekView',
    'PeekableIterator',
    'RingBuffer',
    'SequenceSource',
    'SingleStepPeekableIterator',
    'double_ended',
    'double_ended_source',
    'fixed_double_ended',
    'fixed_forward',
    'forward',
    'lightweight',
    'next_back_if',
    'next_back_if_eq',
    'next_if',
    'next_if_eq',
    'while_next',
    'while_next_back',
    'while_peek',
    'while_peek_back',
    'while_peek_front',
]
