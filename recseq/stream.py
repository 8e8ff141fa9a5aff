"""
Lazy composition of sequences.

Every operation here is itself a producer and returns a Sequence, so the
results can be nested, iterated or combined further. Splicing is done by
yielding sequences, which lets the frame chain flatten them instead of
re-yielding every value through each layer.
"""

from recseq.frame import is_nested
from recseq.sequence import recursive


@recursive
def empty():
    """sequence without values"""
    return
    yield


@recursive
def from_iterable(iterable):
    """sequence of the items of an iterable

    Items that are sequences themselves are spliced in.
    """
    for item in iterable:
        yield item


@recursive
def append(*sequences):
    """sequence of the values of all sequences, one after the other"""
    for sequence in sequences:
        yield sequence


@recursive
def take(n, sequence):
    """sequence of at most the first n values; the rest is never pulled"""
    with sequence:
        for _, value in zip(range(n), sequence):
            yield value


@recursive
def fmap(func, sequence):
    """sequence of func applied to each value"""
    with sequence:
        for value in sequence:
            result = func(value)
            if is_nested(result):
                raise TypeError('fmap function returned a sequence, use append_map to splice sequences')
            yield result


@recursive
def append_map(func, sequence):
    """sequence of the values of func(value) for each value, spliced in order"""
    with sequence:
        for value in sequence:
            nested = func(value)
            if not is_nested(nested):
                raise TypeError('append_map function must return a sequence, got {!r}'.format(type(nested).__name__))
            yield nested
