"""
A sequence is a handle owning one frame chain. Producers are generators that
yield either terminal values or other sequences; the consumer of a sequence
sees the values of all nested sequences flattened depth-first, in the order
they were yielded.

    @recursive
    def postorder(node):
        if node is None:
            return
        yield postorder(node.left)
        yield postorder(node.right)
        yield node.value
"""

import functools
import inspect

from recseq import chain
from recseq.errors import ContractViolation
from recseq.frame import Frame


class Sequence:
    """Exclusive owner of one frame chain.

    A handle cannot be copied. Yielding it from a producer moves its frame
    into the producer's chain and leaves the handle empty. Closing or
    discarding the handle tears down every frame that is still suspended.
    """

    def __init__(self, generator):
        self._frame = None
        self._begun = False
        if not inspect.isgenerator(generator):
            raise TypeError('Sequence needs a generator, got {!r}'.format(type(generator).__name__))
        self._frame = Frame(generator)

    def begin(self):
        """Pull the first value and return an iterator positioned on it.

        On a partially consumed sequence this continues after the values
        already pulled; a sequence cannot be restarted.
        """
        self._root()
        self._begun = True
        return Iterator(self, self._pull())

    @staticmethod
    def end():
        return END

    def release(self):
        """Move the frame out of this handle, leaving the handle empty."""
        if self._frame is None:
            raise ContractViolation('sequence handle no longer owns a frame')
        if self._begun:
            raise ContractViolation('cannot nest a sequence that has already been iterated', self._frame)
        frame, self._frame = self._frame, None
        return frame

    __release__ = release

    def close(self):
        if self._frame is not None:
            chain.teardown(self._frame)

    def _root(self):
        if self._frame is None:
            raise ContractViolation('sequence handle no longer owns a frame')
        return self._frame

    def _pull(self):
        root = self._root()
        try:
            more = chain.advance(root)
        except BaseException as exc:
            if not isinstance(exc, Exception):
                chain.teardown(root)
            raise
        if more:
            return chain.current_active(root)
        return None

    def __iter__(self):
        position = self.begin()
        while not position.at_end:
            yield position.value
            position.advance()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def __del__(self):
        self.close()

    def __copy__(self):
        raise TypeError("'{}' object cannot be copied".format(type(self).__name__))

    def __deepcopy__(self, memodict):
        raise TypeError("'{}' object cannot be copied".format(type(self).__name__))

    def __repr__(self):
        return 'Sequence({!r})'.format(self._frame)


class Iterator:
    """Forward-only position in a sequence.

    `value` refers to whatever the producer published; it is only guaranteed
    until the sequence advances, so copy it out if it has to be kept.
    """

    __slots__ = ('_sequence', '_frame')

    def __init__(self, sequence, frame):
        self._sequence = sequence
        self._frame = frame

    @property
    def at_end(self):
        return self._frame is None

    @property
    def value(self):
        if self._frame is None:
            raise ContractViolation('cannot dereference the end of a sequence')
        return self._frame.value

    def advance(self):
        if self._frame is not None:
            self._frame = self._sequence._pull()
        return self

    def __eq__(self, other):
        if not isinstance(other, Iterator):
            return NotImplemented
        return self._frame is other._frame

    __hash__ = None

    def __repr__(self):
        if self._frame is None:
            return 'Iterator(end)'
        return 'Iterator({!r})'.format(self._frame)


END = Iterator(None, None)


def recursive(func):
    """Decorator that turns a generator function into a function returning
    Sequence handles.

    For example:
        @recursive
        def countdown(n):
            ...

    is equivalent to
        def countdown(n):
            return Sequence(countdown_generator(n))
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        return Sequence(func(*args, **kwargs))

    return wrapper
