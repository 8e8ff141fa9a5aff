"""
A frame is one suspended producer: a generator together with the links that
place it in a frame chain.

A producer suspends in one of two ways:
> it yields a terminal value, which the frame publishes until its next resume,
> or it yields a nested sequence, which the chain attaches below the frame.

Anything implementing `__release__` counts as a nested sequence.
"""

from recseq.errors import ContractViolation

NOT_STARTED = 'not-started'
AT_VALUE = 'at-value'
NESTING = 'nesting'
DONE = 'done'


def is_nested(x):
    return hasattr(x, '__release__')


class Frame:
    """One suspendable unit of producer execution.

    `parent` is the frame that nested this one and is None on the root.
    `root` is cached when the frame is attached.
    `directory` has two meanings: on the root it points at the deepest active
    frame of the chain, on every other frame it points at the parent.
    """

    __slots__ = ('generator', 'state', '_value', 'parent', 'root', 'directory')

    def __init__(self, generator):
        self.generator = generator
        self.state = NOT_STARTED
        self._value = None
        self.parent = None
        self.root = self
        self.directory = self

    @property
    def done(self):
        return self.state == DONE

    @property
    def is_root(self):
        return self.parent is None

    @property
    def value(self):
        if self.state != AT_VALUE:
            raise ContractViolation('frame publishes no value while {}'.format(self.state), self)
        return self._value

    def resume(self, error=None):
        """Run the producer to its next suspension point.

        If `error` is given it is raised inside the producer at the point
        where it is suspended. Returns the nested sequence if the producer
        yielded one and None otherwise. Exceptions escaping the producer
        finish the frame and propagate.
        """
        if self.state == DONE:
            raise ContractViolation('cannot resume a finished frame', self)

        self._value = None
        try:
            if error is None:
                item = next(self.generator)
            else:
                item = self.generator.throw(error)
        except StopIteration:
            self.state = DONE
            return None
        except BaseException:
            self.state = DONE
            raise

        if is_nested(item):
            self.state = NESTING
            return item
        self.state = AT_VALUE
        self._value = item
        return None

    def close(self):
        """Finalize the producer without resuming its production."""
        self.state = DONE
        self._value = None
        self.generator.close()

    def __repr__(self):
        name = getattr(self.generator, '__qualname__', type(self.generator).__name__)
        return 'Frame({} {})'.format(name, self.state)
