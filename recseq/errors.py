class SequenceError(RuntimeError):
    """Base class for errors raised by the sequence engine itself."""


class ContractViolation(SequenceError):
    """A frame or iterator was used outside of its contract.

    Examples are reading a value that is not published, resuming a finished
    frame or nesting a sequence handle that no longer owns its frame.
    """

    def __init__(self, message, frame=None):
        super().__init__(message)
        self.frame = frame
