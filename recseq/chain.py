"""
The frame chain links the frames of one sequence from the deepest active frame
up to the root. The root's directory pointer always names the active frame,
so finding the frame to resume is O(1) regardless of the nesting depth.
Popping an exhausted frame moves that pointer one level up; this is the only
place where the chain shrinks.
"""

from recseq.errors import ContractViolation
from recseq.frame import Frame
from recseq.log import get_logger

logger = get_logger(__name__)


def root_of(frame):
    # only the root's directory ever changes, so the root found by following
    # directory pointers at attach time stays valid
    return frame.root


def current_active(root):
    return root.directory


def attach(parent, child):
    """Attach `child` below `parent`, make it active and resume it once.

    Returns the outcome of that first resume.
    """
    root = root_of(parent)
    child.parent = parent
    child.directory = parent
    child.root = root
    root.directory = child
    logger.debug('attached %r below %r', child, parent)
    return child.resume()


def pop(root, frame):
    """Drop the exhausted active `frame` and make its parent active."""
    parent = frame.directory
    root.directory = parent
    frame.close()
    frame.parent = frame.directory = frame.root = None
    logger.debug('popped %r, %r is active', frame, parent)
    return parent


def _release(nested, frame):
    """Take the frame out of a nested sequence yielded by `frame`."""
    try:
        child = nested.__release__()
    except ContractViolation:
        raise
    except Exception as exc:
        raise ContractViolation('{!r} failed to hand over a frame: {}'.format(nested, exc), frame) from exc
    if not isinstance(child, Frame):
        raise ContractViolation('{!r} did not hand over a frame'.format(nested), frame)
    return child


def resume(frame, error=None):
    """Resume the active `frame` once and attach whatever it nests.

    A chain of sequences nested before any value is produced is attached
    level by level in a loop, not by recursion. Returns the exception raised
    by the last resumed frame, or None.
    """
    try:
        nested = frame.resume(error)
        while nested is not None:
            try:
                child = _release(nested, frame)
            except ContractViolation as exc:
                # raised in the producer at the yield that nested the object
                nested = frame.resume(exc)
                continue
            nested = attach(frame, child)
            frame = child
    except Exception as exc:
        return exc
    return None


def advance(root):
    """Pull the next terminal value into the chain rooted at `root`.

    Returns True when the active frame publishes a fresh value and False when
    the chain is exhausted. A producer failure that no frame handles is
    re-raised once it has unwound to the root.
    """
    active = current_active(root)
    error = None
    if not active.done:
        error = resume(active)
        active = current_active(root)

    while active.done:
        if active is root:
            if error is not None:
                raise error
            return False
        parent = pop(root, active)
        if error is not None:
            logger.debug('propagating %r into %r', error, parent)
        error = resume(parent, error)
        active = current_active(root)

    return True


def teardown(root):
    """Close every frame of the chain, deepest first, without resuming them."""
    frames = []
    frame = current_active(root)
    while frame is not root:
        frames.append(frame)
        frame = frame.directory
    frames.append(root)
    root.directory = root

    if len(frames) > 1 or not root.done:
        logger.debug('tearing down %d frame(s) below %r', len(frames), root)

    error = None
    for frame in frames:
        try:
            frame.close()
        except Exception as exc:
            if error is None:
                error = exc
    if error is not None:
        raise error
