import logging

from intervaltools.endpoint import Closed, Endpoint, Open, T, Unbounded
from intervaltools.interval import Interval

logger = logging.getLogger(__name__)


def min_left(a: Interval[T], b: Interval[T]) -> Endpoint[T]:
    """Earliest start of ``a`` and ``b``; ties go to the inclusive endpoint."""
    match a.left, b.left:
        case Closed(x), Open(y):
            return a.left if x <= y else b.left
        case Open(x), Closed(y):
            return a.left if x < y else b.left
        case (Closed(x), Closed(y)) | (Open(x), Open(y)):
            return a.left if x <= y else b.left
        case _:
            return Unbounded()


def max_right(a: Interval[T], b: Interval[T]) -> Endpoint[T]:
    """Latest end of ``a`` and ``b``; ties go to the inclusive endpoint."""
    match a.right, b.right:
        case Closed(x), Open(y):
            return a.right if x >= y else b.right
        case Open(x), Closed(y):
            return a.right if x > y else b.right
        case (Closed(x), Closed(y)) | (Open(x), Open(y)):
            return a.right if x >= y else b.right
        case _:
            return Unbounded()


def max_left(a: Interval[T], b: Interval[T]) -> Endpoint[T]:
    """Latest start of ``a`` and ``b``; ties go to the exclusive endpoint.

    An Unbounded start never wins unless both starts are unbounded.
    """
    match a.left, b.left:
        case Closed(x), Open(y):
            return a.left if x > y else b.left
        case Open(x), Closed(y):
            return a.left if x >= y else b.left
        case (Closed(x), Closed(y)) | (Open(x), Open(y)):
            return a.left if x >= y else b.left
        case Unbounded(), other:
            return other
        case _:
            return a.left


def min_right(a: Interval[T], b: Interval[T]) -> Endpoint[T]:
    """Earliest end of ``a`` and ``b``; ties go to the exclusive endpoint.

    An Unbounded end never wins unless both ends are unbounded.
    """
    match a.right, b.right:
        case Closed(x), Open(y):
            return a.right if x < y else b.right
        case Open(x), Closed(y):
            return a.right if x <= y else b.right
        case (Closed(x), Closed(y)) | (Open(x), Open(y)):
            return a.right if x <= y else b.right
        case Unbounded(), other:
            return other
        case _:
            return a.right


def union(a: Interval[T], b: Interval[T]) -> Interval[T] | None:
    """Return the smallest interval covering both ``a`` and ``b``.

    Only overlapping intervals have a contiguous union, so disjoint inputs
    (including ones that merely touch at an open boundary) give ``None``.

    Example:
        >>> union(Interval.closed(0, 5), Interval.closed_open(5, 10))
        Interval(left=Closed(value=0), right=Open(value=10))
        >>> union(Interval.closed_open(0, 5), Interval.closed_open(5, 10)) is None
        True
    """
    if not a.overlaps(b):
        logger.debug("union of disjoint intervals %r and %r", a, b)
        return None
    return Interval(min_left(a, b), max_right(a, b))


def intersection(a: Interval[T], b: Interval[T]) -> Interval[T] | None:
    """Return the interval of values admitted by both ``a`` and ``b``.

    Returns ``None`` when they share no value.
    """
    if not a.overlaps(b):
        logger.debug("intersection of disjoint intervals %r and %r", a, b)
        return None
    return Interval(max_left(a, b), min_right(a, b))
