from dataclasses import dataclass
from typing import Any, Generic

from intervaltools.endpoint import Closed, Endpoint, Open, T, Unbounded, is_endpoint


def _reaches(left: Endpoint[T], right: Endpoint[T]) -> bool:
    """True if a span starting at ``left`` can still meet one ending at ``right``.

    Closed against Closed allows touching (``<=``). Any Open side excludes the
    shared value (``<``). An Unbounded side always reaches.
    """
    match left, right:
        case Closed(x), Closed(y):
            return x <= y
        case (Open(x), Open(y)) | (Open(x), Closed(y)) | (Closed(x), Open(y)):
            return x < y
        case _:
            return True


@dataclass(frozen=True)
class Interval(Generic[T]):
    """A span of an ordered domain between a ``left`` and a ``right`` endpoint.

    Intervals are expected to ascend from left to right, i.e. every value
    admitted by ``left`` is <= every value admitted by ``right``. This is not
    checked: ``Interval(Closed(10), Closed(0))`` can be built and admits no
    value, so ``is_empty()`` returns True. Overlap, union and intersection
    results are only meaningful for ascending intervals.
    """

    left: Endpoint[T]
    right: Endpoint[T]

    @classmethod
    def from_endpoints(cls, pair: tuple[Endpoint[T], Endpoint[T]]) -> "Interval[T]":
        left, right = pair
        for edge, endpoint in (("left", left), ("right", right)):
            if not is_endpoint(endpoint):
                raise TypeError(
                    f"Interval {edge} endpoint must be Open, Closed or Unbounded.\n"
                    f"Got {type(endpoint).__name__!r}: {endpoint!r}\n"
                    f"Hint: wrap bare values, e.g. (Closed(0), Open(5)),\n"
                    f"      or use Interval.closed_open(0, 5)"
                )
        return cls(left, right)

    @classmethod
    def from_range(cls, r: range) -> "Interval[int]":
        """Convert a step-1 ``range`` into ``[start, stop)``."""
        if r.step != 1:
            raise ValueError(
                f"Only ranges with step 1 describe a contiguous interval.\n"
                f"Got {r!r}\n"
                f"Example: Interval.from_range(range(0, 10))"
            )
        return cls(Closed(r.start), Open(r.stop))

    @classmethod
    def from_slice(cls, s: slice) -> "Interval[Any]":
        """Convert ``slice(start, stop)`` into ``[start, stop)``.

        A ``None`` start or stop becomes an Unbounded endpoint, so
        ``slice(None, 9)`` is ``(-inf, 9)`` and ``slice(None)`` covers everything.
        """
        if s.step not in (None, 1):
            raise ValueError(
                f"Interval slices cannot have a step, got {s!r}.\n"
                f"Example: Interval.from_slice(slice(0, 10))"
            )
        left: Endpoint[Any] = Unbounded() if s.start is None else Closed(s.start)
        right: Endpoint[Any] = Unbounded() if s.stop is None else Open(s.stop)
        return cls(left, right)

    @classmethod
    def closed(cls, start: T, end: T) -> "Interval[T]":
        return cls(Closed(start), Closed(end))

    @classmethod
    def open(cls, start: T, end: T) -> "Interval[T]":
        return cls(Open(start), Open(end))

    @classmethod
    def closed_open(cls, start: T, end: T) -> "Interval[T]":
        return cls(Closed(start), Open(end))

    @classmethod
    def open_closed(cls, start: T, end: T) -> "Interval[T]":
        return cls(Open(start), Closed(end))

    @classmethod
    def less_than(cls, end: T) -> "Interval[T]":
        return cls(Unbounded(), Open(end))

    @classmethod
    def at_most(cls, end: T) -> "Interval[T]":
        return cls(Unbounded(), Closed(end))

    @classmethod
    def at_least(cls, start: T) -> "Interval[T]":
        return cls(Closed(start), Unbounded())

    @classmethod
    def unbounded(cls) -> "Interval[Any]":
        return cls(Unbounded(), Unbounded())

    def overlaps(self, other: "Interval[T]") -> bool:
        """True if the two intervals admit at least one common value.

        Generalizes the exclusive test ``x1 < y2 and y1 < x2`` to every
        combination of open, closed and unbounded endpoints.
        """
        return _reaches(self.left, other.right) and _reaches(other.left, self.right)

    def is_empty(self) -> bool:
        """True if no value is admitted, e.g. ``[5, 5)`` or a reversed interval."""
        return not self.overlaps(self)

    def __contains__(self, value: T) -> bool:
        match self.left:
            case Closed(x) if not x <= value:
                return False
            case Open(x) if not x < value:
                return False
        match self.right:
            case Closed(y) if not value <= y:
                return False
            case Open(y) if not value < y:
                return False
        return True

    def __or__(self, other: "Interval[T]") -> "Interval[T] | None":
        if not isinstance(other, Interval):
            return NotImplemented
        from intervaltools.core import union

        return union(self, other)

    def __and__(self, other: "Interval[T]") -> "Interval[T] | None":
        if not isinstance(other, Interval):
            return NotImplemented
        from intervaltools.core import intersection

        return intersection(self, other)
