from typing import Any

from intervaltools.interval import Interval


def to_interval(value: Any) -> Interval[Any]:
    """Coerce a range-like value into an ``Interval``.

    Accepts:
    - Interval: returned as-is
    - range: step-1 ranges become ``[start, stop)``
    - slice: ``[start, stop)`` with ``None`` meaning unbounded
    - (left, right) pair of endpoints

    Raises:
        TypeError: If value is not one of the above
        ValueError: If a range or slice has a step
    """
    match value:
        case Interval():
            return value
        case range():
            return Interval.from_range(value)
        case slice():
            return Interval.from_slice(value)
        case (left, right):
            return Interval.from_endpoints((left, right))
    raise TypeError(
        f"Cannot build an Interval from {type(value).__name__!r}: {value!r}\n"
        f"Examples:\n"
        f"  to_interval(range(0, 5))               # [0, 5)\n"
        f"  to_interval(slice(None, 9))            # (-inf, 9)\n"
        f"  to_interval((Closed(0), Closed(5)))    # [0, 5]"
    )
