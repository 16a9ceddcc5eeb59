"""Interval endpoints.

An endpoint is one boundary of an interval and is exactly one of:

- ``Open(value)``: the boundary value is excluded
- ``Closed(value)``: the boundary value is included
- ``Unbounded()``: no boundary, the interval extends forever on that side

Endpoints carry no behaviour of their own. Comparisons happen in
``intervaltools.interval`` and ``intervaltools.core`` by matching on the
variant, so every open/closed/unbounded pairing is handled explicitly.
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeAlias, TypeVar

from typing_extensions import TypeIs

T = TypeVar("T")


@dataclass(frozen=True)
class Open(Generic[T]):
    """Boundary that excludes ``value`` (``Open(3)`` does not admit 3)."""

    value: T


@dataclass(frozen=True)
class Closed(Generic[T]):
    """Boundary that includes ``value`` (``Closed(3)`` admits 3)."""

    value: T


@dataclass(frozen=True)
class Unbounded:
    """Boundary that admits every value in its direction."""


Endpoint: TypeAlias = Open[T] | Closed[T] | Unbounded


def is_endpoint(obj: Any) -> TypeIs[Endpoint[Any]]:
    return isinstance(obj, (Open, Closed, Unbounded))
