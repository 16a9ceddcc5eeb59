__version__ = "0.1.0"

from .convert import to_interval
from .core import intersection, union
from .endpoint import Closed, Endpoint, Open, Unbounded, is_endpoint
from .interval import Interval

__all__ = [
    "Interval",
    "Endpoint",
    "Open",
    "Closed",
    "Unbounded",
    "is_endpoint",
    "to_interval",
    "union",
    "intersection",
]
