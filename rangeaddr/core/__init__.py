"""Range value type and range arithmetic."""

from rangeaddr.core.range import Range, slice_range
from rangeaddr.core.decorated import DecoratedRange

__all__ = [
    "DecoratedRange",
    "Range",
    "slice_range",
]
