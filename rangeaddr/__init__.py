"""Range addressing: half-open index ranges and their arithmetic."""

from rangeaddr.core import DecoratedRange, Range, slice_range
from rangeaddr.domain import U32, U64, UNBOUNDED, IndexDomain, OverflowPolicy
from rangeaddr.hierarchy import (
    ParentRange,
    intersect_parent,
    parent_range,
    shrink_parent,
)

__all__ = [
    "U32",
    "U64",
    "UNBOUNDED",
    "DecoratedRange",
    "IndexDomain",
    "OverflowPolicy",
    "ParentRange",
    "Range",
    "intersect_parent",
    "parent_range",
    "shrink_parent",
    "slice_range",
]
