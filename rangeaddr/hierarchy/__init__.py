"""Hierarchical addressing contracts."""

from rangeaddr.hierarchy.parent import (
    ParentRange,
    intersect_parent,
    parent_range,
    shrink_parent,
)

__all__ = [
    "ParentRange",
    "intersect_parent",
    "parent_range",
    "shrink_parent",
]
