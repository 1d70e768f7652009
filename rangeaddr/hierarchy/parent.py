"""Contract for values that address a parent region through a Range."""

from typing import Protocol, Self, runtime_checkable

from rangeaddr.core import Range


@runtime_checkable
class ParentRange(Protocol):
    """Something built around a plain Range, e.g. a node in a hierarchical array."""

    @classmethod
    def from_range(cls, range: Range) -> Self: ...

    def get_range(self) -> Range: ...

    def set_range(self, range: Range) -> None: ...


def parent_range(parent: ParentRange) -> Range:
    return parent.get_range()


def intersect_parent(parent: ParentRange, other: Range) -> Range | None:
    return parent.get_range().intersect(other)


def shrink_parent(parent: ParentRange, n: int = 1) -> bool:
    """Shrink the parent's range in place. Returns False if it was too short."""
    shrunk = parent.get_range().shrink_n(n)
    if shrunk is None:
        return False
    parent.set_range(shrunk)
    return True
