from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from rangeaddr.core.decorated import DecoratedRange

T = TypeVar("T")
U = TypeVar("U")
D = TypeVar("D")
S = TypeVar("S", bound=Sequence)


@dataclass(frozen=True, slots=True, order=True)
class Range(Generic[T]):
    """
    Half-open range [offset, offset + length) over non-negative indices.

    Invariant:
    - 0 <= offset
    - 0 <= length

    `T` is a marker type only. It is erased at runtime, so `Range[Bytes]`
    and `Range[Lines]` with the same bounds compare equal while a type
    checker keeps them apart.
    """

    offset: int
    length: int

    def __post_init__(self):
        if not isinstance(self.offset, int) or not isinstance(self.length, int):
            raise TypeError("Range offset and length must be integers")
        if self.offset < 0:
            raise ValueError("Range offset cannot be negative")
        if self.length < 0:
            raise ValueError("Range length cannot be negative")

    @staticmethod
    def new(offset: int, length: int) -> "Range[T]":
        """Create a Range at offset with the given length."""
        return Range(offset, length)

    @staticmethod
    def empty(offset: int) -> "Range[T]":
        """Create an empty Range at the given offset."""
        return Range(offset, 0)

    @staticmethod
    def from_bounds(start: int, end: int) -> "Range[T]":
        """Create a Range covering start..end (end excluded)."""
        if start > end:
            raise ValueError("Range invariant violated: start > end")
        return Range(start, end - start)

    def is_empty(self) -> bool:
        """Check if the range addresses no positions."""
        return self.length == 0

    def next_offset(self) -> int:
        """Get the exclusive end of the range."""
        return self.offset + self.length

    def iter(self) -> range:
        """Get every index in the range, ascending. Re-iterable."""
        return range(self.offset, self.offset + self.length)

    def __iter__(self) -> Iterator[int]:
        return iter(self.iter())

    def contains(self, index: int) -> bool:
        """Check if the range contains the given index."""
        return self.offset <= index < self.next_offset()

    def as_slice(self) -> slice:
        """Get the range as a slice usable on Python sequences."""
        return slice(self.offset, self.next_offset())

    def shrink_n(self, n: int) -> "Range[T] | None":
        """Remove n positions from both ends, or None if there is not enough room.

        A range of exactly 2 * n positions shrinks to an empty range.
        """
        if n < 0:
            raise ValueError("n must be >= 0")
        if self.length < 2 * n:
            return None
        return Range(self.offset + n, self.length - 2 * n)

    def shrink(self) -> "Range[T] | None":
        """Remove one position from both ends."""
        return self.shrink_n(1)

    def intersect(self, other: "Range[T]") -> "Range[T] | None":
        """Get the overlap of two ranges, or None if they don't overlap.

        Ends are excluded: ranges that only touch do not intersect.
        """
        if other.offset >= self.next_offset():
            return None
        if self.offset >= other.next_offset():
            return None
        return self._overlap(other)

    def ends_intersect(self, other: "Range[T]") -> "Range[T] | None":
        """Get the overlap of two ranges, or None if they don't meet.

        Ends are included: ranges that touch intersect in an empty range
        at the shared offset.
        """
        if other.offset > self.next_offset():
            return None
        if self.offset > other.next_offset():
            return None
        return self._overlap(other)

    def _overlap(self, other: "Range[T]") -> "Range[T]":
        start = max(self.offset, other.offset)
        end = min(self.next_offset(), other.next_offset())
        return Range(start, end - start)

    def cast(self, tag: type[U]) -> "Range[U]":
        """Re-brand the range with another marker type.

        The tag is only used by type checkers; bounds are copied unchanged.
        """
        return Range(self.offset, self.length)

    def wrap(self, data: D) -> "DecoratedRange[D]":
        """Attach a payload to the range."""
        from rangeaddr.core.decorated import DecoratedRange

        return DecoratedRange(self.offset, self.length, data)

    def __repr__(self) -> str:
        return f"Range({self.offset}, {self.length})"


def slice_range(seq: S, range: Range) -> S:
    """Get the part of a sequence addressed by the given Range.

    Coord system matches python indices so we can just slice.
    """
    return seq[range.as_slice()]
