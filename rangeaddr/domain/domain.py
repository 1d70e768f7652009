"""Index domains and overflow policies for fixed-width index spaces."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Final

from rangeaddr.core import Range


class OverflowPolicy(StrEnum):
    """What a bounded domain does when a range runs past its last index."""

    CHECKED = "checked"
    SATURATING = "saturating"


@dataclass(frozen=True, slots=True)
class IndexDomain:
    """Upper bound on offsets, for callers mirroring a fixed-width index type.

    `max_index` is the largest representable offset; a range may end exactly
    on it. `None` means unbounded, which is what plain `Range` values use.
    """

    max_index: int | None = None
    policy: OverflowPolicy = OverflowPolicy.CHECKED

    def __post_init__(self):
        if self.max_index is not None and self.max_index < 0:
            raise ValueError("max_index cannot be negative")

    @staticmethod
    def for_bits(bits: int, policy: OverflowPolicy = OverflowPolicy.CHECKED) -> "IndexDomain":
        if bits < 1:
            raise ValueError("bits must be >= 1")
        return IndexDomain(max_index=(1 << bits) - 1, policy=policy)

    @property
    def is_bounded(self) -> bool:
        return self.max_index is not None

    def new(self, offset: int, length: int) -> Range:
        """Create a Range that fits the domain.

        Saturating domains clamp the length; an offset past the end of the
        domain is an error under either policy.
        """
        if self.max_index is None:
            return Range(offset, length)
        if offset > self.max_index:
            raise OverflowError(f"Range offset {offset} exceeds max index {self.max_index}")
        if offset + length > self.max_index:
            if self.policy == OverflowPolicy.SATURATING:
                return Range(offset, self.max_index - offset)
            raise OverflowError(
                f"Range {offset}+{length} overflows max index {self.max_index}"
            )
        return Range(offset, length)

    def next_offset(self, range: Range) -> int:
        end = range.next_offset()
        if self.max_index is None or end <= self.max_index:
            return end
        if range.offset > self.max_index:
            raise OverflowError(f"Range offset {range.offset} exceeds max index {self.max_index}")
        if self.policy == OverflowPolicy.SATURATING:
            return self.max_index
        raise OverflowError(f"Next offset {end} overflows max index {self.max_index}")

    def check(self, range: Range) -> Range:
        """Return the range unchanged if it fits, regardless of policy."""
        if self.max_index is not None and range.next_offset() > self.max_index:
            raise OverflowError(f"{range!r} does not fit max index {self.max_index}")
        return range


UNBOUNDED: Final[IndexDomain] = IndexDomain()
"""Domain with no upper bound."""

U32: Final[IndexDomain] = IndexDomain.for_bits(32)
"""Checked 32-bit unsigned index domain."""

U64: Final[IndexDomain] = IndexDomain.for_bits(64)
"""Checked 64-bit unsigned index domain."""
