from dataclasses import dataclass
from typing import Generic, TypeVar

from rangeaddr.core.range import Range

D = TypeVar("D")


@dataclass(frozen=True, slots=True)
class DecoratedRange(Range, Generic[D]):
    """Range carrying a payload alongside its bounds.

    Equality also compares the payload. Arithmetic inherited from Range
    returns plain ranges; the payload stays on the value it was wrapped onto.

    Ordering is by (offset, length) among decorated ranges only; comparing
    against a plain Range raises TypeError.
    """

    data: D

    def unwrap(self) -> D:
        """Get the payload."""
        return self.data

    def decouple(self) -> tuple[Range, D]:
        """Split into the plain range and the payload."""
        return Range(self.offset, self.length), self.data

    def __repr__(self) -> str:
        return f"DecoratedRange({self.offset}, {self.length}, {self.data!r})"
