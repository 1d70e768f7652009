"""Index domain configuration."""

from rangeaddr.domain.domain import U32, U64, UNBOUNDED, IndexDomain, OverflowPolicy

__all__ = [
    "U32",
    "U64",
    "UNBOUNDED",
    "IndexDomain",
    "OverflowPolicy",
]
