from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, NamedTuple, Protocol, TypeVar

if TYPE_CHECKING:
    from ._iter import Seq

T = TypeVar("T")
V = TypeVar("V")
T_contra = TypeVar("T_contra", contravariant=True)

# transformed iterables result types


class Unzipped(NamedTuple, Generic[T, V]):
    """Represents the result of unzipping an iterator of pairs into two separate sequences.

    See `Iter.unzip()` for details.
    """

    left: Seq[T]
    """The first elements of the pairs."""
    right: Seq[V]
    """The second elements of the pairs."""


class Partitioned(NamedTuple, Generic[T]):
    """Represents the result of splitting an iterator in two with a predicate.

    See `Iter.partition()` for details.
    """

    included: Seq[T]
    """Elements for which the predicate returned `True`."""
    excluded: Seq[T]
    """Elements for which the predicate returned `False`."""


# Iterations result types


class Enumerated(NamedTuple, Generic[T]):
    """Represents an item with its associated index in an enumeration.

    See `Iter.enumerate()` for details.
    """

    idx: int
    """The index of the item in the enumeration."""
    value: T
    """The value of the item."""

    def __repr__(self) -> str:
        return f"({self.idx}, {self.value.__repr__()})"


@dataclass(slots=True)
class Cell(Generic[T]):
    """Mutable state holder passed to the `Iter.scan()` callback.

    The same `Cell` is reused for every element of one iteration.
    """

    value: T


# typeshed protocols


class SupportsDunderLT(Protocol[T_contra]):
    def __lt__(self, other: T_contra, /) -> bool: ...


class SupportsDunderGT(Protocol[T_contra]):
    def __gt__(self, other: T_contra, /) -> bool: ...


SupportsRichComparison = SupportsDunderLT[T_contra] | SupportsDunderGT[T_contra]
