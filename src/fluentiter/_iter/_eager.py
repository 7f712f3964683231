from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import TYPE_CHECKING, TypeVar, overload

import cytoolz as cz

from .._core import CommonBase, seq_repr

if TYPE_CHECKING:
    from .._results import Option
    from ._main import Iter

T = TypeVar("T")
U = TypeVar("U")


def convert_data(data: Iterable[T] | T, *more_data: T) -> Iterable[T]:
    return data if cz.itertoolz.isiterable(data) else (data, *more_data)  # type: ignore[return-value]


class Seq(CommonBase[tuple[T, ...]], Sequence[T]):
    """`Seq` represent an in-memory, immutable, ordered sequence of elements.

    Implements the `Sequence` Protocol from `collections.abc`, so it can be used as a standard immutable collection.

    It is what `Iter.collect()` returns. The underlying data structure is a `tuple`.

    A `Seq` can be iterated as many times as needed: call `.iter()` to get a fresh lazy `Iter` over it.

    Equality is element-wise against any other `Seq`, `tuple` or `list`.

    Args:
        data (Iterable[T]): The data to initialize the Seq with.

    Example:
    ```python
    >>> import fluentiter as fi
    >>> seq = fi.Seq([1, 2, 3])
    >>> seq
    Seq(1, 2, 3)
    >>> seq.iter().map(lambda x: x * 10).collect()
    Seq(10, 20, 30)
    >>> seq == (1, 2, 3)
    True
    >>> len(seq), seq[-1]
    (3, 3)

    ```
    """

    _inner: tuple[T, ...]

    __slots__ = ()

    def __init__(self, data: Iterable[T] = ()) -> None:
        self._inner = data if isinstance(data, tuple) else tuple(data)

    @staticmethod
    def from_(data: Iterable[U] | U, *more_data: U) -> Seq[U]:
        """Create a `Seq` from an `Iterable` or unpacked values.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Seq.from_(1, 2, 3)
        Seq(1, 2, 3)

        ```
        """
        return Seq(convert_data(data, *more_data))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({seq_repr(self._inner)})"

    def __iter__(self) -> Iterator[T]:
        return iter(self._inner)

    def __len__(self) -> int:
        return len(self._inner)

    @overload
    def __getitem__(self, index: int) -> T: ...
    @overload
    def __getitem__(self, index: slice) -> Seq[T]: ...
    def __getitem__(self, index: int | slice) -> T | Seq[T]:
        if isinstance(index, slice):
            return Seq(self._inner[index])
        return self._inner[index]

    def __eq__(self, other: object) -> bool:
        match other:
            case Seq():
                return self._inner == other._inner
            case tuple():
                return self._inner == other
            case list():
                return list(self._inner) == other
            case _:
                return NotImplemented

    def __hash__(self) -> int:
        return hash(self._inner)

    def iter(self) -> Iter[T]:
        """Get a lazy `Iter` over the elements of the `Seq`.

        Returns:
            Iter[T]: A new iterator, starting from the first element.
        """
        from ._main import Iter

        return Iter(self._inner)

    def first(self) -> Option[T]:
        """Return the first element, as an `Option`.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Seq([4, 5]).first()
        Some(4)
        >>> fi.Seq([]).first()
        NONE

        ```
        """
        from .._results import NONE, Some

        return Some(self._inner[0]) if self._inner else NONE
