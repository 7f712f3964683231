from __future__ import annotations

from abc import ABC
from collections.abc import Callable
from typing import Concatenate, Generic, ParamSpec, Self, TypeVar

P = ParamSpec("P")
R = TypeVar("R")
T = TypeVar("T")


class Pipeable:
    __slots__ = ()

    def into(
        self,
        func: Callable[Concatenate[Self, P], R],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> R:
        """Convert `Self` to `R`.

        This method allows to pipe the instance into an object or function that can convert `Self` into another type.

        Conceptually, this allow to do x.into(f) instead of f(x), hence keeping a functional chaining style.

        Args:
            func (Callable[Concatenate[Self, P], R]): Function for conversion.
            *args (P.args): Positional arguments to pass to the function.
            **kwargs (P.kwargs): Keyword arguments to pass to the function.

        Returns:
            R: The converted value.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Iter([3, 1, 2]).map(lambda x: x * 2).into(sorted)
        [2, 4, 6]
        >>> fi.Iter("abc").into("-".join)
        'a-b-c'

        ```
        """
        return func(self, *args, **kwargs)


class CommonBase(ABC, Pipeable, Generic[T]):
    """Base class of `Iter`, `AsyncIter` and `Seq`.

    Each wrapper holds exactly one object in its `_inner` slot: an iterator for the lazy wrappers, a `tuple` for `Seq`.

    Args:
        data (T): The underlying data to wrap.
    """

    _inner: T

    __slots__ = ("_inner",)

    def __init__(self, data: T) -> None:
        self._inner = data

    def inner(self) -> T:
        """Get the wrapped object, leaving the fluent API.

        For an `Iter`, pulling from the returned iterator also advances the `Iter`, since they share the same source.

        Returns:
            T: The underlying data.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Seq([1, 2]).inner()
        (1, 2)
        >>> it = fi.Iter([1, 2, 3])
        >>> next(it.inner())
        1
        >>> it.collect()
        Seq(2, 3)

        ```
        """
        return self._inner
