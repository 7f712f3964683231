from __future__ import annotations

import functools
import itertools
import math
from collections.abc import Awaitable, Callable, Iterable, Iterator
from functools import partial
from typing import TYPE_CHECKING, Any, Concatenate, ParamSpec, TypeVar

import cytoolz as cz
import more_itertools as mit

from .._core import CommonBase, iter_repr
from .._ordering import Ordering, cmp
from .._results import NONE, Option, Result, Some
from .._types import Cell, Enumerated, Partitioned, Unzipped
from ._eager import Seq, convert_data

if TYPE_CHECKING:
    from .._types import SupportsRichComparison
    from ._async import AsyncIter

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")
R = TypeVar("R")
S = TypeVar("S")
P = ParamSpec("P")

_SENTINEL: Any = object()


def _to_option(value: Any) -> Option[Any]:
    return NONE if value is _SENTINEL else Some(value)


class Iter(CommonBase[Iterator[T]], Iterator[T]):
    """A superset around Python's built-in `Iterator` Protocol, providing a rich set of functional programming tools.

    Implements the `Iterator` Protocol from `collections.abc`, so it can be used as a standard iterator.

    - An `Iterable` is any object capable of returning its members one at a time, permitting it to be iterated over in a for-loop.
    - An `Iterator` is an object representing a stream of data; returned by calling `iter()` on an `Iterable`.
    - Once an `Iterator` is exhausted, it cannot be reused or reset.

    It's designed around lazy evaluation: every adapter (`map`, `filter`, `zip`, ...) returns a new `Iter` wrapping the previous one,
    and no element is computed until a terminal method (`collect`, `fold`, `count`, ...) pulls them, one at a time.

    - To instantiate from an `Iterable`, simply pass it to the standard constructor.
    - To instantiate from unpacked values, use the `from_` class method.

    Keep in mind that `Iter` instances are single-use; once exhausted, they cannot be reused or reset.

    If you need to reuse the data, collect it into a `Seq` first with `.collect()`, and get a new `Iter` with `Seq.iter()`.

    In general, avoid intermediate references when dealing with lazy iterators, and prioritize method chaining instead.

    Args:
        data (Iterable[T]): Any object that can be iterated over.

    Example:
    ```python
    >>> import fluentiter as fi
    >>> (
    ...     fi.Iter(range(10))
    ...     .filter(lambda x: x % 2 == 0)
    ...     .map(lambda x: x * x)
    ...     .take(3)
    ...     .collect()
    ... )
    Seq(0, 4, 16)

    ```
    """

    _inner: Iterator[T]

    __slots__ = ()

    def __init__(self, data: Iterable[T]) -> None:
        self._inner = iter(data)

    def __next__(self) -> T:
        return next(self._inner)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({iter_repr(self._inner)})"

    def _lazy(
        self,
        factory: Callable[Concatenate[Iterator[T], P], Iterator[U]],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Iter[U]:
        return Iter(factory(self._inner, *args, **kwargs))

    def next(self) -> Option[T]:
        """Return the next element in the iterator.

        Note:
            The actual `.__next__()` method is conform to the Python `Iterator` Protocol, and is what will be actually called if you iterate over the `Iter` instance.

            `Iter.next()` is a convenience method that wraps the result in an `Option` to handle exhaustion gracefully.

        Returns:
            Option[T]: The next element in the iterator. `Some[T]`, or `NONE` if the iterator is exhausted.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> it = fi.Iter([1, None])
        >>> it.next()
        Some(1)
        >>> it.next()
        Some(None)
        >>> it.next()
        NONE
        >>> it.next()
        NONE

        ```
        """
        return _to_option(next(self._inner, _SENTINEL))

    # constructors ---------------------------------------------------------

    @staticmethod
    def from_(data: Iterable[U] | U, *more_data: U) -> Iter[U]:
        """Create an iterator from any Iterable, or from unpacked values.

        Prefer using the standard constructor, as this method involves extra checks and conversions steps.

        Args:
            data (Iterable[U] | U): Iterable to convert into an iterator, or a single value.
            *more_data (U): Additional values to include if 'data' is not an Iterable.

        Returns:
            Iter[U]: A new Iter instance containing the provided data.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Iter.from_(1, 2, 3).collect()
        Seq(1, 2, 3)
        >>> fi.Iter.from_([1, 2, 3]).collect()
        Seq(1, 2, 3)

        ```
        """
        return Iter(convert_data(data, *more_data))

    @staticmethod
    def once(value: U) -> Iter[U]:
        """Create an iterator that yields **value** exactly once."""
        return Iter((value,))

    @staticmethod
    def empty() -> Iter[Any]:
        """Create an iterator that yields nothing."""
        return Iter(())

    @staticmethod
    def from_count(start: int = 0, step: int = 1) -> Iter[int]:
        """Create an infinite `Iterator` of evenly spaced values.

        **Warning** ⚠️
            This creates an infinite iterator.
            Be sure to use `Iter.take()` or `Iter.take_while()` to limit the number of items taken.

        Args:
            start (int): Starting value of the sequence. Defaults to 0.
            step (int): Difference between consecutive values. Defaults to 1.

        Returns:
            Iter[int]: An iterator generating the sequence.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Iter.from_count(10, 2).take(3).collect()
        Seq(10, 12, 14)

        ```
        """
        return Iter(itertools.count(start, step))

    @staticmethod
    def from_fn(state: S, generator: Callable[[S], Option[tuple[V, S]]]) -> Iter[V]:
        """Create an `Iter` by repeatedly applying a **generator** function to an initial **state**.

        The **generator** function takes the current state and must return:

        - `Some((value, new_state))` to emit the value `V` and continue with the new **state** `S`.
        - `NONE` to stop the generation.

        **Warning** ⚠️
            If the **generator** function never returns `NONE`, it creates an infinite iterator.

        Args:
            state (S): Initial state for the generator.
            generator (Callable[[S], Option[tuple[V, S]]]): Function that generates the next value and state.

        Returns:
            Iter[V]: An iterator generating values produced by the generator function.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> def fib(state: tuple[int, int]) -> fi.Option[tuple[int, tuple[int, int]]]:
        ...     a, b = state
        ...     if a > 100:
        ...         return fi.NONE
        ...     return fi.Some((a, (b, a + b)))
        >>> fi.Iter.from_fn((0, 1), fib).collect()
        Seq(0, 1, 1, 2, 3, 5, 8, 13, 21, 34, 55, 89)

        ```
        """

        def _from_fn() -> Iterator[V]:
            current_state: S = state
            while True:
                result = generator(current_state)
                if result.is_none():
                    break
                value, current_state = result.unwrap()
                yield value

        return Iter(_from_fn())

    @staticmethod
    def successors(first: Option[U], func: Callable[[U], Option[U]]) -> Iter[U]:
        """Create an iterator where each successive item is computed from the preceding one.

        The iterator starts with **first** (if `Some`) and calls **func** on each item to get the next one, stopping at the first `NONE`.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> powers = fi.Iter.successors(
        ...     fi.Some(1), lambda n: fi.Some(n * 10) if n < 10_000 else fi.NONE
        ... )
        >>> powers.collect()
        Seq(1, 10, 100, 1000, 10000)

        ```
        """

        def _successors() -> Iterator[U]:
            current = first
            while current.is_some():
                value = current.unwrap()
                yield value
                current = func(value)

        return Iter(_successors())

    # maps -----------------------------------------------------------------

    def map(self, func: Callable[[T], R]) -> Iter[R]:
        """Apply a function to each element of the iterable.

        If you have an iterator that gives you elements of some type A, and you want an iterator of some other type B,
        you can use map(), passing a closure that takes an A and returns a B.

        If you are doing some sort of looping for a side effect, it is considered more idiomatic to use `for_each` than map().

        Args:
            func (Callable[[T], R]): Function to apply to each element.

        Returns:
            Iter[R]: An iterator of transformed elements.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Iter([1, 2]).map(lambda x: x + 1).collect()
        Seq(2, 3)

        ```
        """
        return self._lazy(partial(map, func))

    def filter(self, func: Callable[[T], bool]) -> Iter[T]:
        """Creates an `Iter` which uses a closure to determine if an element should be yielded.

        Given an element the closure must return true or false.

        The returned `Iter` will yield only the elements for which the closure returns true, in their original order.

        Note:
            `Iter.filter(f).next()` is equivalent to `Iter.find(f)`.

        Args:
            func (Callable[[T], bool]): Function to evaluate each item.

        Returns:
            Iter[T]: An iterable of the items that satisfy the predicate.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> data = (1, 2, 3)
        >>> fi.Iter(data).filter(lambda x: x > 1).collect()
        Seq(2, 3)
        >>> fi.Iter(data).filter(lambda x: x > 1).next()
        Some(2)

        ```
        """
        return self._lazy(partial(filter, func))

    def filter_map(self, func: Callable[[T], Option[R]]) -> Iter[R]:
        """Creates an iterator that both filters and maps.

        The returned iterator yields only the values for which the supplied closure returns Some(value).

        `filter_map` can be used to make chains of `filter` and map more concise.

        The example below shows how a `map().filter().map()` can be shortened to a single call to `filter_map`.

        Args:
            func (Callable[[T], Option[R]]): Function to apply to each item.

        Returns:
            Iter[R]: An iterable of the results where func returned `Some`.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> def _parse(s: str) -> fi.Result[int, str]:
        ...     try:
        ...         return fi.Ok(int(s))
        ...     except ValueError:
        ...         return fi.Err(f"Invalid integer, got {s!r}")
        >>>
        >>> data = fi.Seq(["1", "two", "NaN", "four", "5"])
        >>> data.iter().filter_map(lambda s: _parse(s).ok()).collect()
        Seq(1, 5)
        >>> # Equivalent to:
        >>> (
        ...     data.iter()
        ...    .map(lambda s: _parse(s).ok())
        ...    .filter(lambda s: s.is_some())
        ...    .map(lambda s: s.unwrap())
        ...    .collect()
        ... )
        Seq(1, 5)

        ```
        """

        def _filter_map(data: Iterator[T]) -> Iterator[R]:
            for item in data:
                res = func(item)
                if res.is_some():
                    yield res.unwrap()

        return self._lazy(_filter_map)

    def flat_map(self, func: Callable[[T], Iterable[R]]) -> Iter[R]:
        """Creates an iterator that works like map, but flattens nested structure.

        Each nested iterable returned by **func** is fully exhausted before the next element of **self** is pulled.

        `Iter.flat_map(f)` is equivalent to `Iter.map(f).flatten()`.

        Args:
            func (Callable[[T], Iterable[R]]): Function returning an iterable for each element.

        Returns:
            Iter[R]: An iterator over the concatenated results.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Iter(["alpha", "beta"]).flat_map(str.upper).collect()
        Seq('A', 'L', 'P', 'H', 'A', 'B', 'E', 'T', 'A')
        >>> fi.Iter([1, 2]).flat_map(lambda x: fi.Iter.from_count(x).take(2)).collect()
        Seq(1, 2, 2, 3)

        ```
        """

        def _flat_map(data: Iterator[T]) -> Iterator[R]:
            return cz.itertoolz.concat(map(func, data))

        return self._lazy(_flat_map)

    def flatten(self: Iter[Iterable[U]]) -> Iter[U]:
        """Creates an iterator that flattens nested structure, by exactly one level.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Iter([[1, 2], [3], []]).flatten().collect()
        Seq(1, 2, 3)
        >>> fi.Iter([[[1, 2]], [[3]]]).flatten().collect()
        Seq([1, 2], [3])

        ```
        """
        return self._lazy(cz.itertoolz.concat)

    def chain(self, *others: Iterable[T]) -> Iter[T]:
        """Concatenate zero or more iterables, any of which may be infinite.

        **self** is exhausted first, then each of **others** in order.

        An infinite sequence will prevent the rest of the arguments from being included.

        Args:
            *others (Iterable[T]): Other iterables to concatenate.

        Returns:
            Iter[T]: A new Iterable wrapper with concatenated elements.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Iter((1, 2)).chain((3, 4), [5]).collect()
        Seq(1, 2, 3, 4, 5)

        ```
        """

        def _chain(data: Iterator[T]) -> Iterator[T]:
            return cz.itertoolz.concat((data, *others))

        return self._lazy(_chain)

    def enumerate(self) -> Iter[Enumerated[T]]:
        """Return an `Iter` of (index, value) pairs.

        Each value in the iterable is paired with its index, starting from 0.

        The `Iter` yields `Enumerated[T]` tuples where **idx** is the index and **value** is the corresponding element from the iterable.

        Returns:
            Iter[Enumerated[T]]: An iterable of (index, value) pairs.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Iter(["a", "b"]).enumerate().collect()
        Seq((0, 'a'), (1, 'b'))
        >>> fi.Iter(["a", "b"]).enumerate().map(lambda e: e.idx).collect()
        Seq(0, 1)

        ```
        """

        def _enumerate(data: Iterator[T]) -> Iterator[Enumerated[T]]:
            return itertools.starmap(Enumerated, enumerate(data))

        return self._lazy(_enumerate)

    def zip(self, *others: Iterable[Any], strict: bool = False) -> Iter[tuple[Any, ...]]:
        """Yields n-length tuples, where n is the number of iterables passed as positional arguments.

        The i-th element in every tuple comes from the i-th iterable argument to `.zip()`.

        This continues until the shortest argument is exhausted: the remaining elements of the longer ones are left unmatched.

        **self** is pulled first at each step, so when it is longer, one extra element of it is consumed and dropped.

        Args:
            *others (Iterable[Any]): Other iterables to zip with.
            strict (bool): If `True` and one of the arguments is exhausted before the others, raise a ValueError. Defaults to `False`.

        Returns:
            Iter[tuple[Any, ...]]: An `Iter` of tuples containing elements from the zipped Iter and other iterables.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Iter([1, 2, 3, 4]).zip([5, 6]).collect()
        Seq((1, 5), (2, 6))
        >>> fi.Iter(["a", "b"]).zip([1, 2, 3], "xyz").collect()
        Seq(('a', 1, 'x'), ('b', 2, 'y'))

        ```
        """
        return self._lazy(zip, *others, strict=strict)

    def take(self, n: int) -> Iter[T]:
        """Creates an iterator that yields the first n elements, or fewer if the underlying iterator ends sooner.

        The element following the n-th one is never pulled from the underlying iterator.

        Args:
            n (int): Number of elements to take.

        Returns:
            Iter[T]: An iterable of the first n items.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> data = [1, 2, 3]
        >>> fi.Iter(data).take(2).collect()
        Seq(1, 2)
        >>> fi.Iter(data).take(5).collect()
        Seq(1, 2, 3)

        ```
        """
        return self._lazy(partial(cz.itertoolz.take, n))

    def skip(self, n: int) -> Iter[T]:
        """Drop the first n elements, or all of them if there are fewer.

        Args:
            n (int): Number of elements to skip.

        Returns:
            Iter[T]: An iterable of the items after skipping the first n items.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Iter((1, 2, 3)).skip(1).collect()
        Seq(2, 3)
        >>> fi.Iter((1, 2, 3)).skip(5).collect()
        Seq()

        ```
        """
        return self._lazy(itertools.islice, n, None)

    def step_by(self, step: int) -> Iter[T]:
        """Yield the first element, then every **step**-th element after it.

        Raises:
            ValueError: If **step** is lower than 1.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Iter(range(10)).step_by(3).collect()
        Seq(0, 3, 6, 9)

        ```
        """
        if step < 1:
            msg = f"step must be a positive integer, got {step}"
            raise ValueError(msg)
        return self._lazy(itertools.islice, 0, None, step)

    def take_while(self, predicate: Callable[[T], bool]) -> Iter[T]:
        """Take items while predicate holds.

        Iteration stops for good at the first element failing the predicate, even if later elements would pass it again.

        That element is consumed from the underlying iterator and discarded.

        Args:
            predicate (Callable[[T], bool]): Function to evaluate each item.

        Returns:
            Iter[T]: An iterable of the items taken while the predicate is true.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Iter((1, 2, 0, 3)).take_while(lambda x: x > 0).collect()
        Seq(1, 2)

        ```
        """
        return self._lazy(partial(itertools.takewhile, predicate))

    def skip_while(self, predicate: Callable[[T], bool]) -> Iter[T]:
        """Drop items while predicate holds.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Iter((1, 2, 0, 3)).skip_while(lambda x: x > 0).collect()
        Seq(0, 3)

        ```
        """
        return self._lazy(partial(itertools.dropwhile, predicate))

    def map_while(self, func: Callable[[T], Option[R]]) -> Iter[R]:
        """Creates an iterator that both yields elements based on a predicate and maps.

        **func** returns an `Option`: `Some` values are yielded unwrapped, and the first `NONE` ends the iteration for good.

        Args:
            func (Callable[[T], Option[R]]): Function to apply to each item.

        Returns:
            Iter[R]: An iterator of the unwrapped values up to the first `NONE`.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> def checked_div(x: int) -> fi.Option[int]:
        ...     return fi.NONE if x == 0 else fi.Some(16 // x)
        >>> fi.Iter([-1, 4, 0, 1]).map_while(checked_div).collect()
        Seq(-16, 4)

        ```
        """

        def _map_while(data: Iterator[T]) -> Iterator[R]:
            for item in data:
                res = func(item)
                if res.is_none():
                    return
                yield res.unwrap()

        return self._lazy(_map_while)

    def inspect(self, func: Callable[[T], object]) -> Iter[T]:
        """Do something with each element of an iterator, passing the value on.

        **func** runs exactly once per element, in pull order, right before the element is passed downstream.

        Args:
            func (Callable[[T], object]): Function called for its side effects.

        Returns:
            Iter[T]: An iterator yielding the same elements.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> (
        ...     fi.Iter([1, 4, 2, 3])
        ...     .inspect(lambda x: print(f"about to filter: {x}"))
        ...     .filter(lambda x: x % 2 == 0)
        ...     .inspect(lambda x: print(f"made it through filter: {x}"))
        ...     .sum()
        ... )
        about to filter: 1
        about to filter: 4
        made it through filter: 4
        about to filter: 2
        made it through filter: 2
        about to filter: 3
        6

        ```
        """
        return self._lazy(partial(map, partial(cz.functoolz.do, func)))

    def scan(self, initial: S, func: Callable[[Cell[S], T], R]) -> Iter[R]:
        """Transform elements by sharing state between iterations.

        `scan` takes two arguments:
            - an initial value which seeds the internal state
            - a closure with two arguments

        The first being a `Cell` holding the internal state and the second an iterator element.

        The closure can assign to `cell.value` to share state between iterations, and its return value is what the iterator yields.

        The state lives as long as this iterator, and is never shared with another one.

        Args:
            initial (S): Initial state.
            func (Callable[[Cell[S], T], R]): Function that takes the state cell and an item, and returns the mapped output.

        Returns:
            Iter[R]: An iterable of the yielded values.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> def running_total(acc: fi.Cell[int], item: int) -> int:
        ...     acc.value += item
        ...     return acc.value
        >>> fi.Iter([1, 2, 3, 4, 5]).scan(0, running_total).collect()
        Seq(1, 3, 6, 10, 15)
        >>> def factorials(acc: fi.Cell[int], item: int) -> str:
        ...     acc.value *= item
        ...     return f"{item}! = {acc.value}"
        >>> fi.Iter.from_count(1).scan(1, factorials).take(3).collect()
        Seq('1! = 1', '2! = 2', '3! = 6')

        ```
        """

        def _scan(data: Iterator[T]) -> Iterator[R]:
            state = Cell(initial)
            for item in data:
                yield func(state, item)

        return self._lazy(_scan)

    def cycle(self) -> Iter[T]:
        """Repeat the sequence indefinitely.

        The first pass is recorded, then replayed forever. An empty iterator stays empty.

        **Warning** ⚠️
            This creates an infinite iterator.
            Be sure to use Iter.take() or Iter.take_while() to limit the number of items taken.

        Returns:
            Iter[T]: A new Iterable wrapper that cycles through the elements indefinitely.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Iter((1, 2)).cycle().take(5).collect()
        Seq(1, 2, 1, 2, 1)
        >>> fi.Iter(()).cycle().next()
        NONE

        ```
        """
        return self._lazy(itertools.cycle)

    def peekable(self) -> Peekable[T]:
        """Creates an iterator which can use `peek` to look at the next element without consuming it.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> it = fi.Iter([1, 2]).peekable()
        >>> it.peek()
        Some(1)
        >>> it.next()
        Some(1)
        >>> it.collect()
        Seq(2)
        >>> it.peek()
        NONE

        ```
        """
        return Peekable(self._inner)

    # terminal operations ----------------------------------------------------

    def collect(self) -> Seq[T]:
        """Transforms an `Iter` into a `Seq`, consuming it.

        Note:
            Use `.into()` to convert the Iter into any other container type (`list`, `set`, `dict`, ...).

        Returns:
            Seq[T]: A materialized, ordered collection containing the collected elements.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Iter(range(5)).collect()
        Seq(0, 1, 2, 3, 4)
        >>> fi.Iter(range(3)).into(list)
        [0, 1, 2]

        ```
        """
        return Seq(self._inner)

    def try_collect(self: Iter[Option[U]] | Iter[Result[U, Any]] | Iter[U]) -> Option[Seq[U]]:
        """Fallibly transforms **self** into a `Seq`, short circuiting if a failure is encountered.

        Its main use case is simplifying conversions from iterators yielding `Option[T]` or `Result[T, E]` into `Option[Seq[T]]`.

        Any other element is considered a success, and is collected as is.

        If a failure is encountered, the iterator is still valid and may continue to be used, starting after the element that triggered the failure.

        Returns:
            Option[Seq[U]]: `Some[Seq[U]]` if all elements were successfully collected, or `NONE` if a failure was encountered.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Iter([fi.Some(1), fi.Some(2), fi.Some(3)]).try_collect()
        Some(Seq(1, 2, 3))
        >>> fi.Iter([fi.Ok(1), fi.Err("error"), fi.Ok(3)]).try_collect()
        NONE
        >>> it = fi.Iter([fi.Some(1), fi.NONE, fi.Some(3), fi.Some(4)])
        >>> it.try_collect()
        NONE
        >>> it.try_collect()
        Some(Seq(3, 4))
        >>> fi.Iter([fi.Some(1), 2, fi.Ok(3)]).try_collect()
        Some(Seq(1, 2, 3))

        ```
        """
        collected: list[U] = []
        for item in self._inner:
            match item:
                case Result():
                    if item.is_err():
                        return NONE
                    collected.append(item.unwrap())
                case Option():
                    if item.is_none():
                        return NONE
                    collected.append(item.unwrap())
                case _ as plain_value:
                    collected.append(plain_value)
        return Some(Seq(collected))

    def count(self) -> int:
        """Consumes the iterator, counting the number of iterations and returning it.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Iter("abc").count()
        3

        ```
        """
        return mit.ilen(self._inner)

    def for_each(
        self,
        func: Callable[Concatenate[T, P], Any],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> None:
        """Consume the Iterator by applying a function to each element in the iterable.

        Is a terminal operation, and is useful for functions that have side effects,
        or when you want to force evaluation of a lazy iterable.

        Args:
            func (Callable[Concatenate[T, P], Any]): Function to apply to each element.
            *args (P.args): Positional arguments for the function.
            **kwargs (P.kwargs): Keyword arguments for the function.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Iter([1, 2, 3]).for_each(lambda x: print(x + 1))
        2
        3
        4

        ```
        """
        for v in self._inner:
            func(v, *args, **kwargs)

    def fold(self, init: U, func: Callable[[U, T], U]) -> U:
        """Folds every element into an accumulator by applying an operation, returning the final result.

        The accumulation goes from left to right, starting from **init**.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Iter([1, 2, 3]).fold(0, lambda acc, x: acc + x)
        6
        >>> fi.Iter([1, 2, 3]).fold("0", lambda acc, x: f"({acc} + {x})")
        '(((0 + 1) + 2) + 3)'

        ```
        """
        return functools.reduce(func, self._inner, init)

    def reduce(self, func: Callable[[T, T], T]) -> Option[T]:
        """Reduces the elements to a single one, by repeatedly applying a reducing operation.

        This is a `fold` seeded with the first element.

        Returns:
            Option[T]: `NONE` if the iterator is empty, otherwise the result of the reduction.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Iter([1, 2, 3]).reduce(lambda a, b: a + b)
        Some(6)
        >>> fi.Iter([]).reduce(lambda a, b: a + b)
        NONE

        ```
        """
        return self.next().map(lambda first: self.fold(first, func))

    def sum(self: Iter[int] | Iter[float]) -> int | float:
        """Sums the elements of an iterator. An empty iterator returns 0.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Iter([1, 2, 3]).sum()
        6
        >>> fi.Iter([]).sum()
        0

        ```
        """
        return sum(self._inner)

    def product(self: Iter[int] | Iter[float]) -> int | float:
        """Multiplies the elements of an iterator. An empty iterator returns 1.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Iter([1, 2, 3, 4]).product()
        24
        >>> fi.Iter([]).product()
        1

        ```
        """
        return math.prod(self._inner)

    def all(self, predicate: Callable[[T], bool] = bool) -> bool:
        """Tests if every element of the iterator matches a predicate.

        Short-circuits at the first element failing the predicate.
        The iterator keeps its position right after that element, and can still be used.

        Args:
            predicate (Callable[[T], bool]): Function to evaluate each item. Defaults to `bool`.

        Returns:
            bool: `True` if all elements match (or the iterator is empty), `False` otherwise.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Iter([1, 2, 3]).all(lambda x: x > 0)
        True
        >>> it = fi.Iter([1, 2, 3])
        >>> it.all(lambda x: x != 2)
        False
        >>> it.next()
        Some(3)

        ```
        """
        return all(map(predicate, self._inner))

    def any(self, predicate: Callable[[T], bool] = bool) -> bool:
        """Tests if any element of the iterator matches a predicate.

        Short-circuits at the first element matching the predicate.
        The iterator keeps its position right after that element, and can still be used.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> it = fi.Iter([1, 2, 3])
        >>> it.any(lambda x: x == 2)
        True
        >>> it.next()
        Some(3)
        >>> fi.Iter([]).any()
        False

        ```
        """
        return any(map(predicate, self._inner))

    def find(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Searches for an element of an iterator that satisfies a predicate.

        Elements are consumed up to and including the first match.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> it = fi.Iter([1, 2, 3, 4])
        >>> it.find(lambda x: x % 2 == 0)
        Some(2)
        >>> it.next()
        Some(3)
        >>> fi.Iter([1, 3]).find(lambda x: x % 2 == 0)
        NONE

        ```
        """
        return self.filter(predicate).next()

    def find_map(self, func: Callable[[T], Option[R]]) -> Option[R]:
        """Applies function to the elements of the `Iterator` and returns the first Some(R) result.

        `Iter.find_map(f)` is equivalent to `Iter.filter_map(f).next()`.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> def _parse(s: str) -> fi.Option[int]:
        ...     try:
        ...         return fi.Some(int(s))
        ...     except ValueError:
        ...         return fi.NONE
        >>>
        >>> fi.Iter(["lol", "NaN", "2", "5"]).find_map(_parse)
        Some(2)

        ```
        """
        return self.filter_map(func).next()

    def position(self, predicate: Callable[[T], bool]) -> Option[int]:
        """Searches for an element in an iterator, returning its zero-based index.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Iter("abc").position(lambda c: c == "b")
        Some(1)
        >>> fi.Iter("abc").position(lambda c: c == "z")
        NONE

        ```
        """
        return _to_option(next(mit.locate(self._inner, predicate), _SENTINEL))

    def nth(self, n: int) -> Option[T]:
        """Returns the element at zero-based offset **n**, consuming every element up to and including it.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> it = fi.Iter([1, 2, 3])
        >>> it.nth(1)
        Some(2)
        >>> it.nth(1)
        NONE

        ```
        """
        return self.skip(n).next()

    def last(self) -> Option[T]:
        """Consumes the iterator, returning the last element.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Iter([1, 2, 3]).last()
        Some(3)
        >>> fi.Iter([]).last()
        NONE

        ```
        """
        return _to_option(mit.last(self._inner, _SENTINEL))

    def max(self: Iter[SupportsRichComparison[Any]]) -> Option[Any]:
        """Returns the maximum element of an iterator.

        If several elements are equally maximum, the last element is returned.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Iter([1, 1, 3, 2, 3, 4]).max()
        Some(4)
        >>> fi.Iter([]).max()
        NONE

        ```
        """
        return self.max_by(cmp)

    def min(self: Iter[SupportsRichComparison[Any]]) -> Option[Any]:
        """Returns the minimum element of an iterator.

        If several elements are equally minimum, the first element is returned.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Iter([3, 1, 2]).min()
        Some(1)

        ```
        """
        return self.min_by(cmp)

    def max_by(self, compare: Callable[[T, T], Ordering]) -> Option[T]:
        """Returns the element that gives the maximum value with respect to the specified comparison function.

        On ties, the later element wins.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> words = ["bb", "a", "cc"]
        >>> fi.Iter(words).max_by(lambda a, b: fi.cmp(len(a), len(b)))
        Some('cc')

        ```
        """
        return self.reduce(lambda a, b: a if compare(a, b) > Ordering.EQUAL else b)

    def min_by(self, compare: Callable[[T, T], Ordering]) -> Option[T]:
        """Returns the element that gives the minimum value with respect to the specified comparison function.

        On ties, the earlier element wins.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> words = ["bb", "a", "cc", "d"]
        >>> fi.Iter(words).min_by(lambda a, b: fi.cmp(len(a), len(b)))
        Some('a')

        ```
        """
        return self.reduce(lambda a, b: a if compare(a, b) <= Ordering.EQUAL else b)

    def max_by_key(self, key: Callable[[T], SupportsRichComparison[Any]]) -> Option[T]:
        """Returns the element that gives the maximum value from the specified function.

        **key** is called exactly once per element. On ties, the later element wins.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Iter([-3, 0, 1, 5, -10]).max_by_key(abs)
        Some(-10)

        ```
        """
        return (
            self.map(lambda x: (key(x), x))
            .max_by(lambda a, b: cmp(a[0], b[0]))
            .map(cz.itertoolz.second)
        )

    def min_by_key(self, key: Callable[[T], SupportsRichComparison[Any]]) -> Option[T]:
        """Returns the element that gives the minimum value from the specified function.

        **key** is called exactly once per element. On ties, the earlier element wins.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Iter([-3, 0, 1, 5, -10]).min_by_key(abs)
        Some(0)

        ```
        """
        return (
            self.map(lambda x: (key(x), x))
            .min_by(lambda a, b: cmp(a[0], b[0]))
            .map(cz.itertoolz.second)
        )

    def eq(self, other: Iterable[T]) -> bool:
        """Check if the elements of this iterator are equal to those of another, in order.

        Both sides must have the same length. Comparison stops at the first difference.

        Note:
            This will consume **self**, and **other** if it is an iterator.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Iter((1, 2, 3)).eq(fi.Iter((1, 2, 3)))
        True
        >>> fi.Iter((1, 2, 3)).eq([1, 2])
        False
        >>> fi.Iter(()).eq([])
        True

        ```
        """
        for left, right in itertools.zip_longest(self._inner, other, fillvalue=_SENTINEL):
            if left is _SENTINEL or right is _SENTINEL or left != right:
                return False
        return True

    def ne(self, other: Iterable[T]) -> bool:
        """Check if the elements of this iterator are not equal to those of another.

        Always the negation of `Iter.eq`.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Iter((1, 2, 3)).ne(fi.Iter((1, 2)))
        True

        ```
        """
        return not self.eq(other)

    def cmp(self: Iter[SupportsRichComparison[Any]], other: Iterable[Any]) -> Ordering:
        """Lexicographically compares the elements of this iterator with those of another.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Iter([1]).cmp([1])
        <Ordering.EQUAL: 0>
        >>> fi.Iter([1]).cmp([1, 2])
        <Ordering.LESS: -1>
        >>> fi.Iter([1, 3]).cmp([1, 2, 9])
        <Ordering.GREATER: 1>

        ```
        """
        for left, right in itertools.zip_longest(self._inner, other, fillvalue=_SENTINEL):
            if left is _SENTINEL:
                return Ordering.LESS
            if right is _SENTINEL:
                return Ordering.GREATER
            ordering = cmp(left, right)
            if ordering is not Ordering.EQUAL:
                return ordering
        return Ordering.EQUAL

    def partition(self, predicate: Callable[[T], bool]) -> Partitioned[T]:
        """Consumes an iterator, creating two sequences from it.

        The predicate is called once per element. Relative order is kept within each side.

        Returns:
            Partitioned[T]: The elements for which the predicate is `True`, then those for which it is `False`.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> even, odd = fi.Iter([1, 2, 3, 4]).partition(lambda x: x % 2 == 0)
        >>> even, odd
        (Seq(2, 4), Seq(1, 3))

        ```
        """
        excluded, included = mit.partition(predicate, self._inner)
        return Partitioned(Seq(included), Seq(excluded))

    def unzip(self: Iter[tuple[U, V]]) -> Unzipped[U, V]:
        """Converts an iterator of pairs into a pair of sequences.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Iter([(1, "a"), (2, "b")]).unzip()
        Unzipped(left=Seq(1, 2), right=Seq('a', 'b'))

        ```
        """
        left: list[U] = []
        right: list[V] = []
        for first, second in self._inner:
            left.append(first)
            right.append(second)
        return Unzipped(Seq(left), Seq(right))

    def to_async(self: Iter[Awaitable[U]] | Iter[U]) -> AsyncIter[U]:
        """Converts an iterator of awaitables into an `AsyncIter` awaiting each of them in order.

        Plain values are passed through unchanged.

        Example:
        ```python
        >>> import asyncio
        >>> import fluentiter as fi
        >>> async def double(x: int) -> int:
        ...     return x * 2
        >>> asyncio.run(fi.Iter([1, 2, 3]).map(double).to_async().collect())
        Seq(2, 4, 6)

        ```
        """
        from ._async import AsyncIter

        return AsyncIter.from_(self._inner)


class Peekable(Iter[T]):
    """An `Iter` with a `peek()` method, returning the next element without consuming it.

    See `Iter.peekable()` for details.
    """

    _inner: mit.peekable[T]

    __slots__ = ()

    def __init__(self, data: Iterable[T]) -> None:
        self._inner = mit.peekable(data)

    def peek(self) -> Option[T]:
        """Returns the next element without advancing the iterator, or `NONE` when exhausted."""
        return _to_option(self._inner.peek(_SENTINEL))

    def next_if(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Consume and return the next element if it matches **predicate**.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> it = fi.Iter([0, 1, 2]).peekable()
        >>> it.next_if(lambda x: x == 0)
        Some(0)
        >>> it.next_if(lambda x: x == 0)
        NONE
        >>> it.next()
        Some(1)

        ```
        """
        if self.peek().is_some_and(predicate):
            return self.next()
        return NONE
