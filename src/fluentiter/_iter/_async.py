from __future__ import annotations

import asyncio
import inspect
import operator
from collections.abc import (
    AsyncIterable,
    AsyncIterator,
    Awaitable,
    Callable,
    Iterable,
)
from typing import TYPE_CHECKING, Any, Concatenate, ParamSpec, TypeVar

import cytoolz as cz

from .._core import CommonBase, iter_repr
from .._ordering import Ordering, cmp
from .._results import NONE, Option, Some
from .._types import Cell, Enumerated, Partitioned, Unzipped
from ._eager import Seq

if TYPE_CHECKING:
    from .._types import SupportsRichComparison

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")
R = TypeVar("R")
S = TypeVar("S")
P = ParamSpec("P")


async def _resolve(value: Awaitable[R] | R) -> R:
    if inspect.isawaitable(value):
        return await value
    return value


async def _pull(it: AsyncIterator[T]) -> Option[T]:
    try:
        return Some(await anext(it))
    except StopAsyncIteration:
        return NONE


async def _from_sync(data: Iterable[T]) -> AsyncIterator[T]:
    for item in data:
        yield item


async def _awaiting(data: Iterable[Awaitable[T] | T]) -> AsyncIterator[T]:
    for item in data:
        yield await _resolve(item)


def _as_async(data: Iterable[T] | AsyncIterable[T]) -> AsyncIterator[T]:
    if isinstance(data, AsyncIterable):
        return aiter(data)
    return _from_sync(data)


class AsyncIter(CommonBase[AsyncIterator[T]], AsyncIterator[T]):
    """The asynchronous counterpart of `Iter`, wrapping an `AsyncIterator`.

    Implements the `AsyncIterator` Protocol from `collections.abc`, so it can be used in `async for` loops.

    Adapters (`map`, `filter`, `zip`, ...) are lazy and return a new `AsyncIter`.
    Terminal methods (`collect`, `fold`, `count`, ...) are coroutines, and must be awaited.

    Every callback can be either a plain function or a coroutine function: when a callback returns an awaitable, it's awaited before being used.

    Args:
        data (AsyncIterable[T]): Any object that can be iterated over with `async for`.

    Example:
    ```python
    >>> import asyncio
    >>> import fluentiter as fi
    >>> async def fetch(x: int) -> int:
    ...     await asyncio.sleep(0)
    ...     return x * 10
    >>> async def main() -> fi.Seq[int]:
    ...     return await (
    ...         fi.AsyncIter.from_(range(5))
    ...         .map(fetch)
    ...         .filter(lambda x: x > 10)
    ...         .collect()
    ...     )
    >>> asyncio.run(main())
    Seq(20, 30, 40)

    ```
    """

    _inner: AsyncIterator[T]

    __slots__ = ()

    def __init__(self, data: AsyncIterable[T]) -> None:
        self._inner = aiter(data)

    async def __anext__(self) -> T:
        return await anext(self._inner)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({iter_repr(self._inner)})"

    def _lazy(
        self,
        factory: Callable[Concatenate[AsyncIterator[T], P], AsyncIterator[U]],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> AsyncIter[U]:
        return AsyncIter(factory(self._inner, *args, **kwargs))

    async def next(self) -> Option[T]:
        """Return the next element wrapped in `Some`, or `NONE` once the iterator is exhausted.

        Example:
        ```python
        >>> import asyncio
        >>> import fluentiter as fi
        >>> async def main() -> list[fi.Option[int]]:
        ...     it = fi.AsyncIter.from_([1])
        ...     return [await it.next(), await it.next()]
        >>> asyncio.run(main())
        [Some(1), NONE]

        ```
        """
        return await _pull(self._inner)

    # constructors ---------------------------------------------------------

    @staticmethod
    def from_(data: Iterable[Awaitable[U] | U] | AsyncIterable[U]) -> AsyncIter[U]:
        """Create an `AsyncIter` from an async iterable, or from a sync iterable.

        Elements of a sync iterable that are awaitables are awaited one after the other, in order.

        Args:
            data (Iterable[Awaitable[U] | U] | AsyncIterable[U]): The source to wrap.

        Returns:
            AsyncIter[U]: A new `AsyncIter` over the source.

        Example:
        ```python
        >>> import asyncio
        >>> import fluentiter as fi
        >>> async def value(x: int) -> int:
        ...     return x
        >>> asyncio.run(fi.AsyncIter.from_([value(1), 2, value(3)]).collect())
        Seq(1, 2, 3)

        ```
        """
        if isinstance(data, AsyncIterable):
            return AsyncIter(data)
        return AsyncIter(_awaiting(data))

    @staticmethod
    def once(value: U) -> AsyncIter[U]:
        """Create an `AsyncIter` that yields **value** exactly once."""
        return AsyncIter(_from_sync((value,)))

    @staticmethod
    def empty() -> AsyncIter[Any]:
        """Create an `AsyncIter` that yields nothing."""
        return AsyncIter(_from_sync(()))

    @staticmethod
    def from_count(start: int = 0, step: int = 1) -> AsyncIter[int]:
        """Create an infinite `AsyncIter` of evenly spaced values.

        **Warning** ⚠️
            This creates an infinite iterator.
            Be sure to use `AsyncIter.take()` or `AsyncIter.take_while()` to limit the number of items taken.
        """

        async def _from_count() -> AsyncIterator[int]:
            current = start
            while True:
                yield current
                current += step

        return AsyncIter(_from_count())

    @staticmethod
    def from_fn(
        state: S,
        generator: Callable[[S], Awaitable[Option[tuple[V, S]]] | Option[tuple[V, S]]],
    ) -> AsyncIter[V]:
        """Create an `AsyncIter` by repeatedly applying a **generator** function to an initial **state**.

        See `Iter.from_fn()` for details. The **generator** may be a coroutine function.
        """

        async def _from_fn() -> AsyncIterator[V]:
            current_state = state
            while True:
                result = await _resolve(generator(current_state))
                if result.is_none():
                    break
                value, current_state = result.unwrap()
                yield value

        return AsyncIter(_from_fn())

    @staticmethod
    def successors(
        first: Option[U], func: Callable[[U], Awaitable[Option[U]] | Option[U]]
    ) -> AsyncIter[U]:
        """Create an `AsyncIter` where each successive item is computed from the preceding one.

        See `Iter.successors()` for details. **func** may be a coroutine function.
        """

        async def _successors() -> AsyncIterator[U]:
            current = first
            while current.is_some():
                value = current.unwrap()
                yield value
                current = await _resolve(func(value))

        return AsyncIter(_successors())

    # maps -----------------------------------------------------------------

    def map(self, func: Callable[[T], Awaitable[R] | R]) -> AsyncIter[R]:
        """Apply a function to each element, awaiting its result when it's awaitable.

        Example:
        ```python
        >>> import asyncio
        >>> import fluentiter as fi
        >>> async def double(x: int) -> int:
        ...     return x * 2
        >>> asyncio.run(fi.AsyncIter.from_([1, 2]).map(double).map(str).collect())
        Seq('2', '4')

        ```
        """

        async def _map(data: AsyncIterator[T]) -> AsyncIterator[R]:
            async for item in data:
                yield await _resolve(func(item))

        return self._lazy(_map)

    def filter(self, func: Callable[[T], Awaitable[bool] | bool]) -> AsyncIter[T]:
        """Yield only the elements for which **func** returns true, in their original order."""

        async def _filter(data: AsyncIterator[T]) -> AsyncIterator[T]:
            async for item in data:
                if await _resolve(func(item)):
                    yield item

        return self._lazy(_filter)

    def filter_map(self, func: Callable[[T], Awaitable[Option[R]] | Option[R]]) -> AsyncIter[R]:
        """Yield the unwrapped values for which **func** returns `Some`."""

        async def _filter_map(data: AsyncIterator[T]) -> AsyncIterator[R]:
            async for item in data:
                res = await _resolve(func(item))
                if res.is_some():
                    yield res.unwrap()

        return self._lazy(_filter_map)

    def flat_map(
        self,
        func: Callable[[T], Awaitable[Iterable[R] | AsyncIterable[R]] | Iterable[R] | AsyncIterable[R]],
    ) -> AsyncIter[R]:
        """Map each element to a sync or async iterable, and yield from each of them in turn.

        Each nested iterable is fully exhausted before the next element of **self** is pulled.

        Example:
        ```python
        >>> import asyncio
        >>> import fluentiter as fi
        >>> asyncio.run(fi.AsyncIter.from_([1, 3]).flat_map(lambda x: range(x)).collect())
        Seq(0, 0, 1, 2)

        ```
        """

        async def _flat_map(data: AsyncIterator[T]) -> AsyncIterator[R]:
            async for item in data:
                nested = await _resolve(func(item))
                async for value in _as_async(nested):
                    yield value

        return self._lazy(_flat_map)

    def flatten(self: AsyncIter[Iterable[U]] | AsyncIter[AsyncIterable[U]]) -> AsyncIter[U]:
        """Flatten one level of nested sync or async iterables."""
        return self.flat_map(cz.functoolz.identity)  # type: ignore[arg-type]

    def chain(self, *others: Iterable[T] | AsyncIterable[T]) -> AsyncIter[T]:
        """Yield from **self**, then from each of **others** in order.

        Example:
        ```python
        >>> import asyncio
        >>> import fluentiter as fi
        >>> asyncio.run(fi.AsyncIter.from_([1]).chain([2], fi.AsyncIter.from_([3])).collect())
        Seq(1, 2, 3)

        ```
        """

        async def _chain(data: AsyncIterator[T]) -> AsyncIterator[T]:
            for source in (data, *others):
                async for item in _as_async(source):
                    yield item

        return self._lazy(_chain)

    def enumerate(self) -> AsyncIter[Enumerated[T]]:
        """Pair each element with its index, starting from 0."""

        async def _enumerate(data: AsyncIterator[T]) -> AsyncIterator[Enumerated[T]]:
            idx = 0
            async for item in data:
                yield Enumerated(idx, item)
                idx += 1

        return self._lazy(_enumerate)

    def zip(
        self, *others: Iterable[Any] | AsyncIterable[Any], strict: bool = False
    ) -> AsyncIter[tuple[Any, ...]]:
        """Yield tuples pairing the elements of **self** and **others** in lockstep.

        At each step, all the sources are pulled concurrently with `asyncio.gather`, and the values are paired in argument order.

        Iteration stops as soon as one source is exhausted; values pulled at that step from the other sources are dropped.

        Args:
            *others (Iterable[Any] | AsyncIterable[Any]): Other sync or async iterables to zip with.
            strict (bool): If `True`, raise a `ValueError` when the sources don't end at the same step. Defaults to `False`.

        Returns:
            AsyncIter[tuple[Any, ...]]: An `AsyncIter` of tuples.

        Example:
        ```python
        >>> import asyncio
        >>> import fluentiter as fi
        >>> asyncio.run(fi.AsyncIter.from_([1, 2, 3, 4]).zip([5, 6]).collect())
        Seq((1, 5), (2, 6))

        ```
        """

        async def _zip(data: AsyncIterator[T]) -> AsyncIterator[tuple[Any, ...]]:
            sources = (data, *map(_as_async, others))
            while True:
                pulled: list[Option[Any]] = await asyncio.gather(*map(_pull, sources))
                if any(opt.is_none() for opt in pulled):
                    if strict and not all(opt.is_none() for opt in pulled):
                        msg = "zip() arguments have different lengths"
                        raise ValueError(msg)
                    return
                yield tuple(opt.unwrap() for opt in pulled)

        return self._lazy(_zip)

    def take(self, n: int) -> AsyncIter[T]:
        """Yield the first **n** elements; the element following the n-th one is never pulled.

        Raises:
            ValueError: If **n** is negative.
        """
        if n < 0:
            msg = f"n must be a non-negative integer, got {n}"
            raise ValueError(msg)

        async def _take(data: AsyncIterator[T]) -> AsyncIterator[T]:
            if n == 0:
                return
            taken = 0
            async for item in data:
                yield item
                taken += 1
                if taken >= n:
                    return

        return self._lazy(_take)

    def skip(self, n: int) -> AsyncIter[T]:
        """Drop the first **n** elements, or all of them if there are fewer.

        Raises:
            ValueError: If **n** is negative.
        """
        if n < 0:
            msg = f"n must be a non-negative integer, got {n}"
            raise ValueError(msg)

        async def _skip(data: AsyncIterator[T]) -> AsyncIterator[T]:
            idx = 0
            async for item in data:
                if idx >= n:
                    yield item
                idx += 1

        return self._lazy(_skip)

    def step_by(self, step: int) -> AsyncIter[T]:
        """Yield the first element, then every **step**-th element after it.

        Raises:
            ValueError: If **step** is lower than 1.
        """
        if step < 1:
            msg = f"step must be a positive integer, got {step}"
            raise ValueError(msg)

        async def _step_by(data: AsyncIterator[T]) -> AsyncIterator[T]:
            idx = 0
            async for item in data:
                if idx % step == 0:
                    yield item
                idx += 1

        return self._lazy(_step_by)

    def take_while(self, predicate: Callable[[T], Awaitable[bool] | bool]) -> AsyncIter[T]:
        """Yield elements while **predicate** holds; the first failing element is consumed and discarded."""

        async def _take_while(data: AsyncIterator[T]) -> AsyncIterator[T]:
            async for item in data:
                if not await _resolve(predicate(item)):
                    return
                yield item

        return self._lazy(_take_while)

    def skip_while(self, predicate: Callable[[T], Awaitable[bool] | bool]) -> AsyncIter[T]:
        """Drop elements while **predicate** holds, then yield everything else."""

        async def _skip_while(data: AsyncIterator[T]) -> AsyncIterator[T]:
            skipping = True
            async for item in data:
                if skipping and await _resolve(predicate(item)):
                    continue
                skipping = False
                yield item

        return self._lazy(_skip_while)

    def map_while(self, func: Callable[[T], Awaitable[Option[R]] | Option[R]]) -> AsyncIter[R]:
        """Yield the unwrapped `Some` results of **func**, stopping for good at the first `NONE`."""

        async def _map_while(data: AsyncIterator[T]) -> AsyncIterator[R]:
            async for item in data:
                res = await _resolve(func(item))
                if res.is_none():
                    return
                yield res.unwrap()

        return self._lazy(_map_while)

    def inspect(self, func: Callable[[T], object]) -> AsyncIter[T]:
        """Call **func** on each element for its side effects, then pass the element on unchanged."""

        async def _inspect(data: AsyncIterator[T]) -> AsyncIterator[T]:
            async for item in data:
                await _resolve(func(item))
                yield item

        return self._lazy(_inspect)

    def scan(self, initial: S, func: Callable[[Cell[S], T], Awaitable[R] | R]) -> AsyncIter[R]:
        """Map elements while sharing a mutable `Cell` of state between iterations.

        See `Iter.scan()` for details.

        Example:
        ```python
        >>> import asyncio
        >>> import fluentiter as fi
        >>> def running_total(acc: fi.Cell[int], item: int) -> int:
        ...     acc.value += item
        ...     return acc.value
        >>> asyncio.run(fi.AsyncIter.from_([1, 2, 3]).scan(0, running_total).collect())
        Seq(1, 3, 6)

        ```
        """

        async def _scan(data: AsyncIterator[T]) -> AsyncIterator[R]:
            state = Cell(initial)
            async for item in data:
                yield await _resolve(func(state, item))

        return self._lazy(_scan)

    def cycle(self) -> AsyncIter[T]:
        """Repeat the elements indefinitely; an empty iterator stays empty.

        **Warning** ⚠️
            This creates an infinite iterator.
        """

        async def _cycle(data: AsyncIterator[T]) -> AsyncIterator[T]:
            saved: list[T] = []
            async for item in data:
                saved.append(item)
                yield item
            if not saved:
                return
            while True:
                for item in saved:
                    yield item

        return self._lazy(_cycle)

    # terminal operations ----------------------------------------------------

    async def collect(self) -> Seq[T]:
        """Consume the iterator into a `Seq`."""
        return Seq([item async for item in self._inner])

    async def count(self) -> int:
        """Consume the iterator, returning the number of elements."""
        total = 0
        async for _ in self._inner:
            total += 1
        return total

    async def for_each(
        self,
        func: Callable[Concatenate[T, P], Any],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> None:
        """Consume the iterator, calling **func** on each element and awaiting its result if needed."""
        async for item in self._inner:
            await _resolve(func(item, *args, **kwargs))

    async def fold(self, init: U, func: Callable[[U, T], Awaitable[U] | U]) -> U:
        """Fold every element into an accumulator, from left to right.

        Example:
        ```python
        >>> import asyncio
        >>> import fluentiter as fi
        >>> asyncio.run(fi.AsyncIter.from_([1, 2, 3]).fold("0", lambda acc, x: f"({acc} + {x})"))
        '(((0 + 1) + 2) + 3)'

        ```
        """
        acc = init
        async for item in self._inner:
            acc = await _resolve(func(acc, item))
        return acc

    async def reduce(self, func: Callable[[T, T], Awaitable[T] | T]) -> Option[T]:
        """Fold the elements seeded with the first one; `NONE` if the iterator is empty."""
        first = await self.next()
        if first.is_none():
            return NONE
        return Some(await self.fold(first.unwrap(), func))

    async def sum(self: AsyncIter[int] | AsyncIter[float]) -> int | float:
        """Sum the elements; an empty iterator returns 0."""
        return await self.fold(0, operator.add)  # type: ignore[arg-type]

    async def product(self: AsyncIter[int] | AsyncIter[float]) -> int | float:
        """Multiply the elements; an empty iterator returns 1."""
        return await self.fold(1, operator.mul)  # type: ignore[arg-type]

    async def all(self, predicate: Callable[[T], Awaitable[bool] | bool] = bool) -> bool:
        """Test if every element matches **predicate**, short-circuiting at the first failure."""
        async for item in self._inner:
            if not await _resolve(predicate(item)):
                return False
        return True

    async def any(self, predicate: Callable[[T], Awaitable[bool] | bool] = bool) -> bool:
        """Test if any element matches **predicate**, short-circuiting at the first match."""
        async for item in self._inner:
            if await _resolve(predicate(item)):
                return True
        return False

    async def find(self, predicate: Callable[[T], Awaitable[bool] | bool]) -> Option[T]:
        """Return the first element matching **predicate**, consuming elements up to and including it."""
        return await self.filter(predicate).next()

    async def find_map(self, func: Callable[[T], Awaitable[Option[R]] | Option[R]]) -> Option[R]:
        """Return the first `Some` produced by **func**."""
        return await self.filter_map(func).next()

    async def position(self, predicate: Callable[[T], Awaitable[bool] | bool]) -> Option[int]:
        """Return the zero-based index of the first element matching **predicate**."""
        idx = 0
        async for item in self._inner:
            if await _resolve(predicate(item)):
                return Some(idx)
            idx += 1
        return NONE

    async def nth(self, n: int) -> Option[T]:
        """Return the element at zero-based offset **n**, consuming every element up to and including it."""
        return await self.skip(n).next()

    async def last(self) -> Option[T]:
        """Consume the iterator, returning its last element."""
        last: Option[T] = NONE
        async for item in self._inner:
            last = Some(item)
        return last

    async def max(self: AsyncIter[SupportsRichComparison[Any]]) -> Option[Any]:
        """Return the maximum element; on ties the last one wins.

        Example:
        ```python
        >>> import asyncio
        >>> import fluentiter as fi
        >>> asyncio.run(fi.AsyncIter.from_([1, 1, 3, 2, 3, 4]).max())
        Some(4)
        >>> asyncio.run(fi.AsyncIter.from_([]).max())
        NONE

        ```
        """
        return await self.max_by(cmp)

    async def min(self: AsyncIter[SupportsRichComparison[Any]]) -> Option[Any]:
        """Return the minimum element; on ties the first one wins."""
        return await self.min_by(cmp)

    async def max_by(self, compare: Callable[[T, T], Awaitable[Ordering] | Ordering]) -> Option[T]:
        """Return the maximum element with respect to **compare**; on ties the later element wins."""

        async def _keep(a: T, b: T) -> T:
            return a if await _resolve(compare(a, b)) > Ordering.EQUAL else b

        return await self.reduce(_keep)

    async def min_by(self, compare: Callable[[T, T], Awaitable[Ordering] | Ordering]) -> Option[T]:
        """Return the minimum element with respect to **compare**; on ties the earlier element wins."""

        async def _keep(a: T, b: T) -> T:
            return a if await _resolve(compare(a, b)) <= Ordering.EQUAL else b

        return await self.reduce(_keep)

    async def max_by_key(
        self, key: Callable[[T], Awaitable[SupportsRichComparison[Any]] | SupportsRichComparison[Any]]
    ) -> Option[T]:
        """Return the element with the maximum **key**; **key** is called once per element."""

        async def _keyed(item: T) -> tuple[Any, T]:
            return (await _resolve(key(item)), item)

        res = await self.map(_keyed).max_by(lambda a, b: cmp(a[0], b[0]))
        return res.map(cz.itertoolz.second)

    async def min_by_key(
        self, key: Callable[[T], Awaitable[SupportsRichComparison[Any]] | SupportsRichComparison[Any]]
    ) -> Option[T]:
        """Return the element with the minimum **key**; **key** is called once per element."""

        async def _keyed(item: T) -> tuple[Any, T]:
            return (await _resolve(key(item)), item)

        res = await self.map(_keyed).min_by(lambda a, b: cmp(a[0], b[0]))
        return res.map(cz.itertoolz.second)

    async def eq(self, other: Iterable[T] | AsyncIterable[T]) -> bool:
        """Check that both sides yield equal elements, in order, and have the same length.

        Both sides are pulled concurrently at each step, and the comparison stops at the first difference.

        Example:
        ```python
        >>> import asyncio
        >>> import fluentiter as fi
        >>> asyncio.run(fi.AsyncIter.from_([1, 2]).eq(fi.AsyncIter.from_([1, 2])))
        True
        >>> asyncio.run(fi.AsyncIter.from_([1, 2]).eq([1]))
        False

        ```
        """
        right_it = _as_async(other)
        while True:
            left, right = await asyncio.gather(_pull(self._inner), _pull(right_it))
            if left.is_none() or right.is_none():
                return left.is_none() and right.is_none()
            if left.unwrap() != right.unwrap():
                return False

    async def ne(self, other: Iterable[T] | AsyncIterable[T]) -> bool:
        """Always the negation of `AsyncIter.eq`."""
        return not await self.eq(other)

    async def partition(self, predicate: Callable[[T], Awaitable[bool] | bool]) -> Partitioned[T]:
        """Consume the iterator, splitting it in the elements matching **predicate** and the others."""
        included: list[T] = []
        excluded: list[T] = []
        async for item in self._inner:
            if await _resolve(predicate(item)):
                included.append(item)
            else:
                excluded.append(item)
        return Partitioned(Seq(included), Seq(excluded))

    async def unzip(self: AsyncIter[tuple[U, V]]) -> Unzipped[U, V]:
        """Consume an iterator of pairs into a pair of sequences."""
        left: list[U] = []
        right: list[V] = []
        async for first, second in self._inner:
            left.append(first)
            right.append(second)
        return Unzipped(Seq(left), Seq(right))
