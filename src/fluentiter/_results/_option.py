from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, Never, TypeVar

if TYPE_CHECKING:
    from typing import TypeIs

    from .._iter import Iter
    from ._result import Result

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")
E = TypeVar("E")


class OptionUnwrapError(RuntimeError): ...


class Option(ABC, Generic[T]):
    """Type representing an optional value.

    An `Option` is either `Some(value)`, holding a value, or `NONE`, holding nothing.

    It replaces `None` checks and sentinel values: functions that may have nothing to return give back an `Option`,
    and the caller decides explicitly what to do with the empty case.

    No method mutates an `Option` in place, and there are exactly two variants: `Some` and `NoneOption`.
    `NONE` is the single instance of `NoneOption`.

    Both variants support structural pattern matching:

    ```python
    >>> import fluentiter as fi
    >>> def describe(opt: fi.Option[int]) -> str:
    ...     match opt:
    ...         case fi.Some(value):
    ...             return f"got {value}"
    ...         case _:
    ...             return "nothing"
    >>> describe(fi.Some(3))
    'got 3'
    >>> describe(fi.NONE)
    'nothing'

    ```
    """

    __slots__ = ()

    @staticmethod
    def from_(value: V | None) -> Option[V]:
        """Build an `Option` from a nullable value.

        Args:
            value (V | None): The value to wrap.

        Returns:
            Option[V]: `NONE` if **value** is `None`, `Some(value)` otherwise.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Option.from_(2)
        Some(2)
        >>> fi.Option.from_(None)
        NONE
        >>> fi.Option.from_(0)
        Some(0)

        ```
        """
        return NONE if value is None else Some(value)

    @abstractmethod
    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """Returns `True` if the option is a `Some` value.

        Returns:
            bool: `True` if the option is a `Some` variant, `False` otherwise.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Some(2).is_some()
        True
        >>> fi.NONE.is_some()
        False

        ```
        """
        ...

    @abstractmethod
    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        """Returns `True` if the option is a `None` value.

        Returns:
            bool: `True` if the option is the `NONE` variant, `False` otherwise.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Some(2).is_none()
        False
        >>> fi.NONE.is_none()
        True

        ```
        """
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """Returns the contained `Some` value.

        Returns:
            T: The contained `Some` value.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Some("car").unwrap()
        'car'
        >>> fi.NONE.unwrap()
        Traceback (most recent call last):
            ...
        fluentiter._results._option.OptionUnwrapError: called `unwrap` on a `None`

        ```
        """
        ...

    def is_some_and(self, predicate: Callable[[T], bool]) -> bool:
        """Returns `True` if the option is `Some` and the value inside matches **predicate**.

        Args:
            predicate (Callable[[T], bool]): Test applied to the contained value.

        Returns:
            bool: `False` for `NONE`, the predicate result otherwise.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Some(2).is_some_and(lambda x: x > 1)
        True
        >>> fi.Some(0).is_some_and(lambda x: x > 1)
        False
        >>> fi.NONE.is_some_and(lambda x: x > 1)
        False

        ```
        """
        return self.is_some() and predicate(self.unwrap())

    def expect(self, msg: str) -> T:
        """Returns the contained `Some` value.

        Raises an exception with a provided message if the value is `NONE`.

        Args:
            msg (str): The message to include in the exception if the option is `NONE`.

        Returns:
            T: The contained `Some` value.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Some("value").expect("fruits are healthy")
        'value'
        >>> fi.NONE.expect("fruits are healthy")
        Traceback (most recent call last):
            ...
        fluentiter._results._option.OptionUnwrapError: fruits are healthy (called `expect` on a `None`)

        ```
        """
        if self.is_some():
            return self.unwrap()
        msg = f"{msg} (called `expect` on a `None`)"
        raise OptionUnwrapError(msg)

    def unwrap_or(self, default: T) -> T:
        """Returns the contained `Some` value or a provided default.

        Args:
            default (T): The value to return if the option is `NONE`.

        Returns:
            T: The contained `Some` value or the provided default.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Some("car").unwrap_or("bike")
        'car'
        >>> fi.NONE.unwrap_or("bike")
        'bike'

        ```
        """
        return self.unwrap() if self.is_some() else default

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """Returns the contained `Some` value or computes it from a function.

        Args:
            f (Callable[[], T]): A function that returns a default value if the option is `NONE`.

        Returns:
            T: The contained `Some` value or the result of the function.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> k = 10
        >>> fi.Some(4).unwrap_or_else(lambda: 2 * k)
        4
        >>> fi.NONE.unwrap_or_else(lambda: 2 * k)
        20

        ```
        """
        return self.unwrap() if self.is_some() else f()

    def map(self, f: Callable[[T], U]) -> Option[U]:
        """Maps an `Option[T]` to `Option[U]` by applying a function to a contained `Some` value.

        A `NONE` value is left untouched.

        Args:
            f (Callable[[T], U]): The function to apply to the `Some` value.

        Returns:
            Option[U]: A new `Option` with the mapped value if `Some`, otherwise `NONE`.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Some("Hello, World!").map(len)
        Some(13)
        >>> fi.NONE.map(len)
        NONE

        ```
        """
        if self.is_some():
            return Some(f(self.unwrap()))
        return NONE

    def map_or(self, default: U, f: Callable[[T], U]) -> U:
        """Returns the provided default if `NONE`, or applies a function to the contained value.

        Args:
            default (U): Value returned for `NONE`.
            f (Callable[[T], U]): Function applied to the `Some` value.

        Returns:
            U: `f(value)` or **default**.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Some("foo").map_or(42, len)
        3
        >>> fi.NONE.map_or(42, len)
        42

        ```
        """
        return f(self.unwrap()) if self.is_some() else default

    def map_or_else(self, default: Callable[[], U], f: Callable[[T], U]) -> U:
        """Computes a default function result if `NONE`, or applies a different function to the contained value.

        Args:
            default (Callable[[], U]): Function called for `NONE`.
            f (Callable[[T], U]): Function applied to the `Some` value.

        Returns:
            U: `f(value)` or `default()`.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> k = 21
        >>> fi.Some("foo").map_or_else(lambda: 2 * k, len)
        3
        >>> fi.NONE.map_or_else(lambda: 2 * k, len)
        42

        ```
        """
        return f(self.unwrap()) if self.is_some() else default()

    def and_then(self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Calls a function if the option is `Some`, otherwise returns `NONE`.

        Some languages call this operation flatmap.

        Args:
            f (Callable[[T], Option[U]]): The function to call with the `Some` value.

        Returns:
            Option[U]: The result of the function if `Some`, otherwise `NONE`.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> def sq(x: int) -> fi.Option[int]:
        ...     return fi.Some(x * x)
        >>> def nope(x: int) -> fi.Option[int]:
        ...     return fi.NONE
        >>> fi.Some(2).and_then(sq).and_then(sq)
        Some(16)
        >>> fi.Some(2).and_then(sq).and_then(nope)
        NONE
        >>> fi.Some(2).and_then(nope).and_then(sq)
        NONE
        >>> fi.NONE.and_then(sq).and_then(sq)
        NONE

        ```
        """
        if self.is_some():
            return f(self.unwrap())
        return NONE

    def and_(self, other: Option[U]) -> Option[U]:
        """Returns `NONE` if the option is `NONE`, otherwise returns **other**.

        Args:
            other (Option[U]): The option returned when **self** is `Some`.

        Returns:
            Option[U]: **other** or `NONE`.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Some(2).and_(fi.Some("foo"))
        Some('foo')
        >>> fi.Some(2).and_(fi.NONE)
        NONE
        >>> fi.NONE.and_(fi.Some("foo"))
        NONE

        ```
        """
        return other if self.is_some() else NONE

    def or_(self, other: Option[T]) -> Option[T]:
        """Returns the option if it contains a value, otherwise returns **other**.

        Args:
            other (Option[T]): The fallback option.

        Returns:
            Option[T]: **self** if `Some`, otherwise **other**.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Some(2).or_(fi.NONE)
        Some(2)
        >>> fi.NONE.or_(fi.Some(100))
        Some(100)
        >>> fi.Some(2).or_(fi.Some(100))
        Some(2)

        ```
        """
        return self if self.is_some() else other

    def or_else(self, f: Callable[[], Option[T]]) -> Option[T]:
        """Returns the option if it contains a value, otherwise calls a function and returns the result.

        Args:
            f (Callable[[], Option[T]]): The function to call if the option is `NONE`.

        Returns:
            Option[T]: The original `Option` if it is `Some`, otherwise the result of the function.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> def nobody() -> fi.Option[str]:
        ...     return fi.NONE
        >>> def vikings() -> fi.Option[str]:
        ...     return fi.Some("vikings")
        >>> fi.Some("barbarians").or_else(vikings)
        Some('barbarians')
        >>> fi.NONE.or_else(vikings)
        Some('vikings')
        >>> fi.NONE.or_else(nobody)
        NONE

        ```
        """
        return self if self.is_some() else f()

    def xor(self, other: Option[T]) -> Option[T]:
        """Returns `Some` if exactly one of **self**, **other** is `Some`, otherwise returns `NONE`.

        Args:
            other (Option[T]): The option to combine with.

        Returns:
            Option[T]: The single `Some` operand, or `NONE`.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Some(2).xor(fi.NONE)
        Some(2)
        >>> fi.NONE.xor(fi.Some(2))
        Some(2)
        >>> fi.Some(2).xor(fi.Some(2))
        NONE
        >>> fi.NONE.xor(fi.NONE)
        NONE

        ```
        """
        match (self.is_some(), other.is_some()):
            case (True, False):
                return self
            case (False, True):
                return other
            case _:
                return NONE

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Returns `NONE` if the option is `NONE` or if **predicate** returns `False` for the contained value.

        Args:
            predicate (Callable[[T], bool]): Test applied to the contained value.

        Returns:
            Option[T]: **self** if it is `Some` and the predicate holds, otherwise `NONE`.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> def is_even(n: int) -> bool:
        ...     return n % 2 == 0
        >>> fi.NONE.filter(is_even)
        NONE
        >>> fi.Some(3).filter(is_even)
        NONE
        >>> fi.Some(4).filter(is_even)
        Some(4)

        ```
        """
        if self.is_some() and predicate(self.unwrap()):
            return self
        return NONE

    def flatten(self: Option[Option[U]]) -> Option[U]:
        """Removes one level of nesting from an `Option[Option[U]]`.

        Returns:
            Option[U]: The inner option, or `NONE`.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Some(fi.Some(6)).flatten()
        Some(6)
        >>> fi.Some(fi.NONE).flatten()
        NONE
        >>> fi.NONE.flatten()
        NONE
        >>> fi.Some(fi.Some(fi.Some(6))).flatten()
        Some(Some(6))

        ```
        """
        return self.unwrap() if self.is_some() else NONE

    def zip(self, other: Option[U]) -> Option[tuple[T, U]]:
        """Zips **self** with another `Option`.

        Args:
            other (Option[U]): The option to pair with.

        Returns:
            Option[tuple[T, U]]: `Some((a, b))` if both are `Some`, otherwise `NONE`.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Some(1).zip(fi.Some("hi"))
        Some((1, 'hi'))
        >>> fi.Some(1).zip(fi.NONE)
        NONE

        ```
        """
        if self.is_some() and other.is_some():
            return Some((self.unwrap(), other.unwrap()))
        return NONE

    def unzip(self: Option[tuple[U, V]]) -> tuple[Option[U], Option[V]]:
        """Unzips an option containing a pair into a pair of options.

        Returns:
            tuple[Option[U], Option[V]]: `(Some(a), Some(b))` for `Some((a, b))`, `(NONE, NONE)` otherwise.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Some((1, "hi")).unzip()
        (Some(1), Some('hi'))
        >>> fi.NONE.unzip()
        (NONE, NONE)

        ```
        """
        if self.is_some():
            left, right = self.unwrap()
            return Some(left), Some(right)
        return NONE, NONE

    def ok_or(self, err: E) -> Result[T, E]:
        """Transforms the `Option[T]` into a `Result[T, E]`, mapping `Some(v)` to `Ok(v)` and `NONE` to `Err(err)`.

        Args:
            err (E): The error used for `NONE`.

        Returns:
            Result[T, E]: `Ok(value)` or `Err(err)`.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Some("foo").ok_or(0)
        Ok('foo')
        >>> fi.NONE.ok_or(0)
        Err(0)

        ```
        """
        from ._result import Err, Ok

        if self.is_some():
            return Ok(self.unwrap())
        return Err(err)

    def ok_or_else(self, f: Callable[[], E]) -> Result[T, E]:
        """Like `ok_or`, but the error is computed lazily by **f**."""
        from ._result import Err, Ok

        if self.is_some():
            return Ok(self.unwrap())
        return Err(f())

    def transpose(self: Option[Result[U, E]]) -> Result[Option[U], E]:
        """Transposes an `Option` of a `Result` into a `Result` of an `Option`.

        `NONE` will be mapped to `Ok(NONE)`.
        `Some(Ok(v))` and `Some(Err(e))` will be mapped to `Ok(Some(v))` and `Err(e)`.

        Returns:
            Result[Option[U], E]: The transposed value.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Some(fi.Ok(5)).transpose()
        Ok(Some(5))
        >>> fi.Some(fi.Err("boom")).transpose()
        Err('boom')
        >>> fi.NONE.transpose()
        Ok(NONE)

        ```
        """
        from ._result import Err, Ok

        if self.is_none():
            return Ok(NONE)
        inner = self.unwrap()
        if inner.is_ok():
            return Ok(Some(inner.unwrap()))
        return Err(inner.unwrap_err())

    def inspect(self, f: Callable[[T], object]) -> Option[T]:
        """Calls **f** with the contained value if `Some`, then returns **self** unchanged.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Some(4).inspect(print).map(lambda x: x + 1)
        4
        Some(5)

        ```
        """
        if self.is_some():
            f(self.unwrap())
        return self

    def iter(self) -> Iter[T]:
        """Returns an `Iter` over the possibly contained value.

        Returns:
            Iter[T]: An iterator yielding the value once for `Some`, nothing for `NONE`.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Some(4).iter().collect()
        Seq(4)
        >>> fi.NONE.iter().collect()
        Seq()

        ```
        """
        from .._iter import Iter

        if self.is_some():
            return Iter.once(self.unwrap())
        return Iter.empty()


@dataclass(slots=True)
class Some(Option[T]):
    """Option variant representing the presence of a value.

    Args:
        value (T): The contained value.

    Example:
    ```python
    >>> import fluentiter as fi
    >>> fi.Some(42)
    Some(42)

    ```
    """

    value: T

    def __repr__(self) -> str:
        return f"Some({self.value!r})"

    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        return True

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(slots=True)
class NoneOption(Option[Any]):
    """Option variant representing the absence of a value."""

    def __repr__(self) -> str:
        return "NONE"

    def is_some(self) -> TypeIs[Some[Any]]:  # type: ignore[misc]
        return False

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        raise OptionUnwrapError("called `unwrap` on a `None`")


NONE: Option[Any] = NoneOption()
"""Singleton instance representing the absence of a value."""
