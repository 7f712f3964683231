from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, Never, TypeVar, cast

from ._option import NONE, Option, Some

if TYPE_CHECKING:
    from typing import TypeIs

    from .._iter import Iter

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")


class ResultUnwrapError(RuntimeError): ...


class Result(ABC, Generic[T, E]):
    """Type representing either success (`Ok`) or failure (`Err`).

    Functions return `Result` whenever errors are expected and recoverable, instead of raising.

    There are exactly two variants, `Ok(value)` and `Err(error)`, never mutated in place and usable in `match` statements.

    ```python
    >>> import fluentiter as fi
    >>> def parse(s: str) -> fi.Result[int, str]:
    ...     try:
    ...         return fi.Ok(int(s))
    ...     except ValueError:
    ...         return fi.Err(f"not a number: {s!r}")
    >>> match parse("12"):
    ...     case fi.Ok(value):
    ...         print(value * 2)
    ...     case fi.Err(error):
    ...         print(error)
    24
    >>> parse("x").map(lambda n: n * 2)
    Err("not a number: 'x'")

    ```
    """

    __slots__ = ()

    @abstractmethod
    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        """Returns True if the result is Ok.

        Equivalent to Rust's Result::is_ok().
        """
        ...

    @abstractmethod
    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        """Returns True if the result is Err.

        Equivalent to Rust's Result::is_err().
        """
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """Returns the contained Ok value, or raises ResultUnwrapError if the result is Err.

        Equivalent to Rust's Result::unwrap().

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Ok(2).unwrap()
        2
        >>> fi.Err("emergency failure").unwrap()
        Traceback (most recent call last):
            ...
        fluentiter._results._result.ResultUnwrapError: called `unwrap` on Err: 'emergency failure'

        ```
        """
        ...

    @abstractmethod
    def unwrap_err(self) -> E:
        """Returns the contained Err value, or raises ResultUnwrapError if the result is Ok.

        Equivalent to Rust's Result::unwrap_err().

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Err("emergency failure").unwrap_err()
        'emergency failure'
        >>> fi.Ok(2).unwrap_err()
        Traceback (most recent call last):
            ...
        fluentiter._results._result.ResultUnwrapError: called `unwrap_err` on Ok: 2

        ```
        """
        ...

    def is_ok_and(self, predicate: Callable[[T], bool]) -> bool:
        """Returns True if the result is Ok and the value inside of it matches a predicate.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Ok(2).is_ok_and(lambda x: x > 1)
        True
        >>> fi.Err("hey").is_ok_and(lambda x: x > 1)
        False

        ```
        """
        return self.is_ok() and predicate(self.unwrap())

    def is_err_and(self, predicate: Callable[[E], bool]) -> bool:
        """Returns True if the result is Err and the value inside of it matches a predicate."""
        return self.is_err() and predicate(self.unwrap_err())

    def expect(self, msg: str) -> T:
        """Returns the contained Ok value, or raises ResultUnwrapError with a custom message if the result is Err.

        Args:
            msg (str): The message to display if the result is Err.

        Returns:
            T: The contained Ok value.

        Raises:
            ResultUnwrapError: If the result is Err, with the provided message and error.

        Equivalent to Rust's Result::expect().

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Err("emergency failure").expect("Testing expect")
        Traceback (most recent call last):
            ...
        fluentiter._results._result.ResultUnwrapError: Testing expect: 'emergency failure'

        ```
        """
        if self.is_ok():
            return self.unwrap()
        raise ResultUnwrapError(f"{msg}: {self.unwrap_err()!r}")

    def expect_err(self, msg: str) -> E:
        """Returns the contained Err value, or raises ResultUnwrapError with a custom message if the result is Ok.

        Args:
            msg (str): The message to display if the result is Ok.

        Returns:
            E: The contained Err value.

        Raises:
            ResultUnwrapError: If the result is Ok, with the provided message and value.

        Equivalent to Rust's Result::expect_err().

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Ok(10).expect_err("Testing expect_err")
        Traceback (most recent call last):
            ...
        fluentiter._results._result.ResultUnwrapError: Testing expect_err: expected Err, got Ok(10)

        ```
        """
        if self.is_err():
            return self.unwrap_err()
        raise ResultUnwrapError(f"{msg}: expected Err, got Ok({self.unwrap()!r})")

    def unwrap_or(self, default: T) -> T:
        """Returns the contained Ok value or a provided default.

        Args:
            default (T): The value to return if the result is Err.

        Returns:
            T: The contained Ok value or the default.

        Equivalent to Rust's Result::unwrap_or().
        """
        return self.unwrap() if self.is_ok() else default

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        """Returns the contained Ok value or computes it from a function if Err.

        Args:
            f (Callable[[E], T]): Callable that takes the Err value and returns a T.

        Returns:
            T: The contained Ok value or the result of f(error).

        Equivalent to Rust's Result::unwrap_or_else().

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Ok(2).unwrap_or_else(len)
        2
        >>> fi.Err("foo").unwrap_or_else(len)
        3

        ```
        """
        return self.unwrap() if self.is_ok() else f(self.unwrap_err())

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """Maps a Result[T, E] to Result[U, E] by applying a function to a contained Ok value, leaving Err untouched.

        Args:
            f (Callable[[T], U]): Callable to apply to the Ok value.

        Returns:
            Result[U, E]: Ok(f(value)) if Ok, otherwise the same Err.

        Equivalent to Rust's Result::map().

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Ok(1).map(lambda x: x + 1)
        Ok(2)
        >>> fi.Err("nope").map(lambda x: x + 1)
        Err('nope')

        ```
        """
        if self.is_ok():
            return Ok(f(self.unwrap()))
        return cast(Result[U, E], self)

    def map_err(self, f: Callable[[E], F]) -> Result[T, F]:
        """Maps a Result[T, E] to Result[T, F] by applying a function to a contained Err value, leaving Ok untouched.

        Args:
            f (Callable[[E], F]): Callable to apply to the Err value.

        Returns:
            Result[T, F]: Err(f(error)) if Err, otherwise the same Ok.

        Equivalent to Rust's Result::map_err().

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Err(13).map_err(lambda e: f"error code: {e}")
        Err('error code: 13')
        >>> fi.Ok(2).map_err(lambda e: f"error code: {e}")
        Ok(2)

        ```
        """
        if self.is_err():
            return Err(f(self.unwrap_err()))
        return cast(Result[T, F], self)

    def map_or(self, default: U, f: Callable[[T], U]) -> U:
        """Returns the provided default (if Err), or applies a function to the contained value (if Ok).

        Equivalent to Rust's Result::map_or().

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Ok("foo").map_or(42, len)
        3
        >>> fi.Err("bar").map_or(42, len)
        42

        ```
        """
        return f(self.unwrap()) if self.is_ok() else default

    def map_or_else(self, default: Callable[[E], U], f: Callable[[T], U]) -> U:
        """Maps a Result[T, E] to U by applying **default** to a contained Err value, or **f** to a contained Ok value.

        Args:
            default (Callable[[E], U]): Callable to handle the Err value.
            f (Callable[[T], U]): Callable to handle the Ok value.

        Returns:
            U: The result of the called function.

        Equivalent to Rust's Result::map_or_else().

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Ok("foo").map_or_else(lambda e: len(e) * 2, len)
        3
        >>> fi.Err("bar").map_or_else(lambda e: len(e) * 2, len)
        6

        ```
        """
        match self.is_ok():
            case True:
                return f(self.unwrap())
            case False:
                return default(self.unwrap_err())

    def and_then(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Calls f if the result is Ok, otherwise returns the Err.

        Args:
            f (Callable[[T], Result[U, E]]): Callable that takes the Ok value and returns a Result.

        Returns:
            Result[U, E]: The result of f(value) if Ok, otherwise the same Err.

        Equivalent to Rust's Result::and_then().

        Example:
        ```python
        >>> import fluentiter as fi
        >>> def half(x: int) -> fi.Result[int, str]:
        ...     return fi.Ok(x // 2) if x % 2 == 0 else fi.Err(f"{x} is odd")
        >>> fi.Ok(8).and_then(half).and_then(half)
        Ok(2)
        >>> fi.Ok(6).and_then(half).and_then(half)
        Err('3 is odd')

        ```
        """
        if self.is_ok():
            return f(self.unwrap())
        return cast(Result[U, E], self)

    def and_(self, other: Result[U, E]) -> Result[U, E]:
        """Returns **other** if the result is Ok, otherwise returns the Err of self.

        Equivalent to Rust's Result::and().

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Ok(2).and_(fi.Err("late error"))
        Err('late error')
        >>> fi.Err("early error").and_(fi.Ok("foo"))
        Err('early error')
        >>> fi.Ok(2).and_(fi.Ok("foo"))
        Ok('foo')

        ```
        """
        if self.is_ok():
            return other
        return cast(Result[U, E], self)

    def or_else(self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Calls f if the result is Err, otherwise returns the Ok.

        Args:
            f (Callable[[E], Result[T, F]]): Callable that takes the Err value and returns a Result.

        Returns:
            Result[T, F]: self if Ok, otherwise the result of f(error).

        Equivalent to Rust's Result::or_else().
        """
        if self.is_ok():
            return cast(Result[T, F], self)
        return f(self.unwrap_err())

    def or_(self, other: Result[T, F]) -> Result[T, F]:
        """Returns **other** if the result is Err, otherwise returns the Ok of self.

        Equivalent to Rust's Result::or().

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Ok(2).or_(fi.Err("late error"))
        Ok(2)
        >>> fi.Err("early error").or_(fi.Ok(2))
        Ok(2)
        >>> fi.Err("not a 2").or_(fi.Err("late error"))
        Err('late error')

        ```
        """
        if self.is_ok():
            return cast(Result[T, F], self)
        return other

    def ok(self) -> Option[T]:
        """Converts the Result into an Option, mapping Ok(v) to Some(v) and Err(e) to NONE.

        Returns:
            Option[T]: Some(value) if Ok, otherwise NONE.

        Equivalent to Rust's Result::ok().
        """
        if self.is_ok():
            return Some(self.unwrap())
        return NONE

    def err(self) -> Option[E]:
        """Converts the Result into an Option, mapping Err(e) to Some(e) and Ok(v) to NONE.

        Returns:
            Option[E]: Some(error) if Err, otherwise NONE.

        Equivalent to Rust's Result::err().
        """
        if self.is_err():
            return Some(self.unwrap_err())
        return NONE

    def transpose(self: Result[Option[U], E]) -> Option[Result[U, E]]:
        """Transposes a Result of an Option into an Option of a Result.

        Ok(NONE) will be mapped to NONE. Ok(Some(v)) and Err(e) will be mapped to Some(Ok(v)) and Some(Err(e)).

        Equivalent to Rust's Result::transpose().

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Ok(fi.Some(5)).transpose()
        Some(Ok(5))
        >>> fi.Ok(fi.NONE).transpose()
        NONE
        >>> fi.Err("boom").transpose()
        Some(Err('boom'))

        ```
        """
        if self.is_err():
            return Some(Err(self.unwrap_err()))
        return self.unwrap().map(Ok)

    def inspect(self, f: Callable[[T], object]) -> Result[T, E]:
        """Calls f with the contained value if Ok, then returns self unchanged."""
        if self.is_ok():
            f(self.unwrap())
        return self

    def inspect_err(self, f: Callable[[E], object]) -> Result[T, E]:
        """Calls f with the contained error if Err, then returns self unchanged."""
        if self.is_err():
            f(self.unwrap_err())
        return self

    def iter(self) -> Iter[T]:
        """Returns an Iter over the possibly contained Ok value.

        The iterator yields one value if the result is Ok, otherwise none.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.Ok(7).iter().collect()
        Seq(7)
        >>> fi.Err("nothing!").iter().collect()
        Seq()

        ```
        """
        from .._iter import Iter

        if self.is_ok():
            return Iter.once(self.unwrap())
        return Iter.empty()


@dataclass(slots=True)
class Ok(Result[T, E]):
    """Result variant representing success.

    Args:
        value (T): The success value.
    """

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        return True

    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> Never:
        raise ResultUnwrapError(f"called `unwrap_err` on Ok: {self.value!r}")


@dataclass(slots=True)
class Err(Result[T, E]):
    """Result variant representing failure.

    Args:
        error (E): The error value.
    """

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        return False

    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        raise ResultUnwrapError(f"called `unwrap` on Err: {self.error!r}")

    def unwrap_err(self) -> E:
        return self.error
