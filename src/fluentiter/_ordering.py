from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from ._types import SupportsRichComparison

T = TypeVar("T")


class Ordering(IntEnum):
    """Result of a three-way comparison.

    Being an `IntEnum`, members compare like their values, so `Ordering.LESS < Ordering.EQUAL < Ordering.GREATER`.

    Example:
    ```python
    >>> import fluentiter as fi
    >>> fi.Ordering.LESS <= fi.Ordering.EQUAL
    True
    >>> fi.Ordering.GREATER.reverse()
    <Ordering.LESS: -1>

    ```
    """

    LESS = -1
    EQUAL = 0
    GREATER = 1

    def reverse(self) -> Ordering:
        """Swap `LESS` and `GREATER`, leave `EQUAL` untouched."""
        return Ordering(-self.value)

    def is_eq(self) -> bool:
        """Returns `True` for `EQUAL`.

        Example:
        ```python
        >>> import fluentiter as fi
        >>> fi.cmp(2, 2).is_eq()
        True

        ```
        """
        return self is Ordering.EQUAL

    def is_lt(self) -> bool:
        """Returns `True` for `LESS`."""
        return self is Ordering.LESS

    def is_gt(self) -> bool:
        """Returns `True` for `GREATER`."""
        return self is Ordering.GREATER


def cmp(a: SupportsRichComparison[Any], b: SupportsRichComparison[Any]) -> Ordering:
    """Compare two values with `==` and `<`.

    Args:
        a (SupportsRichComparison[Any]): Left operand.
        b (SupportsRichComparison[Any]): Right operand.

    Returns:
        Ordering: `EQUAL` if `a == b`, `LESS` if `a < b`, `GREATER` otherwise.

    Example:
    ```python
    >>> import fluentiter as fi
    >>> fi.cmp(1, 2)
    <Ordering.LESS: -1>
    >>> fi.cmp("b", "b")
    <Ordering.EQUAL: 0>
    >>> fi.cmp((2, 0), (1, 9))
    <Ordering.GREATER: 1>

    ```
    """
    if a == b:
        return Ordering.EQUAL
    if a < b:  # type: ignore[operator]
        return Ordering.LESS
    return Ordering.GREATER
