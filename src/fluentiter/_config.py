"""Display settings shared by all fluentiter wrappers."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, fields, replace
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class Config:
    """Settings controlling how wrappers are rendered.

    Args:
        seq_repr_max_items (int): Maximum number of items shown by `Seq.__repr__` before truncating with `...`.
        show_iter_source (bool): Whether `Iter.__repr__` shows the type name of the wrapped iterator.
    """

    seq_repr_max_items: int = 20
    show_iter_source: bool = False


_CONFIG = Config()


def get_config() -> Config:
    """Return the active `Config`.

    Returns:
        Config: The current settings.

    Example:
    ```python
    >>> import fluentiter as fi
    >>> fi.get_config().seq_repr_max_items
    20

    ```
    """
    return _CONFIG


def set_config(**changes: Any) -> Config:
    """Replace some fields of the active `Config`.

    Args:
        **changes (Any): Field names and their new values.

    Returns:
        Config: The previous settings, so they can be restored later.

    Raises:
        TypeError: If a key is not a `Config` field.

    Example:
    ```python
    >>> import fluentiter as fi
    >>> previous = fi.set_config(seq_repr_max_items=2)
    >>> fi.Seq(range(5))
    Seq(0, 1, ...)
    >>> _ = fi.set_config(seq_repr_max_items=previous.seq_repr_max_items)

    ```
    """
    global _CONFIG
    known = {f.name for f in fields(Config)}
    unknown = changes.keys() - known
    if unknown:
        msg = f"unknown config field(s): {', '.join(sorted(unknown))}"
        raise TypeError(msg)
    previous = _CONFIG
    _CONFIG = replace(previous, **changes)
    logger.debug("config updated: %r -> %r", previous, _CONFIG)
    return previous


@contextmanager
def config_context(**changes: Any) -> Iterator[Config]:
    """Temporarily change the active `Config`.

    The previous settings are restored on exit, even if an exception was raised.

    Args:
        **changes (Any): Field names and their new values.

    Yields:
        Config: The settings active inside the block.

    Example:
    ```python
    >>> import fluentiter as fi
    >>> with fi.config_context(show_iter_source=True):
    ...     fi.Iter([1, 2])
    Iter(<list_iterator>)
    >>> fi.Iter([1, 2])
    Iter()

    ```
    """
    global _CONFIG
    previous = set_config(**changes)
    try:
        yield _CONFIG
    finally:
        _CONFIG = previous
        logger.debug("config restored: %r", previous)
