from collections.abc import Iterator, Sequence
from typing import Any

from .._config import get_config


def seq_repr(v: Sequence[Any]) -> str:
    max_items = get_config().seq_repr_max_items
    shown = ", ".join(repr(x) for x in v[:max_items])
    suffix = ", ..." if len(v) > max_items else ""
    return shown + suffix


def iter_repr(v: Iterator[Any]) -> str:
    if get_config().show_iter_source:
        return f"<{v.__class__.__name__}>"
    return ""
