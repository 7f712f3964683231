from ._format import iter_repr, seq_repr
from ._main import CommonBase, Pipeable

__all__ = [
    "CommonBase",
    "Pipeable",
    "iter_repr",
    "seq_repr",
]
