from ._async import AsyncIter
from ._eager import Seq
from ._main import Iter, Peekable

__all__ = ["AsyncIter", "Iter", "Peekable", "Seq"]
