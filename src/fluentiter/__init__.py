import logging

from ._config import Config, config_context, get_config, set_config
from ._iter import AsyncIter, Iter, Peekable, Seq
from ._ordering import Ordering, cmp
from ._results import (
    NONE,
    Err,
    NoneOption,
    Ok,
    Option,
    OptionUnwrapError,
    Result,
    ResultUnwrapError,
    Some,
)
from ._types import Cell, Enumerated, Partitioned, Unzipped

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "NONE",
    "AsyncIter",
    "Cell",
    "Config",
    "Enumerated",
    "Err",
    "Iter",
    "NoneOption",
    "Ok",
    "Option",
    "OptionUnwrapError",
    "Ordering",
    "Partitioned",
    "Peekable",
    "Result",
    "ResultUnwrapError",
    "Seq",
    "Some",
    "Unzipped",
    "cmp",
    "config_context",
    "get_config",
    "set_config",
]
