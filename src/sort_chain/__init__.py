"""sort-chain: compose prioritized sort keys into one multi-level ordering."""

import logging

from ._version import __version__
from .api import Sorter
from .core.directive import Direction, SortDirective
from .core.validation import MissingSourceError
from .query import (
    OrderableQuery,
    SequenceQuery,
    FrameQuery,
    SelectQuery,
    as_query,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "Sorter",
    "Direction",
    "SortDirective",
    "MissingSourceError",
    "OrderableQuery",
    "SequenceQuery",
    "FrameQuery",
    "SelectQuery",
    "as_query",
]
