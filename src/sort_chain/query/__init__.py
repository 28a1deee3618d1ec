"""Orderable data sources: in-memory sequences, DataFrames and SQL statements."""

from .base import OrderableQuery
from .sequence import SequenceQuery
from .frame import FrameQuery
from .select import SelectQuery
from .adapt import as_query, as_sequence_query

__all__ = [
    "OrderableQuery",
    "SequenceQuery",
    "FrameQuery",
    "SelectQuery",
    "as_query",
    "as_sequence_query",
]
