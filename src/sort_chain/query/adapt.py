"""as_query: adapt any supported data source to an OrderableQuery."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

import pandas as pd
from sqlalchemy.orm import Query
from sqlalchemy.sql import Select

from .base import OrderableQuery
from .frame import FrameQuery
from .select import SelectQuery
from .sequence import SequenceQuery


def as_query(source: Any) -> OrderableQuery:
    """Wrap ``source`` so it can be ordered through the common protocol.

    OrderableQuery instances are returned unchanged. DataFrames become
    FrameQuery, SQLAlchemy statements become SelectQuery, and any other
    iterable of records becomes SequenceQuery.
    """
    if isinstance(source, OrderableQuery):
        return source
    if isinstance(source, pd.DataFrame):
        return FrameQuery(source)
    if isinstance(source, (Select, Query)):
        return SelectQuery(source)
    return as_sequence_query(source)


def as_sequence_query(source: Any) -> SequenceQuery:
    """Wrap an iterable of records as an in-memory SequenceQuery."""
    if isinstance(source, (str, bytes, Mapping)):
        raise TypeError(
            f"A {type(source).__name__} is not a sequence of records. "
            "Pass a list (or other iterable) of records instead."
        )
    if not isinstance(source, Iterable):
        raise TypeError(
            f"Cannot sort a {type(source).__name__}. Expected an iterable of "
            "records, a pandas DataFrame or a SQLAlchemy Select/Query."
        )
    return SequenceQuery(source)
