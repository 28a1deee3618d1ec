"""FrameQuery: deferred multi-level ordering over the rows of a DataFrame."""

from __future__ import annotations

from typing import Any

import numpy as np
import pandas as pd

from .base import OrderableQuery

_POSITION = "__position__"


class FrameQuery(OrderableQuery):
    """Ordering view over a pandas DataFrame whose rows are the records.

    A key is either a column label or a callable applied to each row
    (``DataFrame.apply(axis=1)``), so selectors like ``lambda r: r["a"]``
    work the same way they do on dict records.

    Missing values sort first when ascending and last when descending.
    Full ties keep their original row order, and the index is preserved.
    """

    __slots__ = ("_base", "_levels")

    def __init__(
        self,
        base: pd.DataFrame | FrameQuery,
        levels: tuple[tuple[Any, bool], ...] = (),
    ) -> None:
        if not isinstance(base, (pd.DataFrame, FrameQuery)):
            raise TypeError(
                f"FrameQuery needs a pandas DataFrame, got {type(base).__name__}."
            )
        self._base = base
        self._levels = levels

    @property
    def is_ordered(self) -> bool:
        return bool(self._levels)

    def _order(self, key: Any, descending: bool) -> FrameQuery:
        base = self if self._levels else self._base
        return FrameQuery(base, ((key, descending),))

    def _then(self, key: Any, descending: bool) -> FrameQuery:
        return FrameQuery(self._base, self._levels + ((key, descending),))

    def to_frame(self) -> pd.DataFrame:
        """Materialize the ordered DataFrame."""
        frame = self._base.to_frame() if isinstance(self._base, FrameQuery) else self._base
        if not self._levels or len(frame) == 0:
            return frame

        n = len(frame)
        keys = pd.DataFrame(index=pd.RangeIndex(n))
        by: list[str] = []
        ascending: list[bool] = []
        for i, (key, descending) in enumerate(self._levels):
            values = self._key_values(frame, key).reset_index(drop=True)
            # Null flags sort ahead of (asc) or behind (desc) the values.
            keys[f"na_{i}"] = values.isna().to_numpy()
            # Series keeps the dtype: ordered categoricals sort by category.
            keys[f"key_{i}"] = values
            by += [f"na_{i}", f"key_{i}"]
            ascending += [descending, not descending]
        keys[_POSITION] = np.arange(n)
        by.append(_POSITION)
        ascending.append(True)

        ordered = keys.sort_values(by=by, ascending=ascending, kind="stable")
        return frame.take(ordered[_POSITION].to_numpy())

    def unwrap(self) -> pd.DataFrame:
        return self.to_frame()

    def __len__(self) -> int:
        frame = self._base
        while isinstance(frame, FrameQuery):
            frame = frame._base
        return len(frame)

    def __repr__(self) -> str:
        return f"FrameQuery(levels={len(self._levels)})"

    @staticmethod
    def _key_values(frame: pd.DataFrame, key: Any) -> pd.Series:
        if callable(key):
            return frame.apply(key, axis=1)
        if key not in frame.columns:
            raise KeyError(
                f"Column '{key}' not found in frame. "
                f"Available: {list(frame.columns)}"
            )
        return frame[key]
