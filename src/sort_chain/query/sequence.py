"""SequenceQuery: deferred multi-level ordering over an in-memory iterable."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Callable

from .base import OrderableQuery, field_getter


def _none_first(getter: Callable[[Any], Any]) -> Callable[[Any], tuple]:
    """Wrap a getter so ``None`` compares below every other value."""

    def key(record: Any) -> tuple:
        value = getter(record)
        if value is None:
            return (False, 0)
        return (True, value)

    return key


class SequenceQuery(OrderableQuery):
    """Ordering view over a finite iterable of records.

    Reusable iterables are not read until the query is iterated; one-shot
    iterators (generators, ``map`` objects) are captured into a tuple. Sorting is
    delegated to ``list.sort``: one stable pass per level, lowest priority
    first, so earlier levels dominate and full ties keep input order.

    ``None`` key values sort first when ascending and last when descending.
    """

    __slots__ = ("_source", "_levels")

    def __init__(
        self,
        source: Iterable,
        levels: tuple[tuple[Callable[[Any], Any], bool], ...] = (),
    ) -> None:
        if isinstance(source, Iterator):
            # One-shot iterators would be exhausted by the first read.
            source = tuple(source)
        self._source = source
        self._levels = levels

    @property
    def is_ordered(self) -> bool:
        return bool(self._levels)

    @property
    def levels(self) -> tuple[tuple[Callable[[Any], Any], bool], ...]:
        """(getter, descending) pairs in priority order."""
        return self._levels

    def _order(self, key: Any, descending: bool) -> SequenceQuery:
        # Re-ordering sorts this query's output, so its order becomes the tiebreak.
        source = self if self._levels else self._source
        return SequenceQuery(source, ((field_getter(key), descending),))

    def _then(self, key: Any, descending: bool) -> SequenceQuery:
        return SequenceQuery(
            self._source, self._levels + ((field_getter(key), descending),)
        )

    def to_list(self) -> list:
        items = list(self._source)
        for getter, descending in reversed(self._levels):
            items.sort(key=_none_first(getter), reverse=descending)
        return items

    def unwrap(self) -> list:
        return self.to_list()

    def __iter__(self) -> Iterator:
        return iter(self.to_list())

    def __len__(self) -> int:
        return len(list(self._source))

    def __repr__(self) -> str:
        return f"SequenceQuery(levels={len(self._levels)})"
