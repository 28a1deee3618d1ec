"""OrderableQuery: the four-primitive ordering protocol shared by all sources."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Callable


def field_getter(key: Any) -> Callable[[Any], Any]:
    """Turn a key selector into a ``record -> value`` callable.

    A string names a field: looked up by key on mappings and by attribute on
    everything else.
    """
    if isinstance(key, str):
        name = key

        def get(record: Any) -> Any:
            if isinstance(record, Mapping):
                return record[name]
            return getattr(record, name)

        return get
    if callable(key):
        return key
    raise TypeError(
        f"Key selector must be a callable or a field name, got {type(key).__name__}."
    )


class OrderableQuery(ABC):
    """A data source that can be ordered one level at a time.

    Queries are immutable: every ordering call returns a new query.
    ``order_by*`` starts a new primary ordering; ``then_by*`` adds a
    subordinate level that only breaks ties left by earlier levels.
    """

    @property
    @abstractmethod
    def is_ordered(self) -> bool:
        """True once a primary ordering has been established."""

    @abstractmethod
    def unwrap(self) -> Any:
        """Return the native result (list, DataFrame, SQL statement...)."""

    @abstractmethod
    def _order(self, key: Any, descending: bool) -> OrderableQuery:
        ...

    @abstractmethod
    def _then(self, key: Any, descending: bool) -> OrderableQuery:
        ...

    def order_by(self, key: Any) -> OrderableQuery:
        return self._order(key, False)

    def order_by_descending(self, key: Any) -> OrderableQuery:
        return self._order(key, True)

    def then_by(self, key: Any) -> OrderableQuery:
        self._require_ordered("then_by")
        return self._then(key, False)

    def then_by_descending(self, key: Any) -> OrderableQuery:
        self._require_ordered("then_by_descending")
        return self._then(key, True)

    def _require_ordered(self, method: str) -> None:
        if not self.is_ordered:
            raise TypeError(
                f"{method}() requires an ordered query. "
                "Call order_by() or order_by_descending() first."
            )
