"""Sorter: the main user-facing API (builder pattern)."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from .core.directive import SortDirective
from .core.validation import (
    require_source,
    validate_directive,
    validate_directives,
    validate_keys,
)
from .query.adapt import as_query, as_sequence_query
from .query.base import OrderableQuery

logger = logging.getLogger(__name__)


class Sorter:
    """Multi-level sort builder.

    Directives are applied in the order they were added: the first one is
    the primary ordering, each later one only breaks ties left by the ones
    before it. Directives with an unset direction are skipped, so sort
    options coming from a request can be added unconditionally.

    Usage::

        from sort_chain import Sorter, SortDirective, Direction

        ordered = (
            Sorter(rows)
            .add(SortDirective("team", Direction.ASCENDING))
            .add(SortDirective.from_flag("score", request_ascending))
            .add(SortDirective.desc(lambda r: r["joined"]))
            .build()
        )
        ordered.to_list()

    The source may be any iterable of records, a pandas DataFrame, a
    SQLAlchemy Select/Query or a custom OrderableQuery.
    """

    def __init__(self, source: Any = None) -> None:
        self._source: OrderableQuery | None = (
            as_query(source) if source is not None else None
        )
        # Only ever appended to through add(), which drops unset directives.
        self._directives: list[SortDirective] = []

    # --- Directives ---

    @property
    def directives(self) -> tuple[SortDirective, ...]:
        """Accepted directives in priority order."""
        return tuple(self._directives)

    @property
    def source(self) -> OrderableQuery | None:
        """The currently bound source, or None."""
        return self._source

    def add(self, directive: SortDirective | None) -> Sorter:
        """Append a directive. ``None`` and unset directions are ignored."""
        directive = validate_directive(directive)
        if directive is None or not directive.direction.is_set:
            return self
        self._directives.append(directive)
        return self

    def add_range(self, directives: Iterable[SortDirective | None]) -> Sorter:
        """Append several directives, keeping their relative order."""
        for directive in validate_directives(directives):
            self.add(directive)
        return self

    # --- Build ---

    def build(self) -> OrderableQuery:
        """Apply the directives to the bound source and return the ordered view.

        Raises MissingSourceError if no source was ever bound. With no
        directives the source is returned unchanged.
        """
        source = require_source(self._source)
        validate_keys(self._directives)
        if not self._directives:
            return source

        logger.debug(
            "Applying %d sort level(s) to %s",
            len(self._directives), type(source).__name__,
        )
        primary, *rest = self._directives
        if primary.direction.descending:
            ordered = source.order_by_descending(primary.key)
        else:
            ordered = source.order_by(primary.key)
        for directive in rest:
            if directive.direction.descending:
                ordered = ordered.then_by_descending(directive.key)
            else:
                ordered = ordered.then_by(directive.key)
        return ordered

    def build_on_query(self, query: Any) -> OrderableQuery:
        """Replace the bound source with ``query`` and build."""
        self._source = None if query is None else as_query(query)
        return self.build()

    def build_on_sequence(self, sequence: Iterable) -> OrderableQuery:
        """Replace the bound source with an in-memory ``sequence`` and build."""
        self._source = None if sequence is None else as_sequence_query(sequence)
        return self.build()

    def __len__(self) -> int:
        return len(self._directives)

    def __repr__(self) -> str:
        levels = ", ".join(
            f"{_describe(d.key)} {d.direction.value}" for d in self._directives
        )
        return f"Sorter([{levels}])"


def _describe(key: Any) -> str:
    if isinstance(key, str):
        return key
    return getattr(key, "__name__", None) or repr(key)
