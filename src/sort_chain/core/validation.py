"""Input validation with clear error messages for sort builders."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .directive import SortDirective


class MissingSourceError(RuntimeError):
    """Raised when a sort is built before any data source was bound."""


def validate_directive(directive: Any) -> SortDirective | None:
    """Validate an argument passed to ``Sorter.add``.

    ``None`` is allowed and returned unchanged (it is skipped by the caller).
    """
    if directive is None or isinstance(directive, SortDirective):
        return directive
    raise TypeError(
        f"Expected a SortDirective, got {type(directive).__name__}. "
        "Wrap your key with SortDirective(key, Direction.ASCENDING)."
    )


def validate_directives(directives: Any) -> Iterable:
    """Validate an argument passed to ``Sorter.add_range``."""
    if isinstance(directives, SortDirective):
        raise TypeError(
            "add_range() expects an iterable of SortDirective objects, "
            "got a single SortDirective. Use add() instead."
        )
    if not isinstance(directives, Iterable):
        raise TypeError(
            f"add_range() expects an iterable of SortDirective objects, "
            f"got {type(directives).__name__}."
        )
    return directives


def validate_keys(directives: Iterable[SortDirective]) -> None:
    """Check that every directive has a key selector before anything is ordered."""
    missing = [i for i, d in enumerate(directives) if d.key is None]
    if missing:
        raise ValueError(
            f"Sort directive(s) at position(s) {missing} have no key selector. "
            "Pass a callable, a field name or a column expression."
        )


def require_source(source: Any) -> Any:
    """Return ``source`` or raise MissingSourceError if none was bound."""
    if source is None:
        raise MissingSourceError(
            "No data source bound to the sorter. Pass one to Sorter(...) "
            "or call build_on_query() / build_on_sequence()."
        )
    return source
