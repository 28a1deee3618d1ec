"""SortDirective: one ordering level (key selector + direction)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Union

# A callable record -> value, a field/column name, or a SQL column expression.
KeySelector = Union[Callable[[Any], Any], str, Any]

_ASCENDING_WORDS = frozenset({"asc", "ascending"})
_DESCENDING_WORDS = frozenset({"desc", "descending"})


class Direction(Enum):
    """Sort direction of a single ordering level.

    ``UNSET`` means "do not sort by this key": directives carrying it are
    dropped by the builder instead of being applied.
    """

    ASCENDING = "asc"
    DESCENDING = "desc"
    UNSET = "unset"

    @property
    def is_set(self) -> bool:
        return self is not Direction.UNSET

    @property
    def descending(self) -> bool:
        return self is Direction.DESCENDING

    @classmethod
    def parse(cls, value: Any) -> Direction:
        """Map a user-facing sort option to a Direction.

        Accepts Direction members, ``True``/``False``/``None`` (ascending /
        descending / unset) and the strings ``asc``, ``ascending``, ``desc``,
        ``descending`` in any case. An empty string means unset.
        """
        if isinstance(value, Direction):
            return value
        if value is None:
            return cls.UNSET
        if isinstance(value, bool):
            return cls.ASCENDING if value else cls.DESCENDING
        if isinstance(value, str):
            word = value.strip().lower()
            if not word:
                return cls.UNSET
            if word in _ASCENDING_WORDS:
                return cls.ASCENDING
            if word in _DESCENDING_WORDS:
                return cls.DESCENDING
        raise ValueError(
            f"Unknown sort direction {value!r}. "
            "Use 'asc', 'desc', True, False or None."
        )


@dataclass(frozen=True)
class SortDirective:
    """Immutable description of one ordering level.

    ``key`` is stored as given and is not checked here; the builder rejects
    a missing key when it builds.
    """

    key: KeySelector
    direction: Direction = Direction.ASCENDING

    @classmethod
    def asc(cls, key: KeySelector) -> SortDirective:
        return cls(key, Direction.ASCENDING)

    @classmethod
    def desc(cls, key: KeySelector) -> SortDirective:
        return cls(key, Direction.DESCENDING)

    @classmethod
    def from_flag(cls, key: KeySelector, ascending: bool | None) -> SortDirective:
        """Build from a nullable flag: True ascending, False descending, None unset."""
        return cls(key, Direction.parse(ascending))
