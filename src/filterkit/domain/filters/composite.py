"""Composite filters: AND, OR composition.

Binary: CombinedFilter via and_() / or_().
N-ary: ConjFilter / DisjFilter, mutable containers that accept new
sub-filters after construction.

All evaluation is lazy and left-to-right: a sub-filter is not called once
the result is decided. Side effects of sub-filters (RandomFilter draws)
therefore follow this order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Self

from filterkit.domain.filters.base import FilterBase, require_filter

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from filterkit.domain.filters.types import Filter


@dataclass(frozen=True, slots=True)
class CombinedFilter(FilterBase):
    """Conjunction or disjunction of two filters.

    Attributes:
        first: Evaluated first.
        second: Evaluated only when first does not decide the result.
        conjunction: True for AND, False for OR.
    """

    first: Filter[Any]
    second: Filter[Any]
    conjunction: bool

    def __post_init__(self) -> None:
        """Validate sub-filters. FAIL-FIRST."""
        require_filter(self.first)
        require_filter(self.second)
        object.__setattr__(self, "conjunction", bool(self.conjunction))

    def __call__(self, obj: Any) -> bool:
        if self.conjunction:
            return bool(self.first(obj) and self.second(obj))
        return bool(self.first(obj) or self.second(obj))

    def __str__(self) -> str:
        op = "AND" if self.conjunction else "OR"
        return f"({self.first} {op} {self.second})"


def and_(f1: Filter[Any], f2: Filter[Any]) -> CombinedFilter:
    """Create filter that accepts only when both filters accept (AND).

    Args:
        f1: Evaluated first.
        f2: Not evaluated when f1 rejects.

    Returns:
        Filter equivalent to f1(x) and f2(x).

    Raises:
        InvalidFilterError: If either argument is not callable.
    """
    return CombinedFilter(f1, f2, conjunction=True)


def or_(f1: Filter[Any], f2: Filter[Any]) -> CombinedFilter:
    """Create filter that accepts when either filter accepts (OR).

    Args:
        f1: Evaluated first.
        f2: Not evaluated when f1 accepts.

    Returns:
        Filter equivalent to f1(x) or f2(x).

    Raises:
        InvalidFilterError: If either argument is not callable.
    """
    return CombinedFilter(f1, f2, conjunction=False)


class _FilterList(FilterBase):
    """Ordered list of sub-filters owned exclusively by the container.

    Not thread-safe: add_filter() must not run concurrently with evaluation.
    """

    __slots__ = ("_filters",)

    def __init__(self, *filters: Filter[Any]) -> None:
        """Initialize with sub-filters in evaluation order.

        Raises:
            InvalidFilterError: If any argument is not callable.
        """
        for flt in filters:
            require_filter(flt)
        self._filters: list[Filter[Any]] = list(filters)

    @classmethod
    def from_iterable(cls, filters: Iterable[Filter[Any]]) -> Self:
        """Create from a list (or any iterable) of sub-filters.

        The iterable is copied: later changes to it are not observed.
        """
        return cls(*filters)

    def add_filter(self, flt: Filter[Any]) -> None:
        """Append flt. Affects subsequent evaluations only.

        Raises:
            InvalidFilterError: If flt is not callable.
        """
        require_filter(flt)
        self._filters.append(flt)

    @property
    def filters(self) -> tuple[Filter[Any], ...]:
        """Snapshot of current sub-filters."""
        return tuple(self._filters)

    def __bool__(self) -> bool:
        # Truthy even when empty: a filter, not a collection
        return True

    def __len__(self) -> int:
        return len(self._filters)

    def __iter__(self) -> Iterator[Filter[Any]]:
        return iter(tuple(self._filters))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(map(repr, self._filters))})"


class ConjFilter(_FilterList):
    """Conjunction of a list of filters.

    Returns False at the first sub-filter that rejects.
    Empty = always True (vacuous truth).
    """

    __slots__ = ()

    def __call__(self, obj: Any) -> bool:
        return all(f(obj) for f in self._filters)

    def __str__(self) -> str:
        return "ALL(" + ", ".join(map(str, self._filters)) + ")"


class DisjFilter(_FilterList):
    """Disjunction of a list of filters.

    Returns True at the first sub-filter that accepts.
    Empty = always False.
    """

    __slots__ = ()

    def __call__(self, obj: Any) -> bool:
        return any(f(obj) for f in self._filters)

    def __str__(self) -> str:
        return "ANY(" + ", ".join(map(str, self._filters)) + ")"


def all_of(*filters: Filter[Any]) -> ConjFilter:
    """Create filter that requires ALL filters to pass (AND).

    Args:
        *filters: Filters to compose.

    Returns:
        ConjFilter over filters. Empty filters = always True.
    """
    return ConjFilter(*filters)


def any_of(*filters: Filter[Any]) -> DisjFilter:
    """Create filter that requires ANY filter to pass (OR).

    Args:
        *filters: Filters to compose.

    Returns:
        DisjFilter over filters. Empty filters = always False.
    """
    return DisjFilter(*filters)
