"""Categorical filters: fixed judgment, input ignored."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from filterkit.domain.filters.base import FilterBase


@dataclass(frozen=True, slots=True)
class CategoricalFilter(FilterBase):
    """Filter returning the same judgment for every input.

    Immutable value object: equality and hash derive from judgment.
    Stateless, safe for concurrent use.

    Attributes:
        judgment: Result returned for every input.
    """

    judgment: bool

    def __post_init__(self) -> None:
        """Normalize judgment to bool."""
        object.__setattr__(self, "judgment", bool(self.judgment))

    def __call__(self, obj: Any) -> bool:
        return self.judgment

    def __str__(self) -> str:
        return f"CategoricalFilter({self.judgment})"


def accept_all() -> CategoricalFilter:
    """Create filter that accepts everything."""
    return CategoricalFilter(True)


def reject_all() -> CategoricalFilter:
    """Create filter that accepts nothing."""
    return CategoricalFilter(False)
