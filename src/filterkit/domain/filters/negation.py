"""Negation filters: NOT and conditional NOT."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from filterkit.domain.filters.base import FilterBase, require_filter

if TYPE_CHECKING:
    from filterkit.domain.filters.types import Filter


@dataclass(frozen=True, slots=True)
class NegatedFilter(FilterBase):
    """Filter that is inner, negated or not as specified.

    Result is negated XOR inner(x).

    Attributes:
        inner: Wrapped filter.
        negated: True to invert inner, False to pass it through.
    """

    inner: Filter[Any]
    negated: bool = True

    def __post_init__(self) -> None:
        """Validate inner. FAIL-FIRST."""
        require_filter(self.inner)
        object.__setattr__(self, "negated", bool(self.negated))

    def __call__(self, obj: Any) -> bool:
        return self.negated ^ bool(self.inner(obj))

    def __str__(self) -> str:
        if self.negated:
            return f"NOT({self.inner})"
        return str(self.inner)


def not_(flt: Filter[Any]) -> NegatedFilter:
    """Create filter that negates another filter (NOT).

    Args:
        flt: Filter to negate.

    Returns:
        Filter that returns opposite of input filter.
    """
    return NegatedFilter(flt, negated=True)


def toggled(flt: Filter[Any], negate: bool) -> NegatedFilter:
    """Create filter that is flt, negated only when negate is True.

    Lets call sites choose negation at construction time without branching.

    Args:
        flt: Filter to wrap.
        negate: Whether to invert flt.

    Returns:
        Filter equivalent to flt (negate=False) or not_(flt) (negate=True).
    """
    return NegatedFilter(flt, negated=negate)
