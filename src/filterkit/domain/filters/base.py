"""Shared base for library filters: operator composition and validation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from filterkit.domain.exceptions import InvalidFilterError

if TYPE_CHECKING:
    from filterkit.domain.filters.composite import CombinedFilter
    from filterkit.domain.filters.negation import NegatedFilter
    from filterkit.domain.filters.types import Filter


def require_filter(flt: object) -> None:
    """FAIL-FIRST: raise InvalidFilterError unless flt is callable."""
    if not callable(flt):
        raise InvalidFilterError(type(flt))


class FilterBase:
    """Mixin giving library filters the &, | and ~ operators.

    f & g is and_(f, g), f | g is or_(f, g), ~f is not_(f).
    The other operand may be any callable.
    """

    __slots__ = ()

    def __and__(self, other: Filter[Any]) -> CombinedFilter:
        from filterkit.domain.filters.composite import and_

        return and_(self, other)

    def __rand__(self, other: Filter[Any]) -> CombinedFilter:
        from filterkit.domain.filters.composite import and_

        return and_(other, self)

    def __or__(self, other: Filter[Any]) -> CombinedFilter:
        from filterkit.domain.filters.composite import or_

        return or_(self, other)

    def __ror__(self, other: Filter[Any]) -> CombinedFilter:
        from filterkit.domain.filters.composite import or_

        return or_(other, self)

    def __invert__(self) -> NegatedFilter:
        from filterkit.domain.filters.negation import not_

        return not_(self)
