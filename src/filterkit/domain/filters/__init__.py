"""Domain layer: composable filter algebra.

Filters are callables: Filter = Callable[[T], bool]
True = accept element, False = reject element.

Usage:
    from filterkit.domain.filters import and_, membership_accept, not_

    # Single filter
    flt = membership_accept({"a", "b"})
    kept = [x for x in items if flt(x)]

    # Composed filters
    flt = and_(membership_accept({"a", "b"}), not_(lambda x: x == "b"))
    flt = membership_accept({"a", "b"}) & ~membership_accept({"b"})
"""

from filterkit.domain.filters.categorical import CategoricalFilter, accept_all, reject_all
from filterkit.domain.filters.composite import (
    CombinedFilter,
    ConjFilter,
    DisjFilter,
    all_of,
    and_,
    any_of,
    or_,
)
from filterkit.domain.filters.membership import (
    MembershipFilter,
    membership_accept,
    membership_reject,
)
from filterkit.domain.filters.negation import NegatedFilter, not_, toggled
from filterkit.domain.filters.sampling import RandomFilter
from filterkit.domain.filters.types import Filter

__all__ = [
    "CategoricalFilter",
    "CombinedFilter",
    "ConjFilter",
    "DisjFilter",
    "Filter",
    "MembershipFilter",
    "NegatedFilter",
    "RandomFilter",
    "accept_all",
    "all_of",
    "and_",
    "any_of",
    "membership_accept",
    "membership_reject",
    "not_",
    "or_",
    "reject_all",
    "toggled",
]
