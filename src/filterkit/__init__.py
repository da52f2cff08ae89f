"""filterkit - composable boolean filters over arbitrary element types."""

__version__ = "0.1.0"

from filterkit.application.apply import filter_items, retain_all
from filterkit.domain.filters import (
    CategoricalFilter,
    CombinedFilter,
    ConjFilter,
    DisjFilter,
    Filter,
    MembershipFilter,
    NegatedFilter,
    RandomFilter,
    accept_all,
    all_of,
    and_,
    any_of,
    membership_accept,
    membership_reject,
    not_,
    or_,
    reject_all,
    toggled,
)

__all__ = [
    "CategoricalFilter",
    "CombinedFilter",
    "ConjFilter",
    "DisjFilter",
    "Filter",
    "MembershipFilter",
    "NegatedFilter",
    "RandomFilter",
    "__version__",
    "accept_all",
    "all_of",
    "and_",
    "any_of",
    "filter_items",
    "membership_accept",
    "membership_reject",
    "not_",
    "or_",
    "reject_all",
    "retain_all",
    "toggled",
]
