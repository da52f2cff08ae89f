"""Membership filters: accept or reject a fixed set of values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from filterkit.domain.filters.base import FilterBase

if TYPE_CHECKING:
    from collections.abc import Iterable


@dataclass(frozen=True, slots=True)
class MembershipFilter(FilterBase):
    """Filter judging an input by membership in a fixed set.

    Returns judgment for members, the opposite for everything else.
    members is copied into a frozenset on construction, so later mutation
    of the source collection is not observed. Members must be hashable.

    Immutable value object: equality and hash derive from (members, judgment).
    Stateless, safe for concurrent use.

    Attributes:
        members: Reference values (deduplicated, unordered).
        judgment: Result for members.
    """

    members: frozenset[Any]
    judgment: bool = True

    def __post_init__(self) -> None:
        """Copy members into a frozenset, normalize judgment to bool."""
        # frozen: bypass __setattr__ to normalize the field
        object.__setattr__(self, "members", frozenset(self.members))
        object.__setattr__(self, "judgment", bool(self.judgment))

    def __call__(self, obj: Any) -> bool:
        if obj in self.members:
            return self.judgment
        return not self.judgment

    def __str__(self) -> str:
        rendered = ", ".join(sorted(repr(m) for m in self.members))
        return f"({self.judgment}:{{{rendered}}})"


def membership_accept(items: Iterable[Any]) -> MembershipFilter:
    """Create filter that accepts exactly the given items.

    Args:
        items: Values to accept. Any iterable; copied.

    Returns:
        Filter that returns True iff input is one of items.
    """
    return MembershipFilter(frozenset(items), True)


def membership_reject(items: Iterable[Any]) -> MembershipFilter:
    """Create filter that rejects exactly the given items.

    Args:
        items: Values to reject. Any iterable; copied.

    Returns:
        Filter that returns False iff input is one of items.
    """
    return MembershipFilter(frozenset(items), False)
