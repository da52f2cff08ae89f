"""Apply a filter across a sequence or a mutable collection.

filter_items: new sequence, input untouched.
retain_all: in-place removal, all-or-nothing.
"""

from __future__ import annotations

from collections.abc import MutableSequence, MutableSet
from typing import TYPE_CHECKING, Any

from filterkit.domain.exceptions import UnsupportedCollectionError
from filterkit.domain.filters.base import require_filter

if TYPE_CHECKING:
    from collections.abc import Iterable

    from filterkit.domain.filters.types import Filter

# Exact types rebuilt as the same type; anything else becomes a list.
# Exact match only: subclasses (namedtuple) do not share the constructor.
_REBUILDABLE: frozenset[type] = frozenset({list, tuple, bytes, bytearray})


def filter_items[T](elems: Iterable[T], flt: Filter[T]) -> Any:
    """Return the elements accepted by flt, in their original order.

    Result type follows input: list → list, tuple → tuple, str → str,
    bytes → bytes, bytearray → bytearray. Other iterables → list.
    Input is not modified.

    Args:
        elems: Elements to filter.
        flt: Filter deciding which elements are kept.

    Returns:
        New collection with accepted elements only.

    Raises:
        InvalidFilterError: If flt is not callable.
    """
    require_filter(flt)

    accepted = [e for e in elems if flt(e)]

    if type(elems) is str:
        return "".join(accepted)
    if type(elems) in _REBUILDABLE:
        return type(elems)(accepted)
    return accepted


def retain_all[T](elems: MutableSequence[T] | MutableSet[T], flt: Filter[T]) -> None:
    """Remove every element of elems that flt rejects, in place.

    flt is evaluated for every element before anything is removed:
    if flt raises, elems is left untouched.
    MutableSequence: retained elements keep their order and identity.

    Thread Safety:
      - elems must not be modified by anyone else during the call.

    Args:
        elems: MutableSequence (list, deque, ...) or MutableSet (set, ...).
        flt: Filter deciding which elements are kept.

    Raises:
        UnsupportedCollectionError: If elems cannot remove in place.
        InvalidFilterError: If flt is not callable.
    """
    # FAIL-FIRST: reject before evaluating anything
    if not isinstance(elems, (MutableSequence, MutableSet)):
        raise UnsupportedCollectionError(type(elems))
    require_filter(flt)

    if isinstance(elems, MutableSequence):
        rejected_indices = [i for i, e in enumerate(elems) if not flt(e)]
        # Delete from the end so earlier indices stay valid
        for i in reversed(rejected_indices):
            del elems[i]
        return

    rejected = [e for e in elems if not flt(e)]
    for e in rejected:
        elems.discard(e)
