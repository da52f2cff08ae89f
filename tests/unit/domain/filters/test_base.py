"""Tests for FilterBase and require_filter."""

import pytest

from filterkit.domain.exceptions import InvalidFilterError
from filterkit.domain.filters.base import FilterBase, require_filter
from filterkit.domain.filters.categorical import CategoricalFilter
from filterkit.domain.filters.composite import ConjFilter, DisjFilter
from filterkit.domain.filters.membership import MembershipFilter
from filterkit.domain.filters.negation import NegatedFilter
from filterkit.domain.filters.sampling import RandomFilter


class TestFilterBase:
    """FilterBase only supplies operators; subclasses supply __call__."""

    def test_base_not_callable(self) -> None:
        assert not callable(FilterBase())

    @pytest.mark.parametrize(
        "cls",
        [CategoricalFilter, MembershipFilter, NegatedFilter, ConjFilter, DisjFilter, RandomFilter],
    )
    def test_subclasses_define_call(self, cls: type) -> None:
        assert "__call__" in vars(cls)


class TestRequireFilter:
    """Tests for require_filter."""

    def test_callable_passes(self) -> None:
        require_filter(len)

    def test_none_raises(self) -> None:
        with pytest.raises(InvalidFilterError):
            require_filter(None)
