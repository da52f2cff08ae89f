"""Tests for membership filters.

Tests:
- membership_accept / membership_reject results
- defensive copy of the source collection
- deduplication, equality, hashing
- str rendering
"""

import pytest

from filterkit.domain.filters.membership import (
    MembershipFilter,
    membership_accept,
    membership_reject,
)


class TestMembershipAccept:
    """Tests for membership_accept."""

    def test_members_accepted(self) -> None:
        flt = membership_accept(["a", "b", "c"])

        assert flt("a") is True
        assert flt("b") is True
        assert flt("c") is True

    def test_non_members_rejected(self) -> None:
        flt = membership_accept(["a", "b", "c"])

        assert flt("d") is False
        assert flt("") is False
        assert flt(None) is False

    def test_empty_rejects_everything(self) -> None:
        flt = membership_accept([])

        assert flt("a") is False

    def test_accepts_any_iterable(self) -> None:
        """Tuples, sets and generators all work as sources."""
        assert membership_accept(("x",))("x") is True
        assert membership_accept({"x"})("x") is True
        assert membership_accept(c for c in "xy")("y") is True


class TestMembershipReject:
    """Tests for membership_reject."""

    def test_members_rejected(self) -> None:
        flt = membership_reject([1, 2, 3])

        assert flt(1) is False
        assert flt(3) is False

    def test_non_members_accepted(self) -> None:
        flt = membership_reject([1, 2, 3])

        assert flt(4) is True
        assert flt("1") is True

    def test_empty_accepts_everything(self) -> None:
        assert membership_reject([])(42) is True


class TestDefensiveCopy:
    """Source collection mutation must not leak into the filter."""

    def test_later_append_not_observed(self) -> None:
        source = ["a", "b"]
        flt = membership_accept(source)

        source.append("c")
        source.remove("a")

        assert flt("a") is True
        assert flt("c") is False

    def test_members_deduplicated(self) -> None:
        flt = membership_accept([1, 1, 2, 2, 2])

        assert flt.members == frozenset({1, 2})

    def test_direct_construction_copies(self) -> None:
        """MembershipFilter normalizes members to frozenset itself."""
        source = {1, 2}
        flt = MembershipFilter(source, True)  # type: ignore[arg-type]

        source.add(3)

        assert isinstance(flt.members, frozenset)
        assert flt(3) is False

    def test_unhashable_member_raises(self) -> None:
        with pytest.raises(TypeError):
            membership_accept([[1, 2]])


class TestMembershipValue:
    """Tests for MembershipFilter value semantics."""

    def test_equal_by_members_and_judgment(self) -> None:
        assert membership_accept([1, 2]) == membership_accept([2, 1, 1])
        assert membership_accept([1, 2]) != membership_reject([1, 2])
        assert membership_accept([1, 2]) != membership_accept([1, 2, 3])

    def test_usable_as_dict_key(self) -> None:
        cache = {membership_accept(["a"]): "first"}

        assert cache[membership_accept(["a"])] == "first"

    def test_str_contains_judgment_and_members(self) -> None:
        assert str(membership_accept([2, 1])) == "(True:{1, 2})"
        assert str(membership_reject(["x"])) == "(False:{'x'})"


class TestJudgmentNormalization:
    """Non-bool judgments are normalized to bool."""

    def test_int_judgment(self) -> None:
        flt = MembershipFilter(frozenset({1}), 0)  # type: ignore[arg-type]

        assert flt.judgment is False
        assert flt(1) is False
        assert flt(2) is True
        assert flt == membership_reject([1])
