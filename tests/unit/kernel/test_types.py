"""Unit tests for kernel types."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from requisite.kernel.types import Nothing, Some, option_of
from requisite.testing.generators import options


# ---------------------------------------------------------------------------
# Option monad
# ---------------------------------------------------------------------------


class TestOptionMonad:
    def test_some_is_some(self) -> None:
        s = Some(10)
        assert s.is_some()
        assert not s.is_none()
        assert s.value == 10

    def test_nothing_is_none(self) -> None:
        n: Nothing[int] = Nothing()
        assert n.is_none()
        assert not n.is_some()

    def test_nothing_unwrap_raises(self) -> None:
        with pytest.raises(ValueError):
            Nothing().unwrap()

    def test_unwrap_or(self) -> None:
        assert Some(1).unwrap_or(2) == 1
        assert Nothing().unwrap_or(2) == 2

    def test_some_unwrap_or_else_skips_func(self) -> None:
        calls: list[int] = []
        assert Some(1).unwrap_or_else(lambda: calls.append(1) or 2) == 1
        assert calls == []

    def test_nothing_unwrap_or_else_calls_func(self) -> None:
        assert Nothing().unwrap_or_else(lambda: 9) == 9

    def test_some_map(self) -> None:
        assert Some(2).map(lambda x: x + 1) == Some(3)

    def test_nothing_map(self) -> None:
        assert Nothing().map(lambda x: x + 1).is_none()

    def test_some_iter(self) -> None:
        assert list(Some(5)) == [5]

    def test_nothing_iter(self) -> None:
        assert list(Nothing()) == []

    def test_some_flat_map_returns_inner(self) -> None:
        assert Some(3).flat_map(lambda x: Some(x * 2)).unwrap() == 6

    def test_some_flat_map_can_return_nothing(self) -> None:
        result = Some(0).flat_map(lambda x: Nothing() if x == 0 else Some(x))
        assert result.is_none()

    def test_nothing_flat_map_is_identity(self) -> None:
        n: Nothing[int] = Nothing()
        assert n.flat_map(lambda x: Some(x)).is_none()

    def test_some_filter_passes(self) -> None:
        assert Some(4).filter(lambda x: x > 0) == Some(4)

    def test_some_filter_rejects(self) -> None:
        assert Some(-4).filter(lambda x: x > 0).is_none()

    def test_equality_and_hash(self) -> None:
        assert Some(1) == Some(1)
        assert Some(1) != Some(2)
        assert Nothing() == Nothing()
        assert Some(None) != Nothing()
        assert len({Some(1), Some(1), Nothing(), Nothing()}) == 2

    def test_repr(self) -> None:
        assert repr(Some("a")) == "Some('a')"
        assert repr(Nothing()) == "Nothing"

    @given(options(st.text()))
    def test_is_some_and_is_none_are_exclusive(self, opt) -> None:
        assert opt.is_some() != opt.is_none()


class TestOptionOf:
    def test_none_becomes_nothing(self) -> None:
        assert option_of(None) == Nothing()

    @pytest.mark.parametrize("value", [0, "", False, "x"])
    def test_value_becomes_some(self, value: object) -> None:
        opt = option_of(value)
        assert opt.is_some()
        assert opt.unwrap() is value
