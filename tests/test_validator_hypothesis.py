"""Hypothesis property-based tests for split(), validate() and parse_money().

Tests invariants that must hold across all inputs.
Uses strategies from tests.strategies.money for generating test data.
"""

from __future__ import annotations

import pytest
from hypothesis import HealthCheck, event, given, settings
from hypothesis import strategies as st

from liquiditycheck import parse_money, split, validate
from liquiditycheck.diagnostics import DiagnosticCode
from liquiditycheck.splitter import normalize_whitespace
from tests.strategies.money import (
    amounts,
    digit_free_text,
    money_strings,
    unknown_tokens,
    whitespace,
)


class TestMoneyStringProperties:
    """Amount + known token, in either order, always validates."""

    @given(money_strings())
    def test_split_returns_parts_in_order(
        self, case: tuple[str, str, str, bool]
    ) -> None:
        """split() returns the two runs in input order."""
        text, amount, token, currency_first = case
        expected = (token, amount) if currency_first else (amount, token)
        assert split(text) == expected

    @given(money_strings())
    def test_validates(self, case: tuple[str, str, str, bool]) -> None:
        """validate() accepts every generated money string."""
        assert validate(case[0])

    @given(money_strings())
    def test_parse_money_identifies_parts(
        self, case: tuple[str, str, str, bool]
    ) -> None:
        """parse_money() labels amount and currency correctly."""
        text, amount, token, currency_first = case
        result, errors = parse_money(text)
        assert errors == ()
        assert result is not None
        assert result.amount == amount
        assert result.currency == token
        assert result.currency_first is currency_first
        assert result.iso_codes


class TestRejectionProperties:
    """Inputs that must never validate."""

    @given(digit_free_text)
    def test_no_digit_never_validates(self, text: str) -> None:
        """A string without ASCII digits is never money."""
        assert split(text) is None
        assert not validate(text)

    @given(amounts(), unknown_tokens(), st.booleans(), whitespace)
    def test_unknown_token_never_validates(
        self, amount: str, token: str, token_first: bool, gap: str
    ) -> None:
        """Well-formed amounts with unknown tokens are rejected."""
        text = token + gap + amount if token_first else amount + gap + token
        result, errors = parse_money(text)
        assert result is None
        assert errors[0].diagnostic is not None
        assert errors[0].diagnostic.code is DiagnosticCode.CURRENCY_UNKNOWN
        assert not validate(text)


class TestNormalizationProperties:
    """Whitespace has no effect beyond normalization."""

    @given(st.text())
    def test_split_ignores_whitespace(self, text: str) -> None:
        """Splitting the normalized string gives the same result."""
        assert split(text) == split(normalize_whitespace(text))

    @given(st.text(), st.text(), whitespace)
    def test_inserted_whitespace_ignored(self, left: str, right: str, gap: str) -> None:
        """Whitespace inserted anywhere changes nothing."""
        event(f"gap_length={len(gap)}")
        assert split(left + gap + right) == split(left + right)
        assert validate(left + gap + right) == validate(left + right)

    @given(st.text())
    def test_split_parts_prefix_input(self, text: str) -> None:
        """Successful splits are non-empty and concatenate to a prefix of the input."""
        result = split(text)
        if result is not None:
            leading, trailing = result
            assert leading
            assert trailing
            assert normalize_whitespace(text).startswith(leading + trailing)


class TestConsistencyProperties:
    """No hidden state; validate() mirrors parse_money()."""

    @given(st.text())
    def test_idempotent(self, text: str) -> None:
        """Repeated calls give identical results."""
        assert split(text) == split(text)
        assert validate(text) == validate(text)
        assert parse_money(text)[0] == parse_money(text)[0]

    @given(st.one_of(st.text(), money_strings().map(lambda case: case[0])))
    def test_validate_matches_parse_money(self, text: str) -> None:
        """validate(v) is exactly parse_money(v) succeeding."""
        result, errors = parse_money(text)
        assert validate(text) == (result is not None)
        assert (len(errors) == 0) == (result is not None)
        assert len(errors) <= 1


@pytest.mark.fuzz
class TestIntensiveProperties:
    """High-volume runs; excluded unless run with -m fuzz."""

    @given(st.one_of(st.text(max_size=64), money_strings().map(lambda case: case[0])))
    @settings(max_examples=20_000, deadline=None, suppress_health_check=[HealthCheck.too_slow])
    def test_parse_money_total(self, text: str) -> None:
        """parse_money() never raises and split results are input prefixes."""
        result, errors = parse_money(text)
        assert (result is None) != (errors == ())
        parts = split(text)
        if parts is not None:
            assert normalize_whitespace(text).startswith("".join(parts))
