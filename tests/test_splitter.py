"""Tests for split().

Covers the literal scenarios, whitespace normalization, separator
absorption, the non-backtracking scan, and index injection.
"""

from __future__ import annotations

import pytest

from liquiditycheck.currencies import CurrencyDefinition
from liquiditycheck.index import build_index
from liquiditycheck.locale_utils import SeparatorConventions
from liquiditycheck.splitter import is_ascii_digit, normalize_whitespace, split


class TestSplitLiterals:
    """Literal input/output pairs."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("$50", ("$", "50")),
            ("$ 50", ("$", "50")),
            ("50$", ("50", "$")),
            ("50 $", ("50", "$")),
            ("USD50", ("USD", "50")),
            ("USD 50", ("USD", "50")),
            ("50USD", ("50", "USD")),
            ("50 USD", ("50", "USD")),
            ("50.0 $", ("50.0", "$")),
            ("50,000 PAB", ("50,000", "PAB")),
            ("€ 50", ("€", "50")),
            ("50.0 ¥", ("50.0", "¥")),
        ],
    )
    def test_splits(self, value: str, expected: tuple[str, str]) -> None:
        """Amount and currency are split in input order."""
        assert split(value) == expected

    def test_amount_only(self) -> None:
        """All-digit input has no trailing run."""
        assert split("50") is None

    def test_currency_only(self) -> None:
        """Digit-free input has no trailing run."""
        assert split("USD") is None

    @pytest.mark.parametrize("value", ["", " ", "\t\n", "   "])
    def test_empty_or_whitespace(self, value: str) -> None:
        """Nothing left after normalization."""
        assert split(value) is None


class TestWhitespaceNormalization:
    """All whitespace is deleted, not just trimmed."""

    def test_internal_whitespace_in_amount(self) -> None:
        """'50 000' is one run, not two parts."""
        assert split("50 000 USD") == ("50000", "USD")

    def test_surrounding_whitespace(self) -> None:
        """Leading and trailing whitespace is dropped."""
        assert split("  \t$50\n ") == ("$", "50")

    def test_whitespace_inside_token(self) -> None:
        """Whitespace inside a token is removed as well."""
        assert split("50 U S D") == ("50", "USD")

    def test_normalize_whitespace(self) -> None:
        """normalize_whitespace joins whitespace-delimited segments."""
        assert normalize_whitespace(" 50 000 USD ") == "50000USD"


class TestSeparatorAbsorption:
    """Digit-group separators join whichever run is active."""

    def test_separator_inside_amount(self) -> None:
        """Separators between digits stay in the amount."""
        assert split("1,234,567.89 USD") == ("1,234,567.89", "USD")

    def test_separator_inside_symbol(self) -> None:
        """Separators inside a symbol stay in the symbol."""
        assert split("B/.50") == ("B/.", "50")

    def test_separator_after_amount(self) -> None:
        """A trailing separator is absorbed by the amount run."""
        assert split("50. USD") == ("50.", "USD")

    def test_leading_separator_absorbed_by_first_run(self) -> None:
        """A leading separator joins the (non-digit) first run; no backtracking."""
        assert split(".50") == (".", "50")
        assert split("$.50") == ("$.", "50")

    def test_separator_between_symbol_and_amount(self) -> None:
        """A separator after a symbol stays with the symbol."""
        assert split("$,50") == ("$,", "50")

    def test_non_separator_breaks_classification(self) -> None:
        """'_' is not a separator, so it starts the trailing run."""
        assert split("50_$") == ("50", "_$")

    def test_exponent_only_separator_not_absorbed(self) -> None:
        """Only digit separators are consulted when splitting."""
        definitions = (CurrencyDefinition("USD", "$", "xx"),)
        index = build_index(definitions, lambda _: SeparatorConventions(",", "|"))
        assert split("50|5$", index=index) == ("50", "|")
        assert split("50,5$", index=index) == ("50,5", "$")


class TestTrailingCharacters:
    """Characters after the second run are ignored."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("50$50", ("50", "$")),
            ("$50abc", ("$", "50")),
            ("50 USD 10", ("50", "USD")),
            ("USD50USD", ("USD", "50")),
            ("5_0 USD", ("5", "_")),
        ],
    )
    def test_third_run_ignored(self, value: str, expected: tuple[str, str]) -> None:
        """Only the first two runs are returned."""
        assert split(value) == expected

    def test_parts_are_prefix_of_normalized_input(self) -> None:
        """The returned runs cover a prefix of the normalized input."""
        result = split("50 USD 10")
        assert result is not None
        assert normalize_whitespace("50 USD 10").startswith("".join(result))


class TestDigitClassification:
    """Only ASCII 0-9 count as digits."""

    @pytest.mark.parametrize("char", list("0123456789"))
    def test_ascii_digits(self, char: str) -> None:
        """ASCII digits are digits."""
        assert is_ascii_digit(char)

    @pytest.mark.parametrize("char", ["٥", "５", "²", "a", "", "12"])
    def test_non_ascii_digits(self, char: str) -> None:
        """Other Unicode digits, letters and non-characters are not."""
        assert not is_ascii_digit(char)

    def test_fullwidth_amount_is_not_numeric(self) -> None:
        """Fullwidth digits never flip classification against a token."""
        assert split("５０USD") is None


class TestSplitContract:
    """Results obey the SplitResult invariants."""

    def test_concatenation_reconstructs_normalized_input(self) -> None:
        """leading + trailing equals the normalized input when nothing follows."""
        value = " 1 234,50  kr. "
        result = split(value)
        assert result is not None
        assert "".join(result) == normalize_whitespace(value)

    def test_non_string_input(self) -> None:
        """Non-string input yields None instead of raising."""
        assert split(50) is None  # type: ignore[arg-type]
        assert split(None) is None  # type: ignore[arg-type]

    def test_injected_index_separators(self) -> None:
        """A custom index changes which characters are absorbed."""
        definitions = (CurrencyDefinition("USD", "$", "xx"),)
        index = build_index(definitions, lambda _: SeparatorConventions("_", "."))
        assert split("50_000 USD", index=index) == ("50_000", "USD")
        assert split("50,000 USD", index=index) == ("50", ",")
