"""Money string validation.

API: parse_money() returns tuple[MoneyParts | None, tuple[MoneyParseError, ...]].
validate() collapses that to a bool. Functions NEVER raise exceptions for
bad input - errors are returned in the tuple.

A string is a monetary amount when:
    1. split() separates it into two runs,
    2. at least one run is exactly a known currency symbol or ISO code, and
    3. at least one run parses as a number once digit-group separators
       are removed.

Check 3 only requires *some* run to be numeric, so the currency run may
fail to parse (the normal case) without rejecting the input.

Thread-safe. Pure functions of the input and an immutable CurrencyIndex.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass

from liquiditycheck.diagnostics import ErrorTemplate, MoneyParseError
from liquiditycheck.index import CurrencyIndex, get_default_index
from liquiditycheck.splitter import is_ascii_digit, split

__all__ = [
    "MoneyParts",
    "parse_money",
    "validate",
]


@dataclass(frozen=True, slots=True)
class MoneyParts:
    """A money string split into its amount and currency designator.

    Immutable, thread-safe, hashable.

    Attributes:
        amount: Numeric part exactly as written (separators kept)
        currency: Currency symbol or ISO code exactly as written
        currency_first: True if the currency preceded the amount
        iso_codes: Sorted ISO codes of every currency matching `currency`
    """

    amount: str
    currency: str
    currency_first: bool
    iso_codes: tuple[str, ...]


def _strip_separators(text: str, index: CurrencyIndex) -> str:
    return "".join(char for char in text if not index.is_separator(char))


def _is_numeric(text: str, index: CurrencyIndex) -> bool:
    try:
        float(_strip_separators(text, index))
    except ValueError:
        return False
    return True


def parse_money(
    value: str,
    *,
    index: CurrencyIndex | None = None,
) -> tuple[MoneyParts | None, tuple[MoneyParseError, ...]]:
    """Parse a money string into its amount and currency parts.

    Args:
        value: Candidate money string (e.g. "$50", "50,000 PAB", "€ 50")
        index: CurrencyIndex to validate against (default: shared index)

    Returns:
        Tuple of (result, errors):
        - result: MoneyParts, or None if the string is not a money amount
        - errors: Tuple with one MoneyParseError on failure, empty on success

    Examples:
        >>> result, errors = parse_money("50,000 PAB")
        >>> result
        MoneyParts(amount='50,000', currency='PAB', currency_first=False, iso_codes=('PAB',))
        >>> errors
        ()

        >>> result, errors = parse_money("50 ER")
        >>> result is None
        True
        >>> errors[0].diagnostic.code.name
        'CURRENCY_UNKNOWN'
    """
    # Type check: value must be string (runtime defense for untyped callers)
    if not isinstance(value, str):
        value = str(value)  # type: ignore[unreachable]
        diagnostic = ErrorTemplate.split_failed(value)
        return (None, (MoneyParseError(diagnostic, input_value=value),))

    if index is None:
        index = get_default_index()

    parts = split(value, index=index)
    if parts is None:
        diagnostic = ErrorTemplate.split_failed(value)
        return (None, (MoneyParseError(diagnostic, input_value=value),))
    leading, trailing = parts

    if not index.is_token(leading) and not index.is_token(trailing):
        diagnostic = ErrorTemplate.currency_unknown(leading, trailing, value)
        return (None, (MoneyParseError(diagnostic, input_value=value),))

    if not _is_numeric(leading, index) and not _is_numeric(trailing, index):
        diagnostic = ErrorTemplate.amount_invalid(leading, trailing, value)
        return (None, (MoneyParseError(diagnostic, input_value=value),))

    # The non-digit run is the currency unless only the digit run is a token.
    currency_first = not is_ascii_digit(leading[0])
    currency, amount = (leading, trailing) if currency_first else (trailing, leading)
    if not index.is_token(currency):
        currency, amount = amount, currency
        currency_first = not currency_first

    iso_codes = tuple(sorted({d.iso_code for d in index.definitions_for(currency)}))
    return (
        MoneyParts(
            amount=amount,
            currency=currency,
            currency_first=currency_first,
            iso_codes=iso_codes,
        ),
        (),
    )


def validate(value: str, *, index: CurrencyIndex | None = None) -> bool:
    """Return True if value is a recognizable monetary amount.

    Args:
        value: Candidate money string
        index: CurrencyIndex to validate against (default: shared index)

    Returns:
        True for strings like "$50", "50 USD", "€ 50", "50,000 PAB";
        False for "50", "50 ER", "50_$"

    Examples:
        >>> validate("$50")
        True
        >>> validate("50.0 ¥")
        True
        >>> validate("50_$")
        False
    """
    result, _ = parse_money(value, index=index)
    return result is not None
