"""Type guard functions for parse result type narrowing.

parse_money() returns tuple[MoneyParts | None, tuple[MoneyParseError, ...]].
The guard checks the result component to narrow types for mypy.

Python 3.13+ with TypeIs support (PEP 742).

Example:
    >>> from liquiditycheck import parse_money
    >>> from liquiditycheck.guards import is_valid_money
    >>> result, errors = parse_money("50 USD")
    >>> if is_valid_money(result):
    ...     # mypy knows result is MoneyParts
    ...     code = result.iso_codes[0]
"""

from typing import TypeIs

from liquiditycheck.validator import MoneyParts

__all__ = ["is_valid_money"]


def is_valid_money(value: MoneyParts | None) -> TypeIs[MoneyParts]:
    """Type guard: Check if parse_money() produced a result.

    Safe to call directly on the parse_money() result without checking
    errors first.

    Args:
        value: Result component of the parse_money() tuple (None on failure)

    Returns:
        True if value is MoneyParts with a non-empty amount and currency
    """
    return isinstance(value, MoneyParts) and bool(value.amount) and bool(value.currency)
