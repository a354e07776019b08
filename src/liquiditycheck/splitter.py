"""Split a money string into its amount and currency parts.

The input is first stripped of all whitespace. The first character then
decides the classification: if it is an ASCII digit, the leading run is
the amount; otherwise the leading run is the currency designator. Each
run consumes characters until the digit/non-digit classification flips,
absorbing digit-group separators (',', '.', ...) regardless of their own
class. The scan never backtracks and stops after the second run.

Functions NEVER raise exceptions for bad input - None is returned.

Thread-safe. Pure functions of the input and an immutable CurrencyIndex.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from liquiditycheck.index import get_default_index

if TYPE_CHECKING:
    from liquiditycheck.index import CurrencyIndex

__all__ = [
    "is_ascii_digit",
    "normalize_whitespace",
    "split",
]


def is_ascii_digit(char: str) -> bool:
    """Return True for '0' through '9' only (no other Unicode digits)."""
    return len(char) == 1 and "0" <= char <= "9"


def normalize_whitespace(value: str) -> str:
    """Remove every whitespace character, internal ones included.

    Example:
        >>> normalize_whitespace(" 50 000  USD ")
        '50000USD'
    """
    return "".join(value.split())


def _take_run(text: str, start: int, *, digits: bool, index: CurrencyIndex) -> int:
    """Return the end offset of the run starting at start."""
    end = start
    while end < len(text):
        char = text[end]
        if is_ascii_digit(char) != digits and not index.is_separator(char):
            break
        end += 1
    return end


def split(value: str, *, index: CurrencyIndex | None = None) -> tuple[str, str] | None:
    """Split a money string into (leading, trailing) parts.

    Exactly one part starts digit-classified. Both parts are non-empty and
    together they form a prefix of the whitespace-normalized input; anything
    after the trailing run is ignored.

    Args:
        value: Candidate money string (e.g. "$50", "50,000 PAB")
        index: CurrencyIndex supplying digit separators (default: shared index)

    Returns:
        (leading, trailing) in input order, or None if the input is empty
        or never flips classification

    Examples:
        >>> split("$50")
        ('$', '50')
        >>> split("50 USD")
        ('50', 'USD')
        >>> split("50,000 PAB")
        ('50,000', 'PAB')
        >>> split("50") is None
        True
        >>> split("50$50")
        ('50', '$')
    """
    # Type check: value must be string (runtime defense for untyped callers)
    if not isinstance(value, str):
        return None  # type: ignore[unreachable]

    text = normalize_whitespace(value)
    if not text:
        return None

    if index is None:
        index = get_default_index()

    value_first = is_ascii_digit(text[0])
    boundary = _take_run(text, 0, digits=value_first, index=index)
    end = _take_run(text, boundary, digits=not value_first, index=index)

    if end == boundary:
        return None
    return (text[:boundary], text[boundary:end])
