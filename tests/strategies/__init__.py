"""Hypothesis strategies for liquiditycheck property-based testing.

- money: amounts, currency tokens, and assembled money strings

Usage:
    from tests.strategies.money import money_strings, unknown_tokens
"""

from .money import (
    amounts,
    currency_tokens,
    digit_free_text,
    money_strings,
    unknown_tokens,
    whitespace,
)

__all__ = [
    "amounts",
    "currency_tokens",
    "digit_free_text",
    "money_strings",
    "unknown_tokens",
    "whitespace",
]
