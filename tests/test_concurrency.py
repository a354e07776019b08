"""Concurrent use of split() and validate().

Both operations are pure functions of their input and the shared immutable
index, so results under threads must match sequential results.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from liquiditycheck import parse_money, split, validate

_INPUTS = [
    "$50",
    "50$",
    "50 USD",
    "€ 50",
    "50.0 ¥",
    "50,000 PAB",
    "50",
    "50 ER",
    "50_$",
    "",
] * 20


class TestConcurrentValidation:
    """Thread pool results equal sequential results."""

    def test_validate_under_threads(self) -> None:
        """validate() agrees across threads."""
        expected = [validate(value) for value in _INPUTS]
        with ThreadPoolExecutor(max_workers=16) as pool:
            actual = list(pool.map(validate, _INPUTS))
        assert actual == expected

    def test_split_under_threads(self) -> None:
        """split() agrees across threads."""
        expected = [split(value) for value in _INPUTS]
        with ThreadPoolExecutor(max_workers=16) as pool:
            actual = list(pool.map(split, _INPUTS))
        assert actual == expected

    def test_parse_money_under_threads(self) -> None:
        """parse_money() results agree across threads."""
        expected = [parse_money(value)[0] for value in _INPUTS]
        with ThreadPoolExecutor(max_workers=16) as pool:
            actual = [result for result, _ in pool.map(parse_money, _INPUTS)]
        assert actual == expected
