#!/usr/bin/env python3
"""Verify the currency reference table against Babel CLDR data.

Compares every CurrencyDefinition in liquiditycheck.currencies with
Babel's view of the same currency and locale. Reports structural errors
and informational differences.

Symbols are not expected to match CLDR exactly: the table holds the
glyph most commonly written next to an amount, while CLDR symbols are
locale-specific ("US$" in en_AU, "€" vs "EUR"). Symbol differences are
warnings, not failures.

Checks:
    1. Structural: ISO code unknown to Babel.
    2. Structural: Locale cannot be resolved to separator conventions.
    3. Symbol differences: Table symbol differs from CLDR symbol in the
       definition's locale.
    4. Coverage gaps: Babel currencies with no table entry. Shown only
       with --verbose.

Exit codes:
    0: All checks passed (symbol differences are warnings, not failures).
    1: Structural errors (unknown codes, unresolvable locales).

Usage:
    verify_currencies.py [--verbose]

Python 3.13+. Requires Babel.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from babel.core import UnknownLocaleError
from babel.numbers import get_currency_symbol, list_currencies

from liquiditycheck.currencies import CURRENCIES, CurrencyDefinition
from liquiditycheck.locale_utils import resolve_separators


def _check_unrecognized(
    definitions: Sequence[CurrencyDefinition],
    babel_currencies: set[str],
) -> list[str]:
    """Check table currencies not recognized by Babel."""
    return [
        f"  {d.iso_code}: In reference table but not recognized by Babel"
        for d in definitions
        if d.iso_code not in babel_currencies
    ]


def _check_locales(definitions: Sequence[CurrencyDefinition]) -> list[str]:
    """Check that every referenced locale resolves to separators."""
    result: list[str] = []
    for locale_code in sorted({d.locale for d in definitions}):
        try:
            resolve_separators(locale_code)
        except (UnknownLocaleError, ValueError) as e:
            result.append(f"  {locale_code}: {e}")
    return result


def _check_symbols(definitions: Sequence[CurrencyDefinition]) -> list[str]:
    """Compare table symbols against CLDR symbols in each locale."""
    result: list[str] = []
    for d in definitions:
        try:
            cldr_symbol = get_currency_symbol(d.iso_code, locale=d.locale)
        except (UnknownLocaleError, ValueError):
            continue  # reported by _check_locales
        if cldr_symbol != d.symbol:
            result.append(f"  {d.iso_code}: table={d.symbol!r}, CLDR {d.locale}={cldr_symbol!r}")
    return result


def _check_coverage_gaps(
    definitions: Sequence[CurrencyDefinition],
    babel_currencies: set[str],
) -> list[str]:
    """List Babel currencies the table does not cover."""
    covered = {d.iso_code for d in definitions}
    return [f"  {code}" for code in sorted(babel_currencies - covered)]


def _print_section(header: str, explanation: str, lines: list[str]) -> None:
    """Print a report section if non-empty."""
    if not lines:
        return
    print(f"{header} ({len(lines)}):")
    print(f"  ({explanation})")
    for line in lines:
        print(line)
    print()


def _print_report(
    *,
    errors: list[str],
    symbol_diffs: list[str],
    gaps: list[str],
    entry_count: int,
    babel_count: int,
    verbose: bool,
) -> None:
    """Print formatted report."""
    print("Currency Reference Table Verification")
    print("=" * 50)
    print(f"Table entries:    {entry_count}")
    print(f"Babel currencies: {babel_count}")
    print()

    _print_section(
        "[ERROR] Structural errors",
        "Unknown ISO code or unresolvable locale",
        errors,
    )
    _print_section(
        "[WARN] Symbol differences",
        "Table symbol is authoritative; CLDR symbols are locale-specific",
        symbol_diffs,
    )

    if gaps:
        if verbose:
            _print_section(
                "[INFO] Babel currencies without a table entry",
                "Includes historical and fund codes",
                gaps,
            )
        else:
            print(f"[INFO] {len(gaps)} Babel currency(ies) not in table. Use --verbose to list.")
            print()


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Verify the currency reference table against Babel CLDR data.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="List Babel currencies that have no table entry.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run reference table verification checks."""
    args = _parse_args(argv)

    babel_currencies = set(list_currencies())

    errors = _check_unrecognized(CURRENCIES, babel_currencies) + _check_locales(CURRENCIES)
    symbol_diffs = _check_symbols(CURRENCIES)
    gaps = _check_coverage_gaps(CURRENCIES, babel_currencies)

    _print_report(
        errors=errors,
        symbol_diffs=symbol_diffs,
        gaps=gaps,
        entry_count=len(CURRENCIES),
        babel_count=len(babel_currencies),
        verbose=args.verbose,
    )

    if errors:
        print(f"[FAIL] {len(errors)} structural error(s) found.")
        print("[EXIT-CODE] 1")
        return 1

    print(f"[PASS] {len(symbol_diffs)} symbol difference(s), {len(gaps)} gap(s).")
    print("[EXIT-CODE] 0")
    return 0


if __name__ == "__main__":
    sys.exit(main())
