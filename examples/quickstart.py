"""Quickstart example for liquiditycheck.

This example demonstrates recognizing and splitting money strings.

Note: Examples print the first error only. parse_money() returns at most
one error per input.
"""

from liquiditycheck import (
    build_index,
    get_currency,
    is_valid_money,
    parse_money,
    split,
    validate,
)
from liquiditycheck.currencies import CurrencyDefinition
from liquiditycheck.locale_utils import SeparatorConventions

# Example 1: Boolean check
print("=" * 50)
print("Example 1: validate()")
print("=" * 50)

for text in ("$50", "50 USD", "€ 50", "50,000 PAB", "50", "50 ER", "50_$"):
    print(f"{text!r:>14} -> {validate(text)}")
# Output:
#          '$50' -> True
#       '50 USD' -> True
#  ...
#         '50_$' -> False

# Example 2: Splitting
print("\n" + "=" * 50)
print("Example 2: split()")
print("=" * 50)

print(split("$ 50"))
# Output: ('$', '50')
print(split("1.234,56 €"))
# Output: ('1.234,56', '€')
print(split("50 USD 10"))
# Output: ('50', 'USD')

# Example 3: Structured parse with diagnostics
print("\n" + "=" * 50)
print("Example 3: parse_money()")
print("=" * 50)

for text in ("50.0 ¥", "50 ER"):
    result, errors = parse_money(text)
    if is_valid_money(result):
        print(f"{text!r}: amount={result.amount} currency={result.currency}")
        print(f"  candidates: {', '.join(result.iso_codes)}")
    else:
        print(errors[0].diagnostic.format_error() if errors[0].diagnostic else errors[0])
# Output:
# '50.0 ¥': amount=50.0 currency=¥
#   candidates: CNY, JPY
# error[CURRENCY_UNKNOWN]: No known currency symbol or code in '50 ER' ...

# Example 4: Reference table lookup
print("\n" + "=" * 50)
print("Example 4: Reference table")
print("=" * 50)

eur = get_currency("EUR")
if eur is not None:
    print(f"EUR: symbol={eur.symbol} locale={eur.locale}")
# Output: EUR: symbol=€ locale=de_DE

# Example 5: Custom index
print("\n" + "=" * 50)
print("Example 5: Custom currency list and separators")
print("=" * 50)


def swiss_style(locale_code: str, /) -> SeparatorConventions:
    """Resolver that ignores the locale and uses Swiss separators."""
    return SeparatorConventions(digit_separator="'", exponent_separator=".")


index = build_index((CurrencyDefinition("CHF", "Fr.", "de_CH"),), swiss_style)
print(validate("Fr. 1'000.50", index=index))
# Output: True
print(validate("$50", index=index))
# Output: False

print("\n" + "=" * 50)
print("[SUCCESS] All examples completed successfully!")
print("=" * 50)
