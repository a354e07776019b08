"""liquiditycheck - Recognize and split monetary amount strings.

Decides whether a string such as "$50", "50 USD" or "50,000 PAB" is a
numeric amount paired with a known currency symbol or ISO 4217 code, and
splits it into those two parts. Separator characters are derived from
Unicode CLDR locale data via Babel.

Public API:
    split - Split a money string into (leading, trailing) parts
    validate - True if a string is a recognizable monetary amount
    parse_money - Split and validate, returning (MoneyParts | None, errors)
    is_valid_money - TypeIs guard for parse_money() results
    build_index - Build a CurrencyIndex from custom definitions/resolver
    get_default_index - Shared index over the full reference table
    clear_locale_cache - Drop cached Babel Locale objects

Exceptions:
    LiquidityError - Base exception class
    MoneyParseError - Returned (never raised) by parse_money()
    ReferenceDataError - Reference data cannot be indexed

Submodules:
    liquiditycheck.currencies - Currency reference table
    liquiditycheck.locale_utils - Locale normalization and separator resolver
    liquiditycheck.diagnostics - Error codes, templates and exceptions
"""

from .currencies import CURRENCIES, CurrencyDefinition, get_currency, list_currencies
from .diagnostics import LiquidityError, MoneyParseError, ReferenceDataError
from .guards import is_valid_money
from .index import CurrencyIndex, CurrencyIndexProvider, build_index, get_default_index
from .locale_utils import (
    SeparatorConventions,
    SeparatorResolver,
    clear_locale_cache,
    resolve_separators,
)
from .splitter import split
from .validator import MoneyParts, parse_money, validate

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("liquiditycheck")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CURRENCIES",
    "CurrencyDefinition",
    "CurrencyIndex",
    "CurrencyIndexProvider",
    "LiquidityError",
    "MoneyParseError",
    "MoneyParts",
    "ReferenceDataError",
    "SeparatorConventions",
    "SeparatorResolver",
    "__version__",
    "build_index",
    "clear_locale_cache",
    "get_currency",
    "get_default_index",
    "is_valid_money",
    "list_currencies",
    "parse_money",
    "resolve_separators",
    "split",
    "validate",
]
