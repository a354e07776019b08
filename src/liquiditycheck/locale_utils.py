"""Locale utilities and the default separator resolver.

Centralizes locale format normalization and the lookup of CLDR number
symbols. The currency index never talks to Babel directly; it consumes a
SeparatorResolver, and resolve_separators() is the Babel-backed default.
Alternate locale data sources plug in by passing any callable with the
same signature to build_index().

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from typing import Protocol

from babel import Locale
from babel.numbers import get_decimal_symbol, get_group_symbol

from liquiditycheck.constants import DEFAULT_NUMBERING_SYSTEM, MAX_LOCALE_CACHE_SIZE

__all__ = [
    "SeparatorConventions",
    "SeparatorResolver",
    "clear_locale_cache",
    "get_babel_locale",
    "normalize_locale",
    "resolve_separators",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SeparatorConventions:
    """Number separators of one locale.

    Immutable, thread-safe, hashable.

    Attributes:
        digit_separator: Digit-group separator (e.g. ',' in '50,000' for en_US)
        exponent_separator: Decimal mark (e.g. '.' in '50.00' for en_US)
    """

    digit_separator: str
    exponent_separator: str


class SeparatorResolver(Protocol):
    """Maps a locale identifier to its separator conventions.

    Implementations raise babel.core.UnknownLocaleError, LookupError, or
    ValueError for locales they cannot resolve.
    """

    def __call__(self, locale_code: str, /) -> SeparatorConventions:
        """Resolve separator conventions for a locale."""
        ...


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    return Locale.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Clear the cached Babel Locale objects."""
    get_babel_locale.cache_clear()


def resolve_separators(locale_code: str) -> SeparatorConventions:
    """Resolve a locale's digit-group and exponent separators from CLDR.

    Symbols are taken from the Latin numbering system so that they are the
    ones that appear next to ASCII digits, even for locales whose default
    numbering system is not Latin.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        SeparatorConventions for the locale

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> resolve_separators("en_US")
        SeparatorConventions(digit_separator=',', exponent_separator='.')
        >>> resolve_separators("de-DE")
        SeparatorConventions(digit_separator='.', exponent_separator=',')
    """
    locale = get_babel_locale(locale_code)
    conventions = SeparatorConventions(
        digit_separator=get_group_symbol(locale, numbering_system=DEFAULT_NUMBERING_SYSTEM),
        exponent_separator=get_decimal_symbol(locale, numbering_system=DEFAULT_NUMBERING_SYSTEM),
    )
    logger.debug(
        "Resolved separators for %s: digit=%r exponent=%r",
        locale_code,
        conventions.digit_separator,
        conventions.exponent_separator,
    )
    return conventions
