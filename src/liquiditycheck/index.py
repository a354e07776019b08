"""Separator and currency-token index.

Derives the read-only lookup structures used by the splitter and the
validator from the currency reference table:

- digit_separators: every locale's digit-group separator
- exponent_separators: every locale's decimal mark
- tokens: every currency symbol and ISO code

A CurrencyIndex is an immutable value. Callers that want their own
currency list or locale data build one with build_index() and pass it as
the index= keyword of split(), validate(), and parse_money(). Everyone
else shares the process-wide default returned by get_default_index(),
which is built lazily, exactly once.

Thread-safe. Immutable after construction.

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from babel.core import UnknownLocaleError

from liquiditycheck.currencies import CURRENCIES, CurrencyDefinition
from liquiditycheck.diagnostics import ErrorTemplate, ReferenceDataError
from liquiditycheck.locale_utils import (
    SeparatorConventions,
    SeparatorResolver,
    resolve_separators,
)

__all__ = [
    "CurrencyIndex",
    "CurrencyIndexProvider",
    "build_index",
    "get_default_index",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, eq=False)
class CurrencyIndex:
    """Read-only separator and token sets derived from currency definitions.

    The exponent separator set is carried for numeric parsing but is not
    consulted when splitting; only digit separators are absorbed into runs.

    Attributes:
        digit_separators: Digit-group separator characters across all locales
        exponent_separators: Decimal mark characters across all locales
        tokens: Every currency symbol and ISO code (exact, case-sensitive)
    """

    digit_separators: frozenset[str]
    exponent_separators: frozenset[str]
    tokens: frozenset[str]
    _by_token: Mapping[str, tuple[CurrencyDefinition, ...]]

    def is_separator(self, char: str) -> bool:
        """Return True if char is a digit-group separator of any locale."""
        return char in self.digit_separators

    def is_token(self, text: str) -> bool:
        """Return True if text is exactly a known currency symbol or ISO code."""
        return text in self.tokens

    def definitions_for(self, token: str) -> tuple[CurrencyDefinition, ...]:
        """Return every currency whose symbol or ISO code equals token.

        Args:
            token: Candidate currency symbol or ISO code

        Returns:
            Matching definitions in table order; empty if token is unknown

        Example:
            >>> [d.iso_code for d in get_default_index().definitions_for("¥")]
            ['CNY', 'JPY']
        """
        return self._by_token.get(token, ())


def _check_separator(locale_code: str, kind: str, separator: object) -> str:
    if not isinstance(separator, str) or len(separator) != 1:
        diagnostic = ErrorTemplate.reference_separator_invalid(locale_code, kind, separator)
        raise ReferenceDataError(diagnostic, locale_code=locale_code)
    return separator


def build_index(
    definitions: Iterable[CurrencyDefinition] = CURRENCIES,
    resolver: SeparatorResolver = resolve_separators,
) -> CurrencyIndex:
    """Build a CurrencyIndex from currency definitions.

    Each distinct locale is resolved once.

    Args:
        definitions: Currency definitions to index (default: full table)
        resolver: Maps a locale identifier to its SeparatorConventions

    Returns:
        Immutable CurrencyIndex

    Raises:
        ReferenceDataError: If a locale cannot be resolved, or the resolver
            returns anything but single-character separators

    Example:
        >>> index = build_index()
        >>> index.is_separator(",")
        True
        >>> index.is_token("PAB")
        True
    """
    digit_separators: set[str] = set()
    exponent_separators: set[str] = set()
    by_token: dict[str, list[CurrencyDefinition]] = {}
    resolved: dict[str, SeparatorConventions] = {}

    for definition in definitions:
        conventions = resolved.get(definition.locale)
        if conventions is None:
            try:
                conventions = resolver(definition.locale)
            except (UnknownLocaleError, LookupError, ValueError) as e:
                diagnostic = ErrorTemplate.reference_locale_unknown(
                    definition.locale, definition.iso_code, str(e)
                )
                logger.error("Currency index build failed: %s", diagnostic.message)
                raise ReferenceDataError(diagnostic, locale_code=definition.locale) from e
            resolved[definition.locale] = conventions

        digit_separators.add(
            _check_separator(definition.locale, "digit", conventions.digit_separator)
        )
        exponent_separators.add(
            _check_separator(definition.locale, "exponent", conventions.exponent_separator)
        )

        for token in (definition.symbol, definition.iso_code):
            matches = by_token.setdefault(token, [])
            if definition not in matches:
                matches.append(definition)

    return CurrencyIndex(
        digit_separators=frozenset(digit_separators),
        exponent_separators=frozenset(exponent_separators),
        tokens=frozenset(by_token),
        _by_token=MappingProxyType({k: tuple(v) for k, v in by_token.items()}),
    )


class CurrencyIndexProvider:
    """Lazily builds one CurrencyIndex and hands out the same instance.

    Uses double-check locking: concurrent first callers block on the lock,
    exactly one of them builds, and nobody observes a partial index.
    A failed build leaves the provider unloaded and re-raises.

    Attributes:
        _definitions: Currency definitions to index
        _resolver: Locale separator resolver
        _index: Built index, or None before the first get()
        _lock: Threading lock for thread-safe initialization
    """

    __slots__ = ("_definitions", "_index", "_lock", "_resolver")

    def __init__(
        self,
        definitions: Iterable[CurrencyDefinition] = CURRENCIES,
        resolver: SeparatorResolver = resolve_separators,
    ) -> None:
        self._definitions: tuple[CurrencyDefinition, ...] = tuple(definitions)
        self._resolver: SeparatorResolver = resolver
        self._index: CurrencyIndex | None = None
        self._lock: threading.Lock = threading.Lock()

    @property
    def is_loaded(self) -> bool:
        """True once the index has been built."""
        return self._index is not None

    def get(self) -> CurrencyIndex:
        """Return the index, building it on first call (thread-safe, idempotent).

        Raises:
            ReferenceDataError: If the reference data cannot be indexed
        """
        index = self._index
        if index is not None:
            return index

        with self._lock:
            # Double-check after acquiring lock
            if self._index is None:
                logger.debug(
                    "Building currency index from %d definitions", len(self._definitions)
                )
                built = build_index(self._definitions, self._resolver)
                logger.info(
                    "Currency index built: %d tokens, %d digit separators, "
                    "%d exponent separators",
                    len(built.tokens),
                    len(built.digit_separators),
                    len(built.exponent_separators),
                )
                self._index = built
            return self._index


# Module-level singleton backing get_default_index()
_provider = CurrencyIndexProvider()


def get_default_index() -> CurrencyIndex:
    """Return the shared index built from the full reference table.

    Thread-safe. Built on first call; later calls return the same object.

    Raises:
        ReferenceDataError: If the reference table cannot be indexed
    """
    return _provider.get()
