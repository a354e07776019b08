"""Shared constants for liquiditycheck.

Centralized configuration constants used by the reference table, the
locale resolver, and the currency index. Placing constants here avoids
circular imports and provides a single source of truth.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Reference data
    "ISO_CURRENCY_CODE_LENGTH",
    # Locale resolution
    "DEFAULT_NUMBERING_SYSTEM",
    "MAX_LOCALE_CACHE_SIZE",
]

# ============================================================================
# REFERENCE DATA
# ============================================================================

# ISO 4217 alphabetic codes are exactly 3 uppercase ASCII letters.
ISO_CURRENCY_CODE_LENGTH: int = 3

# ============================================================================
# LOCALE RESOLUTION
# ============================================================================

# Numbering system used when asking CLDR for separator symbols.
# Only ASCII digits are recognized, so only Latin-system separators apply.
DEFAULT_NUMBERING_SYSTEM: str = "latn"

# Maximum cached Babel Locale instances.
MAX_LOCALE_CACHE_SIZE: int = 128
