"""Diagnostic system for liquiditycheck errors.

Provides structured error diagnostics with codes, hints, and templates.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import LiquidityError, MoneyParseError, ReferenceDataError
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "LiquidityError",
    "MoneyParseError",
    "ReferenceDataError",
]
