"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for money parsing and
reference-data construction.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]

# C0 and C1 control characters. User input is echoed into messages, so
# none of them may reach a log line unescaped.
_CONTROL_CHARS = frozenset(chr(c) for c in (*range(0x20), *range(0x7F, 0xA0)))


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        4000-4999: Parsing errors (per-input, returned as values)
        5000-5999: Reference data errors (index construction, raised)
    """

    # Parsing errors (4000-4999)
    SPLIT_FAILED = 4001
    CURRENCY_UNKNOWN = 4002
    AMOUNT_INVALID = 4003

    # Reference data errors (5000-5999)
    REFERENCE_LOCALE_UNKNOWN = 5001
    REFERENCE_SEPARATOR_INVALID = 5002


def _escape_control(text: str) -> str:
    """Replace control characters with their \\xNN escape."""
    if not any(ch in _CONTROL_CHARS for ch in text):
        return text
    return "".join(f"\\x{ord(ch):02x}" if ch in _CONTROL_CHARS else ch for ch in text)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Immutable and hashable.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Control characters in the message and hint are escaped so that
        echoed user input cannot forge log lines.

        Example output:
            error[CURRENCY_UNKNOWN]: No known currency symbol or code in '50 ER'
              = help: Use an ISO 4217 code (USD, EUR) or a supported symbol

        Returns:
            Formatted error message
        """
        parts = [f"{self.severity}[{self.code.name}]: {_escape_control(self.message)}"]
        if self.hint:
            parts.append(f"  = help: {_escape_control(self.hint)}")
        return "\n".join(parts)
