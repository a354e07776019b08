"""liquiditycheck exception hierarchy with structured diagnostics.

All exceptions optionally store a Diagnostic for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "LiquidityError",
    "MoneyParseError",
    "ReferenceDataError",
]


class LiquidityError(Exception):
    """Base exception for all liquiditycheck errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LiquidityError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class MoneyParseError(LiquidityError):
    """A string was not recognized as a monetary amount.

    Returned inside the error tuple of parse_money(), never raised.

    Attributes:
        input_value: The string that failed to parse

    Example:
        >>> result, errors = parse_money("50 ER")
        >>> for error in errors:
        ...     print(error.diagnostic.code.name, error.input_value)
        CURRENCY_UNKNOWN 50 ER
    """

    def __init__(self, message: str | Diagnostic, *, input_value: str = "") -> None:
        super().__init__(message)
        self.input_value = input_value


class ReferenceDataError(LiquidityError):
    """The currency reference data could not be turned into an index.

    Raised by build_index() when a locale cannot be resolved to separator
    conventions. This indicates a defect in the reference table or the
    injected resolver, not bad user input, so it is never recovered from
    per call.

    Attributes:
        locale_code: The locale that failed to resolve
    """

    def __init__(self, message: str | Diagnostic, *, locale_code: str = "") -> None:
        super().__init__(message)
        self.locale_code = locale_code
