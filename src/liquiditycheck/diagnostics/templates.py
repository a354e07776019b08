"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    @staticmethod
    def split_failed(value: str) -> Diagnostic:
        """Input could not be split into an amount and a currency part.

        Args:
            value: The input string that failed to split

        Returns:
            Diagnostic for SPLIT_FAILED
        """
        msg = f"Cannot split '{value}' into an amount and a currency"
        return Diagnostic(
            code=DiagnosticCode.SPLIT_FAILED,
            message=msg,
            hint="Write one number next to one currency symbol or code, e.g. '$50' or '50 USD'",
        )

    @staticmethod
    def currency_unknown(leading: str, trailing: str, value: str) -> Diagnostic:
        """Neither part of the split input is a known currency token.

        Args:
            leading: First part of the split
            trailing: Second part of the split
            value: The full input string

        Returns:
            Diagnostic for CURRENCY_UNKNOWN
        """
        msg = (
            f"No known currency symbol or code in '{value}' "
            f"(parts '{leading}' and '{trailing}')"
        )
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_UNKNOWN,
            message=msg,
            hint="Use an ISO 4217 code (USD, EUR) or a supported symbol ($, €)",
        )

    @staticmethod
    def amount_invalid(leading: str, trailing: str, value: str) -> Diagnostic:
        """Neither part of the split input parses as a number.

        Args:
            leading: First part of the split
            trailing: Second part of the split
            value: The full input string

        Returns:
            Diagnostic for AMOUNT_INVALID
        """
        msg = f"No numeric amount in '{value}' (parts '{leading}' and '{trailing}')"
        return Diagnostic(
            code=DiagnosticCode.AMOUNT_INVALID,
            message=msg,
            hint="Use ASCII digits with at most one decimal mark",
        )

    @staticmethod
    def reference_locale_unknown(locale_code: str, iso_code: str, reason: str) -> Diagnostic:
        """A reference-table locale could not be resolved.

        Args:
            locale_code: The unresolvable locale identifier
            iso_code: The currency that references the locale
            reason: Underlying resolver error message

        Returns:
            Diagnostic for REFERENCE_LOCALE_UNKNOWN
        """
        msg = f"Cannot resolve locale '{locale_code}' for currency {iso_code}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.REFERENCE_LOCALE_UNKNOWN,
            message=msg,
            hint="Use a POSIX locale identifier known to CLDR (e.g. 'en_US', 'de_DE')",
        )

    @staticmethod
    def reference_separator_invalid(locale_code: str, kind: str, separator: object) -> Diagnostic:
        """A resolver returned something other than a single character.

        Args:
            locale_code: The locale being resolved
            kind: Which separator was invalid ("digit" or "exponent")
            separator: The offending value

        Returns:
            Diagnostic for REFERENCE_SEPARATOR_INVALID
        """
        msg = (
            f"Resolver returned {kind} separator {separator!r} for locale "
            f"'{locale_code}'; expected a single character"
        )
        return Diagnostic(
            code=DiagnosticCode.REFERENCE_SEPARATOR_INVALID,
            message=msg,
            hint="Separator resolvers must return one character per separator",
        )
