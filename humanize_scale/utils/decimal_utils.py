"""
Decimal arithmetic utilities for exact scale abbreviation.
Avoids the floating-point error that would break round-trip equality checks.
"""

from decimal import (
    Context,
    Decimal,
    DivisionByZero,
    InvalidOperation,
    Overflow,
    ROUND_FLOOR,
    ROUND_HALF_UP,
)
from typing import Optional

# Significant digits used for every intermediate result
WORKING_PRECISION = 17

_THOUSAND = Decimal(1000)


class DecimalUtils:
    """Utility class for precise decimal parsing, rounding and rendering."""

    @staticmethod
    def working_context() -> Context:
        """
        Create a fresh arithmetic context at working precision.

        Each call returns a new context so callers never share or mutate the
        thread-local default context.

        Returns:
            Context with 17 significant digits, half-up rounding and traps
            on invalid operations, division by zero and overflow
        """
        return Context(
            prec=WORKING_PRECISION,
            rounding=ROUND_HALF_UP,
            traps=[InvalidOperation, DivisionByZero, Overflow],
        )

    @staticmethod
    def parse_decimal(text: str) -> Decimal:
        """
        Parse a base-10 decimal string exactly.

        Args:
            text: Decimal string such as "1230000" or "1000000.1"

        Returns:
            Exact Decimal value of the string

        Raises:
            TypeError: If text is not a string
            InvalidOperation: If text is malformed or not a finite number
        """
        if not isinstance(text, str):
            raise TypeError(f"expected a decimal string, got {type(text).__name__}")

        # Decimal() is more lenient than a strict decimal literal
        if text != text.strip() or "_" in text:
            raise InvalidOperation(f"malformed decimal string {text!r}")

        value = Decimal(text)
        if not value.is_finite():
            raise InvalidOperation(f"non-finite decimal {text!r}")
        return value

    @staticmethod
    def floor(value: Decimal, context: Optional[Context] = None) -> Decimal:
        """Return the largest integral value not greater than value."""
        ctx = context or DecimalUtils.working_context()
        return value.to_integral_value(rounding=ROUND_FLOOR, context=ctx)

    @staticmethod
    def round_to_3_decimals(value: Decimal, context: Optional[Context] = None) -> Decimal:
        """
        Round a value to three fractional digits.

        The value is scaled by 1000, rounded to an integer with the context's
        rounding mode and scaled back, all at the context's precision.

        Args:
            value: The value to round
            context: Arithmetic context, defaults to the working context

        Returns:
            Value rounded to at most three fractional digits
        """
        ctx = context or DecimalUtils.working_context()

        scaled = ctx.multiply(value, _THOUSAND)
        scaled = scaled.to_integral_exact(context=ctx)
        return ctx.divide(scaled, _THOUSAND)

    @staticmethod
    def render(value: Decimal, context: Optional[Context] = None) -> str:
        """
        Render a Decimal for display.

        Values with fewer integer digits than the working precision are
        written in fixed-point notation ("1000", "1.230"). Larger values are
        normalized and keep their exponent ("1E+27") so the text stays short.
        """
        if value.adjusted() < WORKING_PRECISION:
            return format(value, "f")

        ctx = context or DecimalUtils.working_context()
        return str(value.normalize(context=ctx))

    @staticmethod
    def count_trailing_zeros(text: str) -> int:
        """
        Count trailing '0' characters of a decimal string.

        This is a property of the text, not of the number:
        "100" -> 2, "105" -> 0, "0" -> 1, "1.000" -> 3.
        """
        return len(text) - len(text.rstrip("0"))

    @staticmethod
    def strip_trailing_zeros(text: str) -> str:
        """
        Remove trailing fractional zeros and a dangling decimal point.

        Strings without a decimal point are returned unchanged, so "1000"
        stays "1000" while "1.500" becomes "1.5" and "2.000" becomes "2".
        """
        if "." not in text:
            return text

        text = text.rstrip("0")
        if text.endswith("."):
            text = text[:-1]
        return text
