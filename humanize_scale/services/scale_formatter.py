"""
Scale formatting service for abbreviating large decimal quantities.

Turns round numbers such as "1230000" into "1.23 million" using the first
applicable scale of a caller-supplied list, and only when the abbreviation
converts back to the original number exactly.

Features:
- Exact decimal arithmetic at a fixed working precision
- Caller-ordered scale priority (the list is never re-sorted)
- Caller-supplied fallback for numbers that cannot be abbreviated exactly
- Stateless, so a single instance can be shared between threads
"""

import logging
from decimal import Context, Decimal, DecimalException
from typing import Callable, Iterable, Tuple, Union

from humanize_scale.core.exceptions import (
    DivisionError,
    FloorError,
    InvalidMinValueError,
    InvalidNumberError,
    RoundingError,
)
from humanize_scale.models.scale import Scale
from humanize_scale.utils.decimal_utils import DecimalUtils

logger = logging.getLogger(__name__)

Fallback = Callable[[str], str]
ScaleLike = Union[Scale, Tuple[str, str]]

# Numbers with this many trailing zeros or fewer are never abbreviated
MIN_TRAILING_ZEROS = 2

# Quotients for this scale must be whole numbers
THOUSAND_SCALE_NAME = "thousand"


class ScaleFormatter:
    """
    Abbreviates decimal strings with magnitude scales.

    The formatter keeps no state between calls; every call builds its own
    decimal context and invokes the fallback at most once.
    """

    def format(
        self,
        number: str,
        min_value: str,
        scales: Iterable[ScaleLike],
        fallback: Fallback,
    ) -> str:
        """
        Format a number with the first scale that represents it exactly.

        Args:
            number: Decimal string to format (e.g. '1230000')
            min_value: Decimal string; smaller numbers are never abbreviated
            scales: Ordered (value, name) scales, highest priority first
            fallback: Called with the original number string when no
                abbreviation applies

        Returns:
            '<quotient> <name>' (e.g. '1.23 million') or fallback(number)

        Raises:
            InvalidNumberError: If number is not a valid decimal string
            InvalidMinValueError: If min_value is not a valid decimal string
            DivisionError: If dividing by a scale value fails
            RoundingError: If rounding the quotient fails
        """
        if not isinstance(number, str):
            raise InvalidNumberError(
                repr(number),
                TypeError(f"expected a decimal string, got {type(number).__name__}"),
            )

        if DecimalUtils.count_trailing_zeros(number) <= MIN_TRAILING_ZEROS:
            return fallback(number)

        try:
            value = DecimalUtils.parse_decimal(number)
        except (DecimalException, TypeError, ValueError) as e:
            raise InvalidNumberError(number, e) from e

        try:
            minimum = DecimalUtils.parse_decimal(min_value)
        except (DecimalException, TypeError, ValueError) as e:
            raise InvalidMinValueError(min_value, e) from e

        if value < minimum:
            logger.debug(f"{number} is below minimum {min_value}, using fallback")
            return fallback(number)

        ctx = DecimalUtils.working_context()

        for item in scales:
            try:
                scale = Scale.of(item)
                divisor = DecimalUtils.parse_decimal(scale.value)
            except (DecimalException, TypeError, ValueError):
                logger.debug(f"Skipping scale {item!r} with invalid value")
                continue

            if value < divisor:
                continue

            return self._format_with_scale(number, value, divisor, scale.name, ctx, fallback)

        logger.debug(f"No scale applies to {number}, using fallback")
        return fallback(number)

    def _format_with_scale(
        self,
        number: str,
        value: Decimal,
        divisor: Decimal,
        name: str,
        ctx: Context,
        fallback: Fallback,
    ) -> str:
        """Abbreviate value with a single scale, or fall back if it is not exact."""
        try:
            ratio = ctx.divide(value, divisor)
        except DecimalException as e:
            raise DivisionError(number, name, e) from e

        # Fractional thousands ("15.1 thousand") are not shown
        if name == THOUSAND_SCALE_NAME:
            try:
                whole = DecimalUtils.floor(ratio, ctx)
            except DecimalException as e:
                raise FloorError(str(ratio), e, scale_name=name) from e
            if ratio != whole:
                logger.debug(f"{number} is not a whole number of thousands, using fallback")
                return fallback(number)

        try:
            rounded = DecimalUtils.round_to_3_decimals(ratio, ctx)
            reconstructed = ctx.multiply(rounded, divisor)
        except DecimalException as e:
            raise RoundingError(str(ratio), e, scale_name=name) from e

        if reconstructed != value:
            logger.debug(f"{number} does not round-trip through scale {name!r}, using fallback")
            return fallback(number)

        quotient = DecimalUtils.strip_trailing_zeros(DecimalUtils.render(rounded, ctx))
        return f"{quotient} {name}"


# Global scale formatter instance
scale_formatter = ScaleFormatter()


def format_scaled(
    number: str,
    min_value: str,
    scales: Iterable[ScaleLike],
    fallback: Fallback,
) -> str:
    """Format number with the shared ScaleFormatter instance."""
    return scale_formatter.format(number, min_value, scales, fallback)
