"""
Error taxonomy for scale formatting.

Malformed inputs and arithmetic failures are raised; every other reason not
to abbreviate a number is handled by the caller's fallback instead.
"""

from typing import Optional


class ScaleFormatError(Exception):
    """Base class for all scale formatting failures."""

    def __init__(self, value: str, cause: Optional[BaseException] = None):
        self.value = value
        self.cause = cause
        super().__init__(self._describe())

    def _describe(self) -> str:
        return f"scale format error for {self.value!r}: {self.cause}"


class InvalidNumberError(ScaleFormatError):
    """The number to format is not a valid decimal string."""

    def _describe(self) -> str:
        return f"invalid number {self.value!r}: {self.cause}"


class InvalidMinValueError(ScaleFormatError):
    """The minimum threshold is not a valid decimal string."""

    def _describe(self) -> str:
        return f"invalid min value {self.value!r}: {self.cause}"


class DivisionError(ScaleFormatError):
    """Dividing the number by a scale divisor failed."""

    def __init__(self, number: str, scale_name: str, cause: Optional[BaseException] = None):
        self.number = number
        self.scale_name = scale_name
        super().__init__(number, cause)

    def _describe(self) -> str:
        return (
            f"division error for number={self.number!r} "
            f"scale={self.scale_name!r}: {self.cause}"
        )


class RoundingError(ScaleFormatError):
    """Rounding a scaled quotient failed."""

    def __init__(
        self,
        value: str,
        cause: Optional[BaseException] = None,
        scale_name: Optional[str] = None,
    ):
        self.scale_name = scale_name
        super().__init__(value, cause)

    def _describe(self) -> str:
        return f"rounding error for {self.value!r}: {self.cause}"


class FloorError(RoundingError):
    """Flooring a quotient for the thousand scale failed."""

    def _describe(self) -> str:
        return f"floor error for {self.value!r}: {self.cause}"
