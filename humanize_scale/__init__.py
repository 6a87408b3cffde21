# humanize_scale package

from .core.exceptions import (
    ScaleFormatError,
    InvalidNumberError,
    InvalidMinValueError,
    DivisionError,
    RoundingError,
    FloorError,
)
from .models.scale import Scale, WESTERN_SCALES, INDIAN_SCALES, SCALE_PRESETS
from .services.scale_formatter import ScaleFormatter, scale_formatter, format_scaled
from .utils.fallbacks import group_thousands, identity

__version__ = "0.0.1"

__all__ = [
    # Formatter
    'ScaleFormatter',
    'scale_formatter',
    'format_scaled',
    # Scales
    'Scale',
    'WESTERN_SCALES',
    'INDIAN_SCALES',
    'SCALE_PRESETS',
    # Fallbacks
    'group_thousands',
    'identity',
    # Errors
    'ScaleFormatError',
    'InvalidNumberError',
    'InvalidMinValueError',
    'DivisionError',
    'RoundingError',
    'FloorError',
]
