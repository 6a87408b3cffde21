# Models package

from .scale import Scale, WESTERN_SCALES, INDIAN_SCALES, SCALE_PRESETS

__all__ = [
    'Scale',
    'WESTERN_SCALES',
    'INDIAN_SCALES',
    'SCALE_PRESETS',
]
