from dataclasses import dataclass
from typing import Dict, Tuple, Union


@dataclass(frozen=True)
class Scale:
    """A magnitude divisor and the label shown after the scaled quotient."""
    value: str
    name: str

    def __post_init__(self):
        """Validate the scale field types."""
        if not isinstance(self.value, str):
            raise TypeError("Scale value must be a decimal string")
        if not isinstance(self.name, str):
            raise TypeError("Scale name must be a string")

    @classmethod
    def of(cls, item: Union["Scale", Tuple[str, str]]) -> "Scale":
        """Return item as a Scale, accepting plain (value, name) pairs."""
        if isinstance(item, cls):
            return item
        value, name = item
        return cls(value=value, name=name)


WESTERN_SCALES: Tuple[Scale, ...] = (
    Scale("1000000000", "billion"),
    Scale("1000000", "million"),
    Scale("1000", "thousand"),
)

# Indian numbering adds crore (10^7) and lakh (10^5)
INDIAN_SCALES: Tuple[Scale, ...] = (
    Scale("1000000000", "billion"),
    Scale("10000000", "crore"),
    Scale("1000000", "million"),
    Scale("100000", "lakh"),
    Scale("1000", "thousand"),
)

SCALE_PRESETS: Dict[str, Tuple[Scale, ...]] = {
    "western": WESTERN_SCALES,
    "indian": INDIAN_SCALES,
}
