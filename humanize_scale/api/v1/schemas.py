"""
Pydantic schemas for API request/response models.

This module defines the data models used by the humanize endpoints.
"""

from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict


def to_camel(string: str) -> str:
    """Converts snake_case to camelCase."""
    return "".join(
        word.capitalize() if i > 0 else word for i, word in enumerate(string.split("_"))
    )


class ScaleSchema(BaseModel):
    """
    Schema for a single magnitude scale.

    The value is kept as a string so the divisor is never rounded
    through a binary float.
    """

    value: str = Field(..., description="Scale divisor as a decimal string (e.g. '1000000')")
    name: str = Field(..., description="Label shown after the quotient (e.g. 'million')")

    model_config = ConfigDict(
        json_schema_extra={"example": {"value": "1000000", "name": "million"}}
    )


class HumanizeRequest(BaseModel):
    """
    Schema for a humanize request with optional custom scales.

    Custom scales take precedence over the named preset.
    """

    number: str = Field(..., description="Number to format as a decimal string")
    min_value: Optional[str] = Field(
        None, description="Numbers below this value are never abbreviated"
    )
    preset: Optional[str] = Field(
        None, description="Named scale preset ('western' or 'indian')"
    )
    scales: Optional[List[ScaleSchema]] = Field(
        None, description="Ordered custom scales, highest priority first"
    )

    model_config = ConfigDict(
        populate_by_name=True,
        alias_generator=to_camel,
        json_schema_extra={
            "example": {
                "number": "15000000",
                "minValue": "10000",
                "scales": [
                    {"value": "10000000", "name": "crore"},
                    {"value": "100000", "name": "lakh"},
                ],
            }
        },
    )


class HumanizeResponse(BaseModel):
    """Schema for the result of formatting a number."""

    number: str = Field(..., description="Original number string")
    min_value: str = Field(..., description="Minimum value that was applied")
    formatted: str = Field(..., description="Abbreviated or fallback-formatted number")
    abbreviated: bool = Field(
        ..., description="Whether a scale abbreviation was used"
    )

    model_config = ConfigDict(
        populate_by_name=True,
        alias_generator=to_camel,
        json_schema_extra={
            "example": {
                "number": "1230000",
                "minValue": "10000",
                "formatted": "1.23 million",
                "abbreviated": True,
            }
        },
    )
