"""
Humanize HTTP API endpoints.

This module exposes the scale formatter over HTTP, using either a named
scale preset or a caller-supplied list of scales.
"""

from typing import Optional, Sequence
from fastapi import APIRouter, HTTPException, Query

from humanize_scale.api.v1.schemas import HumanizeRequest, HumanizeResponse
from humanize_scale.core.config import settings
from humanize_scale.core.exceptions import (
    DivisionError,
    InvalidMinValueError,
    InvalidNumberError,
    RoundingError,
)
from humanize_scale.core.logging_config import get_logger
from humanize_scale.models.scale import SCALE_PRESETS, Scale
from humanize_scale.services.scale_formatter import scale_formatter
from humanize_scale.utils.fallbacks import group_thousands

logger = get_logger(__name__)

router = APIRouter()


def resolve_preset(preset: Optional[str]) -> Sequence[Scale]:
    """
    Look up a named scale preset.

    Raises:
        HTTPException: 404 if the preset is unknown
    """
    name = (preset or settings.DEFAULT_SCALE_PRESET).lower()
    scales = SCALE_PRESETS.get(name)
    if scales is None:
        available = ", ".join(sorted(SCALE_PRESETS))
        raise HTTPException(
            status_code=404,
            detail=f"Scale preset {name} not found. Available presets: {available}",
        )
    return scales


def humanize_number(number: str, min_value: Optional[str], scales: Sequence[Scale]) -> HumanizeResponse:
    """
    Format a number and translate formatter errors into HTTP errors.

    Raises:
        HTTPException: 400 for malformed input, 422 for arithmetic failures
    """
    if min_value is None:
        min_value = settings.DEFAULT_MIN_VALUE

    fallback_used = False

    def grouped_fallback(value: str) -> str:
        nonlocal fallback_used
        fallback_used = True
        return group_thousands(value)

    try:
        formatted = scale_formatter.format(number, min_value, scales, grouped_fallback)
    except (InvalidNumberError, InvalidMinValueError) as e:
        logger.warning(f"Rejected humanize input: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except (DivisionError, RoundingError) as e:
        logger.error(f"Arithmetic failure while formatting {number}: {e}")
        raise HTTPException(status_code=422, detail=str(e))

    return HumanizeResponse(
        number=number,
        min_value=min_value,
        formatted=formatted,
        abbreviated=not fallback_used,
    )


@router.get("/humanize", response_model=HumanizeResponse)
async def get_humanized(
    number: str = Query(..., description="Number to format as a decimal string"),
    min_value: Optional[str] = Query(
        default=None,
        alias="minValue",
        description="Numbers below this value are never abbreviated",
    ),
    preset: Optional[str] = Query(
        default=None,
        description="Named scale preset ('western' or 'indian')",
    ),
):
    """
    Format a number using a named scale preset.

    Args:
        number: Number to format (e.g., '1230000')
        min_value: Minimum value for abbreviation (default: configurable via settings)
        preset: Scale preset name (default: configurable via settings)

    Returns:
        HumanizeResponse: Formatted number

    Raises:
        HTTPException: If the input is malformed or the preset is unknown
    """
    scales = resolve_preset(preset)
    return humanize_number(number, min_value, scales)


@router.post("/humanize", response_model=HumanizeResponse)
async def post_humanized(request: HumanizeRequest):
    """
    Format a number using custom scales or a named preset.

    Args:
        request: Number, optional minimum value and scales

    Returns:
        HumanizeResponse: Formatted number

    Raises:
        HTTPException: If the input is malformed or the preset is unknown
    """
    if request.scales is not None:
        scales = [Scale(value=s.value, name=s.name) for s in request.scales]
    else:
        scales = resolve_preset(request.preset)
    return humanize_number(request.number, request.min_value, scales)
