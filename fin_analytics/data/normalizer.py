"""
Normalization of loosely-typed dashboard payloads.

Upstream endpoints deliver amounts as numbers, comma-grouped strings
("12,345.67") or null. ``normalize_amount`` is the single point where such a
value becomes either a finite number or ``None``; it never raises, so a tile
can render a placeholder instead of failing on malformed data.
"""

import math
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Optional, Union

import structlog

from ..errors import MalformedDataError
from .models import ForecastRecord
from .parsers import unwrap_results

logger = structlog.get_logger(__name__)

Number = Union[int, float]


def normalize_amount(value: Any) -> Optional[Number]:
    """
    Coerce an external value into a finite number or None.

    Args:
        value: Raw amount from an API payload

    Returns:
        The finite number (unchanged when already numeric), or None when the
        value is missing, non-finite, unparseable or of an unsupported type
    """
    if value is None:
        return None

    # bool is an int subclass but never an amount
    if isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        try:
            finite = math.isfinite(value)
        except OverflowError:
            # int beyond float range
            return None
        return value if finite else None

    if isinstance(value, str):
        return _parse_amount_text(value)

    return None


def _parse_amount_text(text: str) -> Optional[float]:
    """Parse a comma-grouped decimal string."""
    cleaned = text.replace(",", "").strip()

    # A blank amount field reads as zero on the dashboard
    if not cleaned:
        return 0.0

    # float() would accept "1_000"; grouping is only ever done with commas
    if "_" in cleaned:
        return None

    try:
        number = float(cleaned)
    except ValueError:
        return None

    return number if math.isfinite(number) else None


def amount_or_zero(value: Any) -> Number:
    """Normalized amount with missing values counted as zero."""
    number = normalize_amount(value)
    return 0 if number is None else number


def coerce_forecast_records(payload: Any) -> list[ForecastRecord]:
    """
    Build ForecastRecords from a forecast endpoint response.

    Args:
        payload: Plain row list or ``{"results": [...]}`` envelope

    Returns:
        Records in input order; rows that are not objects are skipped
    """
    records = []
    skipped = 0

    for row in unwrap_results(payload):
        try:
            records.append(ForecastRecord.from_payload(row))
        except MalformedDataError as e:
            skipped += 1
            logger.warning("Skipping malformed forecast row", error=str(e), raw_data=e.raw_data)

    if skipped:
        logger.debug("Forecast rows coerced", accepted=len(records), skipped=skipped)

    return records


def round_half_up(value: Number, places: int = 2) -> float:
    """Round to ``places`` decimals, halves away from zero ("1.005" -> 1.01)."""
    quantum = Decimal(1).scaleb(-places)
    try:
        return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))
    except InvalidOperation:
        # Beyond Decimal context precision there are no fractional digits left
        return float(value)
