"""
Parsers for the raw shapes delivered by the dashboard API.

Handles period strings and the ``{"results": [...]}`` pagination envelope.
"""

from collections.abc import Mapping, Sequence
from datetime import date, datetime
from typing import Any, Optional

from ..errors import TemporalDataError


def parse_period_strict(value: Any) -> date:
    """
    Parse a period value into a calendar date or datetime.

    Accepts ``date``/``datetime`` objects, ISO dates ("2024-03-01"), year-month
    buckets ("2024-03", read as the first of the month) and ISO datetimes
    ("2024-03-01T10:00:00Z"). A datetime keeps its time of day.

    Raises:
        TemporalDataError: if the value cannot be read as a date
    """
    if isinstance(value, (date, datetime)):
        return value

    if not isinstance(value, str):
        raise TemporalDataError(
            f"Unsupported period type: {type(value).__name__}", raw_value=value
        )

    text = value.strip()
    try:
        if len(text) == 7:
            return date.fromisoformat(f"{text}-01")
        if len(text) == 10:
            return date.fromisoformat(text)
        return datetime.fromisoformat(text)
    except ValueError as e:
        raise TemporalDataError(f"Unparseable period: {e}", raw_value=value) from e


def parse_period(value: Any) -> Optional[date]:
    """Parse a period value, returning None when it is missing or malformed."""
    try:
        return parse_period_strict(value)
    except TemporalDataError:
        return None


def unwrap_results(payload: Any) -> list:
    """
    Extract the row list from an API response body.

    Args:
        payload: Either a plain list of rows or a ``{"results": [...]}`` envelope

    Returns:
        The rows as a new list, or an empty list for any other shape
    """
    if isinstance(payload, Mapping):
        payload = payload.get("results")

    if is_row_sequence(payload):
        return list(payload)

    return []


def is_row_sequence(value: Any) -> bool:
    """True for list-like row containers; strings, bytes and mappings are not rows."""
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))
