"""
Relative date range resolution and filtering.

Resolves a range token (``7d``, ``30d``, ``90d``, ``1y``) against a reference
instant and filters dated records against the resulting inclusive lower bound.
Unknown tokens degrade to the 30-day window; malformed input never raises.
"""

from datetime import date, datetime, time, timedelta, timezone
from enum import Enum
from typing import Any, Optional, Union

import structlog

from ..data.models import get_field
from ..data.parsers import is_row_sequence, parse_period

logger = structlog.get_logger(__name__)


class DateRange(str, Enum):
    """Closed set of relative windows offered by the dashboard range control."""
    LAST_7_DAYS = "7d"
    LAST_30_DAYS = "30d"
    LAST_90_DAYS = "90d"
    LAST_YEAR = "1y"

    @classmethod
    def parse(cls, token: Any, default: Union["DateRange", str, None] = None) -> "DateRange":
        """
        Map a token to a DateRange.

        Args:
            token: Raw token from the UI control
            default: Window used when the token is not recognized (30d if None)

        Returns:
            The matching DateRange, or the default window for unknown tokens
        """
        if isinstance(token, cls):
            return token

        try:
            return cls(token)
        except (ValueError, TypeError):
            fallback = cls(default) if default is not None else DEFAULT_RANGE
            logger.debug("Unrecognized range token, using default", token=token, fallback=fallback.value)
            return fallback


DEFAULT_RANGE = DateRange.LAST_30_DAYS

_DAY_WINDOWS = {
    DateRange.LAST_7_DAYS: 7,
    DateRange.LAST_30_DAYS: 30,
    DateRange.LAST_90_DAYS: 90,
}


def current_time() -> datetime:
    """Wall-clock reference instant (UTC)."""
    return datetime.now(timezone.utc)


def start_of_day(moment: datetime) -> datetime:
    """Midnight of ``moment``'s calendar day, keeping its tzinfo."""
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def start_of_year(moment: datetime) -> datetime:
    """Midnight of January 1st of ``moment``'s year, keeping its tzinfo."""
    return start_of_day(moment).replace(month=1, day=1)


def to_instant(period: date, reference: datetime) -> datetime:
    """
    Express a period as a datetime comparable with ``reference``.

    Calendar dates become midnight; naive values take the reference's
    timezone, aware values are converted into it.

    Args:
        period: Parsed period (date or datetime)
        reference: Instant the result will be compared with

    Returns:
        Datetime with the same awareness as ``reference``
    """
    if isinstance(period, datetime):
        instant = period
    else:
        instant = datetime.combine(period, time.min)

    if reference.tzinfo is None:
        if instant.tzinfo is not None:
            instant = instant.astimezone().replace(tzinfo=None)
        return instant

    if instant.tzinfo is None:
        return instant.replace(tzinfo=reference.tzinfo)
    return instant.astimezone(reference.tzinfo)


def _one_year_back(moment: datetime) -> datetime:
    """Same month/day one year earlier; 29 Feb overflows to 1 Mar."""
    try:
        return moment.replace(year=moment.year - 1)
    except ValueError:
        return moment.replace(year=moment.year - 1, month=3, day=1)


def resolve_lower_bound(token: Any,
                        now: Optional[datetime] = None,
                        default: Union[DateRange, str, None] = None) -> datetime:
    """
    Compute the inclusive lower bound for a relative range.

    Args:
        token: Range token (``7d``, ``30d``, ``90d``, ``1y``); others mean 30d
        now: Reference instant, defaults to the current UTC time
        default: Window used for unrecognized tokens

    Returns:
        Start of the calendar day ``token`` before ``now``
    """
    date_range = DateRange.parse(token, default)
    if now is None:
        now = current_time()

    if date_range is DateRange.LAST_YEAR:
        shifted = _one_year_back(now)
    else:
        shifted = now - timedelta(days=_DAY_WINDOWS[date_range])

    return start_of_day(shifted)


def filter_by_range(records: Any,
                    token: Any,
                    now: Optional[datetime] = None,
                    default: Union[DateRange, str, None] = None) -> list:
    """
    Keep the records whose period falls on or after the range's lower bound.

    Args:
        records: Sequence of ForecastRecords or row mappings with a ``period``
        token: Range token
        now: Reference instant, defaults to the current UTC time
        default: Window used for unrecognized tokens

    Returns:
        New list in input order; records without a parseable period are dropped
    """
    if not is_row_sequence(records):
        logger.debug("Range filter received non-sequence input", input_type=type(records).__name__)
        return []

    lower_bound = resolve_lower_bound(token, now, default)

    selected = []
    for record in records:
        period = parse_period(get_field(record, "period"))
        if period is None:
            continue
        if to_instant(period, lower_bound) >= lower_bound:
            selected.append(record)

    return selected
