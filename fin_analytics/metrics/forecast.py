"""
Forecast aggregation for the financial summary tiles.

Sorts forecast rows chronologically and derives next-quarter, year-to-date and
projected-annual revenue plus a first-to-last growth rate. Missing or malformed
data degrades to zero values; nothing here raises on bad input.
"""

import math
from datetime import datetime
from typing import Any, Optional

import structlog

from ..config.defaults import ForecastParams
from ..data.models import FinancialSummary, get_field
from ..data.normalizer import Number, amount_or_zero, round_half_up
from ..data.parsers import is_row_sequence, parse_period
from ..utils.time import current_time, start_of_year, to_instant

logger = structlog.get_logger(__name__)


def _period_sort_key(record: Any, reference: datetime) -> tuple:
    period = parse_period(get_field(record, "period"))
    if period is None:
        # Unparseable periods compare as the smallest value
        return (0,)
    return (1, to_instant(period, reference))


def sort_by_period(records: Any, reference: Optional[datetime] = None) -> list:
    """
    Return a new list of records in ascending period order.

    Args:
        records: ForecastRecords or row mappings
        reference: Instant whose timezone is used to compare calendar dates

    Returns:
        Sorted copy; records with unparseable periods come first, ties keep
        input order. Non-sequence input yields an empty list.
    """
    if not is_row_sequence(records):
        return []
    if reference is None:
        reference = current_time()
    return sorted(records, key=lambda record: _period_sort_key(record, reference))


def _total(amounts: list[Number]) -> float:
    try:
        total = float(sum(amounts))
    except OverflowError:
        return 0.0
    return total if math.isfinite(total) else 0.0


class ForecastAggregator:
    """Derives the FinancialSummary from a forecast row sequence"""

    def __init__(self, params: Optional[ForecastParams] = None):
        self.params = params or ForecastParams()

    def summarize(self, records: Any, now: Optional[datetime] = None) -> FinancialSummary:
        """
        Build the financial summary for a forecast sequence.

        Args:
            records: ForecastRecords or row mappings; not mutated
            now: Reference instant for year-to-date, defaults to current UTC time

        Returns:
            FinancialSummary with finite values; the zero summary for empty or
            non-sequence input
        """
        if not is_row_sequence(records):
            logger.debug("Forecast summary received non-sequence input", input_type=type(records).__name__)
            return FinancialSummary.zero()

        if len(records) == 0:
            return FinancialSummary.zero()

        if now is None:
            now = current_time()

        ordered = sort_by_period(records, now)
        revenues = [amount_or_zero(get_field(record, "revenue_forecast")) for record in ordered]

        return FinancialSummary(
            next_quarter=_total(revenues[:self.params.next_quarter_periods]),
            ytd_revenue=self.year_to_date(ordered, now),
            projected_annual=_total(revenues[:self.params.annual_periods]),
            growth_rate_percent=self.growth_rate(revenues[0], revenues[-1]),
        )

    def year_to_date(self, ordered: list, now: datetime) -> float:
        """Revenue of every record dated between January 1st and ``now`` inclusive."""
        year_start = start_of_year(now)

        amounts = []
        for record in ordered:
            period = parse_period(get_field(record, "period"))
            if period is None:
                continue
            if year_start <= to_instant(period, now) <= now:
                amounts.append(amount_or_zero(get_field(record, "revenue_forecast")))

        return _total(amounts)

    def growth_rate(self, first: Number, last: Number) -> float:
        """
        Percentage change from the first to the last period's revenue.

        Zero when there is no positive baseline, so the result is never
        NaN or infinite.
        """
        if first <= 0:
            return 0.0

        growth = (last - first) / first * 100
        if not math.isfinite(growth):
            return 0.0

        return round_half_up(growth, self.params.growth_precision)


_default_aggregator = ForecastAggregator()


def summarize(records: Any, now: Optional[datetime] = None) -> FinancialSummary:
    """Summarize forecast records with the default forecast windows."""
    return _default_aggregator.summarize(records, now)
