"""
Record ingestion and normalization module.

Turns loosely-typed API rows into trustworthy numbers, calendar dates and
immutable record objects for the aggregation functions.
"""

from .models import FinancialSummary, ForecastRecord, KPIMetric, get_field
from .normalizer import (
    amount_or_zero,
    coerce_forecast_records,
    normalize_amount,
    round_half_up,
)
from .parsers import is_row_sequence, parse_period, unwrap_results

__all__ = [
    "FinancialSummary",
    "ForecastRecord",
    "KPIMetric",
    "amount_or_zero",
    "coerce_forecast_records",
    "get_field",
    "is_row_sequence",
    "normalize_amount",
    "parse_period",
    "round_half_up",
    "unwrap_results",
]
