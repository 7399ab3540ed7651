"""Aggregations behind the analytics dashboard tiles"""

from .forecast import ForecastAggregator, sort_by_period, summarize
from .kpi import filter_kpis

__all__ = [
    "ForecastAggregator",
    "filter_kpis",
    "sort_by_period",
    "summarize",
]
