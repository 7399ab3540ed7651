"""
Canonical data models for dashboard analytics records.

Immutable structures representing forecast rows, KPI rows and the derived
financial summary. Raw amounts are kept as delivered and normalized on use.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from typing import Any, Optional, Union

from ..errors import MalformedDataError
from .parsers import parse_period

RawAmount = Union[int, float, str, None]


def get_field(record: Any, name: str, default: Any = None) -> Any:
    """Read a field from a mapping row or an attribute-style record."""
    if isinstance(record, Mapping):
        return record.get(name, default)
    return getattr(record, name, default)


@dataclass(frozen=True)
class ForecastRecord:
    """One period's revenue/expense/profit projection."""
    period: Optional[date]                      # None when the raw period did not parse
    revenue_forecast: RawAmount = None
    expense_forecast: RawAmount = None
    profit_forecast: RawAmount = None
    confidence_low: RawAmount = None
    confidence_high: RawAmount = None

    @classmethod
    def from_payload(cls, row: Any) -> "ForecastRecord":
        """
        Build a record from an API forecast row.

        Args:
            row: Mapping with ``period``, ``revenue_forecast``,
                ``expense_forecast``, ``profit_forecast`` and the optional
                ``confidence_interval_low``/``confidence_interval_high`` keys

        Returns:
            ForecastRecord with the period parsed to a date (or None)

        Raises:
            MalformedDataError: if the row is not a mapping
        """
        if not isinstance(row, Mapping):
            raise MalformedDataError(
                "Forecast row must be a mapping",
                raw_data=repr(row)[:100],
                expected_format="object",
            )

        return cls(
            period=parse_period(row.get("period")),
            revenue_forecast=row.get("revenue_forecast"),
            expense_forecast=row.get("expense_forecast"),
            profit_forecast=row.get("profit_forecast"),
            confidence_low=row.get("confidence_interval_low"),
            confidence_high=row.get("confidence_interval_high"),
        )


@dataclass(frozen=True)
class FinancialSummary:
    """Derived forecast tiles, recomputed on every call."""
    next_quarter: float
    ytd_revenue: float
    projected_annual: float
    growth_rate_percent: float

    @classmethod
    def zero(cls) -> "FinancialSummary":
        """Summary used when there is no forecast data."""
        return cls(
            next_quarter=0.0,
            ytd_revenue=0.0,
            projected_annual=0.0,
            growth_rate_percent=0.0,
        )

    def as_dict(self) -> dict[str, float]:
        """Summary keyed the way the dashboard API names the tiles."""
        return {
            "next_quarter": self.next_quarter,
            "ytd_revenue": self.ytd_revenue,
            "projected_annual": self.projected_annual,
            "growth_rate": self.growth_rate_percent,
        }


@dataclass(frozen=True)
class KPIMetric:
    """KPI row as listed on the analytics page."""
    id: str
    name: str
    value: RawAmount = None
    target: RawAmount = None
    trend: str = "stable"       # 'up', 'down' or 'stable'
    unit: str = ""
    status: str = ""            # 'good', 'warning' or 'critical'

    @classmethod
    def from_payload(cls, row: Mapping) -> "KPIMetric":
        """Build a KPI from an API row, tolerating missing keys."""
        return cls(
            id=str(row.get("id", "")),
            name=row.get("name") or "",
            value=row.get("value"),
            target=row.get("target"),
            trend=row.get("trend") or "stable",
            unit=row.get("unit") or "",
            status=row.get("status") or "",
        )
