"""
Analytics engine coordinator.

Composes the aggregation pipeline for one dashboard refresh:
API payload → ForecastRecords → FinancialSummary + range-filtered rows.
"""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from .config.defaults import DefaultConfig
from .config.loader import ConfigLoader
from .data.models import FinancialSummary, ForecastRecord
from .data.normalizer import coerce_forecast_records
from .logging import get_component_logger
from .metrics.forecast import ForecastAggregator
from .utils.formatting import format_currency, format_percent
from .utils.time import DateRange, current_time, filter_by_range, resolve_lower_bound


@dataclass(frozen=True)
class DashboardView:
    """Everything the forecast section of the dashboard renders."""
    summary: FinancialSummary
    rows: list[ForecastRecord]      # Range-filtered, in payload order
    range: DateRange
    lower_bound: datetime


class AnalyticsEngine:
    """
    Coordinator for the forecast section of the analytics dashboard.

    The engine holds configuration only; every call recomputes from its
    arguments, so one instance can serve concurrent widgets.
    """

    def __init__(self,
                 config_dir: Optional[Path] = None,
                 overrides: Optional[dict[str, Any]] = None,
                 config: Optional[DefaultConfig] = None) -> None:
        """
        Initialize the engine.

        Args:
            config_dir: Directory holding analytics.yaml
            overrides: Caller overrides applied on top of the file
            config: Ready configuration; skips loading when given

        Raises:
            ConfigurationError: if the merged configuration is invalid
        """
        self.config = config or ConfigLoader.create(config_dir).load(overrides)
        self.aggregator = ForecastAggregator(self.config.forecast)
        self.logger = get_component_logger(__name__, "engine")

        self.logger.info(
            "Analytics engine initialized",
            default_range=self.config.range.default_token,
            next_quarter_periods=self.config.forecast.next_quarter_periods,
            annual_periods=self.config.forecast.annual_periods,
        )

    def resolve_range(self, token: Any) -> DateRange:
        """Map a UI token to a DateRange using the configured default."""
        return DateRange.parse(token, self.config.range.default_token)

    def build_view(self, payload: Any, token: Any, now: Optional[datetime] = None) -> DashboardView:
        """
        Compute the forecast section for one refresh.

        Args:
            payload: Forecast endpoint body (row list or ``{"results": [...]}``)
            token: Range token from the date range control
            now: Reference instant, defaults to the current UTC time

        Returns:
            DashboardView with the summary over all rows and the rows in range
        """
        if now is None:
            now = current_time()

        records = coerce_forecast_records(payload)
        date_range = self.resolve_range(token)

        # Year-to-date deliberately ignores the selected range
        summary = self.aggregator.summarize(records, now)
        rows = filter_by_range(records, date_range, now)

        self.logger.debug(
            "Dashboard view built",
            records=len(records),
            rows_in_range=len(rows),
            range=date_range.value,
        )

        return DashboardView(
            summary=summary,
            rows=rows,
            range=date_range,
            lower_bound=resolve_lower_bound(date_range, now),
        )

    def format_summary(self, summary: FinancialSummary) -> dict[str, str]:
        """Display strings for the four summary tiles."""
        display = self.config.display
        currency_options = {
            "currency": display.currency,
            "placeholder": display.placeholder,
            "max_fraction_digits": display.max_fraction_digits,
        }

        return {
            "next_quarter": format_currency(summary.next_quarter, **currency_options),
            "ytd_revenue": format_currency(summary.ytd_revenue, **currency_options),
            "projected_annual": format_currency(summary.projected_annual, **currency_options),
            "growth_rate": format_percent(
                summary.growth_rate_percent,
                precision=self.config.forecast.growth_precision,
                placeholder=display.placeholder,
            ),
        }
