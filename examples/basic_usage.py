#!/usr/bin/env python3
"""
Basic Usage Example - Fin Analytics Forecast Summary

Demonstrates one refresh of the forecast section of the analytics dashboard:
- Initialize the engine
- Feed a paginated forecast endpoint response with mixed amount formats
- Print the summary tiles and the rows inside the selected date range

Run: python examples/basic_usage.py
"""

from datetime import date, datetime, timezone
from typing import Any, Dict, List

from fin_analytics.config import ConfigLoader
from fin_analytics.engine import AnalyticsEngine
from fin_analytics.logging import configure_from_config


def create_forecast_rows(year: int) -> List[Dict[str, Any]]:
    """Twelve monthly rows as the forecast endpoint returns them."""
    rows = []
    for month in range(1, 13):
        revenue = 100000 + month * 7500
        rows.append({
            "period": date(year, month, 1).isoformat(),
            # Alternate between numbers and comma-grouped strings
            "revenue_forecast": f"{revenue:,}" if month % 2 else revenue,
            "expense_forecast": revenue * 0.6,
            "profit_forecast": revenue * 0.4,
            "confidence_interval_low": revenue * 0.9,
            "confidence_interval_high": revenue * 1.1,
        })
    # A row the API sometimes returns with a broken period
    rows.append({"period": "pending", "revenue_forecast": None})
    return rows


def main() -> None:
    config = ConfigLoader.create().load()
    configure_from_config(config)
    engine = AnalyticsEngine(config=config)

    now = datetime.now(timezone.utc)
    payload = {"count": 13, "results": create_forecast_rows(now.year)}

    for token in ("7d", "30d", "90d", "1y"):
        view = engine.build_view(payload, token, now)
        print(f"\nRange {view.range.value} (from {view.lower_bound.date()}): {len(view.rows)} rows")

    view = engine.build_view(payload, "90d", now)
    print("\nFinancial Forecast")
    for tile, text in engine.format_summary(view.summary).items():
        print(f"  {tile:<18} {text}")


if __name__ == "__main__":
    main()
