"""Pytest configuration and shared fixtures."""

import logging

import pytest
import structlog
from typing import Any, Dict, List
from datetime import datetime, timezone


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any structlog or package log level configuration made by a test."""
    yield
    structlog.reset_defaults()
    logging.getLogger("fin_analytics").setLevel(logging.NOTSET)


@pytest.fixture
def reference_now() -> datetime:
    """Mid-April reference instant used across aggregation tests."""
    return datetime(2024, 4, 15, 12, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def quarterly_forecast_rows() -> List[Dict[str, Any]]:
    """Four monthly forecast rows for January to April 2024."""
    return [
        {
            "period": "2024-01-01",
            "revenue_forecast": 1000,
            "expense_forecast": "600",
            "profit_forecast": 400,
            "confidence_interval_low": 900,
            "confidence_interval_high": 1100,
        },
        {
            "period": "2024-02-01",
            "revenue_forecast": 1100,
            "expense_forecast": 650,
            "profit_forecast": 450,
        },
        {
            "period": "2024-03-01",
            "revenue_forecast": "1,200",
            "expense_forecast": 700,
            "profit_forecast": "500",
        },
        {
            "period": "2024-04-01",
            "revenue_forecast": 2000,
            "expense_forecast": None,
            "profit_forecast": None,
        },
    ]


@pytest.fixture
def forecast_envelope(quarterly_forecast_rows) -> Dict[str, Any]:
    """Paginated forecast endpoint response."""
    return {
        "count": len(quarterly_forecast_rows),
        "next": None,
        "previous": None,
        "results": quarterly_forecast_rows,
    }
