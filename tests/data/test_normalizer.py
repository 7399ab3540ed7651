"""
Tests for numeric normalization of loosely-typed amounts.

Covers pass-through of finite numbers, comma-grouped strings, the None
fallback for anything unusable, half-up rounding and forecast row coercion.
"""

import math
from decimal import Decimal

import pytest
from structlog.testing import capture_logs

from fin_analytics.data.models import ForecastRecord
from fin_analytics.data.normalizer import (
    amount_or_zero,
    coerce_forecast_records,
    normalize_amount,
    round_half_up,
)


class TestNormalizeAmount:
    """Test normalize_amount coercion rules."""

    @pytest.mark.parametrize("value", [0, 42, -17, 3.5, -0.25, 1e12])
    def test_finite_numbers_unchanged(self, value):
        """Finite numbers should be returned as-is."""
        result = normalize_amount(value)
        assert result == value
        assert type(result) is type(value)

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_numbers(self, value):
        """NaN and infinities are not amounts."""
        assert normalize_amount(value) is None

    def test_int_beyond_float_range(self):
        """Integers too large for a float are not finite amounts."""
        assert normalize_amount(10 ** 400) is None

    def test_none(self):
        """Missing values normalize to None."""
        assert normalize_amount(None) is None

    @pytest.mark.parametrize("text, expected", [
        ("12,345.67", 12345.67),
        ("1,500.50", 1500.50),
        ("  2,000  ", 2000.0),
        ("-3,250.5", -3250.5),
        ("1,000,000", 1000000.0),
        ("0", 0.0),
        ("1e3", 1000.0),
    ])
    def test_numeric_strings(self, text, expected):
        """Comma-grouped decimal strings parse to floats."""
        assert normalize_amount(text) == expected

    @pytest.mark.parametrize("text", ["", "   ", " , ", "\t\n"])
    def test_blank_strings_are_zero(self, text):
        """A blank amount field counts as zero, not as missing."""
        assert normalize_amount(text) == 0

    @pytest.mark.parametrize("text", ["abc", "1_000", "0x1F", "inf", "-Infinity", "nan", "1.2.3", "$100"])
    def test_unparseable_strings(self, text):
        """Strings that are not finite decimals normalize to None."""
        assert normalize_amount(text) is None

    @pytest.mark.parametrize("value", [True, False, [1], {"amount": 1}, Decimal("1.5"), object()])
    def test_unsupported_types(self, value):
        """Booleans, containers and other types are not amounts."""
        assert normalize_amount(value) is None

    @pytest.mark.parametrize("value", [None, 12, 3.25, "4,500", "abc", math.nan, True])
    def test_idempotent(self, value):
        """Normalizing a normalized value changes nothing."""
        once = normalize_amount(value)
        assert normalize_amount(once) == once


class TestAmountOrZero:
    """Test amount_or_zero helper."""

    def test_missing_counts_as_zero(self):
        assert amount_or_zero(None) == 0
        assert amount_or_zero("n/a") == 0

    def test_valid_amount(self):
        assert amount_or_zero("1,000") == 1000.0
        assert amount_or_zero(250) == 250


class TestRoundHalfUp:
    """Test half-up decimal rounding."""

    @pytest.mark.parametrize("value, places, expected", [
        (1.005, 2, 1.01),
        (2.675, 2, 2.68),
        (-1.005, 2, -1.01),
        (100, 2, 100.0),
        (33.33333, 2, 33.33),
        (0.5, 0, 1.0),
        (12.3456, 3, 12.346),
    ])
    def test_rounding(self, value, places, expected):
        assert round_half_up(value, places) == expected

    def test_beyond_decimal_precision(self):
        """Huge magnitudes are returned without raising."""
        assert round_half_up(1e300, 2) == 1e300


class TestCoerceForecastRecords:
    """Test building ForecastRecords from endpoint payloads."""

    def test_plain_list(self, quarterly_forecast_rows):
        records = coerce_forecast_records(quarterly_forecast_rows)

        assert len(records) == 4
        assert all(isinstance(record, ForecastRecord) for record in records)
        assert records[2].revenue_forecast == "1,200"

    def test_envelope(self, forecast_envelope):
        records = coerce_forecast_records(forecast_envelope)
        assert [record.period.month for record in records] == [1, 2, 3, 4]

    def test_skips_malformed_rows(self):
        """Rows that are not objects are skipped with a warning."""
        payload = [{"period": "2024-01-01", "revenue_forecast": 10}, "junk", None]

        with capture_logs() as logs:
            records = coerce_forecast_records(payload)

        assert len(records) == 1
        warnings = [entry for entry in logs if entry["log_level"] == "warning"]
        assert len(warnings) == 2
        assert warnings[0]["event"] == "Skipping malformed forecast row"

    @pytest.mark.parametrize("payload", [None, "rows", 42, {"detail": "Not found"}])
    def test_unusable_payload(self, payload):
        assert coerce_forecast_records(payload) == []
