"""
Data quality error classifications for dashboard record processing.

These exceptions categorize the problems found in upstream API payloads.
They never escape the public aggregation functions.
"""

from typing import Any, Optional


class DataQualityError(Exception):
    """Base class for data quality issues that can be handled gracefully."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class MalformedDataError(DataQualityError):
    """Data exists but is in incorrect format."""

    def __init__(self, message: str, raw_data: Optional[str] = None,
                 expected_format: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_data = raw_data
        self.expected_format = expected_format


class TemporalDataError(DataQualityError):
    """Period value that cannot be read as a calendar date."""

    def __init__(self, message: str, raw_value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_value = raw_value


class ConfigurationError(Exception):
    """Configuration overrides failed validation."""

    def __init__(self, message: str, errors: Optional[list] = None):
        super().__init__(message)
        self.errors = errors or []
        self.recoverable = False
