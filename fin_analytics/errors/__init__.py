"""
Error classification for the analytics aggregation layer.

Data quality errors are raised by parsers and caught by the public operations,
which degrade to a defined empty value instead of propagating them.
"""

from .data_quality import (
    ConfigurationError,
    DataQualityError,
    MalformedDataError,
    TemporalDataError,
)

__all__ = [
    "DataQualityError",
    "MalformedDataError",
    "TemporalDataError",
    "ConfigurationError",
]
