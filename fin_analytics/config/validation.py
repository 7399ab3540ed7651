"""Configuration validation utilities."""

from dataclasses import dataclass, fields
from typing import Any

from ..utils.time import DateRange
from .defaults import DisplayParams, ForecastParams, LoggingParams, RangeParams

RANGE_TOKENS = tuple(date_range.value for date_range in DateRange)

_SECTIONS = {
    "forecast": ForecastParams,
    "range": RangeParams,
    "display": DisplayParams,
    "logging": LoggingParams,
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_forecast_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate forecast window parameters."""
        errors = []

        for name in ("next_quarter_periods", "annual_periods"):
            if name in params:
                value = params[name]
                if not _is_int(value) or value <= 0:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a positive integer",
                        value=value
                    ))

        if "growth_precision" in params:
            value = params["growth_precision"]
            if not _is_int(value) or value < 0:
                errors.append(ValidationError(
                    field="growth_precision",
                    message="Must be a non-negative integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_range_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate date range parameters."""
        errors = []

        if "default_token" in params:
            value = params["default_token"]
            if value not in RANGE_TOKENS:
                errors.append(ValidationError(
                    field="default_token",
                    message=f"Must be one of {', '.join(RANGE_TOKENS)}",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_display_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate display parameters."""
        errors = []

        if "currency" in params:
            value = params["currency"]
            if not isinstance(value, str) or len(value) != 3 or not value.isalpha():
                errors.append(ValidationError(
                    field="currency",
                    message="Must be a 3-letter currency code",
                    value=value
                ))

        if "placeholder" in params and not isinstance(params["placeholder"], str):
            errors.append(ValidationError(
                field="placeholder",
                message="Must be a string",
                value=params["placeholder"]
            ))

        if "max_fraction_digits" in params:
            value = params["max_fraction_digits"]
            if not _is_int(value) or not 0 <= value <= 6:
                errors.append(ValidationError(
                    field="max_fraction_digits",
                    message="Must be an integer between 0 and 6",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate structlog output parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {', '.join(LOG_LEVELS)}",
                    value=value
                ))

        for name in ("format_json", "include_timestamp", "include_caller"):
            if name in params and not isinstance(params[name], bool):
                errors.append(ValidationError(
                    field=name,
                    message="Must be a boolean",
                    value=params[name]
                ))

        return errors

    @staticmethod
    def validate_unknown_keys(config: dict[str, Any]) -> list[ValidationError]:
        """Reject sections or keys that no parameter dataclass declares."""
        errors = []

        for section, params in config.items():
            if section not in _SECTIONS:
                errors.append(ValidationError(
                    field=section,
                    message="Unknown configuration section",
                    value=params
                ))
                continue
            if not isinstance(params, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Section must be a mapping",
                    value=params
                ))
                continue
            known = {f.name for f in fields(_SECTIONS[section])}
            for key in params:
                if key not in known:
                    errors.append(ValidationError(
                        field=f"{section}.{key}",
                        message="Unknown configuration key",
                        value=params[key]
                    ))

        return errors

    @classmethod
    def validate_config(cls, config: dict[str, Any]) -> list[ValidationError]:
        """Validate a complete merged configuration."""
        errors = cls.validate_unknown_keys(config)
        if errors:
            return errors

        errors.extend(cls.validate_forecast_params(config.get("forecast", {})))
        errors.extend(cls.validate_range_params(config.get("range", {})))
        errors.extend(cls.validate_display_params(config.get("display", {})))
        errors.extend(cls.validate_logging_params(config.get("logging", {})))
        return errors
