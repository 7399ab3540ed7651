"""Default configuration parameters for the analytics aggregation layer."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ForecastParams:
    """Forecast aggregation windows."""
    next_quarter_periods: int = 3        # Leading periods summed for next quarter
    annual_periods: int = 12             # Leading periods summed for projected annual
    growth_precision: int = 2            # Decimal places for growth rate


@dataclass(frozen=True)
class RangeParams:
    """Relative date range parameters."""
    default_token: str = "30d"           # Window used for unrecognized tokens


@dataclass(frozen=True)
class DisplayParams:
    """Presentation defaults for summary tiles."""
    currency: str = "USD"
    placeholder: str = "—"          # Shown when a value cannot be normalized
    max_fraction_digits: int = 0


@dataclass(frozen=True)
class LoggingParams:
    """structlog output settings applied by configure_from_config."""
    level: str = "INFO"
    format_json: bool = False          # JSON lines instead of the console renderer
    include_timestamp: bool = True
    include_caller: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    forecast: ForecastParams
    range: RangeParams
    display: DisplayParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        forecast=ForecastParams(),
        range=RangeParams(),
        display=DisplayParams(),
        logging=LoggingParams(),
    )
