"""
structlog setup for the analytics aggregation layer.

Output settings come from the ``logging`` section of analytics.yaml
(``LoggingParams``); keyword overrides passed to ``configure_logging`` win over
them. The level is applied to the ``fin_analytics`` logger hierarchy only, so a
host application keeps control of its own loggers.
"""
import logging
import sys
from dataclasses import replace
from typing import IO, Any, Optional

import structlog
from structlog.types import EventDict, FilteringBoundLogger, WrappedLogger

from .. import __version__
from ..config.defaults import DefaultConfig, LoggingParams
from ..config.validation import ConfigValidator
from ..errors import ConfigurationError

PACKAGE_LOGGER = "fin_analytics"


def add_package_version(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Stamp events from fin_analytics loggers with the library version."""
    if str(event_dict.get("logger", "")).startswith(PACKAGE_LOGGER):
        event_dict.setdefault("fin_analytics_version", __version__)
    return event_dict


def _build_processors(params: LoggingParams, extra_processors: Optional[list]) -> list:
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        add_package_version,
        structlog.processors.format_exc_info,
    ]

    if params.include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso", utc=True))

    if params.include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.MODULE,
                        structlog.processors.CallsiteParameter.FUNC_NAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if params.format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    return processors


def configure_logging(
    params: Optional[LoggingParams] = None,
    extra_processors: Optional[list] = None,
    stream: Optional[IO[str]] = None,
    **overrides: Any
) -> LoggingParams:
    """
    Configure structlog for the fin_analytics loggers.

    Args:
        params: Logging section of the loaded configuration, defaults when None
        extra_processors: Processors inserted before the renderer
        stream: Destination for the root handler when none exists yet (stdout)
        **overrides: Individual LoggingParams fields, e.g. ``level="DEBUG"``

    Returns:
        The LoggingParams actually applied

    Raises:
        ConfigurationError: if the level or a flag is invalid
    """
    params = replace(params or LoggingParams(), **overrides)

    errors = ConfigValidator.validate_logging_params(
        {"level": params.level,
         "format_json": params.format_json,
         "include_timestamp": params.include_timestamp,
         "include_caller": params.include_caller}
    )
    if errors:
        raise ConfigurationError("Invalid logging configuration", errors=errors)

    # No-op when the host application already installed root handlers
    logging.basicConfig(stream=stream or sys.stdout, format="%(message)s")
    logging.getLogger(PACKAGE_LOGGER).setLevel(getattr(logging, params.level.upper()))

    structlog.configure(
        processors=_build_processors(params, extra_processors),
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    return params


def configure_from_config(config: DefaultConfig, **kwargs: Any) -> LoggingParams:
    """Apply the logging section of a loaded analytics configuration."""
    return configure_logging(config.logging, **kwargs)


def get_logger(name: str) -> FilteringBoundLogger:
    """Get a structlog logger (name is typically __name__)."""
    return structlog.get_logger(name)


def get_component_logger(name: str, component: str) -> FilteringBoundLogger:
    """
    Get a logger bound to one pipeline component ("engine", "normalizer", ...).

    Binding resolves the current structlog configuration, so call this after
    ``configure_logging``; per-instance loggers satisfy that, module globals
    usually do not.
    """
    return get_logger(name).bind(component=component)
