"""
Logging configuration and utilities for the analytics aggregation layer.
"""
from .config import configure_from_config, configure_logging, get_component_logger, get_logger

__all__ = ["configure_from_config", "configure_logging", "get_component_logger", "get_logger"]
