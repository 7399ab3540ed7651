"""Configuration defaults, YAML overrides and validation."""

from .defaults import DefaultConfig, get_default_config
from .loader import ConfigLoader

__all__ = ["ConfigLoader", "DefaultConfig", "get_default_config"]
