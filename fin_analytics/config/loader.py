"""Configuration loader: defaults, then analytics.yaml, then caller overrides."""

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Optional

import structlog
import yaml

from ..errors import ConfigurationError
from .defaults import (
    DefaultConfig,
    DisplayParams,
    ForecastParams,
    LoggingParams,
    RangeParams,
    get_default_config,
)
from .validation import ConfigValidator

logger = structlog.get_logger(__name__)

CONFIG_FILENAME = "analytics.yaml"


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_file_config(self) -> dict[str, Any]:
        """Load overrides from analytics.yaml, empty when the file is absent."""
        config_file = self.config_dir / CONFIG_FILENAME

        if not config_file.exists():
            return {}

        with open(config_file, encoding="utf-8") as f:
            file_config = yaml.safe_load(f)

        if not isinstance(file_config, dict):
            logger.warning("Ignoring non-mapping configuration file", path=str(config_file))
            return {}

        return file_config

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Caller overrides (highest priority)
        2. analytics.yaml in the config directory
        3. Global defaults (lowest priority)
        """
        config = asdict(self.defaults)
        config = self._deep_merge(config, self.load_file_config())

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load(self, overrides: Optional[dict[str, Any]] = None) -> DefaultConfig:
        """
        Build a validated DefaultConfig.

        Raises:
            ConfigurationError: if the merged configuration fails validation
        """
        config = self.merge_config(overrides)
        errors = ConfigValidator.validate_config(config)
        if errors:
            raise ConfigurationError(
                f"Invalid analytics configuration: {len(errors)} error(s)",
                errors=errors,
            )

        return DefaultConfig(
            forecast=ForecastParams(**config["forecast"]),
            range=RangeParams(**config["range"]),
            display=DisplayParams(**config["display"]),
            logging=LoggingParams(**config["logging"]),
        )

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
