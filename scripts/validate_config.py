#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import Optional

from fin_analytics.config.loader import CONFIG_FILENAME, ConfigLoader
from fin_analytics.config.validation import ConfigValidator


def main(config_dir: Optional[Path] = None) -> int:
    """Validate analytics.yaml merged over the defaults."""
    loader = ConfigLoader.create(config_dir)
    print(f"Validating {loader.config_dir / CONFIG_FILENAME}...")

    config = loader.merge_config()
    errors = ConfigValidator.validate_config(config)

    if errors:
        print(f"Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  - {error.field}: {error.message} (value: {error.value!r})")
        return 1

    print("Configuration is valid")
    for section, params in config.items():
        print(f"  {section}: {params}")
    return 0


if __name__ == "__main__":
    sys.exit(main(Path(sys.argv[1]) if len(sys.argv) > 1 else None))
