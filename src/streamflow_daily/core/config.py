"""
Configuration module for the ensemble daily flow aggregation engine.

Loads configuration from JSON file and environment variables.
"""

import json
import os
from typing import Dict, Any, List, Optional
from pathlib import Path

from . import constants
from .date_utils import DateUtils


class Config:
    """Configuration manager for the application."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration JSON file. If None, uses CONFIG_FILE env var
                        or defaults to 'config.json'
        """
        self.config_file = config_file or os.getenv("CONFIG_FILE", "config.json")
        self.config: Dict[str, Any] = {}
        self._load_config()
        self._override_from_env()
        self._validate_config()

    def _load_config(self) -> None:
        """Load configuration from JSON file."""
        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_file}")

        with open(config_path, "r", encoding="utf-8") as f:
            self.config = json.load(f)

    def _override_from_env(self) -> None:
        """Override configuration with environment variables."""
        if os.getenv("FLOW_UNIT"):
            self.config.setdefault("processing", {})["flow_unit"] = os.getenv("FLOW_UNIT")

        if os.getenv("TIMEZONE"):
            self.config.setdefault("processing", {})["timezone"] = os.getenv("TIMEZONE")

        if os.getenv("LOG_LEVEL"):
            self.config.setdefault("logging", {})["level"] = os.getenv("LOG_LEVEL")

        if os.getenv("LOG_FILE"):
            self.config.setdefault("logging", {})["file"] = os.getenv("LOG_FILE")

    def _validate_config(self) -> None:
        """Validate required sections and processing values."""
        if "processing" not in self.config:
            raise ValueError("Missing required configuration sections: processing")

        unit = str(self.flow_unit).upper()
        if unit not in constants.SUPPORTED_FLOW_UNITS:
            raise ValueError(
                f"Invalid processing.flow_unit: {self.flow_unit} "
                f"(expected one of {', '.join(constants.SUPPORTED_FLOW_UNITS)})"
            )

        # Raises ValueError for unknown names
        DateUtils.parse_timezone(self.timezone)

        unknown = [h for h in self.horizons if h not in constants.KNOWN_HORIZONS]
        if unknown:
            raise ValueError(
                f"Unknown forecast horizons in processing.horizons: {', '.join(unknown)}"
            )

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key (supports dot notation).

        Args:
            key: Configuration key (e.g., 'processing.timezone')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split(".")
        value = self.config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    @property
    def timezone(self) -> str:
        """Get the local timezone used for day bucketing."""
        return self.get("processing.timezone", constants.DEFAULT_TIMEZONE)

    @property
    def flow_unit(self) -> str:
        """Get the preferred flow unit."""
        return self.get("processing.flow_unit", constants.DEFAULT_FLOW_UNIT)

    @property
    def horizons(self) -> List[str]:
        """Get the forecast horizons to process."""
        return list(self.get("processing.horizons", list(constants.KNOWN_HORIZONS)))

    @property
    def log_level(self) -> str:
        """Get logging level."""
        return self.get("logging.level", "INFO")

    @property
    def log_file(self) -> Optional[str]:
        """Get log file path."""
        return self.get("logging.file")

    @property
    def unit_context(self):
        """Build an immutable unit preference snapshot."""
        from ..processing.converter import UnitContext

        return UnitContext(current_unit=self.flow_unit.upper())

    def __repr__(self) -> str:
        """String representation of config."""
        return (
            f"Config(file={self.config_file}, unit={self.flow_unit}, "
            f"timezone={self.timezone})"
        )
