"""Application settings and configuration management."""

from pathlib import Path

import yaml
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    BestPerformanceConstants,
    RiegelConstants,
    TrainingLoadWindows,
    VdotSearch,
)
from .models import HeartRateZoneConfig


class Settings(BaseSettings):
    """
    Application settings for Running Analyzer.

    Settings are loaded in the following order of precedence (highest to lowest):
    1. Environment variables (e.g., RUNNING_ANALYZER_DATA_DIR)
    2. .env file (if found)
    3. Default values

    Nested values use a double underscore, e.g.
    RUNNING_ANALYZER_HR_ZONES__MAX_HEART_RATE=190.
    """

    model_config = SettingsConfigDict(
        env_prefix="RUNNING_ANALYZER_",
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
    )

    # --- File Paths ---
    data_dir: Path = Path("data")  # Default relative path, overridden by config
    runs_file: Path = Path("runs.csv")  # Default relative path, overridden by config
    streams_dir: Path = Path("Streams")  # Default relative path, overridden by config

    # --- Fitness Estimation ---
    vdot_window_days: int = VdotSearch.RECENT_WINDOW_DAYS
    riegel_recent_runs: int = RiegelConstants.RECENT_RUNS

    # --- Heart Rate Zones ---
    # Either all four custom bounds or max_heart_rate must be set to tally zones
    hr_zones: HeartRateZoneConfig = HeartRateZoneConfig()

    # --- Training Load ---
    atl_days: int = TrainingLoadWindows.ATL_DAYS
    ctl_days: int = TrainingLoadWindows.CTL_DAYS

    # --- Best Performances ---
    best_performance_count: int = BestPerformanceConstants.TOP_N


def load_settings(config_file: Path | None = None) -> Settings:
    """Load settings from a YAML file, environment variables, and defaults."""
    if config_file:
        with open(config_file, encoding="utf-8") as f:
            yaml_settings = yaml.safe_load(f) or {}

        # Resolve data_dir against the config file location
        data_dir = Path(yaml_settings.get("data_dir", "")).expanduser()
        if not data_dir.is_absolute():
            data_dir = (config_file.parent / data_dir).resolve()
        yaml_settings["data_dir"] = str(data_dir)

        # Join relative paths with data_dir
        for key in ("runs_file", "streams_dir"):
            if key in yaml_settings and not Path(yaml_settings[key]).is_absolute():
                yaml_settings[key] = str(data_dir / yaml_settings[key])

        # Create a Settings object from YAML, then merge with env vars/defaults
        return Settings(**yaml_settings)

    return Settings()
