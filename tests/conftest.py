"""
Shared pytest fixtures for RunningAnalyzer tests.

This module provides reusable fixtures for:
- Settings configurations
- Performance histories
- Heart rate samples
- Run history and stream files on disk
"""

from datetime import date
from pathlib import Path

import pandas as pd
import pytest
import yaml

from running_analyzer.models import HeartRateZoneConfig, PerformanceSample, RunRecord
from running_analyzer.settings import Settings

# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def temp_config_file(tmp_path: Path) -> Path:
    """Create a temporary YAML config file path for testing."""
    return tmp_path / "config.yaml"


@pytest.fixture
def custom_zone_config() -> HeartRateZoneConfig:
    """Provide custom zone bounds of 130/150/170/190 bpm."""
    return HeartRateZoneConfig(
        zone_1_max=130, zone_2_max=150, zone_3_max=170, zone_4_max=190
    )


@pytest.fixture
def settings_with_max_hr() -> Settings:
    """Provide settings with a max heart rate of 190 bpm."""
    return Settings(hr_zones=HeartRateZoneConfig(max_heart_rate=190))


@pytest.fixture
def as_of() -> date:
    """Provide a fixed reference date."""
    return date(2024, 6, 30)


# ============================================================================
# Data Fixtures - Performances
# ============================================================================


@pytest.fixture
def performance_history() -> list[PerformanceSample]:
    """
    Provide a history spanning two months.

    The 5K on 2024-06-20 (20:00) is the best recent VDOT. The 10K in May
    is outside a 30-day window as of 2024-06-30.
    """
    return [
        PerformanceSample(distance_km=10.0, elapsed_seconds=2700, date=date(2024, 5, 1)),
        PerformanceSample(distance_km=8.0, elapsed_seconds=2640, date=date(2024, 6, 10)),
        PerformanceSample(distance_km=5.0, elapsed_seconds=1200, date=date(2024, 6, 20)),
        PerformanceSample(distance_km=5.0, elapsed_seconds=1290, date=date(2024, 6, 25)),
    ]


@pytest.fixture
def run_records() -> list[RunRecord]:
    """Provide runs for training load calculations."""
    return [
        RunRecord(
            date=date(2024, 6, 28),
            distance_km=10.0,
            elapsed_seconds=3000,
            rpe=6,
            run_type="Easy Run",
        ),
        RunRecord(
            date=date(2024, 6, 30),
            distance_km=8.0,
            elapsed_seconds=2400,
            rpe=8,
            run_type="Tempo Run",
            average_hr=165,
        ),
    ]


# ============================================================================
# Data Fixtures - Heart Rate
# ============================================================================


@pytest.fixture
def heart_rate_samples() -> list[int]:
    """Provide samples spread over all five custom zones."""
    return [50, 120, 140, 160, 180, 200]


# ============================================================================
# File Fixtures
# ============================================================================


@pytest.fixture
def runs_df() -> pd.DataFrame:
    """Provide a run history as it appears in the runs CSV."""
    return pd.DataFrame(
        {
            "date": ["2024-06-10", "2024-06-20", "2024-06-25", "2024-06-27"],
            "distance_km": [8.0, 5.0, 5.0, 6.0],
            "time": ["44:00", "20:00", "21:30", "bad"],
            "completed": [True, True, True, True],
            "rpe": [5, 9, None, 4],
            "run_type": ["Easy Run", "Quality Run", "Tempo Run", None],
            "average_hr": [140, 175, None, None],
            "max_hr": [155, 188, None, None],
        }
    )


@pytest.fixture
def data_dir(tmp_path: Path, runs_df: pd.DataFrame) -> Path:
    """Create a data directory with a runs file and one HR stream."""
    data_dir = tmp_path / "data"
    streams = data_dir / "Streams"
    streams.mkdir(parents=True)
    runs_df.to_csv(data_dir / "runs.csv", sep=";", index=False)
    pd.DataFrame(
        {"time": range(6), "heartrate": [50, 120, 140, 160, 180, 200]}
    ).to_csv(streams / "stream_42.csv", sep=";", index=False)
    return data_dir


@pytest.fixture
def settings_for_data_dir(data_dir: Path) -> Settings:
    """Provide settings pointing at the temporary data directory."""
    return Settings(
        data_dir=data_dir,
        hr_zones=HeartRateZoneConfig(
            zone_1_max=130, zone_2_max=150, zone_3_max=170, zone_4_max=190
        ),
    )


@pytest.fixture
def config_file(data_dir: Path, temp_config_file: Path) -> Path:
    """Create a YAML config pointing at the temporary data directory."""
    with open(temp_config_file, "w") as f:
        yaml.dump(
            {
                "data_dir": str(data_dir),
                "runs_file": "runs.csv",
                "streams_dir": "Streams",
                "hr_zones": {"max_heart_rate": 190},
            },
            f,
        )
    return temp_config_file
