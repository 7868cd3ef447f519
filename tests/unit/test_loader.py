"""Unit tests for run history and stream loading."""

from datetime import date
from pathlib import Path

import numpy as np
import pandas as pd
import pytest

from running_analyzer.data.loader import RunHistoryLoader, load_heart_rate_file
from running_analyzer.exceptions import DataLoadError
from running_analyzer.settings import Settings


class TestLoadRuns:
    """Test loading the runs CSV."""

    def test_load_runs(self, settings_for_data_dir: Settings):
        """Test that runs load with parsed dates and string times."""
        df = RunHistoryLoader(settings_for_data_dir).load_runs()

        assert len(df) == 4
        assert df["date"].iloc[0] == date(2024, 6, 10)
        assert df["time"].iloc[1] == "20:00"

    def test_missing_file_raises(self, tmp_path: Path):
        """Test that a missing runs file raises DataLoadError."""
        settings = Settings(data_dir=tmp_path)

        with pytest.raises(DataLoadError, match="not found"):
            RunHistoryLoader(settings).load_runs()

    def test_missing_columns_raise(self, tmp_path: Path):
        """Test that required columns are checked."""
        pd.DataFrame({"date": ["2024-06-01"], "distance_km": [5.0]}).to_csv(
            tmp_path / "runs.csv", sep=";", index=False
        )
        settings = Settings(data_dir=tmp_path)

        with pytest.raises(DataLoadError, match="missing columns"):
            RunHistoryLoader(settings).load_runs()


class TestConversions:
    """Test converting rows into models."""

    def test_performance_samples(self, settings_for_data_dir: Settings):
        """Test samples keep file order and unparseable times become zero."""
        loader = RunHistoryLoader(settings_for_data_dir)

        samples = loader.to_performance_samples(loader.load_runs())

        assert [s.elapsed_seconds for s in samples] == [2640, 1200, 1290, 0]
        assert samples[1].distance_km == 5.0
        assert samples[1].date == date(2024, 6, 20)

    def test_incomplete_runs_skipped(self, settings_for_data_dir: Settings):
        """Test that runs not marked completed are dropped."""
        loader = RunHistoryLoader(settings_for_data_dir)
        df = loader.load_runs()
        df.loc[0, "completed"] = False

        samples = loader.to_performance_samples(df)

        assert len(samples) == 3

    def test_runs_without_time_or_distance_skipped(
        self, settings_for_data_dir: Settings
    ):
        """Test that rows missing a time or distance are dropped."""
        loader = RunHistoryLoader(settings_for_data_dir)
        df = loader.load_runs()
        df.loc[0, "time"] = np.nan
        df.loc[1, "distance_km"] = 0

        samples = loader.to_performance_samples(df)

        assert [s.elapsed_seconds for s in samples] == [1290, 0]

    def test_run_records(self, settings_for_data_dir: Settings):
        """Test optional columns map blanks to None."""
        loader = RunHistoryLoader(settings_for_data_dir)

        records = loader.to_run_records(loader.load_runs())

        assert len(records) == 4
        assert records[0].rpe == 5
        assert records[0].run_type == "Easy Run"
        assert records[0].average_hr == 140
        assert records[2].rpe is None
        assert records[3].run_type is None


class TestHeartRateStreams:
    """Test loading heart rate streams."""

    def test_load_stream(self, settings_for_data_dir: Settings):
        """Test that the heartrate column is returned as an array."""
        loader = RunHistoryLoader(settings_for_data_dir)

        samples = loader.load_heart_rate_stream(42)

        assert loader.stream_exists(42)
        assert list(samples) == [50, 120, 140, 160, 180, 200]

    def test_missing_stream_raises(self, settings_for_data_dir: Settings):
        """Test that a missing stream raises DataLoadError."""
        loader = RunHistoryLoader(settings_for_data_dir)

        assert not loader.stream_exists(99)
        with pytest.raises(DataLoadError):
            loader.load_heart_rate_stream(99)

    def test_stream_without_heartrate(self, tmp_path: Path):
        """Test that a stream without heart rate raises DataLoadError."""
        stream_file = tmp_path / "stream_1.csv"
        pd.DataFrame({"time": [0, 1], "cadence": [170, 172]}).to_csv(
            stream_file, sep=";", index=False
        )

        with pytest.raises(DataLoadError, match="No heartrate"):
            load_heart_rate_file(stream_file)
