"""
Data loading functionality.

This module provides a clean interface for loading run history and heart rate
stream data, and for converting loosely-typed rows into validated models
before they reach the analytics functions.
"""

import logging
from pathlib import Path

import numpy as np
import pandas as pd
from pydantic import ValidationError as PydanticValidationError

from ..constants import CSVConstants
from ..exceptions import DataLoadError
from ..metrics.duration import parse_duration
from ..models import PerformanceSample, RunRecord
from ..settings import Settings

logger = logging.getLogger(__name__)

REQUIRED_RUN_COLUMNS = ["date", "distance_km", "time"]


class RunHistoryLoader:
    """
    Handles loading of run history and heart rate streams from files.

    The runs file is a semicolon-separated CSV with at least the columns
    date, distance_km and time. Optional columns: completed, rpe, run_type,
    average_hr, max_hr.
    """

    def __init__(self, settings: Settings):
        """
        Initialize the data loader.

        Args:
            settings: Application settings containing data paths
        """
        self.settings = settings
        self.logger = logging.getLogger(__name__)

    def _resolve(self, path: Path) -> Path:
        """Resolve a configured path against the data directory."""
        return path if path.is_absolute() else self.settings.data_dir / path

    def load_runs(self) -> pd.DataFrame:
        """
        Load run history from CSV file.

        Returns:
            DataFrame with one row per run

        Raises:
            DataLoadError: If loading fails or required columns are missing
        """
        runs_file = self._resolve(self.settings.runs_file)
        if not runs_file.exists():
            raise DataLoadError(f"Runs file not found: {runs_file}")

        try:
            self.logger.info(f"Loading runs from {runs_file}")
            df = pd.read_csv(
                runs_file,
                sep=CSVConstants.DEFAULT_SEPARATOR,
                encoding=CSVConstants.DEFAULT_ENCODING,
                dtype={"time": str},
            )
        except Exception as e:
            raise DataLoadError(f"Failed to load runs: {e}") from e

        missing = [c for c in REQUIRED_RUN_COLUMNS if c not in df.columns]
        if missing:
            raise DataLoadError(f"Runs file is missing columns: {missing}")

        df["date"] = pd.to_datetime(df["date"], errors="coerce").dt.date
        self.logger.info(f"Loaded {len(df)} runs")
        return df

    def _completed(self, runs_df: pd.DataFrame) -> pd.DataFrame:
        """Keep completed runs with a date, a positive distance and a time."""
        df = runs_df
        if "completed" in df.columns:
            df = df[df["completed"].astype(str).str.lower().isin(["true", "1", "yes"])]
        mask = (
            df["date"].notna()
            & pd.to_numeric(df["distance_km"], errors="coerce").gt(0)
            & df["time"].notna()
            & df["time"].astype(str).str.strip().ne("")
        )
        return df[mask]

    def to_performance_samples(self, runs_df: pd.DataFrame) -> list[PerformanceSample]:
        """
        Convert run rows into performance samples.

        Times that cannot be parsed become 0 seconds and are kept; the
        analytics skip them.

        Args:
            runs_df: DataFrame from load_runs()

        Returns:
            Validated performance samples in file order
        """
        samples = []
        for row in self._completed(runs_df).itertuples(index=False):
            seconds = parse_duration(row.time)
            if seconds == 0:
                self.logger.warning(f"Run on {row.date} has unparseable time {row.time!r}")
            samples.append(
                PerformanceSample(
                    distance_km=float(row.distance_km),
                    elapsed_seconds=seconds,
                    date=row.date,
                )
            )
        return samples

    def to_run_records(self, runs_df: pd.DataFrame) -> list[RunRecord]:
        """
        Convert run rows into training load records.

        Args:
            runs_df: DataFrame from load_runs()

        Returns:
            Validated run records; invalid rows are skipped with a warning
        """
        records = []
        for row in self._completed(runs_df).to_dict(orient="records"):
            try:
                records.append(
                    RunRecord(
                        date=row["date"],
                        distance_km=float(row["distance_km"]),
                        elapsed_seconds=parse_duration(row["time"]),
                        rpe=_optional_float(row.get("rpe")),
                        run_type=_optional_str(row.get("run_type")),
                        average_hr=_optional_float(row.get("average_hr")),
                        max_hr=_optional_float(row.get("max_hr")),
                    )
                )
            except PydanticValidationError as e:
                self.logger.warning(f"Skipping invalid run on {row['date']}: {e}")
        return records

    def load_heart_rate_stream(self, run_id: int | str) -> np.ndarray:
        """
        Load heart rate samples for a specific run.

        Args:
            run_id: ID of the run

        Returns:
            Array of heart rate samples in bpm

        Raises:
            DataLoadError: If the stream is missing or has no heartrate column
        """
        stream_file = self._resolve(self.settings.streams_dir) / f"stream_{run_id}.csv"
        return load_heart_rate_file(stream_file)

    def stream_exists(self, run_id: int | str) -> bool:
        """Check if stream data exists for a run."""
        stream_file = self._resolve(self.settings.streams_dir) / f"stream_{run_id}.csv"
        return stream_file.exists()


def load_heart_rate_file(stream_file: Path) -> np.ndarray:
    """
    Read the heartrate column of a stream CSV file.

    Args:
        stream_file: Path to the stream file

    Returns:
        Array of heart rate samples with missing values dropped

    Raises:
        DataLoadError: If the file is missing, unreadable or has no heartrate
    """
    if not stream_file.exists():
        raise DataLoadError(f"Stream file not found: {stream_file}")

    try:
        logger.debug(f"Loading stream data from {stream_file}")
        df = pd.read_csv(stream_file, sep=CSVConstants.DEFAULT_SEPARATOR)
    except Exception as e:
        raise DataLoadError(f"Failed to load stream {stream_file}: {e}") from e

    if "heartrate" not in df.columns:
        raise DataLoadError(f"No heartrate column in {stream_file}")
    return pd.to_numeric(df["heartrate"], errors="coerce").dropna().to_numpy()


def _optional_float(value) -> float | None:
    """Convert a CSV cell to float, mapping blanks and NaN to None."""
    if value is None or pd.isna(value):
        return None
    return float(value)


def _optional_str(value) -> str | None:
    """Convert a CSV cell to str, mapping blanks and NaN to None."""
    if value is None or pd.isna(value) or str(value).strip() == "":
        return None
    return str(value)
