"""
Heart rate zone calculations.

This module handles time-in-zone tallies for the 5-zone heart rate model:
- Resolving zone bounds from custom profile values or a max heart rate
- Bucketing raw per-second heart rate samples into zones

Each sample falls in the lowest zone whose upper bound is >= the sample.
Samples above the zone 4 bound fall in zone 5.
"""

import logging
from collections.abc import Sequence

import numpy as np
import pandas as pd
from pydantic import ValidationError as PydanticValidationError

from ..constants import HeartRateZoneThresholds
from ..exceptions import ConfigurationError, InvalidDataError
from ..models import HeartRateZoneConfig, ZoneTally, ZoneThresholds
from .base import BaseMetricCalculator, round_half_up

logger = logging.getLogger(__name__)


def resolve_zone_thresholds(
    config: HeartRateZoneConfig, activity_max_hr: float | None = None
) -> ZoneThresholds:
    """
    Resolve the four zone upper bounds for a run.

    Custom bounds are used only when all four are set and non-zero. Otherwise
    all four are derived from max heart rate (60/70/80/90%), preferring the
    max heart rate recorded for the activity over the profile value.

    Args:
        config: Heart rate zone configuration from the athlete profile
        activity_max_hr: Max heart rate recorded during the activity, if known

    Returns:
        Resolved zone thresholds

    Raises:
        ConfigurationError: If neither custom bounds nor a max heart rate are
            available, or the bounds are not strictly ascending
    """
    try:
        if config.has_custom_zones:
            return ZoneThresholds(
                zone_1_max=config.zone_1_max,
                zone_2_max=config.zone_2_max,
                zone_3_max=config.zone_3_max,
                zone_4_max=config.zone_4_max,
                source="custom",
            )

        max_hr = activity_max_hr or config.max_heart_rate
        if not max_hr:
            raise ConfigurationError(
                "No HR zones configured. Set custom zone bounds or a max heart rate."
            )

        bounds = [
            int(round_half_up(max_hr * pct))
            for pct in HeartRateZoneThresholds.as_tuple()
        ]
        return ZoneThresholds(
            zone_1_max=bounds[0],
            zone_2_max=bounds[1],
            zone_3_max=bounds[2],
            zone_4_max=bounds[3],
            source="max_heart_rate",
        )
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid heart rate zone bounds: {e}") from e


def tally_zones(
    samples: Sequence[float] | np.ndarray | pd.Series, thresholds: ZoneThresholds
) -> ZoneTally:
    """
    Count heart rate samples per zone.

    Args:
        samples: Heart rate samples in bpm, one per second
        thresholds: Resolved zone upper bounds

    Returns:
        Sample count per zone; the counts always sum to len(samples)

    Raises:
        InvalidDataError: If the samples are not numeric or any is negative
    """
    try:
        hr = np.asarray(samples, dtype=float)
    except (TypeError, ValueError) as e:
        raise InvalidDataError(f"Heart rate samples must be numeric: {e}") from e

    if hr.ndim != 1:
        raise InvalidDataError("Heart rate samples must be a flat sequence")
    if hr.size == 0:
        return ZoneTally()
    if np.isnan(hr).any() or (hr < 0).any():
        raise InvalidDataError("Heart rate samples must be non-negative numbers")

    # Number of bounds strictly below each sample is its zone index (0-4)
    zone_index = np.searchsorted(thresholds.as_tuple(), hr, side="left")
    counts = np.bincount(zone_index, minlength=5)

    return ZoneTally(
        zone_1=int(counts[0]),
        zone_2=int(counts[1]),
        zone_3=int(counts[2]),
        zone_4=int(counts[3]),
        zone_5=int(counts[4]),
    )


class HeartRateZoneCalculator(BaseMetricCalculator):
    """Calculates heart rate time-in-zone from activity stream data."""

    def calculate(
        self, stream_df: pd.DataFrame, activity_max_hr: float | None = None
    ) -> dict[str, float]:
        """
        Calculate time in each heart rate zone.

        Args:
            stream_df: DataFrame containing a 'heartrate' column at 1 Hz
            activity_max_hr: Max heart rate recorded for the activity, if known

        Returns:
            Dictionary of zone_N_time columns (seconds)

        Raises:
            ConfigurationError: If no heart rate zones are configured
        """
        hr_data = self._get_column(stream_df, "heartrate")
        if hr_data is None or hr_data.empty:
            logger.info("No heart rate data in stream, skipping zone tally")
            return self._get_empty_metrics()

        thresholds = resolve_zone_thresholds(self.settings.hr_zones, activity_max_hr)
        tally = tally_zones(hr_data, thresholds)
        logger.debug(
            f"Tallied {tally.total} HR samples using {thresholds.source} zones "
            f"{thresholds.as_tuple()}"
        )
        return {k: float(v) for k, v in tally.as_time_columns().items()}

    def _get_empty_metrics(self) -> dict[str, float]:
        """Return dict of zero-valued metrics when no valid data."""
        return {k: float(v) for k, v in ZoneTally().as_time_columns().items()}
