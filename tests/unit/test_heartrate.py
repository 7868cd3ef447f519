"""Unit tests for heart rate zone resolution and tallies."""

import numpy as np
import pandas as pd
import pytest

from running_analyzer.exceptions import ConfigurationError, InvalidDataError
from running_analyzer.metrics.heartrate import (
    HeartRateZoneCalculator,
    resolve_zone_thresholds,
    tally_zones,
)
from running_analyzer.models import HeartRateZoneConfig, ZoneThresholds
from running_analyzer.settings import Settings


@pytest.fixture
def custom_thresholds(custom_zone_config: HeartRateZoneConfig) -> ZoneThresholds:
    """Provide resolved 130/150/170/190 bpm thresholds."""
    return resolve_zone_thresholds(custom_zone_config)


class TestResolveZoneThresholds:
    """Test zone bound resolution."""

    def test_custom_zones_used_verbatim(self, custom_zone_config):
        """Test that complete custom bounds are used as-is."""
        thresholds = resolve_zone_thresholds(custom_zone_config)

        assert thresholds.as_tuple() == (130, 150, 170, 190)
        assert thresholds.source == "custom"

    def test_custom_zones_win_over_max_hr(self):
        """Test that custom bounds take precedence over max heart rate."""
        config = HeartRateZoneConfig(
            zone_1_max=130,
            zone_2_max=150,
            zone_3_max=170,
            zone_4_max=190,
            max_heart_rate=200,
        )

        assert resolve_zone_thresholds(config, activity_max_hr=180).source == "custom"

    def test_percentages_of_max_hr(self):
        """Test 60/70/80/90% bounds from max heart rate."""
        config = HeartRateZoneConfig(max_heart_rate=190)

        thresholds = resolve_zone_thresholds(config)

        assert thresholds.as_tuple() == (114, 133, 152, 171)
        assert thresholds.source == "max_heart_rate"

    def test_percentages_round_half_up(self):
        """Test that x.5 bounds round up rather than to even."""
        # 185 * 0.90 = 166.5, which round() would send to 166
        config = HeartRateZoneConfig(max_heart_rate=185)

        assert resolve_zone_thresholds(config).zone_4_max == 167

    def test_partial_custom_zones_fall_back_entirely(self):
        """Test that one missing custom bound discards all of them."""
        config = HeartRateZoneConfig(
            zone_1_max=130, zone_2_max=150, zone_3_max=170, max_heart_rate=200
        )

        thresholds = resolve_zone_thresholds(config)

        assert thresholds.as_tuple() == (120, 140, 160, 180)

    def test_zero_custom_bound_counts_as_missing(self):
        """Test that a zero custom bound disables custom zones."""
        config = HeartRateZoneConfig(
            zone_1_max=0,
            zone_2_max=150,
            zone_3_max=170,
            zone_4_max=190,
            max_heart_rate=200,
        )

        assert resolve_zone_thresholds(config).source == "max_heart_rate"

    def test_activity_max_hr_preferred(self):
        """Test the activity's max heart rate beats the profile value."""
        config = HeartRateZoneConfig(max_heart_rate=200)

        thresholds = resolve_zone_thresholds(config, activity_max_hr=190)

        assert thresholds.as_tuple() == (114, 133, 152, 171)

    def test_no_configuration_raises(self):
        """Test that missing zones and max heart rate is a config error."""
        with pytest.raises(ConfigurationError):
            resolve_zone_thresholds(HeartRateZoneConfig())

    def test_non_ascending_custom_bounds_raise(self):
        """Test that custom bounds must be strictly ascending."""
        config = HeartRateZoneConfig(
            zone_1_max=150, zone_2_max=130, zone_3_max=170, zone_4_max=190
        )

        with pytest.raises(ConfigurationError):
            resolve_zone_thresholds(config)


class TestTallyZones:
    """Test time-in-zone tallies."""

    def test_mixed_samples(self, heart_rate_samples, custom_thresholds):
        """Test bucketing across every zone."""
        tally = tally_zones(heart_rate_samples, custom_thresholds)

        # 50 and 120 are both <= 130
        assert tally.as_dict() == {1: 2, 2: 1, 3: 1, 4: 1, 5: 1}

    def test_boundary_values_stay_in_lower_zone(self, custom_thresholds):
        """Test that a sample equal to a bound belongs to that zone."""
        tally = tally_zones([130, 150, 170, 190, 191], custom_thresholds)

        assert tally.as_dict() == {1: 1, 2: 1, 3: 1, 4: 1, 5: 1}

    def test_sum_equals_sample_count(self, custom_thresholds):
        """Test that the counts always add up to the number of samples."""
        rng = np.random.default_rng(7)
        samples = rng.integers(0, 230, size=3600)

        tally = tally_zones(samples, custom_thresholds)

        assert tally.total == len(samples)

    def test_empty_samples(self, custom_thresholds):
        """Test that no samples is an all-zero success."""
        tally = tally_zones([], custom_thresholds)

        assert tally.as_dict() == {1: 0, 2: 0, 3: 0, 4: 0, 5: 0}
        assert tally.total == 0

    def test_accepts_series(self, custom_thresholds):
        """Test that pandas Series input works."""
        tally = tally_zones(pd.Series([100, 200]), custom_thresholds)

        assert tally.zone_1 == 1
        assert tally.zone_5 == 1

    def test_negative_sample_raises(self, custom_thresholds):
        """Test that negative heart rates are rejected."""
        with pytest.raises(InvalidDataError):
            tally_zones([120, -1], custom_thresholds)

    def test_non_numeric_sample_raises(self, custom_thresholds):
        """Test that non-numeric heart rates are rejected."""
        with pytest.raises(InvalidDataError):
            tally_zones([120, "fast"], custom_thresholds)

    def test_time_columns(self, heart_rate_samples, custom_thresholds):
        """Test storage column naming."""
        columns = tally_zones(heart_rate_samples, custom_thresholds).as_time_columns()

        assert columns == {
            "zone_1_time": 2,
            "zone_2_time": 1,
            "zone_3_time": 1,
            "zone_4_time": 1,
            "zone_5_time": 1,
        }


class TestHeartRateZoneCalculator:
    """Test the stream-based zone calculator."""

    def test_calculate_from_stream(self, settings_with_max_hr: Settings):
        """Test zone times from a heartrate column."""
        calculator = HeartRateZoneCalculator(settings_with_max_hr)
        stream = pd.DataFrame({"time": range(5), "heartrate": [100, 120, 140, 160, 180]})

        metrics = calculator.calculate(stream)

        # Bounds for 190 bpm: 114/133/152/171
        assert metrics == {
            "zone_1_time": 1.0,
            "zone_2_time": 1.0,
            "zone_3_time": 1.0,
            "zone_4_time": 1.0,
            "zone_5_time": 1.0,
        }

    def test_missing_heartrate_column(self, settings_with_max_hr: Settings):
        """Test that streams without heart rate give zero metrics."""
        calculator = HeartRateZoneCalculator(settings_with_max_hr)

        metrics = calculator.calculate(pd.DataFrame({"time": [0, 1]}))

        assert sum(metrics.values()) == 0.0
        assert len(metrics) == 5

    def test_nan_samples_dropped(self, settings_with_max_hr: Settings):
        """Test that gaps in the heart rate stream are not tallied."""
        calculator = HeartRateZoneCalculator(settings_with_max_hr)
        stream = pd.DataFrame({"heartrate": [100, np.nan, 180]})

        metrics = calculator.calculate(stream)

        assert sum(metrics.values()) == 2.0

    def test_unconfigured_zones_raise(self):
        """Test that a stream cannot be tallied without zone configuration."""
        calculator = HeartRateZoneCalculator(Settings())

        with pytest.raises(ConfigurationError):
            calculator.calculate(pd.DataFrame({"heartrate": [120, 130]}))
