"""
Constants used throughout the Running Analyzer package.

This module centralizes all magic numbers and commonly used values to improve
maintainability and clarity.
"""

from typing import Final


# === Time Constants ===
class TimeConstants:
    """Time-related constants in seconds."""

    SECONDS_PER_MINUTE: Final[int] = 60
    SECONDS_PER_HOUR: Final[int] = 3600
    METERS_PER_KM: Final[int] = 1000


# === Riegel Model ===
class RiegelConstants:
    """Constants for the Riegel race-time model."""

    FATIGUE_EXPONENT: Final[float] = 1.06  # Empirical, not user-configurable
    RECENT_RUNS: Final[int] = 20  # Reference run is chosen among the latest runs


# === Jack Daniels VDOT Model ===
class VdotCoefficients:
    """Coefficients of the Daniels oxygen-cost and percent-max curves."""

    # %VO2max sustainable for a given duration (minutes)
    PERCENT_MAX_BASE: Final[float] = 0.8
    PERCENT_MAX_A: Final[float] = 0.1894393
    PERCENT_MAX_A_DECAY: Final[float] = -0.012778
    PERCENT_MAX_B: Final[float] = 0.2989558
    PERCENT_MAX_B_DECAY: Final[float] = -0.1932605

    # Oxygen cost (ml/kg/min) for a velocity in meters per minute
    VO2_INTERCEPT: Final[float] = -4.60
    VO2_LINEAR: Final[float] = 0.182258
    VO2_QUADRATIC: Final[float] = 0.000104


class VdotSearch:
    """Bounds and tolerance of the time-from-VDOT binary search."""

    MIN_SECONDS: Final[int] = 60  # 1 minute
    MAX_SECONDS: Final[int] = 36000  # 10 hours
    TOLERANCE: Final[float] = 0.1
    RECENT_WINDOW_DAYS: Final[int] = 30


# === Training Pace Factors (fraction of VDOT) ===
class TrainingPaceFactors:
    """Intensity factors applied to VDOT for each training pace."""

    EASY: Final[float] = 0.72
    MARATHON: Final[float] = 0.85
    THRESHOLD: Final[float] = 0.855
    INTERVAL: Final[float] = 0.975
    REPETITION: Final[float] = 1.10

    @classmethod
    def as_dict(cls) -> dict[str, float]:
        """Get all pace factors keyed by pace label."""
        return {
            "easy": cls.EASY,
            "marathon": cls.MARATHON,
            "threshold": cls.THRESHOLD,
            "interval": cls.INTERVAL,
            "repetition": cls.REPETITION,
        }


# === Standard Race Distances ===
class RaceDistances:
    """Standard race distances in kilometers."""

    FIVE_K: Final[float] = 5.0
    TEN_K: Final[float] = 10.0
    HALF_MARATHON: Final[float] = 21.0975
    MARATHON: Final[float] = 42.195

    @classmethod
    def get_prediction_distances(cls) -> dict[str, float]:
        """Get the distances used for race predictions."""
        return {
            "5K": cls.FIVE_K,
            "10K": cls.TEN_K,
            "Half Marathon": cls.HALF_MARATHON,
            "Marathon": cls.MARATHON,
        }

    @classmethod
    def get_best_performance_labels(cls) -> dict[float, str]:
        """Get the distances tracked for best performances."""
        return {
            1.0: "1K",
            5.0: "5K",
            10.0: "10K",
            21.1: "Half Marathon",
            21.0975: "Half Marathon",  # Official half marathon distance
            42.2: "Marathon",
            42.195: "Marathon",  # Official marathon distance
        }


# === Heart Rate Zone Thresholds ===
class HeartRateZoneThresholds:
    """Heart rate zone upper bounds as percentages of max heart rate."""

    ZONE_1_MAX: Final[float] = 0.60  # Recovery
    ZONE_2_MAX: Final[float] = 0.70  # Endurance
    ZONE_3_MAX: Final[float] = 0.80  # Tempo
    ZONE_4_MAX: Final[float] = 0.90  # Threshold
    # Zone 5 is everything above 0.90

    @classmethod
    def as_tuple(cls) -> tuple[float, float, float, float]:
        """Get the four upper bounds in ascending order."""
        return (cls.ZONE_1_MAX, cls.ZONE_2_MAX, cls.ZONE_3_MAX, cls.ZONE_4_MAX)


# === Training Load Windows ===
class TrainingLoadWindows:
    """Windows for training load calculations."""

    ATL_DAYS: Final[int] = 7  # Acute Training Load (Fatigue)
    CTL_DAYS: Final[int] = 42  # Chronic Training Load (Fitness)


# === TSS Calculation Constants ===
class TSSConstants:
    """Constants for Training Stress Score calculations."""

    RPE_FACTOR: Final[int] = 10  # hours * RPE * 10
    DISTANCE_FACTOR: Final[int] = 10  # km * intensity * 10
    HR_FACTOR: Final[int] = 100  # hours * (avg HR / max HR) * 100
    DEFAULT_INTENSITY: Final[float] = 0.7

    @classmethod
    def get_run_type_intensities(cls) -> dict[str, float]:
        """Get the intensity factor for each run type."""
        return {
            "Easy Run": 0.6,
            "Long Run": 0.7,
            "Tempo Run": 0.85,
            "Quality Run": 0.95,
        }


# === Form Status Thresholds ===
class FormStatusThresholds:
    """TSB thresholds separating form status bands."""

    VERY_FRESH: Final[float] = 25.0
    FRESH: Final[float] = 10.0
    NEUTRAL: Final[float] = -10.0
    FATIGUED: Final[float] = -30.0
    # Below -30 is very fatigued


# === Training Insights ===
class InsightThresholds:
    """Thresholds for the rule-based training insights."""

    WINDOW_DAYS: Final[int] = 14
    TSB_DANGER: Final[float] = -30.0
    TSB_WARNING: Final[float] = -20.0
    HIGH_RPE: Final[float] = 8.0
    HIGH_RPE_STREAK: Final[int] = 3
    MILEAGE_INCREASE_PERCENT: Final[float] = 20.0
    MIN_RUN_DAYS: Final[int] = 4
    MIN_RUNS: Final[int] = 5
    PEAK_TSB_LOW: Final[float] = 10.0
    PEAK_TSB_HIGH: Final[float] = 25.0
    PEAK_MIN_CTL: Final[float] = 50.0


# === Best Performances ===
class BestPerformanceConstants:
    """Constants for best performance ranking."""

    TOP_N: Final[int] = 3
    DISTANCE_TOLERANCE_KM: Final[float] = 1e-6


# === CSV Parsing ===
class CSVConstants:
    """Constants for CSV file parsing."""

    DEFAULT_SEPARATOR: Final[str] = ";"  # Semicolon-separated format
    DEFAULT_ENCODING: Final[str] = "utf-8"
