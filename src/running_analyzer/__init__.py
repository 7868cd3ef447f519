"""Running Analyzer - a package for analyzing running performances."""

__version__ = "0.3.0"

from . import analysis, constants, data, exceptions, metrics, models
from .analysis import PerformanceAnalyzer, generate_insights, rank_best_performances
from .data import RunHistoryLoader
from .metrics import (
    HeartRateZoneCalculator,
    TrainingLoadCalculator,
    best_recent_vdot,
    derive_race_predictions,
    derive_training_paces,
    estimate_vdot,
    format_duration,
    parse_duration,
    parse_duration_strict,
    predict_riegel,
    predict_time_from_vdot,
    tally_zones,
)
from .models import (
    HeartRateZoneConfig,
    Insight,
    PacePlan,
    PerformanceReport,
    PerformanceSample,
    RacePredictionSet,
    TimePrediction,
    ZoneTally,
    ZoneThresholds,
)


def get_version() -> str:
    """Get the current version of running_analyzer."""
    return __version__


def get_package_info() -> dict[str, str]:
    """Get package information including name and version."""
    return {
        "name": "running-analyzer",
        "version": __version__,
        "description": "A package for analyzing running performances",
    }


__all__ = [
    # Version & Info
    "get_version",
    "get_package_info",
    # Models
    "HeartRateZoneConfig",
    "Insight",
    "PacePlan",
    "PerformanceReport",
    "PerformanceSample",
    "RacePredictionSet",
    "TimePrediction",
    "ZoneTally",
    "ZoneThresholds",
    # Metrics
    "best_recent_vdot",
    "derive_race_predictions",
    "derive_training_paces",
    "estimate_vdot",
    "format_duration",
    "parse_duration",
    "parse_duration_strict",
    "predict_riegel",
    "predict_time_from_vdot",
    "tally_zones",
    # Calculators
    "HeartRateZoneCalculator",
    "TrainingLoadCalculator",
    # Data Layer
    "RunHistoryLoader",
    # Analysis Layer
    "PerformanceAnalyzer",
    "generate_insights",
    "rank_best_performances",
    # Modules
    "analysis",
    "constants",
    "data",
    "exceptions",
    "metrics",
    "models",
]
