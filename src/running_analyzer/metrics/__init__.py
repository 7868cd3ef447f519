"""
Metrics calculation modules.

This package contains all metric calculation logic, organized by type:
- duration: Duration and pace string conversions
- riegel: Riegel race-time prediction
- vdot: VDOT estimation, inversion and training paces
- heartrate: Heart rate zone resolution and time-in-zone
- training_load: TSS, CTL, ATL and TSB
- base: Base calculator class and shared helpers
"""

from .duration import format_duration, format_pace, parse_duration, parse_duration_strict
from .heartrate import HeartRateZoneCalculator, resolve_zone_thresholds, tally_zones
from .riegel import (
    latest_performances,
    predict_race_times,
    predict_riegel,
    select_reference_performance,
)
from .training_load import (
    TrainingLoadCalculator,
    calculate_atl,
    calculate_ctl,
    calculate_tsb,
    calculate_tss,
    daily_tss,
    form_status,
)
from .vdot import (
    best_recent_vdot,
    derive_race_predictions,
    derive_training_paces,
    estimate_vdot,
    predict_time_from_vdot,
)

__all__ = [
    "HeartRateZoneCalculator",
    "TrainingLoadCalculator",
    "best_recent_vdot",
    "calculate_atl",
    "calculate_ctl",
    "calculate_tsb",
    "calculate_tss",
    "daily_tss",
    "derive_race_predictions",
    "derive_training_paces",
    "estimate_vdot",
    "form_status",
    "latest_performances",
    "format_duration",
    "format_pace",
    "parse_duration",
    "parse_duration_strict",
    "predict_race_times",
    "predict_riegel",
    "predict_time_from_vdot",
    "resolve_zone_thresholds",
    "select_reference_performance",
    "tally_zones",
]
