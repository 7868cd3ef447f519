"""
Training load calculations.

This module handles training stress metrics for running:
- Training Stress Score (TSS) per run, averaged over the available methods
- CTL: Chronic Training Load (42-day weighted average), fitness
- ATL: Acute Training Load (7-day weighted average), fatigue
- TSB: Training Stress Balance (CTL - ATL), form
"""

import logging
import math
from collections.abc import Iterable
from datetime import date, timedelta

import pandas as pd

from ..constants import FormStatusThresholds, TimeConstants, TSSConstants
from ..models import FormStatus, RunRecord, TrainingLoadSummary
from ..settings import Settings

logger = logging.getLogger(__name__)


def calculate_tss(run: RunRecord, max_heart_rate: float | None = None) -> float:
    """
    Calculate Training Stress Score for a run.

    Averages every method the run has data for:
    1. RPE-based: hours * RPE * 10
    2. Distance-based: km * run type intensity * 10
    3. HR-based: hours * (average HR / max HR) * 100

    Args:
        run: Completed run
        max_heart_rate: Athlete max heart rate, required for the HR method

    Returns:
        Average TSS of the available methods, or 0 if none apply
    """
    scores = []
    hours = (run.elapsed_seconds or 0) / TimeConstants.SECONDS_PER_HOUR

    if run.rpe and hours > 0:
        scores.append(hours * run.rpe * TSSConstants.RPE_FACTOR)

    if run.distance_km:
        intensity = TSSConstants.get_run_type_intensities().get(
            run.run_type or "", TSSConstants.DEFAULT_INTENSITY
        )
        scores.append(run.distance_km * intensity * TSSConstants.DISTANCE_FACTOR)

    if run.average_hr and max_heart_rate and hours > 0:
        hr_ratio = run.average_hr / max_heart_rate
        scores.append(hours * hr_ratio * TSSConstants.HR_FACTOR)

    return sum(scores) / len(scores) if scores else 0.0


def daily_tss(
    runs: Iterable[RunRecord], max_heart_rate: float | None = None
) -> pd.Series:
    """
    Sum TSS per calendar day.

    Args:
        runs: Completed runs
        max_heart_rate: Athlete max heart rate for HR-based TSS

    Returns:
        Series of TSS indexed by date, sorted ascending
    """
    records = [
        {"date": run.date, "tss": calculate_tss(run, max_heart_rate)} for run in runs
    ]
    if not records:
        return pd.Series(dtype=float, name="tss")
    df = pd.DataFrame(records)
    return df.groupby("date")["tss"].sum().sort_index()


def _weighted_load(daily: pd.Series, as_of: date, days: int) -> float:
    """Exponentially weighted average of the last `days` days of TSS."""
    if days <= 0:
        return 0.0
    load = 0.0
    for i in range(days):
        day = as_of - timedelta(days=i)
        load += float(daily.get(day, 0.0)) * math.exp(-i / days)
    return load / days


def calculate_ctl(daily: pd.Series, as_of: date, days: int = 42) -> float:
    """Chronic Training Load: long-term fitness."""
    return _weighted_load(daily, as_of, days)


def calculate_atl(daily: pd.Series, as_of: date, days: int = 7) -> float:
    """Acute Training Load: short-term fatigue."""
    return _weighted_load(daily, as_of, days)


def calculate_tsb(ctl: float, atl: float) -> float:
    """Training Stress Balance: CTL - ATL."""
    return ctl - atl


def form_status(tsb: float) -> FormStatus:
    """
    Interpret a Training Stress Balance value.

    Args:
        tsb: Training Stress Balance

    Returns:
        Form status with a short description and display color
    """
    if tsb > FormStatusThresholds.VERY_FRESH:
        return FormStatus(
            status="Very Fresh",
            description="Well rested, possibly losing fitness. "
            "Good time for a race or hard workout.",
            color="green",
        )
    if tsb > FormStatusThresholds.FRESH:
        return FormStatus(
            status="Fresh",
            description="Good form for racing or quality workouts.",
            color="lightgreen",
        )
    if tsb > FormStatusThresholds.NEUTRAL:
        return FormStatus(
            status="Neutral",
            description="Normal training state. Balance of fitness and fatigue.",
            color="yellow",
        )
    if tsb > FormStatusThresholds.FATIGUED:
        return FormStatus(
            status="Fatigued",
            description="Building fitness but accumulating fatigue. "
            "Monitor recovery.",
            color="orange",
        )
    return FormStatus(
        status="Very Fatigued",
        description="High overtraining risk. Prioritize recovery.",
        color="red",
    )


class TrainingLoadCalculator:
    """Summarizes training load for a run history."""

    def __init__(self, settings: Settings):
        """
        Initialize the calculator.

        Args:
            settings: Application settings with load windows and max heart rate
        """
        self.settings = settings

    def summarize(self, runs: Iterable[RunRecord], as_of: date) -> TrainingLoadSummary:
        """
        Calculate CTL, ATL and TSB as of a date.

        Args:
            runs: Completed runs
            as_of: Day to calculate the load for

        Returns:
            Training load summary
        """
        daily = daily_tss(runs, self.settings.hr_zones.max_heart_rate)
        ctl = calculate_ctl(daily, as_of, self.settings.ctl_days)
        atl = calculate_atl(daily, as_of, self.settings.atl_days)
        tsb = calculate_tsb(ctl, atl)

        logger.debug(f"Training load on {as_of}: CTL={ctl:.1f} ATL={atl:.1f}")
        return TrainingLoadSummary(
            chronic_training_load=ctl,
            acute_training_load=atl,
            training_stress_balance=tsb,
        )
