"""
Rule-based training insights.

This module turns the last two weeks of runs and the current training load
into actionable insights:
- Overtraining risk from a deeply negative TSB
- Streaks of consecutive hard runs
- Week-over-week mileage jumps
- Low training consistency
- Peak racing form
"""

import logging
from collections.abc import Iterable
from datetime import date, timedelta

import pandas as pd

from ..constants import InsightThresholds
from ..models import Insight, RunRecord, TrainingLoadSummary

logger = logging.getLogger(__name__)


def recent_runs(
    runs: Iterable[RunRecord],
    as_of: date,
    window_days: int = InsightThresholds.WINDOW_DAYS,
) -> list[RunRecord]:
    """Runs dated within window_days before as_of (inclusive), oldest first."""
    start = as_of - timedelta(days=window_days)
    return sorted(
        (run for run in runs if start <= run.date <= as_of), key=lambda r: r.date
    )


def longest_high_rpe_streak(runs: Iterable[RunRecord]) -> int:
    """
    Count the longest run of consecutive hard efforts.

    Args:
        runs: Runs in chronological order

    Returns:
        Length of the longest streak with RPE >= 8; a missing RPE breaks it
    """
    longest = 0
    current = 0
    for run in runs:
        if run.rpe and run.rpe >= InsightThresholds.HIGH_RPE:
            current += 1
            longest = max(longest, current)
        else:
            current = 0
    return longest


def weekly_mileage(runs: Iterable[RunRecord]) -> list[float]:
    """
    Total distance per calendar week, weeks starting on Sunday.

    Args:
        runs: Completed runs

    Returns:
        Kilometers per week, oldest week first. Weeks without any distance
        are omitted.
    """
    records = [
        {
            # weekday() is 0 for Monday; shift so weeks start on Sunday
            "week": run.date - timedelta(days=(run.date.weekday() + 1) % 7),
            "distance_km": run.distance_km,
        }
        for run in runs
        if run.distance_km
    ]
    if not records:
        return []
    df = pd.DataFrame(records)
    return df.groupby("week")["distance_km"].sum().sort_index().tolist()


def overtraining_insight(tsb: float) -> Insight | None:
    """Flag dangerous or elevated fatigue from the training stress balance."""
    if tsb < InsightThresholds.TSB_DANGER:
        return Insight(
            type="danger",
            category="overtraining",
            title="High Overtraining Risk Detected",
            description=(
                f"Your Training Stress Balance (TSB) is {tsb:.1f}, indicating very "
                "high fatigue levels. You've been training hard without adequate "
                "recovery."
            ),
            recommendation=(
                "Take 2-3 easy days or a complete rest day. Reduce training volume "
                "by 30-40% this week. Focus on sleep, nutrition, and hydration."
            ),
            priority="high",
        )
    if tsb < InsightThresholds.TSB_WARNING:
        return Insight(
            type="warning",
            category="overtraining",
            title="Elevated Fatigue Levels",
            description=(
                f"Your TSB is {tsb:.1f}, showing significant accumulated fatigue. "
                "While building fitness, you need to monitor recovery closely."
            ),
            recommendation=(
                "Include at least one easy recovery run this week. Ensure 8+ hours "
                "of sleep. Consider a rest day if feeling unusually tired."
            ),
            priority="medium",
        )
    return None


def high_rpe_insight(runs: list[RunRecord]) -> Insight | None:
    """Flag three or more consecutive runs at RPE 8 or above."""
    streak = longest_high_rpe_streak(runs)
    if streak < InsightThresholds.HIGH_RPE_STREAK:
        return None
    return Insight(
        type="warning",
        category="recovery",
        title="Consecutive High-Intensity Runs Detected",
        description=(
            f"You've completed {streak} consecutive runs with RPE >= 8. This "
            "pattern increases injury risk and can lead to burnout."
        ),
        recommendation=(
            "Schedule at least 2 easy runs (RPE 4-6) before your next hard "
            "workout. Follow the hard-easy principle."
        ),
        priority="high",
    )


def mileage_increase_insight(runs: list[RunRecord]) -> Insight | None:
    """Flag a week-over-week mileage increase above 20%."""
    weeks = weekly_mileage(runs)
    if len(weeks) < 2:
        return None

    previous_week, last_week = weeks[-2], weeks[-1]
    increase = (last_week - previous_week) / previous_week * 100
    if increase <= InsightThresholds.MILEAGE_INCREASE_PERCENT:
        return None
    return Insight(
        type="warning",
        category="injury_risk",
        title="Rapid Mileage Increase Detected",
        description=(
            f"Your weekly mileage increased by {increase:.0f}% (from "
            f"{previous_week:.1f}km to {last_week:.1f}km). The 10% rule suggests "
            "limiting increases to 10% per week."
        ),
        recommendation=(
            "Reduce mileage this week to allow your body to adapt. Increase "
            "gradually by no more than 10% per week."
        ),
        priority="high",
    )


def consistency_insight(
    runs: list[RunRecord], window_days: int = InsightThresholds.WINDOW_DAYS
) -> Insight | None:
    """Flag fewer than 4 run days and fewer than 5 runs in the window."""
    run_days = len({run.date for run in runs})
    if run_days >= InsightThresholds.MIN_RUN_DAYS:
        return None
    if len(runs) >= InsightThresholds.MIN_RUNS:
        return None
    return Insight(
        type="info",
        category="consistency",
        title="Low Training Consistency",
        description=(
            f"You've only completed {len(runs)} runs in the last "
            f"{window_days} days. Consistency is key for "
            "improvement."
        ),
        recommendation=(
            "Try to maintain at least 3-4 runs per week. Even short, easy runs "
            "help build consistency and aerobic base."
        ),
        priority="medium",
    )


def peak_form_insight(tsb: float, ctl: float) -> Insight | None:
    """Flag a fresh and fit athlete ready to race."""
    fresh = InsightThresholds.PEAK_TSB_LOW < tsb < InsightThresholds.PEAK_TSB_HIGH
    if not fresh or ctl <= InsightThresholds.PEAK_MIN_CTL:
        return None
    return Insight(
        type="success",
        category="performance",
        title="Peak Form Detected",
        description=(
            f"Your TSB is {tsb:.1f} with CTL of {ctl:.1f}. You're fresh and fit, "
            "in perfect racing form!"
        ),
        recommendation=(
            "This is an excellent time for a race or hard workout. Your fitness "
            "is high and fatigue is low."
        ),
        priority="high",
    )


def generate_insights(
    runs: Iterable[RunRecord],
    load: TrainingLoadSummary,
    as_of: date,
    window_days: int = InsightThresholds.WINDOW_DAYS,
) -> list[Insight]:
    """
    Generate training insights as of a date.

    No insights are produced without at least one run in the window, even
    when the training load alone would trigger one.

    Args:
        runs: Completed runs
        load: Training load summary as of the same date
        as_of: Reference date
        window_days: Days of history the run-based rules look at

    Returns:
        Insights in rule order: overtraining, hard-run streak, mileage jump,
        consistency, peak form
    """
    window = recent_runs(runs, as_of, window_days)
    if not window:
        logger.debug(f"No runs in the {window_days} days before {as_of}")
        return []

    tsb = load.training_stress_balance
    candidates = [
        overtraining_insight(tsb),
        high_rpe_insight(window),
        mileage_increase_insight(window),
        consistency_insight(window, window_days),
        peak_form_insight(tsb, load.chronic_training_load),
    ]
    insights = [insight for insight in candidates if insight is not None]
    logger.info(f"Generated {len(insights)} training insights as of {as_of}")
    return insights
