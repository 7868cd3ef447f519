"""
Race-time prediction with the Riegel formula.

T2 = T1 * (D2 / D1) ** 1.06, where 1.06 is an empirical fatigue exponent.
"""

import logging
import math
from collections.abc import Iterable
from datetime import date

from ..constants import RaceDistances, RiegelConstants
from ..exceptions import InvalidDataError
from ..models import PerformanceSample, RacePrediction, RacePredictionSet

logger = logging.getLogger(__name__)


def predict_riegel(
    known_distance_km: float, known_seconds: float, target_distance_km: float
) -> int:
    """
    Extrapolate a finish time from a performance at another distance.

    Args:
        known_distance_km: Distance of the known performance
        known_seconds: Time of the known performance in seconds
        target_distance_km: Distance to predict a time for

    Returns:
        Predicted time in whole seconds (floored)

    Raises:
        InvalidDataError: If any input is not strictly positive
    """
    if known_distance_km <= 0 or target_distance_km <= 0:
        raise InvalidDataError("Distances must be positive for Riegel prediction")
    if known_seconds <= 0:
        raise InvalidDataError("Known time must be positive for Riegel prediction")

    ratio = target_distance_km / known_distance_km
    return math.floor(known_seconds * ratio**RiegelConstants.FATIGUE_EXPONENT)


def latest_performances(
    samples: Iterable[PerformanceSample],
    as_of: date,
    count: int = RiegelConstants.RECENT_RUNS,
) -> list[PerformanceSample]:
    """
    Keep the most recent runs on or before a date.

    Args:
        samples: Performance history
        as_of: Reference date; later runs are dropped
        count: Number of runs to keep

    Returns:
        Up to count runs, newest first. Runs on the same day keep their
        history order.
    """
    eligible = [s for s in samples if s.date <= as_of]
    return sorted(eligible, key=lambda s: s.date, reverse=True)[:count]


def select_reference_performance(
    samples: Iterable[PerformanceSample],
) -> PerformanceSample | None:
    """
    Pick the fastest run by pace to anchor Riegel predictions.

    Runs without a positive elapsed time are ignored. Ties go to the run
    encountered first.

    Args:
        samples: Candidate performances

    Returns:
        The run with the lowest seconds-per-km pace, or None if none qualify
    """
    candidates = [s for s in samples if s.elapsed_seconds > 0]
    if not candidates:
        return None
    return min(candidates, key=lambda s: s.pace_seconds_per_km)


def predict_race_times(reference: PerformanceSample) -> RacePredictionSet:
    """
    Predict the standard race distances from a single reference run.

    Args:
        reference: Performance to extrapolate from

    Returns:
        Riegel predictions for 5K, 10K, half marathon and marathon
    """
    predictions = {}
    for label, distance_km in RaceDistances.get_prediction_distances().items():
        seconds = predict_riegel(
            reference.distance_km, reference.elapsed_seconds, distance_km
        )
        predictions[label] = RacePrediction(
            label=label, distance_km=distance_km, seconds=seconds
        )

    logger.debug(
        f"Riegel predictions from {reference.distance_km} km in "
        f"{reference.elapsed_seconds}s"
    )
    return RacePredictionSet(method="riegel", predictions=predictions)
