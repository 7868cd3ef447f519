"""
VDOT estimation and inversion (Jack Daniels' running formula).

VDOT combines VO2max and running economy into a single fitness index. This
module estimates it from a performance, inverts it to predict times at other
distances, and derives training paces from it.

The forward formula has no closed-form inverse, so predict_time_from_vdot runs
a bounded binary search over whole seconds. Outside typical human speeds the
search can stop on its interval bound before reaching the 0.1 VDOT tolerance;
such results are returned with converged=False.
"""

import logging
import math
from collections.abc import Iterable
from datetime import date, timedelta

from ..constants import (
    RaceDistances,
    TimeConstants,
    TrainingPaceFactors,
    VdotCoefficients,
    VdotSearch,
)
from ..exceptions import InvalidDataError
from ..models import (
    PacePlan,
    PerformanceSample,
    RacePrediction,
    RacePredictionSet,
    TimePrediction,
)
from .base import round_half_up

logger = logging.getLogger(__name__)


def percent_max(minutes: float) -> float:
    """Fraction of VO2max sustainable for a race lasting the given minutes."""
    return (
        VdotCoefficients.PERCENT_MAX_BASE
        + VdotCoefficients.PERCENT_MAX_A
        * math.exp(VdotCoefficients.PERCENT_MAX_A_DECAY * minutes)
        + VdotCoefficients.PERCENT_MAX_B
        * math.exp(VdotCoefficients.PERCENT_MAX_B_DECAY * minutes)
    )


def oxygen_cost(velocity: float) -> float:
    """Oxygen cost in ml/kg/min of running at velocity meters per minute."""
    return (
        VdotCoefficients.VO2_INTERCEPT
        + VdotCoefficients.VO2_LINEAR * velocity
        + VdotCoefficients.VO2_QUADRATIC * velocity**2
    )


def estimate_vdot(distance_km: float, elapsed_seconds: float) -> float:
    """
    Calculate VDOT from a race performance.

    Args:
        distance_km: Distance in kilometers
        elapsed_seconds: Time in seconds

    Returns:
        VDOT rounded to one decimal place

    Raises:
        InvalidDataError: If distance or time is not strictly positive
    """
    if distance_km <= 0 or elapsed_seconds <= 0:
        raise InvalidDataError(
            f"VDOT needs positive distance and time, got {distance_km} km "
            f"in {elapsed_seconds}s"
        )

    meters = distance_km * TimeConstants.METERS_PER_KM
    minutes = elapsed_seconds / TimeConstants.SECONDS_PER_MINUTE
    velocity = meters / minutes

    vdot = oxygen_cost(velocity) / percent_max(minutes)
    return round_half_up(vdot, 1)


def predict_time_from_vdot(vdot: float, target_distance_km: float) -> TimePrediction:
    """
    Predict the time to cover a distance at a given VDOT.

    Binary search over [60, 36000] seconds. A longer time gives a lower VDOT
    for a fixed distance, so an estimate above the target means the candidate
    is too fast and the lower bound moves up.

    Args:
        vdot: Target VDOT
        target_distance_km: Distance in kilometers

    Returns:
        Predicted time. When the interval narrows to one second without
        reaching the tolerance, the bound closest to the target VDOT is
        returned with converged=False.
    """
    if target_distance_km <= 0:
        raise InvalidDataError("Target distance must be positive")

    low = VdotSearch.MIN_SECONDS
    high = VdotSearch.MAX_SECONDS

    while high - low > 1:
        mid = (low + high) // 2
        estimate = estimate_vdot(target_distance_km, mid)

        if abs(estimate - vdot) < VdotSearch.TOLERANCE:
            return TimePrediction(seconds=mid, converged=True)

        if estimate > vdot:
            low = mid
        else:
            high = mid

    best = min(
        (low, high),
        key=lambda seconds: abs(estimate_vdot(target_distance_km, seconds) - vdot),
    )
    # The initial bounds are never visited as a midpoint
    if abs(estimate_vdot(target_distance_km, best) - vdot) < VdotSearch.TOLERANCE:
        return TimePrediction(seconds=best, converged=True)

    logger.debug(
        f"VDOT search for {vdot} over {target_distance_km} km did not converge, "
        f"returning bound {best}s"
    )
    return TimePrediction(seconds=best, converged=False)


def derive_training_paces(vdot: float) -> PacePlan:
    """
    Calculate per-kilometer training paces from VDOT.

    Each pace is the 1 km time at a fixed fraction of VDOT.

    Args:
        vdot: Current VDOT

    Returns:
        Easy, marathon, threshold, interval and repetition paces
    """
    paces = {
        label: predict_time_from_vdot(vdot * factor, 1.0)
        for label, factor in TrainingPaceFactors.as_dict().items()
    }
    return PacePlan(**paces)


def derive_race_predictions(vdot: float) -> RacePredictionSet:
    """
    Predict the standard race distances from VDOT.

    Args:
        vdot: Current VDOT

    Returns:
        VDOT predictions for 5K, 10K, half marathon and marathon
    """
    predictions = {}
    for label, distance_km in RaceDistances.get_prediction_distances().items():
        prediction = predict_time_from_vdot(vdot, distance_km)
        predictions[label] = RacePrediction(
            label=label,
            distance_km=distance_km,
            seconds=prediction.seconds,
            converged=prediction.converged,
        )
    return RacePredictionSet(method="vdot", predictions=predictions)


def best_recent_vdot(
    samples: Iterable[PerformanceSample],
    as_of: date,
    window_days: int = VdotSearch.RECENT_WINDOW_DAYS,
) -> float | None:
    """
    Calculate the highest VDOT among runs in the trailing window.

    Args:
        samples: Performance history, in any order
        as_of: Last day of the window
        window_days: Length of the window in days

    Returns:
        Best VDOT, or None if no run with a positive time falls in the window
    """
    window_start = as_of - timedelta(days=window_days)
    vdots = []
    for sample in samples:
        if not window_start <= sample.date <= as_of:
            continue
        if sample.elapsed_seconds <= 0:
            logger.warning(
                f"Skipping run on {sample.date} with no elapsed time for VDOT"
            )
            continue
        vdots.append(estimate_vdot(sample.distance_km, sample.elapsed_seconds))

    if not vdots:
        logger.info(f"No runs between {window_start} and {as_of} to estimate VDOT")
        return None
    return max(vdots)
