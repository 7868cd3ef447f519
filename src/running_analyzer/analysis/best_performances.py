"""
Best performance ranking.

Keeps the fastest runs at each standard race distance. Only runs whose
distance matches a standard distance exactly (1K, 5K, 10K, half marathon or
marathon) are ranked.
"""

import logging
import math
from collections.abc import Iterable

from ..constants import BestPerformanceConstants, RaceDistances
from ..metrics.duration import format_pace
from ..models import BestPerformance, PerformanceSample

logger = logging.getLogger(__name__)


def match_standard_distance(distance_km: float) -> str | None:
    """
    Map a distance to its standard race label.

    Args:
        distance_km: Run distance in kilometers

    Returns:
        Label such as '5K' or 'Marathon', or None for non-standard distances
    """
    for standard_km, label in RaceDistances.get_best_performance_labels().items():
        if math.isclose(
            distance_km,
            standard_km,
            rel_tol=0.0,
            abs_tol=BestPerformanceConstants.DISTANCE_TOLERANCE_KM,
        ):
            return label
    return None


def rank_best_performances(
    samples: Iterable[PerformanceSample],
    top_n: int = BestPerformanceConstants.TOP_N,
) -> dict[str, list[BestPerformance]]:
    """
    Rank the fastest runs at each standard distance.

    Args:
        samples: Performance history
        top_n: Number of performances to keep per distance

    Returns:
        Ranked performances keyed by distance label, fastest first. Labels
        with no qualifying runs are omitted.
    """
    by_label: dict[str, list[PerformanceSample]] = {}
    for sample in samples:
        label = match_standard_distance(sample.distance_km)
        if label is None:
            logger.debug(f"Skipping non-standard distance {sample.distance_km} km")
            continue
        if sample.elapsed_seconds <= 0:
            continue
        by_label.setdefault(label, []).append(sample)

    ranked = {}
    for label, runs in by_label.items():
        # sorted() is stable, so earlier runs win ties
        fastest = sorted(runs, key=lambda s: s.elapsed_seconds)[:top_n]
        ranked[label] = [
            BestPerformance(
                label=label,
                distance_km=run.distance_km,
                time_seconds=run.elapsed_seconds,
                pace=format_pace(run.pace_seconds_per_km),
                date=run.date,
                rank=rank,
            )
            for rank, run in enumerate(fastest, start=1)
        ]
    return ranked
