"""
Performance analysis.

This module combines the VDOT and Riegel models into a single report of the
runner's current fitness.
"""

import logging
from collections.abc import Sequence
from datetime import date

from ..metrics.riegel import (
    latest_performances,
    predict_race_times,
    select_reference_performance,
)
from ..metrics.vdot import (
    best_recent_vdot,
    derive_race_predictions,
    derive_training_paces,
)
from ..models import PerformanceReport, PerformanceSample
from ..settings import Settings

logger = logging.getLogger(__name__)


class PerformanceAnalyzer:
    """
    Service for estimating fitness and predicting race times.

    The VDOT and Riegel predictions are independent models and may disagree;
    both are reported.
    """

    def __init__(self, settings: Settings):
        """
        Initialize the analyzer.

        Args:
            settings: Application settings
        """
        self.settings = settings
        self.logger = logging.getLogger(__name__)

    def analyze(
        self, samples: Sequence[PerformanceSample], as_of: date
    ) -> PerformanceReport:
        """
        Build a performance report as of a date.

        VDOT comes from the best run in the trailing window. Riegel predictions
        come from the fastest-paced of the latest runs up to as_of.

        Args:
            samples: Performance history
            as_of: Reference date

        Returns:
            Report; VDOT fields are None when no run falls in the window and
            Riegel fields are None when no recent run has a positive time
        """
        report = PerformanceReport(as_of=as_of)

        vdot = best_recent_vdot(samples, as_of, self.settings.vdot_window_days)
        if vdot is not None:
            report.vdot = vdot
            report.training_paces = derive_training_paces(vdot)
            report.vdot_predictions = derive_race_predictions(vdot)
            self.logger.info(f"VDOT as of {as_of}: {vdot}")

        latest = latest_performances(
            samples, as_of, self.settings.riegel_recent_runs
        )
        reference = select_reference_performance(latest)
        if reference is not None:
            report.reference = reference
            report.riegel_predictions = predict_race_times(reference)
            self.logger.info(
                f"Riegel reference: {reference.distance_km} km on {reference.date}"
            )

        return report
