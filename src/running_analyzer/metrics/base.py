"""
Base classes and shared helpers for metric calculators.

Defines the interface that stream-based metric calculators should follow.
"""

import math
from abc import ABC, abstractmethod

import pandas as pd

from ..settings import Settings


def round_half_up(value: float, decimals: int = 0) -> float:
    """
    Round a value with halves going up, as a calculator would.

    Python's built-in round() uses banker's rounding, which would round
    54.5 bpm down to 54.

    Args:
        value: Value to round
        decimals: Number of decimal places to keep

    Returns:
        Rounded value
    """
    factor = 10**decimals
    return math.floor(value * factor + 0.5) / factor


class BaseMetricCalculator(ABC):
    """
    Abstract base class for metric calculators.

    Provides common functionality and enforces interface consistency.
    """

    def __init__(self, settings: Settings):
        """
        Initialize calculator with settings.

        Args:
            settings: Application settings containing thresholds and configuration
        """
        self.settings = settings

    @abstractmethod
    def calculate(self, stream_df: pd.DataFrame) -> dict[str, float]:
        """
        Calculate metrics from stream data.

        Args:
            stream_df: DataFrame containing activity stream data

        Returns:
            Dictionary of calculated metrics
        """
        raise NotImplementedError("Subclasses must implement calculate()")

    def _get_column(self, stream_df: pd.DataFrame, column: str) -> pd.Series | None:
        """
        Get a stream column with missing values dropped.

        Args:
            stream_df: Input dataframe
            column: Column name

        Returns:
            Series without NaNs, or None if the column is absent
        """
        if column not in stream_df.columns:
            return None
        return stream_df[column].dropna()
