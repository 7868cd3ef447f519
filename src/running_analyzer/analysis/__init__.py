"""
Analysis and computation layer.

This package contains modules that combine metrics into reports, rankings
and training insights.
"""

from .analyzer import PerformanceAnalyzer
from .best_performances import match_standard_distance, rank_best_performances
from .insights import generate_insights

__all__ = [
    "PerformanceAnalyzer",
    "generate_insights",
    "match_standard_distance",
    "rank_best_performances",
]
