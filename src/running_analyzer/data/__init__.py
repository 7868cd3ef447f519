"""
Data access layer.

This package contains modules for loading run history and stream data.
"""

from .loader import RunHistoryLoader, load_heart_rate_file

__all__ = [
    "RunHistoryLoader",
    "load_heart_rate_file",
]
