"""
Custom exceptions for the Running Analyzer package.

This module defines all custom exceptions used throughout the application,
providing clear error hierarchies and specific error types for different scenarios.
"""


class RunningAnalyzerError(Exception):
    """Base exception for all Running Analyzer errors."""


class ConfigurationError(RunningAnalyzerError):
    """Raised when there is an issue with configuration settings."""


class ValidationError(RunningAnalyzerError):
    """Raised when data validation fails."""


class InvalidDataError(ValidationError):
    """Raised when input data is invalid or missing required fields."""


class DurationParseError(ValidationError):
    """Raised when a duration string cannot be parsed in strict mode."""


class DataLoadError(RunningAnalyzerError):
    """Raised when there is an error loading data files."""
