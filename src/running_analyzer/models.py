"""
Data models for the Running Analyzer package.

This module defines all the core data structures used throughout the application,
ensuring type safety and data validation using Pydantic models.
"""

from datetime import date as Date
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class PerformanceSample(BaseModel):
    """One completed run usable for fitness estimation."""

    model_config = ConfigDict(frozen=True)

    distance_km: float = Field(..., gt=0, description="Distance in kilometers")
    elapsed_seconds: int = Field(..., ge=0, description="Elapsed time in seconds")
    date: Date = Field(..., description="Date the run was completed")

    @property
    def pace_seconds_per_km(self) -> float:
        """Average pace in seconds per kilometer."""
        return self.elapsed_seconds / self.distance_km


class TimePrediction(BaseModel):
    """A predicted duration and whether the search reached its tolerance."""

    model_config = ConfigDict(frozen=True)

    seconds: int = Field(..., ge=0, description="Predicted time in seconds")
    converged: bool = Field(
        True, description="False if the search stopped on its interval bound"
    )

    @property
    def formatted(self) -> str:
        """Predicted time as H:MM:SS or M:SS."""
        from .metrics.duration import format_duration

        return format_duration(self.seconds)


class PacePlan(BaseModel):
    """Per-kilometer training paces derived from a single VDOT."""

    easy: TimePrediction = Field(..., description="Easy pace per km")
    marathon: TimePrediction = Field(..., description="Marathon pace per km")
    threshold: TimePrediction = Field(..., description="Threshold pace per km")
    interval: TimePrediction = Field(..., description="Interval pace per km")
    repetition: TimePrediction = Field(..., description="Repetition pace per km")

    def as_formatted(self) -> dict[str, str]:
        """Return paces as label:"M:SS" dictionary."""
        return {
            label: prediction.formatted
            for label, prediction in self.as_dict().items()
        }

    def as_dict(self) -> dict[str, TimePrediction]:
        """Return paces keyed by label, easiest first."""
        return {
            "easy": self.easy,
            "marathon": self.marathon,
            "threshold": self.threshold,
            "interval": self.interval,
            "repetition": self.repetition,
        }


class RacePrediction(BaseModel):
    """Predicted finish time for a single race distance."""

    label: str = Field(..., description="Race label, e.g. '10K'")
    distance_km: float = Field(..., gt=0, description="Race distance in kilometers")
    seconds: int = Field(..., ge=0, description="Predicted finish time in seconds")
    converged: bool = Field(True, description="Whether the prediction converged")

    @property
    def formatted(self) -> str:
        """Finish time as H:MM:SS or M:SS."""
        from .metrics.duration import format_duration

        return format_duration(self.seconds)

    @property
    def pace_seconds_per_km(self) -> float:
        """Average pace needed for the predicted time."""
        return self.seconds / self.distance_km

    @property
    def formatted_pace(self) -> str:
        """Average pace as M:SS/km."""
        from .metrics.duration import format_pace

        return format_pace(self.pace_seconds_per_km)


class RacePredictionSet(BaseModel):
    """Predictions for the standard race distances."""

    method: Literal["riegel", "vdot"] = Field(
        ..., description="Model used to derive the predictions"
    )
    predictions: dict[str, RacePrediction] = Field(
        default_factory=dict, description="Predictions keyed by race label"
    )

    def as_formatted(self) -> dict[str, str]:
        """Return predictions as label:time dictionary."""
        return {label: p.formatted for label, p in self.predictions.items()}


class HeartRateZoneConfig(BaseModel):
    """Heart rate zone configuration from the athlete profile."""

    zone_1_max: int | None = Field(None, ge=0, description="Upper bound of Zone 1")
    zone_2_max: int | None = Field(None, ge=0, description="Upper bound of Zone 2")
    zone_3_max: int | None = Field(None, ge=0, description="Upper bound of Zone 3")
    zone_4_max: int | None = Field(None, ge=0, description="Upper bound of Zone 4")
    max_heart_rate: int | None = Field(
        None, ge=0, description="Max heart rate used for percentage zones"
    )

    @property
    def custom_bounds(self) -> tuple[int | None, ...]:
        """The four custom upper bounds, lowest zone first."""
        return (self.zone_1_max, self.zone_2_max, self.zone_3_max, self.zone_4_max)

    @property
    def has_custom_zones(self) -> bool:
        """True only when all four custom bounds are set and non-zero."""
        return all(self.custom_bounds)


class ZoneThresholds(BaseModel):
    """Resolved upper bounds for zones 1-4; zone 5 is everything above."""

    model_config = ConfigDict(frozen=True)

    zone_1_max: int = Field(..., ge=0)
    zone_2_max: int = Field(..., ge=0)
    zone_3_max: int = Field(..., ge=0)
    zone_4_max: int = Field(..., ge=0)
    source: Literal["custom", "max_heart_rate"] = Field(
        ..., description="Where the bounds came from"
    )

    @model_validator(mode="after")
    def check_ascending(self) -> "ZoneThresholds":
        """Validate that zone bounds are strictly ascending."""
        bounds = self.as_tuple()
        if any(lower >= upper for lower, upper in zip(bounds, bounds[1:])):
            raise ValueError(f"Zone bounds must be strictly ascending, got {bounds}")
        return self

    def as_tuple(self) -> tuple[int, int, int, int]:
        """Return the four upper bounds, lowest zone first."""
        return (self.zone_1_max, self.zone_2_max, self.zone_3_max, self.zone_4_max)


class ZoneTally(BaseModel):
    """Sample counts (seconds at 1 Hz) per heart rate zone."""

    zone_1: int = Field(0, ge=0)
    zone_2: int = Field(0, ge=0)
    zone_3: int = Field(0, ge=0)
    zone_4: int = Field(0, ge=0)
    zone_5: int = Field(0, ge=0)

    @property
    def total(self) -> int:
        """Total number of samples tallied."""
        return self.zone_1 + self.zone_2 + self.zone_3 + self.zone_4 + self.zone_5

    def as_dict(self) -> dict[int, int]:
        """Return counts keyed by zone number."""
        return {
            1: self.zone_1,
            2: self.zone_2,
            3: self.zone_3,
            4: self.zone_4,
            5: self.zone_5,
        }

    def as_time_columns(self) -> dict[str, int]:
        """Return counts keyed by storage column name."""
        return {f"zone_{zone}_time": count for zone, count in self.as_dict().items()}


class RunRecord(BaseModel):
    """A completed run with the fields used for training load."""

    date: Date = Field(..., description="Date of the run")
    distance_km: float | None = Field(None, ge=0, description="Distance in km")
    elapsed_seconds: int | None = Field(None, ge=0, description="Elapsed time")
    rpe: float | None = Field(None, description="Rate of perceived exertion (1-10)")
    run_type: str | None = Field(None, description="e.g. 'Easy Run', 'Tempo Run'")
    average_hr: float | None = Field(None, ge=0, description="Average heart rate")
    max_hr: float | None = Field(None, ge=0, description="Maximum heart rate")

    @field_validator("rpe")
    @classmethod
    def check_rpe(cls, v: float | None) -> float | None:
        """Validate RPE is on the 0-10 scale."""
        if v is not None and (v < 0 or v > 10):
            raise ValueError("RPE must be between 0 and 10")
        return v


class FormStatus(BaseModel):
    """Interpretation of a training stress balance value."""

    status: str
    description: str
    color: str


class TrainingLoadSummary(BaseModel):
    """Summary of training load metrics."""

    chronic_training_load: float = Field(..., description="CTL (42-day fitness)")
    acute_training_load: float = Field(..., description="ATL (7-day fatigue)")
    training_stress_balance: float = Field(..., description="TSB (form)")

    @property
    def form(self) -> FormStatus:
        """Get the current form status based on TSB."""
        from .metrics.training_load import form_status

        return form_status(self.training_stress_balance)


class Insight(BaseModel):
    """An actionable observation about recent training."""

    type: Literal["warning", "success", "info", "danger"] = Field(
        ..., description="Severity shown to the runner"
    )
    category: Literal[
        "overtraining", "recovery", "performance", "injury_risk", "consistency"
    ] = Field(..., description="Area of training the insight concerns")
    title: str = Field(..., description="Short headline")
    description: str = Field(..., description="What was detected")
    recommendation: str = Field(..., description="What to do about it")
    priority: Literal["high", "medium", "low"] = Field(
        ..., description="How urgently to act"
    )


class BestPerformance(BaseModel):
    """A ranked performance at a standard race distance."""

    label: str = Field(..., description="Standard distance label, e.g. '5K'")
    distance_km: float = Field(..., gt=0, description="Distance in kilometers")
    time_seconds: int = Field(..., gt=0, description="Finish time in seconds")
    pace: str = Field(..., description="Average pace as M:SS/km")
    date: Date = Field(..., description="Date of the performance")
    rank: int = Field(..., ge=1, description="1 for the fastest")


class PerformanceReport(BaseModel):
    """Fitness estimate, predictions and paces as of a given date."""

    as_of: Date = Field(..., description="Reference date of the report")
    vdot: float | None = Field(None, description="Best VDOT in the recent window")
    training_paces: PacePlan | None = Field(None, description="VDOT training paces")
    vdot_predictions: RacePredictionSet | None = Field(
        None, description="Race predictions from VDOT"
    )
    riegel_predictions: RacePredictionSet | None = Field(
        None, description="Race predictions from the fastest run"
    )
    reference: PerformanceSample | None = Field(
        None, description="Run used for the Riegel predictions"
    )
