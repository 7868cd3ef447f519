"""
Command-line interface for the Running Analyzer package.

This module provides a command-line interface for estimating fitness,
predicting race times, deriving training paces and tallying heart rate zones.
"""

import logging
from datetime import date, datetime
from pathlib import Path

import click

from .analysis import PerformanceAnalyzer, generate_insights, rank_best_performances
from .data import RunHistoryLoader, load_heart_rate_file
from .exceptions import RunningAnalyzerError
from .metrics import (
    TrainingLoadCalculator,
    derive_race_predictions,
    derive_training_paces,
    estimate_vdot,
    format_duration,
    parse_duration_strict,
    predict_riegel,
    resolve_zone_thresholds,
    tally_zones,
)
from .metrics.riegel import predict_race_times
from .models import PacePlan, PerformanceSample, RacePredictionSet
from .settings import load_settings


# Configure basic logging
def configure_logging(verbose: bool = False) -> None:
    """Configure logging with appropriate level."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


def _echo_predictions(title: str, predictions: RacePredictionSet) -> None:
    """Print a race prediction table."""
    click.echo(f"\n{title}")
    click.echo("-" * 40)
    for label, prediction in predictions.predictions.items():
        marker = "" if prediction.converged else " (approx.)"
        click.echo(
            f"{label:<15} {prediction.formatted:>8}  "
            f"{prediction.formatted_pace}{marker}"
        )


def _echo_paces(paces: PacePlan) -> None:
    """Print a training pace table."""
    click.echo("\nTraining Paces")
    click.echo("-" * 40)
    for label, pace in paces.as_dict().items():
        marker = "" if pace.converged else " (approx.)"
        click.echo(f"{label.title():<15} {pace.formatted}/km{marker}")


config_option = click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file",
)
verbose_option = click.option(
    "--verbose/--quiet",
    default=False,
    help="Enable verbose output",
)


@click.group()
def main():
    """
    Analyze running performances.

    Estimates VDOT, predicts race times with the Daniels and Riegel models,
    derives training paces and tallies heart rate zones.
    """


@main.command()
@click.option(
    "--distance",
    type=click.FloatRange(min=0, min_open=True),
    required=True,
    help="Distance in km",
)
@click.option("--time", "time_str", required=True, help="Time as H:MM:SS or M:SS")
@verbose_option
def vdot(distance: float, time_str: str, verbose: bool) -> None:
    """Estimate VDOT from a performance and show paces and predictions."""
    configure_logging(verbose)
    logger = logging.getLogger(__name__)

    try:
        seconds = parse_duration_strict(time_str)
        value = estimate_vdot(distance, seconds)

        click.echo(f"VDOT: {value:.1f}")
        _echo_paces(derive_training_paces(value))
        _echo_predictions("Race Predictions (VDOT)", derive_race_predictions(value))

    except RunningAnalyzerError as e:
        logger.error(f"VDOT estimation failed: {str(e)}")
        raise click.Abort() from e


@main.command()
@click.option(
    "--distance",
    type=click.FloatRange(min=0, min_open=True),
    required=True,
    help="Known distance in km",
)
@click.option("--time", "time_str", required=True, help="Known time (H:MM:SS)")
@click.option(
    "--target",
    type=click.FloatRange(min=0, min_open=True),
    help="Target distance in km",
)
@verbose_option
def predict(
    distance: float, time_str: str, target: float | None, verbose: bool
) -> None:
    """
    Predict race times with the Riegel formula.

    Without --target, predicts all standard race distances.
    """
    configure_logging(verbose)
    logger = logging.getLogger(__name__)

    try:
        seconds = parse_duration_strict(time_str)

        if target is not None:
            predicted = predict_riegel(distance, seconds, target)
            click.echo(f"{target} km: {format_duration(predicted)}")
            return

        reference = PerformanceSample(
            distance_km=distance, elapsed_seconds=seconds, date=date.today()
        )
        _echo_predictions("Race Predictions (Riegel)", predict_race_times(reference))

    except RunningAnalyzerError as e:
        logger.error(f"Prediction failed: {str(e)}")
        raise click.Abort() from e


@main.command()
@click.option(
    "--stream",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    required=True,
    help="Stream CSV file with a heartrate column",
)
@click.option(
    "--max-hr",
    type=int,
    help="Max heart rate, used when custom zones are not configured",
)
@config_option
@verbose_option
def zones(
    stream: Path, max_hr: int | None, config: Path | None, verbose: bool
) -> None:
    """Tally time in heart rate zones for a stream file."""
    configure_logging(verbose)
    logger = logging.getLogger(__name__)

    try:
        settings = load_settings(config)
        samples = load_heart_rate_file(stream)
        thresholds = resolve_zone_thresholds(settings.hr_zones, max_hr)
        tally = tally_zones(samples, thresholds)

        click.echo(f"\nHeart Rate Zones ({thresholds.source})")
        click.echo("-" * 40)
        lower = 0
        for zone, upper in enumerate(thresholds.as_tuple(), start=1):
            count = tally.as_dict()[zone]
            click.echo(f"Zone {zone} ({lower}-{upper} bpm): {format_duration(count)}")
            lower = upper + 1
        click.echo(f"Zone 5 (>{lower - 1} bpm): {format_duration(tally.zone_5)}")

    except RunningAnalyzerError as e:
        logger.error(f"Zone calculation failed: {str(e)}")
        raise click.Abort() from e


@main.command()
@config_option
@click.option(
    "--as-of",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    help="Report date (YYYY-MM-DD), defaults to today",
)
@verbose_option
def report(config: Path | None, as_of: datetime | None, verbose: bool) -> None:
    """
    Generate a fitness report from the run history.

    Shows VDOT, race predictions, training paces, training load, training
    insights and best performances.
    """
    configure_logging(verbose)
    logger = logging.getLogger(__name__)
    report_date = as_of.date() if as_of is not None else date.today()

    try:
        settings = load_settings(config)
        loader = RunHistoryLoader(settings)
        runs_df = loader.load_runs()
        samples = loader.to_performance_samples(runs_df)

        result = PerformanceAnalyzer(settings).analyze(samples, report_date)

        click.echo(f"\nPerformance Report ({report_date})")
        click.echo("=" * 40)

        if result.vdot is None:
            click.echo(
                f"No runs in the last {settings.vdot_window_days} days "
                "to estimate VDOT"
            )
        else:
            click.echo(f"VDOT: {result.vdot:.1f}")
            _echo_paces(result.training_paces)
            _echo_predictions("Race Predictions (VDOT)", result.vdot_predictions)

        if result.riegel_predictions is not None:
            _echo_predictions("Race Predictions (Riegel)", result.riegel_predictions)

        records = loader.to_run_records(runs_df)
        load = TrainingLoadCalculator(settings).summarize(records, report_date)
        click.echo("\nTraining Load")
        click.echo("-" * 40)
        click.echo(f"CTL: {load.chronic_training_load:.1f}")
        click.echo(f"ATL: {load.acute_training_load:.1f}")
        click.echo(f"TSB: {load.training_stress_balance:.1f}")
        click.echo(f"Form: {load.form.status}")

        insights = generate_insights(records, load, report_date)
        click.echo("\nInsights")
        click.echo("-" * 40)
        if not insights:
            click.echo("No notable patterns in recent training")
        for insight in insights:
            click.echo(f"[{insight.type.upper()}] {insight.title}")
            click.echo(f"  {insight.description}")
            click.echo(f"  {insight.recommendation}")

        best = rank_best_performances(samples, settings.best_performance_count)
        if best:
            click.echo("\nBest Performances")
            click.echo("-" * 40)
            for label, performances in best.items():
                for perf in performances:
                    click.echo(
                        f"{label:<15} #{perf.rank} "
                        f"{format_duration(perf.time_seconds):>8}  "
                        f"{perf.pace}  {perf.date}"
                    )

    except RunningAnalyzerError as e:
        logger.error(f"Report failed: {str(e)}")
        raise click.Abort() from e


if __name__ == "__main__":
    main()
