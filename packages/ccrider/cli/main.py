"""Command-line interface for CCRider.

Developer tooling for inspecting rider curves: sample a curve, resample it
to a different point count, plot it, or drive a bank of riders with a
sequence of input values.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from ccrider.core.config.loader import load_app_config
from ccrider.core.curves.evaluator import DEFAULT_LOOKUP_RESOLUTION, CurveEvaluator
from ccrider.core.curves.sampling import resample_points, sample_uniform_grid
from ccrider.core.rider.bank import RiderBank
from ccrider.core.utils.json import write_json
from ccrider.core.utils.logging import configure_logging

console = Console()
logger = logging.getLogger(__name__)


class RecordingSink:
    """Output sink that remembers the latest value per rider."""

    def __init__(self) -> None:
        self.latest: dict[str, float] = {}

    def emit(self, key: str, value: float) -> None:
        self.latest[key] = value


def _build_evaluator(points: tuple[float, ...], resolution: int) -> CurveEvaluator:
    if len(points) < 2:
        raise click.UsageError("At least 2 points are required")
    try:
        return CurveEvaluator.from_points(points, resolution=resolution)
    except ValueError as e:
        raise click.UsageError(str(e)) from e


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    default="WARNING",
    help="Logging level",
)
def cli(log_level: str) -> None:
    """Shape one controller input into several outputs along custom curves."""
    configure_logging(level=log_level)


@cli.command()
@click.argument("points", nargs=-1, type=float, required=True)
@click.option("--steps", type=click.IntRange(min=2), default=11, help="Number of samples")
@click.option(
    "--resolution",
    type=click.IntRange(min=2),
    default=DEFAULT_LOOKUP_RESOLUTION,
    help="Lookup table size",
)
@click.option("--exact", is_flag=True, help="Bypass the lookup table")
@click.option(
    "--json",
    "json_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Also write the samples to a JSON file",
)
def sample(
    points: tuple[float, ...],
    steps: int,
    resolution: int,
    exact: bool,
    json_path: Path | None,
) -> None:
    """Sample the curve through POINTS at evenly spaced inputs.

    Example:
        ccrider sample 0 0.8 1 --steps 5
    """
    evaluator = _build_evaluator(points, resolution)
    evaluate = evaluator.at if exact else evaluator.memoized_at

    grid = sample_uniform_grid(steps)
    values = [evaluate(t) for t in grid]

    table = Table(title="Curve Samples", show_header=True)
    table.add_column("Input", style="cyan")
    table.add_column("Output", style="green")
    for t, value in zip(grid, values, strict=True):
        table.add_row(f"{t:.4f}", f"{value:.4f}")
    console.print(table)

    if json_path is not None:
        write_json(
            json_path,
            {
                "points": list(points),
                "resolution": resolution,
                "exact": exact,
                "samples": [{"t": t, "v": v} for t, v in zip(grid, values, strict=True)],
            },
        )
        console.print(f"[green]Wrote samples:[/green] {json_path}")


@cli.command()
@click.argument("points", nargs=-1, type=float, required=True)
@click.option(
    "--count",
    type=click.IntRange(min=2, max=9),
    required=True,
    help="Number of points to resample to",
)
def resample(points: tuple[float, ...], count: int) -> None:
    """Resample the curve through POINTS to COUNT points, keeping its shape.

    Example:
        ccrider resample 0 0.2 0.9 1 --count 2
    """
    evaluator = _build_evaluator(points, DEFAULT_LOOKUP_RESOLUTION)
    new_points = resample_points(evaluator, count)
    console.print(" ".join(f"{p:.4f}" for p in new_points))


@cli.command()
@click.argument("points", nargs=-1, type=float, required=True)
@click.option(
    "--out",
    type=click.Path(dir_okay=False, path_type=Path),
    required=True,
    help="Output PNG path",
)
@click.option("--steps", type=click.IntRange(min=2), default=400, help="Number of samples")
@click.option("--exact", is_flag=True, help="Overlay the exact curve")
def plot(points: tuple[float, ...], out: Path, steps: int, exact: bool) -> None:
    """Plot the curve through POINTS to a PNG file."""
    # Imported lazily so the other commands do not pay for matplotlib
    from ccrider.core.reporting.plot import plot_curve

    evaluator = _build_evaluator(points, DEFAULT_LOOKUP_RESOLUTION)
    title = "Rider curve: " + ", ".join(f"{p:g}" for p in points)
    plot_curve(evaluator, output_path=out, title=title, n_samples=steps, show_exact=exact)
    console.print(f"[green]Wrote plot:[/green] {out}")


@cli.command()
@click.argument("inputs", nargs=-1, type=float, required=True)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="App config (.json, .yaml or .yml)",
)
@click.option(
    "--curve-resolution",
    type=click.IntRange(min=2, max=9),
    help="Active point count applied to every rider",
)
def simulate(
    inputs: tuple[float, ...],
    config_path: Path | None,
    curve_resolution: int | None,
) -> None:
    """Drive a bank of riders with INPUTS and show each rider's output.

    Example:
        ccrider simulate 0 0.25 0.5 1 --config ccrider.yaml
    """
    try:
        config = load_app_config(config_path)
    except (FileNotFoundError, ValueError) as e:
        raise click.UsageError(f"Could not load config: {e}") from e

    sink = RecordingSink()
    bank = RiderBank.from_config(config, output_sink=sink)
    if curve_resolution is not None:
        bank.set_curve_resolution(curve_resolution)
    logger.info("Simulating %d inputs across riders %s", len(inputs), bank.keys)

    table = Table(title="Rider Outputs", show_header=True)
    table.add_column("Input", style="cyan")
    for key in bank.keys:
        table.add_column(f"Output {key}", style="green")

    for value in inputs:
        bank.set_input(value)
        row = [f"{value:.4f}"]
        for key in bank.keys:
            output = sink.latest.get(key)
            row.append("-" if output is None else f"{output:.4f}")
        table.add_row(*row)

    console.print(table)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
