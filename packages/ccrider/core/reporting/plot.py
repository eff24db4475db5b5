"""Generate curve visualization plots.

This module creates matplotlib plots of rider curves for visual inspection.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

import matplotlib

matplotlib.use("Agg")  # Non-interactive backend
import matplotlib.pyplot as plt
import numpy as np

from ccrider.core.curves.evaluator import CurveEvaluator
from ccrider.core.curves.sampling import sample_curve, sample_uniform_grid

logger = logging.getLogger(__name__)


def plot_curve(
    evaluator: CurveEvaluator,
    *,
    output_path: Path,
    title: str = "Rider curve",
    n_samples: int = 400,
    show_exact: bool = False,
) -> Path:
    """Generate a curve plot PNG.

    Plots input on the x-axis and output on the y-axis, with the control
    points marked at their evenly spaced input positions.

    Args:
        evaluator: Curve to plot
        output_path: Path to save PNG
        title: Plot title
        n_samples: Number of samples along the input axis
        show_exact: Also draw the exact (table-free) curve for comparison

    Returns:
        The path written.

    Example:
        >>> evaluator = CurveEvaluator.from_points([0.0, 1.0, 0.2])
        >>> plot_curve(evaluator, output_path=Path("curve.png"))
        PosixPath('curve.png')
    """
    points: Sequence[float] = evaluator.curve.points

    fig, ax = plt.subplots(figsize=(6, 6), dpi=100)

    x = np.linspace(0.0, 1.0, n_samples)
    ax.plot(x, sample_curve(evaluator, n_samples), linewidth=1.5, color="#2E86AB", label="Curve")

    if show_exact:
        ax.plot(
            x,
            sample_curve(evaluator.at, n_samples),
            linewidth=1,
            linestyle="--",
            color="#E63946",
            label="Exact",
        )

    ax.scatter(
        sample_uniform_grid(len(points)), points, s=30, color="#1B1B1E", zorder=3, label="Points"
    )

    ax.set_xlim(0, 1)
    ax.set_ylim(-0.02, 1.02)
    ax.set_xlabel("Input", fontsize=10)
    ax.set_ylabel("Output", fontsize=10)
    ax.set_title(title, fontsize=10, fontweight="bold")
    ax.grid(True, alpha=0.3, linewidth=0.5)
    ax.legend(loc="upper left", fontsize=8, framealpha=0.9)

    fig.tight_layout()

    output_path.parent.mkdir(parents=True, exist_ok=True)
    try:
        fig.savefig(output_path, bbox_inches="tight")
    finally:
        plt.close(fig)

    logger.debug("Saved plot: %s", output_path.name)
    return output_path
