"""Visual reports for curves."""

from ccrider.core.reporting.plot import plot_curve

__all__ = ["plot_curve"]
