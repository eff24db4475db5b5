"""Stateful mapping of one scalar input to one scalar output along a curve.

A rider owns a fixed number of control point slots, of which the leading
``active_count`` shape the curve. Every state change that can affect the
output ends in a flush, which evaluates the curve at the current input and
hands the result to the output sink.

Riders are not thread-safe. The host delivers events one at a time.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from ccrider.core.config.models import RiderConfig
from ccrider.core.curves.evaluator import CurveEvaluator
from ccrider.core.curves.sampling import resample_points
from ccrider.core.rider.protocols import (
    NullOutputSink,
    NullRefreshListener,
    OutputSink,
    RefreshListener,
)
from ccrider.core.utils.logging import get_logger
from ccrider.core.utils.math import approximately_equal, clamp, step


def default_points(config: RiderConfig) -> list[float]:
    """Linear ramp across the default point count, later slots pinned at 1.0.

    Example:
        >>> default_points(RiderConfig(default_point_count=3, max_point_count=4))
        [0.0, 0.5, 1.0, 1.0]
    """
    span = config.default_point_count - 1
    return [min(i / span, 1.0) for i in range(config.max_point_count)]


class Rider:
    """Maps an input value in [0, 1] to an output value through a curve.

    Args:
        key: Unique name of the rider, passed to the output sink.
        config: Shared rider settings.
        output_sink: Receives every flushed output value.
        refresh_listener: Told to re-read display values after the active
            point count changes.
        points: Initial normalized point values. Missing trailing slots
            (or explicit ``None`` entries) start undefined. Defaults to
            ``default_points(config)``.
        active_count: Initial active point count. Defaults to
            ``config.default_point_count``.

    Example:
        >>> rider = Rider("e")
        >>> rider.set_input(1.0)
        >>> rider.flush()
        1.0
    """

    def __init__(
        self,
        key: str,
        config: RiderConfig | None = None,
        output_sink: OutputSink | None = None,
        refresh_listener: RefreshListener | None = None,
        points: Sequence[float | None] | None = None,
        active_count: int | None = None,
    ) -> None:
        self._key = key
        self._config = config or RiderConfig()
        self._output_sink = output_sink or NullOutputSink()
        self._refresh_listener = refresh_listener or NullRefreshListener()
        self._logger = get_logger(__name__, rider=key)

        max_count = self._config.max_point_count
        if points is None:
            initial: list[float | None] = list(default_points(self._config))
        else:
            if len(points) > max_count:
                raise ValueError(f"At most {max_count} points are supported, got {len(points)}")
            initial = list(points) + [None] * (max_count - len(points))
        self._points = initial

        if active_count is None:
            active_count = self._config.default_point_count
        self._active_count = int(clamp(active_count, 0, max_count))

        self._input: float | None = None
        self._evaluator: CurveEvaluator | None = None
        self._backup_curve: Callable[[float], float] | None = None
        self._generation = 0

    # ------------------------------------------------------------------
    # State accessors
    # ------------------------------------------------------------------

    @property
    def key(self) -> str:
        return self._key

    @property
    def config(self) -> RiderConfig:
        return self._config

    @property
    def points(self) -> tuple[float | None, ...]:
        """Every stored point slot, active or not."""
        return tuple(self._points)

    @property
    def active_points(self) -> tuple[float | None, ...]:
        return tuple(self._points[: self._active_count])

    @property
    def active_count(self) -> int:
        return self._active_count

    @property
    def input_value(self) -> float | None:
        return self._input

    @property
    def generation(self) -> int:
        """Number of curves built so far. Changes whenever the curve is rebuilt."""
        return self._generation

    @property
    def has_curve(self) -> bool:
        """True when enough defined points are active to form a curve."""
        return self.curve() is not None

    def display_values(self) -> list[float | None]:
        """Active points in display units (e.g. percent)."""
        return [
            None if point is None else point * self._config.slider_max
            for point in self.active_points
        ]

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def set_point(self, index: int, display_value: float) -> None:
        """Store a point given in display units.

        Values within epsilon of the stored point, as the slider notch would
        show it, are ignored. The host echoes values the rider wrote back
        snapped to a notch, so those echoes do not flush again.
        Display values are clamped to [0, slider_max].

        Raises:
            IndexError: If index is outside the point slots.
        """
        if not 0 <= index < len(self._points):
            raise IndexError(f"Point index {index} out of range for rider {self._key!r}")

        config = self._config
        display_value = clamp(display_value, 0.0, config.slider_max)
        current = self._points[index]
        if current is not None and approximately_equal(
            display_value, self._notch(current * config.slider_max), config.epsilon
        ):
            return

        self._points[index] = display_value / config.slider_max

        if index < self._active_count:
            # A hand-edited point replaces the shape any backup remembered
            self._invalidate_curve()
            self._backup_curve = None
            self.flush()

    def on_point_changed(self, index: int, display_value: float) -> None:
        """Host callback for a point parameter change."""
        self.set_point(index, display_value)

    def set_active_count(self, count: int) -> None:
        """Change how many leading points shape the curve.

        The shape of the curve in effect before the first of a run of count
        changes is kept as a backup, and the new active points are resampled
        from it. Stepping 5 -> 2 -> 5 therefore restores (approximately)
        the original 5-point shape.
        """
        count = int(clamp(count, 0, self._config.max_point_count))
        if count == self._active_count:
            return

        if self._backup_curve is None:
            self._backup_curve = self.curve()

        previous = self._active_count
        self._active_count = count

        defined = sum(point is not None for point in self._points)
        if self._backup_curve is not None and count >= 2 and defined >= 2:
            self._points[:count] = resample_points(self._backup_curve, count)
            self._logger.debug("Resampled %d -> %d points", previous, count)
        else:
            self._logger.debug("Active count %d -> %d without resample", previous, count)

        self._refresh_listener.request_refresh()
        self._invalidate_curve()
        self.flush()

    def on_active_count_changed(self, count: int) -> None:
        """Host callback for a curve resolution change."""
        self.set_active_count(count)

    def set_input(self, value: float) -> None:
        """Set the input value, clamped to [0, 1], and flush."""
        value = clamp(value, 0.0, 1.0)
        if approximately_equal(value, self._input, self._config.epsilon):
            return

        self._input = value
        self.flush()

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def curve(self) -> CurveEvaluator | None:
        """Return the evaluator for the active points, building it if needed.

        Returns None while fewer than 2 active points are defined.
        """
        if self._evaluator is None:
            active = self._points[: self._active_count]
            if len(active) < 2 or any(point is None for point in active):
                return None

            self._evaluator = CurveEvaluator.from_points(
                active,  # type: ignore[arg-type]
                resolution=self._config.lookup_resolution,
            )
            self._generation += 1
            self._logger.debug(
                "Built curve generation %d from %d points", self._generation, len(active)
            )
        return self._evaluator

    def flush(self) -> float | None:
        """Evaluate the curve at the current input and emit the result.

        Returns:
            The emitted value, or None when there is no curve or no input yet.
        """
        evaluator = self.curve()
        if evaluator is None or self._input is None:
            return None

        value = evaluator.memoized_at(self._input)
        self._output_sink.emit(self._key, value)
        return value

    def _notch(self, display_value: float) -> float:
        """Snap a display value to the slider notch the host would show."""
        config = self._config
        return step(display_value, 0.0, config.slider_max, config.slider_resolution)

    def _invalidate_curve(self) -> None:
        self._evaluator = None
