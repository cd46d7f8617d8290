"""Piecewise-linear parametrization and uniform resampling of contours.

A contour of n points defines a function f(t), t in [0, 1], that visits
the points at t = i/(n-1) and interpolates linearly in between. Resampling
evaluates f at N equally spaced parameters. It does not reconstruct
curvature: the result is only as smooth as the input point density.
"""

from typing import Protocol

import numpy as np

from circlesketch.domain import Contour, Point
from circlesketch.exceptions import ContourError


class ContourFunction(Protocol):
    """A planar curve parametrized over t in [0, 1]."""

    def x(self, t: float) -> float: ...

    def y(self, t: float) -> float: ...


class OffsetContourFunction:
    """A contour function translated by a constant offset.

    Delegates to the wrapped function without copying its points.
    """

    def __init__(self, inner: ContourFunction, x_offset: float, y_offset: float) -> None:
        self._inner = inner
        self.x_offset = x_offset
        self.y_offset = y_offset

    def x(self, t: float) -> float:
        return self._inner.x(t) + self.x_offset

    def y(self, t: float) -> float:
        return self._inner.y(t) + self.y_offset

    def with_offset(self, x_offset: float, y_offset: float) -> "OffsetContourFunction":
        return OffsetContourFunction(self, x_offset, y_offset)


class PolylineFunction:
    """Piecewise-linear function through a contour's points.

    Special cases: an empty contour maps every t to (0, 0); a single-point
    contour maps every t to that point. t is clamped to [0, 1].
    """

    def __init__(self, contour: Contour) -> None:
        xy = np.asarray(contour.to_tuples(), dtype=float).reshape(-1, 2)
        self._xs = xy[:, 0]
        self._ys = xy[:, 1]
        self._knots = np.linspace(0.0, 1.0, len(xy))

    def _interp(self, t, values: np.ndarray):
        if len(values) == 0:
            return np.zeros_like(np.asarray(t, dtype=float))
        # np.interp holds the end values outside [0, 1]
        return np.interp(t, self._knots, values)

    def x(self, t: float) -> float:
        return float(self._interp(t, self._xs))

    def y(self, t: float) -> float:
        return float(self._interp(t, self._ys))

    def sample(self, count: int) -> Contour:
        """Evaluate at count uniformly spaced parameters in one pass.

        Args:
            count: Number of samples (>= 1)

        Returns:
            Contour with exactly count points
        """
        ts = np.linspace(0.0, 1.0, count)
        xs = self._interp(ts, self._xs).tolist()
        ys = self._interp(ts, self._ys).tolist()
        return Contour(tuple(Point(x, y) for x, y in zip(xs, ys)))

    def with_offset(self, x_offset: float, y_offset: float) -> OffsetContourFunction:
        """Compose with a constant translation.

        Args:
            x_offset: Added to every x
            y_offset: Added to every y

        Returns:
            Wrapper sharing this function's points
        """
        return OffsetContourFunction(self, x_offset, y_offset)


def function_of_contour(contour: Contour) -> PolylineFunction:
    """Parametrize a contour over t in [0, 1]."""
    return PolylineFunction(contour)


def sample_function(f: ContourFunction, count: int) -> Contour:
    """Evaluate a contour function at count uniformly spaced parameters.

    Samples t = i/(count-1) for i in 0..count-1, so both t=0 and t=1 are
    included. A single sample is taken at t=0.

    Args:
        f: Function to sample
        count: Number of samples (>= 1)

    Returns:
        Contour with exactly count points

    Raises:
        ContourError: If count is less than 1
    """
    if count < 1:
        raise ContourError(f"Sample count must be at least 1, got {count}")

    return Contour(tuple(Point(f.x(t), f.y(t)) for t in np.linspace(0.0, 1.0, count).tolist()))


def resample(contour: Contour, count: int) -> Contour:
    """Resample a contour to count points uniformly spaced in t.

    Args:
        contour: Input contour
        count: Number of output points (>= 1)

    Returns:
        Resampled contour

    Raises:
        ContourError: If count is less than 1
    """
    if count < 1:
        raise ContourError(f"Sample count must be at least 1, got {count}")
    return function_of_contour(contour).sample(count)
