"""Fourier series representation.

A contour resampled to N uniform points is treated as a complex signal
z_j = x_j + i*y_j. Each ComplexCoefficient c_k contributes a rotating vector

    c_k * e^{2*pi*i*k*t} = (re*cos(2*pi*k*t) - im*sin(2*pi*k*t),
                            im*cos(2*pi*k*t) + re*sin(2*pi*k*t))

which traces a circle of radius |c_k|. Chaining the vectors tip to tail
gives the epicycles drawn by the renderer.
"""

import math
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from circlesketch.domain.contour import Point


@dataclass(frozen=True, slots=True)
class ComplexCoefficient:
    """One term of a Fourier series.

    Attributes:
        freq: Signed integer frequency
        re: Real part
        im: Imaginary part
    """

    freq: int
    re: float
    im: float

    @property
    def radius(self) -> float:
        """Epicycle radius, the modulus of the coefficient."""
        return math.sqrt(self.re * self.re + self.im * self.im)

    def rotated(self, t: float) -> tuple[float, float]:
        """Vector contributed by this term at parameter t.

        Args:
            t: Curve parameter in [0, 1]

        Returns:
            (dx, dy) contribution
        """
        angle = 2.0 * math.pi * self.freq * t
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return (
            self.re * cos_a - self.im * sin_a,
            self.im * cos_a + self.re * sin_a,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize for the rendered page.

        Returns:
            Dictionary with freq, re, im and r (radius) fields
        """
        return {"freq": self.freq, "re": self.re, "im": self.im, "r": self.radius}


@dataclass(frozen=True)
class FourierDecomposition:
    """Fourier coefficients sorted by descending radius.

    Truncating to the first K coefficients gives the best K-term visual
    approximation of the contour, so "number of harmonics" always means a
    prefix of this sequence.

    Attributes:
        coefficients: Terms in descending radius order
    """

    coefficients: tuple[ComplexCoefficient, ...]

    def __len__(self) -> int:
        return len(self.coefficients)

    def __iter__(self) -> Iterator[ComplexCoefficient]:
        return iter(self.coefficients)

    def coefficient(self, freq: int) -> ComplexCoefficient | None:
        """Find the coefficient for a given frequency, if computed."""
        for c in self.coefficients:
            if c.freq == freq:
                return c
        return None

    def evaluate(self, t: float, count: int | None = None) -> Point:
        """Reconstruct the point at parameter t.

        Args:
            t: Curve parameter in [0, 1]
            count: Number of leading coefficients to use (all if None)

        Returns:
            Reconstructed point
        """
        x = 0.0
        y = 0.0
        for c in self.coefficients[:count]:
            dx, dy = c.rotated(t)
            x += dx
            y += dy
        return Point(x, y)

    def epicycles(self, t: float, count: int | None = None) -> list[tuple[Point, Point]]:
        """Chain of epicycles at parameter t.

        The largest circle is anchored at the origin; each following circle
        is centered at the tip of the previous one.

        Args:
            t: Curve parameter in [0, 1]
            count: Number of leading coefficients to use (all if None)

        Returns:
            List of (center, tip) pairs, one per coefficient
        """
        chain: list[tuple[Point, Point]] = []
        center = Point(0.0, 0.0)
        for c in self.coefficients[:count]:
            dx, dy = c.rotated(t)
            tip = center.translated(dx, dy)
            chain.append((center, tip))
            center = tip
        return chain

    def to_list(self) -> list[dict[str, Any]]:
        """Serialize all coefficients in order."""
        return [c.to_dict() for c in self.coefficients]
