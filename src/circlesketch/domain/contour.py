"""Core geometric types for contour representation.

This module defines the fundamental geometric types used throughout circles sketch:
- Point: A 2D point
- Contour: An ordered sequence of points tracing a shape
- ViewBox: A square viewport fitted around a contour
"""

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def translated(self, dx: float, dy: float) -> "Point":
        """Return this point shifted by (dx, dy)."""
        return Point(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class Contour:
    """An ordered sequence of points approximating a planar curve.

    Insertion order defines traversal order around the shape. The contour
    does not have to be explicitly closed (first point != last point is
    legal). Empty and single-point contours are valid degenerate inputs.

    Attributes:
        points: Points in traversal order
    """

    points: tuple[Point, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.points, tuple):
            object.__setattr__(self, "points", tuple(self.points))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def is_empty(self) -> bool:
        """Check if contour has no points."""
        return len(self.points) == 0

    @classmethod
    def from_tuples(cls, pairs: Iterable[Sequence[float]]) -> "Contour":
        """Build a contour from (x, y) pairs.

        Args:
            pairs: Iterable of two-element sequences

        Returns:
            Contour instance
        """
        return cls(tuple(Point(float(x), float(y)) for x, y in pairs))

    def to_tuples(self) -> list[tuple[float, float]]:
        """Convert to a list of (x, y) tuples."""
        return [p.to_tuple() for p in self.points]

    def flipped_y(self) -> "Contour":
        """Return a copy with every y coordinate negated."""
        return Contour(tuple(Point(p.x, -p.y) for p in self.points))

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Calculate bounding box of the contour.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y); all zeros when empty
        """
        if not self.points:
            return (0.0, 0.0, 0.0, 0.0)

        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]
        return (min(xs), min(ys), max(xs), max(ys))

    def segment_lengths(self) -> list[float]:
        """Euclidean distances between consecutive points."""
        return [
            ((b.x - a.x) ** 2 + (b.y - a.y) ** 2) ** 0.5
            for a, b in zip(self.points, self.points[1:])
        ]


@dataclass(frozen=True, slots=True)
class ViewBox:
    """Square drawing viewport.

    Attributes:
        x: Left edge
        y: Top edge
        size: Width and height
    """

    x: float
    y: float
    size: float

    # Padding around the contour, as a fraction of its larger extent
    PADDING = 0.1

    @classmethod
    def around(cls, contour: Contour) -> "ViewBox":
        """Fit a padded square viewport around a contour.

        The contour's bounding box is centered in a square whose side is the
        box's larger extent plus 10% padding on each side. An empty contour
        gets the default 100x100 box at the origin.

        Args:
            contour: Contour to frame

        Returns:
            ViewBox instance
        """
        if contour.is_empty():
            min_x, min_y, max_x, max_y = 0.0, 0.0, 100.0, 100.0
        else:
            min_x, min_y, max_x, max_y = contour.bounding_box()

        w = max_x - min_x
        h = max_y - min_y
        size = max(w, h)
        padding = size * cls.PADDING
        return cls(
            x=min_x - padding - (size - w) / 2.0,
            y=min_y - padding - (size - h) / 2.0,
            size=size + padding * 2.0,
        )

    @property
    def dot_radius(self) -> float:
        """Radius of the tracing dot, 0.7% of the viewport size."""
        return self.size * 0.7 / 100.0
