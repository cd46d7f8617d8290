"""Build SVG path text from a point sequence.

Consecutive points are joined with line segments, except where the gap
between two points is much larger than the average segment length. Such
jumps separate disjoint sub-contours (the pieces of a glyph, the letters
of a word, the subpaths of an SVG file) and start a new subpath instead.
"""

from collections.abc import Sequence

from circlesketch.domain import Contour, Point
from circlesketch.utils.numbers import format_number

# A segment longer than this multiple of the mean segment length is a jump
JUMP_FACTOR = 5.0


def svg_path_of_points(points: Sequence[Point]) -> str:
    """Build an M/L path string from points.

    Args:
        points: Points in drawing order

    Returns:
        Path data, or an empty string for no points

    Examples:
        >>> from circlesketch.domain import Point
        >>> svg_path_of_points([Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 0)])
        'M 0 0 L 1 0 L 1 1 L 0 0'
    """
    if not points:
        return ""

    distances = Contour(tuple(points)).segment_lengths()
    mean = sum(distances) / len(distances) if distances else 0.0
    jump_threshold = mean * JUMP_FACTOR

    first = points[0]
    parts = [f"M {format_number(first.x)} {format_number(first.y)}"]
    for point, distance in zip(points[1:], distances):
        command = "M" if distance > jump_threshold else "L"
        parts.append(f"{command} {format_number(point.x)} {format_number(point.y)}")

    return " ".join(parts)


def svg_path_of_contour(contour: Contour) -> str:
    """Build an M/L path string from a contour."""
    return svg_path_of_points(contour.points)
