"""SVG path data lexer and interpreter.

Supports the subset of the SVG path mini-language that font outlines and
simple drawings use: M, L, H, V, C, Q and Z, each in absolute (upper-case)
and relative (lower-case) form. Curves are flattened by sampling them at
fixed parameter steps.

Malformed input policy:
- Numbers are strict: an unparsable numeric token, an unexpected character
  or a command with an incomplete argument group raises PathSyntaxError.
- Commands are lenient: an unsupported command letter (A, S, T, ...) is
  skipped together with its numeric arguments, and a stray number that no
  command consumes is skipped too. Both are logged as warnings.
"""

from collections.abc import Callable
from typing import NamedTuple

import structlog

from circlesketch.domain import Contour, Point
from circlesketch.exceptions import PathSyntaxError

logger = structlog.get_logger(__name__)

# Samples per Bezier segment (t = 1/8 ... 8/8)
CURVE_SAMPLES = 8


class Token(NamedTuple):
    """A lexical token of path data.

    Attributes:
        kind: "command" or "number"
        text: Token text
        position: Offset of the token's first character in the input
    """

    kind: str
    text: str
    position: int

    @property
    def is_number(self) -> bool:
        return self.kind == "number"


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def tokenize_path(path_data: str) -> list[Token]:
    """Split path data into command and number tokens.

    Whitespace and commas separate tokens. Any ASCII letter is a
    one-character command token. A number is an optional leading '-'
    followed by a greedy run of ASCII digits and '.' characters; scientific
    notation is not recognised.

    Args:
        path_data: Contents of an SVG path ``d`` attribute

    Returns:
        Tokens in input order

    Raises:
        PathSyntaxError: On a character that can start neither a command nor a number
    """
    tokens: list[Token] = []
    i = 0
    n = len(path_data)

    while i < n:
        ch = path_data[i]
        if ch.isspace() or ch == ",":
            i += 1
        elif ch.isascii() and ch.isalpha():
            tokens.append(Token("command", ch, i))
            i += 1
        elif ch == "-" or ch == "." or _is_digit(ch):
            start = i
            if ch == "-":
                i += 1
            while i < n and (_is_digit(path_data[i]) or path_data[i] == "."):
                i += 1
            text = path_data[start:i]
            if text == "-":
                raise PathSyntaxError("sign without digits", start, text)
            tokens.append(Token("number", text, start))
        else:
            raise PathSyntaxError("unexpected character", i, ch)

    return tokens


def sample_cubic(p0: Point, p1: Point, p2: Point, p3: Point) -> list[Point]:
    """Sample a cubic Bezier curve at t = 1/8 ... 1.

    The start point is not included; the end point is.

    Args:
        p0: Start point
        p1: First control point
        p2: Second control point
        p3: End point

    Returns:
        CURVE_SAMPLES points along the curve
    """
    points = []
    for i in range(1, CURVE_SAMPLES + 1):
        t = i / CURVE_SAMPLES
        u = 1.0 - t
        a = u * u * u
        b = 3.0 * u * u * t
        c = 3.0 * u * t * t
        d = t * t * t
        points.append(
            Point(
                a * p0.x + b * p1.x + c * p2.x + d * p3.x,
                a * p0.y + b * p1.y + c * p2.y + d * p3.y,
            )
        )
    return points


def sample_quadratic(p0: Point, p1: Point, p2: Point) -> list[Point]:
    """Sample a quadratic Bezier curve at t = 1/8 ... 1.

    Args:
        p0: Start point
        p1: Control point
        p2: End point

    Returns:
        CURVE_SAMPLES points along the curve
    """
    points = []
    for i in range(1, CURVE_SAMPLES + 1):
        t = i / CURVE_SAMPLES
        u = 1.0 - t
        a = u * u
        b = 2.0 * u * t
        c = t * t
        points.append(
            Point(
                a * p0.x + b * p1.x + c * p2.x,
                a * p0.y + b * p1.y + c * p2.y,
            )
        )
    return points


class PathInterpreter:
    """Replays path commands into a flat point sequence.

    Tracks the current point and the start of the current subpath. Every
    drawing command emits the points it reaches; Z emits the subpath start.

    Example:
        interpreter = PathInterpreter(tokenize_path("M 0 0 L 10 0 L 10 10 Z"))
        points = interpreter.run()
    """

    def __init__(self, tokens: list[Token]) -> None:
        self._tokens = tokens
        self._index = 0
        self._current = Point(0.0, 0.0)
        self._start = Point(0.0, 0.0)
        self._points: list[Point] = []
        self._handlers: dict[str, Callable[[bool], None]] = {
            "M": self._move_to,
            "L": self._line_to,
            "H": self._horizontal_to,
            "V": self._vertical_to,
            "C": self._cubic_to,
            "Q": self._quadratic_to,
            "Z": self._close_path,
        }

    def run(self) -> list[Point]:
        """Interpret all tokens.

        Returns:
            Points traced by the path

        Raises:
            PathSyntaxError: On malformed numbers or incomplete argument groups
        """
        while self._index < len(self._tokens):
            token = self._tokens[self._index]
            self._index += 1

            if token.is_number:
                logger.warning("Skipping stray number", token=token.text, position=token.position)
                continue

            handler = self._handlers.get(token.text.upper())
            if handler is None:
                skipped = self._skip_numbers()
                logger.warning(
                    "Skipping unsupported path command",
                    command=token.text,
                    position=token.position,
                    skipped_numbers=skipped,
                )
                continue

            handler(token.text.islower())

        return self._points

    def _has_number(self) -> bool:
        return self._index < len(self._tokens) and self._tokens[self._index].is_number

    def _skip_numbers(self) -> int:
        skipped = 0
        while self._has_number():
            self._index += 1
            skipped += 1
        return skipped

    def _take(self, count: int, command: str) -> list[float]:
        values = []
        for _ in range(count):
            if not self._has_number():
                position = (
                    self._tokens[self._index].position
                    if self._index < len(self._tokens)
                    else self._tokens[-1].position
                )
                raise PathSyntaxError(
                    f"command '{command}' expects {count} numbers",
                    position,
                )
            token = self._tokens[self._index]
            try:
                values.append(float(token.text))
            except ValueError:
                raise PathSyntaxError("malformed number", token.position, token.text) from None
            self._index += 1
        return values

    def _point(self, x: float, y: float, relative: bool) -> Point:
        if relative:
            return Point(self._current.x + x, self._current.y + y)
        return Point(x, y)

    def _emit(self, point: Point) -> None:
        self._current = point
        self._points.append(point)

    def _move_to(self, relative: bool) -> None:
        command = "m" if relative else "M"
        x, y = self._take(2, command)
        target = self._point(x, y, relative)
        self._start = target
        self._emit(target)
        # Further pairs are implicit line-to commands
        while self._has_number():
            x, y = self._take(2, command)
            self._emit(self._point(x, y, relative))

    def _line_to(self, relative: bool) -> None:
        command = "l" if relative else "L"
        while True:
            x, y = self._take(2, command)
            self._emit(self._point(x, y, relative))
            if not self._has_number():
                break

    def _horizontal_to(self, relative: bool) -> None:
        (x,) = self._take(1, "h" if relative else "H")
        new_x = self._current.x + x if relative else x
        self._emit(Point(new_x, self._current.y))

    def _vertical_to(self, relative: bool) -> None:
        (y,) = self._take(1, "v" if relative else "V")
        new_y = self._current.y + y if relative else y
        self._emit(Point(self._current.x, new_y))

    def _cubic_to(self, relative: bool) -> None:
        command = "c" if relative else "C"
        while True:
            x1, y1, x2, y2, x, y = self._take(6, command)
            start = self._current
            c1 = self._point(x1, y1, relative)
            c2 = self._point(x2, y2, relative)
            end = self._point(x, y, relative)
            self._points.extend(sample_cubic(start, c1, c2, end))
            self._current = end
            if not self._has_number():
                break

    def _quadratic_to(self, relative: bool) -> None:
        command = "q" if relative else "Q"
        while True:
            x1, y1, x, y = self._take(4, command)
            start = self._current
            c1 = self._point(x1, y1, relative)
            end = self._point(x, y, relative)
            self._points.extend(sample_quadratic(start, c1, end))
            self._current = end
            if not self._has_number():
                break

    def _close_path(self, relative: bool) -> None:  # noqa: ARG002
        self._emit(self._start)


def points_of_svg_path(path_data: str) -> list[Point]:
    """Trace SVG path data into a flat point sequence.

    Args:
        path_data: Contents of an SVG path ``d`` attribute

    Returns:
        Points along the path, curves flattened

    Raises:
        PathSyntaxError: If the path data is malformed
    """
    return PathInterpreter(tokenize_path(path_data)).run()


def contour_of_svg_path(path_data: str) -> Contour:
    """Trace SVG path data into a Contour."""
    return Contour(tuple(points_of_svg_path(path_data)))
