"""Exception hierarchy for Circles Sketch."""


class CircleSketchError(Exception):
    """Base exception for all Circles Sketch errors."""

    pass


class InputError(CircleSketchError):
    """Errors related to reading or parsing input data."""

    pass


class PathSyntaxError(InputError):
    """Malformed SVG path data."""

    def __init__(self, message: str, position: int, token: str | None = None) -> None:
        self.message = message
        self.position = position
        self.token = token
        detail = f" (token '{token}')" if token is not None else ""
        super().__init__(f"Invalid path data at offset {position}: {message}{detail}")


class PointsFileError(InputError):
    """Error loading a points file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load points file '{path}': {reason}")


class SvgFileError(InputError):
    """Error loading path data from an SVG file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load SVG file '{path}': {reason}")


class ConfigFileError(InputError):
    """Error reading or parsing a configuration file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load config '{path}': {reason}")


class ConfigValidationError(CircleSketchError):
    """Configuration values failed validation."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__("Invalid config: " + "; ".join(errors))


class GeometryError(CircleSketchError):
    """Errors in geometric calculations."""

    pass


class ContourError(GeometryError):
    """Error with contour data or operations."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class FontError(CircleSketchError):
    """Errors related to font lookup or glyph extraction."""

    pass


class FontNotFoundError(FontError):
    """Requested font is not installed."""

    def __init__(self, font_name: str) -> None:
        self.font_name = font_name
        super().__init__(f"Font not found: {font_name}")


class FontLoadError(FontError):
    """Error loading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class GlyphNotFoundError(FontError):
    """No glyph in the font renders the requested text."""

    def __init__(self, text: str, font_name: str) -> None:
        self.text = text
        self.font_name = font_name
        super().__init__(f"Font '{font_name}' has no glyphs for '{text}'")


class OutputError(CircleSketchError):
    """Errors related to writing output documents."""

    pass


class OutputWriteError(OutputError):
    """Error writing an output file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write '{path}': {reason}")


class ScheduleError(CircleSketchError):
    """Error building the per-loop harmonic schedule."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
