"""Text outlines from installed fonts.

Fonts are looked up by PostScript name in the platform's font directories
(or opened directly from a file path). Each character's glyph outline is
drawn through a fonttools pen that emits SVG path data, shifted right by
the advance widths of the preceding glyphs and flipped from the font's
y-up convention to y-down.
"""

import os
import struct
import sys
from collections.abc import Iterator
from pathlib import Path

import structlog
from fontTools.pens.basePen import BasePen
from fontTools.ttLib import TTCollection, TTFont, TTLibError

from circlesketch.core.path_parser import points_of_svg_path
from circlesketch.domain import Contour
from circlesketch.exceptions import FontLoadError, FontNotFoundError, GlyphNotFoundError
from circlesketch.utils.numbers import format_number

logger = structlog.get_logger(__name__)

FONT_SUFFIXES = frozenset({".ttf", ".otf", ".ttc", ".otc"})

# Name table ID of the PostScript name
NAME_ID_POSTSCRIPT = 6


def system_font_dirs() -> list[Path]:
    """Font directories for the current platform."""
    home = Path.home()
    if sys.platform == "darwin":
        return [
            Path("/System/Library/Fonts"),
            Path("/Library/Fonts"),
            home / "Library" / "Fonts",
        ]
    if sys.platform.startswith("win"):
        dirs = [Path(os.environ.get("WINDIR", r"C:\Windows")) / "Fonts"]
        local = os.environ.get("LOCALAPPDATA")
        if local:
            dirs.append(Path(local) / "Microsoft" / "Windows" / "Fonts")
        return dirs
    return [
        Path("/usr/share/fonts"),
        Path("/usr/local/share/fonts"),
        home / ".fonts",
        home / ".local" / "share" / "fonts",
    ]


def _postscript_name(font: TTFont) -> str | None:
    if "name" not in font:
        return None
    return font["name"].getDebugName(NAME_ID_POSTSCRIPT)


class FontLocator:
    """Finds installed fonts by PostScript name.

    Example:
        locator = FontLocator()
        path, number = locator.find("Helvetica")
        font = TTFont(str(path), fontNumber=number)
    """

    def __init__(self, font_dirs: list[Path] | None = None) -> None:
        """Initialize the locator.

        Args:
            font_dirs: Directories to search (platform defaults if None)
        """
        self._font_dirs = font_dirs if font_dirs is not None else system_font_dirs()

    def iter_font_files(self) -> Iterator[Path]:
        """Yield font files under the search directories, sorted per directory."""
        for directory in self._font_dirs:
            if not directory.is_dir():
                continue
            for path in sorted(directory.rglob("*")):
                if path.suffix.lower() in FONT_SUFFIXES and path.is_file():
                    yield path

    def iter_faces(self) -> Iterator[tuple[str, Path, int]]:
        """Yield (PostScript name, file, font number) for every readable face."""
        for path in self.iter_font_files():
            try:
                names = self._postscript_names(path)
            except (TTLibError, OSError, ValueError, struct.error) as e:
                logger.debug("Skipping unreadable font", path=str(path), error=str(e))
                continue
            for number, name in enumerate(names):
                if name:
                    yield name, path, number

    @staticmethod
    def _postscript_names(path: Path) -> list[str | None]:
        if path.suffix.lower() in (".ttc", ".otc"):
            collection = TTCollection(str(path), lazy=True)
            try:
                return [_postscript_name(font) for font in collection.fonts]
            finally:
                collection.close()
        font = TTFont(str(path), lazy=True)
        try:
            return [_postscript_name(font)]
        finally:
            font.close()

    def find(self, postscript_name: str) -> tuple[Path, int]:
        """Locate a font by PostScript name.

        Args:
            postscript_name: Exact PostScript name, e.g. "Helvetica-Bold"

        Returns:
            (font file, font number within a collection)

        Raises:
            FontNotFoundError: If no installed face has that name
        """
        for name, path, number in self.iter_faces():
            if name == postscript_name:
                return path, number
        raise FontNotFoundError(postscript_name)

    def list_names(self) -> list[str]:
        """Sorted, de-duplicated PostScript names of all installed faces."""
        return sorted({name for name, _, _ in self.iter_faces()})


def list_fonts(locator: FontLocator | None = None) -> list[str]:
    """PostScript names of installed fonts, sorted and de-duplicated."""
    return (locator or FontLocator()).list_names()


def load_font(font: str, locator: FontLocator | None = None) -> TTFont:
    """Open a font given a file path or a PostScript name.

    Args:
        font: Path to a font file, or an installed font's PostScript name
        locator: Font locator (system directories if None)

    Returns:
        Loaded TTFont

    Raises:
        FontNotFoundError: If the name matches no installed font
        FontLoadError: If the font file cannot be parsed
    """
    candidate = Path(font)
    if candidate.suffix.lower() in FONT_SUFFIXES and candidate.is_file():
        path, number = candidate, 0
    else:
        path, number = (locator or FontLocator()).find(font)

    try:
        return TTFont(str(path), fontNumber=number)
    except (TTLibError, OSError, struct.error) as e:
        raise FontLoadError(str(path), str(e)) from e


class GlyphPathPen(BasePen):
    """Pen that records a glyph outline as SVG path data.

    Coordinates are shifted by ``x_offset`` and have y negated, so glyphs
    laid out left to right read upright in SVG's y-down space.
    """

    def __init__(self, glyph_set: object = None, x_offset: float = 0.0) -> None:
        super().__init__(glyph_set)
        self.x_offset = x_offset
        self._commands: list[str] = []

    def _xy(self, pt: tuple[float, float]) -> str:
        x, y = pt
        return f"{format_number(x + self.x_offset)} {format_number(-y)}"

    def _moveTo(self, pt: tuple[float, float]) -> None:
        self._commands.append(f"M {self._xy(pt)}")

    def _lineTo(self, pt: tuple[float, float]) -> None:
        self._commands.append(f"L {self._xy(pt)}")

    def _qCurveToOne(self, pt1: tuple[float, float], pt2: tuple[float, float]) -> None:
        self._commands.append(f"Q {self._xy(pt1)} {self._xy(pt2)}")

    def _curveToOne(
        self,
        pt1: tuple[float, float],
        pt2: tuple[float, float],
        pt3: tuple[float, float],
    ) -> None:
        self._commands.append(f"C {self._xy(pt1)} {self._xy(pt2)} {self._xy(pt3)}")

    def _closePath(self) -> None:
        self._commands.append("Z")

    def _endPath(self) -> None:
        pass

    def get_path(self) -> str:
        """Path data recorded so far."""
        return " ".join(self._commands)


def svg_path_of_text(text: str, font: TTFont, font_name: str = "") -> str:
    """Lay out text left to right and return its outline as path data.

    Characters the font has no glyph for are skipped.

    Args:
        text: Text to render
        font: Loaded font
        font_name: Name used in error messages

    Returns:
        Path data for the whole text

    Raises:
        GlyphNotFoundError: If no character of a non-empty text has a glyph
    """
    cmap = font.getBestCmap() or {}
    glyph_set = font.getGlyphSet()
    metrics = font["hmtx"].metrics

    parts = []
    x = 0.0
    found = 0
    for ch in text:
        glyph_name = cmap.get(ord(ch))
        if glyph_name is None:
            logger.warning("No glyph for character", char=ch, font=font_name)
            continue
        found += 1

        pen = GlyphPathPen(glyph_set, x_offset=x)
        glyph_set[glyph_name].draw(pen)
        path = pen.get_path()
        if path:
            parts.append(path)

        advance, _ = metrics.get(glyph_name, (0, 0))
        x += advance

    if text and found == 0:
        raise GlyphNotFoundError(text, font_name)

    return " ".join(parts)


def contour_of_text(text: str, font: str, locator: FontLocator | None = None) -> Contour:
    """Render text with a font and trace its outline into a contour.

    Args:
        text: Text to render
        font: Font file path or PostScript name
        locator: Font locator (system directories if None)

    Returns:
        Contour through all glyph outlines, curves flattened
    """
    tt_font = load_font(font, locator)
    try:
        path = svg_path_of_text(text, tt_font, font_name=font)
    finally:
        tt_font.close()
    return Contour(tuple(points_of_svg_path(path)))
