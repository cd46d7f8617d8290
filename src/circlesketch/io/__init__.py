"""Input and output layer for circles sketch.

This module handles reading contours from the supported inputs and
writing the generated documents. It provides a clean abstraction layer
between file formats (YAML, SVG, TrueType/OpenType) and the domain models.

Key responsibilities:
- Load YAML points files
- Extract path data from SVG files
- Locate system fonts and lay out text outlines with fonttools
- Write the page and embed documents without leaving partial output

Key classes:
- FontLocator: Find installed fonts by PostScript name
- OutputWriter: Write both output documents
"""

from circlesketch.io.font_reader import (
    FontLocator,
    GlyphPathPen,
    contour_of_text,
    list_fonts,
    load_font,
    svg_path_of_text,
)
from circlesketch.io.points_reader import read_points_file
from circlesketch.io.svg_reader import path_data_of_svg, read_svg_file
from circlesketch.io.writer import OutputWriter

__all__ = [
    "FontLocator",
    "GlyphPathPen",
    "OutputWriter",
    "contour_of_text",
    "list_fonts",
    "load_font",
    "path_data_of_svg",
    "read_points_file",
    "read_svg_file",
    "svg_path_of_text",
]
