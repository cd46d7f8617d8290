"""Reader for path data in SVG files.

Collects the ``d`` attribute of every ``<path>`` element in document
order, with or without the SVG namespace, and traces them into a single
contour.
"""

import xml.etree.ElementTree as ET
from pathlib import Path

from circlesketch.core.path_parser import points_of_svg_path
from circlesketch.domain import Contour
from circlesketch.exceptions import SvgFileError


def path_data_of_svg(svg_text: str) -> list[str]:
    """Extract path data strings from SVG markup.

    Args:
        svg_text: SVG document text

    Returns:
        ``d`` attribute values in document order

    Raises:
        ET.ParseError: If the markup is not well-formed XML
    """
    root = ET.fromstring(svg_text)
    path_data = []
    for element in root.iter():
        tag = element.tag.rsplit("}", 1)[-1] if isinstance(element.tag, str) else ""
        if tag != "path":
            continue
        d = element.get("d")
        if d:
            path_data.append(d)
    return path_data


def read_svg_file(path: Path) -> Contour:
    """Load a contour from an SVG file.

    Args:
        path: Path to the SVG file

    Returns:
        Contour through all path elements, curves flattened

    Raises:
        SvgFileError: If the file cannot be read or contains no path data
        PathSyntaxError: If a path's data is malformed
    """
    try:
        svg_text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SvgFileError(str(path), e.strerror or str(e)) from e

    try:
        path_data = path_data_of_svg(svg_text)
    except ET.ParseError as e:
        raise SvgFileError(str(path), f"invalid XML: {e}") from e

    points = []
    for d in path_data:
        points.extend(points_of_svg_path(d))

    if not points:
        raise SvgFileError(str(path), "no path data found")

    return Contour(tuple(points))
