"""Circles Sketch - Draw closed contours with Fourier epicycles.

Circles Sketch turns a closed 2-D contour (a YAML list of points, the
outline of some text rendered with a system font, or the path data of an
SVG file) into an animated "drawing with circles": the contour's discrete
Fourier decomposition is replayed as a chain of rotating epicycles whose
tip traces the shape, with more circles added loop after loop.

Example:
    $ circles-sketch text "Hi" --font Helvetica

This will create hi.html (a standalone page with live controls) and
hi-embed.html (a fragment suitable for embedding in another page).
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
