"""Domain models for circles sketch.

This module contains the value types that flow through the pipeline:
contours, Fourier coefficients, per-loop animation parameters and the
drawing viewport. All models are:

- Immutable (frozen dataclasses)
- Serializable to plain dicts/lists for embedding in the rendered page
- Independent of file formats and of the rendering templates

Key classes:
- Point: A 2D point
- Contour: An ordered point sequence
- ComplexCoefficient: One term of a Fourier series
- FourierDecomposition: Coefficients sorted by descending radius
- LoopParams: Harmonic count and speed for one animation loop
- ViewBox: Square drawing viewport around a contour
- Sketch: Resampled contour, coefficients and schedule ready to render
"""

from circlesketch.domain.contour import Contour, Point, ViewBox
from circlesketch.domain.fourier import ComplexCoefficient, FourierDecomposition
from circlesketch.domain.schedule import LoopParams
from circlesketch.domain.sketch import Sketch

__all__: list[str] = [
    "ComplexCoefficient",
    "Contour",
    "FourierDecomposition",
    "LoopParams",
    "Point",
    "Sketch",
    "ViewBox",
]
