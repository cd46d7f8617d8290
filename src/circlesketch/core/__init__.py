"""Core numerical and path-processing algorithms for circles sketch.

This module contains the core algorithms for:

- Path data parsing (tokenizing and replaying SVG path commands)
- Path building (point sequence back to M/L path data)
- Resampling (piecewise-linear parametrization over t in [0, 1])
- Fourier analysis (complex DFT, terms sorted by descending radius)
- Scheduling (harmonic count and speed per animation loop)

All functions are:
- Pure (no side effects, no I/O)
- Deterministic
- Independent of the rendering templates

The orchestration layer lives in circlesketch.core.pipeline.

Key functions:
- points_of_svg_path: Trace path data into points
- svg_path_of_contour: Build path data from a contour
- resample: Resample a contour to N uniform points
- fourier_decomposition: Decompose a contour into Fourier terms
- build_schedule: Compute the per-loop harmonic schedule
"""

from circlesketch.core.contour_builder import svg_path_of_contour, svg_path_of_points
from circlesketch.core.fourier import fourier_decomposition, frequencies
from circlesketch.core.path_parser import (
    PathInterpreter,
    Token,
    contour_of_svg_path,
    points_of_svg_path,
    tokenize_path,
)
from circlesketch.core.resampler import (
    ContourFunction,
    OffsetContourFunction,
    PolylineFunction,
    function_of_contour,
    resample,
    sample_function,
)
from circlesketch.core.schedule import (
    MAX_LOOPS,
    LoopVisibility,
    build_schedule,
    harmonic_cap,
    iter_loops,
    loop_visibility,
)

__all__ = [
    "MAX_LOOPS",
    # Resampling
    "ContourFunction",
    # Scheduling
    "LoopVisibility",
    "OffsetContourFunction",
    # Path parsing
    "PathInterpreter",
    "PolylineFunction",
    "Token",
    "build_schedule",
    "contour_of_svg_path",
    # Fourier analysis
    "fourier_decomposition",
    "frequencies",
    "function_of_contour",
    "harmonic_cap",
    "iter_loops",
    "loop_visibility",
    "points_of_svg_path",
    "resample",
    "sample_function",
    # Path building
    "svg_path_of_contour",
    "svg_path_of_points",
    "tokenize_path",
]
