"""Computed sketch: the pipeline's output and the renderer's input."""

from dataclasses import dataclass

from circlesketch.domain.contour import Contour, ViewBox
from circlesketch.domain.fourier import FourierDecomposition
from circlesketch.domain.schedule import LoopParams


@dataclass(frozen=True)
class Sketch:
    """Everything the renderer needs to draw one contour.

    Attributes:
        contour: Resampled contour
        svg_path: Static outline path data
        decomposition: Fourier coefficients, descending radius
        loops: Per-loop harmonic count and speed
        schedule_text: Step ranges in the editable compact form
        view_box: Square drawing viewport
        cap: Harmonics available for drawing
    """

    contour: Contour
    svg_path: str
    decomposition: FourierDecomposition
    loops: tuple[LoopParams, ...]
    schedule_text: str
    view_box: ViewBox
    cap: int
