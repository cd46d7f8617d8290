"""Generation pipeline orchestration.

This module turns a raw contour and a render configuration into the
geometry, coefficients and loop schedule the renderer consumes, and
drives a complete run from contour to the two output documents.

Key components:
- build_sketch: Pure contour + config -> Sketch computation
- SketchGenerator: Runs build, render and write with logging and stats
"""

import time
from pathlib import Path

from circlesketch.config import RenderConfig, SketchSettings
from circlesketch.core.contour_builder import svg_path_of_contour
from circlesketch.core.fourier import fourier_decomposition
from circlesketch.core.resampler import resample
from circlesketch.core.schedule import build_schedule, harmonic_cap
from circlesketch.domain import Contour, Sketch, ViewBox
from circlesketch.io.writer import OutputWriter
from circlesketch.render import render_embed, render_page
from circlesketch.utils import RunStats, SketchLogger, configure_logging

# Resampled contours never have fewer points than this
MIN_SAMPLE_POINTS = 1000

# Upper bound on the one-sided Fourier term count
MAX_TERMS = 500


def sample_count(contour: Contour, config: RenderConfig) -> int:
    """Number of points to resample a contour to."""
    return max(len(contour), config.max_harmonics * 2, MIN_SAMPLE_POINTS)


def term_count(num_points: int) -> int:
    """One-sided Fourier term count for a resampled point count."""
    return min(num_points // 2, MAX_TERMS)


def build_sketch(
    contour: Contour,
    config: RenderConfig,
    sketch_logger: SketchLogger | None = None,
) -> Sketch:
    """Compute the sketch for a contour.

    Steps:
    1. Optionally flip y
    2. Resample to a uniform parametrization
    3. Build the outline path
    4. Decompose into Fourier terms
    5. Compute the loop schedule and viewport

    Args:
        contour: Raw input contour
        config: Validated render configuration
        sketch_logger: Optional logger for progress and statistics

    Returns:
        Sketch instance
    """
    if config.flip_y:
        contour = contour.flipped_y()

    num_points = sample_count(contour, config)
    resampled = resample(contour, num_points)
    if sketch_logger:
        sketch_logger.log_resampled(len(contour), num_points)

    svg_path = svg_path_of_contour(resampled)

    start = time.time()
    num_terms = term_count(num_points)
    decomposition = fourier_decomposition(resampled, num_terms)
    if sketch_logger:
        sketch_logger.log_decomposition(
            num_terms, len(decomposition), (time.time() - start) * 1000
        )

    cap = harmonic_cap(config, len(decomposition))
    loops = tuple(build_schedule(config.steps, cap))
    schedule_text = config.steps.to_text()
    if sketch_logger:
        sketch_logger.log_schedule(len(loops), cap, schedule_text)

    return Sketch(
        contour=resampled,
        svg_path=svg_path,
        decomposition=decomposition,
        loops=loops,
        schedule_text=schedule_text,
        view_box=ViewBox.around(resampled),
        cap=cap,
    )


class SketchGenerator:
    """Orchestrates a complete generation run.

    Manages the workflow:
    1. Build the sketch from the input contour
    2. Render the full page and the embeddable fragment in memory
    3. Write both documents

    Example:
        generator = SketchGenerator(SketchSettings())
        stats = generator.generate(contour, output_stem=Path("square"))
    """

    def __init__(self, settings: SketchSettings, quiet: bool = False) -> None:
        """Initialize the generator.

        Args:
            settings: Render and logging configuration
            quiet: Suppress console logging except errors
        """
        self.settings = settings
        self.logger = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=quiet,
        )
        self.sketch_logger = SketchLogger(self.logger)

    def generate(
        self,
        contour: Contour,
        output_stem: Path,
        source: str = "contour",
        command: str | None = None,
    ) -> RunStats:
        """Generate both output documents for a contour.

        Args:
            contour: Raw input contour
            output_stem: Output path without extension
            source: Description of the input, for logging
            command: Command line shown on the full page

        Returns:
            Run statistics

        Raises:
            CircleSketchError: If any step fails; no file is written then
        """
        stats = self.sketch_logger.stats
        stats.start_time = time.time()
        self.sketch_logger.log_input_loaded(source, len(contour))

        config = self.settings.render
        try:
            sketch = build_sketch(contour, config, self.sketch_logger)
            page = render_page(sketch, config, command=command)
            embed = render_embed(sketch, config)

            writer = OutputWriter(output_stem)
            for path, size in writer.write(page=page, embed=embed):
                self.sketch_logger.log_output_written(str(path), size)
        except Exception as e:
            self.sketch_logger.log_error(e)
            raise

        stats.end_time = time.time()
        return stats
